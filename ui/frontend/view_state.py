from __future__ import annotations

import logging
from typing import Callable, Sequence

from ui.frontend.api import RequestFailed
from ui.schemas import HeatPoint

logger = logging.getLogger("urbanvitality.ui")

HIGH_RISK_THRESHOLD = 0.5
MID_RISK_THRESHOLD = 0.3

GREEN_INCREASE_MIN = 0
GREEN_INCREASE_MAX = 50
GREEN_INCREASE_STEP = 5


def average_risk(points: Sequence[HeatPoint]) -> float:
    if not points:
        return 0.0
    return sum(p.heat_risk for p in points) / len(points)


def reduction_percent(baseline: float, current: float) -> float:
    if not baseline:
        return 0.0
    return (baseline - current) / baseline * 100.0


def risk_tier(risk: float) -> str:
    """Three-tier bucket for a heat risk value: ``high``, ``mid`` or ``low``."""
    if risk > HIGH_RISK_THRESHOLD:
        return "high"
    if risk > MID_RISK_THRESHOLD:
        return "mid"
    return "low"


class HeatMapView:
    """
    State behind the heat-risk map page.

    One instance lives per browser session. ``points`` is only ever replaced
    as a whole; the baseline average is taken from the first successful
    baseline load and kept as the reference for every later reduction.
    """

    def __init__(
        self,
        fetch_baseline: Callable[[], Sequence[HeatPoint]],
        fetch_simulated: Callable[[float | None], Sequence[HeatPoint]],
    ) -> None:
        self._fetch_baseline = fetch_baseline
        self._fetch_simulated = fetch_simulated
        self.points: tuple[HeatPoint, ...] = ()
        self.green_increase_percent: float | None = 0
        self.baseline_average_risk = 0.0
        self.current_average_risk = 0.0
        self.baseline_loaded = False

    def _replace_points(self, points: Sequence[HeatPoint]) -> None:
        self.points = tuple(points)
        self.current_average_risk = average_risk(self.points)

    def on_mount(self) -> None:
        try:
            points = self._fetch_baseline()
        except RequestFailed:
            logger.exception("Heat data fetch failed")
            return
        self._replace_points(points)
        if not self.baseline_loaded:
            self.baseline_average_risk = self.current_average_risk
            self.baseline_loaded = True

    def set_green_increase(self, value: float | None) -> None:
        # Range and step are enforced by the input control, not here.
        self.green_increase_percent = value

    def simulate(self) -> None:
        green = self.green_increase_percent
        try:
            points = self._fetch_simulated(green)
        except RequestFailed:
            logger.exception("Simulation request failed (green=%s)", green)
            return
        self._replace_points(points)
        logger.info(
            "Avg risk: %.2f -> %.2f (reduced %.1f%%)",
            self.baseline_average_risk,
            self.current_average_risk,
            self.reduction_percent,
        )

    @property
    def reduction_percent(self) -> float:
        return reduction_percent(self.baseline_average_risk, self.current_average_risk)

    @property
    def summary_visible(self) -> bool:
        return self.baseline_average_risk > 0

    def summary_text(self) -> str:
        return (
            f"Avg Heat Risk: {self.current_average_risk:.2f} extreme days/yr "
            f"({self.reduction_percent:.1f}% reduction from baseline)"
        )
