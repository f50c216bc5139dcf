from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import TypeAdapter, ValidationError

from ui.config import get_settings
from ui.schemas import HeatPoint

logger = logging.getLogger("urbanvitality.api")

_POINTS = TypeAdapter(list[HeatPoint])


class RequestFailed(RuntimeError):
    """Transport, status or decoding failure while talking to the heat-risk API."""


def backend_url() -> str:
    return get_settings().api_url.rstrip("/")


def parse_points(payload: Any) -> tuple[HeatPoint, ...]:
    try:
        return tuple(_POINTS.validate_python(payload))
    except ValidationError as exc:
        raise RequestFailed(f"Malformed heat points: {exc}") from exc


def green_param(value: float | None) -> int | float:
    # An unset input is sent as 0, matching the numeric input's fallback.
    if value is None:
        return 0
    number = float(value)
    return int(number) if number.is_integer() else number


def _get_json(path: str, *, params: dict[str, Any] | None = None) -> Any:
    url = f"{backend_url()}{path}"
    try:
        r = requests.get(url, params=params, timeout=get_settings().request_timeout)
        r.raise_for_status()
        return r.json()
    except (requests.RequestException, ValueError) as exc:
        raise RequestFailed(f"GET {url} failed: {exc}") from exc


def api_heat_data() -> tuple[HeatPoint, ...]:
    points = parse_points(_get_json("/api/heat-data"))
    logger.debug("Fetched %d baseline heat points", len(points))
    return points


def api_simulate(green: float | None) -> tuple[HeatPoint, ...]:
    result = _get_json("/sim", params={"green": green_param(green)})
    if not isinstance(result, dict):
        raise RequestFailed(f"Expected a simulation object, got {type(result).__name__}")
    return parse_points(result.get("simulated_data") or [])
