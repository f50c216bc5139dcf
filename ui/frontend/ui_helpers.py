from __future__ import annotations

from typing import Sequence

import folium
import pandas as pd

from ui.frontend.view_state import HeatMapView, risk_tier
from ui.schemas import HeatPoint

MAP_CENTER = (20.0, 0.0)
MAP_ZOOM = 2
NASA_LOGO_URL = "https://upload.wikimedia.org/wikipedia/commons/e/e5/NASA_logo.svg"

TIER_COLORS = {"high": "red", "mid": "orange", "low": "green"}


def marker_color(risk: float) -> str:
    return TIER_COLORS[risk_tier(risk)]


def popup_html(point: HeatPoint) -> str:
    return (
        f"Heat Risk: {point.heat_risk:.2f} extreme days/yr<br/>"
        f"Population: {point.population:,}"
    )


def _marker_icon(color: str) -> folium.DivIcon:
    return folium.DivIcon(
        html=(
            f'<div style="background:{color};width:12px;height:12px;'
            'border-radius:50%;border:2px solid white;"></div>'
        ),
        icon_size=(14, 14),
        class_name=f"marker-{color}",
    )


def build_heat_map(points: Sequence[HeatPoint]) -> folium.Map:
    """
    Leaflet map (via folium) with one round marker per heat point.

    Markers are colored by risk tier and carry a popup with the risk and the
    population of the point.
    """
    m = folium.Map(location=list(MAP_CENTER), zoom_start=MAP_ZOOM, tiles="OpenStreetMap")
    for p in points:
        folium.Marker(
            location=[p.latitude, p.longitude],
            icon=_marker_icon(marker_color(p.heat_risk)),
            popup=folium.Popup(popup_html(p), max_width=250),
        ).add_to(m)
    return m


def map_html(points: Sequence[HeatPoint]) -> str:
    return build_heat_map(points)._repr_html_()


def summary_markdown(view: HeatMapView) -> str:
    if not view.summary_visible:
        return ""
    return view.summary_text()


def points_frame(points: Sequence[HeatPoint], max_rows: int = 200) -> pd.DataFrame:
    df = pd.DataFrame([p.to_row() for p in points], columns=["lat", "lon", "heat_risk", "population"])
    return df.head(max_rows)


def header_html() -> str:
    return (
        '<div style="position: relative;">'
        "<h1>UrbanVitality: Global Urban Heat Risks</h1>"
        f'<img src="{NASA_LOGO_URL}" alt="NASA Logo" '
        'style="position: absolute; top: 0; right: 10px; width: 100px; height: auto;"/>'
        "</div>"
    )
