import folium

from ui.frontend.api import HeatPoint
from ui.frontend.ui_helpers import (
    build_heat_map,
    map_html,
    marker_color,
    points_frame,
    popup_html,
    summary_markdown,
)
from ui.frontend.view_state import HeatMapView

POINTS = (
    HeatPoint(latitude=10.0, longitude=10.0, heat_risk=0.6, population=1234567),
    HeatPoint(latitude=20.0, longitude=20.0, heat_risk=0.4, population=2000),
    HeatPoint(latitude=-30.0, longitude=40.0, heat_risk=0.1, population=0),
)


def _markers(m):
    return [c for c in m._children.values() if isinstance(c, folium.Marker)]


def test_marker_color_tiers():
    assert marker_color(0.6) == "red"
    assert marker_color(0.5) == "orange"
    assert marker_color(0.4) == "orange"
    assert marker_color(0.3) == "green"
    assert marker_color(0.1) == "green"


def test_popup_formats_risk_and_population():
    text = popup_html(POINTS[0])
    assert "Heat Risk: 0.60 extreme days/yr" in text
    assert "Population: 1,234,567" in text


def test_build_heat_map_one_marker_per_point():
    m = build_heat_map(POINTS)
    markers = _markers(m)
    assert len(markers) == 3
    assert [mk.location for mk in markers] == [[10.0, 10.0], [20.0, 20.0], [-30.0, 40.0]]


def test_empty_map_still_renders():
    m = build_heat_map(())
    assert _markers(m) == []
    assert "iframe" in map_html(())


def test_points_frame_columns_and_limit():
    df = points_frame(POINTS, max_rows=2)
    assert list(df.columns) == ["lat", "lon", "heat_risk", "population"]
    assert len(df) == 2
    assert points_frame(()).empty


def test_summary_markdown_hidden_until_baseline():
    view = HeatMapView(fetch_baseline=lambda: POINTS[1:2], fetch_simulated=lambda green: ())
    assert summary_markdown(view) == ""
    view.on_mount()
    assert summary_markdown(view) == "Avg Heat Risk: 0.40 extreme days/yr (0.0% reduction from baseline)"
