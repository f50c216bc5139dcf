from __future__ import annotations

import logging
from typing import Any

import gradio as gr

from ui.config import get_settings
from ui.frontend.api import api_heat_data, api_simulate
from ui.frontend.ui_helpers import header_html, map_html, points_frame, summary_markdown
from ui.frontend.view_state import (
    GREEN_INCREASE_MAX,
    GREEN_INCREASE_MIN,
    GREEN_INCREASE_STEP,
    HeatMapView,
)


def new_view() -> HeatMapView:
    return HeatMapView(fetch_baseline=api_heat_data, fetch_simulated=api_simulate)


def render(view: HeatMapView) -> tuple[Any, ...]:
    return (
        view,
        gr.update(value=summary_markdown(view), visible=view.summary_visible),
        map_html(view.points),
        points_frame(view.points),
    )


def mount_view() -> tuple[Any, ...]:
    view = new_view()
    view.on_mount()
    return render(view)


def update_green(view: HeatMapView | None, green: float | None) -> HeatMapView | None:
    if view is not None:
        view.set_green_increase(green)
    return view


def run_simulation(view: HeatMapView | None, green: float | None) -> tuple[Any, ...]:
    if view is None:
        # Page load has not finished; simulate against an empty view.
        view = new_view()
    view.set_green_increase(green)
    view.simulate()
    return render(view)


def build_demo() -> gr.Blocks:
    with gr.Blocks(title="UrbanVitality") as demo:
        gr.HTML(header_html())

        view_state = gr.State(value=None)
        with gr.Row():
            green = gr.Number(
                label="Green Increase (%)",
                value=0,
                minimum=GREEN_INCREASE_MIN,
                maximum=GREEN_INCREASE_MAX,
                step=GREEN_INCREASE_STEP,
            )
            simulate_btn = gr.Button("Simulate")
        summary = gr.Markdown(visible=False)
        heat_map = gr.HTML()
        preview = gr.DataFrame(interactive=False, label="Points preview (first 200)")
        gr.Markdown("Data from NASA SEDAC (worldwide urban heat events)")

        outputs = [view_state, summary, heat_map, preview]
        demo.load(mount_view, outputs=outputs)
        green.change(update_green, inputs=[view_state, green], outputs=[view_state])
        # Simulate reads the field value directly as well.
        simulate_btn.click(run_simulation, inputs=[view_state, green], outputs=outputs)

    return demo


if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    build_demo().launch(server_name=settings.server_name, server_port=settings.server_port)
