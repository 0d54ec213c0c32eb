from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING, Dict

from ...models import FilterState

if TYPE_CHECKING:
    from ...application import AsteroidMonitorApp

FILTER_LABELS = {
    FilterState.ALL: "All",
    FilterState.DANGEROUS: "Hazardous",
    FilterState.SAFE: "Safe",
}


def build_controls_panel(app: "AsteroidMonitorApp") -> tk.Frame:
    """Build the controls row: filter buttons, refresh, logs toggle, status.

    Below the row sit the advisory banner and the loading indicator; both are
    packed only while they have something to show. Created widgets are set
    back onto the app for controller and render access.
    """
    container = tk.Frame(app, bg="black")
    container.pack(fill="x", padx=10, pady=(0, 5))

    controls = tk.Frame(container, bg="black")
    controls.pack(fill="x")

    filter_buttons: Dict[FilterState, tk.Button] = {}
    for filter_state, label in FILTER_LABELS.items():
        button = tk.Button(
            controls,
            text=label,
            command=lambda value=filter_state: app.view_controller.select_filter(value),
        )
        button.pack(side="left", padx=(0, 6))
        filter_buttons[filter_state] = button
    app.filter_buttons = filter_buttons

    app.refresh_btn = tk.Button(
        controls,
        text="Refresh",
        command=app.refresh_controller.refresh,
    )
    app.refresh_btn.pack(side="left", padx=(10, 0))

    app.toggle_logs_btn = tk.Button(
        controls,
        text="Show Logs",
        command=app.toggle_logs,
    )
    app.toggle_logs_btn.pack(side="left", padx=10)

    app.debug_var = tk.BooleanVar(value=bool(app.settings.get("debug_mode", False)))
    tk.Checkbutton(
        controls,
        text="Debug",
        variable=app.debug_var,
        command=app.toggle_debug_mode,
        bg="black",
        fg="#B0B0B0",
        selectcolor="#101010",
        activebackground="black",
    ).pack(side="left")

    app.banner_var = tk.StringVar(value="")
    app.banner_label = tk.Label(
        container,
        textvariable=app.banner_var,
        bg="#5C4400",
        fg="#FFFFFF",
        anchor="w",
        padx=8,
        pady=4,
    )

    app.loading_label = tk.Label(
        container,
        text="Loading asteroid data…",
        bg="black",
        fg="#89CFF0",
        anchor="w",
        font=("Segoe UI", 10, "italic"),
    )
    return container
