from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING, Dict

from ...models import SummaryCounters

if TYPE_CHECKING:
    from ...application import AsteroidMonitorApp

_COUNTERS = (
    ("total", "Asteroids"),
    ("hazardous", "Hazardous"),
    ("safe", "Safe"),
    ("max_speed", "Max speed (km/h)"),
    ("closest_moons", "Closest (moon distances)"),
)


def build_summary_panel(app: "AsteroidMonitorApp") -> tk.Frame:
    """Create the summary counter row and attach its StringVars to the app."""
    panel = tk.Frame(app, bg="black")
    panel.pack(fill="x", padx=10, pady=(10, 5))

    variables: Dict[str, tk.StringVar] = {}
    for key, caption in _COUNTERS:
        cell = tk.Frame(panel, bg="black")
        cell.pack(side="left", expand=True, fill="x")
        variables[key] = tk.StringVar(value="–")
        tk.Label(
            cell,
            textvariable=variables[key],
            bg="black",
            fg="#FFD60A",
            font=("Segoe UI", 18, "bold"),
        ).pack()
        tk.Label(cell, text=caption, bg="black", fg="#B0B0B0").pack()

    app.summary_vars = variables
    return panel


def update_summary_panel(app: "AsteroidMonitorApp", summary: SummaryCounters) -> None:
    for key, _caption in _COUNTERS:
        app.summary_vars[key].set(getattr(summary, key))
