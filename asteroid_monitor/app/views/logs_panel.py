from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from ...application import AsteroidMonitorApp


def build_logs_panel(app: "AsteroidMonitorApp") -> Tuple[tk.Frame, tk.Text]:
    """Create the logs panel (frame, scrollbar, text) and attach to app.

    The frame is not packed initially; the app's log toggle controls its
    visibility.

    Returns:
        Tuple[tk.Frame, tk.Text]: (log_frame, log_text) created widgets.
    """
    log_frame = tk.Frame(app, bg="black")

    log_scroll = tk.Scrollbar(log_frame)
    log_scroll.pack(side="right", fill="y")

    log_text = tk.Text(
        log_frame,
        wrap="word",
        bg="#101010",
        fg="lightgray",
        height=8,
        state="disabled",
        yscrollcommand=log_scroll.set,
        font=("Consolas", 10),
    )
    log_text.pack(fill="both", expand=True)
    log_scroll.config(command=log_text.yview)

    app.log_frame = log_frame
    app.log_text = log_text
    return log_frame, log_text
