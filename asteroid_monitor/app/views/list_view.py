from __future__ import annotations

import tkinter as tk
from tkinter import font
from typing import TYPE_CHECKING, Tuple

from ...models import Severity

if TYPE_CHECKING:
    from ...application import AsteroidMonitorApp

SEVERITY_COLORS = {
    Severity.HIGH: "#FF4D4D",
    Severity.MEDIUM: "#FFB347",
    Severity.LOW: "#7DFF61",
}


def build_list_view(app: "AsteroidMonitorApp") -> Tuple[tk.Frame, tk.Text]:
    """Build the asteroid list region (frame, scrollbar, text, toggle button).

    Creates fonts, configures severity and metadata tags, wires the scrollbar
    and attaches the widgets on the app for the list renderer.

    Returns:
        Tuple[tk.Frame, tk.Text]: (list_frame, listbox) created widgets.
    """
    list_frame = tk.Frame(app, name="list", bg="black")
    list_frame.pack(fill="both", expand=True, padx=10, pady=5)

    footer = tk.Frame(list_frame, bg="black")
    footer.pack(side="bottom", fill="x")
    toggle_btn = tk.Button(
        footer,
        text="Show full list",
        command=app.view_controller.toggle_full_list,
    )
    # Packed only when the presenter allows the full list.

    scrollbar = tk.Scrollbar(list_frame)
    scrollbar.pack(side="right", fill="y")

    default_font = font.nametofont("TkDefaultFont")
    base_family = default_font.actual("family") or "Segoe UI"
    base_size = max(int(default_font.actual("size")), 12)

    title_font = font.Font(family=base_family, size=base_size, weight="bold")
    metadata_font = font.Font(family=base_family, size=max(base_size - 2, 8), slant="italic")

    listbox = tk.Text(
        list_frame,
        wrap="none",
        bg="#101010",
        fg="#FFFFFF",
        height=0,
        state="disabled",
        relief="flat",
    )
    listbox.pack(fill="both", expand=True)
    listbox.configure(yscrollcommand=scrollbar.set, cursor="arrow")
    scrollbar.config(command=listbox.yview)

    for severity, color in SEVERITY_COLORS.items():
        listbox.tag_configure(severity.value, font=title_font, foreground=color)
    listbox.tag_configure("metadata", font=metadata_font, foreground="#B0B0B0")
    listbox.tag_configure("message", font=title_font, foreground="#89CFF0")

    app.list_frame = list_frame
    app.listbox = listbox
    app.toggle_full_list_btn = toggle_btn
    return list_frame, listbox
