"""ListRenderer writes a rendered asteroid view into the list region.

Updates: v0.1 - 2026-10-12 - Rows now come from the pure presenter; the
renderer only handles Tk text insertion, severity tags and the toggle button.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...models import RenderedItem, RenderedView

if TYPE_CHECKING:
    # Forward declaration to avoid runtime circular import
    from ...application import AsteroidMonitorApp


logger = logging.getLogger(__name__)


class ListRenderer:
    """Encapsulate list rows and the full-list toggle affordance."""

    def __init__(self, app: "AsteroidMonitorApp") -> None:
        """Bind the renderer to the Tk app orchestrator instance."""
        self.app = app

    def render(self, view: RenderedView) -> None:
        """Replace the list contents with ``view``."""
        listbox = self.app.listbox
        listbox.configure(state="normal")
        try:
            listbox.delete("1.0", "end")
            if view.placeholder is not None:
                listbox.insert("end", view.placeholder, ("message",))
                listbox.insert("end", "\n")
            for index, item in enumerate(view.items, start=1):
                self._append_row(index, item)
        finally:
            listbox.configure(state="disabled")
        self._update_toggle(view)
        logger.debug("Rendered %d of %d asteroids", view.visible_count, view.total_count)

    def _append_row(self, index: int, item: RenderedItem) -> None:
        listbox = self.app.listbox
        listbox.insert("end", f"{index}. {item.name} [{item.badge}]", (item.severity.value,))
        listbox.insert(
            "end",
            f" | {item.date} | {item.distance_text} km ({item.moon_distances_text} moons)"
            f" | {item.velocity_text} km/h",
            ("metadata",),
        )
        listbox.insert("end", "\n")

    def _update_toggle(self, view: RenderedView) -> None:
        button = self.app.toggle_full_list_btn
        if view.show_toggle:
            button.configure(text=view.toggle_label)
            button.pack(side="right", pady=(5, 0))
        else:
            button.pack_forget()


__all__ = ["ListRenderer"]
