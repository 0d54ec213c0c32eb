"""ViewController handles filter selection and the full-list toggle.

Both actions work on the collection already in memory: they replace the app
state and re-render, never refetch.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from ...models import FilterState
from ..state import with_filter, with_view_toggled

if TYPE_CHECKING:
    from ...application import AsteroidMonitorApp


logger = logging.getLogger(__name__)


class ViewController:
    def __init__(self, app: "AsteroidMonitorApp") -> None:
        self.app = app

    def select_filter(self, value: Union[FilterState, str]) -> None:
        """Apply a filter button choice; unknown names raise ``ValueError``."""
        filter_state = FilterState.coerce(value)
        logger.debug("Applying filter: %s", filter_state.value)
        self.app.app_state = with_filter(self.app.app_state, filter_state)
        self.app.render_state()

    def toggle_full_list(self) -> None:
        self.app.app_state = with_view_toggled(self.app.app_state)
        self.app.render_state()


__all__ = ["ViewController"]
