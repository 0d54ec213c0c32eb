"""Controller package re-exports."""

from __future__ import annotations

from .refresh_controller import RefreshController
from .view_controller import ViewController

__all__ = ["RefreshController", "ViewController"]
