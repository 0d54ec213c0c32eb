"""Asteroid Monitor application package.

Acquires near-Earth object data from NASA NeoWs (falling back to a bundled
snapshot and an inline emergency dataset), normalizes it, and presents it in
a Tkinter dashboard.

Updates: v0.1 - 2026-10-12 - Created package scaffold.
"""

from .main import main

__all__ = ["main"]
