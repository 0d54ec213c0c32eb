"""Renderers writing presenter output into Tk widgets."""
