"""Tk view builders for the host window regions."""
