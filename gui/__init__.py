"""Dockets desktop GUI (PySide6)."""
