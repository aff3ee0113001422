"""Dockets command-line interface."""
