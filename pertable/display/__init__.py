"""
Display utilities.

This module provides terminal rendering of element records, with optional
ANSI styling and word wrapping.
"""

from pertable.display.renderer import render_element, show_element, format_value

__all__ = [
    "render_element",
    "show_element",
    "format_value",
]
