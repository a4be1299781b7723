"""
Periodic-table data model, dataset loading and element lookup.

This module provides:
- The immutable Element record
- Loading and validation of the bundled JSON dataset
- Resolution of a name, symbol or atomic number to an element
"""

from pertable.elements.structures import Element
from pertable.elements.loader import load_elements, get_elements
from pertable.elements.matcher import MatchResult, match_element, resolve

__all__ = [
    "Element",
    "load_elements",
    "get_elements",
    "MatchResult",
    "match_element",
    "resolve",
]
