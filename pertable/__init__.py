"""
pertable: periodic table lookup from the command line

Finds a chemical element by name, symbol or atomic number in a bundled
dataset, tolerating small typos in names, and prints its properties.
"""

__version__ = "0.1.0"

from pertable.elements.structures import Element
from pertable.elements.loader import load_elements, get_elements
from pertable.elements.matcher import match_element, resolve

__all__ = [
    "Element",
    "load_elements",
    "get_elements",
    "match_element",
    "resolve",
]
