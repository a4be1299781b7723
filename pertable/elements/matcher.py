"""
Element lookup by atomic number, symbol or name.

Resolution order:

1. A query that parses as a positive integer is an atomic number. It either
   matches that number exactly or matches nothing.
2. Otherwise the query is compared case-insensitively against every symbol,
   then against every name.
3. Failing an exact match, the element whose name has the smallest
   Levenshtein distance to the query is returned, provided the distance is at
   most ``FUZZY_THRESHOLD``. Symbols are never fuzzy-matched.
"""

from dataclasses import dataclass, replace
from typing import Optional, Sequence

from rapidfuzz.distance import Levenshtein

from pertable.core.constants import FUZZY_THRESHOLD, MAX_ATOMIC_NUMBER_QUERY
from pertable.core.logging_config import get_logger
from pertable.elements.structures import Element

logger = get_logger("elements.matcher")


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of a successful lookup.

    Attributes
    ----------
    element : Element
        Copy of the matched record
    method : str
        'number', 'symbol', 'name' or 'fuzzy'
    distance : int
        Edit distance between query and name (0 for exact matches)
    """

    element: Element
    method: str
    distance: int = 0

    @property
    def is_exact(self) -> bool:
        return self.method != "fuzzy"


def parse_atomic_number(needle: str) -> int:
    """
    Parse a query as an unsigned 32-bit integer.

    Accepts ASCII digits with an optional leading '+'. Anything else,
    including values that overflow 32 bits, yields 0, which callers treat
    as "not a number".
    """
    digits = needle[1:] if needle.startswith("+") else needle
    if not digits or not (digits.isascii() and digits.isdigit()):
        return 0
    value = int(digits)
    if value > MAX_ATOMIC_NUMBER_QUERY:
        return 0
    return value


def match_element(elements: Sequence[Element], query: str) -> Optional[MatchResult]:
    """
    Find the element a query refers to.

    Parameters
    ----------
    elements : sequence of Element
        Collection to search; it is not modified
    query : str
        Name, symbol or atomic number as typed by the user

    Returns
    -------
    MatchResult or None
        The match and how it was made, or None if nothing matches
    """
    needle = query.strip().lower()

    number = parse_atomic_number(needle)
    if number > 0:
        for el in elements:
            if el.number == number:
                logger.debug(f"Matched atomic number {number}: {el.label}")
                return MatchResult(replace(el), "number")
        return None

    for el in elements:
        if el.symbol is not None and el.symbol.lower() == needle:
            logger.debug(f"Matched symbol {needle!r}: {el.label}")
            return MatchResult(replace(el), "symbol")

    closest = None
    min_distance = None

    for el in elements:
        if el.name is None:
            continue

        name = el.name.lower()
        if name == needle:
            logger.debug(f"Matched name {needle!r}: {el.label}")
            return MatchResult(replace(el), "name")

        distance = Levenshtein.distance(name, needle)
        if min_distance is None or distance < min_distance:
            min_distance = distance
            closest = el

    if closest is not None and min_distance <= FUZZY_THRESHOLD:
        logger.debug(f"Closest name to {needle!r} is {closest.label} (distance {min_distance})")
        return MatchResult(replace(closest), "fuzzy", min_distance)

    return None


def resolve(elements: Sequence[Element], query: str) -> Optional[Element]:
    """
    Resolve a query to a single element.

    Parameters
    ----------
    elements : sequence of Element
        Collection to search
    query : str
        Name, symbol or atomic number

    Returns
    -------
    Element or None
        Copy of the matching element, or None
    """
    result = match_element(elements, query)
    return result.element if result is not None else None
