"""
Terminal rendering of element records.

Each present field becomes one ``"<Label>: <value>"`` line. Long values are
wrapped and their continuation lines aligned under the first character of the
value. Absent fields produce no line at all.
"""

import shutil
import sys
import textwrap
from typing import Any, List, Optional, TextIO

from pertable.core.config import DisplayConfig
from pertable.core.constants import (
    FALLBACK_COLUMNS,
    FG_COLORS,
    FG_RESET,
    MIN_WRAP_WIDTH,
    STYLE_BOLD,
    STYLE_RESET,
)
from pertable.core.logging_config import get_logger
from pertable.elements.structures import Element

logger = get_logger("display.renderer")

# (label, attribute, case hint); hint is None, "title" or "sentence"
FIELDS = (
    ("Atomic Number", "number", None),
    ("Period Number", "period", None),
    ("Category", "category", "title"),
    ("Summary", "summary", None),
    ("Discovered By", "discovered_by", None),
    ("Named By", "named_by", None),
    ("Appearance", "appearance", "sentence"),
    ("Atomic Mass", "atomic_mass", None),
    ("Phase", "phase", None),
    ("Density", "density", None),
    ("Color", "color", "title"),
    ("Molar Heat", "molar_heat", None),
    ("Melting Point", "melt", None),
    ("Boiling Point", "boil", None),
    ("Shells", "shells", None),
    ("Electron Configuration", "electron_configuration", None),
    ("Electron Affinity", "electron_affinity", None),
    ("Electronegativity Pauling", "electronegativity_pauling", None),
    ("Ionization Energies", "ionization_energies", None),
    ("X Pos", "xpos", None),
    ("Y Pos", "ypos", None),
    ("Source", "source", None),
    ("Spectral Image", "spectral_img", None),
)


def to_title_case(text: str) -> str:
    """Capitalise the first letter of every word, leaving the rest alone."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def to_sentence_case(text: str) -> str:
    """Capitalise the first letter of the text."""
    return text[:1].upper() + text[1:]


def format_value(value: Any) -> str:
    """
    Format a field value for display.

    Whole floats drop their fractional part (``14.0`` -> ``'14'``); sequences
    are joined with ``', '``.
    """
    if isinstance(value, (list, tuple)):
        return ", ".join(format_value(v) for v in value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _style(text: str, color: str, config: DisplayConfig, bold: bool = False) -> str:
    if not config.use_styling:
        return text
    if bold:
        return f"{STYLE_BOLD}{FG_COLORS[color]}{text}{FG_RESET}{STYLE_RESET}"
    return f"{FG_COLORS[color]}{text}{FG_RESET}"


def _wrap_width(label: str, config: DisplayConfig, columns: int) -> int:
    available = columns - len(label) - 5
    return max(MIN_WRAP_WIDTH, min(config.max_width, available))


def render_field(
    label: str, value: Any, config: DisplayConfig, columns: int, case: Optional[str] = None
) -> str:
    """
    Render one ``"<Label>: <value>"`` line, wrapping the value.

    Parameters
    ----------
    label : str
        Field label
    value : Any
        Field value (must not be None)
    config : DisplayConfig
        Display settings
    columns : int
        Terminal width in characters
    case : str, optional
        'title' or 'sentence' to recase the value

    Returns
    -------
    str
        The rendered line, possibly containing newlines
    """
    text = format_value(value)
    if case == "title":
        text = to_title_case(text)
    elif case == "sentence":
        text = to_sentence_case(text)

    lines = textwrap.wrap(text, width=_wrap_width(label, config, columns)) or [""]
    indent = " " * (len(label) + 2)
    body = ("\n" + indent).join(lines)

    return f"{_style(label, config.label_color, config)}: {body}"


def render_element(
    element: Element, config: Optional[DisplayConfig] = None, columns: Optional[int] = None
) -> List[str]:
    """
    Render an element as a list of output lines.

    Parameters
    ----------
    element : Element
        Element to render
    config : DisplayConfig, optional
        Display settings; defaults are used if omitted
    columns : int, optional
        Terminal width. Detected from the terminal if omitted.

    Returns
    -------
    list of str
        Lines to print, starting and ending with a blank line
    """
    if config is None:
        config = DisplayConfig()
    if columns is None:
        columns = shutil.get_terminal_size((FALLBACK_COLUMNS, 24)).columns

    if element.name is None or element.symbol is None:
        logger.warning(f"Rendering element without name or symbol: {element.label}")

    header = _style(element.label, config.header_color, config, bold=True)
    lines = ["", header, ""]

    for label, attr, case in FIELDS:
        value = getattr(element, attr)
        if value is None:
            continue
        lines.append(render_field(label, value, config, columns, case))

    lines.append("")
    return lines


def show_element(
    element: Element, config: Optional[DisplayConfig] = None, stream: Optional[TextIO] = None
) -> None:
    """
    Print an element's properties.

    Parameters
    ----------
    element : Element
        Element to print
    config : DisplayConfig, optional
        Display settings
    stream : file-like, optional
        Output stream (default: sys.stdout)
    """
    if stream is None:
        stream = sys.stdout
    for line in render_element(element, config):
        print(line, file=stream)
