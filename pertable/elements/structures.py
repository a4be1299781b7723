"""
Data structures for periodic-table element records.
"""

import math
import numbers
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple

STRING_FIELDS = (
    "name",
    "symbol",
    "category",
    "phase",
    "summary",
    "appearance",
    "discovered_by",
    "named_by",
    "color",
    "source",
    "spectral_img",
    "electron_configuration",
)

FLOAT_FIELDS = (
    "atomic_mass",
    "boil",
    "density",
    "melt",
    "molar_heat",
    "electron_affinity",
    "electronegativity_pauling",
)

UINT_FIELDS = ("number", "period", "xpos", "ypos")


def _is_missing(value: Any) -> bool:
    """True for None and for NaN placeholders left by tabular loading."""
    if value is None:
        return True
    if isinstance(value, numbers.Integral) or not isinstance(value, numbers.Real):
        return False
    return math.isnan(value)


def _to_uint(field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"Field '{field}' must be an unsigned integer, got {value!r}")
    if not isinstance(value, numbers.Integral):
        if not float(value).is_integer():
            raise ValueError(f"Field '{field}' must be an unsigned integer, got {value!r}")
    result = int(value)
    if result < 0:
        raise ValueError(f"Field '{field}' must be an unsigned integer, got {value!r}")
    return result


def _to_float(field: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"Field '{field}' must be a number, got {value!r}")
    return float(value)


def _to_str(field: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"Field '{field}' must be a string, got {value!r}")
    return value


def _to_sequence(field: str, value: Any) -> list:
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise ValueError(f"Field '{field}' must be a list, got {value!r}")
    return list(value)


@dataclass(frozen=True)
class Element:
    """
    One entry of the periodic table.

    Every attribute is optional because the dataset has gaps for the heavier
    and synthetic elements. Records are immutable.

    Attributes
    ----------
    name : str, optional
        Element name (e.g. 'Iron')
    symbol : str, optional
        Chemical symbol (e.g. 'Fe')
    number : int, optional
        Atomic number
    category : str, optional
        Classification (e.g. 'transition metal')
    phase : str, optional
        Phase at standard conditions
    summary, appearance, discovered_by, named_by, color, source, spectral_img : str, optional
        Descriptive text
    electron_configuration : str, optional
        Ground state configuration (e.g. '1s2 2s2 2p4')
    atomic_mass : float, optional
        Atomic mass in u
    boil, melt : float, optional
        Boiling and melting points in K
    density : float, optional
        Density in g/L for gases, g/cm^3 otherwise
    molar_heat : float, optional
        Molar heat capacity in J/(mol K)
    electron_affinity : float, optional
        Electron affinity in kJ/mol
    electronegativity_pauling : float, optional
        Pauling electronegativity
    period : int, optional
        Period (row) number
    xpos, ypos : int, optional
        Grid coordinates of the element in the standard table layout
    shells : tuple of int, optional
        Electron counts per shell, outermost last
    ionization_energies : tuple of float, optional
        Successive ionization energies in kJ/mol
    """

    name: Optional[str] = None
    symbol: Optional[str] = None
    number: Optional[int] = None
    category: Optional[str] = None
    phase: Optional[str] = None
    summary: Optional[str] = None
    appearance: Optional[str] = None
    discovered_by: Optional[str] = None
    named_by: Optional[str] = None
    color: Optional[str] = None
    source: Optional[str] = None
    spectral_img: Optional[str] = None
    electron_configuration: Optional[str] = None
    atomic_mass: Optional[float] = None
    boil: Optional[float] = None
    density: Optional[float] = None
    melt: Optional[float] = None
    molar_heat: Optional[float] = None
    electron_affinity: Optional[float] = None
    electronegativity_pauling: Optional[float] = None
    period: Optional[int] = None
    xpos: Optional[int] = None
    ypos: Optional[int] = None
    shells: Optional[Tuple[int, ...]] = None
    ionization_energies: Optional[Tuple[float, ...]] = None

    @property
    def label(self) -> str:
        """Human-readable identity, e.g. 'Iron (Fe)'."""
        return f"{self.name or 'Unknown'} ({self.symbol or '?'})"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Element":
        """
        Build an element from one dataset record.

        Missing keys, ``None`` and NaN all map to an absent field. Keys that
        are not element fields are ignored.

        Parameters
        ----------
        data : Mapping
            Record with snake_case keys matching the field names

        Returns
        -------
        Element
            Converted record

        Raises
        ------
        ValueError
            If a present value has the wrong type
        """
        values: Dict[str, Any] = {}

        for field in STRING_FIELDS:
            value = data.get(field)
            if not _is_missing(value):
                values[field] = _to_str(field, value)

        for field in FLOAT_FIELDS:
            value = data.get(field)
            if not _is_missing(value):
                values[field] = _to_float(field, value)

        for field in UINT_FIELDS:
            value = data.get(field)
            if not _is_missing(value):
                values[field] = _to_uint(field, value)

        shells = data.get("shells")
        if not _is_missing(shells):
            values["shells"] = tuple(_to_uint("shells", v) for v in _to_sequence("shells", shells))

        energies = data.get("ionization_energies")
        if not _is_missing(energies):
            values["ionization_energies"] = tuple(
                _to_float("ionization_energies", v)
                for v in _to_sequence("ionization_energies", energies)
            )

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Return the present fields as a plain dict (lists for sequences)."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            result[f.name] = list(value) if isinstance(value, tuple) else value
        return result
