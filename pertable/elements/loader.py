"""
Loader for the bundled periodic-table dataset.

The dataset is a JSON document with a top-level ``elements`` array whose
entries map onto :class:`~pertable.elements.structures.Element` fields.
"""

import json
from dataclasses import fields
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple, Union

import pandas as pd

from pertable.elements.structures import UINT_FIELDS, Element
from pertable.core.logging_config import get_logger

logger = get_logger("elements.loader")

DATA_PATH = Path(__file__).parent.parent / "data" / "elements.json"

ELEMENT_FIELDS = frozenset(f.name for f in fields(Element))

REQUIRED_COLUMNS = ("name", "symbol", "number")


def _read_records(path: Path) -> pd.DataFrame:
    """Read the ``elements`` array into a DataFrame, one row per record."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Element dataset is not valid JSON: {path}: {e}") from e

    if not isinstance(document, dict) or "elements" not in document:
        raise ValueError(f"Element dataset must be an object with an 'elements' array: {path}")

    records = document["elements"]
    if not isinstance(records, list):
        raise ValueError(f"'elements' must be an array: {path}")

    for i, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f"Element record {i} must be an object, got {record!r}")

    return pd.DataFrame.from_records(records)


def _tidy_columns(df: pd.DataFrame, path: Path) -> pd.DataFrame:
    """
    Column-level cleanup before rows become elements.

    Drops columns with no element field, checks that the identity columns
    exist, and turns integer columns that picked up a float dtype from
    missing cells back into nullable integers.
    """
    if df.empty:
        raise ValueError(f"Element dataset is empty: {path}")

    unknown = sorted(set(df.columns) - ELEMENT_FIELDS)
    if unknown:
        logger.debug(f"Ignoring dataset keys with no element field: {unknown}")
        df = df.drop(columns=unknown)

    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Element dataset has no {', '.join(missing)} column: {path}")

    for column in UINT_FIELDS:
        if column not in df.columns or not pd.api.types.is_float_dtype(df[column]):
            continue
        values = df[column].dropna()
        if values.mod(1).eq(0).all():
            df[column] = df[column].astype("Int64")

    return df


def _validate(elements: Tuple[Element, ...], path: Path) -> None:
    """
    Check the identity invariants of the collection.

    Every element needs a name, a symbol and a positive atomic number, and
    all three must be unique (names and symbols case-insensitively).
    """
    if not elements:
        raise ValueError(f"Element dataset is empty: {path}")

    seen_numbers = {}
    seen_names = {}
    seen_symbols = {}

    for i, el in enumerate(elements):
        if not el.name or not el.symbol:
            raise ValueError(f"Element record {i} is missing its name or symbol: {el.label}")
        if el.number is None or el.number <= 0:
            raise ValueError(f"Element {el.label} needs a positive atomic number")

        for key, seen, what in (
            (el.number, seen_numbers, "atomic number"),
            (el.name.lower(), seen_names, "name"),
            (el.symbol.lower(), seen_symbols, "symbol"),
        ):
            if key in seen:
                raise ValueError(
                    f"Duplicate {what} {key!r} for {seen[key].label} and {el.label} in {path}"
                )
            seen[key] = el


def load_elements(path: Optional[Union[str, Path]] = None) -> Tuple[Element, ...]:
    """
    Load element records from a JSON dataset.

    Parameters
    ----------
    path : str or Path, optional
        Dataset path. Defaults to the dataset shipped with the package.

    Returns
    -------
    tuple of Element
        All records, in dataset order

    Raises
    ------
    FileNotFoundError
        If the dataset does not exist
    ValueError
        If the dataset is malformed or breaks an identity invariant
    """
    path = Path(path) if path is not None else DATA_PATH

    if not path.exists():
        raise FileNotFoundError(f"Element dataset not found: {path}")

    df = _tidy_columns(_read_records(path), path)
    present = df.notna().to_dict(orient="records")

    elements = []
    for i, (row, mask) in enumerate(zip(df.to_dict(orient="records"), present)):
        record = {key: value for key, value in row.items() if mask[key]}
        try:
            elements.append(Element.from_dict(record))
        except ValueError as e:
            raise ValueError(f"Invalid element record {i} in {path}: {e}") from e

    elements = tuple(elements)
    _validate(elements, path)

    logger.info(f"Loaded {len(elements)} elements from {path}")
    return elements


@lru_cache(maxsize=None)
def get_elements() -> Tuple[Element, ...]:
    """Return the bundled dataset, loading it on first use."""
    return load_elements()
