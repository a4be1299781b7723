"""
Tests for the Element data structure.
"""

import dataclasses

import pytest

from pertable.elements.structures import Element


def test_element_defaults():
    """Every field is absent by default."""
    el = Element()
    assert all(getattr(el, f.name) is None for f in dataclasses.fields(Element))


def test_from_dict_basic(sample_records):
    """Test converting a full record."""
    el = Element.from_dict(sample_records[0])
    assert el.name == "Hydrogen"
    assert el.symbol == "H"
    assert el.number == 1
    assert el.atomic_mass == pytest.approx(1.008)
    assert el.shells == (1,)
    assert el.ionization_energies == (1312.0,)
    assert el.summary is None


def test_from_dict_null_and_nan_are_absent():
    """None and NaN both map to an absent field."""
    el = Element.from_dict({"name": "Iron", "color": None, "density": float("nan")})
    assert el.color is None
    assert el.density is None


def test_from_dict_ignores_unknown_keys():
    """Keys that are not element fields are dropped."""
    el = Element.from_dict({"name": "Iron", "block": "d", "cpk-hex": "e06633"})
    assert el.name == "Iron"
    assert not hasattr(el, "block")


def test_from_dict_whole_float_integer():
    """Integer fields accept whole floats, as produced by tabular loading."""
    el = Element.from_dict({"number": 26.0, "period": 4.0})
    assert el.number == 26
    assert isinstance(el.number, int)


def test_from_dict_integer_float_fields():
    """Float fields accept JSON integers."""
    el = Element.from_dict({"boil": 3134})
    assert el.boil == 3134.0
    assert isinstance(el.boil, float)


@pytest.mark.parametrize(
    "record",
    [
        {"number": 1.5},
        {"number": -1},
        {"number": "26"},
        {"number": True},
        {"density": "heavy"},
        {"name": 42},
        {"shells": "2,8"},
        {"shells": [2, -8]},
        {"ionization_energies": [1312.0, "x"]},
    ],
)
def test_from_dict_rejects_bad_values(record):
    """Values of the wrong type raise ValueError."""
    with pytest.raises(ValueError):
        Element.from_dict(record)


def test_from_dict_error_names_field():
    """The error message names the offending field."""
    with pytest.raises(ValueError, match="xpos"):
        Element.from_dict({"xpos": "left"})


def test_element_is_frozen(iron):
    """Element records are immutable."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        iron.name = "Steel"


def test_element_label():
    """Test the name/symbol label."""
    assert Element(name="Iron", symbol="Fe").label == "Iron (Fe)"
    assert Element(number=1).label == "Unknown (?)"


def test_to_dict_only_present_fields(iron):
    """to_dict omits absent fields and converts tuples to lists."""
    data = iron.to_dict()
    assert data["name"] == "Iron"
    assert data["shells"] == [2, 8, 14, 2]
    assert "color" not in data
    assert "summary" not in data


def test_to_dict_from_dict_consistency(sample_elements):
    """Converting to a dict and back gives an equal record."""
    for el in sample_elements:
        assert Element.from_dict(el.to_dict()) == el
