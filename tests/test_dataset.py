"""
Lookup properties over the bundled periodic-table dataset.
"""

import pytest

from pertable.elements.loader import get_elements
from pertable.elements.matcher import match_element, resolve


@pytest.fixture(scope="module")
def dataset():
    return get_elements()


def test_every_number_resolves(dataset):
    for el in dataset:
        found = resolve(dataset, str(el.number))
        assert found is not None
        assert found.number == el.number


def test_every_symbol_resolves(dataset):
    for el in dataset:
        for query in (el.symbol, el.symbol.lower(), el.symbol.upper()):
            result = match_element(dataset, query)
            assert result.element == el
            assert result.method == "symbol"


def test_every_name_resolves(dataset):
    for el in dataset:
        result = match_element(dataset, el.name.upper())
        assert result.element == el
        assert result.method == "name"


def test_unknown_number(dataset):
    assert resolve(dataset, "9999") is None
    assert resolve(dataset, "119") is None


@pytest.mark.parametrize("query", ["fe", "Fe", "FE"])
def test_iron_by_symbol(dataset, query):
    assert resolve(dataset, query).name == "Iron"


def test_oxygen_by_name(dataset):
    assert resolve(dataset, "oxygen").name == "Oxygen"


def test_oxygen_by_number(dataset):
    result = match_element(dataset, "8")
    assert result.element.name == "Oxygen"
    assert result.method == "number"


@pytest.mark.parametrize(
    "query,name",
    [
        ("carbn", "Carbon"),
        ("hydrogn", "Hydrogen"),
        ("flourine", "Fluorine"),
        ("aluminum", "Aluminium"),
        ("caesium", "Cesium"),
    ],
)
def test_typos_resolve(dataset, query, name):
    result = match_element(dataset, query)
    assert result.method == "fuzzy"
    assert result.element.name == name


def test_unrelated_text(dataset):
    assert resolve(dataset, "qwxzvbnmpk") is None


@pytest.mark.parametrize("query", ["", "   "])
def test_blank_query_matches_tin(dataset, query):
    """Tin is the only name within three edits of an empty needle."""
    result = match_element(dataset, query)
    assert result.element.symbol == "Sn"
    assert result.distance == 3


def test_idempotent(dataset):
    for query in ["8", "fe", "oxygen", "carbn", "qwxzvbnmpk"]:
        assert resolve(dataset, query) == resolve(dataset, query)


def test_shells_sum_to_atomic_number(dataset):
    for el in dataset:
        assert sum(el.shells) == el.number, el.label


def test_grid_positions_unique(dataset):
    positions = [(el.xpos, el.ypos) for el in dataset]
    assert len(set(positions)) == len(positions)


def test_identity_fields_present(dataset):
    for el in dataset:
        assert el.name and el.symbol and el.number > 0
        assert el.period is not None
        assert el.electron_configuration
