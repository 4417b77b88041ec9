import pytest

from roads2csv.models import GridPosition, StreetName


def test_grid_ordering_is_numeric_by_row():
    assert GridPosition("A", 2) < GridPosition("A", 10)
    assert GridPosition("A", 10) < GridPosition("B", 1)
    assert sorted([GridPosition("A", 10), GridPosition("A", 2), GridPosition("AA", 1)]) == [
        GridPosition("A", 2),
        GridPosition("A", 10),
        GridPosition("AA", 1),
    ]


def test_grid_parse():
    assert GridPosition.parse("A9") == GridPosition("A", 9)
    assert GridPosition.parse(" AB12 ") == GridPosition("AB", 12)
    for bad in ("", "9A", "A", "A-1", "A 9"):
        with pytest.raises(ValueError):
            GridPosition.parse(bad)


def test_negative_row_rejected():
    with pytest.raises(ValueError):
        GridPosition("A", -1)


def test_street_name_is_case_sensitive():
    assert StreetName("abbey") != StreetName("Abbey")
    assert StreetName("Zeta") < StreetName("abbey")
    assert str(StreetName("Canterbury Road")) == "Canterbury Road"


def test_values_are_immutable():
    pos = GridPosition("A", 1)
    with pytest.raises(AttributeError):
        pos.row = 2  # type: ignore[misc]
