from roads2csv.models import (
    ProcessedRoad,
    ProcessedRoadNames,
    SingleRect,
    StreetName,
    TwoRect,
    UnprocessedRoad,
    UnprocessedRoadNames,
)
from roads2csv.stages.classify import process
from roads2csv.stages.dedup import from_streets

from tests.helpers import cell, street


def test_format_street():
    a9 = cell("A9")
    assert str(a9) == "A9"
    assert str(TwoRect(a9, cell("I5"))) == "A9-I5"
    assert str(SingleRect(a9)) == "A9"


def test_single_position_line():
    processed, _ = process(from_streets([street("Canterbury Road", "A", 9)]))
    assert processed.to_csv("\t") == "Canterbury Road\tA9"


def test_unprocessed_round_trip():
    _, unprocessed = process(from_streets([
        street("Valley View Road", "A", 4),
        street("Valley View Road", "A", 5),
        street("Valley View Road", "B", 6),
    ]))
    assert unprocessed.to_csv("\t") == "Valley View Road\tA4\tA5\tB6"


def test_multi_line_join_uses_crlf():
    roads = ProcessedRoadNames((
        ProcessedRoad(StreetName("Abbey Lane"), SingleRect(cell("C1"))),
        ProcessedRoad(StreetName("Canterbury Road"), TwoRect(cell("A9"), cell("A10"))),
        ProcessedRoad(StreetName("Mayer Street"), SingleRect(cell("B2"))),
    ))
    out = roads.to_csv(",")
    assert out == "Abbey Lane,C1\r\nCanterbury Road,A9-A10\r\nMayer Street,B2"
    assert not out.endswith("\r\n")


def test_unprocessed_delimiter_used_between_every_cell():
    roads = UnprocessedRoadNames((
        UnprocessedRoad(StreetName("A Road"), (cell("A1"), cell("A2"), cell("A3"))),
        UnprocessedRoad(StreetName("B Road"), (cell("B1"), cell("C1"), cell("D1"), cell("E1"))),
    ))
    assert roads.to_csv(";") == "A Road;A1;A2;A3\r\nB Road;B1;C1;D1;E1"


def test_delimiter_is_not_validated():
    roads = ProcessedRoadNames((ProcessedRoad(StreetName("Main, Street"), SingleRect(cell("A1"))),))
    assert roads.to_csv(", ") == "Main, Street, A1"
    assert roads.to_csv("") == "Main, StreetA1"


def test_display_uses_tab():
    assert str(ProcessedRoad(StreetName("X"), TwoRect(cell("A1"), cell("B1")))) == "X\tA1-B1"
    assert str(UnprocessedRoad(StreetName("Y"), (cell("A1"), cell("B1"), cell("C1")))) == "Y\tA1\tB1\tC1"


def test_empty_collections():
    assert ProcessedRoadNames().to_csv("\t") == ""
    assert UnprocessedRoadNames().to_csv("\t") == ""
