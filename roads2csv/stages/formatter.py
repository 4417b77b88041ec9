from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:
    from roads2csv.models import (
        FinalizedGridPosition,
        GridPosition,
        ProcessedRoad,
        UnprocessedRoad,
    )

LINE_TERMINATOR = "\r\n"


def format_position(pos: "GridPosition") -> str:
    return f"{pos.column}{pos.row}"


def format_finalized(fin: "FinalizedGridPosition") -> str:
    # single rect: "A9", two rects: "A9-B2"
    return "-".join(format_position(p) for p in fin.positions)


def format_processed_road(road: "ProcessedRoad", delimiter: str) -> str:
    return f"{road.name}{delimiter}{format_finalized(road.position)}"


def format_unprocessed_road(road: "UnprocessedRoad", delimiter: str) -> str:
    cells = delimiter.join(format_position(p) for p in road.positions)
    return f"{road.name}{delimiter}{cells}"


def render_processed(roads: t.Iterable["ProcessedRoad"], delimiter: str) -> str:
    """Render processed roads, one ``name<delim>cell[-cell]`` line per road.

    The delimiter is used as given; colliding with street names is the
    caller's concern.
    """
    return LINE_TERMINATOR.join(format_processed_road(r, delimiter) for r in roads)


def render_unprocessed(roads: t.Iterable["UnprocessedRoad"], delimiter: str) -> str:
    """Render unprocessed roads with every cell as its own field."""
    return LINE_TERMINATOR.join(format_unprocessed_road(r, delimiter) for r in roads)
