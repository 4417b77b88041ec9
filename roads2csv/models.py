from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from roads2csv.stages import formatter

_CELL_RE = re.compile(r"^([A-Za-z]+)(\d+)$")


@dataclass(frozen=True, order=True)
class StreetName:
    """Name of one street, such as ``"Canterbury Road"``."""
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class GridPosition:
    """Grid cell such as ``A9``.

    Ordered by column, then numerically by row, so ``A2 < A10``.
    """
    column: str
    row: int

    def __post_init__(self):
        if self.row < 0:
            raise ValueError(f"grid row must be non-negative, got {self.row}")

    @classmethod
    def parse(cls, text: str) -> "GridPosition":
        m = _CELL_RE.match((text or "").strip())
        if not m:
            raise ValueError(f"not a grid cell: {text!r}")
        return cls(column=m.group(1), row=int(m.group(2)))

    def __str__(self) -> str:
        return formatter.format_position(self)


@dataclass(frozen=True)
class InputStreetValue:
    street_name: StreetName
    position: GridPosition


@dataclass(frozen=True)
class DeduplicatedRoads:
    # keys ascending, each tuple sorted and duplicate-free; read-only view
    roads: Mapping[StreetName, Tuple[GridPosition, ...]] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "roads", MappingProxyType(dict(self.roads)))

    def __hash__(self) -> int:
        return hash(frozenset(self.roads.items()))


@dataclass(frozen=True)
class SingleRect:
    """Road contained within a single cell, i.e. ``Valley Road -> A6``."""
    position: GridPosition

    @property
    def positions(self) -> Tuple[GridPosition, ...]:
        return (self.position,)

    def __str__(self) -> str:
        return formatter.format_finalized(self)


@dataclass(frozen=True)
class TwoRect:
    """Road crossing exactly two cells; ``position_a < position_b``."""
    position_a: GridPosition
    position_b: GridPosition

    @property
    def positions(self) -> Tuple[GridPosition, ...]:
        return (self.position_a, self.position_b)

    def __str__(self) -> str:
        return formatter.format_finalized(self)


FinalizedGridPosition = Union[SingleRect, TwoRect]


@dataclass(frozen=True)
class ProcessedRoad:
    name: StreetName
    position: FinalizedGridPosition

    def __str__(self) -> str:
        return formatter.format_processed_road(self, "\t")


@dataclass(frozen=True)
class UnprocessedRoad:
    name: StreetName
    positions: Tuple[GridPosition, ...]

    def __str__(self) -> str:
        return formatter.format_unprocessed_road(self, "\t")


@dataclass(frozen=True)
class ProcessedRoadNames:
    processed: Tuple[ProcessedRoad, ...] = ()

    def __len__(self) -> int:
        return len(self.processed)

    def __iter__(self):
        return iter(self.processed)

    def to_csv(self, delimiter: str) -> str:
        return formatter.render_processed(self.processed, delimiter)


@dataclass(frozen=True)
class UnprocessedRoadNames:
    unprocessed: Tuple[UnprocessedRoad, ...] = ()

    def __len__(self) -> int:
        return len(self.unprocessed)

    def __iter__(self):
        return iter(self.unprocessed)

    def to_csv(self, delimiter: str) -> str:
        return formatter.render_unprocessed(self.unprocessed, delimiter)
