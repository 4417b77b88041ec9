from __future__ import annotations

from typing import Dict, Iterable, Set

from roads2csv.models import DeduplicatedRoads, GridPosition, InputStreetValue, StreetName
from roads2csv.utils import get_logger

logger = get_logger(__name__)


def from_streets(streets: Iterable[InputStreetValue]) -> DeduplicatedRoads:
    """Merge road observations by street name.

    Input::

        Mayer Street A4
        Mayer Street A5
        Mayer Street A5
        Mayer Street A6

    Output::

        Mayer Street -> (A4, A5, A6)

    Both the street names and each street's cells come back sorted.
    """
    buckets: Dict[StreetName, Set[GridPosition]] = {}
    n = 0
    for st in streets:
        buckets.setdefault(st.street_name, set()).add(st.position)
        n += 1

    roads = {name: tuple(sorted(buckets[name])) for name in sorted(buckets)}
    logger.info("dedup.streets: kept=%d from=%d", len(roads), n)
    return DeduplicatedRoads(roads=roads)
