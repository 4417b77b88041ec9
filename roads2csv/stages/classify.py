from __future__ import annotations

from typing import List, Tuple

from roads2csv.models import (
    DeduplicatedRoads,
    ProcessedRoad,
    ProcessedRoadNames,
    SingleRect,
    TwoRect,
    UnprocessedRoad,
    UnprocessedRoadNames,
)
from roads2csv.utils import get_logger

logger = get_logger(__name__)

# Streets spanning more cells than this are left for manual review.
MAX_PROCESSED_CELLS = 2


def process(grouping: DeduplicatedRoads) -> Tuple[ProcessedRoadNames, UnprocessedRoadNames]:
    """Split deduplicated roads into processed and unprocessed roads.

    Roads covering one or two cells are unambiguous (``Canterbury Road -> A9``
    or ``Canterbury Road -> A9-A10``) and cover most of a street index.

    Anything wider, e.g. ``Canterbury Road -> [A9, A10, E1, E2]``, may be two
    roads sharing a name (``A9-A10;E1-E2``) or one road partly clipped off the
    map (``A9-E2``). Those are returned as unprocessed for a human to resolve.
    """
    processed: List[ProcessedRoad] = []
    unprocessed: List[UnprocessedRoad] = []

    for name, positions in sorted(grouping.roads.items()):
        cells = tuple(sorted(set(positions)))
        if not cells:
            logger.debug("classify.skip: street=%s has no cells", name)
            continue
        if len(cells) == 1:
            processed.append(ProcessedRoad(name=name, position=SingleRect(cells[0])))
        elif len(cells) == MAX_PROCESSED_CELLS:
            processed.append(ProcessedRoad(name=name, position=TwoRect(cells[0], cells[1])))
        else:
            unprocessed.append(UnprocessedRoad(name=name, positions=cells))

    logger.info("classify: processed=%d unprocessed=%d", len(processed), len(unprocessed))
    return ProcessedRoadNames(tuple(processed)), UnprocessedRoadNames(tuple(unprocessed))
