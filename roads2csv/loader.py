from __future__ import annotations

from typing import List

from roads2csv.models import GridPosition, InputStreetValue, StreetName
from roads2csv.utils import get_logger

logger = get_logger(__name__)


def parse_line(line: str, delimiter: str = "\t") -> InputStreetValue:
    # street names may contain the delimiter (e.g. spaces), cells never do
    name, sep, cell = (line or "").rpartition(delimiter)
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"expected '<street>{delimiter!r}<cell>', got {line!r}")
    return InputStreetValue(street_name=StreetName(name), position=GridPosition.parse(cell))


def load_streets(path: str, *, delimiter: str = "\t", encoding: str = "utf-8-sig") -> List[InputStreetValue]:
    """Read structured ``street<delim>cell`` records from a text file.

    Blank lines and ``#`` comments are ignored. Malformed lines are logged and
    skipped.
    """
    out: List[InputStreetValue] = []
    skipped = 0
    with open(path, "r", encoding=encoding) as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip() or line.lstrip().startswith("#"):
                continue
            try:
                out.append(parse_line(line, delimiter))
            except ValueError as e:
                skipped += 1
                logger.warning("loader.skip: %s:%d %s", path, lineno, e)
    logger.info("loader: records=%d skipped=%d path=%s", len(out), skipped, path)
    return out
