from roads2csv.models import GridPosition, InputStreetValue, StreetName


def street(name: str, column: str, row: int) -> InputStreetValue:
    return InputStreetValue(street_name=StreetName(name), position=GridPosition(column, row))


def cell(text: str) -> GridPosition:
    return GridPosition.parse(text)
