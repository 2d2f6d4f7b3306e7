"""
Cell value model.

Rows arrive as plain mappings whose values are absent, text or numbers. Every
analyzer reads a cell through ``classify_value`` so that null handling and
text rendering are decided in one place:

- ``None``, ``""`` and ``float('nan')`` are null. ``""`` is kept apart as
  ``is_empty_string`` because completeness metrics report it separately.
- ``bool`` values are text (``"true"`` / ``"false"``), not numbers.
- Numbers render without a trailing ``.0`` when integral, so ``3`` and
  ``3.0`` count as the same value.

Turning text into numbers is not done here; that coercion belongs to the
type detector.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Mapping, Optional, Sequence, Union

RawValue = Optional[Union[str, int, float]]
Row = Mapping[str, RawValue]


class ValueKind(Enum):
    """Kind of a cell value."""
    NULL = "null"
    TEXT = "text"
    NUMBER = "number"


@dataclass(frozen=True)
class CellValue:
    """
    A classified cell.

    Attributes:
        kind: NULL, TEXT or NUMBER
        text: Canonical text rendering ("" for nulls)
        number: The numeric value for NUMBER cells, else None
        is_empty_string: True when the raw value was ""
    """
    kind: ValueKind
    text: str = ""
    number: Optional[float] = None
    is_empty_string: bool = False

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL


NULL_CELL = CellValue(ValueKind.NULL)
EMPTY_STRING_CELL = CellValue(ValueKind.NULL, is_empty_string=True)


def format_number(value: float) -> str:
    """Render a number the way it is counted and displayed."""
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def classify_value(raw: Any) -> CellValue:
    """
    Classify a raw cell value.

    Args:
        raw: Value taken from a row

    Returns:
        CellValue with its kind and canonical text
    """
    if raw is None:
        return NULL_CELL
    if isinstance(raw, str):
        if raw == "":
            return EMPTY_STRING_CELL
        return CellValue(ValueKind.TEXT, text=raw)
    if isinstance(raw, bool):
        return CellValue(ValueKind.TEXT, text="true" if raw else "false")
    if isinstance(raw, (int, float)):
        try:
            number = float(raw)
        except OverflowError:
            # Integers beyond float range are kept as text
            return CellValue(ValueKind.TEXT, text=str(raw))
        if math.isnan(number):
            return NULL_CELL
        return CellValue(ValueKind.NUMBER, text=format_number(raw), number=number)
    # numpy scalars and other number-likes expose __float__
    if hasattr(raw, "__float__") and not hasattr(raw, "__len__"):
        return classify_value(float(raw))
    return CellValue(ValueKind.TEXT, text=str(raw))


def iter_cells(rows: Sequence[Row], field_name: str) -> Iterator[CellValue]:
    """Yield the classified value of ``field_name`` for every row."""
    for row in rows:
        yield classify_value(row.get(field_name))


def field_sample(rows: Sequence[Row], field_name: str) -> List[CellValue]:
    """Return the ordered non-null cells of a field."""
    return [cell for cell in iter_cells(rows, field_name) if not cell.is_null]


def field_exists(rows: Sequence[Row], field_name: str) -> bool:
    """True when at least one row carries the field key."""
    return any(field_name in row for row in rows)
