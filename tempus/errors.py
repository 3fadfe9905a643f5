"""Errors raised by the relative time functions.

Every failure is one of the subclasses of :class:`TempusError`. The set is
open-ended: new subclasses may be added, so callers should always keep an
``except TempusError`` fallback after any specific handlers.

Fields only ever hold the unit/function name constants from
:mod:`tempus.util` and plain integers. Messages are rendered on demand.
"""

from typing import Any

from typing_extensions import override


class TempusError(Exception):
    """Base class for all tempus errors."""

    def _fields(self) -> tuple[Any, ...]:
        return self.args

    @override
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    @override
    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


class NegativeValueError(TempusError, ValueError):
    """A negative magnitude was passed to an ``_ago``/``_from_now`` function.

    Attributes:
        unit: Unit name, e.g. ``"days"``
        suggestion: The paired function with the opposite direction,
            e.g. ``"days_from_now"`` for a call to ``days_ago``
        value: The magnitude that was received, without its sign
    """

    def __init__(self, unit: str, suggestion: str, value: int) -> None:
        super().__init__(unit, suggestion, value)
        self.unit: str = unit
        self.suggestion: str = suggestion
        self.value: int = value

    @override
    def __str__(self) -> str:
        return (
            f"{self.unit} must be non-negative, got -{self.value}. "
            f"Did you mean {self.suggestion}({self.value})?"
        )

    @override
    def __repr__(self) -> str:
        return (
            f"NegativeValueError(unit={self.unit!r}, "
            f"suggestion={self.suggestion!r}, value={self.value!r})"
        )


class OffsetOverflowError(TempusError, OverflowError):
    """Applying an offset would leave the representable date range.

    Attributes:
        unit: Unit name, e.g. ``"years"``
        value: Signed number of units that could not be applied
            (negative for ``_ago`` functions)
    """

    def __init__(self, unit: str, value: int) -> None:
        super().__init__(unit, value)
        self.unit: str = unit
        self.value: int = value

    @override
    def __str__(self) -> str:
        return f"{self.unit} offset of {self.value} is outside the supported date range"

    @override
    def __repr__(self) -> str:
        return f"OffsetOverflowError(unit={self.unit!r}, value={self.value!r})"
