"""Attribute-level difference models.

An :class:`ObjectDifferences` holds every attribute on which the two
descriptions of one compared object disagree.  It is built by the upstream
diff engine and filtered in place before change generation.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from recon_engine.models.column import DiffRole

# Well-known attribute names.
ORDER = "order"
TYPE = "type"
DEFAULT_VALUE = "defaultValue"
NULLABLE = "nullable"
REMARKS = "remarks"


@dataclass(frozen=True, slots=True)
class DatabaseFunction:
    """A default computed by the database, e.g. ``CURRENT_TIMESTAMP()``.

    Distinguishes a server-evaluated expression from a literal that happens
    to have the same spelling.
    """

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class SequenceNextValue(DatabaseFunction):
    """Default drawn from a sequence's next value."""

    sequence_name: str = ""


def is_function_default(value: Any) -> bool:
    """Return True when *value* is a database-side function marker."""
    return isinstance(value, DatabaseFunction)


@dataclass(frozen=True, slots=True)
class AttributeDifference:
    """Reference-side and compared-side values of one attribute."""

    field: str
    reference_value: Any
    compared_value: Any

    def value_for(self, role: DiffRole) -> Any:
        """Return the value recorded for the source in *role*."""
        if role == DiffRole.REFERENCE:
            return self.reference_value
        return self.compared_value


class ObjectDifferences:
    """Mapping of attribute name to :class:`AttributeDifference`.

    Keys are unique.  Once built, consumers only ever remove entries.
    """

    def __init__(self, differences: list[AttributeDifference] | None = None) -> None:
        self._differences: dict[str, AttributeDifference] = {}
        for difference in differences or []:
            self.add_difference(difference)

    @classmethod
    def of(cls, **fields: tuple[Any, Any]) -> ObjectDifferences:
        """Build from ``field=(reference_value, compared_value)`` pairs."""
        return cls([AttributeDifference(name, ref, cmp) for name, (ref, cmp) in fields.items()])

    def add_difference(self, difference: AttributeDifference) -> None:
        if difference.field in self._differences:
            raise ValueError(f"Duplicate difference for field {difference.field!r}")
        self._differences[difference.field] = difference

    def get_difference(self, field: str) -> AttributeDifference | None:
        return self._differences.get(field)

    def remove_difference(self, field: str) -> bool:
        """Remove *field* if present.  Returns True when an entry was removed."""
        return self._differences.pop(field, None) is not None

    def has_differences(self) -> bool:
        return bool(self._differences)

    def fields(self) -> list[str]:
        return list(self._differences)

    def __contains__(self, field: object) -> bool:
        return field in self._differences

    def __iter__(self) -> Iterator[AttributeDifference]:
        return iter(list(self._differences.values()))

    def __len__(self) -> int:
        return len(self._differences)

    def __repr__(self) -> str:
        return f"ObjectDifferences({list(self._differences.values())!r})"
