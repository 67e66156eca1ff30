"""Change generators: turn accepted column differences into change records.

Generators advertise, per object type, how strongly they want to handle an
object.  The registry picks the highest priority; a generator that wants to
add behaviour on top of another one owns that other generator and calls it
explicitly.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from recon_engine.models.change import ChangeKind, ColumnChange
from recon_engine.models.column import Column, SchemaSource
from recon_engine.models.diff import DEFAULT_VALUE, NULLABLE, REMARKS, TYPE, AttributeDifference, ObjectDifferences

logger = logging.getLogger(__name__)

PRIORITY_NONE = -1
PRIORITY_DEFAULT = 1
PRIORITY_ADDITIONAL = 50


@runtime_checkable
class ChangeGenerator(Protocol):
    """Produce change records for one changed object."""

    def priority(self, object_type: type, source: SchemaSource) -> int:
        """Return how strongly this generator wants *object_type*, or ``PRIORITY_NONE``."""
        ...

    def fix_changed(
        self,
        changed_object: Column,
        differences: ObjectDifferences,
        reference: SchemaSource,
        comparison: SchemaSource,
    ) -> list[ColumnChange]:
        """Return the changes that bring *comparison* in line with *reference*."""
        ...


def _change(kind: ChangeKind, column: Column, difference: AttributeDifference) -> ColumnChange:
    return ColumnChange(
        kind=kind,
        table_name=column.table_name,
        column_name=column.name,
        new_value=difference.reference_value,
        previous_value=difference.compared_value,
    )


class ChangedColumnChangeGenerator:
    """Generic column generator.

    Handles ``type``, ``nullable``, ``defaultValue`` and ``remarks``; any other
    field produces no change.  Changes come out in that field order.
    """

    def priority(self, object_type: type, source: SchemaSource) -> int:
        if issubclass(object_type, Column):
            return PRIORITY_DEFAULT
        return PRIORITY_NONE

    def fix_changed(
        self,
        changed_object: Column,
        differences: ObjectDifferences,
        reference: SchemaSource,
        comparison: SchemaSource,
    ) -> list[ColumnChange]:
        changes: list[ColumnChange] = []

        type_difference = differences.get_difference(TYPE)
        if type_difference is not None:
            changes.append(_change(ChangeKind.MODIFY_DATA_TYPE, changed_object, type_difference))

        nullable_difference = differences.get_difference(NULLABLE)
        if nullable_difference is not None:
            # Unknown nullability on the reference side counts as nullable.
            if nullable_difference.reference_value is False:
                kind = ChangeKind.ADD_NOT_NULL_CONSTRAINT
            else:
                kind = ChangeKind.DROP_NOT_NULL_CONSTRAINT
            changes.append(_change(kind, changed_object, nullable_difference))

        default_difference = differences.get_difference(DEFAULT_VALUE)
        if default_difference is not None:
            if default_difference.reference_value is None:
                kind = ChangeKind.DROP_DEFAULT_VALUE
            else:
                kind = ChangeKind.ADD_DEFAULT_VALUE
            changes.append(_change(kind, changed_object, default_difference))

        remarks_difference = differences.get_difference(REMARKS)
        if remarks_difference is not None:
            changes.append(_change(ChangeKind.SET_COLUMN_REMARKS, changed_object, remarks_difference))

        logger.debug(
            "Generated %d change(s) for %s.%s (%s vs %s)",
            len(changes),
            changed_object.table_name,
            changed_object.name,
            reference.name,
            comparison.name,
        )
        return changes
