"""Column reconciliation between an ORM model and a live database.

Model-derived and database-derived column descriptions disagree in ways
that are not schema changes at all:

* the model has no notion of ordinal position, so ``order`` always differs;
* the model spells types its own way (``VARCHAR(255)`` for a ``STRING``
  column, ``INTEGER`` for ``INT``), so ``type`` differs by vocabulary only;
* the database materialises implicit defaults such as ``CURRENT_TIMESTAMP()``
  that the model cannot express, so ``defaultValue`` differs with the model
  side silent.

:func:`suppress_artifacts` removes exactly those differences, and only when
one source is model-derived and the other is not.  Everything else passes
through untouched to the generic column generator.
"""

from __future__ import annotations

import logging

from recon_engine.config import Settings, load_settings
from recon_engine.diff.generators import (
    PRIORITY_ADDITIONAL,
    PRIORITY_NONE,
    ChangedColumnChangeGenerator,
    ChangeGenerator,
)
from recon_engine.models.change import ColumnChange
from recon_engine.models.column import Column, DiffRole, SchemaSource
from recon_engine.models.diff import DEFAULT_VALUE, ORDER, TYPE, ObjectDifferences, is_function_default
from recon_engine.type_toolkit import Dialect, TypeResolver, get_type_resolver

logger = logging.getLogger(__name__)

# Fields that never carry meaning when one side is model-derived.
# ``order`` is the catalog's ORDINAL_POSITION, which models do not track.
IGNORED_DIFFERENCE_FIELDS: frozenset[str] = frozenset({ORDER})


def locate_model_side(reference: SchemaSource, comparison: SchemaSource) -> DiffRole | None:
    """Return the role of the only model-derived source, or ``None``.

    ``None`` means both or neither source is model-derived, in which case no
    suppression applies.
    """
    if reference.is_model and not comparison.is_model:
        return DiffRole.REFERENCE
    if comparison.is_model and not reference.is_model:
        return DiffRole.COMPARED
    return None


def non_model_dialect(
    reference: SchemaSource,
    comparison: SchemaSource,
    model_side: DiffRole,
    settings: Settings | None = None,
) -> Dialect:
    """Return the dialect of the database-derived source.

    Falls back to ``default_dialect`` from settings when that source does not
    declare one.
    """
    database_source = comparison if model_side == DiffRole.REFERENCE else reference
    if database_source.dialect is not None:
        return database_source.dialect
    return (settings or load_settings()).default_dialect


def suppress_artifacts(
    differences: ObjectDifferences,
    model_side: DiffRole | None,
    dialect: Dialect,
    resolver: TypeResolver | None = None,
    column: str | None = None,
) -> ObjectDifferences:
    """Remove model/database vocabulary artifacts from *differences* in place.

    Parameters
    ----------
    differences:
        Attribute differences for one compared column.  Mutated in place.
    model_side:
        Role of the model-derived source, or ``None`` when both or neither
        source is model-derived.  ``None`` leaves *differences* untouched.
    dialect:
        Dialect of the database-derived source.  Both type tokens are read
        as tokens of this dialect.
    resolver:
        Type resolver; defaults to the process-wide one.
    column:
        Qualified column name, attached to suppression log records as
        ``column``.

    Returns
    -------
    ObjectDifferences
        The same *differences* object.

    Raises
    ------
    TypeResolutionError
        When either type token cannot be resolved under *dialect*.
    """
    if model_side is None:
        return differences

    log_extra = {"column": column}

    for field in sorted(IGNORED_DIFFERENCE_FIELDS):
        if differences.remove_difference(field):
            logger.debug("Suppressed %s difference: not tracked by the model", field, extra=log_extra)

    type_difference = differences.get_difference(TYPE)
    if type_difference is not None:
        resolver = resolver or get_type_resolver()
        reference_type = resolver.resolve(type_difference.reference_value, dialect)
        compared_type = resolver.resolve(type_difference.compared_value, dialect)
        if reference_type == compared_type:
            differences.remove_difference(TYPE)
            logger.debug(
                "Suppressed type difference %r vs %r: both are %s under %s",
                type_difference.reference_value,
                type_difference.compared_value,
                reference_type.sql,
                dialect.value,
                extra=log_extra,
            )

    # Databases add function defaults (e.g. on timestamp columns) the model cannot express.
    default_difference = differences.get_difference(DEFAULT_VALUE)
    if default_difference is not None:
        model_value = default_difference.value_for(model_side)
        database_value = default_difference.value_for(model_side.other)
        if model_value is None and is_function_default(database_value):
            differences.remove_difference(DEFAULT_VALUE)
            logger.debug(
                "Suppressed defaultValue difference: database-side function %s",
                database_value,
                extra=log_extra,
            )

    return differences


class ModelColumnChangeGenerator:
    """Column generator for model-vs-database comparisons.

    Filters artifacts out of the differences, then always hands the result to
    its fallback generator.
    """

    def __init__(
        self,
        fallback: ChangeGenerator | None = None,
        resolver: TypeResolver | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._fallback = fallback or ChangedColumnChangeGenerator()
        self._resolver = resolver
        self._settings = settings or load_settings()

    @property
    def fallback(self) -> ChangeGenerator:
        return self._fallback

    def priority(self, object_type: type, source: SchemaSource) -> int:
        if issubclass(object_type, Column):
            return PRIORITY_ADDITIONAL
        return PRIORITY_NONE

    def fix_changed(
        self,
        changed_object: Column,
        differences: ObjectDifferences,
        reference: SchemaSource,
        comparison: SchemaSource,
    ) -> list[ColumnChange]:
        model_side = locate_model_side(reference, comparison)
        if model_side is not None:
            dialect = non_model_dialect(reference, comparison, model_side, self._settings)
            suppress_artifacts(
                differences,
                model_side,
                dialect,
                self._resolver,
                column=f"{changed_object.table_name}.{changed_object.name}",
            )

        return self._fallback.fix_changed(changed_object, differences, reference, comparison)
