"""Domain models for the reconciliation engine."""

from recon_engine.models.change import ChangeKind, ColumnChange
from recon_engine.models.column import Column, ComparisonSide, DiffRole, SchemaSource
from recon_engine.models.diff import (
    AttributeDifference,
    DatabaseFunction,
    ObjectDifferences,
    SequenceNextValue,
    is_function_default,
)

__all__ = [
    "AttributeDifference",
    "ChangeKind",
    "Column",
    "ColumnChange",
    "ComparisonSide",
    "DatabaseFunction",
    "DiffRole",
    "ObjectDifferences",
    "SchemaSource",
    "SequenceNextValue",
    "is_function_default",
]
