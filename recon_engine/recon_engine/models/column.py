"""Column and comparison-source models.

A comparison pass always involves two sources: the *reference* (the desired
shape) and the *comparison* (the shape to be brought in line).  Each source
is tagged once, at setup, with the side it was derived from.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from recon_engine.type_toolkit import Dialect


class ComparisonSide(str, Enum):
    """Where a compared schema description came from."""

    MODEL = "MODEL"
    DATABASE = "DATABASE"


class DiffRole(str, Enum):
    """Position a source occupies within an attribute difference."""

    REFERENCE = "REFERENCE"
    COMPARED = "COMPARED"

    @property
    def other(self) -> DiffRole:
        return DiffRole.COMPARED if self is DiffRole.REFERENCE else DiffRole.REFERENCE


class SchemaSource(BaseModel):
    """One of the two sources taking part in a comparison pass."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Human-readable source name, used in logs.")
    side: ComparisonSide = Field(..., description="Whether the source is model- or database-derived.")
    dialect: Dialect | None = Field(
        default=None,
        description="Type dialect of the source.  Model-derived sources usually have none.",
    )

    @property
    def is_model(self) -> bool:
        return self.side == ComparisonSide.MODEL


class Column(BaseModel):
    """A single column as described by one source."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    table_name: str = Field(..., description="Table owning the column.")
    name: str = Field(..., description="Column name.")
    data_type: str | None = Field(default=None, description="Raw type token as reported by the source.")
    nullable: bool = Field(default=True, description="Whether the column allows NULLs.")
    default_value: Any = Field(
        default=None,
        description="Literal default, a DatabaseFunction marker, or None for no default.",
    )
    remarks: str | None = Field(default=None, description="Column comment, if any.")
    order: int | None = Field(default=None, description="Ordinal position, when the source knows it.")
