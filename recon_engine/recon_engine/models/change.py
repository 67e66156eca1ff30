"""Change records emitted for a column that differs between two sources."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChangeKind(str, Enum):
    """Classification of a column alteration."""

    MODIFY_DATA_TYPE = "MODIFY_DATA_TYPE"
    ADD_DEFAULT_VALUE = "ADD_DEFAULT_VALUE"
    DROP_DEFAULT_VALUE = "DROP_DEFAULT_VALUE"
    ADD_NOT_NULL_CONSTRAINT = "ADD_NOT_NULL_CONSTRAINT"
    DROP_NOT_NULL_CONSTRAINT = "DROP_NOT_NULL_CONSTRAINT"
    SET_COLUMN_REMARKS = "SET_COLUMN_REMARKS"


class ColumnChange(BaseModel):
    """A single alteration that brings the comparison column in line with the reference."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ChangeKind = Field(..., description="What kind of alteration this is.")
    table_name: str = Field(..., description="Table owning the column.")
    column_name: str = Field(..., description="Column being altered.")
    new_value: Any = Field(default=None, description="Value taken from the reference source.")
    previous_value: Any = Field(default=None, description="Value currently held by the comparison source.")
