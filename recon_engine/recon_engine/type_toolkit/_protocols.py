"""Type toolkit protocol definitions.

These define the interface contract that ANY implementation must satisfy.
Consumer code depends on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ._types import Dialect, TypeDescriptor


@runtime_checkable
class TypeResolver(Protocol):
    """Resolve raw column type tokens into canonical descriptors."""

    def resolve(self, raw_type: str, dialect: Dialect) -> TypeDescriptor:
        """Canonicalise *raw_type* as a type token of *dialect*.

        Raises :class:`TypeResolutionError` when the token is empty,
        unparseable, or unknown to the dialect.
        """
        ...

    def same_type(self, left: str, right: str, dialect: Dialect) -> bool:
        """Return True when both tokens denote the same physical type."""
        ...
