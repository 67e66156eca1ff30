"""Type toolkit shared types.

Every type here is implementation-agnostic.  Consumer code operates on these
types exclusively; the backing implementation (SQLGlot today) converts
to/from its native types internally.

ZERO dependency on any SQL parsing library.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Dialect
# ---------------------------------------------------------------------------


class Dialect(str, enum.Enum):
    """Supported database dialects.

    Values double as the dialect names understood by the parsing backend.
    """

    DATABRICKS = "databricks"
    DUCKDB = "duckdb"
    POSTGRES = "postgres"
    MYSQL = "mysql"
    REDSHIFT = "redshift"


# ---------------------------------------------------------------------------
# Type descriptor
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Canonical physical column type under one dialect.

    Two raw tokens denote the same physical type when they resolve to equal
    descriptors under the same dialect.  Immutable and hashable.
    """

    name: str
    params: tuple[str, ...] = ()

    @property
    def sql(self) -> str:
        """Render as ``NAME(p1, p2)``, omitting empty parameter lists."""
        if not self.params:
            return self.name
        return f"{self.name}({', '.join(self.params)})"

    def __str__(self) -> str:  # pragma: no cover — convenience
        return self.sql


@dataclass(frozen=True, slots=True)
class DialectTypeRules:
    """Canonicalisation table for one dialect.

    ``aliases`` maps a parsed type name onto the physical type the engine
    stores.  Types listed in ``unsized`` drop their parameters entirely.
    ``default_params`` fills in parameters the engine implies when the token
    omits them.  ``param_aliases`` rewrites, per physical type, symbolic
    parameters such as ``MAX`` into the value the engine substitutes.

    The mappings are frozen into read-only views on construction.
    """

    dialect: Dialect
    aliases: Mapping[str, str]
    unsized: frozenset[str] = frozenset()
    default_params: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    param_aliases: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))
        object.__setattr__(self, "default_params", MappingProxyType(dict(self.default_params)))
        object.__setattr__(
            self,
            "param_aliases",
            MappingProxyType({name: MappingProxyType(dict(symbols)) for name, symbols in self.param_aliases.items()}),
        )

    def canonicalize(self, type_name: str, params: tuple[str, ...]) -> TypeDescriptor:
        """Map a parsed ``(type_name, params)`` pair to its physical descriptor."""
        upper_name = type_name.upper()
        physical = self.aliases.get(upper_name, upper_name)
        # Alias targets may carry their own parameters, e.g. TEXT -> VARCHAR(256).
        if "(" in physical:
            base, _, rest = physical.partition("(")
            physical = base
            if not params:
                params = tuple(p.strip() for p in rest.rstrip(")").split(","))

        if physical in self.unsized:
            return TypeDescriptor(name=physical)

        if not params:
            params = self.default_params.get(physical, ())

        symbols = self.param_aliases.get(physical, {})
        normalized = (p.strip().upper() for p in params)
        return TypeDescriptor(name=physical, params=tuple(symbols.get(p, p) for p in normalized))


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class TypeToolkitError(Exception):
    """Base exception for all type_toolkit errors."""


class TypeResolutionError(TypeToolkitError):
    """A raw type token could not be resolved under the requested dialect."""

    def __init__(self, raw_type: str, dialect: Dialect, reason: str) -> None:
        self.raw_type = raw_type
        self.dialect = dialect
        self.reason = reason
        super().__init__(f"Cannot resolve type {raw_type!r} for dialect {dialect.value}: {reason}")
