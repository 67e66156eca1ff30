"""Per-dialect canonicalisation tables.

Keys are the type names produced by the parsing backend (upper case).  A
dialect missing from :data:`DIALECT_RULES` has no rules and cannot be
resolved.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ._types import Dialect, DialectTypeRules

_DATABRICKS = DialectTypeRules(
    dialect=Dialect.DATABRICKS,
    aliases={
        "TEXT": "STRING",
        "VARCHAR": "STRING",
        "CHAR": "STRING",
        "NCHAR": "STRING",
        "NVARCHAR": "STRING",
        "BPCHAR": "STRING",
        "DATETIME": "TIMESTAMP",
        "TIMESTAMPLTZ": "TIMESTAMP",
        "TIMESTAMPTZ": "TIMESTAMP",
        "VARBINARY": "BINARY",
        "BLOB": "BINARY",
    },
    # Delta stores every character type as an unbounded STRING.
    unsized=frozenset({"STRING", "INT", "BIGINT", "SMALLINT", "TINYINT"}),
    default_params={"DECIMAL": ("10", "0")},
)

_DUCKDB = DialectTypeRules(
    dialect=Dialect.DUCKDB,
    aliases={
        "TEXT": "VARCHAR",
        "CHAR": "VARCHAR",
        "NCHAR": "VARCHAR",
        "NVARCHAR": "VARCHAR",
        "BPCHAR": "VARCHAR",
        "DATETIME": "TIMESTAMP",
        "VARBINARY": "BLOB",
        "BINARY": "BLOB",
    },
    # Length modifiers on character types are accepted and ignored.
    unsized=frozenset({"VARCHAR", "INT", "BIGINT", "SMALLINT", "TINYINT"}),
    default_params={"DECIMAL": ("18", "3")},
)

_POSTGRES = DialectTypeRules(
    dialect=Dialect.POSTGRES,
    aliases={
        "SERIAL": "INT",
        "BIGSERIAL": "BIGINT",
        "SMALLSERIAL": "SMALLINT",
        "NVARCHAR": "VARCHAR",
        "NCHAR": "CHAR",
        "BPCHAR": "CHAR",
        "DATETIME": "TIMESTAMP",
    },
    unsized=frozenset({"TEXT", "INT", "BIGINT", "SMALLINT"}),
    default_params={"CHAR": ("1",)},
)

_MYSQL = DialectTypeRules(
    dialect=Dialect.MYSQL,
    aliases={
        "BOOLEAN": "TINYINT",
        "NVARCHAR": "VARCHAR",
        "NCHAR": "CHAR",
    },
    # Integer display widths are cosmetic.
    unsized=frozenset({"TINYINT", "SMALLINT", "MEDIUMINT", "INT", "BIGINT", "TEXT"}),
    default_params={"CHAR": ("1",), "DECIMAL": ("10", "0")},
)

_REDSHIFT = DialectTypeRules(
    dialect=Dialect.REDSHIFT,
    aliases={
        "TEXT": "VARCHAR(256)",
        "NVARCHAR": "VARCHAR",
        "NCHAR": "CHAR",
        "BPCHAR": "CHAR",
        "DATETIME": "TIMESTAMP",
    },
    unsized=frozenset({"INT", "BIGINT", "SMALLINT"}),
    default_params={"VARCHAR": ("256",), "CHAR": ("1",), "DECIMAL": ("18", "0")},
    # VARCHAR(MAX) is stored as VARCHAR(65535).
    param_aliases={"VARCHAR": {"MAX": "65535"}},
)

DIALECT_RULES: Mapping[Dialect, DialectTypeRules] = MappingProxyType(
    {
        rules.dialect: rules for rules in (_DATABRICKS, _DUCKDB, _POSTGRES, _MYSQL, _REDSHIFT)
    }
)


def rules_for(dialect: Dialect) -> DialectTypeRules | None:
    """Return the canonicalisation rules for *dialect*, or ``None``."""
    return DIALECT_RULES.get(dialect)
