"""SQLGlot-backed implementation of the type toolkit protocols.

This is the ONLY file in the package that imports ``sqlglot`` directly.
Consumer code goes through :class:`recon_engine.type_toolkit.TypeResolver`.

SQLGlot turns a raw token into a ``DataType`` expression using the
dialect's own tokenizer, which already folds spelling differences such as
``INTEGER``/``INT`` or ``STRING``/``TEXT``.  The per-dialect tables in
:mod:`recon_engine.type_toolkit._rules` then fold the physical aliases the
engine itself applies.

Token folding differs between SQLGlot releases; pinned to the 30.x line.
"""

from __future__ import annotations

import logging

import sqlglot
from sqlglot import exp
from sqlglot.errors import ErrorLevel, SqlglotError

from .._rules import rules_for
from .._types import Dialect, TypeDescriptor, TypeResolutionError

logger = logging.getLogger(__name__)

# Parsed types that carry no physical meaning on their own.
_UNRESOLVABLE: frozenset[exp.DataType.Type] = frozenset(
    {
        exp.DataType.Type.USERDEFINED,
        exp.DataType.Type.UNKNOWN,
    }
)


def _dialect_value(dialect: Dialect) -> str:
    """Return the sqlglot dialect string for a :class:`Dialect` enum member."""
    return dialect.value


class SqlGlotTypeResolver:
    """SQLGlot-backed :class:`TypeResolver` implementation."""

    def resolve(self, raw_type: str, dialect: Dialect) -> TypeDescriptor:
        """Canonicalise *raw_type* as a type token of *dialect*."""
        rules = rules_for(dialect)
        if rules is None:
            raise TypeResolutionError(str(raw_type), dialect, "no type rules for dialect")

        if not isinstance(raw_type, str) or not raw_type.strip():
            raise TypeResolutionError(str(raw_type), dialect, "empty type token")

        token = raw_type.strip()
        try:
            parsed = sqlglot.parse_one(
                token,
                read=_dialect_value(dialect),
                into=exp.DataType,
                error_level=ErrorLevel.RAISE,
            )
        except SqlglotError as exc:
            raise TypeResolutionError(token, dialect, f"unparseable: {exc}") from exc

        if not isinstance(parsed, exp.DataType) or parsed.this in _UNRESOLVABLE:
            raise TypeResolutionError(token, dialect, "unknown type")

        params = tuple(param.sql(dialect=_dialect_value(dialect)) for param in parsed.expressions)
        descriptor = rules.canonicalize(parsed.this.value, params)

        logger.debug("Resolved %r as %s under %s", token, descriptor.sql, dialect.value)
        return descriptor

    def same_type(self, left: str, right: str, dialect: Dialect) -> bool:
        """Return True when both tokens denote the same physical type."""
        return self.resolve(left, dialect) == self.resolve(right, dialect)
