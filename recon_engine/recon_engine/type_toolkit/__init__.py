"""Type toolkit — dialect-aware canonicalisation of column type tokens.

Usage::

    from recon_engine.type_toolkit import get_type_resolver, Dialect

    resolver = get_type_resolver()
    resolver.resolve("VARCHAR(255)", Dialect.DATABRICKS)   # TypeDescriptor('STRING')
    resolver.same_type("INT", "BIGINT", Dialect.POSTGRES)  # False

The default implementation delegates parsing to SQLGlot.  A different backend
can be swapped in via ``register_implementation()`` without touching consumer
code.
"""

from ._factory import get_type_resolver, register_implementation, reset_resolver
from ._protocols import TypeResolver
from ._rules import DIALECT_RULES, rules_for
from ._types import (
    Dialect,
    DialectTypeRules,
    TypeDescriptor,
    TypeResolutionError,
    TypeToolkitError,
)

__all__ = [
    # Factory
    "get_type_resolver",
    "register_implementation",
    "reset_resolver",
    # Protocols
    "TypeResolver",
    # Rules
    "DIALECT_RULES",
    "rules_for",
    # Types
    "Dialect",
    "DialectTypeRules",
    "TypeDescriptor",
    # Exceptions
    "TypeToolkitError",
    "TypeResolutionError",
]
