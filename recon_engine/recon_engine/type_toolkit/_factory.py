"""Process-wide type resolver lookup.

Resolvers hold no state, so one default instance serves every caller.  A
registered resolver takes precedence over the SQLGlot default until it is
cleared again with ``register_implementation(None)``.
"""

from __future__ import annotations

import functools

from ._protocols import TypeResolver

_registered: TypeResolver | None = None


@functools.cache
def _default_resolver() -> TypeResolver:
    from .impl.sqlglot_impl import SqlGlotTypeResolver

    return SqlGlotTypeResolver()


def register_implementation(resolver: TypeResolver | None) -> None:
    """Use *resolver* wherever no resolver is passed explicitly; ``None`` restores the default."""
    global _registered
    _registered = resolver


def get_type_resolver() -> TypeResolver:
    """Return the registered resolver, or the shared SQLGlot-backed default."""
    return _registered or _default_resolver()


def reset_resolver() -> None:
    """Drop the registered resolver and the cached default.  **For testing only.**"""
    register_implementation(None)
    _default_resolver.cache_clear()
