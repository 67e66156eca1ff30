"""Column difference reconciliation and change generation."""

from recon_engine.diff.generators import (
    PRIORITY_ADDITIONAL,
    PRIORITY_DEFAULT,
    PRIORITY_NONE,
    ChangedColumnChangeGenerator,
    ChangeGenerator,
)
from recon_engine.diff.model_column import (
    IGNORED_DIFFERENCE_FIELDS,
    ModelColumnChangeGenerator,
    locate_model_side,
    non_model_dialect,
    suppress_artifacts,
)
from recon_engine.diff.registry import ChangeGeneratorRegistry, default_registry

__all__ = [
    "IGNORED_DIFFERENCE_FIELDS",
    "PRIORITY_ADDITIONAL",
    "PRIORITY_DEFAULT",
    "PRIORITY_NONE",
    "ChangeGenerator",
    "ChangeGeneratorRegistry",
    "ChangedColumnChangeGenerator",
    "ModelColumnChangeGenerator",
    "default_registry",
    "locate_model_side",
    "non_model_dialect",
    "suppress_artifacts",
]
