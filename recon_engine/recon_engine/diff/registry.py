"""Priority-based selection of change generators."""

from __future__ import annotations

import logging

from recon_engine.diff.generators import PRIORITY_NONE, ChangedColumnChangeGenerator, ChangeGenerator
from recon_engine.diff.model_column import ModelColumnChangeGenerator
from recon_engine.models.change import ColumnChange
from recon_engine.models.column import Column, SchemaSource
from recon_engine.models.diff import ObjectDifferences

logger = logging.getLogger(__name__)


class ChangeGeneratorRegistry:
    """Holds change generators and dispatches to the highest-priority one."""

    def __init__(self) -> None:
        self._generators: list[ChangeGenerator] = []

    def register(self, generator: ChangeGenerator) -> None:
        self._generators.append(generator)

    def select(self, object_type: type, source: SchemaSource) -> ChangeGenerator | None:
        """Return the generator with the highest priority for *object_type*.

        Ties go to the generator registered first.  Returns ``None`` when no
        generator rates the type above ``PRIORITY_NONE``.
        """
        selected: ChangeGenerator | None = None
        best = PRIORITY_NONE
        for generator in self._generators:
            priority = generator.priority(object_type, source)
            if priority > best:
                selected, best = generator, priority
        return selected

    def fix_changed(
        self,
        changed_object: Column,
        differences: ObjectDifferences,
        reference: SchemaSource,
        comparison: SchemaSource,
    ) -> list[ColumnChange]:
        generator = self.select(type(changed_object), reference)
        if generator is None:
            logger.debug("No change generator for %s", type(changed_object).__name__)
            return []
        return generator.fix_changed(changed_object, differences, reference, comparison)


def default_registry() -> ChangeGeneratorRegistry:
    """Registry with the generic column generator and the model-column reconciler."""
    registry = ChangeGeneratorRegistry()
    registry.register(ChangedColumnChangeGenerator())
    registry.register(ModelColumnChangeGenerator())
    return registry
