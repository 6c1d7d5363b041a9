"""
Generator registry — central dispatch from generator kind to generator.

The set of kinds is closed (GENERATOR_KINDS).  The registry maps the
kinds that have an implementation to one shared, stateless instance.
"""

from __future__ import annotations

import logging

from appsetgen.core.models import GENERATOR_KINDS, ApplicationSetGenerator
from appsetgen.core.services.generators.base import Generator
from appsetgen.core.services.generators.errors import (
    InvalidGeneratorSpecError,
    UnsupportedGeneratorError,
)
from appsetgen.core.services.generators.list_generator import ListGenerator

logger = logging.getLogger(__name__)


class GeneratorRegistry:
    """Registry and dispatcher for generators."""

    def __init__(self) -> None:
        self._generators: dict[str, Generator] = {}

    def register(self, generator: Generator) -> None:
        """Register a generator under its kind.

        Raises:
            ValueError: the kind is not a known generator kind.
        """
        kind = generator.kind
        if kind not in GENERATOR_KINDS:
            raise ValueError(f"Unknown generator kind: {kind!r}")
        if kind in self._generators:
            logger.warning("Overwriting existing generator: %s", kind)
        self._generators[kind] = generator
        logger.debug("Registered generator: %s", kind)

    def get(self, kind: str) -> Generator | None:
        """Look up a generator by kind."""
        return self._generators.get(kind)

    def kinds(self) -> list[str]:
        """List all registered kinds."""
        return list(self._generators.keys())

    def resolve(self, generator: ApplicationSetGenerator) -> Generator:
        """Find the generator for an entry.

        Raises:
            InvalidGeneratorSpecError: zero or several kinds populated.
            UnsupportedGeneratorError: no generator registered for the kind.
        """
        populated = generator.kinds()
        if not populated:
            raise InvalidGeneratorSpecError("generator entry populates no generator kind")
        if len(populated) > 1:
            raise InvalidGeneratorSpecError(
                f"generator entry populates several kinds: {', '.join(populated)}"
            )

        kind = populated[0]
        impl = self._generators.get(kind)
        if impl is None:
            raise UnsupportedGeneratorError(kind)
        return impl


def default_registry() -> GeneratorRegistry:
    """Registry holding every built-in generator."""
    registry = GeneratorRegistry()
    registry.register(ListGenerator())
    return registry
