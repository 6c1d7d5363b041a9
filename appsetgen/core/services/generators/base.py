"""
Generator base — the contract every generator kind implements.

Callers only talk to generators through this interface and never
care which kind produced a parameter sequence.

To create a new generator:
    1. Subclass Generator and set ``kind`` to the manifest field name
    2. Implement generate_params, get_template, get_requeue_after
    3. Register an instance in the GeneratorRegistry
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, ClassVar

from appsetgen.core.models import (
    ApplicationSet,
    ApplicationSetGenerator,
    ApplicationSetTemplate,
)

# Inputs are static: re-generate only when the ApplicationSet changes.
NO_REQUEUE_AFTER = timedelta(0)

# Polling interval for generators that watch external state.
DEFAULT_REQUEUE_AFTER = timedelta(minutes=3)

ParameterRecord = dict[str, Any]
ParameterSequence = list[ParameterRecord | None]


class Generator(ABC):
    """Abstract base class for all generators.

    Generators are stateless: one instance may serve concurrent calls
    for different ApplicationSets.  They never mutate their inputs and
    raise a GeneratorError on the first bad input.
    """

    kind: ClassVar[str] = ""

    @abstractmethod
    def generate_params(
        self,
        generator: ApplicationSetGenerator | None,
        appset: ApplicationSet,
        client: Any = None,
    ) -> ParameterSequence:
        """Produce the ordered parameter sequence for one generator entry.

        Args:
            generator: The generator entry of the ApplicationSet.
            appset: The owning ApplicationSet (read-only).
            client: Opaque cluster-access capability, for kinds that
                query a live cluster.
        """

    @abstractmethod
    def get_template(self, generator: ApplicationSetGenerator) -> ApplicationSetTemplate:
        """Return the generator's own template override (not a copy)."""

    @abstractmethod
    def get_requeue_after(self, generator: ApplicationSetGenerator) -> timedelta:
        """How long until generation should be re-run, or NO_REQUEUE_AFTER."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} kind={self.kind!r}>"
