"""
List generator — parameters written inline in the ApplicationSet.

Records come from ``elements`` first, then from ``elementsYaml``.
Only the ``elements`` records are flattened in the legacy dialect;
``elementsYaml`` records are always passed through unchanged.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from appsetgen.core.models import (
    ApplicationSet,
    ApplicationSetGenerator,
    ApplicationSetTemplate,
)
from appsetgen.core.services.generators.base import (
    NO_REQUEUE_AFTER,
    Generator,
    ParameterSequence,
)
from appsetgen.core.services.generators.decode import decode_element, decode_elements_yaml
from appsetgen.core.services.generators.errors import MissingConfigurationError
from appsetgen.core.services.generators.flatten import flatten_params


class ListGenerator(Generator):
    """Generator over a literal list of elements."""

    kind = "list"

    def generate_params(
        self,
        generator: ApplicationSetGenerator | None,
        appset: ApplicationSet,
        client: Any = None,
    ) -> ParameterSequence:
        if generator is None or generator.list_generator is None:
            raise MissingConfigurationError()

        spec = generator.list_generator
        res: ParameterSequence = [None] * len(spec.elements)

        for i, raw in enumerate(spec.elements):
            element = decode_element(raw)

            if appset.spec.go_template:
                res[i] = element
            elif element:
                # A null element or one without keys leaves its slot unset
                res[i] = flatten_params(element)

        if spec.elements_yaml:
            res.extend(decode_elements_yaml(spec.elements_yaml))

        return res

    def get_template(self, generator: ApplicationSetGenerator) -> ApplicationSetTemplate:
        return generator.list_generator.template

    def get_requeue_after(self, generator: ApplicationSetGenerator) -> timedelta:
        return NO_REQUEUE_AFTER
