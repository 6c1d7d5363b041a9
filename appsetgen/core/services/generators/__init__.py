"""
Generators — turn ApplicationSet generator entries into parameter sequences.

Each generator subclasses ``Generator`` and returns one parameter
record per target the template renderer should stamp out.
"""

from appsetgen.core.services.generators.base import (
    DEFAULT_REQUEUE_AFTER,
    NO_REQUEUE_AFTER,
    Generator,
    ParameterRecord,
    ParameterSequence,
)
from appsetgen.core.services.generators.errors import (
    DecodeError,
    GeneratorError,
    InvalidGeneratorSpecError,
    MissingConfigurationError,
    TypeMismatchError,
    UnsupportedGeneratorError,
)
from appsetgen.core.services.generators.list_generator import ListGenerator
from appsetgen.core.services.generators.registry import GeneratorRegistry, default_registry

__all__ = [
    "DEFAULT_REQUEUE_AFTER",
    "NO_REQUEUE_AFTER",
    "DecodeError",
    "Generator",
    "GeneratorError",
    "GeneratorRegistry",
    "InvalidGeneratorSpecError",
    "ListGenerator",
    "MissingConfigurationError",
    "ParameterRecord",
    "ParameterSequence",
    "TypeMismatchError",
    "UnsupportedGeneratorError",
    "default_registry",
]
