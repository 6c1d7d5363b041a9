"""
Domain models — Pydantic types for ApplicationSets and their generators.

All models are re-exported here for convenient access:

    from appsetgen.core.models import ApplicationSet, ApplicationSetGenerator
"""

from appsetgen.core.models.appset import (
    GENERATOR_KINDS,
    ApplicationSet,
    ApplicationSetGenerator,
    ApplicationSetSpec,
    ApplicationSetTemplate,
    ListGeneratorSpec,
)

__all__ = [
    "GENERATOR_KINDS",
    "ApplicationSet",
    "ApplicationSetGenerator",
    "ApplicationSetSpec",
    "ApplicationSetTemplate",
    "ListGeneratorSpec",
]
