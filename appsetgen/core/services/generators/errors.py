"""
Generator errors — raised on the first malformed or missing input.

Generators never log, retry or swallow these; the caller decides how
to surface them (typically as a condition on the owning set).
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for every generation failure."""


class MissingConfigurationError(GeneratorError):
    """The generator entry, or its sub-configuration for this kind, is absent."""

    def __init__(self, message: str = "generator is empty"):
        super().__init__(message)


class DecodeError(GeneratorError):
    """An encoded element could not be parsed into structured data."""

    def __init__(self, message: str, cause: Exception | None = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


class TypeMismatchError(GeneratorError):
    """A legacy-dialect value had the wrong shape."""

    def __init__(self, message: str, key: str = ""):
        super().__init__(message)
        self.key = key


class UnsupportedGeneratorError(GeneratorError):
    """No generator is registered for the populated kind."""

    def __init__(self, kind: str):
        super().__init__(f"unsupported generator kind: {kind}")
        self.kind = kind


class InvalidGeneratorSpecError(GeneratorError):
    """A generator entry populates zero or several kinds."""
