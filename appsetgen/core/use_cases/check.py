"""
Check use case — validate an ApplicationSet manifest and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from appsetgen.core.config.loader import ConfigError, find_appset_file, load_appset
from appsetgen.core.models import ApplicationSet
from appsetgen.core.services.generators import (
    GeneratorRegistry,
    InvalidGeneratorSpecError,
    UnsupportedGeneratorError,
    default_registry,
)


@dataclass
class CheckResult:
    """Result of manifest validation."""

    valid: bool = False
    appset: ApplicationSet | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "appset_name": self.appset.name if self.appset else None,
            "generator_count": len(self.appset.spec.generators) if self.appset else 0,
            "go_template": self.appset.spec.go_template if self.appset else False,
        }


def check_appset(
    config_path: Path | None = None,
    registry: GeneratorRegistry | None = None,
) -> CheckResult:
    """Validate a manifest and report issues.

    Args:
        config_path: Optional explicit path to the manifest.
        registry: Generator dispatch table (default: built-in generators).

    Returns:
        CheckResult with validation status and any issues.
    """
    result = CheckResult()
    registry = registry or default_registry()

    if config_path is None:
        config_path = find_appset_file()

    if config_path is None:
        result.errors.append("No appset.yml found.")
        return result

    result.config_path = config_path

    try:
        appset = load_appset(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result
    result.appset = appset

    if not appset.spec.generators:
        result.warnings.append("No generators defined. Nothing will be generated.")

    for index, entry in enumerate(appset.spec.generators):
        try:
            registry.resolve(entry)
        except InvalidGeneratorSpecError as e:
            result.errors.append(f"Generator {index}: {e}")
        except UnsupportedGeneratorError as e:
            result.warnings.append(f"Generator {index}: {e}")

    if appset.spec.go_template_options and not appset.spec.go_template:
        result.warnings.append("goTemplateOptions is set but goTemplate is disabled.")

    result.valid = len(result.errors) == 0
    return result
