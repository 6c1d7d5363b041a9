"""
Manifest loader — reads an ApplicationSet manifest into domain models.

This is the primary entry point for loading generator input from
disk.  It reads YAML with string keys, validates against Pydantic
schemas, and returns a typed ApplicationSet.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from appsetgen.core.config.yaml_loader import load_yaml
from appsetgen.core.models import ApplicationSet

logger = logging.getLogger(__name__)

# Default manifest filename
APPSET_FILE = "appset.yml"

APPSET_KIND = "ApplicationSet"


class ConfigError(Exception):
    """Raised when the ApplicationSet manifest is invalid or missing."""


def find_appset_file(start_dir: Path | None = None) -> Path | None:
    """Search for appset.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to appset.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / APPSET_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_appset(path: Path | None = None) -> ApplicationSet:
    """Load and validate an ApplicationSet manifest.

    Args:
        path: Explicit path to the manifest. If None, searches upward.

    Returns:
        Validated ApplicationSet model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_appset_file()

    if path is None:
        raise ConfigError(f"No {APPSET_FILE} found. Specify one with --config.")

    if not path.is_file():
        raise ConfigError(f"Manifest not found: {path}")

    logger.debug("Loading ApplicationSet manifest from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = load_yaml(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    kind = data.get("kind", APPSET_KIND)
    if kind != APPSET_KIND:
        raise ConfigError(f"Expected kind {APPSET_KIND} in {path}, got {kind!r}")

    if not isinstance(data.get("spec"), dict):
        raise ConfigError(f"Missing 'spec' mapping in {path}")

    try:
        appset = ApplicationSet.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid ApplicationSet manifest: {e}") from e

    logger.info(
        "Loaded ApplicationSet '%s' with %d generators",
        appset.name, len(appset.spec.generators),
    )
    return appset
