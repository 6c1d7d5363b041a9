"""
Process settings — read once from the environment at startup.

The resulting ``Settings`` value is immutable and passed explicitly to
whatever needs it; nothing else in the code base reads ``os.environ``.

Environment variables:
    APPSETGEN_LOG_LEVEL       console log level (default WARNING)
    APPSETGEN_LOG_FILE        optional log file path
    APPSETGEN_LOG_FILE_LEVEL  log file level (default: console level)
    APPSETGEN_MAX_ELEMENTS    cap on parameters per ApplicationSet (0 = no cap)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

ENV_PREFIX = "APPSETGEN_"

MAX_ELEMENTS_LIMIT = 100_000


class Settings(BaseModel):
    """Immutable process configuration."""

    model_config = ConfigDict(frozen=True)

    log_level: str = "WARNING"
    log_file: str | None = None
    log_file_level: str | None = None
    max_elements: int = 0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (default: ``os.environ``).
        """
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL") or "WARNING",
            log_file=env.get(f"{ENV_PREFIX}LOG_FILE") or None,
            log_file_level=env.get(f"{ENV_PREFIX}LOG_FILE_LEVEL") or None,
            max_elements=parse_num(
                env, f"{ENV_PREFIX}MAX_ELEMENTS", default=0, minimum=0, maximum=MAX_ELEMENTS_LIMIT,
            ),
        )


def parse_num(
    env: Mapping[str, str],
    name: str,
    default: int,
    minimum: int,
    maximum: int,
) -> int:
    """Read an integer variable, falling back to ``default`` when unset,
    malformed or outside ``[minimum, maximum]``."""
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Invalid integer in %s=%r, using default %d", name, raw, default)
        return default
    if value < minimum or value > maximum:
        logger.warning(
            "%s=%d outside [%d, %d], using default %d", name, value, minimum, maximum, default,
        )
        return default
    return value
