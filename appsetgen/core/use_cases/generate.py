"""
Generate use case — run every generator of an ApplicationSet.

This is the caller side of the generator contract: it resolves each
generator entry, collects its parameter sequence, merges the
generator-level template override over the set template, and folds
the requeue hints into a single one.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from appsetgen.core.config.settings import Settings
from appsetgen.core.models import ApplicationSet, ApplicationSetTemplate
from appsetgen.core.services.generators import (
    NO_REQUEUE_AFTER,
    GeneratorError,
    GeneratorRegistry,
    ParameterSequence,
    default_registry,
)

logger = logging.getLogger(__name__)


@dataclass
class GeneratorResult:
    """Output of one generator entry."""

    index: int
    kind: str
    params: ParameterSequence = field(default_factory=list)
    template: ApplicationSetTemplate = field(default_factory=ApplicationSetTemplate)
    requeue_after: timedelta = NO_REQUEUE_AFTER

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "kind": self.kind,
            "params": self.params,
            "template": self.template.model_dump(),
            "requeue_after_seconds": int(self.requeue_after.total_seconds()),
        }


@dataclass
class GenerateResult:
    """Result of running all generators of an ApplicationSet."""

    appset_name: str = ""
    results: list[GeneratorResult] = field(default_factory=list)
    requeue_after: timedelta = NO_REQUEUE_AFTER
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def param_count(self) -> int:
        return sum(len(r.params) for r in self.results)

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "appset": self.appset_name,
            "error": self.error,
            "param_count": self.param_count,
            "requeue_after_seconds": int(self.requeue_after.total_seconds()),
            "generators": [r.to_dict() for r in self.results],
        }


def run_generate(
    appset: ApplicationSet,
    registry: GeneratorRegistry | None = None,
    client: Any = None,
    settings: Settings | None = None,
) -> GenerateResult:
    """Run every generator of ``appset`` in declaration order.

    The first generator failure aborts the run; the result then carries
    the error and no generator results.

    Args:
        appset: The owning ApplicationSet (not modified).
        registry: Generator dispatch table (default: built-in generators).
        client: Opaque cluster-access capability passed to generators.
        settings: Process settings (default: all defaults).

    Returns:
        GenerateResult with per-generator parameters or an error.
    """
    registry = registry or default_registry()
    settings = settings or Settings()
    result = GenerateResult(appset_name=appset.name)

    results: list[GeneratorResult] = []
    for index, entry in enumerate(appset.spec.generators):
        try:
            generator = registry.resolve(entry)
            params = generator.generate_params(entry, appset, client)
        except GeneratorError as e:
            logger.warning(
                "Generator %d of ApplicationSet '%s' failed: %s", index, appset.name, e,
            )
            result.error = f"generator {index}: {e}"
            return result

        logger.debug(
            "Generator %d (%s) produced %d parameter sets", index, generator.kind, len(params),
        )
        results.append(GeneratorResult(
            index=index,
            kind=generator.kind,
            params=params,
            template=merge_template(appset.spec.template, generator.get_template(entry)),
            requeue_after=generator.get_requeue_after(entry),
        ))

    total = sum(len(r.params) for r in results)
    if settings.max_elements and total > settings.max_elements:
        result.error = (
            f"ApplicationSet produced {total} parameter sets, "
            f"more than the allowed {settings.max_elements}"
        )
        logger.warning("%s", result.error)
        return result

    result.results = results
    result.requeue_after = min_requeue_after([r.requeue_after for r in results])
    return result


def min_requeue_after(hints: list[timedelta]) -> timedelta:
    """Smallest positive hint, or NO_REQUEUE_AFTER when nothing polls."""
    res = NO_REQUEUE_AFTER
    for hint in hints:
        if hint > NO_REQUEUE_AFTER and (res == NO_REQUEUE_AFTER or hint < res):
            res = hint
    return res


def merge_template(
    base: ApplicationSetTemplate,
    override: ApplicationSetTemplate | None,
) -> ApplicationSetTemplate:
    """Merge a generator-level override over the set-level template.

    Non-empty override values win; mappings are merged recursively.
    Neither input is modified.
    """
    if override is None or override.is_empty():
        return base.model_copy(deep=True)

    merged = _merge_dict(base.model_dump(), override.model_dump())
    return ApplicationSetTemplate.model_validate(merged)


def _merge_dict(dst: dict[str, Any], src: dict[str, Any]) -> dict[str, Any]:
    out = copy.deepcopy(dst)
    for key, value in src.items():
        if _is_empty(value):
            continue
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge_dict(out[key], value)
        else:
            out[key] = copy.deepcopy(value)
    return out


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == {} or value == []
