"""
ApplicationSet models — the declarative input of every generator.

An ApplicationSet owns a list of generator entries and a template.
Each generator entry populates exactly one generator kind; the
generator for that kind turns it into a parameter sequence that the
template renderer stamps out once per record.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Every generator kind an entry may populate, keyed by manifest field name.
GENERATOR_KINDS: tuple[str, ...] = (
    "list",
    "clusters",
    "git",
    "scmProvider",
    "clusterDecisionResource",
    "pullRequest",
    "matrix",
    "merge",
    "plugin",
)


class ApplicationSetTemplate(BaseModel):
    """Template stamped out once per parameter record.

    Generators never look inside it; the caller merges a generator's
    override over the set-level template.
    """

    model_config = ConfigDict(populate_by_name=True)

    metadata: dict[str, Any] = Field(default_factory=dict)
    spec: dict[str, Any] = Field(default_factory=dict)

    def is_empty(self) -> bool:
        """Whether neither metadata nor spec carry anything."""
        return not self.metadata and not self.spec


class ListGeneratorSpec(BaseModel):
    """Configuration of the List generator.

    Attributes:
        elements:      Opaque encoded documents, one per output record.
                       Normalized to raw JSON bytes on construction.
        elements_yaml: Optional YAML text holding more records.
        template:      Generator-level template override.
    """

    model_config = ConfigDict(populate_by_name=True)

    elements: list[bytes] = Field(default_factory=list)
    elements_yaml: str = Field(default="", alias="elementsYaml")
    template: ApplicationSetTemplate = Field(default_factory=ApplicationSetTemplate)

    @field_validator("elements", mode="before")
    @classmethod
    def _encode_elements(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            return value  # let pydantic report the type error
        return [_encode_raw(i, item) for i, item in enumerate(value)]


def _encode_raw(index: int, item: Any) -> bytes:
    """Encode one element the way it travels on the wire: raw JSON bytes."""
    if isinstance(item, bytes):
        return item
    if isinstance(item, bytearray):
        return bytes(item)
    if isinstance(item, str):
        # Strings are already-encoded JSON text
        return item.encode("utf-8")
    try:
        return json.dumps(item, default=str, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        # pydantic reports ValueError, not TypeError, as a ValidationError
        raise ValueError(f"element {index} has no JSON form: {e}") from e


class ApplicationSetGenerator(BaseModel):
    """One generator entry of an ApplicationSet.

    Only ``list`` is modeled in detail; the network-backed kinds are
    kept as opaque mappings so that they can be recognised and reported.
    """

    model_config = ConfigDict(populate_by_name=True)

    list_generator: ListGeneratorSpec | None = Field(default=None, alias="list")
    clusters: dict[str, Any] | None = None
    git: dict[str, Any] | None = None
    scm_provider: dict[str, Any] | None = Field(default=None, alias="scmProvider")
    cluster_decision_resource: dict[str, Any] | None = Field(
        default=None, alias="clusterDecisionResource",
    )
    pull_request: dict[str, Any] | None = Field(default=None, alias="pullRequest")
    matrix: dict[str, Any] | None = None
    merge: dict[str, Any] | None = None
    plugin: dict[str, Any] | None = None

    def kinds(self) -> list[str]:
        """Names of the populated generator kinds, in declaration order."""
        populated = []
        for name, field in type(self).model_fields.items():
            if getattr(self, name) is not None:
                populated.append(field.alias or name)
        return populated


class ApplicationSetSpec(BaseModel):
    """Desired state of an ApplicationSet."""

    model_config = ConfigDict(populate_by_name=True)

    go_template: bool = Field(default=False, alias="goTemplate")
    go_template_options: list[str] = Field(default_factory=list, alias="goTemplateOptions")
    generators: list[ApplicationSetGenerator] = Field(default_factory=list)
    template: ApplicationSetTemplate = Field(default_factory=ApplicationSetTemplate)


class ApplicationSet(BaseModel):
    """The owning set, a read-only input to generation."""

    model_config = ConfigDict(populate_by_name=True)

    api_version: str = Field(default="argoproj.io/v1alpha1", alias="apiVersion")
    kind: str = "ApplicationSet"
    metadata: dict[str, Any] = Field(default_factory=dict)
    spec: ApplicationSetSpec = Field(default_factory=ApplicationSetSpec)

    @property
    def name(self) -> str:
        return str(self.metadata.get("name", ""))
