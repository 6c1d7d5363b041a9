"""
Value decoder — encoded documents in, generic structured values out.

Elements travel as raw JSON; ``elementsYaml`` is YAML text loaded with
string keys and unresolved timestamps, then checked to be JSON-encodable,
so both sources yield the same shapes.  A ``null`` document or item
decodes to ``None``: a record slot without parameters.
"""

from __future__ import annotations

import json
from typing import Any

import yaml

from appsetgen.core.config.yaml_loader import load_yaml
from appsetgen.core.services.generators.errors import DecodeError


def decode_element(raw: bytes | str) -> dict[str, Any] | None:
    """Decode one raw JSON element into a mapping.

    A JSON ``null`` decodes to ``None``.

    Raises:
        DecodeError: malformed JSON (including ``NaN`` and ``Infinity``),
            or a document that is not a mapping.
    """
    try:
        value = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise DecodeError("error unmarshalling list element", e) from e

    if value is not None and not isinstance(value, dict):
        raise DecodeError(
            f"error unmarshalling list element: expected an object, got {_json_type(value)}"
        )
    return value


def decode_elements_yaml(text: str) -> list[dict[str, Any] | None]:
    """Decode a YAML document holding a sequence of mappings.

    An empty document decodes to an empty list; ``null`` items decode
    to ``None``.

    Raises:
        DecodeError: malformed YAML, values with no JSON form, or a
            document of the wrong shape.
    """
    try:
        data = load_yaml(text)
    except yaml.YAMLError as e:
        raise DecodeError("error unmarshalling decoded ElementsYaml", e) from e

    try:
        # Explicitly tagged values (!!binary, !!timestamp) become text
        data = json.loads(json.dumps(data, default=str, allow_nan=False))
    except ValueError as e:
        raise DecodeError("error converting ElementsYaml to JSON", e) from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise DecodeError(
            f"error unmarshalling decoded ElementsYaml: expected a list, got {_json_type(data)}"
        )

    for i, item in enumerate(data):
        if item is not None and not isinstance(item, dict):
            raise DecodeError(
                f"error unmarshalling decoded ElementsYaml: item {i} is "
                f"{_json_type(item)}, expected an object"
            )
    return data


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON value {name}")


def _json_type(value: Any) -> str:
    """JSON type name of a decoded value, for error messages."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "null"
