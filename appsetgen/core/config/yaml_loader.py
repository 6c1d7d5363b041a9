"""
JSON-compatible YAML loading.

Everything appsetgen reads as YAML ends up as JSON-shaped data, so it
is loaded the way a YAML-to-JSON conversion would see it:

    - mapping keys become strings while the mapping is built, so keys
      such as ``1`` and ``true`` stay distinct
    - timestamps are not resolved and keep their source text
"""

from __future__ import annotations

import json
from typing import Any

import yaml
from yaml.constructor import ConstructorError

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class JSONCompatibleLoader(yaml.SafeLoader):
    """SafeLoader producing string keys and no date objects."""

    def construct_mapping(self, node: yaml.Node, deep: bool = False) -> dict[str, Any]:
        if not isinstance(node, yaml.MappingNode):
            raise ConstructorError(
                None, None, f"expected a mapping node, but found {node.id}", node.start_mark,
            )
        self.flatten_mapping(node)

        mapping: dict[str, Any] = {}
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=deep)
            if isinstance(key, (dict, list)):
                raise ConstructorError(
                    "while constructing a mapping", node.start_mark,
                    "found a non-scalar key", key_node.start_mark,
                )
            mapping[json_key(key)] = self.construct_object(value_node, deep=deep)
        return mapping


JSONCompatibleLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def json_key(key: Any) -> str:
    """Render a scalar mapping key the way it reads as a JSON object key."""
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    return str(key)


def load_yaml(text: str) -> Any:
    """Parse one YAML document with JSONCompatibleLoader.

    Raises:
        yaml.YAMLError: malformed YAML.
    """
    return yaml.load(text, Loader=JSONCompatibleLoader)
