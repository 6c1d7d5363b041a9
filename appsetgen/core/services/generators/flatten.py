"""
Parameter flattener — structured mapping to legacy flat record.

Legacy (non go-template) consumers only understand string keys with
string values.  The reserved ``values`` key is the one place nesting
is allowed: its entries become ``values.<key>``.
"""

from __future__ import annotations

from typing import Any

from appsetgen.core.services.generators.errors import TypeMismatchError

VALUES_KEY = "values"


def flatten_params(element: dict[str, Any]) -> dict[str, str]:
    """Build the legacy flat record for one decoded element.

    Raises:
        TypeMismatchError: a value is not a string, or ``values`` is
            not a mapping.
    """
    params: dict[str, str] = {}

    for key, value in element.items():
        if key == VALUES_KEY:
            if not isinstance(value, dict):
                raise TypeMismatchError("error parsing values map", key=key)
            for k, v in value.items():
                if not isinstance(v, str):
                    raise TypeMismatchError(
                        f"error parsing value as string: {VALUES_KEY}.{k}",
                        key=f"{VALUES_KEY}.{k}",
                    )
                params[f"{VALUES_KEY}.{k}"] = v
        else:
            if not isinstance(value, str):
                raise TypeMismatchError(f"error parsing value as string: {key}", key=key)
            params[key] = value

    return params
