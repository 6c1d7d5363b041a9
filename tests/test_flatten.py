"""
Tests for the legacy parameter flattener.
"""

import pytest

from appsetgen.core.services.generators.errors import TypeMismatchError
from appsetgen.core.services.generators.flatten import flatten_params


class TestFlattenParams:
    def test_strings_unchanged(self):
        assert flatten_params({"cluster": "prod", "url": "https://x"}) == {
            "cluster": "prod",
            "url": "https://x",
        }

    def test_values_dotted(self):
        assert flatten_params({"values": {"a": "1", "b": "2"}}) == {
            "values.a": "1",
            "values.b": "2",
        }

    def test_empty_values_mapping(self):
        assert flatten_params({"cluster": "prod", "values": {}}) == {"cluster": "prod"}

    def test_empty_element(self):
        assert flatten_params({}) == {}

    @pytest.mark.parametrize("value", [3, 1.5, True, None, ["a"], {"k": "v"}])
    def test_non_string_rejected(self, value):
        with pytest.raises(TypeMismatchError) as exc:
            flatten_params({"key": value})
        assert exc.value.key == "key"

    @pytest.mark.parametrize("value", ["flat", 3, ["a"], None])
    def test_values_must_be_mapping(self, value):
        with pytest.raises(TypeMismatchError, match="values map"):
            flatten_params({"values": value})

    def test_nested_non_string_rejected(self):
        with pytest.raises(TypeMismatchError) as exc:
            flatten_params({"values": {"ok": "1", "bad": {"deep": "x"}}})
        assert exc.value.key == "values.bad"

    def test_input_not_modified(self):
        element = {"cluster": "prod", "values": {"a": "1"}}
        flatten_params(element)
        assert element == {"cluster": "prod", "values": {"a": "1"}}
