"""Unit tests for type inference (jsonclass.engine.inference).

Tests cover:
- Scalar typing for every JSON kind
- List typing from the first element only
- Named versus anonymous objects
- Date recognition, including shape matches that are not real dates
"""

from __future__ import annotations

import pytest

from jsonclass.engine.inference import infer_type, is_date_string, is_plain_object
from jsonclass.profiles import Language, get_profile

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# infer_type
# ---------------------------------------------------------------------------


class TestInferScalars:
    def test_integer(self, python_profile):
        assert infer_type(42, python_profile) == "int"

    def test_float(self, python_profile):
        assert infer_type(42.5, python_profile) == "float"

    def test_integral_float_is_integer(self, python_profile):
        assert infer_type(42.0, python_profile) == "int"

    def test_string(self, python_profile):
        assert infer_type("hello", python_profile) == "str"

    def test_boolean(self, python_profile):
        assert infer_type(True, python_profile) == "bool"
        assert infer_type(False, python_profile) == "bool"

    def test_null(self, python_profile):
        assert infer_type(None, python_profile) == "None"

    def test_date(self, python_profile):
        assert infer_type("2024-01-15", python_profile) == "datetime"

    def test_unrecognised_value_falls_back_to_object(self, python_profile):
        assert infer_type(object(), python_profile) == "dict"

    def test_uses_profile_vocabulary(self):
        java = get_profile(Language.JAVA)
        assert infer_type(1, java) == "int"
        assert infer_type(1.5, java) == "double"
        assert infer_type("x", java) == "String"
        assert infer_type("2024-01-15", java) == "LocalDateTime"

    def test_javascript_types_are_empty(self):
        js = get_profile(Language.JAVASCRIPT)
        assert infer_type(1, js) == ""
        assert infer_type([1], js) == ""


class TestInferLists:
    def test_list_of_integers(self, python_profile):
        assert infer_type([1, 2, 3], python_profile) == "list[int]"

    def test_empty_list_is_list_of_object(self, python_profile):
        assert infer_type([], python_profile) == "list[dict]"

    def test_only_first_element_is_sampled(self, python_profile):
        assert infer_type([1, "two", 3.5], python_profile) == "list[int]"

    def test_nested_lists(self, python_profile):
        assert infer_type([[1.5]], python_profile) == "list[list[float]]"

    def test_list_of_objects_without_hint(self, python_profile):
        assert infer_type([{"a": 1}], python_profile) == "list[dict]"

    def test_list_hint_is_forwarded_to_first_element(self, python_profile):
        assert infer_type([{"a": 1}], python_profile, "Item") == "list[Item]"

    def test_typescript_list_syntax(self, typescript_profile):
        assert infer_type(["a"], typescript_profile) == "string[]"
        assert infer_type([], typescript_profile) == "object[]"

    def test_go_list_syntax(self):
        assert infer_type([1], get_profile(Language.GO)) == "[]int"

    def test_java_boxes_list_items(self):
        java = get_profile(Language.JAVA)
        assert infer_type([1, 2], java) == "List<Integer>"
        assert infer_type([True], java) == "List<Boolean>"
        assert infer_type([1.5], java) == "List<Double>"
        assert infer_type(["a"], java) == "List<String>"

    def test_ruby_lists_are_plain_arrays(self):
        assert infer_type([1, 2], get_profile(Language.RUBY)) == "Array"


class TestInferObjects:
    def test_named_object_uses_hint(self, python_profile):
        assert infer_type({"city": "NYC"}, python_profile, "Address") == "Address"

    def test_anonymous_object(self, python_profile):
        assert infer_type({"city": "NYC"}, python_profile) == "dict"

    def test_hint_is_ignored_for_scalars(self, python_profile):
        assert infer_type(3, python_profile, "Count") == "int"


# ---------------------------------------------------------------------------
# is_date_string
# ---------------------------------------------------------------------------


class TestIsDateString:
    @pytest.mark.parametrize(
        "value",
        [
            "2024-01-15",
            "2024-01-15T10:30:00",
            "2024-01-15T10:30:00Z",
            "2024-01-15T10:30:00.123+02:00",
            "2024/01/15",
            "15/01/2024",
            "15-01-2024",
            "29/02/2024",
        ],
    )
    def test_recognised(self, value):
        assert is_date_string(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "99-99-9999",
            "2024-02-30",
            "2023-02-29",
            "2024-13-01",
            "31/04/2024",
            "2024-01-15T25:00:00",
            "2024-01-15T10:30:00 and then some",
            "Jan 15 2024",
            "2024-1-5",
            "hello",
            "",
        ],
    )
    def test_rejected(self, value):
        assert is_date_string(value) is False

    def test_non_string(self):
        assert is_date_string(20240115) is False
        assert is_date_string(None) is False


class TestIsPlainObject:
    def test_dict(self):
        assert is_plain_object({}) is True

    @pytest.mark.parametrize("value", [[], None, "x", 1, True])
    def test_non_objects(self, value):
        assert is_plain_object(value) is False
