"""Unit tests for class emission (jsonclass.engine.emitter).

Tests cover:
- Exact class text for every language, with and without accessors
- Import detection (dates, lists) and profiles without those imports
- Nested object type names and caller-supplied renames
- Empty objects, key order, values that look like template placeholders
"""

from __future__ import annotations

import pytest

from jsonclass.engine.emitter import emit_class, required_imports
from jsonclass.profiles import Language, get_profile

pytestmark = pytest.mark.unit


def _emit(language: Language, obj, use_accessors: bool = False, **kwargs) -> str:
    return emit_class("MainClass", obj, get_profile(language), use_accessors, **kwargs)


# ---------------------------------------------------------------------------
# Python
# ---------------------------------------------------------------------------


class TestPythonEmission:
    def test_plain_properties(self):
        code = _emit(Language.PYTHON, {"city": "NYC", "age": 3})
        assert code == (
            "class MainClass:\n"
            "    def __init__(self, city: str, age: int):\n"
            "        self.city: str = city\n"
            "        self.age: int = age"
        )

    def test_accessors(self):
        code = _emit(Language.PYTHON, {"city": "NYC"}, use_accessors=True)
        assert code == (
            "class MainClass:\n"
            "    def __init__(self, city: str):\n"
            "        self._city: str = city\n"
            "\n"
            "    @property\n"
            "    def city(self) -> str:\n"
            "        return self._city\n"
            "\n"
            "    @city.setter\n"
            "    def city(self, value: str) -> None:\n"
            "        self._city = value"
        )

    def test_empty_object(self):
        assert _emit(Language.PYTHON, {}) == (
            "class MainClass:\n"
            "    def __init__(self):\n"
            "        pass"
        )

    def test_date_import(self):
        code = _emit(Language.PYTHON, {"when": "2024-01-15"})
        assert code.startswith("from datetime import datetime\n\nclass MainClass:")
        assert "self.when: datetime = when" in code

    def test_list_needs_no_import(self):
        code = _emit(Language.PYTHON, {"tags": ["a"]})
        assert code.startswith("class MainClass:")
        assert "self.tags: list[str] = tags" in code

    def test_nested_object_uses_capitalised_key(self):
        code = _emit(Language.PYTHON, {"address": {"city": "NYC"}})
        assert "self.address: Address = address" in code

    def test_nested_names_override(self):
        code = _emit(
            Language.PYTHON,
            {"address": {"city": "NYC"}},
            nested_names={"address": "WorkAddress"},
        )
        assert "self.address: WorkAddress = address" in code


# ---------------------------------------------------------------------------
# Java
# ---------------------------------------------------------------------------


class TestJavaEmission:
    def test_plain_fields_and_list_import(self):
        code = _emit(Language.JAVA, {"city": "NYC", "tags": [1]})
        assert code == (
            "import java.util.List;\n"
            "\n"
            "public class MainClass {\n"
            "    public String city;\n"
            "    public List<Integer> tags;\n"
            "}"
        )

    def test_accessors(self):
        code = _emit(Language.JAVA, {"city": "NYC"}, use_accessors=True)
        assert code == (
            "public class MainClass {\n"
            "    private String city;\n"
            "\n"
            "    public String getCity() {\n"
            "        return city;\n"
            "    }\n"
            "\n"
            "    public void setCity(String city) {\n"
            "        this.city = city;\n"
            "    }\n"
            "}"
        )

    def test_date_and_list_imports_in_order(self):
        code = _emit(Language.JAVA, {"tags": [], "when": "2024-01-15"})
        assert code.startswith(
            "import java.time.LocalDateTime;\nimport java.util.List;\n\npublic class MainClass {"
        )

    def test_empty_object(self):
        assert _emit(Language.JAVA, {}) == "public class MainClass {\n}"


# ---------------------------------------------------------------------------
# TypeScript / JavaScript
# ---------------------------------------------------------------------------


class TestTypeScriptEmission:
    def test_plain_public_property(self):
        assert _emit(Language.TYPESCRIPT, {"city": "NYC"}) == (
            "export class MainClass {\n"
            "    city: string;\n"
            "}"
        )

    def test_accessors_use_private_prefixed_storage(self):
        code = _emit(Language.TYPESCRIPT, {"city": "NYC"}, use_accessors=True)
        assert code == (
            "export class MainClass {\n"
            "    private _city: string;\n"
            "\n"
            "    public get city(): string {\n"
            "        return this._city;\n"
            "    }\n"
            "\n"
            "    public set city(value: string) {\n"
            "        this._city = value;\n"
            "    }\n"
            "}"
        )

    def test_date_needs_no_import(self):
        code = _emit(Language.TYPESCRIPT, {"when": "2024-01-15", "tags": [1]})
        assert code.startswith("export class MainClass {")
        assert "    when: Date;" in code
        assert "    tags: number[];" in code


class TestJavaScriptEmission:
    def test_plain_fields(self):
        assert _emit(Language.JAVASCRIPT, {"city": "NYC", "n": 1}) == (
            "export class MainClass {\n"
            "    city;\n"
            "    n;\n"
            "}"
        )

    def test_accessors_use_private_fields(self):
        code = _emit(Language.JAVASCRIPT, {"city": "NYC"}, use_accessors=True)
        assert code == (
            "export class MainClass {\n"
            "    #city;\n"
            "\n"
            "    get city() {\n"
            "        return this.#city;\n"
            "    }\n"
            "\n"
            "    set city(value) {\n"
            "        this.#city = value;\n"
            "    }\n"
            "}"
        )


# ---------------------------------------------------------------------------
# Go
# ---------------------------------------------------------------------------


class TestGoEmission:
    def test_exported_fields_with_tags_and_time_import(self):
        code = _emit(Language.GO, {"city": "NYC", "createdAt": "2024-01-15"})
        assert code == (
            "import (\n"
            '    "time"\n'
            ")\n"
            "\n"
            "type MainClass struct {\n"
            '    City string `json:"city"`\n'
            '    CreatedAt time.Time `json:"createdAt"`\n'
            "}"
        )

    def test_accessors_follow_the_struct(self):
        code = _emit(Language.GO, {"city": "NYC"}, use_accessors=True)
        assert code == (
            "type MainClass struct {\n"
            '    city string `json:"city"`\n'
            "}\n"
            "\n"
            "func (s *MainClass) GetCity() string {\n"
            "    return s.city\n"
            "}\n"
            "\n"
            "func (s *MainClass) SetCity(value string) {\n"
            "    s.city = value\n"
            "}"
        )

    def test_null_and_empty_list_types(self):
        code = _emit(Language.GO, {"x": None, "items": []})
        assert '    X interface{} `json:"x"`' in code
        assert '    Items []map[string]interface{} `json:"items"`' in code


# ---------------------------------------------------------------------------
# Ruby
# ---------------------------------------------------------------------------


class TestRubyEmission:
    def test_initializer_sets_instance_variables(self):
        code = _emit(Language.RUBY, {"City": "NYC", "age": 3})
        assert code == (
            "class MainClass\n"
            "  def initialize(city, age)\n"
            "    @city = city\n"
            "    @age = age\n"
            "  end\n"
            "end"
        )

    def test_attr_accessor_before_initializer(self):
        code = _emit(Language.RUBY, {"city": "NYC"}, use_accessors=True)
        assert code == (
            "class MainClass\n"
            "  attr_accessor :city\n"
            "\n"
            "  def initialize(city)\n"
            "    @city = city\n"
            "  end\n"
            "end"
        )

    def test_empty_object(self):
        assert _emit(Language.RUBY, {}) == "class MainClass\n  def initialize\n  end\nend"

    def test_date_require(self):
        code = _emit(Language.RUBY, {"when": "15/01/2024"})
        assert code.startswith('require "date"\n\nclass MainClass')


# ---------------------------------------------------------------------------
# Cross-language behaviour
# ---------------------------------------------------------------------------


class TestEmissionGeneral:
    def test_key_order_is_preserved(self, any_profile):
        code = emit_class("MainClass", {"zeta": 1, "alpha": 2, "mid": 3}, any_profile)
        lowered = code.lower()
        assert lowered.index("zeta") < lowered.index("alpha") < lowered.index("mid")

    def test_emission_is_pure(self, any_profile, nested_document):
        first = emit_class("MainClass", nested_document, any_profile, True)
        second = emit_class("MainClass", nested_document, any_profile, True)
        assert first == second

    def test_placeholder_shaped_values_are_not_substituted_again(self, python_profile):
        code = emit_class("MainClass", {"{{ name }}": 1, "{type}": 2}, python_profile)
        assert "self.{{ name }}: int = {{ name }}" in code
        assert "self.{type}: int = {type}" in code

    def test_header_contains_class_name(self, any_profile):
        code = emit_class("Customer", {"a": 1}, any_profile)
        assert "Customer" in code.splitlines()[0]


class TestRequiredImports:
    def test_none(self, python_profile):
        assert required_imports({"a": 1}, python_profile) == []

    def test_only_direct_properties_are_inspected(self):
        java = get_profile(Language.JAVA)
        assert required_imports({"inner": {"when": "2024-01-15", "tags": []}}, java) == []

    def test_date_then_list(self):
        java = get_profile(Language.JAVA)
        assert required_imports({"tags": [], "when": "2024-01-15"}, java) == [
            "import java.time.LocalDateTime;",
            "import java.util.List;",
        ]

    def test_empty_import_entries_are_skipped(self, typescript_profile):
        assert required_imports({"when": "2024-01-15", "tags": []}, typescript_profile) == []
