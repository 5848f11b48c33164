"""Python profile: a plain class whose ``__init__`` assigns annotated attributes."""

from __future__ import annotations

from jsonclass.profiles.models import (
    AccessorPlacement,
    ErrorMessages,
    Formatters,
    Language,
    LanguageProfile,
    Templates,
    TypeTable,
)


def _import_statements(imports: list[str]) -> str:
    if not imports:
        return ""
    return "\n".join(imports) + "\n\n"


PYTHON_PROFILE = LanguageProfile(
    language=Language.PYTHON,
    types=TypeTable(
        STRING="str",
        INTEGER="int",
        FLOAT="float",
        BOOLEAN="bool",
        NULL="None",
        LIST="list",
        OBJECT="dict",
        DATE="datetime",
        ANY="Any",
    ),
    imports={
        "TYPING": "from typing import Any",
        "DATE": "from datetime import datetime",
    },
    templates=Templates(
        CLASS_DEFINITION="class {{ class_name }}:",
        CONSTRUCTOR_TEMPLATE=(
            "    def __init__(self{% if parameters %}, {{ parameters }}{% endif %}):"
        ),
        PROPERTY_TEMPLATE="        self.{{ prefix }}{{ name }}: {{ type }} = {{ name }}",
        GETTER_TEMPLATE=(
            "\n"
            "    @property\n"
            "    def {{ name }}(self) -> {{ type }}:\n"
            "        return self.{{ prefix }}{{ name }}"
        ),
        SETTER_TEMPLATE=(
            "\n"
            "    @{{ name }}.setter\n"
            "    def {{ name }}(self, value: {{ type }}) -> None:\n"
            "        self.{{ prefix }}{{ name }} = value"
        ),
        EMPTY_BODY="        pass",
        CLASS_END="",
    ),
    formatters=Formatters(
        list_type=lambda item_type: f"list[{item_type}]",
        import_statements=_import_statements,
        parameter=lambda name, type_name: f"{name}: {type_name}",
    ),
    error_messages=ErrorMessages(
        INVALID_JSON="# Error: Invalid JSON",
        INVALID_INPUT="# Error: Input must be a JSON object",
        UNKNOWN_ERROR="# An unknown error occurred",
    ),
    private_prefix="_",
    accessor_placement=AccessorPlacement.AFTER_PROPERTIES,
    comment_prefix="#",
)
