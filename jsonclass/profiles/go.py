"""Go profile: a struct with JSON tags; accessors are methods after the struct."""

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
from jsonclass.utils import capitalize, lower_first


def _property_name(name: str, use_accessors: bool) -> str:
    # Fields behind accessors are unexported; plain fields must be exported.
    return lower_first(name) if use_accessors else capitalize(name)


def _import_statements(imports: list[str]) -> str:
    if not imports:
        return ""
    body = "\n".join(f'    "{path}"' for path in imports)
    return f"import (\n{body}\n)\n\n"


GO_PROFILE = LanguageProfile(
    language=Language.GO,
    types=TypeTable(
        STRING="string",
        INTEGER="int",
        FLOAT="float64",
        BOOLEAN="bool",
        NULL="interface{}",
        LIST="[]",
        OBJECT="map[string]interface{}",
        DATE="time.Time",
    ),
    imports={
        "DATE": "time",
        "JSON": "encoding/json",
    },
    templates=Templates(
        CLASS_DEFINITION="type {{ class_name }} struct {",
        PROPERTY_TEMPLATE='    {{ name }} {{ type }} `json:"{{ key }}"`',
        GETTER_TEMPLATE=(
            "\n"
            "func (s *{{ class_name }}) Get{{ capitalized_name }}() {{ type }} {\n"
            "    return s.{{ name }}\n"
            "}"
        ),
        SETTER_TEMPLATE=(
            "\n"
            "func (s *{{ class_name }}) Set{{ capitalized_name }}(value {{ type }}) {\n"
            "    s.{{ name }} = value\n"
            "}"
        ),
        CLASS_END="}",
    ),
    formatters=Formatters(
        list_type=lambda item_type: f"[]{item_type}",
        import_statements=_import_statements,
        property_name=_property_name,
    ),
    error_messages=ErrorMessages(
        INVALID_JSON="// Error: Invalid JSON",
        INVALID_INPUT="// Error: Input must be a JSON object",
        UNKNOWN_ERROR="// An unknown error occurred",
    ),
    accessor_placement=AccessorPlacement.AFTER_CLASS,
    file_header="package main",
)
