"""TypeScript profile: an exported class with typed fields or get/set pairs."""

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
    lines = [line for line in imports if line]
    if not lines:
        return ""
    return "\n".join(lines) + "\n\n"


TYPESCRIPT_PROFILE = LanguageProfile(
    language=Language.TYPESCRIPT,
    types=TypeTable(
        STRING="string",
        INTEGER="number",
        FLOAT="number",
        BOOLEAN="boolean",
        NULL="null",
        LIST="Array",
        OBJECT="object",
        DATE="Date",
        ANY="any",
    ),
    # Date is a global; nothing to import.
    imports={"DATE": ""},
    templates=Templates(
        CLASS_DEFINITION="export class {{ class_name }} {",
        PROPERTY_TEMPLATE=(
            "    {% if use_accessors %}private {% endif %}{{ prefix }}{{ name }}: {{ type }};"
        ),
        GETTER_TEMPLATE=(
            "\n"
            "    public get {{ name }}(): {{ type }} {\n"
            "        return this.{{ prefix }}{{ name }};\n"
            "    }"
        ),
        SETTER_TEMPLATE=(
            "\n"
            "    public set {{ name }}(value: {{ type }}) {\n"
            "        this.{{ prefix }}{{ name }} = value;\n"
            "    }"
        ),
        CLASS_END="}",
    ),
    formatters=Formatters(
        list_type=lambda item_type: f"{item_type}[]",
        import_statements=_import_statements,
    ),
    error_messages=ErrorMessages(
        INVALID_JSON="// Error: Invalid JSON",
        INVALID_INPUT="// Error: Input must be a JSON object",
        UNKNOWN_ERROR="// An unknown error occurred",
    ),
    private_prefix="_",
    accessor_placement=AccessorPlacement.AFTER_PROPERTIES,
)
