"""JavaScript profile: untyped class fields, ``#private`` storage behind accessors."""

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

JAVASCRIPT_PROFILE = LanguageProfile(
    language=Language.JAVASCRIPT,
    # No type annotations in JavaScript.
    types=TypeTable(
        STRING="",
        INTEGER="",
        FLOAT="",
        BOOLEAN="",
        NULL="",
        LIST="",
        OBJECT="",
        DATE="",
    ),
    imports={"DATE": ""},
    templates=Templates(
        CLASS_DEFINITION="export class {{ class_name }} {",
        PROPERTY_TEMPLATE="    {{ prefix }}{{ name }};",
        GETTER_TEMPLATE=(
            "\n"
            "    get {{ name }}() {\n"
            "        return this.{{ prefix }}{{ name }};\n"
            "    }"
        ),
        SETTER_TEMPLATE=(
            "\n"
            "    set {{ name }}(value) {\n"
            "        this.{{ prefix }}{{ name }} = value;\n"
            "    }"
        ),
        CLASS_END="}",
    ),
    formatters=Formatters(
        list_type=lambda item_type: "",
        import_statements=lambda imports: "",
    ),
    error_messages=ErrorMessages(
        INVALID_JSON="// Error: Invalid JSON",
        INVALID_INPUT="// Error: Input must be a JSON object",
        UNKNOWN_ERROR="// An unknown error occurred",
    ),
    private_prefix="#",
    accessor_placement=AccessorPlacement.AFTER_PROPERTIES,
)
