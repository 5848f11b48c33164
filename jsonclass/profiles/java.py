"""Java profile: a public class with fields and JavaBean accessors."""

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

# Generic type arguments must be reference types.
_BOXED: dict[str, str] = {
    "int": "Integer",
    "double": "Double",
    "boolean": "Boolean",
}


def _list_type(item_type: str) -> str:
    return f"List<{_BOXED.get(item_type, item_type)}>"


def _import_statements(imports: list[str]) -> str:
    if not imports:
        return ""
    return "\n".join(imports) + "\n\n"


JAVA_PROFILE = LanguageProfile(
    language=Language.JAVA,
    types=TypeTable(
        STRING="String",
        INTEGER="int",
        FLOAT="double",
        BOOLEAN="boolean",
        NULL="Object",
        LIST="List",
        OBJECT="Object",
        DATE="LocalDateTime",
    ),
    imports={
        "LIST": "import java.util.List;",
        "ARRAY_LIST": "import java.util.ArrayList;",
        "DATE": "import java.time.LocalDateTime;",
    },
    templates=Templates(
        CLASS_DEFINITION="public class {{ class_name }} {",
        PROPERTY_TEMPLATE=(
            "    {{ 'private' if use_accessors else 'public' }} {{ type }} {{ name }};"
        ),
        GETTER_TEMPLATE=(
            "\n"
            "    public {{ type }} get{{ capitalized_name }}() {\n"
            "        return {{ name }};\n"
            "    }"
        ),
        SETTER_TEMPLATE=(
            "\n"
            "    public void set{{ capitalized_name }}({{ type }} {{ name }}) {\n"
            "        this.{{ name }} = {{ name }};\n"
            "    }"
        ),
        CLASS_END="}",
    ),
    formatters=Formatters(
        list_type=_list_type,
        import_statements=_import_statements,
    ),
    error_messages=ErrorMessages(
        INVALID_JSON="// Error: Invalid JSON",
        INVALID_INPUT="// Error: Input must be a JSON object",
        UNKNOWN_ERROR="// An unknown error occurred",
    ),
    accessor_placement=AccessorPlacement.AFTER_PROPERTIES,
)
