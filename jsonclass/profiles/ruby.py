"""Ruby profile: ``initialize`` sets instance variables, ``attr_accessor`` on request."""

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


RUBY_PROFILE = LanguageProfile(
    language=Language.RUBY,
    types=TypeTable(
        STRING="String",
        INTEGER="Integer",
        FLOAT="Float",
        BOOLEAN="Boolean",
        NULL="nil",
        LIST="Array",
        OBJECT="Hash",
        DATE="DateTime",
    ),
    imports={
        "DATE": 'require "date"',
        "JSON": 'require "json"',
    },
    templates=Templates(
        CLASS_DEFINITION="class {{ class_name }}",
        CONSTRUCTOR_TEMPLATE="  def initialize{% if parameters %}({{ parameters }}){% endif %}",
        PROPERTY_TEMPLATE="    @{{ name }} = {{ name }}",
        CONSTRUCTOR_END="  end",
        # One attr_accessor line covers both directions; the setter is a no-op.
        GETTER_TEMPLATE="  attr_accessor :{{ name }}",
        SETTER_TEMPLATE="",
        CLASS_END="end",
    ),
    formatters=Formatters(
        list_type=lambda item_type: "Array",
        import_statements=_import_statements,
        property_name=lambda name, use_accessors: name.lower(),
    ),
    error_messages=ErrorMessages(
        INVALID_JSON="# Error: Invalid JSON",
        INVALID_INPUT="# Error: Input must be a JSON object",
        UNKNOWN_ERROR="# An unknown error occurred",
    ),
    accessor_placement=AccessorPlacement.BEFORE_PROPERTIES,
    comment_prefix="#",
)
