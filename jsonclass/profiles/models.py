"""Pydantic v2 models describing a target-language profile.

A profile is pure data plus a handful of small formatting functions.  Every
profile is frozen once built so the registry can be shared freely between
callers.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Language(str, Enum):
    """Supported target languages."""
    PYTHON = "python"
    JAVA = "java"
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    GO = "go"
    RUBY = "ruby"


class AccessorPlacement(str, Enum):
    """Where generated accessor blocks go relative to the class body."""
    BEFORE_PROPERTIES = "before_properties"
    AFTER_PROPERTIES = "after_properties"
    AFTER_CLASS = "after_class"


class ImportNeed(str, Enum):
    """Logical reasons a class may need an import line."""
    DATE = "DATE"
    LIST = "LIST"
    JSON = "JSON"
    TYPING = "TYPING"


# Variables each template kind may reference.
_ACCESSOR_VARIABLES = frozenset(
    {"type", "name", "key", "capitalized_name", "class_name", "prefix"}
)

TEMPLATE_VARIABLES: dict[str, frozenset[str]] = {
    "CLASS_DEFINITION": frozenset({"class_name"}),
    "PROPERTY_TEMPLATE": frozenset({"type", "name", "key", "prefix", "use_accessors"}),
    "CONSTRUCTOR_TEMPLATE": frozenset({"class_name", "parameters", "assignments"}),
    "CONSTRUCTOR_END": frozenset({"class_name"}),
    "GETTER_TEMPLATE": _ACCESSOR_VARIABLES,
    "SETTER_TEMPLATE": _ACCESSOR_VARIABLES,
    "CLASS_END": frozenset({"class_name"}),
    "EMPTY_BODY": frozenset({"class_name"}),
}


# ---------------------------------------------------------------------------
# Sub-tables
# ---------------------------------------------------------------------------

class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TypeTable(_Frozen):
    """Language type names for each inferred JSON type.

    An empty string is a legitimate value for languages without type
    annotations (JavaScript).
    """
    STRING: str = Field(..., description="Type of a plain string value")
    INTEGER: str = Field(..., description="Type of an integral number")
    FLOAT: str = Field(..., description="Type of a non-integral number")
    BOOLEAN: str = Field(..., description="Type of true/false")
    NULL: str = Field(..., description="Type used for a null value")
    LIST: str = Field(..., description="Bare list/array type name")
    OBJECT: str = Field(..., description="Fallback type for untyped objects")
    DATE: str = Field(..., description="Type of a recognised date string")
    ANY: str | None = Field(default=None, description="Optional catch-all type")


class Templates(_Frozen):
    """Jinja2 text templates for each piece of a generated class.

    Empty templates are explicit no-ops and render nothing.
    """
    CLASS_DEFINITION: str = Field(..., description="Class header line(s)")
    PROPERTY_TEMPLATE: str = Field(..., description="One property line")
    CONSTRUCTOR_TEMPLATE: str = Field(default="", description="Constructor header")
    CONSTRUCTOR_END: str = Field(default="", description="Constructor closing line")
    GETTER_TEMPLATE: str = Field(..., description="Accessor block")
    SETTER_TEMPLATE: str = Field(..., description="Mutator block")
    CLASS_END: str = Field(default="}", description="Class closing token")
    EMPTY_BODY: str = Field(default="", description="Body used when a class has no properties")


class ErrorMessages(_Frozen):
    """Error strings, already written as comments in the target language."""
    INVALID_JSON: str
    INVALID_INPUT: str
    UNKNOWN_ERROR: str


def _identity_name(name: str, use_accessors: bool) -> str:
    return name


def _no_parameter(name: str, type_name: str) -> str:
    return name


class Formatters(_Frozen):
    """Small pure functions for the language-specific bits of formatting."""
    list_type: Callable[[str], str]
    import_statements: Callable[[list[str]], str]
    property_name: Callable[[str, bool], str] = _identity_name
    parameter: Callable[[str, str], str] = _no_parameter


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

class LanguageProfile(_Frozen):
    """Everything the emitter needs to know about one target language."""
    language: Language = Field(..., description="Language this profile renders")
    types: TypeTable
    imports: dict[str, str] = Field(
        default_factory=dict,
        description="Import statement per logical need (DATE, LIST, JSON, ...)",
    )
    templates: Templates
    formatters: Formatters
    error_messages: ErrorMessages
    private_prefix: str = Field(
        default="",
        description="Storage prefix substituted for {prefix} when accessors are generated",
    )
    accessor_placement: AccessorPlacement = Field(default=AccessorPlacement.AFTER_PROPERTIES)
    comment_prefix: str = Field(default="//", description="Line comment token")
    file_header: str = Field(default="", description="Emitted once before the first class, e.g. a package clause")

    def import_for(self, need: ImportNeed | str) -> str:
        """Return the import statement for *need*, or ``""`` when none is declared."""
        key = need.value if isinstance(need, ImportNeed) else need
        return self.imports.get(key, "")
