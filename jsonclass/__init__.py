"""jsonclass -- turn a sample JSON document into class definitions.

Supports Python, Java, TypeScript, JavaScript, Go and Ruby, with optional
getter/setter generation.

Usage::

    from jsonclass import transform_to_code

    code = transform_to_code("typescript", '{"city": "NYC"}', use_accessors=True)
"""

from jsonclass.config import Config
from jsonclass.engine import (
    DEFAULT_ROOT_CLASS_NAME,
    NameCollisionPolicy,
    discover,
    emit_class,
    generate,
    infer_type,
    transform,
    transform_to_code,
)
from jsonclass.errors import (
    InvalidInputError,
    InvalidJSONError,
    JsonClassError,
    ProfileError,
    UnsupportedLanguageError,
)
from jsonclass.profiles import Language, LanguageProfile, get_profile, supported_languages

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DEFAULT_ROOT_CLASS_NAME",
    "InvalidInputError",
    "InvalidJSONError",
    "JsonClassError",
    "Language",
    "LanguageProfile",
    "NameCollisionPolicy",
    "ProfileError",
    "UnsupportedLanguageError",
    "discover",
    "emit_class",
    "generate",
    "get_profile",
    "infer_type",
    "supported_languages",
    "transform",
    "transform_to_code",
]
