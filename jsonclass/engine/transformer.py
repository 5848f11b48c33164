"""Transformation driver.

Parses JSON text, discovers nested objects, emits one class per object and a
final root class, and joins the blocks.  ``transform`` and
``transform_to_code`` are total: every failure comes back as a comment string
in the target language instead of an exception.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from jsonclass.engine.discovery import (
    NameCollisionPolicy,
    child_class_names,
    class_names_for,
    discover,
)
from jsonclass.engine.emitter import emit_class
from jsonclass.errors import InvalidInputError, InvalidJSONError, UnsupportedLanguageError
from jsonclass.log import get_logger
from jsonclass.profiles.models import Language, LanguageProfile
from jsonclass.profiles.registry import get_profile

if TYPE_CHECKING:
    from jsonclass.config import Config

logger = get_logger("transformer")

DEFAULT_ROOT_CLASS_NAME = "MainClass"
UNSUPPORTED_LANGUAGE_MESSAGE = "// Error: Unsupported language: {language}"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_json_object(json_text: str | bytes) -> dict[str, Any]:
    """Parse *json_text* and require an object at the top level.

    Raises:
        InvalidJSONError: If the text is not JSON.  ``NaN`` and
            ``Infinity`` literals count as invalid.
        InvalidInputError: If the top-level value is not an object.
    """
    try:
        data = json.loads(json_text, parse_constant=_reject_constant)
    except (ValueError, TypeError) as exc:
        raise InvalidJSONError(str(exc)) from exc
    if not isinstance(data, dict):
        raise InvalidInputError(_json_kind(data))
    return data


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def transform(
    json_text: str | bytes,
    profile: LanguageProfile,
    use_accessors: bool = False,
    *,
    root_class_name: str = DEFAULT_ROOT_CLASS_NAME,
    policy: NameCollisionPolicy = NameCollisionPolicy.QUALIFY,
) -> str:
    """Generate class definitions for *json_text* in *profile*'s language.

    Nested classes come first in discovery order; the root class, named
    *root_class_name*, is always last.  A profile's ``file_header`` (Go's
    package clause) precedes the first class.  Blocks are separated by one
    blank line.

    Returns:
        The generated source, or one of the profile's error messages:
        ``INVALID_JSON`` for unparsable text, ``INVALID_INPUT`` when the top
        level is not an object, ``UNKNOWN_ERROR`` for anything else.
    """
    try:
        data = parse_json_object(json_text)
        return _render_document(data, profile, use_accessors, root_class_name, policy)
    except InvalidJSONError as exc:
        logger.debug("Invalid JSON: %s", exc)
        return profile.error_messages.INVALID_JSON
    except InvalidInputError as exc:
        logger.debug("%s", exc)
        return profile.error_messages.INVALID_INPUT
    except Exception:
        logger.exception("Unexpected failure while generating %s classes", profile.language.value)
        return profile.error_messages.UNKNOWN_ERROR


def transform_to_code(
    language: Language | str,
    json_text: str | bytes,
    use_accessors: bool = False,
    *,
    root_class_name: str = DEFAULT_ROOT_CLASS_NAME,
    policy: NameCollisionPolicy = NameCollisionPolicy.QUALIFY,
) -> str:
    """Look up *language* and run :func:`transform`.

    An unknown identifier yields ``// Error: Unsupported language: <id>``
    regardless of the comment syntax the caller expected.
    """
    try:
        profile = get_profile(language)
    except UnsupportedLanguageError as exc:
        logger.debug("%s", exc)
        return UNSUPPORTED_LANGUAGE_MESSAGE.format(language=exc.language)
    return transform(
        json_text,
        profile,
        use_accessors,
        root_class_name=root_class_name,
        policy=policy,
    )


def generate(json_text: str | bytes, config: Config) -> str:
    """Run :func:`transform_to_code` with the settings held by *config*."""
    return transform_to_code(
        config.language,
        json_text,
        config.use_accessors,
        root_class_name=config.root_class_name,
        policy=config.collision_policy,
    )


def is_error_output(text: str, profile: LanguageProfile) -> bool:
    """Return ``True`` if *text* is one of *profile*'s error messages."""
    return text in {message for _, message in profile.error_messages}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _render_document(
    data: dict[str, Any],
    profile: LanguageProfile,
    use_accessors: bool,
    root_class_name: str,
    policy: NameCollisionPolicy,
) -> str:
    discovered = discover(data, policy=policy, root_name=root_class_name)
    names = class_names_for(discovered)
    logger.debug(
        "Discovered %d nested class(es): %s",
        len(discovered),
        ", ".join(found.class_name for found in discovered) or "-",
    )

    blocks = [
        emit_class(
            found.class_name,
            found.obj,
            profile,
            use_accessors,
            nested_names=child_class_names(found.path, found.obj, names),
        )
        for found in discovered
    ]
    blocks.append(
        emit_class(
            root_class_name,
            data,
            profile,
            use_accessors,
            nested_names=child_class_names((), data, names),
        )
    )
    if profile.file_header:
        blocks.insert(0, profile.file_header)
    return "\n\n".join(blocks)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _json_kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, list):
        return "array"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    return "number"
