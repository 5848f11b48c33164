"""Language profile registry.

Maps every :class:`Language` to its profile and checks the whole table when
this module is imported, so a profile with a missing or mistyped template
variable fails loudly at startup instead of producing half-substituted code
at generation time.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from jinja2 import TemplateSyntaxError

from jsonclass.errors import ProfileError, UnsupportedLanguageError
from jsonclass.profiles.go import GO_PROFILE
from jsonclass.profiles.java import JAVA_PROFILE
from jsonclass.profiles.javascript import JAVASCRIPT_PROFILE
from jsonclass.profiles.models import TEMPLATE_VARIABLES, Language, LanguageProfile
from jsonclass.profiles.python import PYTHON_PROFILE
from jsonclass.profiles.ruby import RUBY_PROFILE
from jsonclass.profiles.typescript import TYPESCRIPT_PROFILE
from jsonclass.templates import TemplateRenderer

PROFILES: Mapping[Language, LanguageProfile] = MappingProxyType(
    {
        Language.PYTHON: PYTHON_PROFILE,
        Language.JAVA: JAVA_PROFILE,
        Language.TYPESCRIPT: TYPESCRIPT_PROFILE,
        Language.JAVASCRIPT: JAVASCRIPT_PROFILE,
        Language.GO: GO_PROFILE,
        Language.RUBY: RUBY_PROFILE,
    }
)


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def get_profile(language: Language | str) -> LanguageProfile:
    """Return the profile for *language*.

    Raises:
        UnsupportedLanguageError: If *language* is not a supported identifier.
    """
    try:
        key = Language(language)
    except ValueError:
        raise UnsupportedLanguageError(str(language)) from None
    return PROFILES[key]


def supported_languages() -> list[str]:
    """Return the supported language identifiers in registry order."""
    return [language.value for language in PROFILES]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_profile(
    profile: LanguageProfile, renderer: TemplateRenderer | None = None
) -> None:
    """Check that every template of *profile* compiles and uses known variables.

    Raises:
        ProfileError: On the first problem found.
    """
    renderer = renderer or TemplateRenderer()
    name = profile.language.value

    for field, allowed in TEMPLATE_VARIABLES.items():
        source = getattr(profile.templates, field, None)
        if not isinstance(source, str):
            raise ProfileError(name, f"template {field} is missing")
        if not source:
            continue
        try:
            used = renderer.variables(source)
        except TemplateSyntaxError as exc:
            raise ProfileError(name, f"template {field} does not compile: {exc}") from exc
        unknown = used - allowed
        if unknown:
            raise ProfileError(
                name,
                f"template {field} references unknown variable(s): "
                f"{', '.join(sorted(unknown))}",
            )

    for field in ("CLASS_DEFINITION", "PROPERTY_TEMPLATE"):
        if not getattr(profile.templates, field):
            raise ProfileError(name, f"template {field} must not be empty")

    for field, value in profile.error_messages:
        if not value:
            raise ProfileError(name, f"error message {field} must not be empty")


def validate_registry(profiles: Mapping[Language, LanguageProfile] = PROFILES) -> None:
    """Validate every registered profile and that each language has one."""
    missing = [language.value for language in Language if language not in profiles]
    if missing:
        raise ProfileError(", ".join(missing), "no profile registered")

    renderer = TemplateRenderer()
    for language, profile in profiles.items():
        if profile.language is not language:
            raise ProfileError(
                language.value, f"registered under the wrong key ({profile.language.value})"
            )
        validate_profile(profile, renderer)


validate_registry()
