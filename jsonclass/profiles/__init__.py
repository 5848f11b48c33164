"""Declarative per-language profiles.

Each supported :class:`Language` maps to one immutable
:class:`LanguageProfile` holding type names, import lines, Jinja2 templates,
formatting functions and error messages.  The registry validates all of them
on import.

Usage::

    from jsonclass.profiles import Language, get_profile

    profile = get_profile(Language.GO)
    print(profile.types.DATE)   # time.Time
"""

from jsonclass.profiles.models import (
    AccessorPlacement,
    ImportNeed,
    Language,
    LanguageProfile,
)
from jsonclass.profiles.registry import (
    PROFILES,
    get_profile,
    supported_languages,
    validate_profile,
    validate_registry,
)

__all__ = [
    "AccessorPlacement",
    "ImportNeed",
    "Language",
    "LanguageProfile",
    "PROFILES",
    "get_profile",
    "supported_languages",
    "validate_profile",
    "validate_registry",
]
