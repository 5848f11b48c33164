"""Exception hierarchy for jsonclass.

The transformation driver raises :class:`InvalidJSONError` and
:class:`InvalidInputError` internally and turns them into the target
language's error comment at its boundary; callers of ``transform`` never see
them.  :class:`UnsupportedLanguageError` and :class:`ProfileError` surface
from the profile registry.
"""

from __future__ import annotations


class JsonClassError(Exception):
    """Base class for every error raised by jsonclass."""


class InvalidJSONError(JsonClassError):
    """Raised when the input text is not valid JSON."""


class InvalidInputError(JsonClassError):
    """Raised when valid JSON does not have an object at the top level."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Input must be a JSON object, got {kind}")


class UnsupportedLanguageError(JsonClassError):
    """Raised when a language identifier is not in the profile registry."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"Unsupported language: {language}")


class ProfileError(JsonClassError):
    """Raised when a language profile is missing or misdeclares a required key."""

    def __init__(self, language: str, message: str) -> None:
        self.language = language
        super().__init__(f"Profile '{language}': {message}")
