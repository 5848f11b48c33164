"""Per-value type inference.

Maps one JSON value to the type name a language profile uses for it.  Arrays
are typed from their first element only; objects take the caller-supplied
class name when they are a named nested entity.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from jsonclass.profiles.models import LanguageProfile

# (pattern, strptime format); a ``None`` format means ISO date-time parsing.
_DATE_PATTERNS: tuple[tuple[re.Pattern[str], str | None], ...] = (
    (re.compile(r"^\d{4}-\d{2}-\d{2}$"), "%Y-%m-%d"),
    (re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}"), None),
    (re.compile(r"^\d{4}/\d{2}/\d{2}$"), "%Y/%m/%d"),
    (re.compile(r"^\d{2}/\d{2}/\d{4}$"), "%d/%m/%Y"),
    (re.compile(r"^\d{2}-\d{2}-\d{4}$"), "%d-%m-%Y"),
)


def is_date_string(value: Any) -> bool:
    """Return ``True`` if *value* looks like a date and is a real calendar date.

    Recognised shapes are ``YYYY-MM-DD``, ``YYYY-MM-DDThh:mm:ss[...]``,
    ``YYYY/MM/DD``, ``DD/MM/YYYY`` and ``DD-MM-YYYY``.  Matching a shape is
    not enough: ``"99-99-9999"`` and ``"2024-02-30"`` are rejected.

    Examples::

        is_date_string("2024-01-15")            -> True
        is_date_string("2024-01-15T10:30:00Z")  -> True
        is_date_string("15/01/2024")            -> True
        is_date_string("99-99-9999")            -> False
    """
    if not isinstance(value, str):
        return False

    for pattern, fmt in _DATE_PATTERNS:
        if not pattern.match(value):
            continue
        try:
            if fmt is None:
                datetime.fromisoformat(value)
            else:
                datetime.strptime(value, fmt)
        except ValueError:
            continue
        return True
    return False


def is_plain_object(value: Any) -> bool:
    """``True`` for a JSON object (not an array, not a scalar, not null)."""
    return isinstance(value, dict)


def infer_type(value: Any, profile: LanguageProfile, name_hint: str | None = None) -> str:
    """Return *profile*'s type name for a JSON *value*.

    Args:
        value: A decoded JSON value.
        profile: Target language profile.
        name_hint: Class name to use when *value* is a named nested object.
            For arrays it is forwarded to the first element.
    """
    types = profile.types
    if value is None:
        return types.NULL
    if isinstance(value, list):
        if not value:
            return profile.formatters.list_type(types.OBJECT)
        return profile.formatters.list_type(infer_type(value[0], profile, name_hint))
    if isinstance(value, dict):
        return name_hint or types.OBJECT
    if isinstance(value, str):
        return types.DATE if is_date_string(value) else types.STRING
    # bool before int: True is an int in Python.
    if isinstance(value, bool):
        return types.BOOLEAN
    if isinstance(value, int):
        return types.INTEGER
    if isinstance(value, float):
        return types.INTEGER if value.is_integer() else types.FLOAT
    return types.OBJECT
