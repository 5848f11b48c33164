"""Shared pytest fixtures for the jsonclass test suite.

Provides reusable fixtures for:
- Sample JSON documents (flat, nested, colliding names, every value kind)
- Language profiles
- Temporary JSON input files
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from jsonclass.profiles import Language, LanguageProfile, get_profile


# ---------------------------------------------------------------------------
# Sample documents
# ---------------------------------------------------------------------------

@pytest.fixture
def flat_document() -> dict[str, Any]:
    """One property of every scalar kind, plus lists."""
    return {
        "name": "hello",
        "age": 42,
        "score": 42.5,
        "active": True,
        "nickname": None,
        "createdAt": "2024-01-15",
        "tags": [1, 2, 3],
        "extras": [],
    }


@pytest.fixture
def nested_document() -> dict[str, Any]:
    """Root -> user -> address, plus a sibling settings object."""
    return {
        "id": 7,
        "user": {
            "name": "Ada",
            "address": {"city": "NYC", "zip": "10001"},
        },
        "settings": {"theme": "dark"},
    }


@pytest.fixture
def colliding_document() -> dict[str, Any]:
    """Two different nested objects that both derive the class name ``Address``."""
    return {
        "home": {"address": {"street": "Main St"}},
        "work": {"address": {"floor": 3}},
    }


@pytest.fixture
def address_json() -> str:
    return json.dumps({"address": {"city": "NYC"}})


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------

@pytest.fixture
def python_profile() -> LanguageProfile:
    return get_profile(Language.PYTHON)


@pytest.fixture
def typescript_profile() -> LanguageProfile:
    return get_profile(Language.TYPESCRIPT)


@pytest.fixture(params=[language.value for language in Language])
def any_profile(request: pytest.FixtureRequest) -> LanguageProfile:
    """Parametrised over every supported language."""
    return get_profile(request.param)


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

@pytest.fixture
def json_file(tmp_path: Path, nested_document: dict[str, Any]) -> Path:
    """A JSON input file holding ``nested_document``."""
    path = tmp_path / "input.json"
    path.write_text(json.dumps(nested_document), encoding="utf-8")
    return path
