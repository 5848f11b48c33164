"""jsonclass configuration.

Typed settings for a generation run.  Uses a Pydantic v2 model so values are
validated at construction time and can be serialised to/from JSON or read
from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from jsonclass.engine.discovery import NameCollisionPolicy
from jsonclass.profiles.models import Language

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Settings for turning JSON into class definitions.

    Instances are typically created once by the CLI (from flags, environment
    variables or a saved file) and handed to :func:`jsonclass.generate`.
    """

    language: Language = Field(default=Language.PYTHON, description="Target language")
    use_accessors: bool = Field(
        default=False, description="Store properties privately and generate getters/setters"
    )
    root_class_name: str = Field(
        default="MainClass", min_length=1, description="Class name for the top-level object"
    )
    collision_policy: NameCollisionPolicy = Field(
        default=NameCollisionPolicy.QUALIFY,
        description="How to name nested classes whose derived names collide",
    )
    highlight: bool = Field(default=True, description="Syntax-highlight CLI output")

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.  Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON.

        Args:
            path: The JSON file to read.

        Returns:
            A validated ``Config`` instance.
        """
        raw = Path(path).read_bytes()
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            JSONCLASS_LANGUAGE, JSONCLASS_ACCESSORS, JSONCLASS_ROOT_CLASS,
            JSONCLASS_COLLISIONS, JSONCLASS_HIGHLIGHT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("JSONCLASS_LANGUAGE"):
            kwargs["language"] = os.environ["JSONCLASS_LANGUAGE"].strip().lower()
        if os.environ.get("JSONCLASS_ACCESSORS"):
            kwargs["use_accessors"] = _env_flag(os.environ["JSONCLASS_ACCESSORS"])
        if os.environ.get("JSONCLASS_ROOT_CLASS"):
            kwargs["root_class_name"] = os.environ["JSONCLASS_ROOT_CLASS"]
        if os.environ.get("JSONCLASS_COLLISIONS"):
            kwargs["collision_policy"] = os.environ["JSONCLASS_COLLISIONS"].strip().lower()
        if os.environ.get("JSONCLASS_HIGHLIGHT"):
            kwargs["highlight"] = _env_flag(os.environ["JSONCLASS_HIGHLIGHT"])
        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> "Config":
        """Return a validated copy with every non-``None`` override applied."""
        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return type(self).model_validate(data)


def _env_flag(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES
