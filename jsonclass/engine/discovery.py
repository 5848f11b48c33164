"""Nested object discovery.

Walks a JSON object depth-first, pre-order, and records every nested object
value together with the class name it will be emitted under.  Arrays are not
descended into, so objects inside arrays never become classes of their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from jsonclass.engine.inference import is_plain_object
from jsonclass.log import get_logger
from jsonclass.utils import capitalize

logger = get_logger("discovery")

ClassPath = tuple[str, ...]


class NameCollisionPolicy(str, Enum):
    """What to do when two nested objects derive the same class name."""
    QUALIFY = "qualify"
    OVERWRITE = "overwrite"


@dataclass(frozen=True)
class DiscoveredClass:
    """One nested object and the class name it is emitted under."""

    class_name: str
    path: ClassPath
    obj: dict[str, Any]


def discover(
    root: dict[str, Any],
    *,
    policy: NameCollisionPolicy = NameCollisionPolicy.QUALIFY,
    root_name: str = "",
) -> list[DiscoveredClass]:
    """Collect every nested object under *root* in first-discovery order.

    Args:
        root: The top-level JSON object.  It is never part of the result.
        policy: ``QUALIFY`` renames a later object whose name is taken to
            ``<ParentClass><Name>`` (then ``<ParentClass><Name>2``, ...).
            ``OVERWRITE`` lets the later object replace the earlier one; the
            survivor keeps the first object's position.
        root_name: Class name reserved for the root object.  Under
            ``QUALIFY`` no nested class may take it.

    Returns:
        A list of :class:`DiscoveredClass`, parents before their children.
    """
    policy = NameCollisionPolicy(policy)
    if policy is NameCollisionPolicy.OVERWRITE:
        return _discover_overwrite(root)
    return _discover_qualified(root, root_name)


def discover_map(
    root: dict[str, Any],
    *,
    policy: NameCollisionPolicy = NameCollisionPolicy.QUALIFY,
    root_name: str = "",
) -> dict[str, dict[str, Any]]:
    """Return discovery results as an ordered ``{class_name: object}`` mapping."""
    return {
        found.class_name: found.obj
        for found in discover(root, policy=policy, root_name=root_name)
    }


def class_names_for(discovered: list[DiscoveredClass]) -> dict[ClassPath, str]:
    """Map each discovered object's path to its final class name."""
    return {found.path: found.class_name for found in discovered}


def child_class_names(
    path: ClassPath,
    obj: dict[str, Any],
    names: dict[ClassPath, str],
) -> dict[str, str]:
    """Return ``{key: class_name}`` for the nested objects directly under *obj*.

    Keys missing from *names* (possible under ``OVERWRITE``) fall back to the
    capitalised key.
    """
    return {
        key: names.get(path + (key,), capitalize(key))
        for key, value in obj.items()
        if is_plain_object(value)
    }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _discover_overwrite(root: dict[str, Any]) -> list[DiscoveredClass]:
    found: dict[str, DiscoveredClass] = {}

    def explore(obj: dict[str, Any], path: ClassPath) -> None:
        for key, value in obj.items():
            if not is_plain_object(value):
                continue
            child_path = path + (key,)
            class_name = capitalize(key)
            if class_name in found:
                logger.debug("Class %s from %s replaces an earlier object", class_name, _dotted(child_path))
            found[class_name] = DiscoveredClass(class_name, child_path, value)
            explore(value, child_path)

    explore(root, ())
    return list(found.values())


def _discover_qualified(root: dict[str, Any], root_name: str) -> list[DiscoveredClass]:
    taken: set[str] = {root_name} if root_name else set()
    found: list[DiscoveredClass] = []

    def explore(obj: dict[str, Any], path: ClassPath, parent_name: str) -> None:
        for key, value in obj.items():
            if not is_plain_object(value):
                continue
            child_path = path + (key,)
            class_name = capitalize(key)
            if class_name in taken:
                qualified = _qualify(class_name, parent_name, taken)
                logger.debug(
                    "Class name %s already taken; %s becomes %s",
                    class_name, _dotted(child_path), qualified,
                )
                class_name = qualified
            taken.add(class_name)
            found.append(DiscoveredClass(class_name, child_path, value))
            explore(value, child_path, class_name)

    explore(root, (), root_name)
    return found


def _qualify(class_name: str, parent_name: str, taken: set[str]) -> str:
    candidate = f"{parent_name}{class_name}"
    if candidate not in taken:
        return candidate
    suffix = 2
    while f"{candidate}{suffix}" in taken:
        suffix += 1
    return f"{candidate}{suffix}"


def _dotted(path: ClassPath) -> str:
    return ".".join(path)
