"""Class emission: one JSON object plus a profile in, one class block out."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from jsonclass.engine.inference import infer_type, is_date_string, is_plain_object
from jsonclass.profiles.models import AccessorPlacement, ImportNeed, LanguageProfile
from jsonclass.templates import TemplateRenderer
from jsonclass.utils import capitalize

_default_renderer = TemplateRenderer()


@dataclass(frozen=True)
class _Member:
    key: str
    name: str
    type_name: str


def required_imports(obj: Mapping[str, Any], profile: LanguageProfile) -> list[str]:
    """Return the import lines *obj*'s direct properties need, in a stable order.

    Only one level is inspected; nested objects resolve their own imports
    when they are emitted.  Needs the profile has no (or an empty) import
    for are skipped.
    """
    needs: list[ImportNeed] = []
    values = list(obj.values())
    if any(is_date_string(value) for value in values):
        needs.append(ImportNeed.DATE)
    if any(isinstance(value, list) for value in values):
        needs.append(ImportNeed.LIST)

    lines: list[str] = []
    for need in needs:
        line = profile.import_for(need)
        if line and line not in lines:
            lines.append(line)
    return lines


def emit_class(
    class_name: str,
    obj: Mapping[str, Any],
    profile: LanguageProfile,
    use_accessors: bool = False,
    *,
    nested_names: Mapping[str, str] | None = None,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render one complete class for *obj* in *profile*'s language.

    Args:
        class_name: Name of the class being emitted.
        obj: The flat JSON object whose keys become properties.
        profile: Target language profile.
        use_accessors: Store properties privately and add getter/setter blocks.
        nested_names: ``{key: class_name}`` for properties holding nested
            objects.  Keys not listed fall back to the capitalised key.
        renderer: Template renderer; a shared default is used when omitted.

    Returns:
        The class source text: import block, header, body and closing token,
        with accessors placed where the profile wants them.
    """
    renderer = renderer or _default_renderer
    nested_names = nested_names or {}
    prefix = profile.private_prefix if use_accessors else ""

    members = [
        _member(key, value, profile, use_accessors, nested_names)
        for key, value in obj.items()
    ]

    property_lines = [
        renderer.property(
            profile,
            type_name=member.type_name,
            name=member.name,
            key=member.key,
            prefix=prefix,
            use_accessors=use_accessors,
        )
        for member in members
    ]

    body: list[str] = []
    constructor = renderer.constructor(
        profile,
        class_name,
        parameters=", ".join(
            profile.formatters.parameter(member.name, member.type_name) for member in members
        ),
        assignments="\n".join(property_lines),
    )
    if constructor:
        body.append(constructor)
    if property_lines:
        body.extend(property_lines)
    else:
        empty = renderer.empty_body(profile, class_name)
        if empty:
            body.append(empty)
    if constructor:
        constructor_end = renderer.constructor_end(profile, class_name)
        if constructor_end:
            body.append(constructor_end)

    accessors: list[str] = []
    if use_accessors:
        for member in members:
            fields = {
                "type_name": member.type_name,
                "name": member.name,
                "key": member.key,
                "capitalized_name": capitalize(member.name),
                "class_name": class_name,
                "prefix": prefix,
            }
            for block in (renderer.getter(profile, **fields), renderer.setter(profile, **fields)):
                if block:
                    accessors.append(block)

    lines = [renderer.class_definition(profile, class_name)]
    placement = profile.accessor_placement
    if accessors and placement is AccessorPlacement.BEFORE_PROPERTIES:
        lines.extend(accessors)
        if body:
            lines.append("")
    lines.extend(body)
    if accessors and placement is AccessorPlacement.AFTER_PROPERTIES:
        lines.extend(accessors)
    class_end = renderer.class_end(profile, class_name)
    if class_end:
        lines.append(class_end)
    if accessors and placement is AccessorPlacement.AFTER_CLASS:
        lines.extend(accessors)

    imports = profile.formatters.import_statements(required_imports(obj, profile))
    return imports + "\n".join(lines)


def _member(
    key: str,
    value: Any,
    profile: LanguageProfile,
    use_accessors: bool,
    nested_names: Mapping[str, str],
) -> _Member:
    hint = nested_names.get(key, capitalize(key)) if is_plain_object(value) else None
    return _Member(
        key=key,
        name=profile.formatters.property_name(key, use_accessors),
        type_name=infer_type(value, profile, hint),
    )
