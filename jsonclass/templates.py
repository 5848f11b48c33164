"""Jinja2 rendering of language-profile templates.

Provides the TemplateRenderer class, which compiles the short template
strings held by each :class:`~jsonclass.profiles.models.LanguageProfile` and
renders them with one explicit method per template kind.  Every template is
rendered in a single Jinja2 pass, so a substituted value that happens to
contain ``{{ name }}`` or ``{type}`` is emitted verbatim and never expanded
again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jinja2 import Environment, StrictUndefined, Template, meta

if TYPE_CHECKING:
    from jsonclass.profiles.models import LanguageProfile


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders profile templates for class emission.

    Compiled templates are cached by source string; profiles are immutable
    so the cache never goes stale.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._cache: dict[str, Template] = {}

    # -- Generic rendering -------------------------------------------------

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context.

        An empty template renders to ``""`` without touching Jinja2.
        """
        if not template_string:
            return ""
        template = self._cache.get(template_string)
        if template is None:
            template = self.env.from_string(template_string)
            self._cache[template_string] = template
        return template.render(**context)

    def variables(self, template_string: str) -> set[str]:
        """Return the variable names *template_string* references.

        Raises:
            jinja2.TemplateSyntaxError: If the template does not compile.
        """
        ast = self.env.parse(template_string)
        return set(meta.find_undeclared_variables(ast))

    # -- One method per template kind --------------------------------------

    def class_definition(self, profile: LanguageProfile, class_name: str) -> str:
        return self.render_string(
            profile.templates.CLASS_DEFINITION, {"class_name": class_name}
        )

    def constructor(
        self,
        profile: LanguageProfile,
        class_name: str,
        parameters: str,
        assignments: str,
    ) -> str:
        return self.render_string(
            profile.templates.CONSTRUCTOR_TEMPLATE,
            {
                "class_name": class_name,
                "parameters": parameters,
                "assignments": assignments,
            },
        )

    def constructor_end(self, profile: LanguageProfile, class_name: str) -> str:
        return self.render_string(
            profile.templates.CONSTRUCTOR_END, {"class_name": class_name}
        )

    def property(
        self,
        profile: LanguageProfile,
        *,
        type_name: str,
        name: str,
        key: str,
        prefix: str,
        use_accessors: bool,
    ) -> str:
        return self.render_string(
            profile.templates.PROPERTY_TEMPLATE,
            {
                "type": type_name,
                "name": name,
                "key": key,
                "prefix": prefix,
                "use_accessors": use_accessors,
            },
        )

    def getter(self, profile: LanguageProfile, **fields: str) -> str:
        return self.render_string(
            profile.templates.GETTER_TEMPLATE, _accessor_context(**fields)
        )

    def setter(self, profile: LanguageProfile, **fields: str) -> str:
        return self.render_string(
            profile.templates.SETTER_TEMPLATE, _accessor_context(**fields)
        )

    def empty_body(self, profile: LanguageProfile, class_name: str) -> str:
        return self.render_string(
            profile.templates.EMPTY_BODY, {"class_name": class_name}
        )

    def class_end(self, profile: LanguageProfile, class_name: str) -> str:
        return self.render_string(
            profile.templates.CLASS_END, {"class_name": class_name}
        )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _accessor_context(
    *,
    type_name: str,
    name: str,
    key: str,
    capitalized_name: str,
    class_name: str,
    prefix: str,
) -> dict[str, str]:
    return {
        "type": type_name,
        "name": name,
        "key": key,
        "capitalized_name": capitalized_name,
        "class_name": class_name,
        "prefix": prefix,
    }
