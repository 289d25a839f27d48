"""Template registry — resolves stored view values to rendered output.

A template is any callable taking a data mapping and returning something
renderable (a string, a Rich renderable, a Textual widget). Stored values
name a template either directly ("panes/unrated") or through a record
({"template": "panes/unrated", "data": {...}}).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from viewkeys.values import is_record

TemplateFn = Callable[[Mapping[str, Any]], Any]


def template_name(value: object) -> object:
    """The template name a stored value refers to.

    Records yield their "template" entry; anything else is returned as is.
    """
    if is_record(value) and value.get("template"):
        return value["template"]
    return value


class TemplateRegistry:
    """Name -> template function mapping."""

    def __init__(self) -> None:
        self._templates: dict[str, TemplateFn] = {}

    def register(self, name: str, fn: TemplateFn | None = None):
        """Register fn under name. Without fn, acts as a decorator.

        Usage:
            @registry.register("panes/unrated")
            def unrated(data):
                return f"{data.get('count', 0)} unrated"
        """
        if fn is not None:
            self._templates[name] = fn
            return fn

        def decorator(f: TemplateFn) -> TemplateFn:
            self._templates[name] = f
            return f

        return decorator

    def unregister(self, name: str) -> None:
        self._templates.pop(name, None)

    def names(self) -> list[str]:
        return list(self._templates)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._templates

    def is_template(self, value: object) -> bool:
        """Does value name a registered template?"""
        return template_name(value) in self

    def render(self, value: object, data: Mapping[str, Any] | None = None) -> Any:
        """Render the template value refers to. "" when absent or unknown.

        A record's own "data" takes precedence over the data argument.
        """
        if not value:
            return ""

        if isinstance(value, str):
            name = value
        elif is_record(value):
            name = value.get("template")
            if value.get("data") is not None:
                data = value["data"]
        else:
            return ""

        if data is None:
            data = {}

        fn = self._templates.get(name) if isinstance(name, str) else None
        if fn is None:
            return ""
        return fn(data)
