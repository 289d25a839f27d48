"""The "Template" helper: render whatever view a store key currently holds.

Calling the helper inside a computation subscribes it to the key, so the
computation re-renders when the key changes.
"""

from __future__ import annotations

from typing import Any, Callable

from viewkeys.store import ViewStore
from viewkeys.templates import TemplateRegistry, template_name


def template_helper(store: ViewStore, registry: TemplateRegistry) -> Callable[[str], Any]:
    """Build a helper that renders the view stored under a key.

    Returns "" when the key holds nothing (or False) or names no template.
    """

    def helper(key: str) -> Any:
        value = store.get(key)
        if isinstance(key, str) and template_name(value):
            return registry.render(value)
        return ""

    return helper
