"""ViewStore — reactive key/value store for view selection.

Every read subscribes the running computation to the key; every write that
actually changes the value re-runs those computations. Writing the primary
pane key also clears the secondary pane and the popup, so selecting a new
main view never leaves a stale side view or popup on screen.
"""

from __future__ import annotations

import logging

from viewkeys._tracking import marshal
from viewkeys.computation import Computation
from viewkeys.dependency import Dependency
from viewkeys.values import InvalidValueError, strictly_equal, validate_value

logger = logging.getLogger("viewkeys.store")

PRIMARY_PANE = "mainPane1"
SECONDARY_PANE = "mainPane2"
POPUP = "popupContainer"


class ViewStore:
    """Key-based reactive store with a cascade rule on the primary pane.

    Values are compared by strict equality (see values.strictly_equal), so a
    new record always notifies even if it looks like the stored one.
    """

    def __init__(
        self,
        *,
        primary_pane: str = PRIMARY_PANE,
        secondary_pane: str = SECONDARY_PANE,
        popup: str = POPUP,
        strict: bool = False,
    ) -> None:
        self.primary_pane = primary_pane
        self.secondary_pane = secondary_pane
        self.popup = popup
        self.strict = strict
        self._values: dict[str, object] = {}
        self._deps: dict[str, Dependency] = {}

    def _ensure_deps(self, key: str) -> Dependency:
        dep = self._deps.get(key)
        if dep is None:
            dep = self._deps[key] = Dependency()
        return dep

    def get(self, key: str, computation: Computation | None = None) -> object:
        """Read a key, subscribing computation (default: the running one)."""
        self._ensure_deps(key).depend(computation)
        return self._values.get(key)

    def set(self, key: str, value: object) -> None:
        """Write a key. Dependents re-run only if the value changed."""
        if marshal(lambda: self._set_direct(key, value)):
            return
        self._set_direct(key, value)

    def _set_direct(self, key: str, value: object) -> None:
        dep = self._ensure_deps(key)

        try:
            validate_value(value)
        except InvalidValueError:
            if self.strict:
                raise
            logger.error(
                "ViewStore.set() needs a mapping with at least a template and data property "
                "(key=%r, value=%r)",
                key, value,
            )
            return

        # Runs even when the primary value itself is unchanged.
        if key == self.primary_pane:
            self._set_direct(self.secondary_pane, False)
            self._set_direct(self.popup, False)

        if strictly_equal(self._values.get(key), value):
            return
        self._values[key] = value
        if dep.has_dependents():
            logger.debug("%r changed, invalidating %r", key, dep)
        dep.changed()

    def set_default(self, key: str, value: object) -> None:
        """Write a key without validation, cascade or notification."""
        if marshal(lambda: self.set_default(key, value)):
            return
        self._ensure_deps(key)
        self._values[key] = value

    def equals(self, key: str, value: object) -> bool:
        """Non-reactive comparison against the stored value."""
        return strictly_equal(self._values.get(key), value)

    def dependency(self, key: str) -> Dependency | None:
        """The tracker for key, without creating one."""
        return self._deps.get(key)

    def forget(self, key: str) -> None:
        """Drop a key's value and tracker. Meant for test teardown."""
        self._values.pop(key, None)
        self._deps.pop(key, None)

    def clear(self) -> None:
        self._values.clear()
        self._deps.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __repr__(self) -> str:
        return f"ViewStore({self._values!r})"
