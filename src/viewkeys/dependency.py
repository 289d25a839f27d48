"""Dependency — the per-key tracker behind every ViewStore key.

A Dependency remembers which computations read its key since their last
re-run. changed() invalidates all of them; each re-run drops its old
dependencies and registers fresh ones through its own reads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from viewkeys._tracking import current_computation

if TYPE_CHECKING:
    from viewkeys.computation import Computation


class Dependency:
    """Set of computations depending on one key."""

    __slots__ = ("_dependents",)

    def __init__(self) -> None:
        self._dependents: set[Computation] = set()

    def depend(self, computation: Computation | None = None) -> bool:
        """Register computation (default: the running one) as a dependent.

        Returns True if it was newly added. Outside any computation this is a
        no-op returning False.
        """
        if computation is None:
            computation = current_computation.get()
        if computation is None or computation.stopped:
            return False
        if computation in self._dependents:
            return False
        self._dependents.add(computation)
        computation._dependencies.add(self)
        return True

    def changed(self) -> None:
        """Invalidate every dependent."""
        for computation in list(self._dependents):
            computation.invalidate()

    def has_dependents(self) -> bool:
        return bool(self._dependents)

    def _remove_dependent(self, computation: Computation) -> None:
        self._dependents.discard(computation)

    def __repr__(self) -> str:
        return f"Dependency({len(self._dependents)} dependents)"
