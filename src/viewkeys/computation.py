"""Computations — re-runnable units of logic that track what they read.

A Computation runs its function with itself installed as the current
computation. Every store read made during the run subscribes the computation
to that key. When any of those keys changes, the computation is invalidated
and re-runs, re-tracking its dependencies from scratch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable
from viewkeys._tracking import current_computation, schedule

if TYPE_CHECKING:
    from viewkeys.dependency import Dependency


class Computation:
    """A reactive unit of work that re-runs when its dependencies change.

    The function receives the computation itself, so it can check
    ``first_run`` or call ``stop()`` from inside.
    """

    __slots__ = ("_fn", "_dependencies", "_stopped", "_first_run")

    def __init__(self, fn: Callable[[Computation], None]) -> None:
        self._fn = fn
        self._dependencies: set[Dependency] = set()
        self._stopped = False
        self._first_run = True

    @property
    def first_run(self) -> bool:
        """True during (and before) the initial run."""
        return self._first_run

    @property
    def stopped(self) -> bool:
        return self._stopped

    def invalidate(self) -> None:
        """Mark dirty. The scheduler decides when the re-run happens."""
        if not self._stopped:
            schedule(self)

    def _run(self) -> None:
        """Re-evaluate the function, re-tracking dependencies."""
        if self._stopped:
            return

        self._clear_dependencies()

        token = current_computation.set(self)
        try:
            self._fn(self)
        finally:
            current_computation.reset(token)
            self._first_run = False

    def _clear_dependencies(self) -> None:
        for dep in self._dependencies:
            dep._remove_dependent(self)
        self._dependencies.clear()

    def stop(self) -> None:
        """Stop this computation. Disconnects from all dependencies."""
        self._stopped = True
        self._clear_dependencies()

    def __repr__(self) -> str:
        state = "stopped" if self._stopped else "active"
        name = getattr(self._fn, "__name__", repr(self._fn))
        return f"Computation({name}, {state})"


def autorun(fn: Callable[[Computation], None]) -> Computation:
    """Run fn immediately, then re-run whenever any key it reads changes.

    Returns the Computation (call .stop() to end it).

    Usage:
        store = ViewStore()
        log = []

        c = autorun(lambda c: log.append(store.get("mainPane1")))
        # log == [None] — ran immediately

        store.set("mainPane1", "panes/unrated")
        # log == [None, "panes/unrated"]

        c.stop()
        store.set("mainPane1", "panes/rated")
        # log unchanged
    """
    c = Computation(fn)
    c._run()  # Initial run to establish dependencies
    return c
