"""Dependency tracking engine.

Uses contextvars to track which computation is running, so that any
ViewStore.get() made during its evaluation registers a dependency on the key.

There is no batching: invalidating a computation re-runs it immediately, on
the calling stack. Writes coming from a background thread are marshaled to
the owning thread once set_scheduler() has been called.
"""

from __future__ import annotations

import contextvars
import threading
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from viewkeys.computation import Computation

# The currently-running computation.
# When set, any Dependency.depend() call without an explicit computation uses it.
current_computation: contextvars.ContextVar[Computation | None] = contextvars.ContextVar(
    "current_computation", default=None
)

_scheduler: Callable[[Callable[[], None]], object] | None = None
_scheduler_thread: threading.Thread | None = None


def schedule(computation: Computation) -> None:
    """Re-run an invalidated computation. Runs immediately."""
    computation._run()


def set_scheduler(scheduler) -> None:
    """Set the global thread scheduler for cross-thread store writes.

    Call once from the main/UI thread:
        viewkeys.set_scheduler(app.call_from_thread)

    After this, any ViewStore.set() from a background thread is automatically
    marshaled. Main-thread writes remain synchronous. Pass None to reset.
    """
    global _scheduler, _scheduler_thread
    _scheduler = scheduler
    _scheduler_thread = threading.current_thread() if scheduler is not None else None


def marshal(fn: Callable[[], None]) -> bool:
    """Hand fn to the scheduler if called off the owning thread.

    Returns True when fn was marshaled, False when the caller should run it.
    """
    if _scheduler is not None and threading.current_thread() != _scheduler_thread:
        _scheduler(fn)
        return True
    return False
