"""Textual integration for viewkeys. Requires textual.

Guard + NoMatches + thread-marshal are enforced here, not at callsites.
Textual coupling is isolated in this module; the store stays UI-agnostic.
_paused_apps has a single owner (this module); an id is present only while
inside the matching pause() context.
"""

import logging
import threading
from contextlib import contextmanager

from textual.css.query import NoMatches
from textual.widget import Widget
from textual.widgets import Static

from viewkeys.computation import Computation
from viewkeys.helpers import template_helper

logger = logging.getLogger("viewkeys.textual")

# Module-owned pause state, keyed by id(app) so multiple apps work in tests.
_paused_apps: set[int] = set()


@contextmanager
def pause(app):
    """Suspend guarded computations during widget replacement."""
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """Is the widget tree in a queryable state?"""
    return app.is_running and id(app) not in _paused_apps


class _GuardedComputation(Computation):
    """Computation whose re-runs respect pause() and the app's thread."""

    __slots__ = ("_app", "_main")

    def __init__(self, app, fn) -> None:
        super().__init__(fn)
        self._app = app
        self._main = threading.get_ident()

    def invalidate(self) -> None:
        if self.stopped or not is_safe(self._app):
            return
        if threading.get_ident() != self._main:
            self._app.call_from_thread(self._run)
        else:
            self._run()


def autorun(app, fn) -> Computation:
    """autorun() that safely bridges to Textual widgets.

    The initial run always happens so dependencies are tracked. Re-runs are
    skipped while the app is paused or not running, are marshaled with
    call_from_thread when triggered from another thread, and swallow
    NoMatches from widget queries.
    """

    def _safe(c):
        try:
            fn(c)
        except NoMatches as exc:
            logger.debug("Skipped re-run of %r: %s", fn, exc)

    c = _GuardedComputation(app, _safe)
    c._run()
    return c


def bind_view(app, store, key, container, registry) -> Computation:
    """Keep container showing the view stored under key.

    Each time key changes, the container's children are replaced with the
    rendered template. Widgets are mounted as they are; other non-empty
    output is wrapped in a Static.
    """
    helper = template_helper(store, registry)

    def _render(c):
        output = helper(key)
        container.remove_children()
        if isinstance(output, Widget):
            container.mount(output)
        elif output:
            container.mount(Static(output))

    return autorun(app, _render)
