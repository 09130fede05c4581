"""Textual integration for stalwart. Opt-in — requires textual.

Pushes view model change signals into Textual widgets, guarding against
updates while the widget tree is being rebuilt.

// [LAW:single-enforcer] Pause guard, NoMatches and thread marshaling live here, not in effects.
// [LAW:locality-or-seam] The core never imports textual; all coupling is in this module.
// [LAW:no-shared-mutable-globals] _paused_apps is owned by this module behind pause/is_safe;
//   an id is present exactly while inside its pause() block.
"""

import logging
import threading
from contextlib import contextmanager

from textual.css.query import NoMatches

logger = logging.getLogger("stalwart.textual")

# Module-owned pause state — keyed by id(app) so multiple apps work in tests.
_paused_apps: set[int] = set()


@contextmanager
def pause(app):
    """Suppress bound effects for `app` while its widgets are replaced."""
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """Is the widget tree in a queryable state?"""
    return app.is_running and id(app) not in _paused_apps


def _guard(app, fn):
    """Wrap fn so it only runs while app is safe, on the binding thread, ignoring NoMatches."""
    _main = threading.get_ident()

    def _safe(*args):
        try:
            fn(*args)
        except NoMatches:
            logger.debug("Widget gone, skipped update from %s", getattr(fn, "__name__", fn))

    def _guarded(*args):
        if not is_safe(app):
            return
        if threading.get_ident() != _main:
            app.call_from_thread(_safe, *args)
        else:
            _safe(*args)

    return _guarded


def bind(app, vm, name, effect, *, fire_immediately=False):
    """Call effect(getattr(vm, name)) whenever `name` changes on vm.

    `name` must be the attribute the property is read through, which is
    the case for stored() and computed() declarations. Returns a disposer.

    Usage:
        dispose = bind(app, person, "full_name",
                       lambda v: app.query_one("#name", Label).update(v))
    """
    guarded = _guard(app, lambda: effect(getattr(vm, name)))

    def _handler(source, changed):
        if changed == name:
            guarded()

    dispose = vm.subscribe(_handler)
    if fire_immediately:
        guarded()
    return dispose


def on_change(app, vm, fn):
    """Call fn(name) for every change signal vm raises. Returns a disposer."""
    guarded = _guard(app, fn)
    return vm.subscribe(lambda source, changed: guarded(changed))
