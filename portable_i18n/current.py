"""Process-wide I18N instance for the application's composition root.

Library code should receive an ``I18N`` explicitly; this registry only
exists so an application can wire one instance at startup and reach it from
places it does not control (templates, UI bindings).

Usage:
    from portable_i18n import current, create_i18n

    current.set_current(create_i18n(host="myapp"))
    current.get_current().translate("one")
    current.dispose_current()
"""

from threading import Lock
from typing import Optional

from portable_i18n.exceptions import I18NError
from portable_i18n.logging import get_module_logger
from portable_i18n.translator import I18N

logger = get_module_logger()

_CURRENT: Optional[I18N] = None
_current_lock = Lock()


def set_current(i18n: Optional[I18N]) -> None:
    """Register the application's I18N instance (None unregisters it)."""
    global _CURRENT
    with _current_lock:
        _CURRENT = i18n
    logger.debug("current_i18n_set", instance=repr(i18n))


def get_current() -> I18N:
    """Return the registered instance.

    Raises:
        I18NError: If no instance is registered.
    """
    instance = _CURRENT
    if instance is None:
        raise I18NError("No current I18N instance registered, call set_current() first")
    return instance


def dispose_current() -> None:
    """Dispose the registered instance, if any, and unregister it."""
    global _CURRENT
    with _current_lock:
        instance, _CURRENT = _CURRENT, None
    if instance is not None:
        instance.dispose()
