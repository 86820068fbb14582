"""Property change notifications for data binding.

Observers subscribe to one property token or to all of them and are called
synchronously, in subscription order, when a property changes.
"""

from typing import Any, Callable, List, Optional, Tuple, Union

from portable_i18n.logging import get_module_logger
from portable_i18n.models import PropertyName

logger = get_module_logger()

PropertyChangedHandler = Callable[[Any, str], Any]


class PropertyChangedNotifier:
    """Ordered registry of property-changed handlers.

    Attributes:
        sender: Object passed as the first argument to every handler.
    """

    def __init__(self, sender: Any):
        self.sender = sender
        self._handlers: List[Tuple[Optional[str], PropertyChangedHandler]] = []

    def subscribe(
        self,
        handler: PropertyChangedHandler,
        property_name: Optional[Union[PropertyName, str]] = None,
    ) -> PropertyChangedHandler:
        """Register a handler.

        Args:
            handler: Called as ``handler(sender, property_name)``.
            property_name: Token to listen to; None listens to every token.

        Returns:
            The handler, so this can be used as a decorator.
        """
        token = PropertyName(property_name).value if property_name is not None else None
        self._handlers.append((token, handler))
        logger.debug(
            "subscribed_property_handler",
            handler=getattr(handler, "__name__", "unknown"),
            property_name=token,
            total_handlers=len(self._handlers),
        )
        return handler

    def unsubscribe(self, handler: PropertyChangedHandler) -> None:
        """Remove every registration of a handler; unknown handlers are ignored."""
        self._handlers = [(t, h) for t, h in self._handlers if h is not handler]

    def notify(self, property_name: Union[PropertyName, str]) -> None:
        """Call the handlers listening to ``property_name``.

        Iterates over a snapshot, so handlers may unsubscribe while being
        notified.
        """
        token = PropertyName(property_name).value
        for listens_to, handler in list(self._handlers):
            if listens_to is not None and listens_to != token:
                continue
            try:
                handler(self.sender, token)
            except Exception as e:
                logger.error(
                    "property_handler_failed",
                    handler=getattr(handler, "__name__", "unknown"),
                    property_name=token,
                    error=str(e),
                )

    def clear(self) -> None:
        self._handlers = []

    def __len__(self) -> int:
        return len(self._handlers)
