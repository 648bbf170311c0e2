"""Change notification for the cart.

Subscribers are plain callables keyed by event name. Emission is
synchronous and runs in registration order; a failing subscriber is logged
and skipped so the others still run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

CHANGE = "change"

Listener = Callable[[Any], None]


@dataclass(frozen=True)
class CartChangeEvent:
    """Payload of a ``"change"`` event.

    ``action`` is one of ``add``, ``remove``, ``update``, ``clear``;
    ``product_id`` is None for ``clear``.
    """

    action: str
    product_id: int | None = None


class EventEmitter:

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def on(self, event: str, callback: Listener) -> Callable[[], None]:
        """Subscribe *callback* and return a function that unsubscribes it.

        The returned function removes this exact registration by identity
        and is safe to call any number of times.
        """
        self._listeners.setdefault(event, []).append(callback)
        subscribed = True

        def unsubscribe() -> None:
            nonlocal subscribed
            if not subscribed:
                return
            subscribed = False
            listeners = self._listeners.get(event, [])
            for i, registered in enumerate(listeners):
                if registered is callback:
                    del listeners[i]
                    break

        return unsubscribe

    def emit(self, event: str, payload: Any) -> None:
        # Iterate over a snapshot so listeners may unsubscribe mid-emit
        for callback in list(self._listeners.get(event, [])):
            try:
                callback(payload)
            except Exception:
                logger.exception("Cart event listener %r failed on %r", callback, event)
