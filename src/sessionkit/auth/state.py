"""Observable session container shared by every consumer of an adapter."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from enum import Enum
from typing import Any

from ..logging import get_logger

logger = get_logger(__name__)


class SessionState(Enum):
    UNKNOWN = "unknown"


# Value held before the provider has reported anything; distinct from None (absent)
UNKNOWN = SessionState.UNKNOWN

StoreListener = Callable[[Any], None]


class ListenerSubscription:
    """Subscription handle that removes its listener on unsubscribe."""

    def __init__(self, listeners: dict[str, Callable[..., None]], listener: Callable[..., None]):
        self.id = str(uuid.uuid4())
        self._listeners = listeners
        listeners[self.id] = listener

    @property
    def active(self) -> bool:
        return self.id in self._listeners

    def unsubscribe(self) -> None:
        self._listeners.pop(self.id, None)


class SessionStore:
    """
    Single writer, many readers container for the mirrored session.

    Writes are plain last-write-wins assignments. Every write is broadcast to
    subscribers in registration order.
    """

    def __init__(self) -> None:
        self._value: Any = UNKNOWN
        self._listeners: dict[str, Callable[..., None]] = {}

    @property
    def value(self) -> Any:
        return self._value

    @property
    def is_known(self) -> bool:
        return self._value is not UNKNOWN

    @property
    def has_session(self) -> bool:
        return self._value is not UNKNOWN and self._value is not None

    def set(self, value: Any) -> None:
        self._value = value
        for listener_id, listener in list(self._listeners.items()):
            try:
                listener(value)
            except Exception:
                logger.exception("Session listener failed", listener_id=listener_id)

    def subscribe(self, listener: StoreListener) -> ListenerSubscription:
        return ListenerSubscription(self._listeners, listener)

    def clear_subscribers(self) -> None:
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)
