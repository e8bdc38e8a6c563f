"""Authentication capability handed to consumers of an adapter."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from .results import OperationResult
from .state import ListenerSubscription, SessionStore, StoreListener


@dataclass(frozen=True)
class AuthContext:
    """
    Shared view of one adapter's session and operations.

    Passed explicitly to the code that needs it. Every holder reads the same
    SessionStore, so all observers see the same session value.
    """

    store: SessionStore
    sign_up: Callable[[str, str], Awaitable[OperationResult]]
    sign_in: Callable[[str, str], Awaitable[OperationResult]]
    sign_out: Callable[[], Awaitable[None]]

    @property
    def session(self) -> Any:
        return self.store.value

    @property
    def is_authenticated(self) -> bool:
        return self.store.has_session

    def subscribe(self, listener: StoreListener) -> ListenerSubscription:
        """Observe every write to the session value."""
        return self.store.subscribe(listener)
