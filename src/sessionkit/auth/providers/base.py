"""Identity provider interface and shared types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal, Protocol

AuthEvent = Literal[
    "INITIAL_SESSION",
    "SIGNED_IN",
    "SIGNED_OUT",
    "TOKEN_REFRESHED",
    "USER_UPDATED",
    "PASSWORD_RECOVERY",
]

# Called with (event, session); session is None once the identity is gone
SessionListener = Callable[[AuthEvent, Any | None], None]


@dataclass(frozen=True)
class ProviderError:
    """Error acknowledged by the identity provider."""

    message: str
    status: int | None = None
    code: str | None = None


@dataclass(frozen=True)
class ProviderResponse:
    """
    Outcome of a provider call.

    A present ``error`` means the call did not take effect.
    """

    data: Any = None
    error: ProviderError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Subscription(Protocol):
    """Handle for a registered listener."""

    def unsubscribe(self) -> None: ...


class IdentityProvider(Protocol):
    """Provider-agnostic client-side identity interface."""

    async def get_session(self) -> Any | None:
        """
        Fetch the current session.

        Returns:
            The provider's session object, or None when signed out
        """
        ...

    async def on_session_change(self, listener: SessionListener) -> Subscription:
        """
        Register a persistent listener for session transitions.

        The listener may fire any number of times for the lifetime of the
        subscription.

        Args:
            listener: Callable invoked with (event, session_or_none)

        Returns:
            Subscription that releases the listener when unsubscribed
        """
        ...

    async def sign_up(self, email: str, password: str) -> ProviderResponse:
        """Register a new user with email and password."""
        ...

    async def sign_in_with_password(self, email: str, password: str) -> ProviderResponse:
        """Authenticate an existing user with email and password."""
        ...

    async def sign_out(self) -> ProviderResponse:
        """Invalidate the current session."""
        ...

    async def close(self) -> None:
        """Release any underlying client resources."""
        ...


class AuthProviderError(Exception):
    """Raised when an identity provider cannot be created or used."""

    pass
