"""In-process identity provider for local development and tests."""

from __future__ import annotations

import secrets
import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from ...logging import get_logger
from ..state import ListenerSubscription
from .base import (
    AuthEvent,
    AuthProviderError,
    ProviderError,
    ProviderResponse,
    SessionListener,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class MemoryUser:
    id: str
    email: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class MemorySession:
    user: MemoryUser
    access_token: str = field(default_factory=lambda: secrets.token_urlsafe(32))
    token_type: str = "bearer"


class MemoryIdentityProvider:
    """
    Identity provider that keeps users and the current session in memory.

    Mirrors the notification behavior of a hosted provider: a successful
    sign-up or sign-in emits SIGNED_IN, and sign-out emits SIGNED_OUT.
    Listeners are invoked synchronously from the call that caused the change.
    WARNING: Only use this in development environments!
    """

    def __init__(self, environment: str = "development"):
        if environment.lower() in ("production", "prod"):
            logger.error(
                "MemoryIdentityProvider detected in production environment!",
                environment=environment,
            )
            raise AuthProviderError(
                "MemoryIdentityProvider cannot be used in production environments. "
                "Please configure a hosted identity provider."
            )

        self._users: dict[str, tuple[MemoryUser, str]] = {}
        self._session: MemorySession | None = None
        self._listeners: dict[str, Any] = {}

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _emit(self, event: AuthEvent, session: MemorySession | None) -> None:
        for listener in list(self._listeners.values()):
            listener(event, session)

    async def get_session(self) -> MemorySession | None:
        return self._session

    async def on_session_change(self, listener: SessionListener) -> ListenerSubscription:
        return ListenerSubscription(self._listeners, listener)

    async def sign_up(self, email: str, password: str) -> ProviderResponse:
        if email in self._users:
            return ProviderResponse(
                error=ProviderError("User already registered", status=422, code="user_already_exists")
            )

        user = MemoryUser(id=str(uuid.uuid4()), email=email)
        self._users[email] = (user, password)
        self._session = MemorySession(user=user)
        logger.info("Registered in-memory user", user_id=user.id)
        self._emit("SIGNED_IN", self._session)
        return ProviderResponse(data={"user": user, "session": self._session})

    async def sign_in_with_password(self, email: str, password: str) -> ProviderResponse:
        record = self._users.get(email)
        if record is None or not secrets.compare_digest(record[1].encode(), password.encode()):
            return ProviderResponse(
                error=ProviderError(
                    "Invalid login credentials", status=400, code="invalid_credentials"
                )
            )

        user = record[0]
        self._session = MemorySession(user=user)
        self._emit("SIGNED_IN", self._session)
        return ProviderResponse(data={"user": user, "session": self._session})

    async def sign_out(self) -> ProviderResponse:
        self._session = None
        self._emit("SIGNED_OUT", None)
        return ProviderResponse()

    async def close(self) -> None:
        self._listeners.clear()
