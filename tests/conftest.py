"""
Shared pytest fixtures and configuration for all tests.
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from sessionkit.auth.adapter import SessionAuthAdapter
from sessionkit.auth.providers.base import ProviderResponse


class FakeSession(dict):
    """Stand-in for a provider session object."""


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession(access_token="token-123", user={"id": "user-1", "email": "user@example.com"})


@pytest.fixture
def provider() -> MagicMock:
    """Identity provider double that records listeners and calls."""
    mock = MagicMock()
    mock.listeners = []
    mock.subscriptions = []

    async def on_session_change(listener):
        mock.listeners.append(listener)
        subscription = MagicMock()
        mock.subscriptions.append(subscription)
        return subscription

    def emit(event: str, session: Any | None) -> None:
        for listener in list(mock.listeners):
            listener(event, session)

    mock.emit = emit
    mock.get_session = AsyncMock(return_value=None)
    mock.on_session_change = AsyncMock(side_effect=on_session_change)
    mock.sign_up = AsyncMock(return_value=ProviderResponse(data={"user": {"id": "user-1"}}))
    mock.sign_in_with_password = AsyncMock(
        return_value=ProviderResponse(data={"session": {"access_token": "token-123"}})
    )
    mock.sign_out = AsyncMock(return_value=ProviderResponse())
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def adapter(provider: MagicMock) -> SessionAuthAdapter:
    return SessionAuthAdapter(provider=provider)
