"""Supabase Auth identity provider."""

from __future__ import annotations

import asyncio
from typing import Any

from supabase import AsyncClient, AuthApiError, create_async_client

from ...logging import get_logger
from .base import AuthEvent, ProviderError, ProviderResponse, SessionListener, Subscription

logger = get_logger(__name__)


def _to_provider_error(error: AuthApiError) -> ProviderError:
    return ProviderError(
        message=error.message,
        status=getattr(error, "status", None),
        code=getattr(error, "code", None),
    )


class SupabaseIdentityProvider:
    """Identity provider backed by the Supabase Auth client."""

    def __init__(self, url: str, anon_key: str):
        """
        Initialize Supabase provider.

        Args:
            url: Supabase project URL
            anon_key: Public anon key used by client applications
        """
        self.url = url
        self.anon_key = anon_key
        self._client: AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    async def _get_client(self) -> AsyncClient:
        """Get or create the async Supabase client."""
        if self._client is None:
            # Concurrent first calls must share one client and its listeners
            async with self._client_lock:
                if self._client is None:
                    self._client = await create_async_client(self.url, self.anon_key)
        return self._client

    async def get_session(self) -> Any | None:
        client = await self._get_client()
        return await client.auth.get_session()

    async def on_session_change(self, listener: SessionListener) -> Subscription:
        client = await self._get_client()

        def _forward(event: AuthEvent, session: Any | None) -> None:
            logger.debug("Supabase auth state changed", auth_event=event)
            listener(event, session)

        return client.auth.on_auth_state_change(_forward)

    async def sign_up(self, email: str, password: str) -> ProviderResponse:
        client = await self._get_client()
        try:
            response = await client.auth.sign_up({"email": email, "password": password})
        except AuthApiError as e:
            logger.warning("Supabase sign-up rejected", error=e.message)
            return ProviderResponse(error=_to_provider_error(e))
        return ProviderResponse(data=response)

    async def sign_in_with_password(self, email: str, password: str) -> ProviderResponse:
        client = await self._get_client()
        try:
            response = await client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthApiError as e:
            logger.warning("Supabase sign-in rejected", error=e.message)
            return ProviderResponse(error=_to_provider_error(e))
        return ProviderResponse(data=response)

    async def sign_out(self) -> ProviderResponse:
        client = await self._get_client()
        try:
            await client.auth.sign_out()
        except AuthApiError as e:
            logger.warning("Supabase sign-out rejected", error=e.message)
            return ProviderResponse(error=_to_provider_error(e))
        return ProviderResponse()

    async def close(self) -> None:
        # The next call creates a fresh client
        self._client = None
