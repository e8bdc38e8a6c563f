"""Factory for creating identity providers and adapters based on configuration."""

from __future__ import annotations

import os

from ..config import Settings
from .adapter import SessionAuthAdapter
from .providers.base import IdentityProvider
from .providers.memory import MemoryIdentityProvider
from .providers.supabase import SupabaseIdentityProvider


def get_identity_provider(settings: Settings | None = None) -> IdentityProvider:
    """Create and return the configured identity provider."""
    settings = settings or Settings()
    provider = settings.auth_provider.lower()

    if provider == "memory":
        return MemoryIdentityProvider(environment=settings.environment)

    elif provider == "supabase":
        url = settings.supabase_url or os.getenv("SUPABASE_URL")
        anon_key = settings.supabase_anon_key or os.getenv("SUPABASE_ANON_KEY")

        if not url or not anon_key:
            raise ValueError(
                "Supabase URL and anon key are required. "
                "Set SUPABASE_URL and SUPABASE_ANON_KEY or SESSIONKIT_SUPABASE_URL "
                "and SESSIONKIT_SUPABASE_ANON_KEY."
            )

        return SupabaseIdentityProvider(url=url, anon_key=anon_key)

    else:
        raise ValueError(f"Unsupported auth provider: {settings.auth_provider}")


def create_session_adapter(
    settings: Settings | None = None,
    provider: IdentityProvider | None = None,
) -> SessionAuthAdapter:
    """Create an unstarted adapter wired to the configured provider."""
    settings = settings or Settings()
    return SessionAuthAdapter(
        provider=provider or get_identity_provider(settings),
        legacy_password_hashing=settings.legacy_password_hashing,
        bcrypt_rounds=settings.bcrypt_rounds,
    )
