"""Identity providers the session adapter can sit on."""

from .base import (
    AuthProviderError,
    IdentityProvider,
    ProviderError,
    ProviderResponse,
    Subscription,
)
from .memory import MemoryIdentityProvider
from .supabase import SupabaseIdentityProvider

__all__ = [
    "AuthProviderError",
    "IdentityProvider",
    "ProviderError",
    "ProviderResponse",
    "Subscription",
    "MemoryIdentityProvider",
    "SupabaseIdentityProvider",
]
