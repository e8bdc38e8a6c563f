"""Client-side authentication for sessionkit."""

from .adapter import SessionAuthAdapter
from .context import AuthContext
from .factory import create_session_adapter, get_identity_provider
from .results import OperationResult
from .state import UNKNOWN, SessionStore

__all__ = [
    "SessionAuthAdapter",
    "AuthContext",
    "OperationResult",
    "SessionStore",
    "UNKNOWN",
    "create_session_adapter",
    "get_identity_provider",
]
