"""Client-side session adapter over an identity provider."""

from __future__ import annotations

import asyncio
import contextlib
from typing import Any

from ..logging import get_logger
from .context import AuthContext
from .password import PASSWORD_POLICY_MESSAGE, meets_password_policy, prepare_password
from .providers.base import AuthEvent, IdentityProvider, Subscription
from .results import UNEXPECTED_ERROR_MESSAGE, OperationResult
from .state import SessionStore

logger = get_logger(__name__)


class SessionAuthAdapter:
    """
    Mirror an identity provider's session and expose sign-up, sign-in and sign-out.

    The session value is written only from the provider: once by the initial
    fetch and again on every change notification. Writes land in arrival
    order with no reconciliation, so a notification that arrives after the
    fetch resolves always wins. Sign-up, sign-in and sign-out never touch the
    session value directly; the provider's notifications do.
    """

    def __init__(
        self,
        provider: IdentityProvider,
        legacy_password_hashing: bool = False,
        bcrypt_rounds: int = 10,
        store: SessionStore | None = None,
    ):
        """
        Initialize the adapter.

        Args:
            provider: Identity provider to forward credentials to
            legacy_password_hashing: Send bcrypt hashes instead of plaintext passwords
            bcrypt_rounds: bcrypt cost factor for legacy hashing
            store: Session container to write into (a new one by default)
        """
        self.provider = provider
        self.legacy_password_hashing = legacy_password_hashing
        self.bcrypt_rounds = bcrypt_rounds
        self.store = store or SessionStore()

        self._started = False
        self._subscription: Subscription | None = None
        self._initial_fetch: asyncio.Task[None] | None = None

    @property
    def session(self) -> Any:
        return self.store.value

    @property
    def started(self) -> bool:
        return self._started

    async def start(self) -> None:
        """Start the initial session fetch and subscribe to session changes."""
        if self._started:
            raise RuntimeError("SessionAuthAdapter.start() may only be called once")

        initial_fetch = asyncio.create_task(self._fetch_initial_session())
        try:
            self._subscription = await self.provider.on_session_change(self._on_session_change)
        except BaseException:
            initial_fetch.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await initial_fetch
            raise

        self._initial_fetch = initial_fetch
        self._started = True
        logger.debug("Session adapter started")

    async def ready(self) -> None:
        """Wait for the initial session fetch to finish."""
        if self._initial_fetch is None:
            raise RuntimeError("SessionAuthAdapter has not been started")
        await self._initial_fetch

    async def close(self) -> None:
        """Release the change subscription and cancel a pending initial fetch."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

        if self._initial_fetch is not None and not self._initial_fetch.done():
            self._initial_fetch.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._initial_fetch

    async def __aenter__(self) -> SessionAuthAdapter:
        await self.start()
        await self.ready()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _fetch_initial_session(self) -> None:
        try:
            session = await self.provider.get_session()
        except Exception:
            logger.exception("Failed to fetch current session")
            return
        self.store.set(session)

    def _on_session_change(self, event: AuthEvent, session: Any | None) -> None:
        logger.debug("Session changed", auth_event=event, present=session is not None)
        self.store.set(session)

    async def _provider_password(self, password: str) -> str:
        return await prepare_password(
            password,
            legacy_hashing=self.legacy_password_hashing,
            rounds=self.bcrypt_rounds,
        )

    async def sign_up(self, email: str, password: str) -> OperationResult:
        """
        Register a new user.

        Args:
            email: Email address, lowercased before it is sent
            password: Plaintext password, checked against the complexity policy

        Returns:
            OperationResult carrying the provider payload or an error message
        """
        if not meets_password_policy(password):
            logger.info("Sign-up rejected by password policy")
            return OperationResult.fail(PASSWORD_POLICY_MESSAGE)

        try:
            response = await self.provider.sign_up(
                email.lower(), await self._provider_password(password)
            )
        except Exception:
            logger.exception("Unexpected error during sign-up")
            return OperationResult.fail(UNEXPECTED_ERROR_MESSAGE)

        if response.error is not None:
            logger.error("Error signing up", error=response.error.message)
            return OperationResult.fail(response.error.message)

        return OperationResult.ok(response.data)

    async def sign_in(self, email: str, password: str) -> OperationResult:
        """
        Sign in an existing user.

        Args:
            email: Email address, lowercased before it is sent
            password: Plaintext password

        Returns:
            OperationResult carrying the provider payload or an error message
        """
        try:
            response = await self.provider.sign_in_with_password(
                email.lower(), await self._provider_password(password)
            )
        except Exception:
            logger.exception("Unexpected error during sign-in")
            return OperationResult.fail(UNEXPECTED_ERROR_MESSAGE)

        if response.error is not None:
            logger.error("Sign-in error", error=response.error.message)
            return OperationResult.fail(response.error.message)

        logger.info("Sign-in success")
        return OperationResult.ok(response.data)

    async def sign_out(self) -> None:
        """Ask the provider to end the current session; failures are logged."""
        if not self.store.has_session:
            logger.error("No active session to sign out.")
            return

        try:
            response = await self.provider.sign_out()
        except Exception:
            logger.exception("Unexpected error during sign-out")
            return

        if response.error is not None:
            logger.error("Error signing out", error=response.error.message)

    def context(self) -> AuthContext:
        """Build the capability object handed to consumers."""
        return AuthContext(
            store=self.store,
            sign_up=self.sign_up,
            sign_in=self.sign_in,
            sign_out=self.sign_out,
        )
