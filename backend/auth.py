"""
Auth session provider

Keeps the hosted-service session in the Django session and notifies
subscribers when it changes. Views and the admin gate depend on this
interface instead of on a client singleton.
"""
import logging
from typing import Callable, List, Optional

from .client import AuthError, DataService, DataServiceError, get_data_service
from .records import AuthSession

logger = logging.getLogger(__name__)

SESSION_KEY = 'backend.auth_session'

SIGNED_IN = 'SIGNED_IN'
SIGNED_OUT = 'SIGNED_OUT'
TOKEN_REFRESHED = 'TOKEN_REFRESHED'

AuthListener = Callable[[str, Optional[AuthSession]], None]


class Subscription:
    """Handle returned by ``on_auth_state_change``."""

    def __init__(self, listeners: List[AuthListener], callback: AuthListener):
        self._listeners = listeners
        self._callback = callback

    def unsubscribe(self) -> None:
        if self._callback in self._listeners:
            self._listeners.remove(self._callback)


class SessionProvider:
    """
    Current-session accessor plus change notifications.

    Args:
        service: Data service used for sign-in, refresh and sign-out.
        store: Mapping that persists the session between requests
            (normally ``request.session``).
    """

    def __init__(self, service: DataService, store):
        self.service = service
        self.store = store
        self._listeners: List[AuthListener] = []

    def get_session(self, now: Optional[float] = None) -> Optional[AuthSession]:
        data = self.store.get(SESSION_KEY)
        if not data:
            return None

        session = AuthSession.from_dict(data)
        if not session.is_expired(now):
            return session

        if session.refresh_token:
            try:
                refreshed = self.service.refresh_session(session.refresh_token)
            except DataServiceError as exc:
                logger.warning("Session refresh failed: %s", exc)
                refreshed = None
            if refreshed is not None:
                self._store(refreshed)
                self._notify(TOKEN_REFRESHED, refreshed)
                return refreshed

        self._clear()
        self._notify(SIGNED_OUT, None)
        return None

    def on_auth_state_change(self, callback: AuthListener) -> Subscription:
        self._listeners.append(callback)
        return Subscription(self._listeners, callback)

    def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        """
        Sign in and store the issued session.

        Raises:
            AuthError: If the credentials are rejected or no session was issued.
        """
        session = self.service.sign_in_with_password(email, password)
        if session is None or not session.access_token:
            raise AuthError("Sign-in is unavailable: the data service is not configured.")

        self._store(session)
        self._notify(SIGNED_IN, session)
        return session

    def sign_out(self) -> None:
        data = self.store.get(SESSION_KEY)
        if data:
            try:
                self.service.sign_out(data.get('access_token', ''))
            except DataServiceError as exc:
                # The local session is dropped either way.
                logger.warning("Remote sign-out failed: %s", exc)
        self._clear()
        self._notify(SIGNED_OUT, None)

    def _store(self, session: AuthSession) -> None:
        self.store[SESSION_KEY] = session.to_dict()

    def _clear(self) -> None:
        self.store.pop(SESSION_KEY, None)

    def _notify(self, event: str, session: Optional[AuthSession]) -> None:
        for listener in list(self._listeners):
            listener(event, session)


def session_provider_for(request) -> SessionProvider:
    """Build a provider bound to the request's Django session."""
    return SessionProvider(get_data_service(), request.session)
