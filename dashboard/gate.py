"""
Admin session gate.

A small state machine over the admin's auth session:

    loading -> authenticated | unauthenticated

The gate subscribes to auth-state changes while it is open and releases the
subscription when it is closed. Views use ``session_gate`` to send
unauthenticated visitors to the login page and signed-in admins away from it.
"""
from functools import wraps
from typing import Optional

from django.shortcuts import redirect

from backend.auth import SessionProvider, session_provider_for

LOADING = 'loading'
AUTHENTICATED = 'authenticated'
UNAUTHENTICATED = 'unauthenticated'

LOGIN_ROUTE = 'admin_login'
DASHBOARD_ROUTE = 'admin_dashboard'


class AdminSessionGate:
    def __init__(self, provider: SessionProvider):
        self.provider = provider
        self.state = LOADING
        self.session = None
        self._subscription = None

    def open(self) -> 'AdminSessionGate':
        self._subscription = self.provider.on_auth_state_change(self._on_auth_change)
        self._apply(self.provider.get_session())
        return self

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def __enter__(self) -> 'AdminSessionGate':
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def is_authenticated(self) -> bool:
        return self.state == AUTHENTICATED

    @property
    def access_token(self) -> Optional[str]:
        return self.session.access_token if self.session else None

    def landing_route(self) -> str:
        """Where this admin belongs right now."""
        return DASHBOARD_ROUTE if self.is_authenticated else LOGIN_ROUTE

    def redirect_for(self, route: str) -> Optional[str]:
        """
        Return the route to redirect to, or None when ``route`` may render.
        """
        if self.state == LOADING:
            return None
        if route == DASHBOARD_ROUTE and not self.is_authenticated:
            return LOGIN_ROUTE
        if route == LOGIN_ROUTE and self.is_authenticated:
            return DASHBOARD_ROUTE
        return None

    def _on_auth_change(self, event, session) -> None:
        self._apply(session)

    def _apply(self, session) -> None:
        self.session = session
        self.state = AUTHENTICATED if session is not None else UNAUTHENTICATED


def session_gate(route: str):
    """
    Decorate a view as belonging to the login or the dashboard route.

    The open gate is attached to the request as ``request.admin_gate``.
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapped(request, *args, **kwargs):
            with AdminSessionGate(session_provider_for(request)) as gate:
                target = gate.redirect_for(route)
                if target is not None:
                    return redirect(target)
                request.admin_gate = gate
                return view_func(request, *args, **kwargs)
        return wrapped
    return decorator
