"""
Dashboard app permissions

Permission for the admin JSON endpoints.
"""
from rest_framework import permissions

from backend.auth import session_provider_for


class HasAdminSession(permissions.BasePermission):
    """
    Permission that allows only requests carrying a live admin session.

    The session is attached to the request as ``admin_session``.
    """

    message = 'Admin sign-in required.'

    def has_permission(self, request, view):
        session = session_provider_for(request).get_session()
        request.admin_session = session
        return session is not None
