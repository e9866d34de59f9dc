"""
Backend client

Strategy interface for the hosted data service. Two implementations exist:

- RemoteDataService: REST calls (row API under /rest/v1, auth API under
  /auth/v1) made with ``requests``.
- NullDataService: neutral stand-in returning empty results and no sessions,
  used when credentials are missing.

The implementation is chosen once per process by ``get_data_service()``.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import requests
from django.conf import settings

from .records import AuthSession

logger = logging.getLogger(__name__)

NOT_FOUND_CODE = 'PGRST116'
SINGLE_OBJECT_MEDIA_TYPE = 'application/vnd.pgrst.object+json'


class DataServiceError(Exception):
    """
    Failure reported by the hosted service or raised while reaching it.
    """

    def __init__(self, message: str, code: str = '', status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status


class RecordNotFound(DataServiceError):
    """
    A singleton query matched no row.
    """


class AuthError(DataServiceError):
    """
    Sign-in, refresh or sign-out was rejected.
    """


class DataService:
    """
    Interface shared by the remote client and the null stand-in.

    Row methods take an optional ``access_token`` so writes run as the signed
    in admin; reads fall back to the anonymous key.
    """

    def select(
        self,
        table: str,
        *,
        order: Optional[str] = None,
        ascending: bool = True,
        filters: Optional[Dict[str, Any]] = None,
        access_token: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def select_single(
        self,
        table: str,
        *,
        filters: Optional[Dict[str, Any]] = None,
        access_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        raise NotImplementedError

    def insert(
        self,
        table: str,
        rows: Iterable[Dict[str, Any]],
        *,
        access_token: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def update(
        self,
        table: str,
        values: Dict[str, Any],
        *,
        match: Dict[str, Any],
        access_token: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def delete(
        self,
        table: str,
        *,
        match: Dict[str, Any],
        access_token: Optional[str] = None,
    ) -> None:
        raise NotImplementedError

    def sign_in_with_password(self, email: str, password: str) -> Optional[AuthSession]:
        raise NotImplementedError

    def refresh_session(self, refresh_token: str) -> Optional[AuthSession]:
        raise NotImplementedError

    def sign_out(self, access_token: str) -> None:
        raise NotImplementedError


class RemoteDataService(DataService):
    """
    Client for the hosted row and auth REST APIs.
    """

    def __init__(self, url: str, anon_key: str, timeout: float = 10):
        self.base_url = url.rstrip('/')
        self.anon_key = anon_key
        self.timeout = timeout
        self.session = requests.Session()

    # Rows

    def select(self, table, *, order=None, ascending=True, filters=None, access_token=None):
        params = {'select': '*', **self._eq_filters(filters)}
        if order:
            params['order'] = f"{order}.{'asc' if ascending else 'desc'}"
        return self._rows(self._request('GET', f'/rest/v1/{table}', params=params, access_token=access_token))

    def select_single(self, table, *, filters=None, access_token=None):
        params = {'select': '*', **self._eq_filters(filters)}
        return self._request(
            'GET',
            f'/rest/v1/{table}',
            params=params,
            headers={'Accept': SINGLE_OBJECT_MEDIA_TYPE},
            access_token=access_token,
        )

    def insert(self, table, rows, *, access_token=None):
        return self._rows(
            self._request(
                'POST',
                f'/rest/v1/{table}',
                json=list(rows),
                headers={'Prefer': 'return=representation'},
                access_token=access_token,
            )
        )

    def update(self, table, values, *, match, access_token=None):
        return self._rows(
            self._request(
                'PATCH',
                f'/rest/v1/{table}',
                params=self._eq_filters(match),
                json=values,
                headers={'Prefer': 'return=representation'},
                access_token=access_token,
            )
        )

    def delete(self, table, *, match, access_token=None):
        self._request('DELETE', f'/rest/v1/{table}', params=self._eq_filters(match), access_token=access_token)

    # Auth

    def sign_in_with_password(self, email, password):
        payload = self._auth_request(
            'POST',
            '/auth/v1/token',
            params={'grant_type': 'password'},
            json={'email': email, 'password': password},
        )
        return AuthSession.from_payload(payload)

    def refresh_session(self, refresh_token):
        payload = self._auth_request(
            'POST',
            '/auth/v1/token',
            params={'grant_type': 'refresh_token'},
            json={'refresh_token': refresh_token},
        )
        return AuthSession.from_payload(payload)

    def sign_out(self, access_token):
        self._auth_request('POST', '/auth/v1/logout', access_token=access_token)

    # Plumbing

    @staticmethod
    def _eq_filters(filters: Optional[Dict[str, Any]]) -> Dict[str, str]:
        return {column: f'eq.{value}' for column, value in (filters or {}).items()}

    @staticmethod
    def _rows(payload: Any) -> List[Dict[str, Any]]:
        if payload is None:
            return []
        if isinstance(payload, dict):
            return [payload]
        return list(payload)

    def _headers(self, access_token: Optional[str], extra: Optional[Dict[str, str]]) -> Dict[str, str]:
        headers = {
            'apikey': self.anon_key,
            'Authorization': f'Bearer {access_token or self.anon_key}',
        }
        headers.update(extra or {})
        return headers

    def _send(self, method, path, *, params=None, json=None, headers=None, access_token=None):
        try:
            return self.session.request(
                method,
                f'{self.base_url}{path}',
                params=params,
                json=json,
                headers=self._headers(access_token, headers),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Request to data service failed: %s %s: %s", method, path, exc)
            raise DataServiceError(f"Could not reach the data service: {exc}") from exc

    def _request(self, method, path, **kwargs) -> Any:
        response = self._send(method, path, **kwargs)
        if response.ok:
            return self._json(response)

        message, code = self._error_details(response)
        if code == NOT_FOUND_CODE:
            raise RecordNotFound(message, code=code, status=response.status_code)
        raise DataServiceError(message, code=code, status=response.status_code)

    def _auth_request(self, method, path, **kwargs) -> Any:
        response = self._send(method, path, **kwargs)
        if response.ok:
            return self._json(response)

        message, code = self._error_details(response)
        raise AuthError(message, code=code, status=response.status_code)

    @staticmethod
    def _json(response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _error_details(response):
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        message = (
            body.get('message')
            or body.get('msg')
            or body.get('error_description')
            or body.get('error')
            or f"Data service returned HTTP {response.status_code}"
        )
        code = body.get('code') or body.get('error_code') or ''
        return str(message), str(code)


class NullDataService(DataService):
    """
    Neutral stand-in used when the hosted service is not configured.

    Reads come back empty, writes change nothing and no session is ever issued.
    """

    def select(self, table, *, order=None, ascending=True, filters=None, access_token=None):
        return []

    def select_single(self, table, *, filters=None, access_token=None):
        raise RecordNotFound("No rows available", code=NOT_FOUND_CODE)

    def insert(self, table, rows, *, access_token=None):
        return []

    def update(self, table, values, *, match, access_token=None):
        return []

    def delete(self, table, *, match, access_token=None):
        return None

    def sign_in_with_password(self, email, password):
        return None

    def refresh_session(self, refresh_token):
        return None

    def sign_out(self, access_token):
        return None


_data_service: Optional[DataService] = None


def build_data_service() -> DataService:
    """
    Choose the remote client when both credentials are set, else the null one.
    """
    url = getattr(settings, 'SUPABASE_URL', '')
    anon_key = getattr(settings, 'SUPABASE_ANON_KEY', '')
    if url and anon_key:
        return RemoteDataService(url, anon_key, timeout=getattr(settings, 'BACKEND_TIMEOUT', 10))

    logger.warning("Data service credentials missing. Using null data service.")
    return NullDataService()


def get_data_service() -> DataService:
    global _data_service
    if _data_service is None:
        _data_service = build_data_service()
    return _data_service
