"""
In-memory data service for tests.
"""
import itertools

from backend.client import AuthError, DataService, RecordNotFound, NOT_FOUND_CODE
from backend.records import AuthSession


class FakeDataService(DataService):
    """
    Keeps rows in dicts and records every call.

    Put an exception in ``errors`` under a method name to make that method
    raise it.
    """

    def __init__(self, tables=None, password='secret', expires_at=0):
        self.tables = {name: [dict(row) for row in rows] for name, rows in (tables or {}).items()}
        self.password = password
        self.expires_at = expires_at
        self.errors = {}
        self.calls = []
        self._ids = itertools.count(1)

    def _record(self, method, *args):
        self.calls.append((method,) + args)
        if method in self.errors:
            raise self.errors[method]

    def _matches(self, row, match):
        return all(str(row.get(column)) == str(value) for column, value in (match or {}).items())

    def select(self, table, *, order=None, ascending=True, filters=None, access_token=None):
        self._record('select', table)
        rows = [dict(row) for row in self.tables.get(table, []) if self._matches(row, filters)]
        if order:
            rows.sort(key=lambda row: row.get(order), reverse=not ascending)
        return rows

    def select_single(self, table, *, filters=None, access_token=None):
        self._record('select_single', table)
        rows = [row for row in self.tables.get(table, []) if self._matches(row, filters)]
        if not rows:
            raise RecordNotFound("JSON object requested, multiple (or no) rows returned", code=NOT_FOUND_CODE)
        return dict(rows[0])

    def insert(self, table, rows, *, access_token=None):
        self._record('insert', table)
        inserted = []
        for row in rows:
            row = {'id': f'{table}-{next(self._ids)}', **row}
            self.tables.setdefault(table, []).append(row)
            inserted.append(dict(row))
        return inserted

    def update(self, table, values, *, match, access_token=None):
        self._record('update', table)
        updated = []
        for row in self.tables.get(table, []):
            if self._matches(row, match):
                row.update(values)
                updated.append(dict(row))
        return updated

    def delete(self, table, *, match, access_token=None):
        self._record('delete', table)
        self.tables[table] = [row for row in self.tables.get(table, []) if not self._matches(row, match)]

    def sign_in_with_password(self, email, password):
        self._record('sign_in_with_password', email)
        if password != self.password:
            raise AuthError("Invalid login credentials", code='invalid_credentials', status=400)
        return AuthSession(
            access_token='access-token',
            refresh_token='refresh-token',
            expires_at=self.expires_at,
            user={'email': email},
        )

    def refresh_session(self, refresh_token):
        self._record('refresh_session', refresh_token)
        return AuthSession(
            access_token='refreshed-token',
            refresh_token='refresh-token-2',
            expires_at=0,
            user={'email': 'admin@example.com'},
        )

    def sign_out(self, access_token):
        self._record('sign_out', access_token)
