"""
State reconcilers for the admin editors.

Each function takes the prior local collection and the outcome of a remote
mutation and returns a new collection; the input list is never modified.
"""
from typing import Any, Iterable, List, TypeVar

T = TypeVar('T')


def _same_id(record: Any, record_id: Any) -> bool:
    return str(record.id) == str(record_id)


def append_rows(collection: List[T], inserted: Iterable[T]) -> List[T]:
    """Add server-returned rows after the existing ones."""
    return [*collection, *inserted]


def prepend_rows(collection: List[T], inserted: Iterable[T]) -> List[T]:
    """Add server-returned rows before the existing ones (newest first)."""
    return [*inserted, *collection]


def remove_by_id(collection: List[T], record_id: Any) -> List[T]:
    return [record for record in collection if not _same_id(record, record_id)]


def replace_by_id(collection: List[T], record: T) -> List[T]:
    return [record if _same_id(item, record.id) else item for item in collection]
