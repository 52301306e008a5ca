"""Common utilities for tests."""

from typing import Any

from mockfirestore import CollectionReference, Query
from mockfirestore.document import DocumentReference


class MockTransaction:
    """Stands in for a Firestore transaction by writing straight through."""

    def __init__(self) -> None:
        self.writes: list[tuple[Any, Any]] = []

    def update(self, ref: Any, data: dict[str, Any]) -> None:
        self.writes.append((ref, data))
        ref.update(data)

    def set(self, ref: Any, data: dict[str, Any], merge: bool = False) -> None:
        self.writes.append((ref, data))
        ref.set(data, merge=merge)


def patch_mockfirestore() -> None:
    """Apply monkeypatches to mockfirestore for transactional reads and equality."""

    def collection_where(
        self: Any,
        field_path: Any = None,
        op_string: Any = None,
        value: Any = None,
        filter: Any = None,
    ) -> Any:
        if filter:
            return self._where(filter.field_path, filter.op_string, filter.value)
        return self._where(field_path, op_string, value)

    if not hasattr(CollectionReference, "_where"):
        CollectionReference._where = CollectionReference.where
        CollectionReference.where = collection_where

    if not hasattr(Query, "_where"):
        Query._where = Query.where
        Query.where = collection_where

    def doc_ref_eq(self: Any, other: Any) -> bool:
        if not isinstance(other, DocumentReference):
            return False
        return self._path == other._path

    if not hasattr(DocumentReference, "_orig_eq"):
        DocumentReference._orig_eq = DocumentReference.__eq__
        DocumentReference.__eq__ = doc_ref_eq
        DocumentReference.__hash__ = lambda self: hash(tuple(self._path))

    if not hasattr(DocumentReference, "_orig_get"):
        DocumentReference._orig_get = DocumentReference.get

        def patched_get(self: Any, transaction: Any = None, **kwargs: Any) -> Any:
            return self._orig_get()

        DocumentReference.get = patched_get
