"""Shared fixtures: an in-memory store standing in for Firestore."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional

import pytest

from fsinspect.errors import DocumentNotFound, MalformedRemoteRequest
from fsinspect.models import RawDocument

CREATED = datetime(2023, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)
READ = datetime(2023, 5, 2, 8, 0, 0, 999999, tzinfo=timezone.utc)
UPDATED = datetime(2023, 5, 1, 13, 0, 0, tzinfo=timezone.utc)


def make_doc(path: str, data: Dict[str, Any] | None = None) -> RawDocument:
    return RawDocument(
        id=path.rpartition("/")[2],
        path=path,
        data=data or {},
        create_time=CREATED,
        read_time=READ,
        update_time=UPDATED,
    )


class FakeStore:
    """Store keeping documents in insertion order, recording every call."""

    def __init__(
        self,
        documents: List[RawDocument] | None = None,
        collections: Dict[Optional[str], List[str]] | None = None,
        malformed: tuple[str, ...] = (),
    ) -> None:
        self.documents = {doc.path: doc for doc in documents or []}
        self.collections = collections or {}
        self.malformed = set(malformed)
        self.calls: List[tuple] = []
        self.closed = False

    def get_document(
        self, container_path: str, document_id: str, *, timeout: float | None = None
    ) -> RawDocument:
        path = f"{container_path}/{document_id}"
        self.calls.append(("get_document", path))
        if path in self.malformed:
            raise MalformedRemoteRequest("invalid argument", path=path)
        try:
            return self.documents[path]
        except KeyError:
            raise DocumentNotFound("no such document", path=path) from None

    def _children(self, collection_path: str) -> Iterator[RawDocument]:
        for path, doc in self.documents.items():
            if path.rpartition("/")[0] == collection_path:
                yield doc

    def iter_documents(
        self, collection_path: str, *, timeout: float | None = None
    ) -> Iterator[RawDocument]:
        self.calls.append(("iter_documents", collection_path))
        if collection_path.count("/") % 2:
            raise MalformedRemoteRequest(
                "a collection must have an odd number of path elements", path=collection_path
            )
        return self._children(collection_path)

    def iter_document_ids(
        self, collection_path: str, *, timeout: float | None = None
    ) -> Iterator[str]:
        self.calls.append(("iter_document_ids", collection_path))
        return (doc.id for doc in self._children(collection_path))

    def iter_collection_ids(
        self, document_path: str | None = None, *, timeout: float | None = None
    ) -> Iterator[str]:
        self.calls.append(("iter_collection_ids", document_path))
        return iter(self.collections.get(document_path, []))

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def rooms_store() -> FakeStore:
    return FakeStore(
        documents=[
            make_doc("rooms/101", {"temp": 72}),
            make_doc("rooms/102", {"temp": 68, "name": "lobby"}),
            make_doc("rooms/103", {}),
            make_doc("rooms/104", {"temp": 77.0, "id": "user-id"}),
            make_doc("rooms/101/sensors/s1", {"temp": 70}),
            make_doc("rooms/101/sensors/s2", {"temp": 65}),
            make_doc("rooms/102/logs/l1", {}),
        ],
        collections={None: ["rooms", "users"], "rooms/101": ["sensors", "logs"]},
        malformed=("rooms/bad",),
    )
