"""Read-only store interface consumed by the fetcher."""

from __future__ import annotations

from typing import Iterator, Optional, Protocol, runtime_checkable

from fsinspect.models import RawDocument


@runtime_checkable
class Store(Protocol):
    def get_document(
        self, container_path: str, document_id: str, *, timeout: Optional[float] = None
    ) -> RawDocument:
        """
        Fetch one document.
        Raises DocumentNotFound when it does not exist, MalformedRemoteRequest
        when the path is structurally invalid, TransportError otherwise.
        """
        ...

    def iter_documents(
        self, collection_path: str, *, timeout: Optional[float] = None
    ) -> Iterator[RawDocument]:
        """Lazily yield every document directly under a collection."""
        ...

    def iter_document_ids(
        self, collection_path: str, *, timeout: Optional[float] = None
    ) -> Iterator[str]:
        """Lazily yield the identifiers of document references in a collection."""
        ...

    def iter_collection_ids(
        self, document_path: Optional[str] = None, *, timeout: Optional[float] = None
    ) -> Iterator[str]:
        """Lazily yield child collection identifiers; root collections when None."""
        ...

    def close(self) -> None:
        ...
