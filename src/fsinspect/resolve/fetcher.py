"""Resolve user paths into raw documents, falling back to sub-collections."""

from __future__ import annotations

import logging
from typing import List, Optional

from fsinspect.cancellation import CancellationToken
from fsinspect.errors import DocumentNotFound, NotFound
from fsinspect.models import (
    DocumentSequence,
    FetchOutcome,
    PathSpec,
    RawDocument,
    SingleDocument,
)
from fsinspect.store.base import Store

LOGGER = logging.getLogger(__name__)


class EntityFetcher:
    """Coordinates store calls for the four inspection commands."""

    def __init__(self, store: Store) -> None:
        self.store = store

    def resolve(self, spec: PathSpec, token: CancellationToken) -> FetchOutcome:
        """Fetch the document named by ``spec``, or enumerate it as a sub-collection.

        A malformed-request failure is fatal. A missing document is retried as
        a collection only when the user path ended with a separator.
        """
        operation = "get document snapshot"
        token.raise_if_cancelled(operation, spec.document_path)
        try:
            document = self.store.get_document(
                spec.container_path, spec.leaf, timeout=token.remaining()
            )
        except DocumentNotFound as exc:
            if not spec.trailing_separator:
                raise NotFound(
                    "not found document", path=spec.document_path, operation=operation
                ) from exc
            LOGGER.debug(
                "No document at %s, listing it as a sub-collection", spec.document_path
            )
            return self._enumerate_subcollection(spec, token)

        LOGGER.debug("Fetched document %s", document.path)
        return SingleDocument(document)

    def _enumerate_subcollection(
        self, spec: PathSpec, token: CancellationToken
    ) -> DocumentSequence:
        collection_path = spec.subcollection_path
        documents = self.collection(collection_path, token)
        if not documents:
            raise NotFound(
                "not found document or collection",
                path=collection_path,
                operation="list documents",
            )
        return DocumentSequence(collection_path=collection_path, documents=documents)

    def collection(self, collection_path: str, token: CancellationToken) -> List[RawDocument]:
        """Enumerate every document directly under ``collection_path``."""
        operation = "list documents"
        token.raise_if_cancelled(operation, collection_path)
        items = self.store.iter_documents(collection_path, timeout=token.remaining())
        documents = list(token.guard(items, operation, collection_path))
        LOGGER.debug("Enumerated %d documents under %s", len(documents), collection_path)
        return documents

    def document_ids(self, collection_path: str, token: CancellationToken) -> List[str]:
        operation = "list document refs"
        token.raise_if_cancelled(operation, collection_path)
        items = self.store.iter_document_ids(collection_path, timeout=token.remaining())
        return list(token.guard(items, operation, collection_path))

    def collection_ids(
        self, document_path: Optional[str], token: CancellationToken
    ) -> List[str]:
        operation = "list collections"
        token.raise_if_cancelled(operation, document_path)
        items = self.store.iter_collection_ids(document_path, timeout=token.remaining())
        return list(token.guard(items, operation, document_path))
