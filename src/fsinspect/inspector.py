"""High-level API tying path parsing, fetching, and normalization together."""

from __future__ import annotations

import logging
from typing import List, Optional

from fsinspect.cancellation import CancellationToken
from fsinspect.errors import NotFound
from fsinspect.models import Record
from fsinspect.resolve.fetcher import EntityFetcher
from fsinspect.resolve.normalizer import normalize_all
from fsinspect.resolve.search import filter_records, parse_filter
from fsinspect.store.base import Store
from fsinspect.utils.paths import (
    parse_collection_path,
    parse_document_path,
    parse_parent_path,
)

LOGGER = logging.getLogger(__name__)


class Inspector:
    """One method per command; each returns the complete result or raises."""

    def __init__(self, store: Store) -> None:
        self.store = store
        self.fetcher = EntityFetcher(store)

    def describe_collection(
        self, path: str, token: CancellationToken, *, search: Optional[str] = None
    ) -> List[Record]:
        collection_path = parse_collection_path(path)
        if search:
            # Reject a bad expression before any remote call.
            parse_filter(search)

        records = normalize_all(self.fetcher.collection(collection_path, token))
        if not records:
            raise NotFound(
                "not found documents", path=collection_path, operation="describe collection"
            )
        if search:
            records = filter_records(search, records)
            LOGGER.debug("Search %r kept %d records", search, len(records))
        return records

    def describe_document(self, path: str, token: CancellationToken) -> List[Record]:
        spec = parse_document_path(path)
        outcome = self.fetcher.resolve(spec, token)
        records = normalize_all(outcome.documents)
        if not records:
            raise NotFound("not found document", path=path, operation="describe document")
        return records

    def list_collections(self, path: Optional[str], token: CancellationToken) -> List[str]:
        return self.fetcher.collection_ids(parse_parent_path(path), token)

    def list_documents(self, path: str, token: CancellationToken) -> List[str]:
        return self.fetcher.document_ids(parse_collection_path(path), token)
