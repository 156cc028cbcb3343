"""Google Cloud Firestore implementation of the store interface."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from google.api_core import exceptions as api_exceptions
from google.auth.exceptions import GoogleAuthError
from google.cloud import firestore

from fsinspect.errors import (
    DocumentNotFound,
    MalformedRemoteRequest,
    OperationCancelled,
    TransportError,
)
from fsinspect.models import SEPARATOR, RawDocument

LOGGER = logging.getLogger(__name__)


@contextmanager
def translate_errors(operation: str, path: Optional[str]) -> Iterator[None]:
    """Map client library failures onto the inspector error taxonomy."""
    try:
        yield
    except ValueError as exc:
        # Raised client-side for paths with the wrong number of segments.
        raise MalformedRemoteRequest(str(exc), path=path, operation=operation) from exc
    except api_exceptions.InvalidArgument as exc:
        raise MalformedRemoteRequest(exc.message, path=path, operation=operation) from exc
    except api_exceptions.NotFound as exc:
        raise DocumentNotFound(exc.message, path=path, operation=operation) from exc
    except api_exceptions.DeadlineExceeded as exc:
        raise OperationCancelled("deadline exceeded", path=path, operation=operation) from exc
    except (api_exceptions.GoogleAPIError, GoogleAuthError) as exc:
        raise TransportError(str(exc), path=path, operation=operation) from exc


def snapshot_to_raw(snapshot: Any) -> RawDocument:
    return RawDocument(
        id=snapshot.id,
        path=snapshot.reference.path,
        data=snapshot.to_dict() or {},
        create_time=snapshot.create_time,
        read_time=snapshot.read_time,
        update_time=snapshot.update_time,
    )


class FirestoreStore:
    """Firestore client wrapper yielding raw documents and identifiers."""

    def __init__(self, project: str, *, database: Optional[str] = None) -> None:
        self.project = project
        self.database = database
        kwargs: dict[str, Any] = {"project": project}
        if database:
            kwargs["database"] = database
        with translate_errors("create firestore client", None):
            self._client = firestore.Client(**kwargs)
        LOGGER.debug("Opened Firestore client for project %s", project)

    @property
    def client(self) -> firestore.Client:
        return self._client

    def close(self) -> None:
        self._client.close()
        LOGGER.debug("Closed Firestore client for project %s", self.project)

    def get_document(
        self, container_path: str, document_id: str, *, timeout: Optional[float] = None
    ) -> RawDocument:
        path = f"{container_path}{SEPARATOR}{document_id}"
        operation = "get document snapshot"
        try:
            ref = self._client.collection(container_path).document(document_id)
        except ValueError as exc:
            # Odd segment count: the path can only name a collection.
            raise DocumentNotFound(
                "not a document path", path=path, operation=operation
            ) from exc
        with translate_errors(operation, path):
            snapshot = ref.get(retry=None, timeout=timeout)
        if not snapshot.exists:
            raise DocumentNotFound("no such document", path=path, operation=operation)
        return snapshot_to_raw(snapshot)

    def iter_documents(
        self, collection_path: str, *, timeout: Optional[float] = None
    ) -> Iterator[RawDocument]:
        with translate_errors("get next iterator result", collection_path):
            snapshots = self._client.collection(collection_path).stream(
                retry=None, timeout=timeout
            )
            for snapshot in snapshots:
                yield snapshot_to_raw(snapshot)

    def iter_document_ids(
        self, collection_path: str, *, timeout: Optional[float] = None
    ) -> Iterator[str]:
        with translate_errors("get next iterator result", collection_path):
            refs = self._client.collection(collection_path).list_documents(
                retry=None, timeout=timeout
            )
            for ref in refs:
                yield ref.id

    def iter_collection_ids(
        self, document_path: Optional[str] = None, *, timeout: Optional[float] = None
    ) -> Iterator[str]:
        with translate_errors("get next iterator result", document_path):
            if document_path is None:
                collections = self._client.collections(retry=None, timeout=timeout)
            else:
                collections = self._client.document(document_path).collections(
                    retry=None, timeout=timeout
                )
            for collection in collections:
                yield collection.id
