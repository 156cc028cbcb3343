"""Helpers for splitting slash-delimited store paths."""

from __future__ import annotations

import logging
from typing import Optional

from fsinspect.errors import InvalidPath
from fsinspect.models import SEPARATOR, PathSpec

LOGGER = logging.getLogger(__name__)


def cut_last(s: str, sep: str) -> tuple[str, str, bool]:
    """Like ``str.partition`` but around the last occurrence of ``sep``."""
    before, found, after = s.rpartition(sep)
    if not found:
        return s, "", False
    return before, after, True


def cut_suffix(s: str, suffix: str) -> tuple[str, bool]:
    """Return ``s`` without ``suffix`` and whether it was present."""
    if not s.endswith(suffix):
        return s, False
    return s[: len(s) - len(suffix)], True


def _check_segments(path: str, raw: str, operation: str) -> None:
    if any(not segment for segment in path.split(SEPARATOR)):
        raise InvalidPath("empty path segment", path=raw, operation=operation)


def parse_document_path(raw: str) -> PathSpec:
    """Parse a path naming a document, or a sub-collection when it ends with ``/``.

    The split happens on the last separator since container paths may
    themselves be nested (``a/b/c`` -> ``a/b`` + ``c``).
    """
    operation = "parse document path"
    if not raw:
        raise InvalidPath("path is empty", path=raw, operation=operation)

    body, trailing = cut_suffix(raw, SEPARATOR)
    if not body:
        raise InvalidPath("path has no segments", path=raw, operation=operation)

    container, leaf, ok = cut_last(body, SEPARATOR)
    if not ok:
        raise InvalidPath(
            "a document path needs a parent collection", path=raw, operation=operation
        )
    _check_segments(body, raw, operation)
    return PathSpec(container_path=container, leaf=leaf, trailing_separator=trailing)


def parse_collection_path(raw: str) -> str:
    """Validate a path naming a collection; a trailing separator is rejected."""
    operation = "parse collection path"
    if not raw:
        raise InvalidPath("path is empty", path=raw, operation=operation)
    if raw.endswith(SEPARATOR):
        raise InvalidPath("invalid collection path", path=raw, operation=operation)
    _check_segments(raw, raw, operation)
    return raw


def parse_parent_path(raw: Optional[str]) -> Optional[str]:
    """Return the document whose sub-collections are listed, or None for the root."""
    if not raw:
        return None
    operation = "parse parent path"
    body, _ = cut_suffix(raw, SEPARATOR)
    if SEPARATOR not in body:
        LOGGER.debug("Path %r has no document segment, listing root collections", raw)
        return None
    _check_segments(body, raw, operation)
    return body
