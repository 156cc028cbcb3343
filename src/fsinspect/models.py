"""Core fsinspect data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Union

SEPARATOR = "/"

RESERVED_FIELDS = ("id", "path", "createTime", "readTime", "updateTime")

Record = Dict[str, Any]


@dataclass(frozen=True, slots=True)
class PathSpec:
    """Location descriptor parsed from a document-style path."""

    container_path: str
    leaf: str
    trailing_separator: bool = False

    @property
    def document_path(self) -> str:
        return f"{self.container_path}{SEPARATOR}{self.leaf}"

    @property
    def subcollection_path(self) -> str:
        """Path enumerated when the leaf turns out to name a collection."""
        return self.document_path


@dataclass(frozen=True, slots=True)
class FilterSpec:
    field: str
    substring: str


@dataclass(slots=True)
class RawDocument:
    """Document as yielded by a store, before normalization."""

    id: str
    path: str
    data: Mapping[str, Any] = field(default_factory=dict)
    create_time: Optional[datetime] = None
    read_time: Optional[datetime] = None
    update_time: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class SingleDocument:
    """The path named an existing document."""

    document: RawDocument

    @property
    def documents(self) -> List[RawDocument]:
        return [self.document]


@dataclass(frozen=True, slots=True)
class DocumentSequence:
    """The path was reinterpreted as a sub-collection and enumerated."""

    collection_path: str
    documents: List[RawDocument]


FetchOutcome = Union[SingleDocument, DocumentSequence]
