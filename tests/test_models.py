"""Tests for core data models."""

from __future__ import annotations

import dataclasses

import pytest

from fsinspect.models import (
    RESERVED_FIELDS,
    DocumentSequence,
    FilterSpec,
    PathSpec,
    RawDocument,
    SingleDocument,
)


class TestPathSpec:
    """Test PathSpec dataclass."""

    def test_document_path(self) -> None:
        spec = PathSpec(container_path="rooms/101/sensors", leaf="s1")

        assert spec.document_path == "rooms/101/sensors/s1"
        assert spec.trailing_separator is False

    def test_immutable(self) -> None:
        """Should refuse attribute assignment."""
        spec = PathSpec(container_path="rooms", leaf="101")

        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.leaf = "102"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert PathSpec("rooms", "101", True) == PathSpec("rooms", "101", True)
        assert PathSpec("rooms", "101", True) != PathSpec("rooms", "101", False)


class TestFilterSpec:
    """Test FilterSpec dataclass."""

    def test_create(self) -> None:
        spec = FilterSpec(field="temp", substring="7")
        assert spec.field == "temp"
        assert spec.substring == "7"


class TestRawDocument:
    """Test RawDocument dataclass."""

    def test_defaults(self) -> None:
        doc = RawDocument(id="101", path="rooms/101")

        assert doc.data == {}
        assert doc.create_time is None
        assert doc.read_time is None
        assert doc.update_time is None


class TestFetchOutcome:
    """Test the tagged fetch outcomes."""

    def test_single_document_exposes_list(self) -> None:
        doc = RawDocument(id="101", path="rooms/101", data={"temp": 72})
        outcome = SingleDocument(doc)

        assert outcome.documents == [doc]

    def test_document_sequence(self) -> None:
        docs = [RawDocument(id="1", path="c/1"), RawDocument(id="2", path="c/2")]
        outcome = DocumentSequence(collection_path="c", documents=docs)

        assert outcome.documents == docs
        assert outcome.collection_path == "c"


def test_reserved_fields() -> None:
    assert RESERVED_FIELDS == ("id", "path", "createTime", "readTime", "updateTime")
