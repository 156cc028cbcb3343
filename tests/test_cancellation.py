"""Tests for the cancellation token."""

from __future__ import annotations

import pytest

from fsinspect.cancellation import CancellationToken
from fsinspect.errors import OperationCancelled


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class TestCancellationToken:
    """Test CancellationToken behaviour."""

    def test_fresh_token(self) -> None:
        token = CancellationToken()

        assert not token.is_cancelled()
        assert token.remaining() is None
        token.raise_if_cancelled("noop")

    def test_cancel(self) -> None:
        token = CancellationToken()
        token.cancel()

        assert token.is_cancelled()
        with pytest.raises(OperationCancelled, match="cancelled"):
            token.raise_if_cancelled("list documents", "rooms")

    def test_deadline(self) -> None:
        """Should report remaining time and expire at the deadline."""
        clock = FakeClock()
        token = CancellationToken(timeout=10, clock=clock)

        assert token.remaining() == 10
        clock.now += 4
        assert token.remaining() == 6
        assert not token.is_cancelled()

        clock.now += 6
        assert token.is_cancelled()
        assert token.remaining() == 0.0
        with pytest.raises(OperationCancelled, match="deadline exceeded"):
            token.raise_if_cancelled("get document snapshot")


class TestGuard:
    """Test guarded iteration."""

    def test_passes_items_through(self) -> None:
        token = CancellationToken()
        assert list(token.guard(["a", "b", "c"], "list")) == ["a", "b", "c"]

    def test_cancel_mid_enumeration_raises(self) -> None:
        """Should stop consuming and raise instead of truncating."""
        token = CancellationToken()
        consumed = []

        def produce():
            for item in ["a", "b", "c", "d"]:
                consumed.append(item)
                yield item

        seen = []
        with pytest.raises(OperationCancelled):
            for item in token.guard(produce(), "list documents"):
                seen.append(item)
                if item == "b":
                    token.cancel()

        assert seen == ["a", "b"]
        assert consumed == ["a", "b"]

    def test_closes_underlying_generator(self) -> None:
        token = CancellationToken()
        closed = []

        def produce():
            try:
                yield 1
                yield 2
            finally:
                closed.append(True)

        guarded = token.guard(produce(), "list")
        assert next(guarded) == 1
        token.cancel()
        with pytest.raises(OperationCancelled):
            next(guarded)

        assert closed == [True]
