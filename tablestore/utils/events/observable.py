"""Module: observable.py

Author: Michael Economou
Date: 2025-02-03

ObservableStore - Pure Python subscribable store.

Provides a store-style observer contract without any UI toolkit dependency:
- subscribe(on_change, on_invalidate) returns an unsubscribe handle
- publish() notifies every current subscriber
- batch() groups several publishes into one delivery
- _start()/_stop() hooks run on the first subscriber and after the last one leaves

Delivery is batched and re-entrancy safe. A publish that happens while a
delivery queue is draining only enqueues; the outermost drain flushes
everything, in registration order.

Subscribers receive no payload. They re-read the store after on_change().
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from tablestore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["ObservableStore", "Subscriber", "Unsubscriber"]

ChangeCallback = Callable[[], Any]
InvalidateCallback = Callable[[], Any]
Unsubscriber = Callable[[], None]


def _callback_name(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__name__", repr(callback))


class Subscriber:
    """A registered (on_change, on_invalidate) pair.

    Identity based, so the same callback can be subscribed twice and each
    registration gets its own handle.
    """

    __slots__ = ("on_change", "on_invalidate")

    def __init__(self, on_change: ChangeCallback, on_invalidate: InvalidateCallback | None = None):
        self.on_change = on_change
        self.on_invalidate = on_invalidate

    def __repr__(self) -> str:
        return f"Subscriber({_callback_name(self.on_change)})"


class ObservableStore:
    """Base class for stores that notify subscribers of state changes.

    Usage:
        class Counter(ObservableStore):
            def __init__(self):
                super().__init__()
                self._value = 0

            def increment(self):
                self._value += 1
                self.publish()

        counter = Counter()
        unsubscribe = counter.subscribe(lambda: print(counter._value))
        counter.increment()
        unsubscribe()
    """

    def __init__(self) -> None:
        """Initialize observable store."""
        super().__init__()
        # dict keeps registration order and O(1) removal
        self._subscribers: dict[Subscriber, None] = {}
        self._queue: deque[Subscriber] = deque()
        self._pending: set[Subscriber] = set()
        self._flushing = False
        self._running = False

    # =====================================
    # Subscription
    # =====================================

    @property
    def subscriber_count(self) -> int:
        """Number of currently registered subscribers."""
        return len(self._subscribers)

    def subscribe(
        self,
        on_change: ChangeCallback,
        on_invalidate: InvalidateCallback | None = None,
    ) -> Unsubscriber:
        """Register a subscriber and signal it once immediately.

        The initial signal goes through the same error handling as publish(),
        so a failing callback is logged and the handle is still returned.

        Args:
            on_change: Called (without arguments) whenever the store changed
            on_invalidate: Called at the start of every publish, before any
                on_change delivery, so observers can mark cached views stale

        Returns:
            A handle that removes the subscriber. Calling it more than once is a no-op.
        """
        subscriber = Subscriber(on_change, on_invalidate)
        self._subscribers[subscriber] = None
        if len(self._subscribers) == 1 and not self._running:
            self._running = True
            self._start()

        logger.debug(
            "[%s] Subscribed: %s (total: %d)",
            type(self).__name__,
            _callback_name(on_change),
            len(self._subscribers),
            extra={"dev_only": True},
        )

        self._call(on_change)

        def unsubscribe() -> None:
            self._remove_subscriber(subscriber)

        return unsubscribe

    def _remove_subscriber(self, subscriber: Subscriber) -> None:
        if subscriber not in self._subscribers:
            return

        del self._subscribers[subscriber]
        logger.debug(
            "[%s] Unsubscribed: %s (remaining: %d)",
            type(self).__name__,
            _callback_name(subscriber.on_change),
            len(self._subscribers),
            extra={"dev_only": True},
        )

        if not self._subscribers and self._running:
            self._running = False
            self._stop()

    def _start(self) -> None:
        """Hook run when the first subscriber arrives."""

    def _stop(self) -> None:
        """Hook run when the last subscriber leaves."""

    # =====================================
    # Publishing
    # =====================================

    def publish(self) -> None:
        """Notify all current subscribers that the store changed.

        Every subscriber's on_invalidate runs first, then the subscriber is
        queued. If no drain is in progress this call drains the queue;
        otherwise the drain already in progress picks the new entries up.

        A subscriber still waiting in the queue is never queued twice, so it
        gets one on_change per batch. A subscriber that was already notified
        earlier in the same drain is queued again and gets one more on_change,
        so it sees the state left by the nested publish.
        """
        for subscriber in list(self._subscribers):
            if subscriber.on_invalidate is not None:
                self._call(subscriber.on_invalidate)
            if subscriber not in self._pending:
                self._pending.add(subscriber)
                self._queue.append(subscriber)

        if not self._flushing:
            self._drain()

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Group several publishes into a single delivery.

        Inside the block publishes only enqueue. Subscribers are notified once
        when the outermost batch exits. Nested batches are allowed.

        Example:
            with store.batch():
                store.sort_field = "age"
                store.sort_direction = SortDirection.DESCENDING
        """
        if self._flushing:
            yield
            return

        self._flushing = True
        try:
            yield
        finally:
            self._flushing = False
            self._drain()

    def _drain(self) -> None:
        if not self._queue:
            return

        self._flushing = True
        delivered = 0
        try:
            while self._queue:
                subscriber = self._queue.popleft()
                self._pending.discard(subscriber)
                # Unsubscribed while queued
                if subscriber not in self._subscribers:
                    continue
                self._call(subscriber.on_change)
                delivered += 1
        finally:
            self._queue.clear()
            self._pending.clear()
            self._flushing = False

        logger.debug(
            "[%s] Published to %d subscriber(s)",
            type(self).__name__,
            delivered,
            extra={"dev_only": True},
        )

    def _call(self, callback: Callable[[], Any]) -> None:
        try:
            callback()
        except Exception:
            logger.exception(
                "[%s] Error in subscriber callback: %s",
                type(self).__name__,
                _callback_name(callback),
            )
