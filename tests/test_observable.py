"""Tests for ObservableStore subscribe/publish semantics.

Author: Michael Economou
Date: 2026-01-01
"""

import logging

from tablestore.utils.events.observable import ObservableStore


class HookedStore(ObservableStore):
    """Store that counts start/stop hook calls."""

    def __init__(self):
        super().__init__()
        self.started = 0
        self.stopped = 0

    def _start(self):
        self.started += 1

    def _stop(self):
        self.stopped += 1


class TestSubscribe:
    """Test subscription lifecycle."""

    def test_subscribe_signals_immediately(self, recorder):
        """Test that subscribe calls on_change once before returning."""
        store = ObservableStore()

        store.subscribe(recorder.on_change, recorder.on_invalidate)

        assert recorder.changes == 1
        assert recorder.invalidations == 0

    def test_unsubscribe_stops_delivery(self, recorder):
        """Test that an unsubscribed callback is no longer called."""
        store = ObservableStore()
        unsubscribe = store.subscribe(recorder.on_change)

        unsubscribe()
        store.publish()

        assert recorder.changes == 1
        assert store.subscriber_count == 0

    def test_double_unsubscribe_is_noop(self, recorder):
        """Test that calling the handle twice does not raise."""
        store = ObservableStore()
        unsubscribe = store.subscribe(recorder.on_change)

        unsubscribe()
        unsubscribe()

        assert store.subscriber_count == 0

    def test_same_callback_twice_gets_two_registrations(self, recorder):
        """Test that each subscribe call is an independent registration."""
        store = ObservableStore()
        first = store.subscribe(recorder.on_change)
        store.subscribe(recorder.on_change)

        first()
        store.publish()

        assert store.subscriber_count == 1
        assert recorder.changes == 3

    def test_failing_initial_signal_still_returns_handle(self, caplog):
        """Test that a callback failing on its first call can still be unsubscribed."""
        store = HookedStore()
        calls = []

        def fails_first():
            calls.append(True)
            if len(calls) == 1:
                raise RuntimeError("not ready")

        with caplog.at_level(logging.ERROR):
            unsubscribe = store.subscribe(fails_first)

        assert "Error in subscriber callback" in caplog.text
        assert store.subscriber_count == 1

        store.publish()
        assert len(calls) == 2

        unsubscribe()
        assert store.subscriber_count == 0
        assert store.stopped == 1

    def test_start_and_stop_hooks(self):
        """Test that hooks run on first subscriber and after the last leaves."""
        store = HookedStore()

        first = store.subscribe(lambda: None)
        second = store.subscribe(lambda: None)
        assert store.started == 1

        first()
        assert store.stopped == 0
        second()
        second()
        assert store.stopped == 1

        store.subscribe(lambda: None)
        assert store.started == 2


class TestPublish:
    """Test publish delivery and ordering."""

    def test_publish_without_subscribers(self):
        """Test that publishing to nobody is harmless."""
        ObservableStore().publish()

    def test_one_publish_one_notification(self, recorder):
        """Test that a single publish notifies once."""
        store = ObservableStore()
        store.subscribe(recorder.on_change, recorder.on_invalidate)

        store.publish()

        assert recorder.changes == 2
        assert recorder.invalidations == 1

    def test_invalidate_runs_before_any_change(self, make_recorder):
        """Test that every on_invalidate runs before the first on_change."""
        store = ObservableStore()
        first = make_recorder("first")
        second = make_recorder("second")
        store.subscribe(first.on_change, first.on_invalidate)
        store.subscribe(second.on_change, second.on_invalidate)
        make_recorder.log.clear()

        store.publish()

        assert make_recorder.log == [
            ("first", "invalidate"),
            ("second", "invalidate"),
            ("first", "change"),
            ("second", "change"),
        ]

    def test_registration_order(self, make_recorder):
        """Test that on_change calls follow registration order."""
        store = ObservableStore()
        names = ["c", "a", "b"]
        for name in names:
            store.subscribe(make_recorder(name).on_change)
        make_recorder.log.clear()

        store.publish()

        assert [name for name, _ in make_recorder.log] == names

    def test_reentrant_publish_is_flushed_by_outer_drain(self, make_recorder):
        """Test that a publish from inside on_change does not start a second drain."""
        store = ObservableStore()
        first = make_recorder("first")
        depth = {"current": 0, "max": 0}
        armed = []

        def mutating_listener():
            depth["current"] += 1
            depth["max"] = max(depth["max"], depth["current"])
            if armed:
                armed.clear()
                store.publish()
            depth["current"] -= 1

        store.subscribe(first.on_change)
        store.subscribe(mutating_listener)
        make_recorder.log.clear()
        armed.append(True)

        store.publish()

        # first is notified for the outer publish and again for the nested one,
        # each delivery from the same drain loop
        assert make_recorder.log == [("first", "change"), ("first", "change")]
        assert depth["max"] == 1

    def test_nested_publish_does_not_duplicate_pending(self, make_recorder):
        """Test that a subscriber still queued is not queued twice."""
        store = ObservableStore()
        calls = []

        def publisher():
            calls.append("publisher")
            if len(calls) == 2:
                store.publish()

        later = make_recorder("later")
        store.subscribe(publisher)
        store.subscribe(later.on_change)
        make_recorder.log.clear()

        store.publish()

        # later was pending when publisher re-published, so it is delivered once;
        # publisher itself had already been delivered and is queued again
        assert make_recorder.log == [("later", "change")]
        assert calls == ["publisher", "publisher", "publisher"]

    def test_unsubscribe_while_queued(self, recorder):
        """Test that a subscriber removed during a drain is skipped."""
        store = ObservableStore()
        handles = {}

        def remover():
            if "recorder" in handles:
                handles.pop("recorder")()

        store.subscribe(remover)
        handles["recorder"] = store.subscribe(recorder.on_change)

        store.publish()

        assert recorder.changes == 1

    def test_callback_error_is_logged_and_isolated(self, recorder, caplog):
        """Test that a failing subscriber does not block the others."""
        store = ObservableStore()

        def broken():
            if store.subscriber_count == 2:
                raise RuntimeError("boom")

        store.subscribe(broken)
        store.subscribe(recorder.on_change)

        with caplog.at_level(logging.ERROR):
            store.publish()
        store.publish()

        assert recorder.changes == 3
        assert "Error in subscriber callback" in caplog.text


class TestBatch:
    """Test batched delivery."""

    def test_batch_delivers_once(self, recorder):
        """Test that several publishes in a batch notify once."""
        store = ObservableStore()
        store.subscribe(recorder.on_change, recorder.on_invalidate)

        with store.batch():
            store.publish()
            store.publish()
            store.publish()
            assert recorder.changes == 1

        assert recorder.changes == 2
        assert recorder.invalidations == 3

    def test_nested_batches(self, recorder):
        """Test that only the outermost batch delivers."""
        store = ObservableStore()
        store.subscribe(recorder.on_change)

        with store.batch():
            with store.batch():
                store.publish()
            assert recorder.changes == 1
            store.publish()

        assert recorder.changes == 2

    def test_empty_batch_delivers_nothing(self, recorder):
        """Test that a batch without publishes is silent."""
        store = ObservableStore()
        store.subscribe(recorder.on_change)

        with store.batch():
            pass

        assert recorder.changes == 1
