"""
Unit tests for event sinks and the search stopwatch.
"""

import logging

from pathsearch.search import (
    Active,
    Closed,
    EventKind,
    FanOutSink,
    LoggingSink,
    Opened,
    RecordingSink,
    SearchEngine,
    Stopwatch,
)


class TestSinks:
    """Test the event sinks shipped with the engine."""

    def test_fan_out_reaches_every_sink_in_order(self):
        """Each event should be forwarded to all sinks."""
        first, second = RecordingSink(), RecordingSink()
        sink = FanOutSink(first, second)
        sink.on_event(Active("A", 0.0))
        sink.on_event(Closed("A", 0.0))
        assert first.events == second.events == [Active("A", 0.0), Closed("A", 0.0)]

    def test_logging_sink_writes_each_event(self, caplog):
        """LoggingSink should log kind, node, and cost."""
        caplog.set_level(logging.DEBUG, logger="pathsearch.search.events")
        LoggingSink().on_event(Opened("B", 2.5))
        assert "opened" in caplog.text
        assert "'B'" in caplog.text
        assert "2.5" in caplog.text

    def test_logging_sink_respects_level(self, caplog):
        """Events below the captured level are not written."""
        caplog.set_level(logging.INFO, logger="pathsearch.search.events")
        LoggingSink(logging.DEBUG).on_event(Opened("B", 2.5))
        assert caplog.text == ""

    def test_engine_fans_out_to_logging(self, caplog, grid3):
        """A search can feed a recorder and the log at once."""
        caplog.set_level(logging.DEBUG, logger="pathsearch.search.events")
        recorder = RecordingSink()
        SearchEngine(
            grid3.tile(0, 0),
            grid3.tile(0, 1),
            sink=FanOutSink(recorder, LoggingSink()),
        ).run()
        logged = [r for r in caplog.records if r.name == "pathsearch.search.events"]
        assert len(logged) == len(recorder)
        assert recorder.of_kind(EventKind.PATH_STEP)


class TestStopwatch:
    """Test the accumulating timer."""

    def test_context_manager_runs_only_inside(self):
        """The watch runs inside the with block and stops on exit."""
        watch = Stopwatch()
        with watch as running:
            assert running is watch
            assert watch.running
        assert not watch.running
        assert watch.elapsed >= 0.0

    def test_stopped_watch_does_not_advance(self):
        """Elapsed time is frozen while stopped."""
        watch = Stopwatch()
        watch.start()
        watch.stop()
        frozen = watch.elapsed
        assert watch.elapsed == frozen

    def test_restart_accumulates(self):
        """Elapsed time keeps growing across start/stop cycles."""
        watch = Stopwatch()
        with watch:
            pass
        first = watch.elapsed
        with watch:
            pass
        assert watch.elapsed >= first
