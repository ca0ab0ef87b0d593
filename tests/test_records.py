"""
Unit tests for node records and the open/closed sets.
"""

import pytest

from pathsearch.search import RecordState, RecordTable


@pytest.fixture
def table() -> RecordTable:
    return RecordTable()


class TestOpenSet:
    """Test frontier selection."""

    def test_lowest_estimate_first(self, table):
        """peek_min should return the lowest estimated total cost."""
        table.add("a", 0.0, None, 5.0)
        table.add("b", 1.0, None, 1.0)
        assert table.peek_min().node == "b"

    def test_ties_go_to_first_inserted(self, table):
        """Equal estimates should be broken by insertion order."""
        table.add("a", 1.0, None, 1.0)
        table.add("b", 0.0, None, 2.0)
        table.add("c", 2.0, None, 0.0)
        assert table.peek_min().node == "a"

    def test_peek_does_not_remove(self, table):
        """peek_min should leave the record open."""
        table.add("a", 0.0, None, 0.0)
        record = table.peek_min()
        assert record.is_open
        assert table.peek_min() is record
        assert table.open_count == 1

    def test_closed_records_are_skipped(self, table):
        """Closing the minimum should expose the next record."""
        a = table.add("a", 0.0, None, 0.0)
        table.add("b", 1.0, None, 0.0)
        table.close(a)
        assert table.peek_min().node == "b"

    def test_relaxed_record_moves_up(self, table):
        """A relaxed record should be ordered by its new estimate."""
        start = table.add("s", 0.0, None, 0.0)
        table.add("a", 2.0, start, 0.0)
        b = table.add("b", 5.0, start, 0.0)
        table.close(start)
        table.relax(b, 1.0, start, 0.0)
        assert table.peek_min() is b

    def test_empty_open_set_raises(self, table):
        """peek_min on an empty open set should raise IndexError."""
        with pytest.raises(IndexError):
            table.peek_min()


class TestRecordLifecycle:
    """Test record creation, closing, and re-opening."""

    def test_add_sets_fields(self, table):
        """New records should hold cost, predecessor, and estimate."""
        start = table.add("s", 0.0, None, 4.0)
        record = table.add("a", 1.5, start, 2.0)
        assert record.cost_so_far == 1.5
        assert record.estimated_total_cost == 3.5
        assert record.heuristic == 2.0
        assert table.predecessor(record) is start
        assert table.predecessor(start) is None

    def test_duplicate_add_raises(self, table):
        """Each node gets at most one record."""
        table.add("a", 0.0, None, 0.0)
        with pytest.raises(KeyError):
            table.add("a", 1.0, None, 0.0)

    def test_close_moves_between_sets(self, table):
        """close() should move a record from open to closed."""
        record = table.add("a", 0.0, None, 0.0)
        table.close(record)
        assert record.state is RecordState.CLOSED
        assert (table.open_count, table.closed_count) == (0, 1)
        assert not table.has_open()

    def test_close_twice_raises(self, table):
        """Only open records can be closed."""
        record = table.add("a", 0.0, None, 0.0)
        table.close(record)
        with pytest.raises(ValueError):
            table.close(record)

    def test_relax_reopens_closed_record(self, table):
        """Relaxing a closed record should put it back in the open set."""
        start = table.add("s", 0.0, None, 0.0)
        record = table.add("a", 5.0, start, 1.0)
        table.close(start)
        table.close(record)

        reopened = table.relax(record, 2.0, start, record.heuristic)

        assert reopened is True
        assert record.is_open
        assert record.estimated_total_cost == 3.0
        assert (table.open_count, table.closed_count) == (1, 1)
        assert table.peek_min() is record

    def test_relax_open_record_is_not_reopen(self, table):
        """Relaxing an open record keeps it open and reports no re-opening."""
        start = table.add("s", 0.0, None, 0.0)
        record = table.add("a", 5.0, start, 0.0)
        assert table.relax(record, 3.0, start, 0.0) is False
        assert table.open_count == 2

    def test_open_and_closed_partition(self, table):
        """Every record is in exactly one of the two sets."""
        start = table.add("s", 0.0, None, 0.0)
        table.add("a", 1.0, start, 0.0)
        table.add("b", 1.0, start, 0.0)
        table.close(start)
        open_nodes = {r.node for r in table.open_records()}
        closed_nodes = {r.node for r in table.closed_records()}
        assert open_nodes == {"a", "b"}
        assert closed_nodes == {"s"}
        assert len(table) == 3
