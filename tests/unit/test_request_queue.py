"""
Unit tests for the sliding window of empty-result requests.
"""

import pytest

from search_server import DocumentStatus, InvalidArgumentError, RequestQueue


class TestRecord:
    """Test window bookkeeping"""

    def test_window_eviction(self, empty_server):
        """Capacity 3: oldest entry is evicted on the fourth record"""
        queue = RequestQueue(empty_server, capacity=3)
        windows = []
        counts = []

        for was_empty in (True, True, False, True):
            queue.record(was_empty)
            windows.append(queue.window)
            counts.append(queue.no_result_count)

        assert windows == [
            (True,),
            (True, True),
            (True, True, False),
            (True, False, True),
        ]
        assert counts == [1, 2, 2, 2]

    def test_evicting_non_empty(self, empty_server):
        """Evicting a non-empty outcome keeps the count"""
        queue = RequestQueue(empty_server, capacity=2)
        for was_empty in (False, True, True):
            queue.record(was_empty)
        assert queue.window == (True, True)
        assert queue.no_result_count == 2

    def test_count_matches_window(self, empty_server):
        """Count always equals the number of empty outcomes in the window"""
        queue = RequestQueue(empty_server, capacity=5)
        for step in range(40):
            queue.record(step % 3 != 0)
            assert len(queue) <= 5
            assert queue.no_result_count == sum(queue.window)

    def test_default_capacity(self, empty_server):
        """One day of per-minute requests"""
        queue = RequestQueue(empty_server)
        for _ in range(1500):
            queue.record(True)
        assert queue.capacity == 1440
        assert len(queue) == 1440
        assert queue.no_result_count == 1440

    def test_invalid_capacity(self, empty_server):
        with pytest.raises(InvalidArgumentError):
            RequestQueue(empty_server, capacity=0)


class TestAddFindRequest:
    """Test searching through the queue"""

    def test_records_outcomes(self, demo_server):
        """Empty results are counted; results are passed through"""
        queue = RequestQueue(demo_server)

        assert queue.add_find_request("empty request") == []
        results = queue.add_find_request("cat -white")
        assert [d.id for d in results] == [1]
        assert queue.add_find_request("bird") == []
        assert [d.id for d in queue.add_find_request("bird", DocumentStatus.BANNED)] == [3]
        assert queue.add_find_request("cat", lambda document_id, status, rating: rating < 0) == []

        assert queue.window == (True, False, True, False, True)
        assert queue.no_result_count == 3

    def test_same_result_as_server(self, demo_server):
        """Queue returns exactly what the server returns"""
        queue = RequestQueue(demo_server)
        assert queue.add_find_request("nice cat") == demo_server.find_top_documents("nice cat")

    def test_rejected_query_not_recorded(self, demo_server):
        """Query errors propagate and leave the window unchanged"""
        queue = RequestQueue(demo_server)
        with pytest.raises(InvalidArgumentError):
            queue.add_find_request("--cat")
        assert len(queue) == 0
        assert queue.no_result_count == 0

    def test_window_rolls_over_requests(self, demo_server):
        """Old empty requests fall out of a small window"""
        queue = RequestQueue(demo_server, capacity=2)
        queue.add_find_request("unicorn")
        queue.add_find_request("cat")
        queue.add_find_request("dog")
        assert queue.no_result_count == 0
