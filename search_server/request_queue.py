"""
Sliding-window statistics over recent search requests.

Keeps the outcome of the last N requests (N = 1440 by default: one request
per minute for a day) and how many of them returned nothing.

Eviction example with capacity 3:
    record(True)   window [T]        no_result_count 1
    record(True)   window [T, T]     no_result_count 2
    record(False)  window [T, T, F]  no_result_count 2
    record(True)   window [T, F, T]  no_result_count 2   (oldest T evicted)
"""

import logging
from collections import deque
from typing import Deque, List, Tuple

from .document import Document, DocumentStatus
from .errors import InvalidArgumentError
from .ranking import DocumentFilter

logger = logging.getLogger(__name__)

MIN_IN_DAY = 1440


class RequestQueue:
    """
    Records whether recent searches came back empty.
    
    Wraps any object exposing find_top_documents(raw_query, filter_by);
    only the result list is inspected.
    """

    def __init__(self, search_server, capacity: int = MIN_IN_DAY):
        if capacity < 1:
            raise InvalidArgumentError(
                f"Request window capacity must be >= 1, got {capacity}", value=capacity
            )
        self.search_server = search_server
        self.capacity = capacity
        self._requests: Deque[bool] = deque()
        self._no_result_count = 0

    def add_find_request(
        self,
        raw_query: str,
        filter_by: DocumentFilter = DocumentStatus.ACTUAL,
    ) -> List[Document]:
        """
        Search through the wrapped server and record the outcome.
        
        A query the server rejects is not recorded; the error propagates.
        
        Returns:
            The server's result, unchanged
        """
        result = self.search_server.find_top_documents(raw_query, filter_by)
        self.record(not result)
        return result

    def record(self, was_empty: bool) -> None:
        """Push one outcome, evicting the oldest when over capacity"""
        self._requests.append(was_empty)
        if was_empty:
            self._no_result_count += 1

        if len(self._requests) > self.capacity:
            evicted = self._requests.popleft()
            if evicted:
                self._no_result_count -= 1
            logger.debug(f"Evicted oldest request (empty={evicted}), window={len(self._requests)}")

    @property
    def no_result_count(self) -> int:
        return self._no_result_count

    @property
    def window(self) -> Tuple[bool, ...]:
        """Recorded outcomes, oldest first"""
        return tuple(self._requests)

    def __len__(self) -> int:
        return len(self._requests)
