"""
In-process document search with TF-IDF ranking.

Components:
- text: tokenizer, word validity rule, stop words
- index: inverted index + document store
- query: include/exclude query parsing
- ranking: TF-IDF relevance, epsilon tie-break, top-K
- server: SearchServer facade
- request_queue: sliding window of empty-result requests
"""

from .config import SearchSettings, load_settings
from .document import Document, DocumentStatus
from .errors import (
    DocumentNotFoundError,
    InvalidArgumentError,
    OutOfRangeError,
    SearchServerError,
)
from .request_queue import RequestQueue
from .server import SearchServer
from .utils import paginate

__all__ = [
    "SearchServer",
    "RequestQueue",
    "Document",
    "DocumentStatus",
    "SearchSettings",
    "load_settings",
    "SearchServerError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "DocumentNotFoundError",
    "paginate",
]
