"""
Search server error hierarchy.

Every error is raised synchronously at the point of misuse and nothing is
committed to the index beforehand. Callers pick the error kind by `except`
clause:

    try:
        server.add_document(7, text, DocumentStatus.ACTUAL, [5])
    except InvalidArgumentError as e:
        print(f"Rejected: {e} (value={e.value!r})")
"""

from typing import Any


class SearchServerError(Exception):
    """Base class for all search server errors"""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidArgumentError(SearchServerError, ValueError):
    """Bad stop word, document id, word or query syntax"""


class OutOfRangeError(SearchServerError, IndexError):
    """Position lookup past the number of indexed documents"""


class DocumentNotFoundError(SearchServerError, KeyError):
    """Document id is not present in the index"""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])
