"""
Document records: status, stored metadata and scored search results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class DocumentStatus(Enum):
    """Caller-assigned document status, fixed at insertion"""
    ACTUAL = 0
    IRRELEVANT = 1
    BANNED = 2
    REMOVED = 3


@dataclass(frozen=True)
class DocumentData:
    """Metadata stored per indexed document"""
    rating: int
    status: DocumentStatus


@dataclass
class Document:
    """Single search result with relevance score"""
    id: int
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, "
            f"relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )


def compute_average_rating(ratings: Sequence[int]) -> int:
    """
    Integer mean of ratings, truncated toward zero.
    
    Args:
        ratings: Caller-supplied ratings (may be empty)
        
    Returns:
        Average rating, 0 for no ratings
        
    Examples:
        >>> compute_average_rating([8, -3])
        2
        >>> compute_average_rating([5, -12, 2, 1])
        -1
        >>> compute_average_rating([])
        0
    """
    if not ratings:
        return 0

    total = sum(ratings)
    # Floor division rounds toward -inf; truncate on the magnitude instead
    average = abs(total) // len(ratings)
    return average if total >= 0 else -average
