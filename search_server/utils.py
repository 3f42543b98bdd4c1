"""Utility functions for presenting search results"""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], page_size: int) -> List[List[T]]:
    """
    Split items into consecutive pages.
    
    Args:
        items: Any sequence (e.g. find_top_documents() results)
        page_size: Items per page; values below 1 are treated as 1
    
    Returns:
        Pages in order; the last page may be shorter, no pages for empty input
    
    Examples:
        >>> paginate([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
        
        >>> paginate([], 3)
        []
    """
    page_size = max(page_size, 1)
    return [list(items[start:start + page_size]) for start in range(0, len(items), page_size)]
