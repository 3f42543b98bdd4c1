"""Immutable stop-word set used by indexing and query parsing."""

import logging
from typing import Iterable, Iterator, Union

from ..errors import InvalidArgumentError
from .tokenizer import is_valid_word, split_into_words

logger = logging.getLogger(__name__)


class StopWordSet:
    """
    Set of words excluded from indexing and querying.
    
    Built once from either a space-delimited string or an iterable of
    strings. Empty strings are dropped and duplicates collapse.
    """

    def __init__(self, stop_words: Union[str, Iterable[str]] = ""):
        """
        Build the stop-word set.
        
        Args:
            stop_words: "and in on" or {"and", "in", "on"}
            
        Raises:
            InvalidArgumentError: A stop word contains a control character
        """
        if isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)

        words = frozenset(word for word in stop_words if word)
        for word in words:
            if not is_valid_word(word):
                logger.warning(f"Rejected stop word with control character: {word!r}")
                raise InvalidArgumentError(
                    f"Stop word {word!r} contains invalid characters", value=word
                )

        self._words = words

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"StopWordSet({sorted(self._words)!r})"
