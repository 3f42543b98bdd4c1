"""
Query parser: raw query string -> include/exclude word sets.

Syntax:
    cat puffy      include words (contribute to relevance)
    -white         exclude word (any document containing it is dropped)

Rejected (InvalidArgumentError):
    -              bare minus
    --white        double minus prefix
    ca\\x01t        word with a control character

Stop words are dropped silently from both sets. Duplicates collapse.
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, NamedTuple, Optional

from .errors import InvalidArgumentError
from .text import StopWordSet, is_valid_word, split_into_words

logger = logging.getLogger(__name__)


class QueryWord(NamedTuple):
    """Single parsed query word"""
    data: str
    is_minus: bool
    is_stop: bool


@dataclass(frozen=True)
class Query:
    """Structured query with disjoint-by-role include and exclude words"""
    plus_words: FrozenSet[str] = field(default_factory=frozenset)
    minus_words: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.plus_words and not self.minus_words


class QueryParser:
    """Parses raw queries against a fixed stop-word set."""

    def __init__(self, stop_words: Optional[StopWordSet] = None):
        self.stop_words = stop_words if stop_words is not None else StopWordSet()

    def parse_word(self, text: str) -> QueryWord:
        """
        Classify one query word.
        
        Raises:
            InvalidArgumentError: Bare "-", "--" prefix or invalid characters
        """
        is_minus = text.startswith("-")
        if is_minus:
            text = text[1:]
            if not text:
                raise InvalidArgumentError("Query word is empty (bare '-')", value="-")
            if text.startswith("-"):
                raise InvalidArgumentError(
                    f"Query word '-{text}' has more than one leading '-'", value=f"-{text}"
                )

        if not is_valid_word(text):
            raise InvalidArgumentError(
                f"Query word {text!r} contains invalid characters", value=text
            )

        return QueryWord(text, is_minus, text in self.stop_words)

    def parse(self, raw_query: str) -> Query:
        """
        Parse raw_query into include and exclude word sets.
        
        Args:
            raw_query: Free-text query, e.g. "fluffy cat -collar"
            
        Returns:
            Query with plus_words and minus_words
            
        Raises:
            InvalidArgumentError: Any malformed query word (whole query rejected)
        """
        plus_words = set()
        minus_words = set()

        for text in split_into_words(raw_query):
            try:
                word = self.parse_word(text)
            except InvalidArgumentError as e:
                logger.warning(f"Rejected query {raw_query!r}: {e}")
                raise

            if word.is_stop:
                continue
            if word.is_minus:
                minus_words.add(word.data)
            else:
                plus_words.add(word.data)

        query = Query(frozenset(plus_words), frozenset(minus_words))
        logger.debug(
            f"Parsed query {raw_query!r}: {len(query.plus_words)} plus words, "
            f"{len(query.minus_words)} minus words"
        )
        return query
