"""
SearchServer - in-process document search engine.

Owns the stop words, the inverted index and the document store, and exposes
the public operations:

    server = SearchServer("and in on")
    server.add_document(1, "puffy cat puffy tail cat", DocumentStatus.ACTUAL, [7, 2, 7])
    server.find_top_documents("cat -white")
    server.match_document("puffy cat", 1)

Single-threaded: no internal locking. Share across threads only behind an
external single-writer/multiple-readers guard.
"""

import logging
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .config import SearchSettings
from .document import DocumentData, DocumentStatus, Document, compute_average_rating
from .errors import InvalidArgumentError
from .index import DocumentStore, InvertedIndex, build_term_frequencies
from .query import QueryParser
from .ranking import (
    MAX_RESULT_DOCUMENT_COUNT,
    RELEVANCE_EPSILON,
    DocumentFilter,
    RankingEngine,
)
from .text import StopWordSet, is_valid_word, split_into_words

logger = logging.getLogger(__name__)


class SearchServer:
    """TF-IDF search over short text documents."""

    def __init__(
        self,
        stop_words: Union[str, Iterable[str]] = "",
        max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT,
        relevance_epsilon: float = RELEVANCE_EPSILON,
    ):
        """
        Create an empty search server.
        
        Args:
            stop_words: Space-delimited string or iterable of stop words
            max_result_document_count: Top-K cap for find_top_documents
            relevance_epsilon: Relevance tie threshold for rating tie-break
            
        Raises:
            InvalidArgumentError: Invalid stop word or ranking parameter
        """
        self.stop_words = StopWordSet(stop_words)
        self._index = InvertedIndex()
        self._documents = DocumentStore()
        self._parser = QueryParser(self.stop_words)
        self._ranking = RankingEngine(
            self._parser,
            self._index,
            self._documents,
            max_result_document_count=max_result_document_count,
            relevance_epsilon=relevance_epsilon,
        )

        logger.info(
            f"Search server created: {len(self.stop_words)} stop words, "
            f"top-{max_result_document_count} results"
        )

    @classmethod
    def from_settings(
        cls,
        stop_words: Union[str, Iterable[str]] = "",
        settings: Optional[SearchSettings] = None,
    ) -> "SearchServer":
        """Create a server configured from SearchSettings (defaults if None)"""
        settings = settings or SearchSettings()
        return cls(
            stop_words,
            max_result_document_count=settings.max_result_document_count,
            relevance_epsilon=settings.relevance_epsilon,
        )

    @property
    def max_result_document_count(self) -> int:
        return self._ranking.max_result_document_count

    @property
    def document_count(self) -> int:
        return len(self._documents)

    def add_document(
        self,
        document_id: int,
        text: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Iterable[int] = (),
    ) -> None:
        """
        Index a document.
        
        All-or-nothing: on failure neither the index nor the store changes.
        
        Args:
            document_id: Non-negative id, unique for the server's lifetime
            text: Document body (words separated by spaces)
            status: Document status, fixed from now on
            ratings: User ratings; stored as their truncated mean
            
        Raises:
            InvalidArgumentError: Negative or duplicate id, unknown status,
                non-integer rating or a word with control characters
        """
        if document_id < 0:
            logger.warning(f"Rejected document with negative id {document_id}")
            raise InvalidArgumentError(
                f"Document id must be non-negative, got {document_id}", value=document_id
            )
        if document_id in self._documents:
            logger.warning(f"Rejected duplicate document id {document_id}")
            raise InvalidArgumentError(
                f"Document {document_id} already exists", value=document_id
            )

        if not isinstance(status, DocumentStatus):
            logger.warning(f"Rejected document {document_id} with unknown status {status!r}")
            raise InvalidArgumentError(
                f"Document status must be a DocumentStatus, got {status!r}", value=status
            )

        ratings = tuple(ratings)
        for rating in ratings:
            if not isinstance(rating, int) or isinstance(rating, bool):
                logger.warning(f"Rejected document {document_id} with rating {rating!r}")
                raise InvalidArgumentError(
                    f"Rating must be an integer, got {rating!r}", value=rating
                )
        data = DocumentData(compute_average_rating(ratings), status)

        words = self._split_into_words_no_stop(text)
        term_frequencies = build_term_frequencies(words)

        # Validation is done, commit to both structures
        self._index.add_postings(document_id, term_frequencies)
        self._documents.add(document_id, data)

        if not words:
            logger.debug(f"Document {document_id} has no indexable words")

    def find_top_documents(
        self,
        raw_query: str,
        filter_by: DocumentFilter = DocumentStatus.ACTUAL,
    ) -> List[Document]:
        """
        Best matching documents for raw_query.
        
        Args:
            raw_query: Words to find; "-word" excludes documents containing word
            filter_by: DocumentStatus (default ACTUAL) or predicate
                (document_id, status, rating) -> bool
        
        Returns:
            Up to max_result_document_count documents, most relevant first
            
        Raises:
            InvalidArgumentError: Malformed query
        """
        return self._ranking.find_top_documents(raw_query, filter_by)

    def match_document(self, raw_query: str, document_id: int) -> Tuple[List[str], DocumentStatus]:
        """
        Query include words present in one document.
        
        Returns:
            (sorted matched words, document status); matched words are
            empty if the document contains any exclude word
            
        Raises:
            InvalidArgumentError: Malformed query
            DocumentNotFoundError: Unknown document id
        """
        query = self._parser.parse(raw_query)
        status = self._documents.get(document_id).status

        for word in query.minus_words:
            if self._index.has_posting(word, document_id):
                return [], status

        matched_words = [
            word for word in sorted(query.plus_words)
            if self._index.has_posting(word, document_id)
        ]
        return matched_words, status

    def document_id_at(self, position: int) -> int:
        """
        Id of the document added at position (0-based insertion order).
        
        Raises:
            OutOfRangeError: No document at that position
        """
        return self._documents.id_at(position)

    def word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """{word: term frequency} of a document, empty for unknown ids"""
        return self._index.word_frequencies(document_id)

    def _split_into_words_no_stop(self, text: str) -> List[str]:
        words = []
        for word in split_into_words(text):
            if not is_valid_word(word):
                logger.warning(f"Rejected document word with control character: {word!r}")
                raise InvalidArgumentError(
                    f"Word {word!r} contains invalid characters", value=word
                )
            if word not in self.stop_words:
                words.append(word)
        return words

    def __iter__(self) -> Iterator[int]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)
