"""
TF-IDF relevance ranking with top-K selection.

Formula:
    relevance(doc) = Σ tf(word, doc) × idf(word)   over include words in doc
    idf(word) = ln(document_count / documents_containing(word))

Where:
    tf = term frequency stored in the inverted index
    only (word, doc) postings accepted by the document predicate contribute

Exclude words are applied after scoring: any document with a posting for an
exclude word is dropped, whatever the predicate says.

Ordering:
    1. Relevance, descending
    2. Rating, descending, when relevances differ by less than epsilon (1e-6)
"""

import logging
import math
from functools import cmp_to_key
from typing import Callable, Dict, List, Union

from .document import Document, DocumentStatus
from .errors import InvalidArgumentError
from .index import DocumentStore, InvertedIndex
from .query import QueryParser

logger = logging.getLogger(__name__)

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]
DocumentFilter = Union[DocumentStatus, DocumentPredicate]


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Predicate accepting only documents with the given status"""
    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status
    return predicate


def resolve_predicate(filter_by: DocumentFilter) -> DocumentPredicate:
    """
    Turn a status or a callable into a document predicate.
    
    Raises:
        InvalidArgumentError: filter_by is neither a DocumentStatus nor callable
    """
    if isinstance(filter_by, DocumentStatus):
        return status_predicate(filter_by)
    if callable(filter_by):
        return filter_by
    raise InvalidArgumentError(
        f"Document filter must be a DocumentStatus or a callable, got {type(filter_by).__name__}",
        value=filter_by,
    )


class RankingEngine:
    """
    Scores documents against queries and keeps the best K.
    
    Reads the index and the document store; never writes to them.
    """

    def __init__(
        self,
        parser: QueryParser,
        index: InvertedIndex,
        documents: DocumentStore,
        max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT,
        relevance_epsilon: float = RELEVANCE_EPSILON,
    ):
        """
        Initialize ranking engine.
        
        Args:
            parser: Query parser sharing the server's stop words
            index: Inverted index with term frequencies
            documents: Document store (ratings, statuses, document count)
            max_result_document_count: K in top-K (default: 5)
            relevance_epsilon: Relevances closer than this are ties,
                broken by rating (default: 1e-6)
        """
        if max_result_document_count < 1:
            raise InvalidArgumentError(
                f"max_result_document_count must be >= 1, got {max_result_document_count}",
                value=max_result_document_count,
            )
        if relevance_epsilon <= 0:
            raise InvalidArgumentError(
                f"relevance_epsilon must be > 0, got {relevance_epsilon}",
                value=relevance_epsilon,
            )

        self.parser = parser
        self.index = index
        self.documents = documents
        self.max_result_document_count = max_result_document_count
        self.relevance_epsilon = relevance_epsilon

    def inverse_document_frequency(self, word: str) -> float:
        """ln(N / df); 0.0 for a word no document contains"""
        document_frequency = self.index.document_frequency(word)
        if document_frequency == 0:
            return 0.0
        return math.log(len(self.documents) / document_frequency)

    def compare(self, lhs: Document, rhs: Document) -> int:
        """Comparator: negative when lhs ranks before rhs"""
        if abs(lhs.relevance - rhs.relevance) < self.relevance_epsilon:
            return rhs.rating - lhs.rating
        return -1 if lhs.relevance > rhs.relevance else 1

    @property
    def sort_key(self):
        """Key function for list.sort(), best document first"""
        return cmp_to_key(self.compare)

    def find_all_documents(self, raw_query: str, predicate: DocumentPredicate) -> List[Document]:
        """
        Score every matching document, unsorted and untruncated.
        
        Raises:
            InvalidArgumentError: Malformed query
        """
        query = self.parser.parse(raw_query)

        relevances: Dict[int, float] = {}
        # Sorted for a reproducible accumulation order
        for word in sorted(query.plus_words):
            postings = self.index.postings(word)
            if not postings:
                continue
            idf = self.inverse_document_frequency(word)
            for document_id, term_frequency in postings.items():
                data = self.documents.get(document_id)
                if predicate(document_id, data.status, data.rating):
                    relevances[document_id] = relevances.get(document_id, 0.0) + idf * term_frequency

        for word in query.minus_words:
            for document_id in self.index.postings(word):
                relevances.pop(document_id, None)

        return [
            Document(document_id, relevance, self.documents.get(document_id).rating)
            for document_id, relevance in relevances.items()
        ]

    def find_top_documents(self, raw_query: str, filter_by: DocumentFilter = DocumentStatus.ACTUAL) -> List[Document]:
        """
        Best documents for raw_query.
        
        Args:
            raw_query: Free-text query with optional "-word" exclusions
            filter_by: DocumentStatus to match, or predicate
                (document_id, status, rating) -> bool
                
        Returns:
            At most max_result_document_count documents, best first
            
        Raises:
            InvalidArgumentError: Malformed query or unusable filter
        """
        predicate = resolve_predicate(filter_by)
        matched = self.find_all_documents(raw_query, predicate)
        matched.sort(key=self.sort_key)

        logger.debug(
            f"Query {raw_query!r}: {len(matched)} matching documents, "
            f"returning {min(len(matched), self.max_result_document_count)}"
        )
        return matched[:self.max_result_document_count]
