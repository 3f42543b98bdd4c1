"""
Index core: inverted index of term frequencies plus the document store.

Both structures are written only through SearchServer.add_document and are
updated in lockstep: a document id is in the store iff its postings (if it
has any words) are in the index.

Term frequency:
    tf(word, doc) = occurrences of word in doc / number of words in doc

computed after stop-word removal. A document left with no words has no
postings at all.
"""

import logging
from collections import Counter, defaultdict
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping

from .document import DocumentData
from .errors import DocumentNotFoundError, OutOfRangeError

logger = logging.getLogger(__name__)

_EMPTY_POSTINGS: Mapping[int, float] = {}


def build_term_frequencies(words: List[str]) -> Dict[str, float]:
    """
    Compute per-word term frequencies for one document.
    
    Args:
        words: Document words with stop words already removed
    
    Returns:
        {word: occurrences / len(words)}, empty for an empty document
        
    Example:
        >>> build_term_frequencies(["puffy", "cat", "puffy", "tail", "cat"])
        {'puffy': 0.4, 'cat': 0.4, 'tail': 0.2}
    """
    if not words:
        return {}

    word_count = len(words)
    counts = Counter(words)
    return {word: count / word_count for word, count in counts.items()}


class InvertedIndex:
    """Maps each indexed word to {document_id: term frequency}."""

    def __init__(self):
        self._postings: Dict[str, Dict[int, float]] = defaultdict(dict)
        self._document_words: Dict[int, Dict[str, float]] = {}

    def add_postings(self, document_id: int, term_frequencies: Mapping[str, float]) -> None:
        """
        Record the postings of one document.
        
        Frequencies are added to any existing posting for the same
        (word, document) pair.
        """
        document_words = self._document_words.setdefault(document_id, {})
        for word, frequency in term_frequencies.items():
            postings = self._postings[word]
            postings[document_id] = postings.get(document_id, 0.0) + frequency
            document_words[word] = document_words.get(word, 0.0) + frequency

        logger.debug(
            f"Indexed document {document_id}: {len(term_frequencies)} distinct words, "
            f"{len(self._postings)} words in index"
        )

    def postings(self, word: str) -> Mapping[int, float]:
        """Postings for word, empty mapping if the word is not indexed"""
        return self._postings.get(word, _EMPTY_POSTINGS)

    def document_frequency(self, word: str) -> int:
        """Number of documents containing word"""
        return len(self._postings.get(word, _EMPTY_POSTINGS))

    def has_posting(self, word: str, document_id: int) -> bool:
        return document_id in self._postings.get(word, _EMPTY_POSTINGS)

    def word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Read-only view of a document's {word: tf}"""
        return MappingProxyType(self._document_words.get(document_id, {}))

    def __contains__(self, word: object) -> bool:
        return word in self._postings

    def __len__(self) -> int:
        return len(self._postings)


class DocumentStore:
    """Per-document metadata plus insertion order."""

    def __init__(self):
        self._documents: Dict[int, DocumentData] = {}
        self._insertion_order: List[int] = []

    def add(self, document_id: int, data: DocumentData) -> None:
        self._documents[document_id] = data
        self._insertion_order.append(document_id)

    def get(self, document_id: int) -> DocumentData:
        """
        Stored metadata for document_id.
        
        Raises:
            DocumentNotFoundError: Unknown document id
        """
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(
                f"Document {document_id} not found", value=document_id
            ) from None

    def id_at(self, position: int) -> int:
        """
        Document id by insertion position (0-based).
        
        Raises:
            OutOfRangeError: position is negative or past the last document
        """
        if position < 0 or position >= len(self._insertion_order):
            raise OutOfRangeError(
                f"Position {position} out of range for {len(self._insertion_order)} documents",
                value=position,
            )
        return self._insertion_order[position]

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __iter__(self) -> Iterator[int]:
        return iter(self._insertion_order)

    def __len__(self) -> int:
        return len(self._documents)
