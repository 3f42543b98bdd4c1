"""
Text processing for indexing and querying.

Components:
- tokenizer: splits text on ASCII spaces and checks word validity
- stop_words: immutable stop-word set built from a string or an iterable

No normalization happens here: no lowercasing, no stemming, no punctuation
stripping. A word is exactly what sits between spaces.
"""

from .tokenizer import split_into_words, is_valid_word
from .stop_words import StopWordSet

__all__ = [
    "split_into_words",
    "is_valid_word",
    "StopWordSet",
]
