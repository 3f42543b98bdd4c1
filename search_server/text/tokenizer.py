"""
Whitespace tokenizer.

Splitting rules:
1. Only the ASCII space (" ") separates words; tabs and newlines do not
2. Runs of spaces collapse
3. Leading/trailing spaces never produce empty words

Validity rule shared by stop words, document words and query words:
a word is valid iff it contains no control character (code points 0-31).
"""

from typing import List


def split_into_words(text: str) -> List[str]:
    """
    Split text into words on ASCII spaces.
    
    Args:
        text: Raw text (document body, query or stop-word blob)
        
    Returns:
        List of non-empty words in original order
        
    Examples:
        >>> split_into_words(" a  b ")
        ['a', 'b']
        
        >>> split_into_words("")
        []
        
        >>> split_into_words("tab\\tstays")
        ['tab\\tstays']
    """
    return [word for word in text.split(" ") if word]


def is_valid_word(word: str) -> bool:
    """
    Check that word has no control characters (code points 0-31).
    
    Examples:
        >>> is_valid_word("cat")
        True
        >>> is_valid_word("ca\\x12t")
        False
    """
    return not any(ord(char) < 32 for char in word)
