"""Glue word table and per-sentence glue ratio."""

import math
from .text import clean_word

GLUE_WORDS = frozenset([
    "a", "an", "and", "asked", "be", "by", "every", "for", "from", "get", "go", "have", "if", "in",
    "is", "it", "just", "like", "make", "much", "new", "of", "on", "said", "should", "some",
    "that", "the", "there", "think", "this", "to", "was", "what", "will", "with",
])

def glue_words_percentage(sentence: str) -> int:
    """
    Percentage of glue words among the whitespace-separated tokens of a sentence.
    
    Tokens are cleaned before lookup, so "It's" becomes "its" and does not match.
    
    Args:
        sentence: Sentence text
        
    Returns:
        int: Rounded percentage in [0, 100], halves rounded up; 0 for no tokens
    """
    words = sentence.split()
    if not words:
        return 0
        
    glue_count = sum(1 for word in words if clean_word(word) in GLUE_WORDS)
    return int(math.floor(100.0 * glue_count / len(words) + 0.5))
