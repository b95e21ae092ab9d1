"""Whitespace and word-level text helpers."""

def normalize_sentence(text: str) -> str:
    """Collapse every whitespace run (newlines included) to one space and trim."""
    return " ".join(text.split())

def clean_word(word: str) -> str:
    """Lowercase a token and drop everything that is not a letter."""
    return "".join(ch.lower() for ch in word if ch.isalpha())
