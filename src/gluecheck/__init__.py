"""
gluecheck - Sticky sentence detection for plain text.

Reads a block of prose, splits it into sentences and flags the ones
dominated by glue words (articles, conjunctions, prepositions).
"""

__version__ = "0.1.0"
