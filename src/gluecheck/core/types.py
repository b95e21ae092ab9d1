"""Data types and result structures for gluecheck analysis."""

from dataclasses import dataclass, field
from typing import List, Dict

@dataclass(frozen=True)
class Sentence:
    """A sentence as found in the source text."""
    line_number: int    # 1-based line of the first alphanumeric character
    text: str           # whitespace-normalized, never empty

    def __str__(self) -> str:
        return f"{self.line_number}: `{self.text}`"

@dataclass(frozen=True)
class ScoredSentence:
    """A sentence with its glue ratio and stickiness verdict."""
    sentence: Sentence
    glue_ratio: int     # percentage of glue words, 0..100
    sticky: bool

@dataclass
class StickyReport:
    """Result of analyzing one block of text."""
    sentences: List[ScoredSentence]
    sticky_count: int
    scores_summary: Dict[str, float] = field(default_factory=dict)  # mean/min/max glue ratio

    @property
    def total(self) -> int:
        """Number of sentences analyzed."""
        return len(self.sentences)

    @property
    def sticky(self) -> List[ScoredSentence]:
        """Sticky sentences in original order."""
        return [s for s in self.sentences if s.sticky]

    @property
    def sticky_percentage(self) -> float:
        """Share of sticky sentences, in percent."""
        if not self.sentences:
            return 0.0
        return 100.0 * self.sticky_count / len(self.sentences)
