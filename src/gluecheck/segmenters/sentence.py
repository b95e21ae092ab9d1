"""Line-tracking sentence segmenter with no external dependencies."""

from enum import Enum
from typing import List
from ..core.text import normalize_sentence
from ..core.types import Sentence

TERMINATORS = frozenset(".?!")

class SentenceState(Enum):
    NOT_IN_SENTENCE = "not_in_sentence"
    IN_SENTENCE = "in_sentence"

class SentenceSegmenter:
    """
    Deterministic single-pass sentence segmenter.
    Splits on '.', '?' and '!' and remembers the source line each sentence starts on.
    """
    
    def segment(self, text: str) -> List[Sentence]:
        """
        Segment text into line-numbered sentences.
        
        A sentence starts at its first alphanumeric character. Every terminator
        closes the current buffer, even one holding no letters, and the start
        line is only updated when a new sentence begins; a run of bare
        terminators therefore reuses the previous start line.
        
        Args:
            text: Input text to segment
            
        Returns:
            List[Sentence]: Sentences in input order
        """
        sentences: List[Sentence] = []
        
        line_number = 1
        sentence_line_number = line_number
        buffer: List[str] = []
        state = SentenceState.NOT_IN_SENTENCE
        
        for ch in text:
            buffer.append(ch)
            
            if ch in TERMINATORS:
                sentences.append(Sentence(sentence_line_number, normalize_sentence("".join(buffer))))
                buffer = []
                state = SentenceState.NOT_IN_SENTENCE
            elif ch == "\n":
                line_number += 1
            elif ch.isalnum() and state is SentenceState.NOT_IN_SENTENCE:
                sentence_line_number = line_number
                state = SentenceState.IN_SENTENCE
                
        # Trailing sentence without terminal punctuation
        if state is SentenceState.IN_SENTENCE:
            sentences.append(Sentence(sentence_line_number, normalize_sentence("".join(buffer))))
            
        return sentences
