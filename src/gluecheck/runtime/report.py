"""Sticky sentence analysis and report rendering."""

from typing import List, Optional
import numpy as np
from ..core.types import ScoredSentence, StickyReport
from ..core.glue import glue_words_percentage
from ..core.abc import Segmenter, Logger, Meter
from ..config.schema import AnalyzerConfig
from ..segmenters.sentence import SentenceSegmenter

class StickyReporter:
    """
    Scores every sentence of a text by its glue-word ratio and
    flags the ones above the configured threshold as sticky.
    """

    def __init__(self, *, config: Optional[AnalyzerConfig] = None,
                 segmenter: Optional[Segmenter] = None,
                 logger: Optional[Logger] = None,
                 meter: Optional[Meter] = None):
        """
        Initialize reporter with config and dependencies.

        Args:
            config: Validated analyzer config (defaults when omitted)
            segmenter: Optional sentence segmenter (fallback to SentenceSegmenter)
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.config = config or AnalyzerConfig()
        self.segmenter = segmenter or SentenceSegmenter()
        self.log = logger
        self.meter = meter

    def is_sticky(self, glue_ratio: int) -> bool:
        """Whether a glue ratio is strictly above the sticky threshold."""
        return glue_ratio > self.config.thresholds.sticky_above

    def analyze(self, text: str) -> StickyReport:
        """
        Segment text and score each sentence.

        Args:
            text: Full input text

        Returns:
            StickyReport: Scored sentences in input order plus summary figures
        """
        scored: List[ScoredSentence] = []
        for sentence in self.segmenter.segment(text):
            ratio = glue_words_percentage(sentence.text)
            scored.append(ScoredSentence(sentence=sentence, glue_ratio=ratio,
                                         sticky=self.is_sticky(ratio)))
            if self.meter:
                self.meter.observe("gluecheck.glue_ratio", float(ratio))

        sticky_count = sum(1 for s in scored if s.sticky)

        scores_summary = {}
        if scored:
            ratios = np.array([s.glue_ratio for s in scored], dtype=float)
            scores_summary = {
                "mean": float(ratios.mean()),
                "min": float(ratios.min()),
                "max": float(ratios.max()),
            }

        report = StickyReport(sentences=scored, sticky_count=sticky_count,
                              scores_summary=scores_summary)

        if self.meter:
            self.meter.inc("gluecheck.sentences", report.total)
            self.meter.inc("gluecheck.sticky_sentences", sticky_count)

        if self.log:
            self.log.info("sticky_analysis",
                          sentences=report.total,
                          sticky=sticky_count,
                          sticky_percentage=report.sticky_percentage,
                          scores_summary=report.scores_summary)

        return report

    def format_sticky_line(self, item: ScoredSentence) -> str:
        """Render the report line for one sticky sentence."""
        sentence = item.sentence
        # The display form repeats the line number and quotes the text
        body = str(sentence) if self.config.output.echo_display_form else sentence.text
        return f"Line {sentence.line_number}: {body} ({item.glue_ratio}%)"

    def render(self, report: StickyReport) -> List[str]:
        """
        Render a report as output lines: one per sticky sentence, a blank line, then the summary.

        Args:
            report: Result of analyze()

        Returns:
            List[str]: Lines without trailing newlines
        """
        lines = [self.format_sticky_line(item) for item in report.sticky]
        lines.append("")
        lines.append(
            f"Among {report.total} sentences there were {report.sticky_count} "
            f"sticky ones ({report.sticky_percentage:.2f}%)."
        )
        return lines
