#!/usr/bin/env python3
"""
Lyric Analyzer

Runs every analyzer over one lyric and assembles the AnalysisReport:
- Metric (syllables per line, lines off the meter)
- Stress (word-level stress breaks)
- Rhyme (end-rhyme scheme)
- Repetition (over-used words)
- Poetic devices (metaphor, alliteration, personification, hyperbole)
- Themes (dominant theme and keyword scores)
- Coherence (theme continuity between lines)
- Structure (verse/chorus/bridge mentions)

The report is a pure function of the input text: the same lyric always
yields the same report.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Optional

from .config import AnalysisConfig, DEFAULT_CONFIG
from .normalizer import TextNormalizer
from .metrics import MetricAnalyzer, MetricIssue
from .stress import StressIrregularityDetector, StressIrregularity
from .rhyme import RhymeAnalyzer, RhymeEntry, rhyme_pattern
from .repetition import RepetitionDetector, RepeatedWord
from .devices import PoeticDeviceDetector, PoeticDevices
from .themes import ThemeClassifier, ThemeScore
from .coherence import CoherenceScorer
from .structure import SongStructure, count_sections

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisReport:
    """Complete quality report for one lyric."""

    # === Counts ===
    line_count: int = 0
    word_count: int = 0
    average_words_per_line: float = 0.0

    # === Meter ===
    syllable_pattern: tuple[int, ...] = ()
    metric_issues: tuple[MetricIssue, ...] = ()
    stress_irregularities: tuple[StressIrregularity, ...] = ()

    # === Sound ===
    rhyme_scheme: tuple[RhymeEntry, ...] = ()
    repeated_words: tuple[RepeatedWord, ...] = ()

    # === Style ===
    devices: PoeticDevices = field(default_factory=PoeticDevices)
    structure: SongStructure = field(default_factory=SongStructure)

    # === Content ===
    theme: ThemeScore = field(default_factory=ThemeScore)
    coherence_score: int = 100

    @property
    def dominant_theme(self) -> str:
        return self.theme.dominant

    @property
    def rhyme_pattern(self) -> str:
        """Scheme as a string, e.g. "ABAB"."""
        return rhyme_pattern(list(self.rhyme_scheme))

    def to_dict(self) -> dict:
        """Convert to plain JSON types."""
        return {
            "line_count": self.line_count,
            "word_count": self.word_count,
            "average_words_per_line": self.average_words_per_line,
            "syllable_pattern": list(self.syllable_pattern),
            "metric_issues": [i.to_dict() for i in self.metric_issues],
            "stress_irregularities": [s.to_dict() for s in self.stress_irregularities],
            "rhyme_scheme": [r.to_dict() for r in self.rhyme_scheme],
            "rhyme_pattern": self.rhyme_pattern,
            "repeated_words": [r.to_dict() for r in self.repeated_words],
            "devices": self.devices.to_dict(),
            "structure": self.structure.to_dict(),
            "theme": self.theme.to_dict(),
            "coherence_score": self.coherence_score,
        }

    def to_json(self) -> str:
        """Serialize to JSON."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)


class LyricAnalyzer:
    """
    Composes the individual analyzers into one report.

    Usage:
        analyzer = LyricAnalyzer()
        report = analyzer.analyze(lyrics)
        if report is None:
            ...  # not enough text to analyze
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """Initialize all analyzers."""
        self.config = config or DEFAULT_CONFIG
        self.normalizer = TextNormalizer(min_length=self.config.min_text_length)
        self.metric_analyzer = MetricAnalyzer(self.config)
        self.stress_detector = StressIrregularityDetector(self.config)
        self.rhyme_analyzer = RhymeAnalyzer(self.config)
        self.repetition_detector = RepetitionDetector(self.config)
        self.device_detector = PoeticDeviceDetector(self.config)
        self.theme_classifier = ThemeClassifier()
        self.coherence_scorer = CoherenceScorer(self.config, self.theme_classifier)

    def analyze(self, text: str) -> Optional[AnalysisReport]:
        """
        Analyze a lyric.

        Args:
            text: Raw lyric text, one line per verse line

        Returns:
            AnalysisReport, or None when the text is too short to analyze
        """
        normalized = self.normalizer.normalize(text)
        if normalized is None:
            logger.debug("Insufficient text for analysis")
            return None

        lines = list(normalized.lines)
        tokens = list(normalized.tokens)

        metric = self.metric_analyzer.analyze(lines)
        stress = self.stress_detector.analyze(lines)
        rhymes = self.rhyme_analyzer.analyze(lines)
        repeated = self.repetition_detector.detect(tokens)
        devices = self.device_detector.analyze(text, tokens)
        theme = self.theme_classifier.classify(text)
        coherence = self.coherence_scorer.score(lines)
        structure = count_sections(lines)

        average_words = round(normalized.word_count / normalized.line_count, 2) if lines else 0.0

        logger.debug(
            f"Analyzed {normalized.line_count} lines, {normalized.word_count} words: "
            f"theme={theme.dominant}, coherence={coherence}"
        )

        return AnalysisReport(
            line_count=normalized.line_count,
            word_count=normalized.word_count,
            average_words_per_line=average_words,
            syllable_pattern=metric.syllables,
            metric_issues=metric.issues,
            stress_irregularities=tuple(stress),
            rhyme_scheme=tuple(rhymes),
            repeated_words=tuple(repeated),
            devices=devices,
            structure=structure,
            theme=theme,
            coherence_score=coherence,
        )


def analyze_lyrics(text: str, config: Optional[AnalysisConfig] = None) -> Optional[AnalysisReport]:
    """Convenience function: analyze text with a fresh analyzer."""
    return LyricAnalyzer(config).analyze(text)


# =============================================================================
# SYLLABLE VISUALIZATION
# =============================================================================

def visualize_syllables(report: AnalysisReport, width: int = 40) -> str:
    """Create ASCII visualization of syllables per line."""
    if not report.syllable_pattern:
        return "No lines analyzed"

    flagged = {issue.line_index for issue in report.metric_issues}
    max_count = max(report.syllable_pattern)

    lines = []
    for i, count in enumerate(report.syllable_pattern):
        bar = "█" * int(count / max_count * width)
        marker = " !" if i in flagged else ""
        lines.append(f"{i+1:3d} {report.rhyme_scheme[i].label:>2} [{count:2d}] {bar}{marker}")

    return "\n".join(lines)
