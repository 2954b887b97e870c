"""
Coherence scoring.

Starts from a full score and takes a penalty every time two adjacent
lines have different (known) dominant themes.
"""

import logging
from typing import Optional

from .config import AnalysisConfig, DEFAULT_CONFIG
from .themes import ThemeClassifier, UNKNOWN_THEME

logger = logging.getLogger(__name__)


class CoherenceScorer:
    """Penalty-based thematic continuity across consecutive lines."""

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        classifier: Optional[ThemeClassifier] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.classifier = classifier or ThemeClassifier()

    def line_themes(self, lines: list[str]) -> list[str]:
        return [self.classifier.classify(line).dominant for line in lines]

    def count_breaks(self, themes: list[str]) -> int:
        """Adjacent pairs whose known themes differ. Unknown never breaks."""
        breaks = 0
        for previous, current in zip(themes, themes[1:]):
            if UNKNOWN_THEME in (previous, current):
                continue
            if previous != current:
                breaks += 1
        return breaks

    def score(self, lines: list[str]) -> int:
        """Score in [0, coherence_start]."""
        breaks = self.count_breaks(self.line_themes(lines))
        score = self.config.coherence_start - breaks * self.config.coherence_penalty

        logger.debug(f"Coherence: {breaks} theme breaks over {len(lines)} lines")
        return max(0, score)
