#!/usr/bin/env python3
"""
Metric Analyzer

Measures how evenly syllables are spread across the lines of a lyric.
A line whose estimated syllable count strays more than the configured
threshold from the lyric's mean is reported as a metric issue.
"""

import logging
import math
import numpy as np
from dataclasses import dataclass, field
from typing import Optional

from .config import AnalysisConfig, DEFAULT_CONFIG
from .syllables import SyllableEstimator

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class MetricIssue:
    """A line whose syllable count deviates from the lyric mean."""
    line_index: int
    actual: int
    expected: int        # round(mean)
    deviation: float     # |actual - mean|

    def to_dict(self) -> dict:
        return {
            "line_index": self.line_index,
            "actual": self.actual,
            "expected": self.expected,
            "deviation": self.deviation,
        }


@dataclass(frozen=True)
class MetricResult:
    """Per-line syllable pattern plus the lines flagged as irregular."""
    syllables: tuple[int, ...] = ()
    mean: float = 0.0
    issues: tuple[MetricIssue, ...] = field(default_factory=tuple)


class MetricAnalyzer:
    """
    Flags lines that break the lyric's syllabic meter.

    Usage:
        result = MetricAnalyzer().analyze(["hola mundo", "adiós"])
        for issue in result.issues:
            print(issue.line_index, issue.actual, issue.expected)
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        estimator: Optional[SyllableEstimator] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.estimator = estimator or SyllableEstimator()

    def analyze(self, lines: list[str]) -> MetricResult:
        """
        Compute syllables per line and the metric issues.

        Args:
            lines: Non-empty lyric lines in order

        Returns:
            MetricResult with one syllable count per line
        """
        if not lines:
            return MetricResult()

        syllables = self.estimator.estimate_all(lines)
        mean = float(np.mean(syllables))
        expected = round_half_up(mean)
        threshold = self.config.metric_deviation_threshold

        issues = []
        for i, count in enumerate(syllables):
            deviation = abs(count - mean)
            if deviation > threshold:
                issues.append(MetricIssue(
                    line_index=i,
                    actual=count,
                    expected=expected,
                    deviation=deviation,
                ))

        logger.debug(f"Metric analysis: mean={mean:.2f}, {len(issues)} issues in {len(lines)} lines")

        return MetricResult(
            syllables=tuple(syllables),
            mean=mean,
            issues=tuple(issues),
        )
