#!/usr/bin/env python3
"""
Stress Analyzer

Classifies words by a heuristic stress position and flags lines whose
word-level stress sequence keeps changing.

The 3 Stress Classes (Spanish orthographic conventions):
1. explicit   - A written accent marks the stressed syllable ("corazón")
2. paroxytone - Ends in a vowel, "n" or "s": stress on the penultimate ("luna")
3. oxytone    - Any other ending: stress on the last syllable ("amor")

No dictionary lookup is involved; these are orthographic rules of thumb.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import AnalysisConfig, DEFAULT_CONFIG
from .normalizer import tokenize

logger = logging.getLogger(__name__)


ACCENTED_VOWELS = frozenset("áéíóúü")
PAROXYTONE_ENDINGS = frozenset("aeiouns")


class StressClass(str, Enum):
    """Heuristic stress position of a word."""
    EXPLICIT = "explicit"
    PAROXYTONE = "paroxytone"
    OXYTONE = "oxytone"


def clean_word(word: str) -> str:
    """Lowercase and keep letters only."""
    return "".join(c for c in word.lower() if c.isalpha())


def classify_stress(word: str) -> StressClass:
    """Classify the stress of a single word."""
    cleaned = clean_word(word)

    if any(c in ACCENTED_VOWELS for c in cleaned):
        return StressClass.EXPLICIT
    if cleaned and cleaned[-1] in PAROXYTONE_ENDINGS:
        return StressClass.PAROXYTONE
    return StressClass.OXYTONE


@dataclass(frozen=True)
class StressIrregularity:
    """A change of stress class between two adjacent words of a line."""
    line_index: int
    previous_word: str
    word: str
    previous_stress: StressClass
    stress: StressClass

    def describe(self) -> str:
        """The word pair and their classes, without the line number."""
        return (
            f"'{self.previous_word}' ({self.previous_stress.value}) "
            f"-> '{self.word}' ({self.stress.value})"
        )

    def __str__(self) -> str:
        return f"Line {self.line_index + 1}: {self.describe()}"

    def to_dict(self) -> dict:
        return {
            "line_index": self.line_index,
            "previous_word": self.previous_word,
            "word": self.word,
            "previous_stress": self.previous_stress.value,
            "stress": self.stress.value,
        }


class StressIrregularityDetector:
    """
    Scans each line's stress sequence for breaks.

    Every adjacent pair whose classes differ is reported, so the result
    depends on the text alone. Lines shorter than stress_min_tokens are
    too short to carry a pattern and are skipped.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def classify(self, word: str) -> StressClass:
        return classify_stress(word)

    def find(self, line: str, line_index: int = 0) -> list[StressIrregularity]:
        """Find stress-class changes within one line."""
        words = tokenize(line)
        if len(words) < self.config.stress_min_tokens:
            return []

        classes = [self.classify(w) for w in words]

        irregularities = []
        for i in range(1, len(words)):
            if classes[i] != classes[i - 1]:
                irregularities.append(StressIrregularity(
                    line_index=line_index,
                    previous_word=words[i - 1],
                    word=words[i],
                    previous_stress=classes[i - 1],
                    stress=classes[i],
                ))

        return irregularities

    def detect_irregularities(self, line: str) -> list[str]:
        """Describe the stress breaks of a single line."""
        return [irregularity.describe() for irregularity in self.find(line)]

    def analyze(self, lines: list[str]) -> list[StressIrregularity]:
        """Find stress breaks across all lines, in line order."""
        found = []
        for i, line in enumerate(lines):
            found.extend(self.find(line, line_index=i))

        logger.debug(f"Stress analysis: {len(found)} irregularities in {len(lines)} lines")
        return found
