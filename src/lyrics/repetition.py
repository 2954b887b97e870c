"""Repeated-word detection."""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from .config import AnalysisConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepeatedWord:
    word: str
    count: int

    def to_dict(self) -> dict:
        return {"word": self.word, "count": self.count}


class RepetitionDetector:
    """
    Flags words used too often.

    Short tokens ("el", "de", "la") are ignored as noise.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def detect(self, tokens: list[str]) -> list[RepeatedWord]:
        """
        Count long-enough tokens and report the over-used ones.

        Output follows first appearance in the token stream.
        """
        min_length = self.config.repetition_min_word_length
        counts = Counter(t for t in tokens if len(t) >= min_length)

        repeated = [
            RepeatedWord(word=word, count=count)
            for word, count in counts.items()
            if count >= self.config.repetition_min_count
        ]

        logger.debug(f"Repetition: {len(repeated)} words over threshold")
        return repeated
