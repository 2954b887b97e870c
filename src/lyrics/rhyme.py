#!/usr/bin/env python3
"""
Rhyme Analyzer

Infers the end-rhyme scheme of a lyric. The rhyme key of a line is the
suffix of its final word; lines with equal keys share a label, and labels
are handed out A, B, C, ... in order of first appearance.
"""

import logging
from dataclasses import dataclass
from string import ascii_uppercase
from typing import Optional

from .config import AnalysisConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RhymeEntry:
    """Rhyme assignment for one line."""
    line_index: int
    word: str      # Final word, letters only, lowercase
    key: str       # Rhyme key (suffix of word)
    label: str     # "A", "B", ...

    def to_dict(self) -> dict:
        return {
            "line_index": self.line_index,
            "word": self.word,
            "key": self.key,
            "label": self.label,
        }


def rhyme_label(n: int) -> str:
    """
    Label for the n-th distinct rhyme (0-based).

    A..Z, then AA, AB, ... like spreadsheet columns.
    """
    label = ""
    n += 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        label = ascii_uppercase[rem] + label
    return label


def last_word(line: str) -> str:
    """Final whitespace-delimited token, letters only, lowercase."""
    parts = line.split()
    if not parts:
        return ""
    return "".join(c for c in parts[-1].lower() if c.isalpha())


class RhymeAnalyzer:
    """Assigns rhyme labels to lines."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def rhyme_key(self, word: str) -> str:
        return word[-self.config.rhyme_key_length:]

    def analyze(self, lines: list[str]) -> list[RhymeEntry]:
        """
        Label every line by its rhyme key.

        Args:
            lines: Lyric lines in order

        Returns:
            One RhymeEntry per line, in line order
        """
        labels: dict[str, str] = {}
        entries = []

        for i, line in enumerate(lines):
            word = last_word(line)
            key = self.rhyme_key(word)
            if key not in labels:
                labels[key] = rhyme_label(len(labels))
            entries.append(RhymeEntry(line_index=i, word=word, key=key, label=labels[key]))

        logger.debug(f"Rhyme analysis: {len(labels)} rhyme groups in {len(lines)} lines")
        return entries


def rhyme_pattern(entries: list[RhymeEntry]) -> str:
    """Compact scheme string, e.g. "ABAB"."""
    return "".join(e.label for e in entries)
