"""
Text normalization.

Splits raw lyrics into trimmed, non-empty lines and a flat stream of
lowercase word tokens. Every other analyzer starts from this.
"""

import re
from dataclasses import dataclass
from typing import Optional

WORD_PATTERN = re.compile(r"\b\w+\b")


def split_lines(text: str) -> list[str]:
    """Split text into trimmed lines, dropping empty ones."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def tokenize(text: str) -> list[str]:
    """Lowercase word tokens in order, duplicates kept."""
    return WORD_PATTERN.findall(text.lower())


@dataclass(frozen=True)
class NormalizedText:
    """Raw text plus its line and token views."""
    raw: str
    lines: tuple[str, ...]
    tokens: tuple[str, ...]

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def word_count(self) -> int:
        return len(self.tokens)


class TextNormalizer:
    """Produces the {lines, tokens} view of a lyric."""

    def __init__(self, min_length: int = 10):
        self.min_length = min_length

    def is_sufficient(self, text: str) -> bool:
        """True when the trimmed text is long enough to analyze."""
        return len(text.strip()) >= self.min_length

    def normalize(self, text: str) -> Optional[NormalizedText]:
        """
        Normalize raw text.

        Returns:
            NormalizedText, or None when the input is too short to analyze
        """
        if not self.is_sufficient(text):
            return None

        return NormalizedText(
            raw=text,
            lines=tuple(split_lines(text)),
            tokens=tuple(tokenize(text)),
        )
