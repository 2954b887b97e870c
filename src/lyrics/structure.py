"""Coarse song-structure counts from section keywords."""

import re
from dataclasses import dataclass

SECTION_KEYWORDS = {
    "verses": ["verso", "verse", "estrofa"],
    "choruses": ["coro", "chorus", "estribillo"],
    "bridges": ["puente", "bridge"],
}

_SECTION_PATTERNS = {
    section: re.compile(r"\b(?:" + "|".join(words) + r")\b", re.IGNORECASE)
    for section, words in SECTION_KEYWORDS.items()
}


@dataclass(frozen=True)
class SongStructure:
    """Number of lines mentioning each section type."""
    verses: int = 0
    choruses: int = 0
    bridges: int = 0

    def to_dict(self) -> dict:
        return {"verses": self.verses, "choruses": self.choruses, "bridges": self.bridges}


def count_sections(lines: list[str]) -> SongStructure:
    """Count lines containing verse, chorus and bridge markers."""
    counts = {
        section: sum(1 for line in lines if pattern.search(line))
        for section, pattern in _SECTION_PATTERNS.items()
    }
    return SongStructure(**counts)
