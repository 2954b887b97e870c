#!/usr/bin/env python3
"""
Theme Classifier

Scores text against fixed keyword buckets and picks the dominant theme.

The 6 Themes (declaration order breaks ties):
1. love
2. sadness
3. happiness
4. nature
5. freedom
6. nostalgia

A theme's score is the total number of substring hits of its keywords in
the lowercased text, so "amores" counts for "amor".
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

UNKNOWN_THEME = "unknown"


# =============================================================================
# THEME LEXICONS
# =============================================================================

THEME_KEYWORDS = {
    "love": [
        "amor", "corazón", "beso", "pasión", "querer", "te quiero",
        "enamor", "caricia",
    ],
    "sadness": [
        "triste", "dolor", "lágrima", "llorar", "llanto", "soledad",
        "pena", "herida",
    ],
    "happiness": [
        "alegría", "feliz", "sonrisa", "fiesta", "celebrar", "reír",
        "bailar",
    ],
    "nature": [
        "viento", "luna", "estrella", "cielo", "flor", "río", "océano",
        "montaña", "bosque", "lluvia",
    ],
    "freedom": [
        "libertad", "libre", "volar", "alas", "cadenas", "escapar",
        "horizonte",
    ],
    "nostalgia": [
        "recuerdo", "ayer", "pasado", "memoria", "nostalgia", "extraño",
        "añoro",
    ],
}


@dataclass(frozen=True)
class ThemeScore:
    """Keyword hits per theme (in bucket order) and the winner."""
    score_items: tuple[tuple[str, int], ...] = ()
    dominant: str = UNKNOWN_THEME

    @property
    def scores(self) -> Mapping[str, int]:
        """Read-only view of the hits per theme."""
        return MappingProxyType(dict(self.score_items))

    def to_dict(self) -> dict:
        return {"dominant": self.dominant, "scores": dict(self.score_items)}


class ThemeClassifier:
    """Keyword-bucket theme classification."""

    def __init__(self, keywords: Optional[dict[str, list[str]]] = None):
        self.keywords = THEME_KEYWORDS if keywords is None else keywords

    def score(self, text: str) -> dict[str, int]:
        """Keyword hit count per theme, in bucket order."""
        text_lower = text.lower()
        return {
            theme: sum(text_lower.count(keyword) for keyword in words)
            for theme, words in self.keywords.items()
        }

    def dominant(self, scores: dict[str, int]) -> str:
        """Highest-scoring theme; earlier buckets win ties."""
        best_theme = UNKNOWN_THEME
        best_score = 0
        for theme, value in scores.items():
            if value > best_score:
                best_theme, best_score = theme, value
        return best_theme

    def classify(self, text: str) -> ThemeScore:
        scores = self.score(text)
        return ThemeScore(score_items=tuple(scores.items()), dominant=self.dominant(scores))
