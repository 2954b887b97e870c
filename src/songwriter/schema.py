"""
Songwriter Request Schema

Data exchanged with the lyric generation backend. The analysis engine
never calls the backend; it only fills these records.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional
import json

from lyrics.analyzer import AnalysisReport
from lyrics.devices import DeviceKind


class Genre(str, Enum):
    """Musical genres the generator understands."""
    ELECTRONIC = "electronic"
    EDM = "edm"
    LOFI = "lofi"
    AMBIENT = "ambient"
    SYNTHWAVE = "synthwave"
    DUBSTEP = "dubstep"
    TRAP = "trap"
    HOUSE = "house"
    POP = "pop"
    ROCK = "rock"
    BALLAD = "ballad"
    REGGAETON = "reggaeton"


class Mood(str, Enum):
    """Emotional register of the requested lyric."""
    ENERGETIC = "energetic"
    CHILL = "chill"
    DARK = "dark"
    HAPPY = "happy"
    MELANCHOLIC = "melancholic"
    AGGRESSIVE = "aggressive"
    DREAMY = "dreamy"
    EPIC = "epic"


class RequestMode(str, Enum):
    GENERATE = "generate"   # Write new lyrics from a theme
    IMPROVE = "improve"     # Rewrite a draft using analysis hints


MIN_COMPLEXITY = 0
MAX_COMPLEXITY = 100


def parse_genre(value: str) -> Genre:
    """Genre from its name (or a Genre), with a readable error."""
    try:
        return Genre(value.lower())
    except ValueError:
        raise ValueError(f"Unknown genre: {value}. Available: {[g.value for g in Genre]}") from None


def parse_mood(value: str) -> Mood:
    """Mood from its name, with a readable error."""
    try:
        return Mood(value.lower())
    except ValueError:
        raise ValueError(f"Unknown mood: {value}. Available: {[m.value for m in Mood]}") from None


@dataclass
class LyricHints:
    """The subset of an AnalysisReport the generator steers by."""
    dominant_theme: str
    coherence_score: int
    rhyme_pattern: str = ""
    uneven_lines: list[int] = field(default_factory=list)   # 1-based line numbers
    repeated_words: list[str] = field(default_factory=list)
    stress_irregularity_count: int = 0

    @classmethod
    def from_report(cls, report: AnalysisReport) -> 'LyricHints':
        return cls(
            dominant_theme=report.dominant_theme,
            coherence_score=report.coherence_score,
            rhyme_pattern=report.rhyme_pattern,
            uneven_lines=[issue.line_index + 1 for issue in report.metric_issues],
            repeated_words=[r.word for r in report.repeated_words],
            stress_irregularity_count=len(report.stress_irregularities),
        )


@dataclass
class LyricRequest:
    """
    A generation or improvement request for the lyric backend.

    complexity (0-100) decides which poetic devices are asked for.
    """
    mode: RequestMode
    genre: Genre
    mood: Mood
    complexity: int
    theme: str
    devices: list[DeviceKind] = field(default_factory=list)
    lyrics: Optional[str] = None        # Draft, only for IMPROVE
    hints: Optional[LyricHints] = None  # Only for IMPROVE
    prompt: str = ""

    def __post_init__(self):
        if not MIN_COMPLEXITY <= self.complexity <= MAX_COMPLEXITY:
            raise ValueError(
                f"complexity must be within {MIN_COMPLEXITY}-{MAX_COMPLEXITY}, got {self.complexity}"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        d = asdict(self)
        d['mode'] = self.mode.value
        d['genre'] = self.genre.value
        d['mood'] = self.mood.value
        d['devices'] = [kind.value for kind in self.devices]
        return d

    def to_json(self) -> str:
        """Serialize to JSON."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)
