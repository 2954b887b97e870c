"""
Analysis configuration.

Every threshold the engine uses lives here so it can be tuned without
touching the analyzers. Load overrides from JSON with AnalysisConfig.load().
"""

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path


@dataclass(frozen=True)
class AnalysisConfig:
    """Tunable constants for the lyric analysis engine."""

    # Input guard
    min_text_length: int = 10            # Trimmed chars needed for a report

    # Metric analysis
    metric_deviation_threshold: float = 2.0

    # Stress analysis
    stress_min_tokens: int = 3           # Shorter lines carry no stress pattern

    # Rhyme analysis
    rhyme_key_length: int = 3            # Suffix length of the final word

    # Repetition
    repetition_min_word_length: int = 4  # Shorter tokens are noise ("el", "de")
    repetition_min_count: int = 3

    # Poetic devices
    alliteration_run: int = 3

    # Coherence
    coherence_start: int = 100
    coherence_penalty: int = 10

    def __post_init__(self):
        if self.min_text_length < 0:
            raise ValueError(f"min_text_length must be >= 0, got {self.min_text_length}")
        if self.metric_deviation_threshold < 0:
            raise ValueError(
                f"metric_deviation_threshold must be >= 0, got {self.metric_deviation_threshold}"
            )
        if self.stress_min_tokens < 2:
            raise ValueError(f"stress_min_tokens must be >= 2, got {self.stress_min_tokens}")
        if self.rhyme_key_length < 1:
            raise ValueError(f"rhyme_key_length must be >= 1, got {self.rhyme_key_length}")
        if self.repetition_min_word_length < 1:
            raise ValueError(
                f"repetition_min_word_length must be >= 1, got {self.repetition_min_word_length}"
            )
        if self.repetition_min_count < 1:
            raise ValueError(f"repetition_min_count must be >= 1, got {self.repetition_min_count}")
        if self.alliteration_run < 2:
            raise ValueError(f"alliteration_run must be >= 2, got {self.alliteration_run}")
        if self.coherence_penalty < 0:
            raise ValueError(f"coherence_penalty must be >= 0, got {self.coherence_penalty}")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> 'AnalysisConfig':
        """Build a config from a (partial) dictionary of overrides."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")
        return cls(**d)

    @classmethod
    def load(cls, path: Path | str) -> 'AnalysisConfig':
        """Load overrides from a JSON file."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a JSON object: {path}")
        return cls.from_dict(data)


DEFAULT_CONFIG = AnalysisConfig()
