"""Lyric quality analysis: meter, rhyme, style, theme and coherence."""

from .config import AnalysisConfig, DEFAULT_CONFIG
from .normalizer import TextNormalizer, NormalizedText
from .syllables import SyllableEstimator
from .metrics import MetricAnalyzer, MetricIssue, MetricResult
from .stress import StressClass, StressIrregularity, StressIrregularityDetector, classify_stress
from .rhyme import RhymeAnalyzer, RhymeEntry
from .repetition import RepetitionDetector, RepeatedWord
from .devices import DeviceKind, PoeticDeviceDetector, PoeticDeviceMatch, PoeticDevices
from .themes import ThemeClassifier, ThemeScore, UNKNOWN_THEME
from .coherence import CoherenceScorer
from .structure import SongStructure
from .analyzer import AnalysisReport, LyricAnalyzer, analyze_lyrics

__all__ = [
    "AnalysisConfig",
    "DEFAULT_CONFIG",
    "TextNormalizer",
    "NormalizedText",
    "SyllableEstimator",
    "MetricAnalyzer",
    "MetricIssue",
    "MetricResult",
    "StressClass",
    "StressIrregularity",
    "StressIrregularityDetector",
    "classify_stress",
    "RhymeAnalyzer",
    "RhymeEntry",
    "RepetitionDetector",
    "RepeatedWord",
    "DeviceKind",
    "PoeticDeviceDetector",
    "PoeticDeviceMatch",
    "PoeticDevices",
    "ThemeClassifier",
    "ThemeScore",
    "UNKNOWN_THEME",
    "CoherenceScorer",
    "SongStructure",
    "AnalysisReport",
    "LyricAnalyzer",
    "analyze_lyrics",
]
