"""
Songwriter Prompts

Builds the requests handed to the lyric generation backend.

Complexity gates the poetic devices requested: a device is asked for
only when the complexity level is above its threshold, so simple lyrics
get plain language and complex ones get the full toolbox.

Usage:
    from songwriter.prompts import build_improvement_request

    report = analyze_lyrics(draft)
    request = build_improvement_request(draft, report, "pop", "happy", 70)
    payload = request.to_json()
"""

from typing import Optional

from lyrics.analyzer import AnalysisReport
from lyrics.devices import DeviceKind
from lyrics.themes import UNKNOWN_THEME

from .schema import (
    Genre,
    LyricHints,
    LyricRequest,
    Mood,
    RequestMode,
    parse_genre,
    parse_mood,
)


# Minimum complexity (exclusive) at which each device is requested
DEVICE_THRESHOLDS = {
    DeviceKind.METAPHOR: 20,
    DeviceKind.ALLITERATION: 40,
    DeviceKind.PERSONIFICATION: 60,
    DeviceKind.HYPERBOLE: 80,
}

DEVICE_INSTRUCTIONS = {
    DeviceKind.METAPHOR: "Use metaphors (\"es un...\", \"como una...\").",
    DeviceKind.ALLITERATION: "Add alliteration: runs of words starting with the same sound.",
    DeviceKind.PERSONIFICATION: "Personify nature: let the wind, moon, sun or stars act.",
    DeviceKind.HYPERBOLE: "Allow hyperbole for emotional peaks.",
}

DEFAULT_THEME = "love"


def requested_devices(complexity: int) -> list[DeviceKind]:
    """Devices whose threshold the complexity exceeds, in declaration order."""
    return [kind for kind, threshold in DEVICE_THRESHOLDS.items() if complexity > threshold]


def _device_lines(devices: list[DeviceKind]) -> list[str]:
    if not devices:
        return ["Keep the language plain and direct."]
    return [DEVICE_INSTRUCTIONS[kind] for kind in devices]


def _hint_lines(hints: LyricHints) -> list[str]:
    """Turn analysis hints into rewrite instructions."""
    lines = []
    if hints.uneven_lines:
        numbers = ", ".join(str(n) for n in hints.uneven_lines)
        lines.append(f"Even out the syllable count of lines {numbers}.")
    if hints.repeated_words:
        lines.append(f"Vary the repeated words: {', '.join(hints.repeated_words)}.")
    if hints.stress_irregularity_count:
        lines.append(f"Smooth {hints.stress_irregularity_count} stress shifts so the lines sing naturally.")
    if hints.coherence_score < 100:
        lines.append(f"Keep the theme consistent (coherence {hints.coherence_score}/100).")
    if hints.rhyme_pattern and len(set(hints.rhyme_pattern)) == len(hints.rhyme_pattern):
        lines.append("Introduce end rhymes; no two lines currently rhyme.")
    return lines


def render_prompt(request: LyricRequest) -> str:
    """Format the request as prompt text for the backend."""
    if request.mode == RequestMode.GENERATE:
        header = (
            f"Write song lyrics about {request.theme} for a {request.genre.value} track "
            f"with a {request.mood.value} mood."
        )
    else:
        header = (
            f"Improve these {request.genre.value} lyrics, keeping a {request.mood.value} mood "
            f"and the theme of {request.theme}."
        )

    parts = [header, f"Complexity: {request.complexity}/100."]
    parts.extend(_device_lines(request.devices))
    if request.hints:
        parts.extend(_hint_lines(request.hints))

    prompt = "\n".join(parts)
    if request.lyrics:
        prompt = f"{prompt}\n\n{request.lyrics.strip()}"
    return prompt


def build_generation_request(
    theme: str,
    genre: Genre | str,
    mood: Mood | str,
    complexity: int,
) -> LyricRequest:
    """Request for fresh lyrics on a theme."""
    request = LyricRequest(
        mode=RequestMode.GENERATE,
        genre=parse_genre(genre),
        mood=parse_mood(mood),
        complexity=complexity,
        theme=theme or DEFAULT_THEME,
        devices=requested_devices(complexity),
    )
    request.prompt = render_prompt(request)
    return request


def build_improvement_request(
    lyrics: str,
    report: AnalysisReport,
    genre: Genre | str,
    mood: Mood | str,
    complexity: int,
    theme: Optional[str] = None,
) -> LyricRequest:
    """
    Request to rewrite a draft, steered by its analysis report.

    Args:
        lyrics: The draft
        report: Its AnalysisReport
        genre: Target genre
        mood: Target mood
        complexity: 0-100, gates the requested devices
        theme: Override; defaults to the report's dominant theme

    Returns:
        LyricRequest with the prompt already rendered
    """
    hints = LyricHints.from_report(report)
    if theme is None:
        theme = hints.dominant_theme if hints.dominant_theme != UNKNOWN_THEME else DEFAULT_THEME

    request = LyricRequest(
        mode=RequestMode.IMPROVE,
        genre=parse_genre(genre),
        mood=parse_mood(mood),
        complexity=complexity,
        theme=theme,
        devices=requested_devices(complexity),
        lyrics=lyrics,
        hints=hints,
    )
    request.prompt = render_prompt(request)
    return request
