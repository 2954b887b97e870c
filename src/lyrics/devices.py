#!/usr/bin/env python3
"""
Poetic Device Detector

Finds stylistic devices with lexical templates. Each device family is a
plain catalogue of patterns, so new templates are data, not code.

The 4 Device Families:
1. metaphor        - "es un/una X", "como un/una X", "parece X", "se convierte en X"
2. alliteration    - Consecutive words sharing their first letter
3. personification - Nature nouns doing human things ("el viento susurra")
4. hyperbole       - Intensifiers ("mil veces", "eternamente")

Matches are the literal substrings found; nothing is deduplicated.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import AnalysisConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class DeviceKind(str, Enum):
    """Poetic device families."""
    METAPHOR = "metaphor"
    ALLITERATION = "alliteration"
    PERSONIFICATION = "personification"
    HYPERBOLE = "hyperbole"


@dataclass(frozen=True)
class DevicePattern:
    """A single lexical template for a device."""
    kind: DeviceKind
    pattern: str


# =============================================================================
# DEVICE CATALOGUE
# =============================================================================

# X runs to the next comma, period or line break
_CLAUSE_TAIL = r"[^,.\n]+"

PERSONIFICATION_SUBJECTS = {
    "el viento": ["susurra", "canta", "llora", "grita"],
    "la luna": ["sonríe", "baila", "mira"],
    "el sol": ["sonríe", "besa", "abraza", "despierta"],
    "las estrellas": ["bailan", "cantan", "lloran", "miran"],
}

HYPERBOLE_PHRASES = ["mil veces", "infinito", "eternamente", "nunca jamás", "más que"]

DEVICE_CATALOGUE: list[DevicePattern] = [
    # Metaphor
    DevicePattern(DeviceKind.METAPHOR, r"\bes una?\s+" + _CLAUSE_TAIL),
    DevicePattern(DeviceKind.METAPHOR, r"\bcomo una?\s+" + _CLAUSE_TAIL),
    DevicePattern(DeviceKind.METAPHOR, r"\bparece\s+" + _CLAUSE_TAIL),
    DevicePattern(DeviceKind.METAPHOR, r"\bse convierte en\s+" + _CLAUSE_TAIL),
    # Personification
    *[
        DevicePattern(
            DeviceKind.PERSONIFICATION,
            r"\b" + re.escape(subject) + r"\s+(?:" + "|".join(verbs) + r")\b",
        )
        for subject, verbs in PERSONIFICATION_SUBJECTS.items()
    ],
    # Hyperbole
    *[
        DevicePattern(DeviceKind.HYPERBOLE, r"\b" + re.escape(phrase) + r"\b")
        for phrase in HYPERBOLE_PHRASES
    ],
]


@dataclass(frozen=True)
class PoeticDeviceMatch:
    kind: DeviceKind
    text: str


@dataclass(frozen=True)
class PoeticDevices:
    """Matches grouped by device family."""
    metaphors: tuple[str, ...] = ()
    alliterations: tuple[str, ...] = ()
    personifications: tuple[str, ...] = ()
    hyperboles: tuple[str, ...] = ()

    def by_kind(self, kind: DeviceKind) -> tuple[str, ...]:
        return {
            DeviceKind.METAPHOR: self.metaphors,
            DeviceKind.ALLITERATION: self.alliterations,
            DeviceKind.PERSONIFICATION: self.personifications,
            DeviceKind.HYPERBOLE: self.hyperboles,
        }[kind]

    @property
    def total(self) -> int:
        return sum(len(self.by_kind(kind)) for kind in DeviceKind)

    def to_dict(self) -> dict:
        return {kind.value: list(self.by_kind(kind)) for kind in DeviceKind}


class PoeticDeviceDetector:
    """
    Applies the device catalogue to raw lyrics.

    Usage:
        devices = PoeticDeviceDetector().analyze(text, tokens)
        print(devices.personifications)
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        catalogue: Optional[list[DevicePattern]] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.catalogue = DEVICE_CATALOGUE if catalogue is None else catalogue

        # Compile patterns once
        self._compiled = [
            (entry.kind, re.compile(entry.pattern, re.IGNORECASE))
            for entry in self.catalogue
        ]

    def find_patterns(self, text: str) -> list[PoeticDeviceMatch]:
        """Run every catalogue template over the text, in catalogue order."""
        matches = []
        for kind, pattern in self._compiled:
            for match in pattern.finditer(text):
                matches.append(PoeticDeviceMatch(kind=kind, text=match.group()))
        return matches

    def find_alliterations(self, tokens: list[str]) -> list[str]:
        """
        Runs of consecutive tokens starting with the same letter.

        The window slides one token at a time, so overlapping runs are
        each reported.
        """
        run = self.config.alliteration_run
        found = []

        for i in range(len(tokens) - run + 1):
            window = tokens[i:i + run]
            first = window[0][0]
            if first.isalpha() and all(t[0] == first for t in window[1:]):
                found.append(" ".join(window))

        return found

    def detect(self, text: str, tokens: list[str]) -> list[PoeticDeviceMatch]:
        """All device matches as a flat list."""
        matches = self.find_patterns(text)
        matches.extend(
            PoeticDeviceMatch(kind=DeviceKind.ALLITERATION, text=span)
            for span in self.find_alliterations(tokens)
        )
        return matches

    def analyze(self, text: str, tokens: list[str]) -> PoeticDevices:
        """Device matches grouped by family."""
        grouped: dict[DeviceKind, list[str]] = {kind: [] for kind in DeviceKind}
        for match in self.detect(text, tokens):
            grouped[match.kind].append(match.text)

        devices = PoeticDevices(
            metaphors=tuple(grouped[DeviceKind.METAPHOR]),
            alliterations=tuple(grouped[DeviceKind.ALLITERATION]),
            personifications=tuple(grouped[DeviceKind.PERSONIFICATION]),
            hyperboles=tuple(grouped[DeviceKind.HYPERBOLE]),
        )

        logger.debug(f"Poetic devices: {devices.total} matches")
        return devices
