"""
Pytest configuration for lyric analysis tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def sample_lyrics():
    """Four lines, no shared rhymes, love and nature themes."""
    return (
        "El amor es un viaje\n"
        "Mi corazón canta de alegría\n"
        "El viento susurra secretos\n"
        "La luna sonríe esta noche"
    )


@pytest.fixture
def rhyming_lyrics():
    """ABAB quatrain."""
    return """
    Camino solo junto al mar
    bajo la luz de la ciudad
    hasta volverte a amar
    buscando toda la verdad
    """


@pytest.fixture
def alternating_lyrics():
    """Every line switches between love and sadness."""
    return "\n".join(
        "amor y amor" if i % 2 == 0 else "lágrima triste"
        for i in range(14)
    )


@pytest.fixture
def config_file(tmp_path):
    """A JSON config overriding two thresholds."""
    path = tmp_path / "thresholds.json"
    path.write_text('{"metric_deviation_threshold": 1.0, "coherence_penalty": 5}', encoding="utf-8")
    return path
