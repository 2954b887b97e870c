"""
Songwriter Assistant Requests

Turns lyric analysis reports into generation and improvement requests
for the lyric backend.
"""

from .schema import Genre, Mood, RequestMode, LyricHints, LyricRequest
from .prompts import (
    DEVICE_THRESHOLDS,
    requested_devices,
    build_generation_request,
    build_improvement_request,
)

__all__ = [
    'Genre',
    'Mood',
    'RequestMode',
    'LyricHints',
    'LyricRequest',
    'DEVICE_THRESHOLDS',
    'requested_devices',
    'build_generation_request',
    'build_improvement_request',
]
