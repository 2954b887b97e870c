"""
Tests for songwriter requests and the CLI.
"""

import json

import pytest

from lyrics import analyze_lyrics
from lyrics.devices import DeviceKind
from songwriter.cli import main
from songwriter.prompts import (
    build_generation_request,
    build_improvement_request,
    requested_devices,
)
from songwriter.schema import Genre, LyricHints, LyricRequest, Mood, RequestMode


class TestDeviceGating:
    """Test complexity thresholds."""

    def test_low_complexity_requests_nothing(self):
        assert requested_devices(0) == []
        assert requested_devices(20) == []

    def test_thresholds_are_exclusive(self):
        assert requested_devices(21) == [DeviceKind.METAPHOR]
        assert requested_devices(60) == [DeviceKind.METAPHOR, DeviceKind.ALLITERATION]

    def test_full_complexity_requests_everything(self):
        assert requested_devices(100) == list(DeviceKind)


class TestRequests:
    """Test request construction."""

    def test_generation_request(self):
        request = build_generation_request("nostalgia", "lofi", "chill", 50)

        assert request.mode == RequestMode.GENERATE
        assert request.genre == Genre.LOFI
        assert request.mood == Mood.CHILL
        assert request.devices == [DeviceKind.METAPHOR, DeviceKind.ALLITERATION]
        assert request.lyrics is None
        assert "nostalgia" in request.prompt
        assert "lofi" in request.prompt

    def test_plain_language_at_zero(self):
        request = build_generation_request("amor", Genre.BALLAD, Mood.MELANCHOLIC, 0)
        assert request.devices == []
        assert "plain and direct" in request.prompt

    def test_complexity_out_of_range(self):
        with pytest.raises(ValueError, match="complexity"):
            build_generation_request("amor", "pop", "happy", 101)
        with pytest.raises(ValueError):
            LyricRequest(RequestMode.GENERATE, Genre.POP, Mood.HAPPY, -1, "amor")

    def test_unknown_genre_and_mood(self):
        with pytest.raises(ValueError, match="Unknown genre"):
            build_generation_request("amor", "polka", "happy", 50)
        with pytest.raises(ValueError, match="Unknown mood"):
            build_generation_request("amor", "pop", "sleepy", 50)

    def test_improvement_request_uses_report(self, sample_lyrics):
        report = analyze_lyrics(sample_lyrics)
        request = build_improvement_request(sample_lyrics, report, "pop", "happy", 70)

        assert request.mode == RequestMode.IMPROVE
        assert request.theme == "love"
        assert request.devices == [
            DeviceKind.METAPHOR, DeviceKind.ALLITERATION, DeviceKind.PERSONIFICATION
        ]
        assert request.hints.coherence_score == 90
        assert request.hints.stress_irregularity_count == 7
        assert "coherence 90/100" in request.prompt
        assert "Introduce end rhymes" in request.prompt
        assert request.prompt.endswith(sample_lyrics)

    def test_improvement_hints_for_uneven_lines(self):
        draft = "mi casa es\nmi casa es\nmi casa es\nmi casa es\nla casa de mi madre querida"
        hints = LyricHints.from_report(analyze_lyrics(draft))

        assert hints.uneven_lines == [5]
        assert hints.dominant_theme == "unknown"

        request = build_improvement_request(draft, analyze_lyrics(draft), "rock", "dark", 10)
        assert request.theme == "love"
        assert "lines 5" in request.prompt

    def test_theme_override(self, sample_lyrics):
        report = analyze_lyrics(sample_lyrics)
        request = build_improvement_request(sample_lyrics, report, "pop", "happy", 50, theme="freedom")
        assert request.theme == "freedom"

    def test_to_json(self, sample_lyrics):
        report = analyze_lyrics(sample_lyrics)
        data = json.loads(build_improvement_request(sample_lyrics, report, "edm", "epic", 90).to_json())

        assert data["mode"] == "improve"
        assert data["genre"] == "edm"
        assert data["devices"] == ["metaphor", "alliteration", "personification", "hyperbole"]
        assert data["hints"]["rhyme_pattern"] == "ABCD"


class TestCLI:
    """Test the command line."""

    def test_analyze_json(self, sample_lyrics, capsys):
        assert main(["analyze", "--text", sample_lyrics, "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["line_count"] == 4
        assert data["coherence_score"] == 90

    def test_analyze_summary_from_file(self, tmp_path, sample_lyrics, capsys):
        path = tmp_path / "draft.txt"
        path.write_text(sample_lyrics, encoding="utf-8")

        assert main(["analyze", "--file", str(path), "--visualize"]) == 0
        out = capsys.readouterr().out
        assert "Dominant theme: love" in out
        assert "Rhyme scheme: ABCD" in out
        assert "Syllable rhythm:" in out

    def test_analyze_with_config(self, sample_lyrics, config_file, capsys):
        assert main(["analyze", "--text", sample_lyrics, "--json", "--config", str(config_file)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [i["line_index"] for i in data["metric_issues"]] == [0, 1]
        assert data["coherence_score"] == 95

    def test_insufficient_data(self):
        assert main(["analyze", "--text", "hola"]) == 1

    def test_hints(self, sample_lyrics, capsys):
        assert main(["hints", "--text", sample_lyrics, "--genre", "pop", "--complexity", "30"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["mode"] == "improve"
        assert data["devices"] == ["metaphor"]

    def test_generate(self, capsys):
        assert main(["generate", "--theme", "libertad", "--genre", "rock", "--mood", "epic"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["theme"] == "libertad"
        assert data["complexity"] == 50

    def test_bad_genre_exits_nonzero(self):
        assert main(["generate", "--theme", "amor", "--genre", "polka"]) == 1

    def test_no_command(self, capsys):
        assert main([]) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
