"""
End-to-end tests for the lyric analysis report.
"""

import json

import pytest

from lyrics import AnalysisConfig, LyricAnalyzer, analyze_lyrics
from lyrics.analyzer import AnalysisReport, visualize_syllables
from lyrics.stress import StressClass


class TestLyricAnalyzer:
    """Test the composed pipeline."""

    def test_sample_report(self, sample_lyrics):
        """Love lyric with two personifications and no rhymes."""
        report = analyze_lyrics(sample_lyrics)

        assert report.line_count == 4
        assert report.word_count == 19
        assert report.average_words_per_line == pytest.approx(4.75)
        assert report.syllable_pattern == (7, 10, 9, 9)
        assert report.rhyme_pattern == "ABCD"
        assert report.metric_issues == ()
        assert report.repeated_words == ()

        assert report.dominant_theme == "love"
        assert report.theme.scores["love"] == 2
        assert report.theme.scores["nature"] == 2
        assert report.coherence_score == 90

        assert report.devices.personifications == ("El viento susurra", "La luna sonríe")
        assert report.devices.metaphors == ("es un viaje",)
        assert report.devices.alliterations == ()
        assert report.devices.hyperboles == ()

        assert len(report.stress_irregularities) == 7
        assert report.stress_irregularities[0].previous_stress == StressClass.OXYTONE

        assert report.structure.verses == 0
        assert report.structure.choruses == 0

    def test_rhyme_entries_carry_words(self, rhyming_lyrics):
        report = analyze_lyrics(rhyming_lyrics)
        assert report.rhyme_pattern == "ABAB"
        assert [e.word for e in report.rhyme_scheme] == ["mar", "ciudad", "amar", "verdad"]

    def test_repeated_words(self):
        report = analyze_lyrics("La noche cae\nEn la noche fría\nToda la noche")
        assert [(r.word, r.count) for r in report.repeated_words] == [("noche", 3)]
        assert report.dominant_theme == "unknown"
        assert report.coherence_score == 100

    def test_insufficient_input(self):
        """Short text is not an error, just no report."""
        assert analyze_lyrics("") is None
        assert analyze_lyrics("   hola    \n ") is None

    def test_idempotent(self, sample_lyrics):
        """Same lyric, same report."""
        analyzer = LyricAnalyzer()
        first = analyzer.analyze(sample_lyrics)
        second = analyzer.analyze(sample_lyrics)

        assert first == second
        assert first.to_json() == second.to_json()
        assert analyze_lyrics(sample_lyrics).to_json() == first.to_json()

    def test_config_thresholds_applied(self, sample_lyrics):
        config = AnalysisConfig(metric_deviation_threshold=0.5)
        report = LyricAnalyzer(config).analyze(sample_lyrics)

        assert [i.line_index for i in report.metric_issues] == [0, 1]
        assert all(i.expected == 9 for i in report.metric_issues)

    def test_report_is_frozen(self, sample_lyrics):
        report = analyze_lyrics(sample_lyrics)
        with pytest.raises(AttributeError):
            report.coherence_score = 0

    def test_scores_cannot_be_rewritten(self, sample_lyrics):
        """The theme map of a finished report stays as produced."""
        report = analyze_lyrics(sample_lyrics)
        before = report.to_json()

        with pytest.raises(TypeError):
            report.theme.scores["love"] = 999
        assert report.to_json() == before

    def test_report_is_hashable(self, sample_lyrics):
        first = analyze_lyrics(sample_lyrics)
        second = analyze_lyrics(sample_lyrics)
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_arbitrary_unicode(self):
        """Emoji and symbols never break the pipeline."""
        report = analyze_lyrics("🔥🔥🔥 ♪♫ ∞\n日本語の歌詞\n---")
        assert report is not None
        assert report.line_count == 3
        assert all(count >= 1 for count in report.syllable_pattern)


class TestReportSerialization:
    """Test JSON output."""

    def test_json_uses_plain_values(self, sample_lyrics):
        data = json.loads(analyze_lyrics(sample_lyrics).to_json())

        assert data["line_count"] == 4
        assert data["rhyme_pattern"] == "ABCD"
        assert data["theme"]["dominant"] == "love"
        assert data["stress_irregularities"][0]["previous_stress"] == "oxytone"
        assert data["devices"]["personification"] == ["El viento susurra", "La luna sonríe"]
        assert data["rhyme_scheme"][0] == {
            "line_index": 0, "word": "viaje", "key": "aje", "label": "A"
        }

    def test_json_keeps_accents(self, sample_lyrics):
        assert "sonríe" in analyze_lyrics(sample_lyrics).to_json()

    def test_empty_report_defaults(self):
        data = AnalysisReport().to_dict()
        assert data["theme"] == {"dominant": "unknown", "scores": {}}
        assert data["coherence_score"] == 100


class TestVisualization:
    """Test the syllable bar chart."""

    def test_one_row_per_line(self, sample_lyrics):
        chart = visualize_syllables(analyze_lyrics(sample_lyrics))
        rows = chart.splitlines()

        assert len(rows) == 4
        assert rows[0].startswith("  1  A [ 7]")
        assert rows[1].endswith("█" * 40)

    def test_flags_metric_issues(self):
        report = analyze_lyrics("mi casa es\nmi casa es\nmi casa es\nmi casa es\nla casa de mi madre querida")
        rows = visualize_syllables(report).splitlines()
        assert rows[4].endswith(" !")
        assert not rows[0].endswith(" !")

    def test_empty_report(self):
        assert visualize_syllables(AnalysisReport()) == "No lines analyzed"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
