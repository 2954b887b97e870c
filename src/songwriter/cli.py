#!/usr/bin/env python3
"""
Lyric Analysis CLI

Command-line interface for analyzing draft lyrics and building requests
for the lyric generation backend.

Usage:
    # Analyze a lyric file
    python -m songwriter.cli analyze --file draft.txt

    # Full report as JSON, with custom thresholds
    python -m songwriter.cli analyze --file draft.txt --json --config thresholds.json

    # Improvement request steered by the analysis
    python -m songwriter.cli hints --file draft.txt --genre pop --mood happy --complexity 70

    # Generation request from scratch
    python -m songwriter.cli generate --theme nostalgia --genre lofi --mood chill --complexity 40
"""

import argparse
import logging
import sys
from pathlib import Path

from lyrics.analyzer import AnalysisReport, LyricAnalyzer, visualize_syllables
from lyrics.config import AnalysisConfig
from lyrics.devices import DeviceKind
from songwriter.prompts import build_generation_request, build_improvement_request
from songwriter.schema import Genre, Mood

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def read_lyrics(args) -> str:
    """Lyrics from --file or --text."""
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return args.text


def load_config(args) -> AnalysisConfig:
    if getattr(args, "config", None):
        return AnalysisConfig.load(args.config)
    return AnalysisConfig()


def print_summary(report: AnalysisReport):
    """Human-readable report."""
    print("=" * 60)
    print("LYRIC ANALYSIS")
    print("=" * 60)
    print(f"\nLines: {report.line_count}")
    print(f"Words: {report.word_count} ({report.average_words_per_line:.1f} per line)")
    print(f"Syllables per line: {list(report.syllable_pattern)}")
    print(f"Rhyme scheme: {report.rhyme_pattern}")
    print(f"\nDominant theme: {report.dominant_theme}")
    print(f"Theme scores: {dict(report.theme.scores)}")
    print(f"Coherence: {report.coherence_score}/100")

    if report.metric_issues:
        print("\nMetric issues:")
        for issue in report.metric_issues:
            print(f"  Line {issue.line_index + 1}: {issue.actual} syllables (expected ~{issue.expected})")

    if report.repeated_words:
        print("\nRepeated words:")
        for repeated in report.repeated_words:
            print(f"  {repeated.word}: {repeated.count}x")

    if report.stress_irregularities:
        print(f"\nStress irregularities: {len(report.stress_irregularities)}")
        for irregularity in report.stress_irregularities:
            print(f"  {irregularity}")

    print("\nPoetic devices:")
    for kind in DeviceKind:
        matches = report.devices.by_kind(kind)
        print(f"  {kind.value}: {len(matches)}")
        for match in matches:
            print(f"    - {match}")

    structure = report.structure
    print(f"\nStructure: {structure.verses} verse, {structure.choruses} chorus, {structure.bridges} bridge")


def cmd_analyze(args):
    """Analyze lyrics and print the report."""

    analyzer = LyricAnalyzer(load_config(args))
    report = analyzer.analyze(read_lyrics(args))

    if report is None:
        logger.error("Insufficient data: lyrics too short to analyze")
        return 1

    if args.json:
        print(report.to_json())
    else:
        print_summary(report)
        if args.visualize:
            print("\nSyllable rhythm:")
            print(visualize_syllables(report))

    return 0


def cmd_hints(args):
    """Build an improvement request from the analysis of a draft."""

    lyrics = read_lyrics(args)
    report = LyricAnalyzer(load_config(args)).analyze(lyrics)

    if report is None:
        logger.error("Insufficient data: lyrics too short to analyze")
        return 1

    request = build_improvement_request(
        lyrics,
        report,
        genre=args.genre,
        mood=args.mood,
        complexity=args.complexity,
        theme=args.theme,
    )
    print(request.to_json())
    return 0


def cmd_generate(args):
    """Build a generation request."""

    request = build_generation_request(
        theme=args.theme,
        genre=args.genre,
        mood=args.mood,
        complexity=args.complexity,
    )
    print(request.to_json())
    return 0


def add_input_arguments(parser: argparse.ArgumentParser):
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", type=str, help="Lyrics to analyze")
    source.add_argument("--file", type=Path, help="File with lyrics to analyze")
    parser.add_argument("-c", "--config", type=Path, help="JSON file with threshold overrides")


def add_style_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--genre", type=str, default=Genre.POP.value,
                        help=f"One of: {[g.value for g in Genre]}")
    parser.add_argument("--mood", type=str, default=Mood.HAPPY.value,
                        help=f"One of: {[m.value for m in Mood]}")
    parser.add_argument("--complexity", type=int, default=50, help="0-100, gates poetic devices")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Lyric quality analysis and songwriting requests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Analyze lyrics")
    add_input_arguments(analyze_parser)
    analyze_parser.add_argument("--json", action="store_true", help="Print the full report as JSON")
    analyze_parser.add_argument("--visualize", action="store_true", help="Show syllable rhythm")

    # Hints command
    hints_parser = subparsers.add_parser("hints", help="Build an improvement request")
    add_input_arguments(hints_parser)
    add_style_arguments(hints_parser)
    hints_parser.add_argument("--theme", type=str, help="Override the detected theme")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Build a generation request")
    gen_parser.add_argument("--theme", type=str, required=True, help="Song theme")
    add_style_arguments(gen_parser)

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "analyze": cmd_analyze,
        "hints": cmd_hints,
        "generate": cmd_generate,
    }

    try:
        return commands[args.command](args)
    except ValueError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
