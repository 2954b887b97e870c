"""
Syllable estimation.

Counts vowel-group starts: each transition from a non-vowel to a vowel
opens a new syllabic nucleus, so diphthongs ("ie", "ua") count once.
This approximates syllable-timed languages such as Spanish; it is not a
phonetic syllabifier.
"""

VOWELS = frozenset("aeiouáéíóúü")


def count_vowel_groups(text: str) -> int:
    """Number of maximal vowel runs in text (case-insensitive)."""
    count = 0
    prev_is_vowel = False

    for char in text.lower():
        is_vowel = char in VOWELS
        if is_vowel and not prev_is_vowel:
            count += 1
        prev_is_vowel = is_vowel

    return count


class SyllableEstimator:
    """Estimates syllables per line with the vowel-group heuristic."""

    def estimate(self, line: str) -> int:
        """
        Estimate the syllable count of a line.

        Returns:
            0 for an empty line, otherwise at least 1
        """
        if not line.strip():
            return 0
        return max(1, count_vowel_groups(line))

    def estimate_all(self, lines: list[str]) -> list[int]:
        return [self.estimate(line) for line in lines]
