"""Tests for edit distance, phonetic codes and fuzzy ranking."""

import pytest

from stylecmd.intent.fuzzy_matcher import (
    find_best_match,
    find_close_matches,
    fuzzy_starts_with,
    is_keyboard_typo,
    levenshtein_distance,
    normalize_for_comparison,
    phonetic_encode,
    similarity,
    sounds_like,
)


class TestLevenshteinDistance:
    """Tests for levenshtein_distance."""

    @pytest.mark.parametrize("text", ["", "a", "background", "make it pop"])
    def test_identity(self, text):
        assert levenshtein_distance(text, text) == 0

    @pytest.mark.parametrize("a,b", [
        ("kitten", "sitting"),
        ("backgroud", "background"),
        ("", "blue"),
        ("purpel", "purple"),
    ])
    def test_symmetric(self, a, b):
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    def test_kitten_sitting(self):
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_empty_string_is_length(self):
        assert levenshtein_distance("", "blue") == 4
        assert levenshtein_distance("red", "") == 3

    def test_single_insertion(self):
        assert levenshtein_distance("backgroud", "background") == 1


class TestSimilarity:
    """Tests for similarity."""

    def test_both_empty(self):
        assert similarity("", "") == 1.0

    def test_case_insensitive(self):
        assert similarity("Blue", "BLUE") == 1.0

    def test_ratio(self):
        assert similarity("bule", "blue") == pytest.approx(0.5)


class TestPhonetic:
    """Tests for phonetic_encode and sounds_like."""

    def test_classic_codes(self):
        assert phonetic_encode("Robert") == "R163"
        assert phonetic_encode("Rupert") == "R163"

    def test_repeats_collapse(self):
        assert phonetic_encode("Tymczak") == "T522"

    def test_padding(self):
        assert phonetic_encode("red") == "R300"

    def test_no_letters(self):
        assert phonetic_encode("") == ""
        assert phonetic_encode("123 %") == ""

    def test_sounds_like(self):
        assert sounds_like("backgorund", "background")
        assert not sounds_like("blue", "green")

    def test_empty_never_sounds_like(self):
        assert not sounds_like("", "")


class TestFindBestMatch:
    """Tests for find_best_match."""

    def test_exact_match_wins(self):
        match = find_best_match("BLUE", ["bleu", "Blue", "blues"])
        assert match.candidate == "Blue"
        assert match.exact is True
        assert match.score == 1.0

    def test_exact_match_regardless_of_others(self):
        candidates = ["backgrounds", "background", "backgroud"]
        match = find_best_match("backgroud", candidates)
        assert match.candidate == "backgroud"
        assert match.exact

    def test_transposition(self):
        match = find_best_match("backgorund", ["background", "border"])
        assert match.candidate == "background"
        assert match.score >= 0.8
        assert not match.exact

    def test_prefix(self):
        match = find_best_match("backg", ["background", "border"])
        assert match.candidate == "background"
        assert match.score == pytest.approx(0.9)

    def test_below_threshold(self):
        assert find_best_match("xyz", ["background"]) is None

    def test_no_candidates(self):
        assert find_best_match("blue", []) is None

    def test_phonetic_disabled(self):
        match = find_best_match("fotograf", ["photograph"], use_phonetic=False)
        assert match is None


class TestFindCloseMatches:
    """Tests for find_close_matches."""

    def test_sorted_and_truncated(self):
        matches = find_close_matches("bakground", ["background", "backdrop", "border", "bg"], max_results=2)
        assert len(matches) <= 2
        assert matches[0].candidate == "background"
        assert all(a.score >= b.score for a, b in zip(matches, matches[1:]))

    def test_nothing_close(self):
        assert find_close_matches("qqqq", ["background", "primary"]) == []


class TestHelpers:
    """Tests for the smaller matching helpers."""

    def test_fuzzy_starts_with(self):
        assert fuzzy_starts_with("background", "back")
        assert fuzzy_starts_with("background", "bakg")
        assert not fuzzy_starts_with("primary", "back")

    def test_keyboard_typo(self):
        assert is_keyboard_typo("blue", "bkue")
        assert not is_keyboard_typo("blue", "bxue")
        assert not is_keyboard_typo("blue", "blu")

    def test_normalize_for_comparison(self):
        assert normalize_for_comparison("The Card's   color") == "card color"
        assert normalize_for_comparison("  my  Background ") == "background"
