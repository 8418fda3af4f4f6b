"""
Fuzzy String Matching.

Typo tolerance for casual commands, combining three independent signals:
- Edit distance (transposed, substituted, dropped characters)
- Phonetic code (homophone spellings like "purpel")
- Prefix agreement (truncated words like "backg")
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional

import numpy as np

from stylecmd.core.contracts import FuzzyMatch


# ============================================================
# PHONETIC CODES
# ============================================================

# Vowels and h, w, y are ignored except as first letter
PHONETIC_GROUPS: Dict[str, str] = {
    'b': '1', 'f': '1', 'p': '1', 'v': '1',
    'c': '2', 'g': '2', 'j': '2', 'k': '2', 'q': '2', 's': '2', 'x': '2', 'z': '2',
    'd': '3', 't': '3',
    'l': '4',
    'm': '5', 'n': '5',
    'r': '6',
}

# QWERTY neighbours for single-substitution typo detection
KEYBOARD_ADJACENT: Dict[str, str] = {
    'a': 'qwsz', 'b': 'vghn', 'c': 'xdfv', 'd': 'serfcx', 'e': 'wsdr',
    'f': 'drtgvc', 'g': 'ftyhbv', 'h': 'gyujnb', 'i': 'ujko', 'j': 'huikmn',
    'k': 'jiolm', 'l': 'kop', 'm': 'njk', 'n': 'bhjm', 'o': 'iklp',
    'p': 'ol', 'q': 'wa', 'r': 'edft', 's': 'awedxz', 't': 'rfgy',
    'u': 'yhji', 'v': 'cfgb', 'w': 'qase', 'x': 'zsdc', 'y': 'tghu',
    'z': 'asx',
}

_FILLER_RE = re.compile(r"\b(the|a|an|my|our|this)\b")
_POSSESSIVE_RE = re.compile(r"'s\b")
_WHITESPACE_RE = re.compile(r"\s+")
_NON_LETTER_RE = re.compile(r"[^a-z]")


# ============================================================
# DISTANCE AND SIMILARITY
# ============================================================

def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character edits turning a into b.

    Comparison is case-sensitive; callers lowercase when needed.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    matrix = np.zeros((len(a) + 1, len(b) + 1), dtype=np.int32)
    matrix[:, 0] = np.arange(len(a) + 1)
    matrix[0, :] = np.arange(len(b) + 1)

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[i, j] = min(
                matrix[i - 1, j] + 1,         # deletion
                matrix[i, j - 1] + 1,         # insertion
                matrix[i - 1, j - 1] + cost,  # substitution
            )

    return int(matrix[len(a), len(b)])


def similarity(a: str, b: str) -> float:
    """Similarity ratio in [0, 1]; 1 when both strings are empty."""
    max_length = max(len(a), len(b))
    if max_length == 0:
        return 1.0
    distance = levenshtein_distance(a.lower(), b.lower())
    return 1.0 - distance / max_length


def phonetic_encode(text: str) -> str:
    """
    Soundex-like 4 character code.

    Returns:
        Code such as "B265", or "" when text has no letters
    """
    letters = _NON_LETTER_RE.sub('', text.lower())
    if not letters:
        return ''

    result = letters[0].upper()
    prev_code = PHONETIC_GROUPS.get(letters[0], '')

    for char in letters[1:]:
        code = PHONETIC_GROUPS.get(char, '')
        if code and code != prev_code:
            result += code
            prev_code = code
        elif not code:
            prev_code = ''

    return (result + '000')[:4]


def sounds_like(a: str, b: str) -> bool:
    """True if both strings have the same non-empty phonetic code."""
    code = phonetic_encode(a)
    return bool(code) and code == phonetic_encode(b)


def fuzzy_starts_with(text: str, prefix: str, max_distance: int = 1) -> bool:
    """Prefix test tolerating up to max_distance edits."""
    text_lower = text.lower()
    prefix_lower = prefix.lower()
    if text_lower.startswith(prefix_lower):
        return True
    head = text_lower[:len(prefix_lower) + max_distance]
    return levenshtein_distance(head, prefix_lower) <= max_distance


def is_keyboard_typo(original: str, typo: str) -> bool:
    """True if typo differs from original by one adjacent-key substitution."""
    original = original.lower()
    typo = typo.lower()
    if len(original) != len(typo):
        return False

    diffs = [i for i, (o, t) in enumerate(zip(original, typo)) if o != t]
    if len(diffs) != 1:
        return False

    index = diffs[0]
    return typo[index] in KEYBOARD_ADJACENT.get(original[index], '')


def normalize_for_comparison(text: str) -> str:
    """Lowercase, drop filler words and possessives, collapse whitespace."""
    result = _FILLER_RE.sub('', text.lower().strip())
    result = _WHITESPACE_RE.sub(' ', result)
    result = _POSSESSIVE_RE.sub('', result)
    return result.strip()


# ============================================================
# RANKING
# ============================================================

def find_best_match(
    text: str,
    candidates: Iterable[str],
    max_distance: int = 2,
    min_similarity: float = 0.6,
    use_phonetic: bool = True,
) -> Optional[FuzzyMatch]:
    """
    Find the single best candidate for text.

    Args:
        text: User-typed word or phrase
        candidates: Known names to match against
        max_distance: Maximum edit distance for the similarity check
        min_similarity: Score below which no match is returned
        use_phonetic: Also accept phonetic matches (score 0.85)

    Returns:
        Best FuzzyMatch, or None if nothing scores high enough
    """
    candidates = list(candidates)
    text_lower = text.lower().strip()

    for candidate in candidates:
        if candidate.lower() == text_lower:
            return FuzzyMatch(candidate=candidate, score=1.0, exact=True)

    best: Optional[FuzzyMatch] = None

    for candidate in candidates:
        candidate_lower = candidate.lower()

        if levenshtein_distance(text_lower, candidate_lower) <= max_distance:
            score = similarity(text_lower, candidate_lower)
            if best is None or score > best.score:
                best = FuzzyMatch(candidate=candidate, score=score)

        if use_phonetic and sounds_like(text_lower, candidate_lower):
            if best is None or 0.85 > best.score:
                best = FuzzyMatch(candidate=candidate, score=0.85, phonetic=True)

        if len(text_lower) >= 3 and candidate_lower.startswith(text_lower):
            if best is None or 0.9 > best.score:
                best = FuzzyMatch(candidate=candidate, score=0.9)

    if best is not None and best.score < min_similarity:
        return None

    return best


def find_close_matches(
    text: str,
    candidates: Iterable[str],
    max_results: int = 3,
    min_similarity: float = 0.5,
) -> List[FuzzyMatch]:
    """
    Rank candidates for "did you mean" suggestions.

    Phonetic matches are kept even below min_similarity and floored at 0.7.
    """
    text_lower = text.lower().strip()
    matches: List[FuzzyMatch] = []

    for candidate in candidates:
        score = similarity(text_lower, candidate.lower())
        phonetic = sounds_like(text_lower, candidate)
        if score >= min_similarity or phonetic:
            matches.append(FuzzyMatch(
                candidate=candidate,
                score=max(score, 0.7) if phonetic else score,
                exact=score == 1.0,
                phonetic=phonetic,
            ))

    matches.sort(key=lambda m: m.score, reverse=True)
    return matches[:max_results]
