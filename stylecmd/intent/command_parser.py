"""
Style Command Parser.

Classifies raw command text into a ParsedIntent using an ordered list of
grammar rules. The first rule whose pattern matches (and whose extractor
clears the confidence floor) wins, so rules are listed from most to least
specific.

Command families:
- undo / redo: "undo", "oops", "do it again"
- mode: "dark mode", "switch to light", "toggle theme"
- preset: "make it pop", "look professional", "tone it down"
- style: "make the background blue", "set corners to pill", "more rounded"
- visibility: "hide the sidebar", "I need a chart"
- layout: "two columns", "sidebar on the left", "grid layout"
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Pattern, Tuple

from loguru import logger

from stylecmd.core.contracts import (
    CONTEXTUAL_TARGET,
    Delta,
    IntentType,
    ParsedIntent,
    Scope,
)
from stylecmd.intent import synonyms


# Extractions at or below this confidence are skipped
CONFIDENCE_FLOOR = 0.3

# Words that refer to whatever is currently selected
CONTEXTUAL_WORDS = frozenset({'it', 'this', 'that', 'these', 'them'})

# Comparative stems ("round" from "rounder") -> (relative value word, direction)
COMPARATIVES: Dict[str, Tuple[str, Delta]] = {
    'round': ('rounded', Delta.MORE),
    'bigg': ('large', Delta.MORE),
    'larg': ('large', Delta.MORE),
    'small': ('large', Delta.LESS),
    'bold': ('bold', Delta.MORE),
    'light': ('light', Delta.MORE),
    'dark': ('dark', Delta.MORE),
    'bright': ('bright', Delta.MORE),
    'soft': ('soft', Delta.MORE),
    'sharp': ('sharp', Delta.MORE),
    'tight': ('spacing', Delta.LESS),
    'loos': ('spacing', Delta.MORE),
}

_NUMBER_WORDS = {'one': '1', 'single': '1', 'two': '2', 'three': '3', 'four': '4'}

_BASIC_COLORS = (
    r'red|orange|yellow|green|blue|purple|pink|teal|cyan|indigo|violet|gray|grey'
)
_BARE_COLORS = _BASIC_COLORS + r'|white|black|navy|emerald|rose|amber|lime|sky|slate'

_TO_SPLIT_RE = re.compile(r'^(.+?)\s+to\s+(?:be\s+)?(.+)$', re.I)


Fields = Dict[str, object]
Extractor = Callable[[re.Match], Fields]


@dataclass
class CommandRule:
    """One grammar rule: compiled pattern, intent type and field extractor."""
    pattern: Pattern
    intent_type: IntentType
    extractor: Extractor


# ============================================================
# NORMALIZATION HELPERS
# ============================================================

def normalize_target(target: str) -> str:
    """Lowercase, trim and drop a leading "the"."""
    return re.sub(r'^the\s+', '', target.lower().strip())


def normalize_value(value: str) -> str:
    return value.lower().strip()


def comparative(word: str) -> Optional[Tuple[str, Delta]]:
    """
    Map a comparative like "rounder" to ("rounded", Delta.MORE).

    Returns:
        (value, delta) or None for unrecognized stems
    """
    word = word.lower().strip()
    if not word.endswith('er') or len(word) <= 3:
        return None
    return COMPARATIVES.get(word[:-2])


def _is_value_phrase(phrase: str) -> bool:
    """True if phrase is a value the executor knows how to apply."""
    key = phrase.lower().strip()
    return (
        key in synonyms.COLOR_SYNONYMS
        or key in synonyms.RADIUS_SYNONYMS
        or key in synonyms.SPACING_SYNONYMS
        or key in synonyms.FONT_WEIGHT_SYNONYMS
        or comparative(key) is not None
    )


def _style_fields(target: str, value: str, delta: Optional[Delta], confidence: float) -> Fields:
    """Build style fields, turning contextual targets and comparatives into intent fields."""
    target = normalize_target(target)
    value = normalize_value(value)

    if delta is None:
        relative = comparative(value)
        if relative is not None:
            value, delta = relative

    fields: Fields = {'target': target, 'value': value, 'confidence': confidence}
    if delta is not None:
        fields['delta'] = delta
    if target in CONTEXTUAL_WORDS:
        fields['target'] = CONTEXTUAL_TARGET
        fields['scope'] = Scope.SELECTED
    return fields


def _split_target_value(rest: str) -> Tuple[str, str, Optional[Delta]]:
    """
    Split "primary color green" into target and value.

    An explicit "to"/"to be" wins. Otherwise the shortest target whose
    remainder is a known value phrase is chosen, falling back to a
    one-word target. A leading "more"/"less" on the value becomes the delta.
    """
    match = _TO_SPLIT_RE.match(rest)
    if match:
        return match.group(1), match.group(2), None

    words = rest.split()

    def split_at(k: int) -> Tuple[str, str, Optional[Delta]]:
        target_words, value_words = words[:k], words[k:]
        delta = None
        if len(value_words) > 1 and value_words[0].lower() in ('more', 'less'):
            delta = Delta(value_words[0].lower())
            value_words = value_words[1:]
        return ' '.join(target_words), ' '.join(value_words), delta

    for k in range(1, len(words)):
        target, value, delta = split_at(k)
        if _is_value_phrase(value):
            return target, value, delta

    return split_at(1)


# ============================================================
# EXTRACTORS
# ============================================================

def _fixed(confidence: float, **fields) -> Extractor:
    def extract(match: re.Match) -> Fields:
        return {'confidence': confidence, **fields}
    return extract


def _mode_value(match: re.Match) -> Fields:
    return {'value': match.group(1).lower(), 'confidence': 0.95}


def _mode_adjective(match: re.Match) -> Fields:
    word = match.group(1).lower()
    if word in ('darker', 'dim'):
        word = 'dark'
    elif word in ('lighter', 'bright'):
        word = 'light'
    return {'value': word, 'confidence': 0.85}


def _preset_phrase(confidence: float) -> Extractor:
    def extract(match: re.Match) -> Fields:
        phrase = re.sub(r'\s+', ' ', match.group(1).lower())
        preset = synonyms.resolve_preset_phrase(phrase) or phrase
        return {'value': preset, 'confidence': confidence}
    return extract


def _split_phrase(confidence: float) -> Extractor:
    def extract(match: re.Match) -> Fields:
        target, value, delta = _split_target_value(match.group(1))
        return _style_fields(target, value, delta, confidence)
    return extract


def _target_value(confidence: float, target_group: int = 1, value_group: int = 2) -> Extractor:
    def extract(match: re.Match) -> Fields:
        return _style_fields(match.group(target_group), match.group(value_group), None, confidence)
    return extract


def _contextual_delta(delta: Delta, confidence: float) -> Extractor:
    def extract(match: re.Match) -> Fields:
        return {
            'target': CONTEXTUAL_TARGET,
            'value': normalize_value(match.group(1)),
            'delta': delta,
            'scope': Scope.SELECTED,
            'confidence': confidence,
        }
    return extract


def _a_bit(match: re.Match) -> Fields:
    return {
        'target': CONTEXTUAL_TARGET,
        'value': normalize_value(match.group(2)),
        'delta': Delta(match.group(1).lower()),
        'scope': Scope.SELECTED,
        'confidence': 0.8,
    }


def _bare_comparative(match: re.Match) -> Fields:
    relative = comparative(match.group(0))
    if relative is None:
        return {'confidence': CONFIDENCE_FLOOR}
    value, delta = relative
    return {
        'target': CONTEXTUAL_TARGET,
        'value': value,
        'delta': delta,
        'scope': Scope.SELECTED,
        'confidence': 0.75,
    }


def _comparative_target(match: re.Match) -> Fields:
    relative = comparative(match.group(1))
    if relative is None:
        return {'confidence': CONFIDENCE_FLOOR}
    value, delta = relative
    return {
        'target': normalize_target(match.group(2)),
        'value': value,
        'delta': delta,
        'confidence': 0.8,
    }


def _visibility(value: str, confidence: float) -> Extractor:
    def extract(match: re.Match) -> Fields:
        return {'target': normalize_target(match.group(1)), 'value': value, 'confidence': confidence}
    return extract


def _columns(match: re.Match) -> Fields:
    word = match.group(1).lower()
    count = _NUMBER_WORDS.get(word, word)
    return {'target': 'layout', 'value': f'{count}_column', 'confidence': 0.9}


def _sidebar_side(match: re.Match) -> Fields:
    return {'target': 'layout', 'value': f'sidebar_{match.group(1).lower()}', 'confidence': 0.9}


def _grid(match: re.Match) -> Fields:
    return {'target': 'layout', 'value': match.group(1).lower(), 'confidence': 0.85}


def _bare_color(match: re.Match) -> Fields:
    return {
        'target': CONTEXTUAL_TARGET,
        'value': match.group(1).lower(),
        'scope': Scope.SELECTED,
        'confidence': 0.6,
    }


def _shaded_color(match: re.Match) -> Fields:
    return {
        'target': CONTEXTUAL_TARGET,
        'value': f'{match.group(1).lower()}-{match.group(2).lower()}',
        'scope': Scope.SELECTED,
        'confidence': 0.65,
    }


def _known_color(match: re.Match) -> Fields:
    """Any other color synonym on its own, e.g. "crimson" or "navy blue"."""
    value = match.group(1).lower()
    if value not in synonyms.COLOR_SYNONYMS:
        return {'confidence': CONFIDENCE_FLOOR}
    return {
        'target': CONTEXTUAL_TARGET,
        'value': value,
        'scope': Scope.SELECTED,
        'confidence': 0.55,
    }


# ============================================================
# RULES (ORDER IS SIGNIFICANT)
# ============================================================

COMMAND_RULES: List[Tuple[str, IntentType, Extractor]] = [
    # Undo / redo
    (r'^(undo|go back|revert|take that back|oops)$', IntentType.UNDO, _fixed(1.0)),
    (r'^(redo|redo that|do it again)$', IntentType.REDO, _fixed(1.0)),

    # Mode
    (r'^(?:switch\s+to\s+|enable\s+|turn\s+on\s+|go\s+)?(dark|light|night|day)\s*(?:mode|theme)?$',
     IntentType.MODE, _mode_value),
    (r'^(dark|light|night|day)\s+mode$', IntentType.MODE, _mode_value),
    (r'^(?:toggle|switch|flip)\s+(?:the\s+)?(?:mode|theme|dark\s*mode|light\s*mode)$',
     IntentType.MODE, _fixed(0.95, value='toggle')),
    (r'^(?:make\s+it\s+)?(dark|light|darker|lighter|dim|bright)$', IntentType.MODE, _mode_adjective),

    # Presets
    (r'^(?:make\s+it\s+)?(?:look\s+)?(pop|modern|professional|playful|fun|friendly|minimal|clean|'
     r'simple|bold|calm|elegant|serious|energetic|vibrant)(?:\s+looking)?$',
     IntentType.PRESET, _preset_phrase(0.85)),
    (r'^(make\s+it\s+pop|tone\s+(?:it\s+)?down|soften|sharpen|modernize|freshen\s+up)$',
     IntentType.PRESET, _preset_phrase(0.9)),

    # Layout
    (r'^(?:make\s+(?:it\s+)?)?(\d+|one|two|three|four|single)\s+columns?$', IntentType.LAYOUT, _columns),
    (r'^(?:add\s+)?(?:a\s+)?sidebar\s+(?:on\s+(?:the\s+)?)?(left|right)$', IntentType.LAYOUT, _sidebar_side),
    (r'^(left|right)\s+sidebar$', IntentType.LAYOUT, _sidebar_side),
    (r'^(?:make\s+(?:it\s+)?)?side\s+by\s+side$', IntentType.LAYOUT,
     _fixed(0.85, target='layout', value='2_column')),
    (r'^(?:make\s+(?:it\s+)?)?stacked$', IntentType.LAYOUT,
     _fixed(0.85, target='layout', value='1_column')),
    (r'^(?:make\s+(?:it\s+)?)?(?:a\s+)?(grid|dashboard)\s*(?:layout)?$', IntentType.LAYOUT, _grid),

    # Style: explicit phrasings
    (r'^make\s+(?:the\s+)?(\S+(?:\s+\S+)+)$', IntentType.STYLE, _split_phrase(0.9)),
    (r'^change\s+(?:the\s+)?(.+?)\s+to\s+(.+)$', IntentType.STYLE, _target_value(0.9)),
    (r'^set\s+(?:the\s+)?(.+?)\s+to\s+(.+)$', IntentType.STYLE, _target_value(0.9)),
    (r"^i(?:'d|\s+would)?\s+(?:want|like|prefer)\s+(?:the\s+)?(?!an?\s)(\S+(?:\s+\S+)+)$",
     IntentType.STYLE, _split_phrase(0.85)),
    (r'^(?:can\s+you|could\s+you|please)\s+(?:make|change|set)\s+(?:the\s+)?(\S+(?:\s+\S+)+)$',
     IntentType.STYLE, _split_phrase(0.85)),
    (r'^(?:the\s+)?(.+?)\s+should\s+be\s+(.+)$', IntentType.STYLE, _target_value(0.8)),
    (r'^use\s+(.+?)\s+(?:for|on|as)\s+(?:the\s+)?(.+)$', IntentType.STYLE,
     _target_value(0.85, target_group=2, value_group=1)),
    (r'^(.+?)\s*=\s*(.+)$', IntentType.STYLE, _target_value(0.8)),

    # Style: relative
    (r'^more\s+(.+)$', IntentType.STYLE, _contextual_delta(Delta.MORE, 0.85)),
    (r'^less\s+(.+)$', IntentType.STYLE, _contextual_delta(Delta.LESS, 0.85)),
    (r'^(?:a\s+)?(?:bit|little|tad)\s+(more|less)\s+(.+)$', IntentType.STYLE, _a_bit),
    (r'^(\w+)er$', IntentType.STYLE, _bare_comparative),
    (r'^(\w+er)\s+(?:the\s+)?(.+)$', IntentType.STYLE, _comparative_target),

    # Visibility
    (r'^(?:hide|remove|delete|get\s+rid\s+of)\s+(?:the\s+)?(.+)$', IntentType.VISIBILITY,
     _visibility('hidden', 0.9)),
    (r'^(?:show|add|display|bring\s+back)\s+(?:the\s+)?(.+)$', IntentType.VISIBILITY,
     _visibility('visible', 0.9)),
    (r"^i\s+don'?t\s+(?:need|want|like)\s+(?:the\s+)?(.+)$", IntentType.VISIBILITY,
     _visibility('hidden', 0.85)),
    (r'^i\s+(?:need|want)\s+(?:a\s+|an\s+|the\s+)?(.+)$', IntentType.VISIBILITY,
     _visibility('visible', 0.8)),

    # Bare colors
    (rf'^({_BARE_COLORS})$', IntentType.STYLE, _bare_color),
    (rf'^(light|dark)\s+({_BASIC_COLORS})$', IntentType.STYLE, _shaded_color),
    (r'^([a-z]+(?:[\s-][a-z]+)?)$', IntentType.STYLE, _known_color),
]


class CommandParser:
    """
    Parser for casual style commands.

    Converts commands like:
        "make the background light blue"
        "more rounded"
        "dark mode"

    Into ParsedIntent objects.
    """

    def __init__(self, rules: Optional[List[Tuple[str, IntentType, Extractor]]] = None):
        """
        Initialize command parser.

        Args:
            rules: Ordered (pattern, intent type, extractor) rules; COMMAND_RULES by default
        """
        # Compile regex patterns
        self._rules = [
            CommandRule(re.compile(pattern, re.I), intent_type, extractor)
            for pattern, intent_type, extractor in (rules or COMMAND_RULES)
        ]

    def parse(self, text: str) -> ParsedIntent:
        """
        Parse a command string.

        Args:
            text: Raw command text

        Returns:
            ParsedIntent (type UNKNOWN with confidence 0 when nothing applies)
        """
        trimmed = re.sub(r'\s+', ' ', text.strip())

        if not trimmed:
            return ParsedIntent(type=IntentType.UNKNOWN, raw=text, confidence=0.0)

        preset = synonyms.resolve_preset_phrase(trimmed)
        if preset:
            logger.debug(f"Preset phrase: \"{trimmed}\" -> {preset}")
            return ParsedIntent(type=IntentType.PRESET, raw=text, value=preset, confidence=0.95)

        for rule in self._rules:
            match = rule.pattern.match(trimmed)
            if not match:
                continue
            fields = rule.extractor(match)
            if fields.get('confidence', 0.0) <= CONFIDENCE_FLOOR:
                continue
            intent = ParsedIntent(type=rule.intent_type, raw=text, **fields)
            logger.debug(f"Parsed \"{trimmed}\" -> {intent.type.value} ({intent.confidence:.2f})")
            return intent

        return self._positional_fallback(trimmed, text)

    def _positional_fallback(self, trimmed: str, raw: str) -> ParsedIntent:
        """Guess "target value" / "target to value" when no rule applies."""
        words = trimmed.split(' ')

        if len(words) == 2:
            target, value, confidence = words[0], words[1], 0.4
        elif len(words) == 3 and words[1].lower() in ('to', 'is'):
            target, value, confidence = words[0], words[2], 0.5
        else:
            return ParsedIntent(type=IntentType.UNKNOWN, raw=raw, confidence=0.0)

        # Two arbitrary words are only a guess if one of them means something
        if not (synonyms.is_known_word(target) or synonyms.is_known_word(value)):
            logger.debug(f"No rule matched \"{trimmed}\"")
            return ParsedIntent(type=IntentType.UNKNOWN, raw=raw, confidence=0.0)

        return ParsedIntent(
            type=IntentType.STYLE,
            raw=raw,
            target=normalize_target(target),
            value=normalize_value(value),
            confidence=confidence,
        )


# ============================================================
# MODULE-LEVEL HELPERS
# ============================================================

_default_parser: Optional[CommandParser] = None


def parse_command(text: str) -> ParsedIntent:
    """Parse text with a shared default CommandParser."""
    global _default_parser
    if _default_parser is None:
        _default_parser = CommandParser()
    return _default_parser.parse(text)


def is_relative_command(intent: ParsedIntent) -> bool:
    return intent.delta is not None


def is_contextual_command(intent: ParsedIntent) -> bool:
    return intent.is_contextual


def is_mode_command(intent: ParsedIntent) -> bool:
    return intent.type == IntentType.MODE


def is_preset_command(intent: ParsedIntent) -> bool:
    return intent.type == IntentType.PRESET
