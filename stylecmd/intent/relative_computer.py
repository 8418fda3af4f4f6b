"""
Relative Value Computer.

Computes new token values for "more/less" commands:
- Discrete scales (radius, spacing, font size, font weight) step one
  position and saturate at either end
- Colors are adjusted in HSL space (lightness, saturation, hue, contrast)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple, Union

from loguru import logger

from stylecmd.core.color import format_hsl, parse_hsl
from stylecmd.core.contracts import Delta, RelativeResult
from stylecmd.core.token_store import TokenStore
from stylecmd.intent import synonyms


# ============================================================
# SCALES
# ============================================================

@dataclass(frozen=True)
class Scale:
    """An ordered discrete scale stored in one token."""
    name: str
    token_id: str
    property: str
    steps: Tuple[str, ...]
    values: Mapping[str, str]
    default_step: str
    aliases: Mapping[str, str] = field(default_factory=dict)

    # Extra stored values that map onto a step when reading
    readings: Mapping[str, str] = field(default_factory=dict)

    def step_for(self, value: Optional[str]) -> str:
        """Scale position of a stored value (default step when unknown)."""
        value = (value or '').strip()
        for step, stored in self.values.items():
            if stored == value:
                return step
        return self.readings.get(value, self.default_step)

    def move(self, current_step: str, delta: int) -> str:
        """Step along the scale, clamping at both ends."""
        index = self.steps.index(current_step) if current_step in self.steps else self.steps.index(self.default_step)
        index = max(0, min(len(self.steps) - 1, index + delta))
        return self.steps[index]

    def lookup(self, term: str) -> Optional[str]:
        """Step for a size word ("large", "lg", "pill"), or None."""
        key = term.lower().strip()
        if key in self.values:
            return key
        return self.aliases.get(key)


RADIUS_SCALE = Scale(
    name='radius',
    token_id='radius',
    property='borderRadius',
    steps=('none', 'sm', 'md', 'lg', 'xl', 'full'),
    values={
        'none': '0',
        'sm': '0.25rem',
        'md': '0.5rem',
        'lg': '0.75rem',
        'xl': '1rem',
        'full': '9999px',
    },
    default_step='md',
    aliases=synonyms.RADIUS_SYNONYMS,
    readings={'0px': 'none', '0.125rem': 'sm', '0.375rem': 'md', '1.5rem': 'xl'},
)

SPACING_SCALE = Scale(
    name='spacing',
    token_id='spacing',
    property='spacing',
    steps=('xs', 'sm', 'md', 'lg', 'xl', '2xl'),
    values={
        'xs': '0.5rem',
        'sm': '0.75rem',
        'md': '1rem',
        'lg': '1.5rem',
        'xl': '2rem',
        '2xl': '3rem',
    },
    default_step='md',
    aliases=synonyms.SPACING_SYNONYMS,
)

FONT_SIZE_SCALE = Scale(
    name='font-size',
    token_id='font-size',
    property='fontSize',
    steps=('xs', 'sm', 'base', 'lg', 'xl', '2xl', '3xl'),
    values={
        'xs': '0.75rem',
        'sm': '0.875rem',
        'base': '1rem',
        'lg': '1.125rem',
        'xl': '1.25rem',
        '2xl': '1.5rem',
        '3xl': '1.875rem',
    },
    default_step='base',
    aliases=synonyms.FONT_SIZE_SYNONYMS,
)

FONT_WEIGHT_SCALE = Scale(
    name='font-weight',
    token_id='font-weight',
    property='fontWeight',
    steps=('100', '200', '300', '400', '500', '600', '700', '800', '900'),
    values={w: w for w in ('100', '200', '300', '400', '500', '600', '700', '800', '900')},
    default_step='400',
    aliases=synonyms.FONT_WEIGHT_SYNONYMS,
)

SCALES: Dict[str, Scale] = {
    scale.token_id: scale
    for scale in (RADIUS_SCALE, SPACING_SCALE, FONT_SIZE_SCALE, FONT_WEIGHT_SCALE)
}


# ============================================================
# VALUE WORDS
# ============================================================

# word -> (property, invert direction)
RELATIVE_WORDS: Dict[str, Tuple[str, bool]] = {}

def _register(prop: str, words: str, inverted: bool = False):
    for word in words.split(','):
        RELATIVE_WORDS[word.strip()] = (prop, inverted)


_register('radius', 'rounded, round, corners, corner, radius, rounding, roundness, curved, soft, softer')
_register('radius', 'sharp, square, squared, angular, boxy', inverted=True)
_register('lightness', 'light, bright, lighter, brighter, lightness, brightness')
_register('lightness', 'dark, darker, darkness, dim', inverted=True)
_register('saturation', 'saturated, saturation, vivid, vibrant, colorful, intense')
_register('saturation', 'muted, desaturated, dull', inverted=True)
_register('hue', 'hue')
_register('contrast', 'contrast, pop')
_register('font-weight', 'bold, heavy, thick, weight, boldness')
_register('font-weight', 'thin', inverted=True)
_register('font-size', 'large, big, size, larger, bigger, text size, font size')
_register('font-size', 'small, smaller, tiny', inverted=True)
_register('spacing', 'spacing, padding, space, gap, roomy, airy, spacious')
_register('spacing', 'tight, compact, cramped, dense', inverted=True)

COLOR_PROPERTIES = ('lightness', 'saturation', 'hue', 'contrast')

LIGHTNESS_STEP = 10.0
SATURATION_STEP = 10.0
HUE_STEP = 30.0
CONTRAST_SATURATION_STEP = 15.0
CONTRAST_LIGHTNESS_STEP = 5.0


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def _as_delta(direction: Union[Delta, str]) -> Delta:
    return direction if isinstance(direction, Delta) else Delta(str(direction).lower())


def _property_for(value_word: str) -> Optional[Tuple[str, bool]]:
    """Property for a value phrase, trying the whole phrase then each word."""
    normalized = ' '.join(value_word.lower().split())
    if normalized in RELATIVE_WORDS:
        return RELATIVE_WORDS[normalized]
    for word in normalized.split(' '):
        if word in RELATIVE_WORDS:
            return RELATIVE_WORDS[word]
    return None


# ============================================================
# COMPUTATIONS
# ============================================================

def compute_relative_color(
    current_value: str,
    direction: Union[Delta, str],
    property: str,
) -> RelativeResult:
    """
    Adjust one HSL component of a color.

    Args:
        current_value: "H S% L%" string
        direction: more / less
        property: lightness, saturation, hue or contrast

    Returns:
        RelativeResult with the new "H S% L%" value
    """
    hsl = parse_hsl(current_value)
    if hsl is None:
        return RelativeResult(success=False, error='Could not parse color value')

    h, s, l = hsl
    sign = _as_delta(direction).sign

    if property == 'lightness':
        l = _clamp(l + sign * LIGHTNESS_STEP)
    elif property == 'saturation':
        s = _clamp(s + sign * SATURATION_STEP)
    elif property == 'hue':
        h = (h + sign * HUE_STEP) % 360
    elif property == 'contrast':
        # Saturation up, lightness pushed away from the middle
        s = _clamp(s + sign * CONTRAST_SATURATION_STEP)
        if l > 50:
            l = _clamp(l + sign * CONTRAST_LIGHTNESS_STEP)
        else:
            l = _clamp(l - sign * CONTRAST_LIGHTNESS_STEP)
    else:
        return RelativeResult(success=False, error=f'Unknown property: {property}')

    return RelativeResult(success=True, new_value=format_hsl(h, s, l), property=property)


def compute_relative_scale(
    scale: Scale,
    current_value: Optional[str],
    direction: Union[Delta, str],
) -> RelativeResult:
    """Step a discrete scale from the stored value; saturates at both ends."""
    current_step = scale.step_for(current_value)
    new_step = scale.move(current_step, _as_delta(direction).sign)
    return RelativeResult(
        success=True,
        new_value=scale.values[new_step],
        property=scale.property,
        token_id=scale.token_id,
        step=new_step,
    )


def resolve_scale_term(token_id: str, term: str) -> Optional[Tuple[str, str]]:
    """
    Absolute value for a size word on a scale token.

    Returns:
        (step, stored value) or None when the word is not on the scale
    """
    scale = SCALES.get(token_id)
    if scale is None:
        return None
    step = scale.lookup(term)
    if step is None or step not in scale.values:
        return None
    return step, scale.values[step]


class RelativeValueComputer:
    """
    Computes "more/less" changes against the current token values.

    Reads the token store; never writes it.
    """

    def __init__(self, store: TokenStore):
        self.store = store

    def compute(
        self,
        value_word: str,
        direction: Union[Delta, str],
        current_token_id: Optional[str] = None,
    ) -> RelativeResult:
        """
        Compute a relative change.

        Args:
            value_word: What should change ("rounded", "darker", "contrast")
            direction: more / less
            current_token_id: Token bound by the context resolver (for colors)

        Returns:
            RelativeResult; token_id is set when the change lives in a scale token
        """
        delta = _as_delta(direction)
        resolved = _property_for(value_word)

        if resolved is None:
            logger.debug(f"No relative property for \"{value_word}\"")
            return RelativeResult(
                success=False,
                error=f'Cannot compute relative change for "{value_word}"',
            )

        prop, inverted = resolved
        if inverted:
            delta = delta.inverted()

        scale = SCALES.get(prop)
        if scale is not None:
            return compute_relative_scale(scale, self.store.get(scale.token_id), delta)

        if not current_token_id:
            return RelativeResult(success=False, error='No color to adjust')

        current_value = self.store.get(current_token_id)
        if not current_value:
            return RelativeResult(success=False, error='No color to adjust')

        return compute_relative_color(current_value, delta, prop)


def compute_relative_change(
    value_word: str,
    direction: Union[Delta, str],
    current_token_id: Optional[str],
    store: TokenStore,
) -> RelativeResult:
    """Functional form of RelativeValueComputer.compute."""
    return RelativeValueComputer(store).compute(value_word, direction, current_token_id)


# ============================================================
# COLOR HELPERS
# ============================================================

def make_lighter(hsl_value: str, amount: float = LIGHTNESS_STEP) -> Optional[str]:
    hsl = parse_hsl(hsl_value)
    if hsl is None:
        return None
    h, s, l = hsl
    return format_hsl(h, s, _clamp(l + amount))


def make_darker(hsl_value: str, amount: float = LIGHTNESS_STEP) -> Optional[str]:
    hsl = parse_hsl(hsl_value)
    if hsl is None:
        return None
    h, s, l = hsl
    return format_hsl(h, s, _clamp(l - amount))


def adjust_saturation(hsl_value: str, delta: float) -> Optional[str]:
    hsl = parse_hsl(hsl_value)
    if hsl is None:
        return None
    h, s, l = hsl
    return format_hsl(h, _clamp(s + delta), l)
