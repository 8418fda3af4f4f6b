"""
Synonym Tables.

Static, read-only dictionaries mapping free-form words and phrases to
canonical names. Lookups are case-insensitive and trimmed. These tables
are the fast path; consumers fall back to fuzzy matching only on a miss.

Every canonical value here must exist as a key in its consumer's table:
- TARGET_SYNONYMS -> context_resolver.TARGET_DEFINITIONS
- COLOR_SYNONYMS -> executor.COLOR_VALUES
- RADIUS_SYNONYMS -> executor.RADIUS_VALUES
- PRESET_PHRASES -> STYLE_PRESETS
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional


# ============================================================
# TARGETS
# ============================================================

_TARGETS: Dict[str, str] = {
    # Background / page
    'background': 'background',
    'background color': 'background',
    'bg': 'background',
    'page': 'background',
    'page color': 'background',
    'page background': 'background',
    'app background': 'background',
    'main background': 'background',
    'back color': 'background',
    'behind': 'background',
    'backdrop': 'background',
    'canvas': 'background',

    # Primary / brand
    'primary': 'primary',
    'primary color': 'primary',
    'main color': 'primary',
    'main': 'primary',
    'brand': 'primary',
    'brand color': 'primary',
    'theme color': 'primary',
    'app color': 'primary',
    'accent': 'primary',  # commonly confused with primary
    'highlight': 'primary',

    # Secondary
    'secondary': 'secondary',
    'secondary color': 'secondary',
    'second color': 'secondary',
    'second': 'secondary',
    'alternate': 'secondary',
    'alternative': 'secondary',

    # Text / foreground
    'text': 'text',
    'text color': 'text',
    'font color': 'text',
    'font': 'text',
    'foreground': 'text',
    'writing': 'text',
    'words': 'text',
    'letters': 'text',
    'paragraphs': 'text',
    'content': 'text',
    'copy': 'text',
    'reading': 'text',

    # Card / surface
    'card': 'card',
    'cards': 'card',
    'card color': 'card',
    'surface': 'card',
    'surfaces': 'card',
    'panel': 'card',
    'panels': 'card',
    'box': 'card',
    'boxes': 'card',
    'container': 'card',
    'containers': 'card',
    'section': 'card',
    'sections': 'card',
    'tile': 'card',
    'tiles': 'card',
    'block': 'card',
    'blocks': 'card',
    'widget': 'card',
    'widgets': 'card',

    # Button
    'button': 'button',
    'buttons': 'button',
    'button color': 'button',
    'btn': 'button',
    'btns': 'button',
    'click': 'button',
    'clickable': 'button',
    'actions': 'button',

    # Border
    'border': 'border',
    'borders': 'border',
    'border color': 'border',
    'outlines': 'border',
    'edge': 'border',
    'frame': 'border',
    'line': 'border',
    'lines': 'border',
    'divider': 'border',
    'dividers': 'border',
    'separator': 'border',

    # Sidebar / navigation
    'sidebar': 'sidebar',
    'side bar': 'sidebar',
    'side menu': 'sidebar',
    'navigation': 'sidebar',
    'nav': 'sidebar',
    'menu': 'sidebar',
    'left menu': 'sidebar',
    'left panel': 'sidebar',
    'side panel': 'sidebar',

    # Popover / dropdown
    'popover': 'popover',
    'popup': 'popover',
    'pop up': 'popover',
    'dropdown': 'popover',
    'drop down': 'popover',
    'menu popup': 'popover',
    'overlay': 'popover',
    'modal': 'popover',
    'dialog': 'popover',
    'tooltip': 'popover',

    # Input / form field
    'input': 'input',
    'inputs': 'input',
    'input field': 'input',
    'text field': 'input',
    'text box': 'input',
    'textbox': 'input',
    'form field': 'input',
    'form fields': 'input',
    'field': 'input',
    'fields': 'input',
    'form': 'input',
    'forms': 'input',

    # Focus ring
    'ring': 'ring',
    'focus': 'ring',
    'focus ring': 'ring',
    'outline': 'ring',
    'focus outline': 'ring',
    'selected': 'ring',
    'selection': 'ring',
    'active': 'ring',

    # Error / destructive
    'error': 'error',
    'error color': 'error',
    'danger': 'error',
    'destructive': 'error',
    'delete': 'error',
    'remove': 'error',
    'warning': 'error',
    'alert': 'error',
    'problem': 'error',
    'bad': 'error',

    # Muted
    'muted': 'muted',
    'muted color': 'muted',
    'subtle': 'muted',
    'faded': 'muted',
    'light text': 'muted',
    'gray text': 'muted',
    'dimmed': 'muted',
    'secondary text': 'muted',
    'placeholder': 'muted',
    'hint': 'muted',
    'caption': 'muted',

    # Charts
    'chart': 'chart',
    'charts': 'chart',
    'chart color': 'chart',
    'graph': 'chart',
    'graphs': 'chart',
    'data': 'chart',
    'visualization': 'chart',
    'pie chart': 'chart',
    'bar chart': 'chart',
    'line chart': 'chart',
    'chart 1': 'chart-1',
    'chart1': 'chart-1',
    'chart 2': 'chart-2',
    'chart2': 'chart-2',
    'chart 3': 'chart-3',
    'chart3': 'chart-3',
    'chart 4': 'chart-4',
    'chart4': 'chart-4',
    'chart 5': 'chart-5',
    'chart5': 'chart-5',

    # Radius / corners
    'radius': 'radius',
    'corner': 'radius',
    'corners': 'radius',
    'rounding': 'radius',
    'border radius': 'radius',
    'roundness': 'radius',
    'curved': 'radius',
    'curves': 'radius',
    'edges': 'radius',
    'sharp': 'radius',
    'soft': 'radius',

    # Spacing
    'spacing': 'spacing',
    'space': 'spacing',
    'padding': 'spacing',
    'gap': 'spacing',
    'gaps': 'spacing',
    'whitespace': 'spacing',
    'white space': 'spacing',
    'density': 'spacing',

    # Typography
    'font size': 'font-size',
    'text size': 'font-size',
    'type size': 'font-size',
    'font-size': 'font-size',
    'font weight': 'font-weight',
    'text weight': 'font-weight',
    'weight': 'font-weight',
    'boldness': 'font-weight',
    'font-weight': 'font-weight',
}

# Deliberate common misspellings; hits are reported as interpretations
_TARGET_MISSPELLINGS: Dict[str, str] = {
    'backround': 'background',
    'backgroud': 'background',
    'backgorund': 'background',
    'backgound': 'background',
    'bckground': 'background',
    'bacground': 'background',
    'backgrund': 'background',
    'backgroung': 'background',
    'backgrounf': 'background',
    'baclground': 'background',
    'primery': 'primary',
    'primay': 'primary',
    'praimary': 'primary',
    'pirmary': 'primary',
    'pirmairy': 'primary',
    'secondry': 'secondary',
    'secndary': 'secondary',
    'secodary': 'secondary',
    'txt': 'text',
    'txet': 'text',
    'forground': 'text',
    'foregound': 'text',
    'crad': 'card',
    'cadr': 'card',
    'buton': 'button',
    'buttn': 'button',
    'botton': 'button',
    'butoon': 'button',
    'buttton': 'button',
    'boarder': 'border',
    'boarders': 'border',
    'broder': 'border',
    'boder': 'border',
    'sdiebar': 'sidebar',
    'sidbar': 'sidebar',
    'sidebare': 'sidebar',
    'siedbar': 'sidebar',
    'inout': 'input',
    'imput': 'input',
    'inoput': 'input',
    'raduis': 'radius',
    'radious': 'radius',
    'raius': 'radius',
    'raidus': 'radius',
    'cornres': 'radius',
    'conrers': 'radius',
    'roudned': 'radius',
    'roundd': 'radius',
    'rounder': 'radius',
}

TARGET_MISSPELLINGS: Mapping[str, str] = MappingProxyType(_TARGET_MISSPELLINGS)
TARGET_SYNONYMS: Mapping[str, str] = MappingProxyType({**_TARGETS, **_TARGET_MISSPELLINGS})


# ============================================================
# COLORS
# ============================================================

COLOR_SYNONYMS: Mapping[str, str] = MappingProxyType({
    # Blues
    'blue': 'blue',
    'sky': 'sky',
    'sky blue': 'sky',
    'light blue': 'light-blue',
    'baby blue': 'light-blue',
    'pale blue': 'light-blue',
    'dark blue': 'dark-blue',
    'navy': 'dark-blue',
    'navy blue': 'dark-blue',
    'ocean': 'blue',
    'sea': 'blue',
    'water': 'blue',
    'azure': 'sky',
    'cobalt': 'blue',
    'royal blue': 'blue',
    'indigo': 'indigo',
    'bule': 'blue',
    'bleu': 'blue',
    'blu': 'blue',

    # Greens
    'green': 'green',
    'light green': 'light-green',
    'dark green': 'dark-green',
    'forest': 'dark-green',
    'forest green': 'dark-green',
    'lime': 'lime',
    'lime green': 'lime',
    'emerald': 'emerald',
    'teal': 'teal',
    'mint': 'light-green',
    'sage': 'green',
    'olive': 'dark-green',
    'grass': 'green',
    'nature': 'green',
    'eco': 'green',
    'grean': 'green',
    'gren': 'green',
    'gree': 'green',

    # Reds
    'red': 'red',
    'light red': 'rose',
    'dark red': 'red',
    'crimson': 'red',
    'scarlet': 'red',
    'ruby': 'red',
    'blood': 'red',
    'cherry': 'red',
    'rose': 'rose',
    'coral': 'rose',
    'salmon': 'rose',
    'brick': 'red',
    'maroon': 'red',
    'rd': 'red',
    'redd': 'red',

    # Pinks
    'pink': 'pink',
    'light pink': 'pink',
    'hot pink': 'pink',
    'magenta': 'pink',
    'fuchsia': 'pink',
    'blush': 'pink',
    'bubblegum': 'pink',
    'pnik': 'pink',
    'pinl': 'pink',

    # Purples
    'purple': 'purple',
    'violet': 'violet',
    'lavender': 'violet',
    'plum': 'purple',
    'grape': 'purple',
    'amethyst': 'purple',
    'orchid': 'violet',
    'mauve': 'violet',
    'light purple': 'light-purple',
    'dark purple': 'dark-purple',
    'pruple': 'purple',
    'purpel': 'purple',
    'purlpe': 'purple',

    # Yellows
    'yellow': 'yellow',
    'gold': 'amber',
    'golden': 'amber',
    'amber': 'amber',
    'honey': 'amber',
    'mustard': 'amber',
    'lemon': 'yellow',
    'sunshine': 'yellow',
    'sunny': 'yellow',
    'canary': 'yellow',
    'light yellow': 'light-yellow',
    'yelow': 'yellow',
    'yello': 'yellow',
    'yellwo': 'yellow',

    # Oranges
    'orange': 'orange',
    'light orange': 'orange',
    'dark orange': 'orange',
    'tangerine': 'orange',
    'peach': 'orange',
    'apricot': 'orange',
    'rust': 'orange',
    'burnt orange': 'orange',
    'pumpkin': 'orange',
    'carrot': 'orange',
    'ornage': 'orange',
    'orage': 'orange',

    # Neutrals
    'gray': 'gray',
    'grey': 'gray',
    'silver': 'gray',
    'slate': 'slate',
    'charcoal': 'slate',
    'ash': 'gray',
    'stone': 'slate',
    'zinc': 'zinc',
    'neutral': 'gray',
    'light gray': 'light-gray',
    'light grey': 'light-gray',
    'dark gray': 'dark-gray',
    'dark grey': 'dark-gray',
    'gry': 'gray',
    'graay': 'gray',

    # Black and white
    'white': 'white',
    'pure white': 'white',
    'snow': 'white',
    'ivory': 'white',
    'cream': 'white',
    'off white': 'off-white',
    'off-white': 'white',
    'light': 'off-white',
    'pale': 'off-white',
    'black': 'black',
    'dark': 'black',
    'jet': 'black',
    'midnight': 'black',
    'onyx': 'black',
    'wihte': 'white',
    'whiet': 'white',
    'balck': 'black',
    'blakc': 'black',

    # Semantic
    'success': 'success',
    'positive': 'success',
    'good': 'success',
    'ok': 'success',
    'complete': 'success',
    'done': 'success',
    'error': 'error',
    'danger': 'error',
    'fail': 'error',
    'failure': 'error',
    'wrong': 'error',
    'warning': 'warning',
    'caution': 'warning',
    'alert': 'warning',
    'attention': 'warning',
    'info': 'info',
    'information': 'info',
})


# ============================================================
# RADIUS, SPACING AND TYPOGRAPHY SCALES
# ============================================================

RADIUS_SYNONYMS: Mapping[str, str] = MappingProxyType({
    # None / sharp
    'none': 'none',
    'zero': 'none',
    '0': 'none',
    'sharp': 'none',
    'square': 'none',
    'squared': 'none',
    'no rounding': 'none',
    'no radius': 'none',
    'flat': 'none',
    'hard': 'none',
    'angular': 'none',
    'boxy': 'none',

    # Small
    'small': 'sm',
    'sm': 'sm',
    'tiny': 'sm',
    'slight': 'sm',
    'subtle': 'sm',
    'barely': 'sm',
    'little': 'sm',
    'minimal': 'sm',

    # Medium
    'medium': 'md',
    'md': 'md',
    'default': 'md',
    'normal': 'md',
    'regular': 'md',
    'rounded': 'md',
    'moderate': 'md',
    'standard': 'md',

    # Large
    'large': 'lg',
    'lg': 'lg',
    'big': 'lg',
    'more rounded': 'lg',
    'rounder': 'lg',
    'softer': 'lg',
    'soft': 'lg',
    'smooth': 'lg',

    # Extra large
    'extra large': 'xl',
    'xl': 'xl',
    'very rounded': 'xl',
    'very soft': 'xl',
    'super rounded': 'xl',
    'extra round': 'xl',

    # Full / pill
    'full': 'full',
    'pill': 'full',
    'round': 'full',
    'circular': 'full',
    'circle': 'full',
    'capsule': 'full',
    'completely rounded': 'full',
    'fully rounded': 'full',
    'maximum': 'full',
    'max': 'full',
})

SPACING_SYNONYMS: Mapping[str, str] = MappingProxyType({
    'xs': 'xs',
    'extra small': 'xs',
    'cramped': 'xs',
    'sm': 'sm',
    'small': 'sm',
    'tight': 'sm',
    'compact': 'sm',
    'dense': 'sm',
    'md': 'md',
    'medium': 'md',
    'normal': 'md',
    'default': 'md',
    'regular': 'md',
    'lg': 'lg',
    'large': 'lg',
    'relaxed': 'lg',
    'comfortable': 'lg',
    'roomy': 'lg',
    'xl': 'xl',
    'extra large': 'xl',
    'spacious': 'xl',
    'airy': 'xl',
    '2xl': '2xl',
    'huge': '2xl',
})

FONT_SIZE_SYNONYMS: Mapping[str, str] = MappingProxyType({
    'xs': 'xs',
    'extra small': 'xs',
    'tiny': 'xs',
    'sm': 'sm',
    'small': 'sm',
    'base': 'base',
    'normal': 'base',
    'default': 'base',
    'regular': 'base',
    'medium': 'base',
    'lg': 'lg',
    'large': 'lg',
    'big': 'lg',
    'xl': 'xl',
    'extra large': 'xl',
    '2xl': '2xl',
    'huge': '2xl',
    '3xl': '3xl',
    'giant': '3xl',
})

FONT_WEIGHT_SYNONYMS: Mapping[str, str] = MappingProxyType({
    'thin': '100',
    'hairline': '100',
    'extra light': '200',
    'light': '300',
    'normal': '400',
    'regular': '400',
    'default': '400',
    'medium': '500',
    'semibold': '600',
    'semi bold': '600',
    'bold': '700',
    'extra bold': '800',
    'heavy': '900',
    'black': '900',
})


# ============================================================
# MODES
# ============================================================

MODE_SYNONYMS: Mapping[str, str] = MappingProxyType({
    # Dark
    'dark': 'dark',
    'dark mode': 'dark',
    'dark theme': 'dark',
    'night': 'dark',
    'night mode': 'dark',
    'night theme': 'dark',
    'midnight': 'dark',
    'black': 'dark',
    'dim': 'dark',

    # Light
    'light': 'light',
    'light mode': 'light',
    'light theme': 'light',
    'day': 'light',
    'day mode': 'light',
    'day theme': 'light',
    'bright': 'light',
    'white': 'light',
    'normal': 'light',

    # Toggle
    'toggle': 'toggle',
    'switch': 'toggle',
    'flip': 'toggle',
    'change mode': 'toggle',
    'switch mode': 'toggle',
    'other mode': 'toggle',
})


# ============================================================
# STYLE PRESETS
# ============================================================

@dataclass(frozen=True)
class StylePreset:
    """Named bundle of style directives."""
    description: str
    styles: Mapping[str, str]


STYLE_PRESETS: Mapping[str, StylePreset] = MappingProxyType({
    'make it pop': StylePreset(
        'Increases contrast and saturation',
        {'saturation': 'increase', 'contrast': 'increase'},
    ),
    'tone it down': StylePreset(
        'Decreases saturation for a more muted look',
        {'saturation': 'decrease'},
    ),
    'soften': StylePreset(
        'Adds more rounding and reduces contrast',
        {'radius': 'lg', 'contrast': 'decrease'},
    ),
    'sharpen': StylePreset(
        'Removes rounding and increases contrast',
        {'radius': 'none', 'contrast': 'increase'},
    ),
    'modernize': StylePreset(
        'Clean, modern look with subtle rounding',
        {'radius': 'md', 'saturation': 'moderate'},
    ),
    'professional': StylePreset(
        'Subdued, business-appropriate colors',
        {'saturation': 'low', 'radius': 'sm'},
    ),
    'playful': StylePreset(
        'Bright, vibrant colors with more rounding',
        {'saturation': 'high', 'radius': 'lg'},
    ),
    'minimal': StylePreset(
        'Clean and simple with muted colors',
        {'saturation': 'low', 'radius': 'sm'},
    ),
    'bold': StylePreset(
        'Strong, vibrant colors',
        {'saturation': 'high', 'contrast': 'high'},
    ),
    'calm': StylePreset(
        'Soft, relaxing colors',
        {'saturation': 'low', 'lightness': 'high'},
    ),
    'energetic': StylePreset(
        'Bright, vivid colors',
        {'saturation': 'high', 'lightness': 'moderate'},
    ),
    'elegant': StylePreset(
        'Sophisticated, refined look',
        {'saturation': 'moderate', 'contrast': 'moderate'},
    ),
    'fun': StylePreset(
        'Bright and playful',
        {'saturation': 'high', 'radius': 'xl'},
    ),
    'serious': StylePreset(
        'Professional and subdued',
        {'saturation': 'low', 'radius': 'sm'},
    ),
    'friendly': StylePreset(
        'Warm and approachable',
        {'radius': 'lg', 'saturation': 'moderate'},
    ),
})

# Casual phrase -> preset name
PRESET_PHRASES: Mapping[str, str] = MappingProxyType({
    'make it pop': 'make it pop',
    'pop': 'make it pop',
    'tone it down': 'tone it down',
    'tone down': 'tone it down',
    'soften': 'soften',
    'soft': 'soften',
    'softer': 'soften',
    'sharpen': 'sharpen',
    'sharp': 'sharpen',
    'sharper': 'sharpen',
    'modernize': 'modernize',
    'modern': 'modernize',
    'update look': 'modernize',
    'freshen up': 'modernize',
    'freshen': 'modernize',
    'professional': 'professional',
    'business': 'professional',
    'business like': 'professional',
    'corporate': 'professional',
    'playful': 'playful',
    'fun': 'playful',
    'friendly': 'friendly',
    'minimal': 'minimal',
    'minimalist': 'minimal',
    'simple': 'minimal',
    'clean': 'minimal',
    'bold': 'bold',
    'strong': 'bold',
    'calm': 'calm',
    'relaxing': 'calm',
    'peaceful': 'calm',
    'energetic': 'energetic',
    'vibrant': 'energetic',
    'lively': 'energetic',
    'elegant': 'elegant',
    'classy': 'elegant',
    'sophisticated': 'elegant',
    'serious': 'serious',
})


# ============================================================
# LOOKUPS
# ============================================================

def _lookup(table: Mapping[str, str], text: str) -> Optional[str]:
    return table.get(text.lower().strip())


def resolve_target_synonym(text: str) -> Optional[str]:
    return _lookup(TARGET_SYNONYMS, text)


def is_target_misspelling(text: str) -> bool:
    return text.lower().strip() in TARGET_MISSPELLINGS


def resolve_color_synonym(text: str) -> Optional[str]:
    return _lookup(COLOR_SYNONYMS, text)


def resolve_radius_synonym(text: str) -> Optional[str]:
    return _lookup(RADIUS_SYNONYMS, text)


def resolve_mode_synonym(text: str) -> Optional[str]:
    return _lookup(MODE_SYNONYMS, text)


def resolve_preset_phrase(text: str) -> Optional[str]:
    return _lookup(PRESET_PHRASES, text)


def get_all_target_names() -> List[str]:
    """All target synonym keys, for fuzzy matching."""
    return list(TARGET_SYNONYMS.keys())


def get_all_color_names() -> List[str]:
    """All color synonym keys, for fuzzy matching."""
    return list(COLOR_SYNONYMS.keys())


def is_known_word(text: str) -> bool:
    """True if text appears in any value-bearing table."""
    key = text.lower().strip()
    return (
        key in TARGET_SYNONYMS
        or key in COLOR_SYNONYMS
        or key in RADIUS_SYNONYMS
        or key in MODE_SYNONYMS
    )
