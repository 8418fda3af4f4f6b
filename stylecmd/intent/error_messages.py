"""
User-facing error, suggestion and help messages.

Messages are written for non-technical users: plain language, a short
"did you mean" list when something close exists, and a concrete example.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from stylecmd.core.contracts import FuzzyMatch
from stylecmd.intent.fuzzy_matcher import find_close_matches
from stylecmd.intent.synonyms import STYLE_PRESETS, get_all_color_names, get_all_target_names


BULLET = "  •"

TARGET_DESCRIPTIONS: Dict[str, str] = {
    'background': 'the page/app background color',
    'primary': 'the main theme color (buttons, links)',
    'secondary': 'the secondary theme color',
    'text': 'the color of text/words',
    'card': 'the color of cards, boxes, and panels',
    'button': 'the color of buttons',
    'border': 'the color of borders and lines',
    'sidebar': 'the sidebar/menu color',
    'popover': 'popup and dropdown colors',
    'input': 'form field and input colors',
    'ring': 'focus highlight color',
    'error': 'error and warning colors',
    'muted': 'subtle/faded text color',
    'chart': 'graph and chart colors',
    'radius': 'how rounded corners are',
    'spacing': 'how much room there is between things',
    'font-size': 'how big text is',
    'font-weight': 'how bold text is',
}

EXAMPLE_COMMANDS: Dict[str, List[str]] = {
    'color': [
        'make the background blue',
        'change the primary color to green',
        'set the text to dark gray',
        'make buttons purple',
    ],
    'radius': [
        'make corners more rounded',
        'set corners to sharp',
        'make it rounded',
        'less rounding',
    ],
    'mode': [
        'switch to dark mode',
        'enable light mode',
        'toggle dark mode',
    ],
    'general': [
        'make the background light blue',
        'more rounded corners',
        'switch to dark mode',
    ],
}


def _bullets(lines: Sequence[str]) -> str:
    return "".join(f"\n{BULLET} {line}" for line in lines)


def unknown_target_error(term: str) -> str:
    """Message for a target that neither synonyms nor fuzzy matching resolved."""
    matches = find_close_matches(term, get_all_target_names(), max_results=3, min_similarity=0.4)

    message = f'I didn\'t recognize "{term}".'
    if matches:
        lines = []
        for match in matches:
            description = TARGET_DESCRIPTIONS.get(match.candidate, '')
            lines.append(f"{match.candidate} - {description}" if description else match.candidate)
        message += "\n\nDid you mean:" + _bullets(lines)
    else:
        message += "\n\nThings you can change:" + _bullets([
            'background - the page color',
            'primary/main - the theme color',
            'text - the text color',
            'cards - card/panel colors',
            'corners/radius - how rounded things are',
        ])

    message += '\n\nExample: "make the background blue"'
    return message


def unknown_color_error(value: str) -> str:
    """Message for a color value that could not be resolved."""
    matches = find_close_matches(value, get_all_color_names(), max_results=3, min_similarity=0.4)

    message = f'I\'m not sure what color "{value}" is.'
    if matches:
        message += "\n\n" + format_suggestions(matches)
    else:
        message += "\n\nTry colors like:" + _bullets([
            'blue, light blue, navy',
            'green, emerald, teal',
            'red, pink, rose',
            'purple, violet, indigo',
            'gray, slate, white, black',
            'Or a hex code like #3B82F6',
        ])

    message += '\n\nExample: "make it light blue"'
    return message


def unparseable_command_error(text: str) -> str:
    """Message for a command the parser could not classify."""
    message = f'I didn\'t understand: "{text}"'
    message += "\n\nTry saying things like:" + _bullets(
        [f'"{example}"' for example in get_contextual_examples('general')]
    )
    message += "\n\nOr just describe what you want:" + _bullets([
        '"make it pop" - more vibrant',
        '"tone it down" - more subtle',
        '"softer corners" - more rounded',
    ])
    return message


def invalid_value_error(target: str, value: str) -> str:
    """Message for a value that does not fit the target (e.g. corners -> "purple")."""
    message = f'I couldn\'t set {target} to "{value}".'

    if target in ('radius', 'corners'):
        message += "\n\nFor corners, try:" + _bullets([
            'sharp, square (no rounding)',
            'small, subtle (slight rounding)',
            'rounded, medium (moderate)',
            'large, soft (more rounded)',
            'pill, full (completely round)',
        ])
        message += '\n\nOr say "more rounded" or "less rounded"'
    elif target in ('spacing', 'font-size', 'font-weight'):
        message += "\n\nTry a size like:" + _bullets(['small', 'medium', 'large'])
        message += f'\n\nOr say "more {target.replace("-", " ")}" or "less {target.replace("-", " ")}"'
    else:
        message += "\n\nFor colors, try:" + _bullets([
            'A color name: blue, green, purple',
            'A shade: light blue, dark green',
            'A hex code: #3B82F6',
        ])

    return message


def unknown_preset_error(name: str) -> str:
    """Message for a style preset that does not exist."""
    matches = find_close_matches(name, STYLE_PRESETS.keys(), max_results=3, min_similarity=0.4)
    message = f'I don\'t recognize the style "{name}".'
    if matches:
        message += " Did you mean: " + ", ".join(f'"{m.candidate}"' for m in matches) + "?"
    else:
        message += ' Try: "make it pop", "modernize", "professional", "playful"'
    return message


def format_suggestions(suggestions: Sequence[FuzzyMatch]) -> str:
    if not suggestions:
        return ''
    return "Did you mean:" + _bullets([s.candidate for s in suggestions])


def get_contextual_examples(context: str) -> List[str]:
    """Example commands for 'color', 'radius', 'mode' or 'general'."""
    return list(EXAMPLE_COMMANDS.get(context, EXAMPLE_COMMANDS['general']))


def help_message() -> str:
    """Static overview of what can be said."""
    return """Here's what you can do:

🎨 COLORS
  "make the background blue"
  "change primary color to green"
  "set buttons to purple"
  "darker text color"

📐 CORNERS
  "more rounded corners"
  "make it sharp"
  "softer edges"

🌙 MODE
  "switch to dark mode"
  "light mode"
  "toggle mode"

✨ QUICK STYLES
  "make it pop" - more vibrant
  "tone it down" - more subtle
  "modernize" - clean, modern look
  "professional" - business-like

💡 TIPS
  • You can say things naturally
  • Typos are okay, I'll figure it out
  • Ask for "more" or "less" of something"""
