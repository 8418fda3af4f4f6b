"""Tests for the ordered command grammar."""

import pytest

from stylecmd.core.contracts import CONTEXTUAL_TARGET, Delta, IntentType, Scope
from stylecmd.intent.command_parser import (
    CommandParser,
    comparative,
    is_contextual_command,
    is_mode_command,
    is_preset_command,
    is_relative_command,
    normalize_target,
    parse_command,
)
from stylecmd.intent.synonyms import PRESET_PHRASES
from stylecmd.pipeline.executor import COLOR_VALUES


class TestPresetPhrases:
    """Exact preset phrases short-circuit the rule list."""

    @pytest.mark.parametrize("phrase", sorted(PRESET_PHRASES))
    def test_every_phrase_is_a_preset(self, phrase):
        intent = parse_command(phrase)
        assert intent.type == IntentType.PRESET
        assert intent.confidence >= 0.95
        assert intent.value == PRESET_PHRASES[phrase]

    @pytest.mark.parametrize("text", ["  MAKE IT POP  ", "Make   it pop", "make it pop\n"])
    def test_case_and_whitespace_variants(self, text):
        intent = parse_command(text)
        assert intent.type == IntentType.PRESET
        assert intent.value == "make it pop"
        assert intent.confidence >= 0.95

    def test_adjective_preset(self):
        intent = parse_command("make it look professional")
        assert intent.type == IntentType.PRESET
        assert intent.value == "professional"


class TestBasicCommands:
    """Tests for empty, undo/redo and mode commands."""

    def test_empty(self):
        intent = parse_command("   ")
        assert intent.type == IntentType.UNKNOWN
        assert intent.confidence == 0.0

    @pytest.mark.parametrize("text", ["undo", "oops", "go back"])
    def test_undo(self, text):
        assert parse_command(text).type == IntentType.UNDO

    def test_redo(self):
        assert parse_command("redo").type == IntentType.REDO

    @pytest.mark.parametrize("text,value", [
        ("dark mode", "dark"),
        ("switch to light mode", "light"),
        ("night theme", "night"),
        ("toggle theme", "toggle"),
    ])
    def test_mode(self, text, value):
        intent = parse_command(text)
        assert intent.type == IntentType.MODE
        assert intent.value == value


class TestStyleCommands:
    """Tests for the style phrasings."""

    def test_make_target_value(self):
        intent = parse_command("make the background blue")
        assert intent.type == IntentType.STYLE
        assert intent.target == "background"
        assert intent.value == "blue"
        assert intent.delta is None
        assert intent.confidence == pytest.approx(0.9)

    def test_make_multiword_target_and_value(self):
        intent = parse_command("make the primary color light blue")
        assert intent.target == "primary color"
        assert intent.value == "light blue"

    @pytest.mark.parametrize("shade", sorted(k for k in COLOR_VALUES if " " in k))
    def test_make_target_multiword_color(self, shade):
        intent = parse_command(f"make the border {shade}")
        assert (intent.target, intent.value) == ("border", shade)

    def test_make_with_to_be(self):
        intent = parse_command("make the card to be dark gray")
        assert intent.target == "card"
        assert intent.value == "dark gray"

    def test_make_it_is_contextual(self):
        intent = parse_command("make it blue")
        assert intent.target == CONTEXTUAL_TARGET
        assert intent.scope == Scope.SELECTED
        assert intent.value == "blue"
        assert is_contextual_command(intent)

    def test_change_and_set(self):
        change = parse_command("change the text to dark gray")
        assert (change.target, change.value) == ("text", "dark gray")
        setter = parse_command("set corners to pill")
        assert (setter.target, setter.value) == ("corners", "pill")

    def test_use_for(self):
        intent = parse_command("use green for the buttons")
        assert (intent.target, intent.value) == ("buttons", "green")

    def test_equals(self):
        intent = parse_command("primary = red")
        assert (intent.target, intent.value) == ("primary", "red")

    def test_should_be(self):
        intent = parse_command("the sidebar should be navy")
        assert (intent.target, intent.value) == ("sidebar", "navy")

    def test_i_want(self):
        intent = parse_command("i want the background dark blue")
        assert intent.type == IntentType.STYLE
        assert (intent.target, intent.value) == ("background", "dark blue")


class TestRelativeCommands:
    """Tests for more/less and comparative forms."""

    def test_more_rounded(self):
        intent = parse_command("more rounded")
        assert intent.type == IntentType.STYLE
        assert intent.target == CONTEXTUAL_TARGET
        assert intent.value == "rounded"
        assert intent.delta == Delta.MORE
        assert is_relative_command(intent)

    def test_less(self):
        intent = parse_command("less saturated")
        assert intent.delta == Delta.LESS
        assert intent.value == "saturated"

    def test_a_bit(self):
        intent = parse_command("a bit less saturated")
        assert intent.delta == Delta.LESS
        assert intent.value == "saturated"

    def test_bare_comparative(self):
        intent = parse_command("rounder")
        assert intent.type == IntentType.STYLE
        assert intent.value == "rounded"
        assert intent.delta == Delta.MORE

    def test_comparative_with_target(self):
        intent = parse_command("softer corners")
        assert intent.target == "corners"
        assert intent.value == "soft"
        assert intent.delta == Delta.MORE

    def test_make_with_comparative_value(self):
        intent = parse_command("make the text darker")
        assert intent.target == "text"
        assert intent.value == "dark"
        assert intent.delta == Delta.MORE

    def test_comparative_table(self):
        assert comparative("rounder") == ("rounded", Delta.MORE)
        assert comparative("smaller") == ("large", Delta.LESS)
        assert comparative("water") is None
        assert comparative("er") is None


class TestVisibilityAndLayout:
    """Tests for commands this core only gives guidance for."""

    def test_hide(self):
        intent = parse_command("hide the sidebar")
        assert intent.type == IntentType.VISIBILITY
        assert (intent.target, intent.value) == ("sidebar", "hidden")

    def test_need(self):
        intent = parse_command("i need a chart")
        assert intent.type == IntentType.VISIBILITY
        assert (intent.target, intent.value) == ("chart", "visible")

    @pytest.mark.parametrize("text,value", [
        ("two columns", "2_column"),
        ("make it two columns", "2_column"),
        ("3 columns", "3_column"),
        ("sidebar on the left", "sidebar_left"),
        ("add a sidebar on the right", "sidebar_right"),
        ("side by side", "2_column"),
        ("grid layout", "grid"),
    ])
    def test_layout(self, text, value):
        intent = parse_command(text)
        assert intent.type == IntentType.LAYOUT
        assert intent.value == value


class TestColorsAndFallbacks:
    """Tests for bare colors and the positional fallback."""

    def test_bare_color(self):
        intent = parse_command("navy")
        assert intent.type == IntentType.STYLE
        assert intent.target == CONTEXTUAL_TARGET
        assert intent.value == "navy"

    def test_shaded_color(self):
        intent = parse_command("light blue")
        assert intent.value == "light-blue"

    def test_known_color_catch_all(self):
        intent = parse_command("crimson")
        assert intent.value == "crimson"
        assert intent.confidence == pytest.approx(0.55)

    def test_two_word_fallback(self):
        intent = parse_command("backgroud pink")
        assert intent.type == IntentType.STYLE
        assert (intent.target, intent.value) == ("backgroud", "pink")
        assert intent.confidence == pytest.approx(0.4)

    def test_three_word_fallback(self):
        intent = parse_command("border is red")
        assert (intent.target, intent.value) == ("border", "red")
        assert intent.confidence == pytest.approx(0.5)

    def test_gibberish_is_unknown(self):
        intent = parse_command("xyzzyqux flobbernaut")
        assert intent.type == IntentType.UNKNOWN
        assert intent.confidence == 0.0
        assert intent.raw == "xyzzyqux flobbernaut"


class TestHelpers:
    """Tests for the module-level helpers."""

    def test_normalize_target(self):
        assert normalize_target("  The Background ") == "background"

    def test_type_predicates(self):
        assert is_mode_command(parse_command("dark mode"))
        assert is_preset_command(parse_command("tone it down"))
        assert not is_relative_command(parse_command("make the background blue"))

    def test_custom_rules(self):
        parser = CommandParser(rules=[(r'^ping$', IntentType.UNDO, lambda match: {'confidence': 1.0})])
        assert parser.parse("PING").type == IntentType.UNDO
        # No custom rule covers it, and four words never reach the positional fallback
        assert parser.parse("make the background blue").type == IntentType.UNKNOWN

    def test_low_confidence_extraction_is_skipped(self):
        parser = CommandParser(rules=[
            (r'^(\w+)$', IntentType.UNDO, lambda match: {'confidence': 0.3}),
            (r'^(\w+)$', IntentType.REDO, lambda match: {'confidence': 0.9}),
        ])
        assert parser.parse("again").type == IntentType.REDO
