"""Tests for more/less computations on scales and HSL colors."""

import pytest

from stylecmd.core.contracts import Delta
from stylecmd.intent.relative_computer import (
    FONT_WEIGHT_SCALE,
    RADIUS_SCALE,
    RelativeValueComputer,
    adjust_saturation,
    compute_relative_change,
    compute_relative_color,
    compute_relative_scale,
    make_darker,
    make_lighter,
    resolve_scale_term,
)


@pytest.fixture
def computer(store):
    return RelativeValueComputer(store)


class TestScale:
    """Tests for the discrete Scale helpers."""

    def test_step_for_stored_value(self):
        assert RADIUS_SCALE.step_for("0.5rem") == "md"
        assert RADIUS_SCALE.step_for(" 9999px ") == "full"

    def test_step_for_reading(self):
        assert RADIUS_SCALE.step_for("0px") == "none"
        assert RADIUS_SCALE.step_for("1.5rem") == "xl"

    def test_unknown_value_is_default_step(self):
        assert RADIUS_SCALE.step_for("3px") == "md"
        assert RADIUS_SCALE.step_for(None) == "md"

    def test_move_saturates(self):
        assert RADIUS_SCALE.move("full", 1) == "full"
        assert RADIUS_SCALE.move("none", -1) == "none"
        assert FONT_WEIGHT_SCALE.move("400", 1) == "500"

    def test_move_from_unknown_step(self):
        assert RADIUS_SCALE.move("huge", 1) == "lg"

    def test_lookup(self):
        assert RADIUS_SCALE.lookup("LG") == "lg"
        assert RADIUS_SCALE.lookup("pill") == "full"
        assert RADIUS_SCALE.lookup("enormous") is None


class TestRelativeColor:
    """Tests for compute_relative_color."""

    def test_lightness_clamps(self):
        result = compute_relative_color("0 0% 95%", "more", "lightness")
        assert result.success
        assert result.new_value == "0 0% 100%"
        assert result.property == "lightness"

    def test_saturation_clamps_at_zero(self):
        result = compute_relative_color("217 5% 60%", Delta.LESS, "saturation")
        assert result.new_value == "217 0% 60%"

    def test_hue_wraps(self):
        assert compute_relative_color("350 50% 50%", Delta.MORE, "hue").new_value == "20 50% 50%"
        assert compute_relative_color("10 50% 50%", Delta.LESS, "hue").new_value == "340 50% 50%"

    def test_contrast_on_light_color(self):
        result = compute_relative_color("217 91% 60%", Delta.MORE, "contrast")
        assert result.new_value == "217 100% 65%"

    def test_contrast_on_dark_color(self):
        assert compute_relative_color("217 50% 40%", Delta.MORE, "contrast").new_value == "217 65% 35%"
        assert compute_relative_color("217 50% 40%", Delta.LESS, "contrast").new_value == "217 35% 45%"

    def test_rounds_fractional_components(self):
        result = compute_relative_color("240 5.9% 10%", Delta.MORE, "saturation")
        assert result.new_value == "240 16% 10%"

    @pytest.mark.parametrize("value", ["", "#ffffff", "blue", "217 91 60"])
    def test_unparseable(self, value):
        result = compute_relative_color(value, Delta.MORE, "lightness")
        assert not result.success
        assert result.error == "Could not parse color value"

    def test_unknown_property(self):
        result = compute_relative_color("217 91% 60%", Delta.MORE, "glow")
        assert result.error == "Unknown property: glow"


class TestRelativeScale:
    """Tests for compute_relative_scale and resolve_scale_term."""

    def test_step_up(self):
        result = compute_relative_scale(RADIUS_SCALE, "0.5rem", Delta.MORE)
        assert result.new_value == "0.75rem"
        assert result.step == "lg"
        assert result.token_id == "radius"
        assert result.property == "borderRadius"

    def test_top_of_scale_is_idempotent(self):
        result = compute_relative_scale(RADIUS_SCALE, "9999px", Delta.MORE)
        assert result.success
        assert result.new_value == "9999px"

    @pytest.mark.parametrize("token_id,term,expected", [
        ("spacing", "roomy", ("lg", "1.5rem")),
        ("font-weight", "bold", ("700", "700")),
        ("radius", "pill", ("full", "9999px")),
        ("radius", "sm", ("sm", "0.25rem")),
    ])
    def test_resolve_scale_term(self, token_id, term, expected):
        assert resolve_scale_term(token_id, term) == expected

    def test_resolve_scale_term_misses(self):
        assert resolve_scale_term("background", "big") is None
        assert resolve_scale_term("radius", "enormous") is None


class TestRelativeValueComputer:
    """Tests for RelativeValueComputer against a token store."""

    def test_rounded(self, computer):
        result = computer.compute("rounded", Delta.MORE)
        assert result.token_id == "radius"
        assert result.new_value == "0.75rem"

    def test_inverted_word(self, computer):
        assert computer.compute("sharp", Delta.MORE).new_value == "0.25rem"
        assert computer.compute("thin", Delta.MORE).new_value == "300"

    def test_reads_current_value(self, store, computer):
        store.set("radius", "1rem")
        assert computer.compute("rounded", Delta.MORE).new_value == "9999px"

    def test_unknown_stored_radius(self, store, computer):
        store.set("radius", "3px")
        result = computer.compute("rounded", Delta.MORE)
        assert result.step == "lg"

    @pytest.mark.parametrize("word,direction,token_id,expected", [
        ("bold", Delta.MORE, "font-weight", "500"),
        ("spacing", Delta.LESS, "spacing", "0.75rem"),
        ("large", Delta.MORE, "font-size", "1.125rem"),
        ("small", Delta.MORE, "font-size", "0.875rem"),
        ("text size", "less", "font-size", "0.875rem"),
    ])
    def test_scale_words(self, computer, word, direction, token_id, expected):
        result = computer.compute(word, direction)
        assert result.token_id == token_id
        assert result.new_value == expected

    def test_color_word_on_bound_token(self, computer):
        result = computer.compute("darker", Delta.MORE, "background")
        assert result.success
        assert result.new_value == "0 0% 90%"
        assert result.token_id is None

    def test_phrase_falls_back_to_words(self, computer):
        result = computer.compute("vivid colors", Delta.MORE, "primary")
        assert result.property == "saturation"
        assert result.new_value == "240 16% 10%"

    def test_color_without_token(self, computer):
        result = computer.compute("contrast", Delta.MORE)
        assert not result.success
        assert result.error == "No color to adjust"

    def test_color_with_empty_token(self, computer):
        assert computer.compute("lighter", Delta.MORE, "no-such-token").error == "No color to adjust"

    def test_unknown_word(self, computer):
        result = computer.compute("sparkle", Delta.MORE, "primary")
        assert not result.success
        assert result.error == 'Cannot compute relative change for "sparkle"'

    def test_never_writes(self, store, computer):
        before = store.snapshot()
        computer.compute("rounded", Delta.MORE)
        computer.compute("darker", Delta.MORE, "background")
        assert store.snapshot() == before

    def test_functional_form(self, store):
        result = compute_relative_change("lighter", Delta.LESS, "background", store)
        assert result.new_value == "0 0% 90%"


class TestColorHelpers:
    """Tests for make_lighter, make_darker and adjust_saturation."""

    def test_make_lighter(self):
        assert make_lighter("0 0% 95%") == "0 0% 100%"
        assert make_lighter("0 0% 50%", amount=5) == "0 0% 55%"

    def test_make_darker(self):
        assert make_darker("0 0% 5%") == "0 0% 0%"
        assert make_darker("not a color") is None

    def test_adjust_saturation(self):
        assert adjust_saturation("200 50% 50%", -60) == "200 0% 50%"
        assert adjust_saturation("", 10) is None
