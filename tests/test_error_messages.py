"""Tests for user-facing error and help text."""

from stylecmd.core.contracts import FuzzyMatch
from stylecmd.intent.error_messages import (
    EXAMPLE_COMMANDS,
    format_suggestions,
    get_contextual_examples,
    help_message,
    invalid_value_error,
    unknown_color_error,
    unknown_preset_error,
    unparseable_command_error,
)


class TestSuggestions:
    """Tests for format_suggestions and get_contextual_examples."""

    def test_format_suggestions(self):
        matches = [FuzzyMatch("blue", 0.9), FuzzyMatch("bule", 0.7)]
        assert format_suggestions(matches) == "Did you mean:\n  • blue\n  • bule"

    def test_format_no_suggestions(self):
        assert format_suggestions([]) == ""

    def test_examples_by_context(self):
        assert get_contextual_examples("radius")[0] == "make corners more rounded"
        assert get_contextual_examples("nonsense") == EXAMPLE_COMMANDS["general"]

    def test_examples_are_a_copy(self):
        get_contextual_examples("mode").append("reboot")
        assert "reboot" not in EXAMPLE_COMMANDS["mode"]


class TestErrors:
    """Tests for the error message builders."""

    def test_unknown_color_suggests(self):
        message = unknown_color_error("purplle")
        assert message.startswith('I\'m not sure what color "purplle" is.')
        assert "Did you mean:\n  • purple" in message

    def test_unknown_color_without_matches(self):
        message = unknown_color_error("zzqqxx")
        assert "Try colors like:" in message
        assert "Did you mean" not in message

    def test_unparseable_lists_general_examples(self):
        message = unparseable_command_error("blorp")
        assert message.startswith('I didn\'t understand: "blorp"')
        for example in EXAMPLE_COMMANDS["general"]:
            assert f'"{example}"' in message

    def test_invalid_value_for_corners(self):
        message = invalid_value_error("corners", "purple")
        assert "For corners, try:" in message

    def test_invalid_value_for_scale(self):
        assert 'Or say "more font size"' in invalid_value_error("font-size", "purple")

    def test_unknown_preset(self):
        assert '"modernize"' in unknown_preset_error("modernise")

    def test_help(self):
        assert "make it pop" in help_message()
