"""Tests for the interactive console entry point."""

import io

import pytest
from loguru import logger

from main import StyleConsole, parse_args, setup_logging
from stylecmd.config import InterpreterConfig
from stylecmd.core.contracts import ThemeMode


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def console(output):
    console = StyleConsole(output=output)
    yield console
    console.close()


class TestStyleConsole:
    """Tests for StyleConsole."""

    def test_command(self, console, output):
        assert console.handle("make the background blue")
        text = output.getvalue()
        assert "✓ Changed background to blue" in text
        assert "  background: 0 0% 100% -> 217 91% 60%" in text

    def test_failure_is_marked(self, console, output):
        console.handle("xyzzyqux flobbernaut")
        assert "✗ I didn't understand" in output.getvalue()

    def test_interpretation_is_shown(self, console, output):
        console.handle("backgroud pink")
        assert '  (Interpreted "backgroud" as "background")' in output.getvalue()

    @pytest.mark.parametrize("line", ["quit", "EXIT", "  quit  "])
    def test_quit(self, console, line):
        assert console.handle(line) is False

    def test_blank_line(self, console, output):
        assert console.handle("   ")
        assert output.getvalue() == ""

    def test_tokens(self, console, output):
        console.handle("dark mode")
        console.handle("tokens")
        text = output.getvalue()
        assert "mode: dark" in text
        assert "radius: 0.5rem" in text

    def test_select_component(self, console, output):
        console.handle("select component c1 card")
        assert "Selected component c1" in output.getvalue()
        console.handle("make it red")
        assert console.store.get("card") == "0 84% 60%"

    def test_select_page_and_none(self, console, output):
        console.handle("select page home")
        assert console.selection.kind == "page"
        console.handle("select none")
        assert console.selection is None
        assert "Selection cleared" in output.getvalue()

    def test_select_usage(self, console, output):
        console.handle("select component c1")
        assert "Usage: select" in output.getvalue()
        assert console.selection is None

    def test_run_stops_at_quit(self, output):
        console = StyleConsole(output=output)
        console.run(io.StringIO("dark mode\nquit\nlight mode\n"))
        assert console.store.get_mode() == ThemeMode.DARK

    def test_pending_theme_is_written_on_close(self, tmp_path, output):
        config = InterpreterConfig(debounce_ms=60_000)
        console = StyleConsole(config, persist_key="app-1", persist_dir=str(tmp_path), output=output)
        console.handle("make the background blue")
        console.close()
        assert console.scheduler.sink.load("app-1") == {"colors": {"background": "217 91% 60%"}}


class TestParseArgs:
    """Tests for parse_args."""

    def test_defaults(self):
        args = parse_args([])
        assert args.config is None
        assert args.log_level is None
        assert args.persist_key is None
        assert args.persist_dir is None

    def test_flags(self):
        args = parse_args(["-c", "my.yaml", "--log-level", "DEBUG", "-k", "app-1", "--persist-dir", "themes"])
        assert args.config == "my.yaml"
        assert args.log_level == "DEBUG"
        assert args.persist_key == "app-1"
        assert args.persist_dir == "themes"

    def test_invalid_log_level(self):
        with pytest.raises(SystemExit):
            parse_args(["--log-level", "LOUD"])


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_creates_log_directory(self, tmp_path):
        log_file = tmp_path / "logs" / "style.log"
        try:
            setup_logging("WARNING", str(log_file))
            assert log_file.parent.is_dir()
        finally:
            logger.remove()
