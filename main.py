#!/usr/bin/env python3
"""
Style Command Console

Interactive entry point for the natural-language style command interpreter.
Reads one command per line from stdin and applies it to an in-memory token
store.

Usage:
    python main.py [--config CONFIG_PATH] [--persist-key KEY] [--persist-dir DIR]

Console Commands:
    tokens                          - Print every token value and the mode
    select component <id> <kind>    - Select a component (e.g. select component c1 card)
    select page <id>                - Select a page
    select none                     - Clear the selection
    help / ?                        - What you can say
    quit / exit                     - Quit

Example Commands:
    "make the background blue"
    "backgroud pink"
    "more rounded"
    "dark mode"
    "tone it down"
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from dotenv import load_dotenv
from loguru import logger

from stylecmd.config import InterpreterConfig, load_config
from stylecmd.core.contracts import ExecutionResult, SelectionContext
from stylecmd.core.token_store import InMemoryTokenStore
from stylecmd.pipeline.executor import CommandExecutor
from stylecmd.sync.theme_sync import SyncStatus, ThemeSyncScheduler, YamlFileSink, logging_sink


# ============================================================
# LOGGING CONFIGURATION
# ============================================================

def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """Configure logging."""
    logger.remove()  # Remove default handler

    # Console output with colors
    logger.add(
        sys.stderr,
        level=log_level,
        format="<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>",
        colorize=True,
    )

    # File output
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {module}:{line} | {message}",
            rotation="10 MB",
            retention="7 days",
        )


# ============================================================
# CONSOLE
# ============================================================

class StyleConsole:
    """
    Line-oriented console over a CommandExecutor.

    Owns the token store, the persistence scheduler and the current selection.
    """

    def __init__(
        self,
        config: Optional[InterpreterConfig] = None,
        persist_key: Optional[str] = None,
        persist_dir: Optional[str] = None,
        output: TextIO = sys.stdout,
    ):
        self.config = config or InterpreterConfig()
        self.persist_key = persist_key
        self.output = output

        persist_dir = persist_dir or self.config.persist_dir
        sink = YamlFileSink(persist_dir) if persist_dir else logging_sink

        self.store = InMemoryTokenStore()
        self.scheduler = ThemeSyncScheduler(sink, debounce_ms=self.config.debounce_ms)
        self.scheduler.on_status(self._on_sync_status)
        self.executor = CommandExecutor(self.store, self.scheduler, self.config)
        self.selection: Optional[SelectionContext] = None

        logger.info(f"Console ready (persist_key={persist_key}, persist_dir={persist_dir})")

    def handle(self, line: str) -> bool:
        """
        Handle one input line.

        Returns:
            False when the console should stop
        """
        command = line.strip()
        if not command:
            return True

        lowered = command.lower()
        if lowered in ('quit', 'exit'):
            return False
        if lowered == 'tokens':
            self._print_tokens()
            return True
        if lowered == 'select' or lowered.startswith('select '):
            self._select(command.split()[1:])
            return True

        result = self.executor.execute(command, self.selection, self.persist_key)
        self._print_result(result)
        return True

    def run(self, stream: TextIO = sys.stdin):
        """Read commands until EOF or quit."""
        self._write('Type a style command ("help" for ideas, "quit" to exit).')
        try:
            for line in stream:
                if not self.handle(line):
                    break
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            self.close()

    def close(self):
        """Write pending theme patches and stop timers."""
        self.scheduler.shutdown(flush=True)

    def _select(self, args: List[str]):
        if not args or args[0].lower() == 'none':
            self.selection = None
            self._write("Selection cleared")
            return

        kind = args[0].lower()
        if kind == 'component' and len(args) >= 3:
            self.selection = SelectionContext(kind='component', id=args[1], component_kind=args[2].lower())
        elif kind == 'page' and len(args) >= 2:
            self.selection = SelectionContext(kind='page', id=args[1])
        else:
            self._write("Usage: select component <id> <kind> | select page <id> | select none")
            return
        self._write(f"Selected {kind} {args[1]}")

    def _print_result(self, result: ExecutionResult):
        mark = '✓' if result.success else '✗'
        self._write(f"{mark} {result.message}")
        if result.interpretation:
            self._write(f"  ({result.interpretation})")
        for change in result.changes:
            self._write(f"  {change.token_id}: {change.old_value} -> {change.new_value}")

    def _print_tokens(self):
        self._write(f"mode: {self.store.get_mode().value}")
        for token_id, value in sorted(self.store.snapshot().items()):
            self._write(f"{token_id}: {value}")

    def _on_sync_status(self, status: SyncStatus, key: str, error: Optional[Exception]):
        if status == SyncStatus.ERROR:
            logger.warning(f"Theme for {key} was not saved: {error}")

    def _write(self, text: str):
        print(text, file=self.output)


# ============================================================
# ENTRY POINT
# ============================================================

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Natural-language style command console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to configuration file (default: $STYLECMD_CONFIG or config/settings.yaml)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from config, INFO)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Log file path (default: from config, none)",
    )

    parser.add_argument(
        "--persist-key", "-k",
        type=str,
        default=None,
        help="Persist theme changes under this key (e.g. an app id)",
    )

    parser.add_argument(
        "--persist-dir",
        type=str,
        default=None,
        help="Directory for persisted theme YAML files (default: from config, log only)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    load_dotenv()
    args = parse_args(argv)

    config = load_config(args.config)

    # Setup logging
    setup_logging(args.log_level or config.log_level, args.log_file or config.log_file)

    console = StyleConsole(config, persist_key=args.persist_key, persist_dir=args.persist_dir)
    console.run()


if __name__ == "__main__":
    main()
