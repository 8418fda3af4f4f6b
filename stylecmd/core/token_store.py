"""
Token Store.

The interpreter reads and writes design tokens through the TokenStore
protocol. InMemoryTokenStore is the reference implementation used by the
console and the tests:
- Thread-safe key -> string map
- Light/dark mode flag
- Change subscriptions with unsubscribe handles
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol

from loguru import logger

from stylecmd.core.color import to_hsl_value
from stylecmd.core.contracts import ThemeMode


# Tokens whose values are lengths / scale values rather than colors
NON_COLOR_TOKENS = frozenset({"radius", "spacing", "font-size", "font-weight", "mode"})

DEFAULT_TOKENS: Dict[str, str] = {
    "background": "0 0% 100%",
    "foreground": "240 10% 3.9%",
    "card": "0 0% 100%",
    "card-foreground": "240 10% 3.9%",
    "popover": "0 0% 100%",
    "popover-foreground": "240 10% 3.9%",
    "primary": "240 5.9% 10%",
    "primary-foreground": "0 0% 98%",
    "secondary": "240 4.8% 95.9%",
    "secondary-foreground": "240 5.9% 10%",
    "muted": "240 4.8% 95.9%",
    "muted-foreground": "240 3.8% 46.1%",
    "accent": "240 4.8% 95.9%",
    "accent-foreground": "240 5.9% 10%",
    "destructive": "0 84.2% 60.2%",
    "destructive-foreground": "0 0% 98%",
    "border": "240 5.9% 90%",
    "input": "240 5.9% 90%",
    "ring": "240 5.9% 10%",
    "chart-1": "12 76% 61%",
    "chart-2": "173 58% 39%",
    "chart-3": "197 37% 24%",
    "chart-4": "43 74% 66%",
    "chart-5": "27 87% 67%",
    "sidebar-background": "0 0% 98%",
    "sidebar-foreground": "240 5.3% 26.1%",
    "sidebar-primary": "240 5.9% 10%",
    "sidebar-primary-foreground": "0 0% 98%",
    "sidebar-accent": "240 4.8% 95.9%",
    "sidebar-accent-foreground": "240 5.9% 10%",
    "sidebar-border": "220 13% 91%",
    "radius": "0.5rem",
    "spacing": "1rem",
    "font-size": "1rem",
    "font-weight": "400",
}


@dataclass(frozen=True)
class TokenChangeEvent:
    """Emitted to subscribers after every write."""
    token_id: str
    old_value: str
    new_value: str


TokenChangeCallback = Callable[[TokenChangeEvent], None]


class TokenStore(Protocol):
    """Interface the interpreter consumes."""

    def get(self, token_id: str) -> str: ...

    def set(self, token_id: str, value: str) -> None: ...

    def get_mode(self) -> ThemeMode: ...

    def set_mode(self, mode: ThemeMode) -> None: ...


class InMemoryTokenStore:
    """
    In-memory design token store.

    Color values written through set() are normalized to "H S% L%";
    scale tokens (radius, spacing, typography) are stored verbatim.
    """

    def __init__(
        self,
        defaults: Optional[Dict[str, str]] = None,
        mode: ThemeMode = ThemeMode.LIGHT,
    ):
        """
        Initialize token store.

        Args:
            defaults: Initial token values (DEFAULT_TOKENS if omitted)
            mode: Initial theme mode
        """
        self._defaults: Dict[str, str] = dict(DEFAULT_TOKENS if defaults is None else defaults)
        self._default_mode = mode
        self._tokens: Dict[str, str] = dict(self._defaults)
        self._mode = mode
        self._subscribers: List[TokenChangeCallback] = []
        self._lock = threading.Lock()

    def get(self, token_id: str) -> str:
        """Current value of a token, or "" when unset."""
        with self._lock:
            return self._tokens.get(token_id, "")

    def set(self, token_id: str, value: str):
        """Write a token and notify subscribers."""
        if token_id not in NON_COLOR_TOKENS:
            value = to_hsl_value(value)
        with self._lock:
            old_value = self._tokens.get(token_id, "")
            self._tokens[token_id] = value
        logger.debug(f"Token {token_id}: {old_value!r} -> {value!r}")
        self._emit(TokenChangeEvent(token_id, old_value, value))

    def get_mode(self) -> ThemeMode:
        with self._lock:
            return self._mode

    def set_mode(self, mode: ThemeMode):
        with self._lock:
            old_mode = self._mode
            self._mode = mode
        logger.debug(f"Mode: {old_mode.value} -> {mode.value}")
        self._emit(TokenChangeEvent("mode", old_mode.value, mode.value))

    def subscribe(self, callback: TokenChangeCallback) -> Callable[[], None]:
        """
        Register a change callback.

        Returns:
            Callable that removes the subscription
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe():
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def reset(self):
        """Restore the initial tokens and mode."""
        with self._lock:
            self._tokens = dict(self._defaults)
            self._mode = self._default_mode
        logger.info("Token store reset to defaults")

    def snapshot(self) -> Dict[str, str]:
        """Copy of all current token values."""
        with self._lock:
            return dict(self._tokens)

    def _emit(self, event: TokenChangeEvent):
        with self._lock:
            callbacks = list(self._subscribers)
        for callback in callbacks:
            try:
                callback(event)
            except Exception as e:
                logger.error(f"Token change callback error: {e}")
