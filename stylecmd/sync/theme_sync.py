"""
Theme Sync Scheduler.

Persists theme patches produced by the executor:
- Per-key pending patch map; patches for the same key deep-merge
- Debounced writes with cancellable timers (rescheduling resets the window)
- Status callbacks (saving / saved / error)

Writes happen on the timer thread. Sink failures are logged and reported
through status callbacks; they are never retried.
"""

from __future__ import annotations

import copy
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml
from loguru import logger


ThemePatch = Dict[str, Any]
ThemeSink = Callable[[str, ThemePatch], None]


class SyncStatus(Enum):
    """Lifecycle of one persistence write."""
    SAVING = "saving"
    SAVED = "saved"
    ERROR = "error"


SyncStatusCallback = Callable[[SyncStatus, str, Optional[Exception]], None]


def deep_merge(base: ThemePatch, update: ThemePatch) -> ThemePatch:
    """Merge update into a copy of base; nested dicts merge, other values replace."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


# ============================================================
# SINKS
# ============================================================

class YamlFileSink:
    """Writes each key's theme to <directory>/<key>.yaml, merged with what is there."""

    def __init__(self, directory: str):
        self.directory = Path(directory).expanduser()
        self._lock = threading.Lock()

    def path_for(self, key: str) -> Path:
        safe = "".join(c if c.isalnum() or c in "-_" else "_" for c in key)
        return self.directory / f"{safe}.yaml"

    def __call__(self, key: str, patch: ThemePatch):
        path = self.path_for(key)
        with self._lock:
            self.directory.mkdir(parents=True, exist_ok=True)
            current: ThemePatch = {}
            if path.exists():
                with open(path) as f:
                    current = yaml.safe_load(f) or {}
            with open(path, "w") as f:
                yaml.safe_dump(deep_merge(current, patch), f, default_flow_style=False, sort_keys=True)
        logger.debug(f"Wrote theme for {key} to {path}")

    def load(self, key: str) -> ThemePatch:
        """Stored theme for a key ({} when nothing was written)."""
        path = self.path_for(key)
        if not path.exists():
            return {}
        with open(path) as f:
            return yaml.safe_load(f) or {}


def logging_sink(key: str, patch: ThemePatch):
    """Sink that only logs; used when no persistence directory is configured."""
    logger.info(f"Theme patch for {key}: {patch}")


# ============================================================
# SCHEDULER
# ============================================================

class ThemeSyncScheduler:
    """
    Debounced, keyed persistence of theme patches.

    Guarantees:
    - At most one pending timer per key
    - Patches scheduled within one debounce window reach the sink as one merged write
    - The sink is never called while holding the scheduler lock
    """

    def __init__(self, sink: Optional[ThemeSink] = None, debounce_ms: int = 500):
        """
        Initialize scheduler.

        Args:
            sink: Callable receiving (key, merged patch); logs only when omitted
            debounce_ms: Quiet period before a key's pending patch is written
        """
        self.sink = sink or logging_sink
        self.debounce_ms = debounce_ms

        self._pending: Dict[str, ThemePatch] = {}
        self._timers: Dict[str, threading.Timer] = {}
        self._status_callbacks: List[SyncStatusCallback] = []
        self._lock = threading.Lock()

    def schedule_persist(self, key: str, patch: ThemePatch, immediate: bool = False):
        """
        Queue a patch for key.

        Args:
            key: Persistence key (e.g. app id)
            patch: Partial theme, e.g. {"colors": {"background": "217 91% 60%"}}
            immediate: Write now on the caller's thread instead of debouncing
        """
        with self._lock:
            existing_timer = self._timers.pop(key, None)
            if existing_timer:
                existing_timer.cancel()

            merged = deep_merge(self._pending.get(key, {}), patch)

            if immediate:
                self._pending.pop(key, None)
            else:
                self._pending[key] = merged
                timer = threading.Timer(self.debounce_ms / 1000.0, self._on_timer, args=(key,))
                timer.daemon = True
                self._timers[key] = timer
                timer.start()

        if immediate:
            self._perform(key, merged)
        else:
            logger.debug(f"Scheduled theme persist for {key} in {self.debounce_ms}ms")

    def flush(self, key: Optional[str] = None):
        """Write pending patches now (one key, or all)."""
        with self._lock:
            keys = [key] if key is not None else list(self._pending.keys())
            work = []
            for k in keys:
                timer = self._timers.pop(k, None)
                if timer:
                    timer.cancel()
                patch = self._pending.pop(k, None)
                if patch is not None:
                    work.append((k, patch))

        for k, patch in work:
            self._perform(k, patch)

    def shutdown(self, flush: bool = True):
        """Stop all timers, writing pending patches first unless flush is False."""
        if flush:
            self.flush()
        with self._lock:
            for timer in self._timers.values():
                timer.cancel()
            self._timers.clear()
            dropped = len(self._pending)
            self._pending.clear()
        if dropped:
            logger.warning(f"Dropped {dropped} pending theme patch(es) on shutdown")

    def pending(self, key: str) -> Optional[ThemePatch]:
        """Copy of the merged patch waiting for key, if any."""
        with self._lock:
            patch = self._pending.get(key)
            return copy.deepcopy(patch) if patch is not None else None

    def has_pending(self) -> bool:
        with self._lock:
            return bool(self._pending)

    def on_status(self, callback: SyncStatusCallback) -> Callable[[], None]:
        """
        Subscribe to sync status updates.

        Returns:
            Callable that removes the subscription
        """
        with self._lock:
            self._status_callbacks.append(callback)

        def unsubscribe():
            with self._lock:
                if callback in self._status_callbacks:
                    self._status_callbacks.remove(callback)

        return unsubscribe

    def _on_timer(self, key: str):
        with self._lock:
            self._timers.pop(key, None)
            patch = self._pending.pop(key, None)
        if patch is not None:
            self._perform(key, patch)

    def _perform(self, key: str, patch: ThemePatch):
        self._notify(SyncStatus.SAVING, key)
        try:
            self.sink(key, patch)
        except Exception as e:
            logger.error(f"Failed to persist theme for {key}: {e}")
            self._notify(SyncStatus.ERROR, key, e)
            return
        logger.info(f"Theme synced for {key}")
        self._notify(SyncStatus.SAVED, key)

    def _notify(self, status: SyncStatus, key: str, error: Optional[Exception] = None):
        with self._lock:
            callbacks = list(self._status_callbacks)
        for callback in callbacks:
            try:
                callback(status, key, error)
            except Exception as e:
                logger.error(f"Theme sync status callback error: {e}")
