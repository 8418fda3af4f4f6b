"""Debounced theme persistence."""

from .theme_sync import (
    SyncStatus,
    ThemeSyncScheduler,
    YamlFileSink,
    deep_merge,
    logging_sink,
)
