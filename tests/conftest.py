"""Shared pytest fixtures."""

import pytest

from stylecmd.core.token_store import InMemoryTokenStore
from stylecmd.pipeline.executor import CommandExecutor


class RecordingPersistence:
    """Persistence collaborator that records schedule_persist calls."""

    def __init__(self):
        self.calls = []

    def schedule_persist(self, key, patch):
        self.calls.append((key, patch))


@pytest.fixture(autouse=True)
def isolate_config_env(monkeypatch):
    """Keep a developer's $STYLECMD_CONFIG out of the tests."""
    monkeypatch.delenv("STYLECMD_CONFIG", raising=False)


@pytest.fixture
def store():
    return InMemoryTokenStore()


@pytest.fixture
def persistence():
    return RecordingPersistence()


@pytest.fixture
def executor(store, persistence):
    return CommandExecutor(store, persistence)
