"""
Pytest configuration for homekit-label tests

Isolates config discovery and provides deterministic random sources
"""
import random

import pytest

from homekit_label.config.loader import invalidate_config_cache


class ScriptedRandom:
    """Random source returning pre-recorded randint() results in order"""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test from an empty directory with an empty HOME"""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    invalidate_config_cache()
    yield
    invalidate_config_cache()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
