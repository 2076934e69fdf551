import random

import pytest

from spinwheel.config.settings import Settings, get_settings
from spinwheel.core.models import Slice


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    # Keep host environment and cached settings out of the tests
    for var in ("SPINWHEEL_DEBUG", "SPINWHEEL_THEME", "SPINWHEEL_SPIN__SEED"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_slices():
    def _make(count, label="Item", has_emoji=False):
        return [Slice(id=f"s{i}", label=f"{label} {i}", has_emoji=has_emoji) for i in range(count)]

    return _make
