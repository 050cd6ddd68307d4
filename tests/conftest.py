"""
Root test configuration and fixtures for tielog.

Provides participants, settings and small networks shared by the unit tests
under unit/.

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tielog.models import Participant  # noqa: E402
from tielog.network import SocialNetwork, TrendCache  # noqa: E402
from tielog.settings import Settings, get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings independent of the environment and any .env file."""
    return Settings(
        _env_file=None,
        date_format="%m/%d/%Y",
        strict_participants=True,
        log_level="INFO",
        log_source="test",
    )


@pytest.fixture
def ada():
    return Participant.with_id("ada", first_name="Ada", last_name="Lovelace")


@pytest.fixture
def grace():
    return Participant.with_id("grace", first_name="Grace", last_name="Hopper")


@pytest.fixture
def alan():
    return Participant.with_id("alan", first_name="Alan", last_name="Turing")


@pytest.fixture
def network(settings):
    """Empty network with a fresh trend cache."""
    return SocialNetwork(settings=settings, trend_cache=TrendCache())


@pytest.fixture
def populated_network(network):
    """Network with members a through f and no links."""
    for user_id in "abcdef":
        network.add_user(Participant.with_id(user_id))
    return network
