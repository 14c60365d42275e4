"""
Basic test fixtures for the Black Trigram test suite.

Provides players, scripted randomness and session services shared across
the combat and training tests.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from black_trigram.core.config import CombatConfig
from black_trigram.core.game_enums import PlayerArchetype, TrigramStance
from black_trigram.core.log_manager import LogManager, LogLevel
from black_trigram.game.entities.player_state import create_player
from tests.test_utils import ScriptedRandom


@pytest.fixture
def config():
    """Default combat configuration."""
    return CombatConfig()


@pytest.fixture
def log_manager():
    """Log manager with debug output visible."""
    return LogManager(default_level=LogLevel.DEBUG)


@pytest.fixture
def musa():
    """Warrior in Geon stance with full resources."""
    return create_player(PlayerArchetype.MUSA, 0, stance=TrigramStance.GEON)


@pytest.fixture
def opponent():
    """Second warrior in Geon stance to receive strikes."""
    return create_player(PlayerArchetype.MUSA, 1, stance=TrigramStance.GEON)


@pytest.fixture
def perfect_rolls():
    """Random source that always rolls zero (perfect accuracy)."""
    return ScriptedRandom([0.0])


@pytest.fixture
def missing_rolls():
    """Random source that always rolls just under one (always misses)."""
    return ScriptedRandom([0.999])
