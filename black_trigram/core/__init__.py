"""Core shared types and services.

This package contains the pieces every game module builds on:
- game_enums.py: Enums and ordering constants
- data_structures.py: KoreanText, Vector2 and clamp
- config.py: Combat balance configuration and YAML overrides
- log_manager.py: Per-session categorized log
- random_source.py: Injectable random sources
"""

from .config import CombatConfig, DEFAULT_CONFIG, load_combat_config
from .data_structures import KoreanText, Vector2, clamp
from .log_manager import LogManager, LogMessage, LogCategory, LogLevel
from .random_source import RandomSource, NumpyRandomSource

__all__ = [
    "CombatConfig",
    "DEFAULT_CONFIG",
    "load_combat_config",
    "KoreanText",
    "Vector2",
    "clamp",
    "LogManager",
    "LogMessage",
    "LogCategory",
    "LogLevel",
    "RandomSource",
    "NumpyRandomSource",
]
