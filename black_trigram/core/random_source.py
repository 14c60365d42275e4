"""
Injectable random sources for combat rolls.

The resolver and the training scorer never touch a global generator. They take
a RandomSource at construction, so a seeded source reproduces a whole match
and tests can script exact rolls.
"""
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class RandomSource(ABC):
    """Base class for random number providers."""

    @abstractmethod
    def random(self) -> float:
        """Return a float uniformly drawn from [0.0, 1.0)."""
        pass

    def uniform(self, low: float, high: float) -> float:
        """Return a float uniformly drawn from [low, high)."""
        return low + (high - low) * self.random()


class NumpyRandomSource(RandomSource):
    """Random source backed by a numpy Generator."""

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the source.

        Args:
            seed: Seed for reproducible sequences (None draws OS entropy)
        """
        self.seed = seed
        self._generator = np.random.default_rng(seed)

    def random(self) -> float:
        return float(self._generator.random())

    def uniform(self, low: float, high: float) -> float:
        return float(self._generator.uniform(low, high))
