from abc import ABC, abstractmethod
from typing import Iterable, List, Tuple

import numpy as np

from .exceptions import InvalidParameter, RandomSourceExhausted


class RandomSource(ABC):
    """
    Supplier of independent random draws for the period step.

    Subclasses implement the raw draws; parameter checks live here so every
    source rejects the same inputs.
    """
    def sample_normal(self, mean: float, sigma: float) -> float:
        """
        Draws one sample from Normal(mean, sigma).

        Args:
            mean (float): Location of the distribution.
            sigma (float): Standard deviation, must be > 0.

        Returns:
            float: The sample.
        """
        if sigma <= 0:
            raise InvalidParameter(f"sigma must be > 0, got {sigma}", field='sigma')
        return self._normal(mean, sigma)

    def sample_uniform(self, low: float, high: float) -> float:
        """
        Draws one sample from Uniform[low, high).
        """
        if low > high:
            raise InvalidParameter(f"uniform range is empty: low={low} > high={high}", field='low')
        return self._uniform(low, high)

    @abstractmethod
    def _normal(self, mean: float, sigma: float) -> float:
        pass

    @abstractmethod
    def _uniform(self, low: float, high: float) -> float:
        pass


class NumpyRandomSource(RandomSource):
    """Exact normal and uniform sampling on top of numpy's PCG64 generator."""
    def __init__(self, seed=None):
        if isinstance(seed, np.random.SeedSequence):
            self.seed_sequence = seed
        else:
            self.seed_sequence = np.random.SeedSequence(seed)
        self._rng = np.random.default_rng(self.seed_sequence)

    def _normal(self, mean, sigma):
        return float(self._rng.normal(mean, sigma))

    def _uniform(self, low, high):
        return float(self._rng.uniform(low, high))

    def spawn(self, n: int) -> List['NumpyRandomSource']:
        """Returns n statistically independent child sources."""
        return [NumpyRandomSource(child) for child in self.seed_sequence.spawn(n)]


class ScriptedRandomSource(RandomSource):
    """
    Replays fixed draws, for deterministic tests and replays.

    normals are standard-normal values z, returned as mean + z * sigma.
    uniforms are values u in [0, 1], returned as low + u * (high - low).
    """
    def __init__(self, normals: Iterable[float] = (), uniforms: Iterable[float] = ()):
        self.normals = list(normals)
        self.uniforms = list(uniforms)
        self._normal_pos = 0
        self._uniform_pos = 0

    def _normal(self, mean, sigma):
        if self._normal_pos >= len(self.normals):
            raise RandomSourceExhausted(f"scripted normal draws exhausted after {self._normal_pos}")
        z = self.normals[self._normal_pos]
        self._normal_pos += 1
        return mean + z * sigma

    def _uniform(self, low, high):
        if self._uniform_pos >= len(self.uniforms):
            raise RandomSourceExhausted(f"scripted uniform draws exhausted after {self._uniform_pos}")
        u = self.uniforms[self._uniform_pos]
        self._uniform_pos += 1
        return low + u * (high - low)

    @property
    def remaining(self) -> Tuple[int, int]:
        return (len(self.normals) - self._normal_pos, len(self.uniforms) - self._uniform_pos)
