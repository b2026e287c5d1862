"""
Random sequence generators feeding the path generators
"""
import numpy as np
from typing import Dict, Generic, Optional, Type, TypeVar
from abc import ABC, abstractmethod
from dataclasses import dataclass
from scipy.stats import norm, qmc
import logging

from ..utils.constants import UNIFORM_CLIP, SequenceType
from ..utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

@dataclass
class Sample(Generic[T]):
    """A drawn value together with its importance-sampling weight"""
    value: T
    weight: float = 1.0

class RandomSequenceGenerator(ABC):
    """
    Abstract base class for fixed-dimension sequence generators

    Each call to ``next_sequence`` advances the generator and returns a
    fresh vector of ``dimension`` independent standard normal draws.
    """

    def __init__(self, dimension: int, seed: Optional[int] = None):
        if dimension <= 0:
            raise ConfigurationError(f"sequence dimension ({dimension}) must be positive")
        self._dimension = int(dimension)
        self.seed = seed
        self._last: Optional[Sample] = None

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def last_sequence(self) -> Optional[Sample]:
        return self._last

    def next_sequence(self) -> Sample:
        values = self._draw()
        self._last = Sample(value=values, weight=1.0)
        return self._last

    @abstractmethod
    def _draw(self) -> np.ndarray:
        """Return ``dimension`` standard normal variates"""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dimension={self._dimension}, seed={self.seed})"

class PseudoRandomSequenceGenerator(RandomSequenceGenerator):
    """Gaussian draws from numpy's default bit generator"""

    def __init__(self, dimension: int, seed: Optional[int] = None):
        super().__init__(dimension, seed)
        self._rng = np.random.default_rng(seed)

    def _draw(self) -> np.ndarray:
        return self._rng.standard_normal(self._dimension)

class SobolSequenceGenerator(RandomSequenceGenerator):
    """
    Sobol low-discrepancy points mapped to normals by inverse transform

    Points are drawn from scipy in blocks whose sizes keep the running
    count a power of two, then handed out one per call.
    """

    def __init__(
        self,
        dimension: int,
        seed: Optional[int] = None,
        scramble: bool = True,
        batch_size: int = 1024
    ):
        super().__init__(dimension, seed)
        if batch_size <= 0 or batch_size & (batch_size - 1):
            raise ConfigurationError(f"Sobol batch size ({batch_size}) must be a power of 2")
        self.scramble = scramble
        self.batch_size = batch_size
        self._sampler = qmc.Sobol(d=self._dimension, scramble=scramble, seed=seed)
        self._buffer = np.empty((0, self._dimension))
        self._cursor = 0

    def _refill(self):
        first_batch = self._sampler.num_generated == 0
        n_points = max(self._sampler.num_generated, self.batch_size)
        self._buffer = self._sampler.random(n_points)
        self._cursor = 0
        if first_batch and not self.scramble:
            # the first unscrambled Sobol point is the origin
            self._cursor = 1

    def _draw(self) -> np.ndarray:
        while self._cursor >= len(self._buffer):
            self._refill()
        uniforms = self._buffer[self._cursor]
        self._cursor += 1
        uniforms = np.clip(uniforms, UNIFORM_CLIP, 1.0 - UNIFORM_CLIP)
        return norm.ppf(uniforms)

_SEQUENCE_GENERATORS: Dict[str, Type[RandomSequenceGenerator]] = {
    SequenceType.PSEUDO.value: PseudoRandomSequenceGenerator,
    SequenceType.SOBOL.value: SobolSequenceGenerator,
}

def get_sequence_generator(
    kind: str,
    dimension: int,
    seed: Optional[int] = None,
    **kwargs
) -> RandomSequenceGenerator:
    """Sequence generator registered under ``kind``"""
    try:
        generator_cls = _SEQUENCE_GENERATORS[kind.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown sequence type: {kind} (expected one of {sorted(_SEQUENCE_GENERATORS)})"
        ) from None
    return generator_cls(dimension, seed=seed, **kwargs)
