"""
Shared fixtures for the multi-path engine tests
"""
import pytest
import numpy as np

from multipath_engine.monte_carlo_engine.diffusion_processes import DiffusionProcess
from multipath_engine.monte_carlo_engine.random_sequences import RandomSequenceGenerator, Sample
from multipath_engine.monte_carlo_engine.time_grid import TimeGrid


class ConstantVolatilityProcess(DiffusionProcess):
    """Zero-drift process with variance σ²·dt"""

    def __init__(self, initial_value: float = 100.0, volatility: float = 0.2, drift_rate: float = 0.0):
        super().__init__(initial_value)
        self.volatility = volatility
        self.drift_rate = drift_rate

    def drift(self, t, x):
        return self.drift_rate

    def diffusion(self, t, x):
        return self.volatility


class RecordingProcess(ConstantVolatilityProcess):
    """Constant-volatility process that records every (t, x) it is evaluated at"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.drift_calls = []
        self.variance_calls = []

    def drift(self, t, x):
        self.drift_calls.append((t, x))
        return super().drift(t, x)

    def variance(self, t, x, dt):
        self.variance_calls.append((t, x, dt))
        return super().variance(t, x, dt)


class FixedSequenceGenerator(RandomSequenceGenerator):
    """Replays pre-set draw vectors with a chosen weight"""

    def __init__(self, sequences, weight: float = 1.0):
        sequences = [np.asarray(s, dtype=float) for s in sequences]
        super().__init__(sequences[0].size)
        self._sequences = sequences
        self._weight = weight
        self._calls = 0

    def next_sequence(self) -> Sample:
        values = self._sequences[self._calls % len(self._sequences)]
        self._calls += 1
        self._last = Sample(value=values.copy(), weight=self._weight)
        return self._last

    def _draw(self):
        raise AssertionError("next_sequence is overridden")


@pytest.fixture
def quarterly_grid():
    """One year split into four quarters"""
    return TimeGrid.uniform(end=1.0, steps=4)


@pytest.fixture
def correlation_half():
    """Two-asset correlation matrix with ρ = 0.5"""
    return np.array([[1.0, 0.5], [0.5, 1.0]])


@pytest.fixture
def two_asset_covariance():
    """Covariance for vols 20% / 30% with ρ = 0.5"""
    vols = np.array([0.2, 0.3])
    corr = np.array([[1.0, 0.5], [0.5, 1.0]])
    return corr * np.outer(vols, vols)
