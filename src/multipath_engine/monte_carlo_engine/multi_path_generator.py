"""
Correlated multi-asset path generator
"""

import math
import numpy as np
import logging
from typing import Optional, Sequence, Tuple, Union

from ..config.settings import EngineSettings, get_settings
from ..utils.constants import SequenceType
from ..utils.exceptions import ConfigurationError, SimulationError
from ..utils.logging_config import EngineLogger
from .base_engine import BasePathGenerator
from .correlated_step import CorrelatedStepTransform
from .covariance import CholeskyFactorizer, CovarianceFactorizer, get_factorizer
from .diffusion_processes import DiffusionProcess
from .multi_path import MultiPath
from .random_sequences import RandomSequenceGenerator, Sample, get_sequence_generator
from .time_grid import TimeGrid

logger = logging.getLogger(__name__)
event_logger = EngineLogger(__name__)

class MultiPathGenerator(BasePathGenerator):
    """
    Generates correlated multi-asset paths from a random sequence generator

    The covariance factor is computed once at construction. Each call to
    ``next`` consumes one sequence of n_assets * n_steps normals, block i
    feeding grid interval i, and advances every asset with the log-Euler
    step

        drift[j][i]     = dt * μ_j(t, x_j)
        diffusion[j][i] = -shock[j] * sqrt(Var_j(t, x_j, dt))
        x_j            *= exp(drift[j][i] + diffusion[j][i])

    with t = grid[i+1], so drift and variance follow the simulated level.

    The returned sample is owned by the generator and overwritten by the
    next call; use ``sample.value.copy()`` to keep a path. Instances are
    not thread-safe.
    """

    def __init__(
        self,
        processes: Sequence[DiffusionProcess],
        drifts: Union[Sequence[float], np.ndarray],
        covariance: Union[Sequence[Sequence[float]], np.ndarray],
        time_grid: TimeGrid,
        generator: RandomSequenceGenerator,
        factorizer: Optional[CovarianceFactorizer] = None
    ):
        self._processes = tuple(processes)
        covariance = np.asarray(covariance, dtype=float)
        drifts = np.asarray(drifts, dtype=float).ravel()

        if covariance.ndim != 2 or covariance.shape[0] != covariance.shape[1]:
            raise ConfigurationError(
                f"MultiPathGenerator covariance is not a square matrix: shape {covariance.shape}"
            )
        self._n_assets = covariance.shape[0]

        if len(time_grid) < 2:
            raise ConfigurationError("MultiPathGenerator: no times given")
        self._time_grid = time_grid
        self._n_steps = len(time_grid) - 1

        expected_dimension = self._n_assets * self._n_steps
        if generator.dimension != expected_dimension:
            raise ConfigurationError(
                f"MultiPathGenerator's dimension ({generator.dimension}) is not equal to "
                f"({self._n_assets} * {self._n_steps}) the number of assets times the number of time steps"
            )
        if drifts.size != self._n_assets:
            raise ConfigurationError(
                f"MultiPathGenerator covariance ({self._n_assets} assets) and drifts "
                f"({drifts.size}) do not have the same size"
            )
        if len(self._processes) != self._n_assets:
            raise ConfigurationError(
                f"MultiPathGenerator covariance ({self._n_assets} assets) and processes "
                f"({len(self._processes)}) do not have the same size"
            )

        self._factorizer = factorizer or CholeskyFactorizer()
        sqrt_covariance = self._factorizer.factorize(covariance)
        if sqrt_covariance.shape != (self._n_assets, self._n_assets):
            raise ConfigurationError(
                f"MultiPathGenerator covariance factor has shape {sqrt_covariance.shape}, "
                f"expected ({self._n_assets}, {self._n_assets})"
            )
        self._transform = CorrelatedStepTransform(sqrt_covariance)
        self._generator = generator

        self._next = Sample(MultiPath(self._n_assets, time_grid), 1.0)
        self._last_draw: Optional[Sample] = None

        dts = time_grid.dts
        for j, path in enumerate(self._next.value):
            path.drift[:] = drifts[j] * dts

        event_logger.log_generator_built(
            self.__class__.__name__,
            {
                'n_assets': self._n_assets,
                'n_steps': self._n_steps,
                'horizon': time_grid.end - time_grid.start,
                'sequence_generator': type(generator).__name__,
                'factorizer': type(self._factorizer).__name__,
            }
        )

    @property
    def n_assets(self) -> int:
        return self._n_assets

    @property
    def n_steps(self) -> int:
        return self._n_steps

    @property
    def dimension(self) -> int:
        return self._n_assets * self._n_steps

    @property
    def processes(self) -> Tuple[DiffusionProcess, ...]:
        return self._processes

    @property
    def time_grid(self) -> TimeGrid:
        return self._time_grid

    @property
    def sequence_generator(self) -> RandomSequenceGenerator:
        return self._generator

    @property
    def sqrt_covariance(self) -> np.ndarray:
        return self._transform.factor.copy()

    @property
    def step_transform(self) -> CorrelatedStepTransform:
        return self._transform

    @property
    def sample(self) -> Sample:
        """The sample handed out by ``next`` and ``antithetic``"""
        return self._next

    def next(self) -> Sample:
        """Draw a fresh multi-path; the returned sample is reused by later calls"""
        sequence = self._generator.next_sequence()
        draws = np.array(sequence.value, dtype=float)
        if draws.shape != (self.dimension,):
            raise SimulationError(
                f"sequence generator returned {draws.size} values, expected {self.dimension}"
            )
        self._last_draw = Sample(draws, sequence.weight)
        logger.debug(f"Drew sequence of {draws.size} values with weight {sequence.weight}")
        try:
            return self._fill(draws, sequence.weight)
        except Exception as e:
            event_logger.log_error(e, {"operation": "next", "n_assets": self._n_assets})
            raise

    def antithetic(self) -> Sample:
        """
        Path driven by the negated draws of the last ``next`` call

        The whole recurrence is re-run on -z, so state-dependent drift and
        variance are evaluated along the mirrored path rather than by
        flipping the signs of the previous increments.
        """
        if self._last_draw is None:
            raise SimulationError("MultiPathGenerator: antithetic() requires a previous call to next()")
        logger.debug("Building antithetic path from the last drawn sequence")
        try:
            return self._fill(-self._last_draw.value, self._last_draw.weight)
        except Exception as e:
            event_logger.log_error(e, {"operation": "antithetic", "n_assets": self._n_assets})
            raise

    def _fill(self, draws: np.ndarray, weight: float) -> Sample:
        multi_path = self._next.value
        self._next.weight = weight

        asset = [process.initial_value for process in self._processes]
        n_assets = self._n_assets
        grid = self._time_grid

        for i in range(self._n_steps):
            offset = i * n_assets
            t = grid[i + 1]
            dt = grid.dt(i)
            shock = self._transform(draws[offset:offset + n_assets])

            for j, process in enumerate(self._processes):
                path = multi_path[j]
                drift = dt * process.drift(t, asset[j])
                diffusion = -shock[j] * math.sqrt(process.variance(t, asset[j], dt))
                path.drift[i] = drift
                path.diffusion[i] = diffusion
                asset[j] *= math.exp(drift + diffusion)

        return self._next

def build_multi_path_generator(
    processes: Sequence[DiffusionProcess],
    drifts: Union[Sequence[float], np.ndarray],
    covariance: Union[Sequence[Sequence[float]], np.ndarray],
    time_grid: TimeGrid,
    settings: Optional[EngineSettings] = None,
    seed: Optional[int] = None
) -> MultiPathGenerator:
    """
    Build a MultiPathGenerator with collaborators chosen by settings

    Args:
        processes: One diffusion process per asset
        drifts: Deterministic drift rate per asset
        covariance: Asset covariance matrix
        time_grid: Simulation grid
        settings: Engine settings (process-wide settings if omitted)
        seed: Overrides ``settings.random_seed``

    Returns:
        Configured generator
    """
    settings = settings or get_settings()
    n_assets = np.asarray(covariance, dtype=float).shape[0] if np.ndim(covariance) == 2 else 0
    if len(time_grid) < 2:
        raise ConfigurationError("MultiPathGenerator: no times given")
    dimension = n_assets * (len(time_grid) - 1)
    if dimension <= 0:
        raise ConfigurationError("MultiPathGenerator covariance is empty or not a matrix")

    seed = settings.random_seed if seed is None else seed
    extra = {'scramble': settings.sobol_scramble} if settings.sequence_type == SequenceType.SOBOL.value else {}
    generator = get_sequence_generator(settings.sequence_type, dimension, seed=seed, **extra)
    factorizer = get_factorizer(settings.factorization, tolerance=settings.psd_tolerance)

    return MultiPathGenerator(
        processes=processes,
        drifts=drifts,
        covariance=covariance,
        time_grid=time_grid,
        generator=generator,
        factorizer=factorizer
    )
