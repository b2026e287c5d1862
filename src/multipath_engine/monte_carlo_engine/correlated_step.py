"""
Correlation transform applied to each time step's independent draws
"""
import numpy as np
from typing import Sequence, Union
import logging

from ..utils.constants import DEGENERATE_ROW_TOLERANCE
from ..utils.exceptions import ConfigurationError, DegenerateCovarianceError

logger = logging.getLogger(__name__)

class CorrelatedStepTransform:
    """
    Turn a block of independent normals into unit-scale correlated shocks

    shock = (S @ z) / ||S[k, :]||

    Dividing by the row norms gives every component unit variance while
    keeping the correlation implied by S; volatility magnitude comes from
    each asset's own process instead. Every row is normalised, whatever
    the number of assets.
    """

    def __init__(self, sqrt_covariance: Union[Sequence[Sequence[float]], np.ndarray]):
        factor = np.array(sqrt_covariance, dtype=float)
        if factor.ndim != 2 or factor.shape[0] != factor.shape[1]:
            raise ConfigurationError(f"covariance factor is not square: shape {factor.shape}")

        row_norms = np.linalg.norm(factor, axis=1)
        degenerate = np.flatnonzero(row_norms <= DEGENERATE_ROW_TOLERANCE * np.max(row_norms, initial=0.0))
        if degenerate.size:
            raise DegenerateCovarianceError(
                f"covariance factor has (numerically) zero-norm rows {degenerate.tolist()}: "
                f"fully deterministic assets cannot be given unit-scale shocks",
                rows=degenerate.tolist()
            )

        factor.setflags(write=False)
        row_norms.setflags(write=False)
        self._factor = factor
        self._row_norms = row_norms

    @property
    def size(self) -> int:
        return self._factor.shape[0]

    @property
    def factor(self) -> np.ndarray:
        return self._factor

    @property
    def row_norms(self) -> np.ndarray:
        return self._row_norms

    def correlation(self) -> np.ndarray:
        """Correlation matrix implied by the factor"""
        scaled = self._factor / self._row_norms[:, np.newaxis]
        return scaled @ scaled.T

    def __call__(self, block: Union[Sequence[float], np.ndarray]) -> np.ndarray:
        draws = np.asarray(block, dtype=float)
        if draws.shape != (self.size,):
            raise ValueError(f"expected a block of {self.size} draws, got shape {draws.shape}")
        return (self._factor @ draws) / self._row_norms
