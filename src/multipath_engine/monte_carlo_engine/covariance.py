"""
Covariance square-root factorizations
"""
import numpy as np
from typing import Dict, Sequence, Type, Union
from abc import ABC, abstractmethod
import logging

from ..utils.constants import PSD_TOLERANCE, SYMMETRY_TOLERANCE, FactorizationMethod
from ..utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

def covariance_from_correlation(
    volatilities: Union[Sequence[float], np.ndarray],
    correlation: Union[Sequence[Sequence[float]], np.ndarray]
) -> np.ndarray:
    """Covariance matrix diag(σ) ρ diag(σ)"""
    vols = np.asarray(volatilities, dtype=float)
    corr = np.asarray(correlation, dtype=float)
    if corr.shape != (vols.size, vols.size):
        raise ConfigurationError(
            f"correlation matrix shape {corr.shape} does not match {vols.size} volatilities"
        )
    return corr * np.outer(vols, vols)

class CovarianceFactorizer(ABC):
    """
    Abstract base class for covariance square roots

    ``factorize(C)`` returns S with S @ S.T == C (up to rounding).
    The factor is not unique; implementations choose one.
    """

    def __init__(self, tolerance: float = PSD_TOLERANCE):
        self.tolerance = tolerance

    def factorize(self, matrix: Union[Sequence[Sequence[float]], np.ndarray]) -> np.ndarray:
        covariance = self._validate(matrix)
        factor = self._factorize(covariance)
        logger.debug(f"{self.__class__.__name__} factorized a {covariance.shape[0]}x{covariance.shape[0]} covariance")
        return factor

    @abstractmethod
    def _factorize(self, covariance: np.ndarray) -> np.ndarray:
        pass

    def _validate(self, matrix) -> np.ndarray:
        covariance = np.asarray(matrix, dtype=float)
        if covariance.ndim != 2 or covariance.shape[0] != covariance.shape[1]:
            raise ConfigurationError(f"covariance matrix is not square: shape {covariance.shape}")
        if covariance.shape[0] == 0:
            raise ConfigurationError("covariance matrix is empty")
        if not np.all(np.isfinite(covariance)):
            raise ConfigurationError("covariance matrix contains non-finite entries")

        scale = max(float(np.max(np.abs(covariance))), 1.0)
        if not np.allclose(covariance, covariance.T, rtol=0.0, atol=SYMMETRY_TOLERANCE * scale):
            raise ConfigurationError("covariance matrix is not symmetric")
        return covariance

    def _spectral_root(self, covariance: np.ndarray) -> np.ndarray:
        eigenvalues, eigenvectors = np.linalg.eigh(covariance)

        scale = max(float(np.max(np.abs(eigenvalues))), 1.0)
        if eigenvalues[0] < -self.tolerance * scale:
            raise ConfigurationError(
                f"covariance matrix is not positive semi-definite "
                f"(smallest eigenvalue {eigenvalues[0]:.3e})"
            )

        eigenvalues = np.maximum(eigenvalues, 0.0)
        return eigenvectors @ np.diag(np.sqrt(eigenvalues)) @ eigenvectors.T

class CholeskyFactorizer(CovarianceFactorizer):
    """Lower-triangular Cholesky factor, spectral root for singular PSD matrices"""

    def _factorize(self, covariance: np.ndarray) -> np.ndarray:
        try:
            return np.linalg.cholesky(covariance)
        except np.linalg.LinAlgError:
            logger.info("Cholesky decomposition failed, using eigendecomposition")
            return self._spectral_root(covariance)

class SpectralFactorizer(CovarianceFactorizer):
    """Symmetric square root V diag(√λ) Vᵀ from the eigendecomposition"""

    def _factorize(self, covariance: np.ndarray) -> np.ndarray:
        return self._spectral_root(covariance)

_FACTORIZERS: Dict[str, Type[CovarianceFactorizer]] = {
    FactorizationMethod.CHOLESKY.value: CholeskyFactorizer,
    FactorizationMethod.SPECTRAL.value: SpectralFactorizer,
}

def get_factorizer(method: str, tolerance: float = PSD_TOLERANCE) -> CovarianceFactorizer:
    """Factorizer registered under ``method``"""
    try:
        factorizer_cls = _FACTORIZERS[method.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown factorization method: {method} (expected one of {sorted(_FACTORIZERS)})"
        ) from None
    return factorizer_cls(tolerance=tolerance)
