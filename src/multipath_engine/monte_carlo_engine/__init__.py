"""
Correlated multi-path Monte Carlo engine package
"""

from .time_grid import TimeGrid
from .diffusion_processes import (
    DiffusionProcess,
    BlackScholesProcess,
    LocalVolatilityProcess,
    OrnsteinUhlenbeckProcess,
)
from .covariance import (
    CovarianceFactorizer,
    CholeskyFactorizer,
    SpectralFactorizer,
    covariance_from_correlation,
    get_factorizer,
)
from .random_sequences import (
    Sample,
    RandomSequenceGenerator,
    PseudoRandomSequenceGenerator,
    SobolSequenceGenerator,
    get_sequence_generator,
)
from .multi_path import Path, MultiPath
from .correlated_step import CorrelatedStepTransform
from .base_engine import BasePathGenerator
from .multi_path_generator import MultiPathGenerator, build_multi_path_generator

__all__ = [
    'TimeGrid',
    'DiffusionProcess',
    'BlackScholesProcess',
    'LocalVolatilityProcess',
    'OrnsteinUhlenbeckProcess',
    'CovarianceFactorizer',
    'CholeskyFactorizer',
    'SpectralFactorizer',
    'covariance_from_correlation',
    'get_factorizer',
    'Sample',
    'RandomSequenceGenerator',
    'PseudoRandomSequenceGenerator',
    'SobolSequenceGenerator',
    'get_sequence_generator',
    'Path',
    'MultiPath',
    'CorrelatedStepTransform',
    'BasePathGenerator',
    'MultiPathGenerator',
    'build_multi_path_generator',
]
