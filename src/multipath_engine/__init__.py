"""
Multi-Path Engine
Correlated multi-asset path generation for Monte Carlo pricing
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .monte_carlo_engine import *
from .monte_carlo_engine import __all__ as _engine_all

from .config import EngineSettings, get_settings
from .utils import (
    MultiPathEngineException,
    ConfigurationError,
    DegenerateCovarianceError,
    SimulationError,
    setup_logging,
)

__all__ = list(_engine_all) + [
    'EngineSettings',
    'get_settings',
    'MultiPathEngineException',
    'ConfigurationError',
    'DegenerateCovarianceError',
    'SimulationError',
    'setup_logging',
]
