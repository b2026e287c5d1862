"""
Shared utilities: exceptions, constants and logging setup
"""

from .exceptions import (
    MultiPathEngineException,
    ConfigurationError,
    DegenerateCovarianceError,
    SimulationError,
)
from .constants import SequenceType, FactorizationMethod
from .logging_config import setup_logging, EngineLogger

__all__ = [
    'MultiPathEngineException',
    'ConfigurationError',
    'DegenerateCovarianceError',
    'SimulationError',
    'SequenceType',
    'FactorizationMethod',
    'setup_logging',
    'EngineLogger',
]
