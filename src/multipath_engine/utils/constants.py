"""
Engine constants and enums
"""

from enum import Enum

# Simulation Constants
DEFAULT_RANDOM_SEED = 42

# Numerical tolerances
PSD_TOLERANCE = 1e-10
SYMMETRY_TOLERANCE = 1e-8
TIME_TOLERANCE = 1e-12

# Factor rows shorter than this fraction of the longest row carry no randomness
DEGENERATE_ROW_TOLERANCE = 1e-6

# Uniforms are clipped to this distance from 0 and 1 before the inverse normal
UNIFORM_CLIP = 1e-12

class SequenceType(Enum):
    """Random sequence families"""
    PSEUDO = "pseudo"
    SOBOL = "sobol"

class FactorizationMethod(Enum):
    """Covariance square-root methods"""
    CHOLESKY = "cholesky"
    SPECTRAL = "spectral"
