"""
Custom exceptions for the multi-path engine
"""

class MultiPathEngineException(Exception):
    """Base exception for the multi-path engine"""
    pass

class ConfigurationError(MultiPathEngineException):
    """Exception raised when a generator or collaborator is built from inconsistent inputs"""
    pass

class DegenerateCovarianceError(ConfigurationError):
    """Exception raised when a covariance factor has a row with zero norm"""
    def __init__(self, message: str, rows=None):
        super().__init__(message)
        self.rows = list(rows) if rows is not None else []

class SimulationError(MultiPathEngineException):
    """Exception raised for path production errors not attributable to a model"""
    pass
