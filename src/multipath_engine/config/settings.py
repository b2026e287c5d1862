"""
Configuration management for the multi-path engine
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.constants import (
    DEFAULT_RANDOM_SEED,
    PSD_TOLERANCE,
    FactorizationMethod,
    SequenceType,
)

_LOGGING_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

class EngineSettings(BaseSettings):
    """Engine settings, overridable through ``MULTIPATH_*`` environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="MULTIPATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Simulation
    random_seed: Optional[int] = Field(default=DEFAULT_RANDOM_SEED)
    sequence_type: str = Field(default=SequenceType.PSEUDO.value)
    sobol_scramble: bool = Field(default=True)

    # Linear algebra
    factorization: str = Field(default=FactorizationMethod.CHOLESKY.value)
    psd_tolerance: float = Field(default=PSD_TOLERANCE, ge=0.0)

    # Logging
    logging_level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("logs"))
    log_to_file: bool = Field(default=False)
    json_logs: bool = Field(default=False)

    @field_validator('sequence_type')
    @classmethod
    def validate_sequence_type(cls, v: str) -> str:
        v = v.lower()
        allowed = [member.value for member in SequenceType]
        if v not in allowed:
            raise ValueError(f"sequence_type must be one of {allowed}, got '{v}'")
        return v

    @field_validator('factorization')
    @classmethod
    def validate_factorization(cls, v: str) -> str:
        v = v.lower()
        allowed = [member.value for member in FactorizationMethod]
        if v not in allowed:
            raise ValueError(f"factorization must be one of {allowed}, got '{v}'")
        return v

    @field_validator('logging_level')
    @classmethod
    def validate_logging_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _LOGGING_LEVELS:
            raise ValueError(f"logging_level must be one of {list(_LOGGING_LEVELS)}, got '{v}'")
        return v

@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Return the process-wide settings instance"""
    return EngineSettings()
