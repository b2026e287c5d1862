"""
Logging configuration for the multi-path engine
"""

import logging
import logging.config
import sys
from datetime import datetime
from typing import Any, Dict, Optional

ENGINE_LOGGER_NAME = "multipath_engine"

def build_logging_config(settings) -> Dict[str, Any]:
    """Build a ``dictConfig`` payload from engine settings"""
    console_formatter = "json" if settings.json_logs else "simple"

    log_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
            "simple": {
                "format": "%(levelname)s - %(name)s - %(message)s"
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(funcName)s %(lineno)d %(message)s"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.logging_level,
                "formatter": console_formatter,
                "stream": sys.stderr
            }
        },
        "loggers": {
            ENGINE_LOGGER_NAME: {
                "level": settings.logging_level,
                "handlers": ["console"],
                "propagate": False
            }
        }
    }

    if settings.log_to_file:
        log_config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "json" if settings.json_logs else "detailed",
            "filename": str(settings.log_dir / "multipath_engine.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5
        }
        log_config["loggers"][ENGINE_LOGGER_NAME]["handlers"].append("file")

    return log_config

def setup_logging(settings=None) -> None:
    """Setup logging configuration"""
    if settings is None:
        from ..config.settings import get_settings
        settings = get_settings()

    if settings.log_to_file:
        settings.log_dir.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(build_logging_config(settings))

class EngineLogger:
    """Structured event logger for generator lifecycle events"""

    def __init__(self, name: str):
        if not name.startswith(ENGINE_LOGGER_NAME):
            name = f"{ENGINE_LOGGER_NAME}.{name}"
        self.logger = logging.getLogger(name)

    def log_generator_built(self, generator_type: str, params: Dict[str, Any]):
        """Log generator construction"""
        self.logger.info(
            f"{generator_type} ready: {params.get('n_assets')} assets, {params.get('n_steps')} steps",
            extra={
                "event_type": "generator_built",
                "generator_type": generator_type,
                "parameters": params,
                "timestamp": datetime.now().isoformat()
            }
        )

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None):
        """Log error with context"""
        self.logger.error(
            f"Error occurred: {str(error)}",
            extra={
                "event_type": "error",
                "error_type": type(error).__name__,
                "error_message": str(error),
                "context": context or {},
                "timestamp": datetime.now().isoformat()
            },
            exc_info=True
        )
