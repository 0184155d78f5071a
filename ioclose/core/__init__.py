"""Core value types: results, errors and configuration."""

from .config import Config, ConfigError, ReportConfig, load_config, load_config_or_default
from .errors import CloseFailed
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "Config",
    "ConfigError",
    "ReportConfig",
    "load_config",
    "load_config_or_default",
    # errors
    "CloseFailed",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
