from .config import Config, load_config
from .errors import (
    ConfigurationError,
    CryptoError,
    MemeRelayError,
    NetworkError,
    ParseError,
    StorageError,
    ValidationError,
)
from .logger import Logger

__all__ = [
    "Config",
    "ConfigurationError",
    "CryptoError",
    "Logger",
    "MemeRelayError",
    "NetworkError",
    "ParseError",
    "StorageError",
    "ValidationError",
    "load_config",
]
