"""Error types raised by the relay and its helpers.

Helpers raise the most specific type and chain the library exception that
caused it. Only the HTTP boundary turns them into a response.
"""

__all__ = [
    "ConfigurationError",
    "CryptoError",
    "MemeRelayError",
    "NetworkError",
    "ParseError",
    "StorageError",
    "ValidationError",
]


class MemeRelayError(Exception):
    """Base class for every error raised by meme_relay."""


class ConfigurationError(MemeRelayError):
    """A required configuration value is missing or empty."""


class NetworkError(MemeRelayError):
    """An HTTP request failed, returned a non-success status or no body."""


class ParseError(MemeRelayError):
    """A response body is not valid JSON or lacks the expected fields."""


class ValidationError(MemeRelayError):
    """Input is well-typed but unusable, e.g. an empty meme list."""


class CryptoError(MemeRelayError):
    """Key or IV has the wrong size, or a ciphertext cannot be decrypted."""


class StorageError(MemeRelayError, OSError):
    """A file could not be written."""
