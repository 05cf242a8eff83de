"""
Custom exceptions for CryptTor operations.

This module defines the exception classes raised by the format codec,
the cipher strategies, the strategy factory and the façade.
"""
from typing import Optional


class CryptException(Exception):
    """Base exception for all CryptTor errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message (never contains key material)
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class InvalidInput(CryptException, ValueError):
    """Raised when the payload to encrypt/decrypt is empty or not a string."""
    pass


class InvalidFormat(CryptException, ValueError):
    """Raised for an unknown format selector."""
    pass


class FormatError(InvalidFormat):
    """Raised when encoded text cannot be decoded with the selected format."""
    pass


class UnknownStrategy(CryptException, ValueError):
    """Raised when a strategy identifier does not name a backend."""
    pass


class UnsupportedAlgorithm(CryptException, ValueError):
    """Raised when an algorithm token is not in the backend's table."""
    pass


class UnsupportedMode(CryptException, ValueError):
    """Raised when a mode token is not available for the algorithm."""
    pass


class InvalidKey(CryptException, ValueError):
    """Raised when the key is empty or shorter than the required size."""
    pass


class CryptEnvironmentError(CryptException, RuntimeError):
    """Raised when the primitive library of a backend is not installed."""
    pass


class EncryptionFailure(CryptException):
    """Raised when the primitive cipher fails to encrypt."""
    pass


class DecryptionFailure(CryptException):
    """
    Raised when the primitive cipher fails to decrypt.

    Wrong keys, corrupted data and truncated input cannot be told apart
    since the framed ciphertext carries no authentication tag.
    """
    pass
