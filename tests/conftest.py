"""Pytest fixtures for CryptTor tests."""
import pytest
from Crypto.Random import get_random_bytes

from crypttor.core.logging import reset_logging
from crypttor.core.strategies import OpenSslStrategy


@pytest.fixture
def aes_key():
    """Returns the 32-byte key used by the documented AES-CBC example."""
    return b"\x01" * 32


@pytest.fixture
def random_key():
    """Generates a random key of the requested size."""
    return get_random_bytes


@pytest.fixture
def plaintext():
    """Sample plaintext that does not end in NUL bytes."""
    return b"The quick brown fox jumps over the lazy dog"


@pytest.fixture(autouse=True)
def clean_logging():
    """Removes handlers attached by configure_logging after each test."""
    yield
    reset_logging()


@pytest.fixture
def require_openssl_cipher():
    """Returns a helper skipping the test when OpenSSL lacks algorithm-mode."""
    def check(algorithm: str, mode: str) -> None:
        if not OpenSslStrategy.supports(algorithm, mode):
            pytest.skip(f"OpenSSL does not provide {algorithm}-{mode} here")
    return check
