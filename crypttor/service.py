"""
CryptService - one-call encryption and decryption.

Builds a strategy and a Crypt for every call; nothing is shared between
calls except the stateless factory.
"""
from typing import Union

from .core.crypt import Crypt
from .core.format import Format
from .core.strategies import StrategyFactory, OpenSslStrategy, DEFAULT_ALGORITHM, DEFAULT_MODE


class CryptService:
    """
    Convenience entry point.

    Defaults to the openssl strategy, AES in CBC mode and raw output.

    Usage:
        >>> service = CryptService()
        >>> token = service.encrypt(b"secret", key)
        >>> service.decrypt(token, key)
        b'secret'
    """

    def __init__(self, factory: StrategyFactory = None):
        self.factory = factory or StrategyFactory()

    def encrypt(
        self,
        data: Union[bytes, str],
        key: Union[bytes, str],
        strategy: str = OpenSslStrategy.STRATEGY_NAME,
        format=Format.RAW,
        algorithm: str = DEFAULT_ALGORITHM,
        mode: str = DEFAULT_MODE
    ) -> Union[bytes, str]:
        """Encrypts data with a freshly built strategy."""
        cipher = self.factory.build(strategy, key, algorithm, mode)
        return Crypt(cipher, format).encrypt(data)

    def decrypt(
        self,
        data: Union[bytes, str],
        key: Union[bytes, str],
        strategy: str = OpenSslStrategy.STRATEGY_NAME,
        format=Format.RAW,
        algorithm: str = DEFAULT_ALGORITHM,
        mode: str = DEFAULT_MODE
    ) -> bytes:
        """Decrypts data with a freshly built strategy."""
        cipher = self.factory.build(strategy, key, algorithm, mode)
        return Crypt(cipher, format).decrypt(data)


_service = CryptService()


def encrypt(data, key, strategy=OpenSslStrategy.STRATEGY_NAME, format=Format.RAW,
            algorithm=DEFAULT_ALGORITHM, mode=DEFAULT_MODE):
    """Encrypts data (module-level shortcut for CryptService.encrypt)."""
    return _service.encrypt(data, key, strategy, format, algorithm, mode)


def decrypt(data, key, strategy=OpenSslStrategy.STRATEGY_NAME, format=Format.RAW,
            algorithm=DEFAULT_ALGORITHM, mode=DEFAULT_MODE):
    """Decrypts data (module-level shortcut for CryptService.decrypt)."""
    return _service.decrypt(data, key, strategy, format, algorithm, mode)
