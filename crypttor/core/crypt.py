"""Crypt class: one strategy, one transport format."""
from typing import Union

from .exceptions import InvalidInput
from .format import Format, FormatCodec
from .logging import get_logger
from .strategies import CipherStrategy

logger = get_logger(__name__)


class Crypt:
    """
    Encrypts and decrypts payloads with a strategy and a fixed format.

    Usage:
        >>> strategy = OpenSslStrategy(key)
        >>> crypt = Crypt(strategy, Format.HEX)
        >>> token = crypt.encrypt("hello world")
        >>> crypt.decrypt(token)
        b'hello world'
    """

    def __init__(self, strategy: CipherStrategy, format=Format.BASE64):
        """
        Initializes Crypt.

        Args:
            strategy: Cipher strategy doing the actual work
            format: Output/input format (RAW, BASE64 or HEX)

        Raises:
            InvalidFormat: If format is not a valid selector
        """
        self._strategy = strategy
        self._format = FormatCodec.validate(format)

    @property
    def strategy(self) -> CipherStrategy:
        return self._strategy

    @property
    def format(self) -> Format:
        return self._format

    def encrypt(self, data: Union[bytes, str]) -> Union[bytes, str]:
        """Encrypts data; str plaintext is encoded as UTF-8."""
        data = self._validate_data(data)
        if isinstance(data, str):
            data = data.encode('utf-8')
        framed = self._strategy.encrypt(data)
        logger.debug("Encrypted %d bytes into %d framed bytes", len(data), len(framed))
        return FormatCodec.encode(framed, self._format)

    def decrypt(self, data: Union[bytes, str]) -> bytes:
        """Decodes data from the configured format and decrypts it."""
        data = self._validate_data(data)
        framed = FormatCodec.decode(data, self._format)
        return self._strategy.decrypt(framed)

    @staticmethod
    def _validate_data(data):
        if not isinstance(data, (str, bytes, bytearray, memoryview)):
            raise InvalidInput("Data parameter must be a string")
        if len(data) == 0:
            raise InvalidInput("Data parameter cannot be empty")
        if isinstance(data, (bytearray, memoryview)):
            return bytes(data)
        return data
