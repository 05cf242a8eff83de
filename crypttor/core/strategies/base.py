"""Cipher strategies using Strategy Pattern."""
import importlib.util
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Union

from ..exceptions import (
    CryptEnvironmentError,
    UnsupportedAlgorithm,
    UnsupportedMode,
    InvalidKey,
)
from ..logging import get_logger

DEFAULT_ALGORITHM = 'aes'
DEFAULT_MODE = 'cbc'

logger = get_logger(__name__)


def normalize_token(token: str) -> Optional[str]:
    """Lower-cases and strips an algorithm or mode token, None if not a str."""
    if not isinstance(token, str):
        return None
    return token.strip().lower()


class CipherStrategy(ABC):
    """
    Abstract base class for cipher backends.

    Subclasses describe their backend through class-level tables and
    implement the primitive encrypt/decrypt calls. Validation of the
    algorithm, mode and key happens once, in the constructor; the
    instance is immutable afterwards, so encrypt/decrypt may be called
    concurrently.

    Class attributes:
        STRATEGY_NAME: Identifier used by the factory
        PRIMITIVE_MODULE: Top-level module of the primitive library
        ALGORITHMS: Algorithm token -> canonical cipher name
        MODES: Mode token -> canonical mode name
    """

    STRATEGY_NAME: str = ''
    PRIMITIVE_MODULE: str = ''
    ALGORITHMS: Dict[str, str] = {}
    MODES: Dict[str, str] = {}

    def __init__(
        self,
        key: Union[bytes, str],
        algorithm: str = DEFAULT_ALGORITHM,
        mode: str = DEFAULT_MODE
    ):
        self.validate_environment()
        self._algorithm = self._resolve_algorithm(algorithm)
        self._mode = self._resolve_mode(mode)
        self._key = self._validate_key(key)
        logger.debug(
            "Built %s strategy for %s (key floor %d bytes, IV %d bytes)",
            self.STRATEGY_NAME, self.cipher_name, self.key_size, self.iv_length
        )

    # -- Template operations -------------------------------------------------

    def encrypt(self, data: bytes) -> bytes:
        """Encrypts data and returns IV || ciphertext."""
        iv = self._random_bytes(self.iv_length)
        return iv + self._encrypt_raw(data, iv)

    def decrypt(self, data: bytes) -> bytes:
        """Splits IV || ciphertext and decrypts the ciphertext."""
        iv_length = self.iv_length
        iv, cipher_text = data[:iv_length], data[iv_length:]
        return self._decrypt_raw(cipher_text, iv)

    # -- Backend hooks -------------------------------------------------------

    @property
    @abstractmethod
    def key_size(self) -> int:
        """Minimum key size in bytes for the resolved algorithm and mode."""
        pass

    @property
    @abstractmethod
    def iv_length(self) -> int:
        """IV length in bytes for the resolved algorithm and mode."""
        pass

    @abstractmethod
    def _random_bytes(self, size: int) -> bytes:
        """Returns size bytes from the backend's CSPRNG."""
        pass

    @abstractmethod
    def _encrypt_raw(self, data: bytes, iv: bytes) -> bytes:
        """Encrypts data with the primitive cipher."""
        pass

    @abstractmethod
    def _decrypt_raw(self, data: bytes, iv: bytes) -> bytes:
        """Decrypts data with the primitive cipher."""
        pass

    @classmethod
    def _mode_available(cls, algorithm: str, mode: str) -> bool:
        """Whether the primitive library implements algorithm-mode."""
        return True

    # -- Introspection -------------------------------------------------------

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def cipher_name(self) -> str:
        """Canonical cipher identifier, e.g. 'aes-256-cbc'."""
        return f"{self.ALGORITHMS[self._algorithm]}-{self.MODES[self._mode]}"

    @classmethod
    def is_available(cls) -> bool:
        """Checks that the primitive library can be imported."""
        return importlib.util.find_spec(cls.PRIMITIVE_MODULE) is not None

    @classmethod
    def validate_environment(cls) -> None:
        """
        Raises:
            CryptEnvironmentError: If the primitive library is missing
        """
        if not cls.is_available():
            raise CryptEnvironmentError(
                f"{cls.PRIMITIVE_MODULE} is required by the {cls.STRATEGY_NAME} strategy "
                f"but is not installed"
            )

    @classmethod
    def supported_algorithms(cls) -> List[str]:
        return list(cls.ALGORITHMS)

    @classmethod
    def supported_modes(cls, algorithm: str = DEFAULT_ALGORITHM) -> List[str]:
        """Lists the mode tokens the primitive library implements for algorithm."""
        algorithm = normalize_token(algorithm)
        if algorithm not in cls.ALGORITHMS:
            return []
        return [mode for mode in cls.MODES if cls._mode_available(algorithm, mode)]

    @classmethod
    def supports(cls, algorithm: str, mode: str) -> bool:
        return normalize_token(mode) in cls.supported_modes(algorithm)

    # -- Validation ----------------------------------------------------------

    def _resolve_algorithm(self, algorithm: str) -> str:
        token = normalize_token(algorithm)
        if token not in self.ALGORITHMS:
            raise UnsupportedAlgorithm(
                f"The algorithm {algorithm!r} is not supported by {self.__class__.__name__}"
            )
        return token

    def _resolve_mode(self, mode: str) -> str:
        token = normalize_token(mode)
        if token not in self.MODES or not self._mode_available(self._algorithm, token):
            raise UnsupportedMode(
                f"The mode {mode!r} is not supported by {self._algorithm}"
            )
        return token

    def _validate_key(self, key: Union[bytes, str]) -> bytes:
        if isinstance(key, str):
            key = key.encode('utf-8')
        if not isinstance(key, (bytes, bytearray, memoryview)):
            raise InvalidKey("The key must be bytes or str")
        key = bytes(key)
        if not key:
            raise InvalidKey("The key cannot be empty")
        if len(key) < self.key_size:
            raise InvalidKey(
                f"The size of the key must be at least of {self.key_size} bytes"
            )
        return key

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(cipher={self.cipher_name!r})"
