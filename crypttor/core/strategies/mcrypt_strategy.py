"""Legacy mcrypt-compatible cipher strategy backed by pycryptodome."""
import importlib
from types import ModuleType

from ..exceptions import EncryptionFailure, DecryptionFailure, UnsupportedAlgorithm
from ..logging import get_logger
from .base import CipherStrategy, normalize_token

logger = get_logger(__name__)


class MCryptStrategy(CipherStrategy):
    """
    Legacy backend reproducing the libmcrypt conventions.

    - The minimum key size is the largest key the cipher accepts
      (what mcrypt_get_key_size reported).
    - CBC plaintext is padded with NUL bytes up to the block size and the
      original length is not recorded.
    - Every mode uses a block-sized IV; for CTR it is the initial counter.
    - Decryption strips trailing NUL bytes in every mode. Plaintexts that
      legitimately end in NUL bytes come back truncated.

    pycryptodome is imported lazily so a host without it fails with
    CryptEnvironmentError at construction instead of at import time.
    """

    STRATEGY_NAME = 'mcrypt'
    PRIMITIVE_MODULE = 'Crypto'

    ALGORITHMS = {
        'aes': 'rijndael-128',
        'rijndael-128': 'rijndael-128',
        'blowfish': 'blowfish',
        'des': 'des',
        '3des': 'tripledes',
        'tripledes': 'tripledes',
        'cast-128': 'cast-128',
    }

    MODES = {
        'cbc': 'cbc',
        'cfb': 'cfb',
        'ctr': 'ctr',
        'ofb': 'ofb',
        'nofb': 'nofb',
        'ncfb': 'ncfb',
    }

    # mcrypt cipher name -> (Crypto.Cipher module, key size in bytes)
    PRIMITIVES = {
        'rijndael-128': ('AES', 32),
        'blowfish': ('Blowfish', 56),
        'des': ('DES', 8),
        'tripledes': ('DES3', 24),
        'cast-128': ('CAST', 16),
    }

    # Known to libmcrypt, not implemented by pycryptodome
    UNAVAILABLE_ALGORITHMS = frozenset({
        'cast-256',
        'rijndael-192',
        'rijndael-256',
        'saferplus',
        'serpent',
        'twofish',
    })

    @property
    def _primitive(self):
        return self.PRIMITIVES[self.ALGORITHMS[self._algorithm]]

    @property
    def key_size(self) -> int:
        return self._primitive[1]

    @property
    def block_size(self) -> int:
        """Cipher block size in bytes."""
        return self._cipher_module().block_size

    @property
    def iv_length(self) -> int:
        return self.block_size

    def _cipher_module(self) -> ModuleType:
        return importlib.import_module(f"Crypto.Cipher.{self._primitive[0]}")

    def _random_bytes(self, size: int) -> bytes:
        return importlib.import_module('Crypto.Random').get_random_bytes(size)

    def _resolve_algorithm(self, algorithm: str) -> str:
        if normalize_token(algorithm) in self.UNAVAILABLE_ALGORITHMS:
            raise UnsupportedAlgorithm(
                f"The algorithm {algorithm!r} is not provided by the primitive library"
            )
        return super()._resolve_algorithm(algorithm)

    def _new_cipher(self, iv: bytes):
        module = self._cipher_module()
        key = self._key[:self.key_size]
        mode = self._mode
        if mode == 'cbc':
            return module.new(key, module.MODE_CBC, iv=iv)
        if mode == 'cfb':
            return module.new(key, module.MODE_CFB, iv=iv, segment_size=8)
        if mode == 'ncfb':
            return module.new(key, module.MODE_CFB, iv=iv, segment_size=module.block_size * 8)
        if mode == 'ctr':
            return module.new(key, module.MODE_CTR, nonce=b'', initial_value=iv)
        # ofb and nofb: pycryptodome only implements full-block OFB
        return module.new(key, module.MODE_OFB, iv=iv)

    def _encrypt_raw(self, data: bytes, iv: bytes) -> bytes:
        try:
            if self._mode == 'cbc':
                data = data + b'\0' * (-len(data) % self.block_size)
            return self._new_cipher(iv).encrypt(data)
        except (ValueError, TypeError) as e:
            raise EncryptionFailure(f"Encryption failed with {self.cipher_name}") from e

    def _decrypt_raw(self, data: bytes, iv: bytes) -> bytes:
        try:
            raw = self._new_cipher(iv).decrypt(data)
        except (ValueError, TypeError) as e:
            raise DecryptionFailure(f"Decryption failed with {self.cipher_name}") from e
        plaintext = raw.rstrip(b'\0')
        if len(plaintext) != len(raw):
            logger.debug("Stripped %d trailing NUL bytes", len(raw) - len(plaintext))
        return plaintext
