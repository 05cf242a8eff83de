"""OpenSSL cipher strategy backed by the cryptography library."""
import os
from typing import Dict, Optional, Tuple, Type

from cryptography.exceptions import UnsupportedAlgorithm as PrimitiveUnsupportedAlgorithm
from cryptography.hazmat.decrepit.ciphers.algorithms import CAST5, SEED, Blowfish, Camellia, TripleDES
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..exceptions import EncryptionFailure, DecryptionFailure
from ..logging import get_logger
from .base import CipherStrategy

logger = get_logger(__name__)


class OpenSslStrategy(CipherStrategy):
    """
    Feature-rich backend over OpenSSL (through cryptography).

    CBC and ECB ciphertexts carry PKCS#7 padding, like OpenSSL's EVP
    defaults; CFB and OFB output has the same length as the input.
    A mode is only accepted when the linked OpenSSL actually builds the
    <algorithm>-<mode> cipher, which matters for the legacy ciphers
    (Blowfish, CAST5, SEED, DES) that live in OpenSSL's legacy provider.
    """

    STRATEGY_NAME = 'openssl'
    PRIMITIVE_MODULE = 'cryptography'

    ALGORITHMS = {
        'aes': 'aes-256',
        'blowfish': 'bf',
        'des': 'des',
        'camellia': 'camellia-256',
        'cast5': 'cast5',
        'seed': 'seed',
    }

    MODES = {
        'cbc': 'cbc',
        'cfb': 'cfb',
        'ofb': 'ofb',
        'ecb': 'ecb',
    }

    # Algorithm token -> (primitive class, key size in bytes)
    # des runs as TripleDES keyed K1=K2=K3, which is single DES.
    CIPHERS: Dict[str, Tuple[Type, int]] = {
        'aes': (algorithms.AES, 32),
        'blowfish': (Blowfish, 56),
        'des': (TripleDES, 8),
        'camellia': (Camellia, 32),
        'cast5': (CAST5, 16),
        'seed': (SEED, 16),
    }

    PADDED_MODES = frozenset({'cbc', 'ecb'})

    @property
    def key_size(self) -> int:
        return self.CIPHERS[self._algorithm][1]

    @property
    def block_size(self) -> int:
        """Cipher block size in bytes."""
        return self.CIPHERS[self._algorithm][0].block_size // 8

    @property
    def iv_length(self) -> int:
        if self._mode == 'ecb':
            return 0
        return self.block_size

    def _random_bytes(self, size: int) -> bytes:
        return os.urandom(size)

    @classmethod
    def _build_cipher(cls, algorithm: str, mode: str, key: bytes, iv: bytes) -> Cipher:
        cipher_cls, key_size = cls.CIPHERS[algorithm]
        key = key[:key_size]
        if algorithm == 'des':
            key = key * 3
        if mode == 'ecb':
            cipher_mode = modes.ECB()
        elif mode == 'cbc':
            cipher_mode = modes.CBC(iv)
        elif mode == 'cfb':
            cipher_mode = modes.CFB(iv)
        else:
            cipher_mode = modes.OFB(iv)
        return Cipher(cipher_cls(key), cipher_mode)

    @classmethod
    def _mode_available(cls, algorithm: str, mode: str) -> bool:
        """Probes OpenSSL with a throwaway key to see if the cipher exists."""
        cipher_cls, key_size = cls.CIPHERS[algorithm]
        iv = b'\0' * (cipher_cls.block_size // 8)
        try:
            cls._build_cipher(algorithm, mode, b'\0' * key_size, iv).encryptor()
        except PrimitiveUnsupportedAlgorithm:
            logger.debug("OpenSSL does not provide %s-%s", cls.ALGORITHMS[algorithm], mode)
            return False
        return True

    def _padder(self) -> Optional[padding.PKCS7]:
        if self._mode in self.PADDED_MODES:
            return padding.PKCS7(self.block_size * 8)
        return None

    def _encrypt_raw(self, data: bytes, iv: bytes) -> bytes:
        try:
            pkcs7 = self._padder()
            if pkcs7 is not None:
                padder = pkcs7.padder()
                data = padder.update(data) + padder.finalize()
            encryptor = self._build_cipher(self._algorithm, self._mode, self._key, iv).encryptor()
            return encryptor.update(data) + encryptor.finalize()
        except (ValueError, TypeError, PrimitiveUnsupportedAlgorithm) as e:
            raise EncryptionFailure(f"Encryption failed with {self.cipher_name}") from e

    def _decrypt_raw(self, data: bytes, iv: bytes) -> bytes:
        if len(iv) != self.iv_length:
            raise DecryptionFailure("Decryption failed: input is shorter than the IV")
        try:
            decryptor = self._build_cipher(self._algorithm, self._mode, self._key, iv).decryptor()
            raw = decryptor.update(data) + decryptor.finalize()
            pkcs7 = self._padder()
            if pkcs7 is not None:
                unpadder = pkcs7.unpadder()
                raw = unpadder.update(raw) + unpadder.finalize()
            return raw
        except (ValueError, TypeError, PrimitiveUnsupportedAlgorithm) as e:
            raise DecryptionFailure(f"Decryption failed with {self.cipher_name}") from e
