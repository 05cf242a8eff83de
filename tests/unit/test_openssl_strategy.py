"""Tests for the OpenSSL (cryptography) strategy."""
import warnings
from concurrent.futures import ThreadPoolExecutor

import pytest
from Crypto.Cipher import DES
from Crypto.Util.Padding import unpad
from cryptography.utils import CryptographyDeprecationWarning
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from crypttor.core.exceptions import (
    CryptEnvironmentError,
    DecryptionFailure,
    EncryptionFailure,
    InvalidKey,
    UnsupportedAlgorithm,
    UnsupportedMode,
)
from crypttor.core.strategies import OpenSslStrategy


class TestOpenSslConstruction:
    """Test suite for OpenSslStrategy validation."""

    def test_defaults(self, aes_key):
        """Test default algorithm and mode are aes/cbc."""
        strategy = OpenSslStrategy(aes_key)

        assert strategy.algorithm == "aes"
        assert strategy.mode == "cbc"
        assert strategy.cipher_name == "aes-256-cbc"
        assert strategy.key_size == 32
        assert strategy.iv_length == 16

    def test_tokens_are_normalized(self, aes_key):
        """Test tokens are case-insensitive and stripped."""
        strategy = OpenSslStrategy(aes_key, " AES ", "Cfb")

        assert strategy.cipher_name == "aes-256-cfb"

    def test_unknown_algorithm_raises(self, aes_key):
        """Test unknown algorithm raises UnsupportedAlgorithm."""
        with pytest.raises(UnsupportedAlgorithm, match="rot13"):
            OpenSslStrategy(aes_key, "rot13")

    def test_unknown_mode_raises(self, aes_key):
        """Test unknown mode raises UnsupportedMode."""
        with pytest.raises(UnsupportedMode, match="xts"):
            OpenSslStrategy(aes_key, "aes", "xts")

    def test_mcrypt_only_mode_rejected(self, aes_key):
        """Test modes of the legacy backend are not accepted here."""
        with pytest.raises(UnsupportedMode):
            OpenSslStrategy(aes_key, "aes", "ctr")

    @pytest.mark.parametrize("token", [["aes"], 256, None])
    def test_non_str_algorithm_raises(self, aes_key, token):
        """Test non-string algorithm tokens raise UnsupportedAlgorithm."""
        with pytest.raises(UnsupportedAlgorithm):
            OpenSslStrategy(aes_key, token)

    @pytest.mark.parametrize("token", [["cbc"], 1, None])
    def test_non_str_mode_raises(self, aes_key, token):
        """Test non-string mode tokens raise UnsupportedMode."""
        with pytest.raises(UnsupportedMode):
            OpenSslStrategy(aes_key, "aes", token)

    def test_empty_key_raises(self):
        """Test empty key raises InvalidKey."""
        with pytest.raises(InvalidKey, match="cannot be empty"):
            OpenSslStrategy(b"")

    def test_short_key_raises(self):
        """Test key one byte short of the minimum raises InvalidKey."""
        with pytest.raises(InvalidKey, match="at least of 32 bytes"):
            OpenSslStrategy(b"\x01" * 31)

    def test_minimum_key_accepted(self):
        """Test key of exactly the minimum size is accepted."""
        strategy = OpenSslStrategy(b"\x01" * 32)
        assert strategy.key_size == 32

    def test_key_error_hides_key(self):
        """Test the key does not appear in the error message."""
        key = b"secret-key-material"
        with pytest.raises(InvalidKey) as exc_info:
            OpenSslStrategy(key)
        assert "secret" not in str(exc_info.value)

    def test_str_key_encoded_as_utf8(self):
        """Test text keys are used as their UTF-8 bytes."""
        strategy = OpenSslStrategy("k" * 32)
        other = OpenSslStrategy(b"k" * 32)

        assert other.decrypt(strategy.encrypt(b"payload")) == b"payload"

    def test_non_bytes_key_raises(self):
        """Test non-bytes keys raise InvalidKey."""
        with pytest.raises(InvalidKey):
            OpenSslStrategy(12345)

    def test_missing_library_raises(self, aes_key, monkeypatch):
        """Test a missing primitive library raises CryptEnvironmentError."""
        monkeypatch.setattr(OpenSslStrategy, "is_available", classmethod(lambda cls: False))

        with pytest.raises(CryptEnvironmentError, match="cryptography"):
            OpenSslStrategy(aes_key)

    def test_algorithm_key_floors(self):
        """Test each algorithm's documented minimum key size."""
        expected = {
            "aes": 32,
            "blowfish": 56,
            "des": 8,
            "camellia": 32,
            "cast5": 16,
            "seed": 16,
        }
        for algorithm, size in expected.items():
            if not OpenSslStrategy.supports(algorithm, "cbc"):
                continue
            assert OpenSslStrategy(b"\x02" * size, algorithm).key_size == size
            with pytest.raises(InvalidKey):
                OpenSslStrategy(b"\x02" * (size - 1), algorithm)


class TestOpenSslIntrospection:
    """Test suite for supported algorithm/mode listings."""

    def test_supported_algorithms(self):
        """Test the algorithm table."""
        assert OpenSslStrategy.supported_algorithms() == [
            "aes", "blowfish", "des", "camellia", "cast5", "seed"
        ]

    def test_aes_supports_all_modes(self):
        """Test AES is available in every mode."""
        assert OpenSslStrategy.supported_modes("aes") == ["cbc", "cfb", "ofb", "ecb"]

    def test_unknown_algorithm_has_no_modes(self):
        """Test unknown algorithms list no modes."""
        assert OpenSslStrategy.supported_modes("rot13") == []
        assert OpenSslStrategy.supported_modes(["aes"]) == []
        assert not OpenSslStrategy.supports("aes", "xts")


class TestOpenSslEncryption:
    """Test suite for OpenSslStrategy encrypt/decrypt."""

    def test_cbc_output_length(self, aes_key):
        """Test CBC output is IV plus one padded block."""
        strategy = OpenSslStrategy(aes_key)

        framed = strategy.encrypt(b"hello world")

        assert len(framed) == 16 + 16

    def test_cbc_full_block_gets_padding_block(self, aes_key):
        """Test PKCS#7 adds a full block for block-aligned input."""
        strategy = OpenSslStrategy(aes_key)

        framed = strategy.encrypt(b"0123456789abcdef")

        assert len(framed) == 16 + 32

    @pytest.mark.parametrize("mode", ["cfb", "ofb"])
    def test_stream_modes_keep_length(self, aes_key, mode):
        """Test CFB/OFB ciphertext has the plaintext length."""
        strategy = OpenSslStrategy(aes_key, "aes", mode)
        data = b"hello world"

        framed = strategy.encrypt(data)

        assert len(framed) == strategy.iv_length + len(data)

    def test_ecb_has_no_iv(self, aes_key):
        """Test ECB uses no IV and is deterministic."""
        strategy = OpenSslStrategy(aes_key, "aes", "ecb")

        assert strategy.iv_length == 0
        assert strategy.encrypt(b"hello world") == strategy.encrypt(b"hello world")
        assert len(strategy.encrypt(b"hello world")) == 16

    def test_iv_is_prefix(self, aes_key):
        """Test framed output is IV || AES-256-CBC ciphertext."""
        strategy = OpenSslStrategy(aes_key)

        framed = strategy.encrypt(b"hello world")

        iv, body = framed[:16], framed[16:]
        decryptor = Cipher(algorithms.AES(aes_key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(body) + decryptor.finalize()
        unpadder = padding.PKCS7(128).unpadder()
        assert unpadder.update(padded) + unpadder.finalize() == b"hello world"

    def test_random_iv(self, aes_key, plaintext):
        """Test two encryptions differ but decrypt to the same data."""
        strategy = OpenSslStrategy(aes_key)

        first = strategy.encrypt(plaintext)
        second = strategy.encrypt(plaintext)

        assert first != second
        assert first[:16] != second[:16]
        assert strategy.decrypt(first) == strategy.decrypt(second) == plaintext

    @pytest.mark.parametrize("algorithm", ["aes", "blowfish", "des", "camellia", "cast5", "seed"])
    @pytest.mark.parametrize("mode", ["cbc", "cfb", "ofb", "ecb"])
    def test_roundtrip(self, algorithm, mode, random_key, plaintext, require_openssl_cipher):
        """Test encrypt/decrypt roundtrip for every algorithm and mode."""
        require_openssl_cipher(algorithm, mode)
        key = random_key(OpenSslStrategy.CIPHERS[algorithm][1])
        strategy = OpenSslStrategy(key, algorithm, mode)

        assert strategy.decrypt(strategy.encrypt(plaintext)) == plaintext

    def test_trailing_nul_bytes_preserved(self, aes_key):
        """Test plaintext ending in NUL bytes survives the roundtrip."""
        strategy = OpenSslStrategy(aes_key)
        data = b"data\x00\x00"

        assert strategy.decrypt(strategy.encrypt(data)) == data

    def test_longer_key_is_truncated(self, random_key, plaintext):
        """Test bytes beyond the cipher key size are ignored."""
        key = random_key(40)
        long_key = OpenSslStrategy(key)
        exact_key = OpenSslStrategy(key[:32])

        assert exact_key.decrypt(long_key.encrypt(plaintext)) == plaintext

    def test_corrupted_length_raises(self, aes_key):
        """Test ciphertext that is not block-aligned raises DecryptionFailure."""
        strategy = OpenSslStrategy(aes_key)
        framed = strategy.encrypt(b"hello world")

        with pytest.raises(DecryptionFailure):
            strategy.decrypt(framed[:-1])

    def test_truncated_input_raises(self, aes_key):
        """Test input shorter than the IV raises DecryptionFailure."""
        strategy = OpenSslStrategy(aes_key)

        with pytest.raises(DecryptionFailure):
            strategy.decrypt(b"short")

    def test_bad_padding_raises(self, aes_key):
        """Test a block with invalid PKCS#7 padding raises DecryptionFailure."""
        strategy = OpenSslStrategy(aes_key)
        iv = b"\x00" * 16
        encryptor = Cipher(algorithms.AES(aes_key), modes.CBC(iv)).encryptor()
        # Last byte 0x00 is never valid PKCS#7 padding
        body = encryptor.update(b"A" * 15 + b"\x00") + encryptor.finalize()

        with pytest.raises(DecryptionFailure):
            strategy.decrypt(iv + body)

    def test_primitive_error_raises_encryption_failure(self, aes_key, monkeypatch):
        """Test a primitive ValueError during encryption raises EncryptionFailure."""
        strategy = OpenSslStrategy(aes_key)

        def broken(*args, **kwargs):
            raise ValueError("primitive rejected the input")

        monkeypatch.setattr(strategy, "_build_cipher", broken)

        with pytest.raises(EncryptionFailure, match="aes-256-cbc") as exc_info:
            strategy.encrypt(b"hello world")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_des_is_single_des(self, random_key, require_openssl_cipher):
        """Test des output decrypts with plain single DES under the same key."""
        require_openssl_cipher("des", "cbc")
        key = random_key(8)
        strategy = OpenSslStrategy(key, "des")

        framed = strategy.encrypt(b"hello world")

        iv, body = framed[:8], framed[8:]
        padded = DES.new(key, DES.MODE_CBC, iv=iv).decrypt(body)
        assert unpad(padded, 8) == b"hello world"

    @pytest.mark.parametrize("algorithm", ["des", "camellia"])
    def test_no_deprecated_primitive_paths(self, algorithm, random_key, plaintext, require_openssl_cipher):
        """Test des and camellia run without cryptography deprecation warnings."""
        require_openssl_cipher(algorithm, "cbc")
        key = random_key(OpenSslStrategy.CIPHERS[algorithm][1])

        with warnings.catch_warnings():
            warnings.simplefilter("error", CryptographyDeprecationWarning)
            strategy = OpenSslStrategy(key, algorithm)
            assert strategy.decrypt(strategy.encrypt(plaintext)) == plaintext


class TestOpenSslConcurrency:
    """Test suite for sharing one strategy across threads."""

    def test_shared_instance_roundtrips(self, aes_key):
        """Test concurrent encrypt/decrypt calls on one instance stay independent."""
        strategy = OpenSslStrategy(aes_key)

        def roundtrip(index):
            data = f"message number {index}".encode()
            for _ in range(25):
                assert strategy.decrypt(strategy.encrypt(data)) == data
            return index

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(roundtrip, range(32)))

        assert results == list(range(32))
