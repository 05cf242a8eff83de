"""
CryptTor - symmetric encryption with pluggable cipher backends.

Usage:
    >>> import crypttor
    >>>
    >>> key = b"\x01" * 32
    >>> token = crypttor.encrypt("hello world", key, format=crypttor.Format.HEX)
    >>> crypttor.decrypt(token, key, format=crypttor.Format.HEX)
    b'hello world'
"""
from .core import (
    CryptException,
    InvalidInput,
    InvalidFormat,
    FormatError,
    UnknownStrategy,
    UnsupportedAlgorithm,
    UnsupportedMode,
    InvalidKey,
    CryptEnvironmentError,
    EncryptionFailure,
    DecryptionFailure,
    Format,
    FormatCodec,
    CipherStrategy,
    OpenSslStrategy,
    MCryptStrategy,
    StrategyFactory,
    build_strategy,
    Crypt,
    CryptConfig,
)
from .core.logging import LogLevel, configure_logging, get_logger
from .service import CryptService, encrypt, decrypt

__version__ = '1.0.0'


__all__ = [
    'CryptException',
    'InvalidInput',
    'InvalidFormat',
    'FormatError',
    'UnknownStrategy',
    'UnsupportedAlgorithm',
    'UnsupportedMode',
    'InvalidKey',
    'CryptEnvironmentError',
    'EncryptionFailure',
    'DecryptionFailure',
    'Format',
    'FormatCodec',
    'CipherStrategy',
    'OpenSslStrategy',
    'MCryptStrategy',
    'StrategyFactory',
    'build_strategy',
    'Crypt',
    'CryptConfig',
    'CryptService',
    'encrypt',
    'decrypt',
    'LogLevel',
    'configure_logging',
    'get_logger',
]
