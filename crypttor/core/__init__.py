"""Core building blocks: formats, strategies, Crypt and configuration."""
from .exceptions import (
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
)
from .format import Format, FormatCodec
from .strategies import (
    CipherStrategy,
    OpenSslStrategy,
    MCryptStrategy,
    StrategyFactory,
    build_strategy,
)
from .crypt import Crypt
from .config import CryptConfig

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
]
