"""
Cipher backends using Strategy Pattern.
"""
from .base import CipherStrategy, DEFAULT_ALGORITHM, DEFAULT_MODE
from .openssl_strategy import OpenSslStrategy
from .mcrypt_strategy import MCryptStrategy
from .factory import StrategyFactory, build_strategy

__all__ = [
    'CipherStrategy',
    'OpenSslStrategy',
    'MCryptStrategy',
    'StrategyFactory',
    'build_strategy',
    'DEFAULT_ALGORITHM',
    'DEFAULT_MODE',
]
