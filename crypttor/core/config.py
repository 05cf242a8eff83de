"""
Crypt configuration module.

Groups the choices made once per Crypt instance: backend, cipher and
transport format.
"""
from dataclasses import dataclass
from typing import Optional, Union

from .crypt import Crypt
from .format import Format, FormatCodec
from .logging import get_logger
from .strategies import StrategyFactory, DEFAULT_ALGORITHM, DEFAULT_MODE
from .strategies.mcrypt_strategy import MCryptStrategy
from .strategies.openssl_strategy import OpenSslStrategy


@dataclass(frozen=True)
class CryptConfig:
    """
    Complete Crypt configuration.

    Attributes:
        strategy: Backend identifier ('openssl' or 'mcrypt')
        algorithm: Algorithm token
        mode: Mode token
        format: Transport format
        log_level: Level set on the crypttor logger by build(), or None
            to leave it untouched
    """
    strategy: str = OpenSslStrategy.STRATEGY_NAME
    algorithm: str = DEFAULT_ALGORITHM
    mode: str = DEFAULT_MODE
    format: Format = Format.BASE64
    log_level: Optional[int] = None

    def __post_init__(self):
        # Fail early on a bad selector, and store the enum member
        object.__setattr__(self, 'format', FormatCodec.validate(self.format))

    @classmethod
    def default(cls) -> 'CryptConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def legacy(cls, **kwargs) -> 'CryptConfig':
        """Create configuration for the mcrypt backend."""
        return cls(strategy=MCryptStrategy.STRATEGY_NAME, **kwargs)

    def build(self, key: Union[bytes, str], factory: StrategyFactory = None) -> Crypt:
        """Build a Crypt bound to key from this configuration."""
        if self.log_level is not None:
            get_logger().setLevel(self.log_level)
        factory = factory or StrategyFactory()
        strategy = factory.build(self.strategy, key, self.algorithm, self.mode)
        return Crypt(strategy, self.format)
