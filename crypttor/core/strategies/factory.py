"""Strategy factory using Factory Pattern."""
from typing import Dict, List, Type, Union

from ..exceptions import UnknownStrategy
from .base import CipherStrategy, DEFAULT_ALGORITHM, DEFAULT_MODE
from .mcrypt_strategy import MCryptStrategy
from .openssl_strategy import OpenSslStrategy


class StrategyFactory:
    """Factory for building cipher strategies from a strategy identifier."""

    STRATEGIES: Dict[str, Type[CipherStrategy]] = {
        OpenSslStrategy.STRATEGY_NAME: OpenSslStrategy,
        MCryptStrategy.STRATEGY_NAME: MCryptStrategy,
    }

    def build(
        self,
        strategy: str,
        key: Union[bytes, str],
        algorithm: str = DEFAULT_ALGORITHM,
        mode: str = DEFAULT_MODE
    ) -> CipherStrategy:
        """
        Builds the strategy named by the identifier.

        Args:
            strategy: 'openssl' or 'mcrypt'
            key: Raw encryption key
            algorithm: Algorithm token, e.g. 'aes'
            mode: Mode token, e.g. 'cbc'

        Raises:
            UnknownStrategy: If strategy names no backend
        """
        if strategy == OpenSslStrategy.STRATEGY_NAME:
            return self.build_openssl(key, algorithm, mode)
        if strategy == MCryptStrategy.STRATEGY_NAME:
            return self.build_mcrypt(key, algorithm, mode)
        raise UnknownStrategy(f"{strategy!r} strategy is not valid")

    def build_openssl(self, key, algorithm: str = DEFAULT_ALGORITHM, mode: str = DEFAULT_MODE) -> OpenSslStrategy:
        """Builds OpenSSL strategy from parameters."""
        return OpenSslStrategy(key, algorithm, mode)

    def build_mcrypt(self, key, algorithm: str = DEFAULT_ALGORITHM, mode: str = DEFAULT_MODE) -> MCryptStrategy:
        """Builds MCrypt strategy from parameters."""
        return MCryptStrategy(key, algorithm, mode)

    @classmethod
    def available(cls) -> List[str]:
        """Lists the strategy identifiers the factory can build."""
        return list(cls.STRATEGIES)

    @classmethod
    def strategy_class(cls, strategy: str) -> Type[CipherStrategy]:
        """Returns the class behind a strategy identifier."""
        try:
            return cls.STRATEGIES[strategy]
        except (KeyError, TypeError):
            raise UnknownStrategy(f"{strategy!r} strategy is not valid") from None


def build_strategy(
    strategy: str,
    key: Union[bytes, str],
    algorithm: str = DEFAULT_ALGORITHM,
    mode: str = DEFAULT_MODE
) -> CipherStrategy:
    """Builds a strategy without holding a factory instance."""
    return StrategyFactory().build(strategy, key, algorithm, mode)
