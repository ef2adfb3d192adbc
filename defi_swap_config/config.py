"""
Configuration table for the DeFi swap tests.

Contract addresses are fixed literals. Whale accounts are read from the
environment once, when the table is loaded. An unset whale variable is
``None``, never an error.
"""

import os
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from dotenv import dotenv_values

from . import constants
from .constants import COMPOUND_MARKETS, LOG_LEVEL, WHALE_ENV_VARS
from .logging_config import get_logger

logger = get_logger(__name__, LOG_LEVEL)

_TOKENS = ("DAI", "USDC", "USDT", "WETH", "WBTC")

@dataclass(frozen=True)
class SwapConfig:
    """
    Read-only table of the addresses used by the swap tests.

    Field order is the export order of the table. Only the whale entries
    are constructor arguments; contract addresses are fixed.
    """

    DAI: str = field(default=constants.DAI, init=False)
    USDC: str = field(default=constants.USDC, init=False)
    USDT: str = field(default=constants.USDT, init=False)
    WETH: str = field(default=constants.WETH, init=False)
    WBTC: str = field(default=constants.WBTC, init=False)

    WETH_10: str = field(default=constants.WETH_10, init=False)

    DAI_WHALE: Optional[str] = None
    USDC_WHALE: Optional[str] = None
    USDT_WHALE: Optional[str] = None
    WETH_WHALE: Optional[str] = None
    WBTC_WHALE: Optional[str] = None

    # compound
    CDAI: str = field(default=constants.CDAI, init=False)
    CUSDC: str = field(default=constants.CUSDC, init=False)
    CWBTC: str = field(default=constants.CWBTC, init=False)
    CETH: str = field(default=constants.CETH, init=False)

    def as_dict(self) -> Mapping[str, Optional[str]]:
        """Read-only mapping of every entry, keyed by name."""
        return MappingProxyType({f.name: getattr(self, f.name) for f in fields(self)})

    to_dict = as_dict

    def keys(self) -> List[str]:
        return [f.name for f in fields(self)]

    def __getitem__(self, name: str) -> Optional[str]:
        if name not in self.keys():
            raise KeyError(name)
        return getattr(self, name)

    def __contains__(self, name: object) -> bool:
        return name in self.keys()

    def get(self, name: str, default: Any = None) -> Any:
        try:
            return self[name]
        except KeyError:
            return default

    def tokens(self) -> Dict[str, str]:
        return {symbol: getattr(self, symbol) for symbol in _TOKENS}

    def whales(self) -> Dict[str, Optional[str]]:
        """Token symbol -> whale account (None when not configured)."""
        return {symbol: getattr(self, f"{symbol}_WHALE") for symbol in _TOKENS}

    def compound_markets(self) -> Dict[str, str]:
        """Underlying symbol -> cToken address."""
        return {underlying: getattr(self, ctoken) for underlying, ctoken in COMPOUND_MARKETS.items()}

    def missing_whales(self) -> List[str]:
        return [name for name in WHALE_ENV_VARS if not getattr(self, name)]

def load_config(environ: Optional[Mapping[str, str]] = None, env_file: Optional[str] = None) -> SwapConfig:
    """
    Build the config table from an environment mapping.

    Args:
        environ: Environment variables to read whales from. Defaults to os.environ.
        env_file: Optional .env file. Its values only fill variables missing
            from ``environ``; os.environ itself is left untouched.

    Returns:
        A frozen SwapConfig
    """
    if environ is None:
        environ = os.environ

    source: Dict[str, Optional[str]] = {}
    if env_file:
        source.update(dotenv_values(env_file))
    source.update(environ)

    whales = {}
    for name in WHALE_ENV_VARS:
        value = source.get(name)
        if not value:
            logger.debug(
                f"{name} is not set or empty",
                extra={"context": {"event_type": "missing_env_var", "name": name}}
            )
        whales[name] = value

    return SwapConfig(**whales)

# Process-wide instance - initialized lazily
config = None

def get_config() -> SwapConfig:
    """Get the process-wide config table, loading it on first use"""
    global config
    if config is None:
        config = load_config()
    return config
