from .constants import DAI, USDC, USDT, WETH, WBTC, WETH_10, CDAI, CUSDC, CWBTC, CETH
from .config import SwapConfig, load_config, get_config

__all__ = [
    "SwapConfig",
    "load_config",
    "get_config",
    "DAI",
    "USDC",
    "USDT",
    "WETH",
    "WBTC",
    "WETH_10",
    "CDAI",
    "CUSDC",
    "CWBTC",
    "CETH",
]
