import os

# Mainnet token addresses used by the swap tests.
DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
USDT = "0xdAC17F958D2ee523a2206206994597C13D831ec7"
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
WBTC = "0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599"

WETH_10 = "0xf4BB2e28688e89fCcE3c0580D37d36A7672E8A9F"

# --- COMPOUND ---
CDAI = "0x5d3a536E4D6DbD6114cc1Ead35777bAB948E3643"
CUSDC = "0x39AA39c021dfbaE8faC545936693aC917d5E7563"
CWBTC = "0xccF4429DB6322D5C611ee964527D42E5d685DD6a"
CETH = "0x4Ddc2D193948926D02f9B1fE9e1daa0718270ED5"

# Whale accounts are read from environment variables of the same name.
WHALE_ENV_VARS = (
    "DAI_WHALE",
    "USDC_WHALE",
    "USDT_WHALE",
    "WETH_WHALE",
    "WBTC_WHALE",
)

LITERAL_ENTRIES = {
    "DAI": DAI,
    "USDC": USDC,
    "USDT": USDT,
    "WETH": WETH,
    "WBTC": WBTC,
    "WETH_10": WETH_10,
    "CDAI": CDAI,
    "CUSDC": CUSDC,
    "CWBTC": CWBTC,
    "CETH": CETH,
}

# Underlying symbol -> cToken symbol
COMPOUND_MARKETS = {
    "DAI": "CDAI",
    "USDC": "CUSDC",
    "WBTC": "CWBTC",
    "ETH": "CETH",
}

LOG_LEVEL = os.getenv("DEFI_SWAP_CONFIG_LOG_LEVEL", "WARNING")
