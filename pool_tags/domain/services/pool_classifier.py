from __future__ import annotations

from pool_tags.domain.entities.pool import Pool


STABLE = "stable"
VOLATILE = "volatile"

STABLECOIN_SYMBOLS = frozenset(
    {
        "USDC",
        "USDT",
        "DAI",
        "LUSD",
        "alUSD",
        "FRAX",
        "sUSD",
        "MAI",
        "TUSD",
        "USD+",
        "EUROC",
        "USDP",
        "USDbC",
    }
)
_STABLECOIN_SYMBOLS_UPPER = frozenset(symbol.upper() for symbol in STABLECOIN_SYMBOLS)


def is_stablecoin(symbol: str | None) -> bool:
    if not symbol:
        return False
    return symbol.upper() in _STABLECOIN_SYMBOLS_UPPER


def classify_symbols(symbol0: str | None, symbol1: str | None) -> str:
    if is_stablecoin(symbol0) and is_stablecoin(symbol1):
        return STABLE
    return VOLATILE


def classify_pool(pool: Pool) -> str:
    if not pool.has_pair:
        return VOLATILE
    return classify_symbols(pool.tokens[0].symbol, pool.tokens[1].symbol)
