from __future__ import annotations

from pool_tags.domain.entities.pool import Pool, Token
from pool_tags.domain.services.pool_classifier import (
    STABLE,
    VOLATILE,
    classify_pool,
    classify_symbols,
)


def _pool(*symbols: str) -> Pool:
    return Pool(
        address="0xpool",
        display_symbol="/".join(symbols),
        created_at=1,
        tokens=tuple(Token(address=f"0x{idx}", name=symbol, symbol=symbol) for idx, symbol in enumerate(symbols)),
    )


def test_two_stablecoins_classify_as_stable():
    assert classify_pool(_pool("USDC", "DAI")) == STABLE


def test_stablecoin_and_volatile_token_classify_as_volatile():
    assert classify_pool(_pool("USDC", "WETH")) == VOLATILE


def test_symbols_are_compared_case_insensitively():
    assert classify_symbols("usdc", "alusd") == STABLE
    assert classify_symbols("USDBC", "susd") == STABLE
    assert classify_symbols("USD+", "EUROC") == STABLE


def test_pool_with_fewer_than_two_tokens_is_volatile():
    assert classify_pool(_pool("USDC")) == VOLATILE
    assert classify_pool(_pool()) == VOLATILE


def test_only_first_two_tokens_are_considered():
    assert classify_pool(_pool("USDC", "DAI", "WETH")) == STABLE
