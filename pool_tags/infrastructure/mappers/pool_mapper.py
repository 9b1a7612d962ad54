from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pool_tags.domain.entities.pool import FeeEntry, Pool, Token
from pool_tags.domain.services.symbol_decoder import decode_symbol, is_hex_encoded_symbol


def map_token_symbol(raw: Any) -> str:
    # bytes32 symbols decode to "" when unusable; the aggregator rejects those pools
    symbol = str(raw or "")
    if is_hex_encoded_symbol(symbol):
        return decode_symbol(symbol)
    return symbol


def map_row_to_token(row: Mapping[str, Any]) -> Token:
    return Token(
        address=str(row["id"]),
        name=str(row.get("name") or ""),
        symbol=map_token_symbol(row.get("symbol")),
    )


def map_row_to_fee_entry(row: Mapping[str, Any]) -> FeeEntry:
    return FeeEntry(
        fee_type=str(row.get("feeType") or ""),
        fee_percentage=str(row.get("feePercentage") or "0"),
    )


def map_row_to_pool(row: Mapping[str, Any]) -> Pool:
    return Pool(
        address=str(row["id"]),
        display_symbol=str(row.get("symbol") or ""),
        created_at=int(row["createdAt"]),
        tokens=tuple(map_row_to_token(token) for token in row.get("tokens") or []),
        fee_entries=tuple(map_row_to_fee_entry(fee) for fee in row.get("fees") or []),
    )
