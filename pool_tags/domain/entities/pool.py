from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    address: str
    name: str
    symbol: str


@dataclass(frozen=True)
class FeeEntry:
    fee_type: str
    fee_percentage: str


@dataclass(frozen=True)
class Pool:
    address: str
    display_symbol: str
    created_at: int
    tokens: tuple[Token, ...]
    fee_entries: tuple[FeeEntry, ...] = ()

    @property
    def has_pair(self) -> bool:
        return len(self.tokens) >= 2
