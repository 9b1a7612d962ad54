from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pool_tags.domain.entities.tag import Tag


DEFAULT_PAGE_SIZE = 1000


@dataclass(frozen=True)
class GetPoolTagsInput:
    chain_id: str
    api_key: str


@dataclass(frozen=True)
class PoolTagsContext:
    chain_id: str
    page_size: int = DEFAULT_PAGE_SIZE
    logger: logging.Logger | None = None


@dataclass
class PoolTagsRunStats:
    pages: int = 0
    fetched: int = 0
    emitted: int = 0
    rejected: int = 0
    duplicates: int = 0


@dataclass
class PoolTagsRun:
    context: PoolTagsContext
    cursor: int = 0
    seen_addresses: set[str] = field(default_factory=set)
    tags: list[Tag] = field(default_factory=list)
    stats: PoolTagsRunStats = field(default_factory=PoolTagsRunStats)
