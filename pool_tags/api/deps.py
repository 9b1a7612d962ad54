from __future__ import annotations

from collections.abc import Callable

from fastapi import HTTPException

from pool_tags.application.dto.pool_tags import DEFAULT_PAGE_SIZE, GetPoolTagsInput
from pool_tags.application.use_cases.get_pool_tags import get_pool_tags
from pool_tags.domain.entities.result import Result
from pool_tags.infrastructure.clients.pool_subgraph_client import (
    PoolSubgraphClient,
    PoolSubgraphClientSettings,
)
from pool_tags.shared.config import Settings, get_settings


PoolTagsFetcher = Callable[[str], Result]


def build_page_source_factory(settings: Settings) -> Callable[[str], PoolSubgraphClient]:
    def factory(api_key: str) -> PoolSubgraphClient:
        return PoolSubgraphClient(
            PoolSubgraphClientSettings(
                graph_gateway_base=settings.graph_gateway_base,
                graph_api_key=api_key,
                subgraph_id=settings.pool_tags_subgraph_id,
                timeout_seconds=settings.graph_request_timeout_seconds,
                page_size=DEFAULT_PAGE_SIZE,
            )
        )

    return factory


def fetch_chain_pool_tags(chain_id: str, api_key: str, *, settings: Settings | None = None) -> Result:
    """Entry point: every pool tag for ``chain_id``, fetched with ``api_key``."""
    settings = settings or get_settings()
    return get_pool_tags(
        GetPoolTagsInput(chain_id=chain_id, api_key=api_key),
        page_source_factory=build_page_source_factory(settings),
        supported_chain_id=settings.pool_tags_chain_id,
        page_size=DEFAULT_PAGE_SIZE,
    )


def get_pool_tags_fetcher() -> PoolTagsFetcher:
    settings = get_settings()
    if not settings.pool_tags_subgraph_id:
        raise HTTPException(status_code=500, detail="POOL_TAGS_SUBGRAPH_ID is required.")

    def fetch(chain_id: str) -> Result:
        return fetch_chain_pool_tags(chain_id, settings.graph_api_key, settings=settings)

    return fetch
