from __future__ import annotations

import logging
from collections.abc import Callable

from pool_tags.application.dto.pool_tags import DEFAULT_PAGE_SIZE, GetPoolTagsInput, PoolTagsContext
from pool_tags.application.ports.page_source_port import PageSourcePort
from pool_tags.application.use_cases.aggregate_pool_tags import aggregate_pool_tags
from pool_tags.domain.entities.result import Err, Result
from pool_tags.domain.exceptions import ErrorKind


logger = logging.getLogger(__name__)

SUPPORTED_CHAIN_ID = "10"

PageSourceFactory = Callable[[str], PageSourcePort]


def get_pool_tags(
    command: GetPoolTagsInput,
    *,
    page_source_factory: PageSourceFactory,
    supported_chain_id: str = SUPPORTED_CHAIN_ID,
    page_size: int = DEFAULT_PAGE_SIZE,
    log: logging.Logger | None = None,
) -> Result:
    chain_id = str(command.chain_id).strip()
    if chain_id != supported_chain_id:
        return Err(
            kind=ErrorKind.UNSUPPORTED_CHAIN,
            detail=f"Unsupported chain_id: {command.chain_id}",
        )
    api_key = (command.api_key or "").strip()
    if not api_key:
        return Err(
            kind=ErrorKind.MISSING_CREDENTIAL,
            detail="GRAPH_API_KEY is required for subgraph access.",
        )

    context = PoolTagsContext(chain_id=chain_id, page_size=page_size, logger=log or logger)
    return aggregate_pool_tags(context, page_source_factory(api_key))
