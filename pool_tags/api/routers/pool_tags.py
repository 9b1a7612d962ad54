from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from pool_tags.api.deps import PoolTagsFetcher, get_pool_tags_fetcher
from pool_tags.api.schemas.pool_tags import PoolTagResponse
from pool_tags.domain.exceptions import ErrorKind

router = APIRouter()


ERROR_STATUS = {
    ErrorKind.UNSUPPORTED_CHAIN: 400,
    ErrorKind.MISSING_CREDENTIAL: 500,
    ErrorKind.TRANSPORT_FAILURE: 502,
    ErrorKind.UPSTREAM_REPORTED_ERROR: 502,
    ErrorKind.MISSING_DATA: 502,
}


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/v1/chains/{chain_id}/pool-tags", response_model=list[PoolTagResponse])
def list_pool_tags(
    chain_id: str,
    fetch: PoolTagsFetcher = Depends(get_pool_tags_fetcher),
):
    result = fetch(chain_id)
    if not result.is_ok:
        raise HTTPException(status_code=ERROR_STATUS[result.kind], detail=result.detail)
    return [PoolTagResponse(**tag.to_dict()) for tag in result.tags]
