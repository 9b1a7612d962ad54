from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from pool_tags.domain.entities.pool import Pool
from pool_tags.domain.exceptions import (
    MissingDataError,
    TransportFailureError,
    UpstreamReportedError,
)
from pool_tags.infrastructure.mappers.pool_mapper import map_row_to_pool


logger = logging.getLogger(__name__)


POOLS_QUERY = """
query PoolTags($cursor: BigInt!, $pageSize: Int!) {
  pools(
    first: $pageSize,
    orderBy: createdAt,
    orderDirection: asc,
    where: { createdAt_gt: $cursor }
  ) {
    id
    symbol
    createdAt
    tokens {
      id
      name
      symbol
    }
    fees {
      feeType
      feePercentage
    }
  }
}
"""


class SubgraphResolutionError(TransportFailureError):
    pass


@dataclass(frozen=True)
class PoolSubgraphClientSettings:
    graph_gateway_base: str
    graph_api_key: str
    subgraph_id: str
    timeout_seconds: float
    page_size: int = 1000


class PoolSubgraphClient:
    def __init__(self, settings: PoolSubgraphClientSettings, *, http_client: httpx.Client | None = None):
        self._settings = settings
        self._http_client = http_client

    def fetch_page(self, *, cursor: int) -> list[Pool]:
        payload = self._post_graphql(
            url=self._resolve_subgraph_url(),
            query=POOLS_QUERY,
            variables={"cursor": str(cursor), "pageSize": self._settings.page_size},
        )
        data = payload.get("data")
        rows = data.get("pools") if isinstance(data, dict) else None
        if rows is None:
            raise MissingDataError("Subgraph response has no pools data.")
        if not isinstance(rows, list):
            raise TransportFailureError("Subgraph response pools field is not a list.")

        try:
            pools = [map_row_to_pool(row) for row in rows]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise TransportFailureError(f"Malformed pool row in subgraph response: {exc}") from exc

        logger.info(
            "pool_subgraph_client: fetched_pools cursor=%s pools=%s",
            cursor,
            len(pools),
        )
        return pools

    def _post_graphql(self, *, url: str, query: str, variables: dict) -> dict:
        try:
            if self._http_client is not None:
                response = self._http_client.post(url, json={"query": query, "variables": variables})
                response.raise_for_status()
                payload = response.json()
            else:
                with httpx.Client(timeout=self._settings.timeout_seconds) as client:
                    response = client.post(url, json={"query": query, "variables": variables})
                    response.raise_for_status()
                    payload = response.json()
        except httpx.HTTPError as exc:
            raise TransportFailureError(f"GraphQL request failed: {exc}") from exc
        except ValueError as exc:
            raise TransportFailureError(f"GraphQL response is not valid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise TransportFailureError("GraphQL response is not a JSON object.")

        errors = payload.get("errors") or []
        if errors:
            raise UpstreamReportedError(
                [str(err.get("message", err)) if isinstance(err, dict) else str(err) for err in errors]
            )
        return payload

    def _resolve_subgraph_url(self) -> str:
        subgraph_id = self._settings.subgraph_id.strip()
        if not subgraph_id:
            raise SubgraphResolutionError("POOL_TAGS_SUBGRAPH_ID is not configured.")
        return self._build_gateway_url(subgraph_id)

    def _build_gateway_url(self, subgraph_id: str) -> str:
        if subgraph_id.startswith("http://") or subgraph_id.startswith("https://"):
            return subgraph_id.rstrip("/")
        base = self._settings.graph_gateway_base.rstrip("/")
        api_key = self._settings.graph_api_key.strip()
        if api_key:
            return f"{base}/{api_key}/subgraphs/id/{subgraph_id}"
        return f"{base}/subgraphs/id/{subgraph_id}"
