from __future__ import annotations

import json

import httpx
import pytest

from pool_tags.domain.exceptions import (
    MissingDataError,
    TransportFailureError,
    UpstreamReportedError,
)
from pool_tags.infrastructure.clients.pool_subgraph_client import (
    PoolSubgraphClient,
    PoolSubgraphClientSettings,
    SubgraphResolutionError,
)


def _settings(*, subgraph_id: str = "subgraph-id") -> PoolSubgraphClientSettings:
    return PoolSubgraphClientSettings(
        graph_gateway_base="https://gateway.thegraph.com/api",
        graph_api_key="api-key",
        subgraph_id=subgraph_id,
        timeout_seconds=10,
        page_size=1000,
    )


def _make_client(handler, *, subgraph_id: str = "subgraph-id") -> PoolSubgraphClient:
    return PoolSubgraphClient(
        _settings(subgraph_id=subgraph_id),
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def _pool_row(address: str, created_at: int) -> dict:
    return {
        "id": address,
        "symbol": "vAMM-WETH/USDC",
        "createdAt": str(created_at),
        "tokens": [
            {"id": "0xt0", "name": "Wrapped Ether", "symbol": "WETH"},
            {"id": "0xt1", "name": "USD Coin", "symbol": "USDC"},
        ],
        "fees": [],
    }


def test_build_gateway_url_uses_id_when_value_is_not_url():
    client = PoolSubgraphClient(_settings())

    assert client._build_gateway_url("abc123") == (
        "https://gateway.thegraph.com/api/api-key/subgraphs/id/abc123"
    )


def test_build_gateway_url_keeps_full_url_unchanged():
    client = PoolSubgraphClient(_settings())
    full_url = "https://example.com/subgraphs/name/velodrome/"

    assert client._build_gateway_url(full_url) == "https://example.com/subgraphs/name/velodrome"


def test_fetch_page_posts_cursor_and_maps_pools():
    requests: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(json.loads(request.content))
        return httpx.Response(200, json={"data": {"pools": [_pool_row("0xa", 11), _pool_row("0xb", 12)]}})

    client = _make_client(handler)

    pools = client.fetch_page(cursor=10)

    assert [pool.address for pool in pools] == ["0xa", "0xb"]
    assert [pool.created_at for pool in pools] == [11, 12]
    assert requests[0]["variables"] == {"cursor": "10", "pageSize": 1000}
    assert "createdAt_gt: $cursor" in requests[0]["query"]
    assert "orderDirection: asc" in requests[0]["query"]


def test_fetch_page_raises_transport_failure_on_non_success_status():
    client = _make_client(lambda request: httpx.Response(503, text="unavailable"))

    with pytest.raises(TransportFailureError):
        client.fetch_page(cursor=0)


def test_fetch_page_raises_transport_failure_on_invalid_json():
    client = _make_client(lambda request: httpx.Response(200, text="not json"))

    with pytest.raises(TransportFailureError):
        client.fetch_page(cursor=0)


def test_fetch_page_raises_upstream_error_with_every_message():
    payload = {"errors": [{"message": "indexing_error"}, {"message": "timeout"}]}
    client = _make_client(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(UpstreamReportedError) as exc_info:
        client.fetch_page(cursor=0)

    assert exc_info.value.messages == ["indexing_error", "timeout"]


@pytest.mark.parametrize("payload", [{"data": {}}, {"data": None}, {}])
def test_fetch_page_raises_missing_data_without_pools(payload):
    client = _make_client(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(MissingDataError):
        client.fetch_page(cursor=0)


def test_fetch_page_raises_transport_failure_on_malformed_row():
    payload = {"data": {"pools": [{"id": "0xa"}]}}
    client = _make_client(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(TransportFailureError):
        client.fetch_page(cursor=0)


def test_fetch_page_requires_subgraph_id():
    client = _make_client(lambda request: httpx.Response(200, json={}), subgraph_id=" ")

    with pytest.raises(SubgraphResolutionError):
        client.fetch_page(cursor=0)
