from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    graph_api_key: str
    graph_gateway_base: str
    pool_tags_subgraph_id: str
    pool_tags_chain_id: str
    graph_request_timeout_seconds: float


def get_settings() -> Settings:
    return Settings(
        graph_api_key=_env("GRAPH_API_KEY", ""),
        graph_gateway_base=_env("GRAPH_GATEWAY_BASE", "https://gateway.thegraph.com/api"),
        pool_tags_subgraph_id=_env("POOL_TAGS_SUBGRAPH_ID", ""),
        pool_tags_chain_id=_env("POOL_TAGS_CHAIN_ID", "10"),
        graph_request_timeout_seconds=float(_env("GRAPH_REQUEST_TIMEOUT_SECONDS", "10")),
    )
