from __future__ import annotations

from typing import Protocol

from pool_tags.domain.entities.pool import Pool


class PageSourcePort(Protocol):
    def fetch_page(self, *, cursor: int) -> list[Pool]:
        ...
