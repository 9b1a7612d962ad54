from __future__ import annotations

import logging
import re

from pool_tags.domain.entities.pool import Pool


logger = logging.getLogger(__name__)

_MARKUP_PATTERN = re.compile(r"<[^>]*>")
_CHECKED_FIELDS = ("name", "symbol")


def contains_markup(text: str | None) -> bool:
    if not text:
        return False
    return _MARKUP_PATTERN.search(text) is not None


def find_markup_fields(pool: Pool) -> list[tuple[str, str]]:
    """Return (field, original value) for every contaminated field of the first two tokens."""
    failures: list[tuple[str, str]] = []
    for index, token in enumerate(pool.tokens[:2]):
        for field in _CHECKED_FIELDS:
            value = getattr(token, field)
            if contains_markup(value):
                failures.append((f"token{index}.{field}", value))
    return failures


def is_pool_content_valid(pool: Pool, *, log: logging.Logger | None = None) -> bool:
    failures = find_markup_fields(pool)
    if not failures:
        return True

    (log or logger).warning(
        "content_validator: pool_rejected pool=%s reason=markup fields=%s",
        pool.address,
        ", ".join(f"{field}={value!r}" for field, value in failures),
    )
    return False
