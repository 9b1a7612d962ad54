from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pool_tags.domain.entities.tag import Tag
from pool_tags.domain.exceptions import (
    ERROR_BY_KIND,
    ErrorKind,
    PoolTagsError,
    UpstreamReportedError,
)


@dataclass(frozen=True)
class Ok:
    tags: tuple[Tag, ...]

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> list[Tag]:
        return list(self.tags)


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    detail: str
    messages: tuple[str, ...] = ()

    @property
    def is_ok(self) -> bool:
        return False

    def to_exception(self) -> PoolTagsError:
        if self.kind is ErrorKind.UPSTREAM_REPORTED_ERROR:
            return UpstreamReportedError(list(self.messages) or [self.detail])
        return ERROR_BY_KIND[self.kind](self.detail)

    def unwrap(self) -> list[Tag]:
        raise self.to_exception()


Result = Union[Ok, Err]
