from __future__ import annotations

import logging

from pool_tags.application.dto.pool_tags import PoolTagsContext, PoolTagsRun
from pool_tags.application.ports.page_source_port import PageSourcePort
from pool_tags.domain.entities.pool import Pool
from pool_tags.domain.entities.result import Err, Ok, Result
from pool_tags.domain.exceptions import PageSourceError, UpstreamReportedError
from pool_tags.domain.services.content_validator import is_pool_content_valid
from pool_tags.domain.services.pool_classifier import classify_pool
from pool_tags.domain.services.tag_builder import build_tag, describe_fees


logger = logging.getLogger(__name__)


def aggregate_pool_tags(context: PoolTagsContext, page_source: PageSourcePort) -> Result:
    """Fetch every page from ``page_source`` and build one tag per valid pool.

    Pages are requested sequentially, each with the ``created_at`` of the last
    pool of the previous full page as cursor. A page shorter than
    ``context.page_size`` ends the run. Any page failure discards the tags
    built so far and returns ``Err``.
    """
    log = context.logger or logger
    run = PoolTagsRun(context=context)

    while True:
        try:
            pools = page_source.fetch_page(cursor=run.cursor)
        except UpstreamReportedError as exc:
            for message in exc.messages:
                log.error("pool_tags: upstream_error cursor=%s message=%s", run.cursor, message)
            return Err(kind=exc.kind, detail=str(exc), messages=tuple(exc.messages))
        except PageSourceError as exc:
            log.error(
                "pool_tags: page_fetch_failed cursor=%s kind=%s error=%s",
                run.cursor,
                exc.kind.value,
                exc,
            )
            return Err(kind=exc.kind, detail=str(exc))

        run.stats.pages += 1
        run.stats.fetched += len(pools)
        _accumulate_page(run, pools, log)

        log.info(
            "pool_tags: page_fetched page=%s cursor=%s pools=%s total_tags=%s",
            run.stats.pages,
            run.cursor,
            len(pools),
            len(run.tags),
        )

        if len(pools) < context.page_size:
            break
        run.cursor = pools[-1].created_at

    log.info(
        "pool_tags: run_finished chain_id=%s pages=%s fetched=%s emitted=%s rejected=%s duplicates=%s",
        context.chain_id,
        run.stats.pages,
        run.stats.fetched,
        run.stats.emitted,
        run.stats.rejected,
        run.stats.duplicates,
    )
    return Ok(tags=tuple(run.tags))


def _accumulate_page(run: PoolTagsRun, pools: list[Pool], log: logging.Logger) -> None:
    for pool in pools:
        if not pool.has_pair:
            run.stats.rejected += 1
            log.warning("pool_tags: pool_skipped pool=%s reason=missing_tokens", pool.address)
            continue
        if not all(token.symbol for token in pool.tokens[:2]):
            run.stats.rejected += 1
            log.warning("pool_tags: pool_skipped pool=%s reason=unusable_symbol", pool.address)
            continue
        if not is_pool_content_valid(pool, log=log):
            run.stats.rejected += 1
            continue

        log.debug(
            "pool_tags: pool_classified pool=%s type=%s fees=%s",
            pool.address,
            classify_pool(pool),
            describe_fees(pool),
        )
        tag = build_tag(run.context.chain_id, pool)
        if tag.contract_address in run.seen_addresses:
            run.stats.duplicates += 1
            continue
        run.seen_addresses.add(tag.contract_address)
        run.tags.append(tag)
        run.stats.emitted += 1
