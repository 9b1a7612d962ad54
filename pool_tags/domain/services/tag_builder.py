from __future__ import annotations

from decimal import Decimal, InvalidOperation

from pool_tags.domain.entities.pool import Pool
from pool_tags.domain.entities.tag import Tag


PROJECT_NAME = "Velodrome"
WEBSITE_LINK = "https://velodrome.finance"


def build_contract_address(chain_id: str, pool_address: str) -> str:
    return f"eip155:{chain_id}:{pool_address}"


def build_tag(chain_id: str, pool: Pool) -> Tag:
    symbol0 = pool.tokens[0].symbol
    symbol1 = pool.tokens[1].symbol
    return Tag(
        contract_address=build_contract_address(chain_id, pool.address),
        name_tag=f"{pool.display_symbol} Pool",
        project_name=PROJECT_NAME,
        website_link=WEBSITE_LINK,
        note=f"The liquidity pool contract on {PROJECT_NAME} for the {symbol0} / {symbol1} pool.",
    )


def format_fee_percentage(value: str) -> str:
    text = str(value).strip()
    if text.endswith("%"):
        return text
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return f"{text}%"
    if not amount.is_finite():
        return f"{text}%"
    return f"{amount:.2f}%"


def describe_fees(pool: Pool) -> str:
    return ", ".join(
        f"{entry.fee_type} {format_fee_percentage(entry.fee_percentage)}" for entry in pool.fee_entries
    )
