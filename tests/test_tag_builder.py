from __future__ import annotations

import pytest

from pool_tags.domain.entities.pool import FeeEntry, Pool, Token
from pool_tags.domain.services.tag_builder import build_tag, describe_fees, format_fee_percentage


def _pool() -> Pool:
    return Pool(
        address="0xAbC",
        display_symbol="vAMM-WETH/USDC",
        created_at=1700000000,
        tokens=(
            Token(address="0x1", name="Wrapped Ether", symbol="WETH"),
            Token(address="0x2", name="USD Coin", symbol="USDC"),
        ),
        fee_entries=(FeeEntry(fee_type="swap", fee_percentage="0.05"),),
    )


def test_build_tag_maps_pool_fields():
    tag = build_tag("10", _pool())

    assert tag.contract_address == "eip155:10:0xAbC"
    assert tag.name_tag == "vAMM-WETH/USDC Pool"
    assert tag.project_name == "Velodrome"
    assert tag.website_link == "https://velodrome.finance"
    assert tag.note == "The liquidity pool contract on Velodrome for the WETH / USDC pool."


def test_tag_to_dict_uses_camel_case_keys():
    payload = build_tag("10", _pool()).to_dict()

    assert set(payload) == {"contractAddress", "nameTag", "projectName", "websiteLink", "note"}


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("0.05", "0.05%"),
        ("1", "1.00%"),
        ("0.3333", "0.33%"),
        ("0.3%", "0.3%"),
        ("n/a", "n/a%"),
    ],
)
def test_format_fee_percentage(value, expected):
    assert format_fee_percentage(value) == expected


def test_describe_fees_joins_entries():
    assert describe_fees(_pool()) == "swap 0.05%"
