from __future__ import annotations

import re


MIN_SYMBOL_LENGTH = 2
MAX_SYMBOL_LENGTH = 32

_HEX_BLOB_PATTERN = re.compile(r"(?:0[xX])?([0-9a-fA-F]{64})")
_NON_PRINTABLE_PATTERN = re.compile(r"[^\x02-\x7f]")


def is_hex_encoded_symbol(raw: str | None) -> bool:
    if not isinstance(raw, str):
        return False
    return _HEX_BLOB_PATTERN.fullmatch(raw) is not None


def decode_symbol(raw: str | None) -> str:
    """Decode a token symbol that may arrive as a bytes32 hex blob.

    Returns an empty string when the result is not usable as a symbol
    (fewer than 2 or more than 32 printable characters). Never raises.
    """
    if not isinstance(raw, str):
        return ""

    match = _HEX_BLOB_PATTERN.fullmatch(raw)
    if match:
        text = bytes.fromhex(match.group(1)).decode("utf-8", errors="ignore").replace("\x00", "")
    else:
        text = raw

    text = _NON_PRINTABLE_PATTERN.sub("", text).strip()
    if len(text) < MIN_SYMBOL_LENGTH or len(text) > MAX_SYMBOL_LENGTH:
        return ""
    return text
