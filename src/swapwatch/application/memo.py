# src/swapwatch/application/memo.py
"""
Memo Parser - Decode Transaction Instruction Memos

THORChain transactions carry a colon-delimited memo, for example
``SWAP:BTC.BTC:bc1qxyz:1000000/10/5:aff123:500000``. Only the swap layout is
decoded field by field; other memo kinds keep their type and asset segment.

Parsing never raises: malformed segments decode to None.

Files that USE this module:
- swapwatch.adapters.formatting.formatter (describes swap memos)
- tests.test_memo (unit tests)

Files that this module USES:
- swapwatch.domain.models (ParsedMemo, SwapMemo)
"""
from __future__ import annotations

import re
from typing import Optional

from swapwatch.domain.models import ParsedMemo, SwapMemo

MEMO_SEPARATOR = ":"
STREAMING_SEPARATOR = "/"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _segment(parts: list[str], index: int) -> Optional[str]:
    """Return ``parts[index]``, or None when missing or empty."""
    if index < len(parts) and parts[index]:
        return parts[index]
    return None


def _parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a memo field.

    '10' and '10blocks' give 10; '', 'abc' and None give None.
    """
    if not value:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def parse_memo(memo: Optional[str]) -> ParsedMemo:
    """
    Decode a transaction memo.

    Args:
        memo: Raw memo text

    Returns:
        SwapMemo for swap memos, ParsedMemo(type, asset_tag) for any other
        kind, ParsedMemo(type=None) for an empty memo
    """
    if not memo:
        return ParsedMemo(type=None)

    parts = memo.split(MEMO_SEPARATOR)
    memo_type = parts[0].lower()

    if memo_type != "swap":
        return ParsedMemo(type=memo_type, asset_tag=_segment(parts, 1))

    # LIM/INTERVAL/QUANTITY, any of which may be absent
    streaming = (_segment(parts, 3) or "").split(STREAMING_SEPARATOR)

    return SwapMemo(
        type=memo_type,
        asset_tag=_segment(parts, 1),
        destination_address=_segment(parts, 2),
        price_limit=_segment(streaming, 0),
        interval_blocks=_parse_int(_segment(streaming, 1)),
        quantity=_parse_int(_segment(streaming, 2)),
        affiliate_address=_segment(parts, 4),
        affiliate_fee=_segment(parts, 5),
    )
