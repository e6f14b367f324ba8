"""
Parsing of the JSON-encoded `filter` query parameter used by list endpoints.

A payload that is not valid JSON, or not a JSON object, means "no filter".
Individual keys that do not parse are dropped.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from coffee_loyalty.utils import parse_datetime, parse_uuid


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberFilter:
    valid_from: datetime | None = None
    club_category_id: UUID | None = None


@dataclass(frozen=True)
class TransactionFilter:
    member_id: UUID | None = None
    product_id: UUID | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None


def _load_object(raw: str | None) -> dict | None:
    if not raw:
        return None
    try:
        parsed = json.loads(raw)
    except ValueError:
        logger.debug("ignoring malformed filter", extra={"filter": raw})
        return None
    if not isinstance(parsed, dict):
        logger.debug("ignoring non-object filter", extra={"filter": raw})
        return None
    return parsed


def parse_member_filter(raw: str | None) -> MemberFilter:
    parsed = _load_object(raw)
    if parsed is None:
        return MemberFilter()

    return MemberFilter(
        valid_from=parse_datetime(parsed.get("validUntil")),
        club_category_id=parse_uuid(parsed.get("clubCategory")),
    )


def parse_transaction_filter(raw: str | None) -> TransactionFilter:
    parsed = _load_object(raw)
    if parsed is None:
        return TransactionFilter()

    return TransactionFilter(
        member_id=parse_uuid(parsed.get("memberId")),
        product_id=parse_uuid(parsed.get("productId")),
        date_from=parse_datetime(parsed.get("dateFrom")),
        date_to=parse_datetime(parsed.get("dateTo")),
    )
