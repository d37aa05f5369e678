"""
Wire-name obfuscation keyed by a server secret and an hour bucket.
The same logical name maps to the same wire id for the whole hour, and the
server can recompute it without storing anything.
"""
from __future__ import annotations

import hashlib
from datetime import datetime, timedelta, timezone

from ghostfield.app.core.config import (
    BUCKET_TOLERANCE_SECONDS,
    TIME_BUCKET_FORMAT,
    WIRE_ID_PREFIX,
)


def derive_wire_id(name: str, secret_key: str, bucket: str) -> str:
    """
    Deterministic wire id for a logical field name.
    An empty secret_key still works but makes ids guessable.
    """
    digest = hashlib.sha512(f"{name}_{secret_key}{bucket}".encode("utf-8")).hexdigest()
    return WIRE_ID_PREFIX + digest


def time_bucket(moment: datetime) -> str:
    """Hour-truncated label, e.g. '2025-03-14 15'."""
    return moment.strftime(TIME_BUCKET_FORMAT)


def shift_back(moment: datetime, seconds: int = BUCKET_TOLERANCE_SECONDS) -> datetime:
    """Subtract elapsed seconds. Aware datetimes go through UTC so DST is honored."""
    if moment.tzinfo is None:
        return moment - timedelta(seconds=seconds)
    return (moment.astimezone(timezone.utc) - timedelta(seconds=seconds)).astimezone(moment.tzinfo)


def candidate_buckets(now: datetime) -> list[str]:
    """Buckets to check at validation time, in priority order, without duplicates."""
    current = time_bucket(now)
    previous = time_bucket(shift_back(now))
    if previous == current:
        return [current]
    return [current, previous]
