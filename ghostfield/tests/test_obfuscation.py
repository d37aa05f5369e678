"""Tests for wire id derivation and time buckets."""
from datetime import datetime, timezone

import pytest

from ghostfield.app.utils.obfuscation import (
    candidate_buckets,
    derive_wire_id,
    shift_back,
    time_bucket,
)

# sha512("user_email_s3cret2025-03-14 15")
USER_EMAIL_ID = (
    "ID6f548a579e7fd5b26d4aa8c7aaff89b625904ab7f29b304ba708bb53be53972582"
    "ebca0f9e464839ef4703daa82966272c4b1ad99d0e13a10e2140773e4833d4"
)


def test_derive_wire_id_pinned():
    assert derive_wire_id("user_email", "s3cret", "2025-03-14 15") == USER_EMAIL_ID


def test_derive_wire_id_deterministic():
    a = derive_wire_id("email", "k", "2025-03-14 15")
    assert a == derive_wire_id("email", "k", "2025-03-14 15")
    assert a.startswith("ID")
    assert len(a) == 2 + 128


@pytest.mark.parametrize(
    "args",
    [
        ("email2", "k", "2025-03-14 15"),
        ("email", "k2", "2025-03-14 15"),
        ("email", "k", "2025-03-14 16"),
    ],
)
def test_derive_wire_id_sensitive_to_each_input(args):
    assert derive_wire_id(*args) != derive_wire_id("email", "k", "2025-03-14 15")


def test_empty_secret_is_still_deterministic():
    assert derive_wire_id("email", "", "2025-03-14 15") == derive_wire_id("email", "", "2025-03-14 15")


def test_time_bucket_truncates_to_hour():
    assert time_bucket(datetime(2025, 3, 14, 15, 0, 0)) == "2025-03-14 15"
    assert time_bucket(datetime(2025, 3, 14, 15, 59, 59)) == "2025-03-14 15"


def test_candidate_buckets_current_then_previous():
    assert candidate_buckets(datetime(2025, 3, 14, 15, 9, 26)) == ["2025-03-14 15", "2025-03-14 14"]


def test_candidate_buckets_cross_midnight():
    assert candidate_buckets(datetime(2025, 1, 1, 0, 0, 0)) == ["2025-01-01 00", "2024-12-31 23"]


def test_shift_back_aware_keeps_zone():
    moment = datetime(2025, 3, 14, 15, 9, 26, tzinfo=timezone.utc)
    assert shift_back(moment) == datetime(2025, 3, 14, 14, 9, 26, tzinfo=timezone.utc)


def test_candidate_buckets_deduplicated_on_dst_fall_back():
    """01:30 EST minus one real hour is 01:30 EDT: same label, checked once."""
    zoneinfo = pytest.importorskip("zoneinfo")
    try:
        tz = zoneinfo.ZoneInfo("America/New_York")
    except zoneinfo.ZoneInfoNotFoundError:
        pytest.skip("tz database not available")
    moment = datetime(2025, 11, 2, 1, 30, tzinfo=tz, fold=1)
    assert candidate_buckets(moment) == ["2025-11-02 01"]
