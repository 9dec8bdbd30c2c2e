"""Tests for the freshness policy."""

from game_monitor.domain.lookup import CacheState
from game_monitor.services.freshness import FreshnessPolicy, needs_fetch
from tests.conftest import CLIENT_VERSION, NOW, make_record

POLICY = FreshnessPolicy(ttl_seconds=600, client_version=CLIENT_VERSION)


def test_missing_record_is_a_miss() -> None:
    assert POLICY.evaluate(None, NOW) is CacheState.MISS


def test_record_within_ttl_is_fresh() -> None:
    assert POLICY.evaluate(make_record(updated=NOW - 599), NOW) is CacheState.FRESH


def test_record_exactly_at_ttl_is_fresh() -> None:
    assert POLICY.evaluate(make_record(updated=NOW - 600), NOW) is CacheState.FRESH


def test_record_past_ttl_is_stale() -> None:
    state = POLICY.evaluate(make_record(updated=NOW - 601), NOW)

    assert state is CacheState.STALE_AGE
    assert needs_fetch(state)


def test_version_mismatch_is_stale_regardless_of_age() -> None:
    record = make_record(updated=NOW, client_version="0.01")

    state = POLICY.evaluate(record, NOW)

    assert state is CacheState.STALE_VERSION
    assert needs_fetch(state)


def test_only_fresh_skips_fetch() -> None:
    assert not needs_fetch(CacheState.FRESH)
    assert needs_fetch(CacheState.MISS)
