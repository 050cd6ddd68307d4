"""Unit tests for neighborhood trends and the trend cache."""

from __future__ import annotations

from datetime import date

import pytest

from tielog.errors import MissingArgumentError
from tielog.network import SocialNetwork, TrendAggregator, TrendCache
from tielog.status import NetworkStatus

JAN_1 = date(2014, 1, 1)
JAN_15 = date(2014, 1, 15)
FEB_1 = date(2014, 2, 1)
MAR_1 = date(2014, 3, 1)


@pytest.fixture
def chain(populated_network):
    """a-b on 1/1, b-c on 1/15, a-b torn down on 2/1."""
    populated_network.establish_link({"a", "b"}, JAN_1)
    populated_network.establish_link({"b", "c"}, JAN_15)
    populated_network.tear_down_link({"a", "b"}, FEB_1)
    return populated_network


class TestNeighborhoodTrend:
    """Test SocialNetwork.neighborhood_trend."""

    def test_one_sample_per_event_date(self, chain):
        trend = chain.neighborhood_trend("a")

        assert trend.status is NetworkStatus.SUCCESS
        assert trend.series == {JAN_1: 2, JAN_15: 3, FEB_1: 1}
        assert list(trend.series) == [JAN_1, JAN_15, FEB_1]

    def test_uses_dates_from_the_whole_network(self, chain):
        """Dates of links the seed is not part of are sampled too."""
        chain.establish_link({"d", "e"}, MAR_1)
        trend = chain.neighborhood_trend("f")
        assert trend.series == {JAN_1: 1, JAN_15: 1, FEB_1: 1, MAR_1: 1}

    def test_empty_network_has_empty_trend(self, populated_network):
        trend = populated_network.neighborhood_trend("a")
        assert trend.status is NetworkStatus.SUCCESS
        assert trend.series == {}

    def test_unknown_seed(self, chain):
        trend = chain.neighborhood_trend("zed")
        assert trend.status is NetworkStatus.INVALID_USERS
        assert len(trend) == 0

    def test_none_seed_raises(self, chain):
        with pytest.raises(MissingArgumentError):
            chain.neighborhood_trend(None)  # type: ignore[arg-type]

    def test_repeat_call_extends_series(self, chain):
        """New event dates are added and earlier samples are kept as they were."""
        first = chain.neighborhood_trend("a")

        chain.establish_link({"a", "d"}, MAR_1)
        second = chain.neighborhood_trend("a")

        assert set(first.series) <= set(second.series)
        for when, size in first.series.items():
            assert second.series[when] == size
        assert second.series[MAR_1] == 2

    def test_cached_samples_are_reused(self, chain):
        cache = chain.trend_cache
        chain.neighborhood_trend("a")
        misses = cache.get_stats()["miss_count"]

        chain.neighborhood_trend("a")
        stats = cache.get_stats()

        assert stats["miss_count"] == misses
        assert stats["hit_count"] == 3

    def test_cache_is_injected(self, settings, chain):
        """A shared cache sees samples computed by the network."""
        cache = TrendCache()
        network = SocialNetwork(settings=settings, trend_cache=cache)
        for user in chain.users:
            network.add_user(user)
        network.establish_link({"a", "b"}, JAN_1)

        network.neighborhood_trend("a")

        assert cache.series("a") == {JAN_1: 2}
        assert chain.trend_cache.seeds() == frozenset()


class TestTrendCache:
    """Test the per-seed sample cache."""

    def test_record_is_insert_if_absent(self):
        cache = TrendCache()
        assert cache.record("a", JAN_1, 3) is True
        assert cache.record("a", JAN_1, 5) is False
        assert cache.get("a", JAN_1) == 3

    def test_series_is_date_ordered_copy(self):
        cache = TrendCache()
        cache.record("a", FEB_1, 2)
        cache.record("a", JAN_1, 1)
        series = cache.series("a")
        assert list(series) == [JAN_1, FEB_1]
        series[MAR_1] = 9
        assert MAR_1 not in cache.series("a")

    def test_stats(self):
        cache = TrendCache()
        cache.record("a", JAN_1, 1)
        cache.get("a", JAN_1)
        cache.get("a", FEB_1)
        cache.get("b", JAN_1)

        stats = cache.get_stats()

        assert stats["seed_count"] == 1
        assert stats["sample_count"] == 1
        assert stats["hit_count"] == 1
        assert stats["miss_count"] == 2
        assert stats["hit_rate"] == 0.333

    def test_clear(self):
        cache = TrendCache()
        cache.record("a", JAN_1, 1)
        cache.clear()
        assert cache.seeds() == frozenset()


class TestTrendAggregator:
    def test_computes_only_missing_dates(self):
        calls = []

        def size(seed_id, when):
            calls.append(when)
            return 7

        cache = TrendCache()
        cache.record("a", JAN_1, 1)
        aggregator = TrendAggregator(size, cache)

        trend = aggregator.trend("a", [FEB_1, JAN_1, FEB_1])

        assert calls == [FEB_1]
        assert trend.series == {JAN_1: 1, FEB_1: 7}
