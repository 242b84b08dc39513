"""Tests for the statistics bundle and filter options."""

import asyncio
from unittest.mock import patch

import pytest

from dpr_api.data.fanout import gather_isolated
from dpr_api.data.stats_store import StatsStore, UNKNOWN_LABEL


def test_stats_bundle_keys_in_order(store):
    stats = asyncio.run(store.get_stats())
    assert list(stats) == [
        "total", "byFraksi", "byPartai", "byPendidikan", "byAgama",
        "byUsia", "byGender", "avgAge", "recentMembers",
    ]


def test_stats_totals_and_groups(store):
    stats = asyncio.run(store.get_stats())

    assert stats["total"] == [{"count": 6}]
    assert stats["byFraksi"] == [
        {"fraksi": "Fraksi PDI Perjuangan", "count": 2},
        {"fraksi": "Fraksi Partai Golkar", "count": 2},
        {"fraksi": "Fraksi Partai Demokrat", "count": 1},
        {"fraksi": "Fraksi Partai NasDem", "count": 1},
    ]
    # NULL religion and empty education are left out of the groups
    assert stats["byAgama"] == [
        {"agama": "Islam", "count": 3},
        {"agama": "Hindu", "count": 1},
        {"agama": "Kristen", "count": 1},
    ]
    assert [row["pendidikan_terakhir"] for row in stats["byPendidikan"]] == ["S1", "S2", "S3"]


def test_age_histogram_buckets(store):
    stats = asyncio.run(store.get_stats())
    buckets = {row["kategori_usia"]: row for row in stats["byUsia"]}

    assert set(buckets) == {
        "Di bawah 30", "30-40 tahun", "41-50 tahun", "51-60 tahun", "Di atas 60", UNKNOWN_LABEL,
    }
    assert all(row["count"] == 1 for row in buckets.values())
    assert buckets["Di atas 60"]["avg_usia"] == 65
    assert buckets[UNKNOWN_LABEL]["avg_usia"] is None


def test_age_summary_ignores_missing_ages(store):
    stats = asyncio.run(store.get_stats())
    summary = stats["avgAge"][0]
    assert summary["avg_age"] == pytest.approx(46.8)
    assert summary["min_age"] == 29
    assert summary["max_age"] == 65


def test_recent_members_newest_first(store):
    stats = asyncio.run(store.get_stats())
    assert [row["nama"] for row in stats["recentMembers"]] == [
        "Yohanes Kurniawan", "Muhammad Rizal", "Dewi Lestari", "Budi Santoso", "Hj. Siti Nurbaya",
    ]
    assert set(stats["recentMembers"][0]) == {"nama", "fraksi", "partai"}


def test_gender_guess_covers_every_member(store):
    stats = asyncio.run(store.get_stats())
    genders = {row["gender"]: row["count"] for row in stats["byGender"]}
    assert sum(genders.values()) == 6
    assert genders["Perempuan"] == 2
    assert genders["Laki-laki"] == 2


def test_gender_guess_can_be_disabled(store):
    stats_store = StatsStore(store.session_factory, recent_limit=2, include_gender=False)
    stats = asyncio.run(stats_store.get_stats())
    assert "byGender" not in stats
    assert len(stats["recentMembers"]) == 2


def test_failing_query_degrades_to_empty_list(store):
    with patch.object(store.stats_store, "_age_histogram", side_effect=RuntimeError("boom")):
        stats = asyncio.run(store.get_stats())

    assert stats["byUsia"] == []
    assert stats["total"] == [{"count": 6}]
    assert len(stats["byFraksi"]) == 4


def test_stats_on_empty_table(empty_store):
    stats = asyncio.run(empty_store.get_stats())
    assert stats["total"] == [{"count": 0}]
    assert stats["byAgama"] == []
    assert stats["recentMembers"] == []
    assert stats["avgAge"] == [{"avg_age": None, "min_age": None, "max_age": None}]


def test_filter_options(store):
    options = asyncio.run(store.get_filter_options())
    assert list(options) == ["fraksi", "partai", "agama", "pendidikan", "dapil"]
    assert options["partai"] == ["Demokrat", "Golkar", "NasDem", "PDI-P"]
    assert options["agama"] == ["Hindu", "Islam", "Kristen"]
    assert options["pendidikan"] == ["S1", "S2", "S3"]
    assert len(options["dapil"]) == 6


def test_gather_isolated_keeps_order_and_isolates_failures():
    def fail():
        raise ValueError("nope")

    result = asyncio.run(gather_isolated({"a": lambda: [1], "b": fail, "c": lambda: [3]}))
    assert result == {"a": [1], "b": [], "c": [3]}
