"""
Tests for drinking status classification and cellar bucketing.
"""

import pytest

from app.models.enums import DrinkingStatus
from app.services.status_classifier import (
    STATUS_DISPLAY,
    STATUS_ORDER,
    bucket_by_status,
    classify,
    drinking_window_info,
    format_drinking_window,
    window_info,
)
from app.services.window_estimator import DrinkingWindow, WineAttributes, estimate_window


CABERNET_2015 = DrinkingWindow(start=2018, peak=2023, end=2035)


class TestClassify:
    """Boundary behavior of the four-state classifier."""

    @pytest.mark.parametrize("year,expected", [
        (2017, DrinkingStatus.AGING),
        (2018, DrinkingStatus.READY),
        (2022, DrinkingStatus.APPROACHING_PEAK),
        (2023, DrinkingStatus.APPROACHING_PEAK),
        (2024, DrinkingStatus.APPROACHING_PEAK),
        (2025, DrinkingStatus.READY),
        (2035, DrinkingStatus.READY),
        (2036, DrinkingStatus.PAST_PEAK),
    ])
    def test_boundaries(self, year, expected):
        assert classify(CABERNET_2015, year) == expected

    def test_end_checked_before_peak_window(self):
        window = DrinkingWindow(start=2020, peak=2024, end=2024)
        assert classify(window, 2024) == DrinkingStatus.APPROACHING_PEAK
        assert classify(window, 2025) == DrinkingStatus.PAST_PEAK

    def test_start_checked_before_peak_window(self):
        # peak - 1 falls before start, AGING wins
        window = DrinkingWindow(start=2020, peak=2020, end=2025)
        assert classify(window, 2019) == DrinkingStatus.AGING
        assert classify(window, 2020) == DrinkingStatus.APPROACHING_PEAK
        assert classify(window, 2021) == DrinkingStatus.APPROACHING_PEAK
        assert classify(window, 2022) == DrinkingStatus.READY

    def test_exactly_one_status_per_year(self):
        for year in range(1990, 2060):
            assert classify(CABERNET_2015, year) in DrinkingStatus

    def test_default_window_timeline(self):
        # (+0, +2, +5): vintage+1 through vintage+3 are within a year of peak
        window = estimate_window(WineAttributes(2020, "", ""))
        statuses = [classify(window, year) for year in range(2019, 2027)]
        assert statuses == [
            DrinkingStatus.AGING,
            DrinkingStatus.READY,
            DrinkingStatus.APPROACHING_PEAK,
            DrinkingStatus.APPROACHING_PEAK,
            DrinkingStatus.APPROACHING_PEAK,
            DrinkingStatus.READY,
            DrinkingStatus.READY,
            DrinkingStatus.PAST_PEAK,
        ]


class TestWindowInfo:
    """Presentation-enriched classification."""

    def test_info_carries_window_and_display(self):
        info = window_info(CABERNET_2015, 2030)
        assert (info.start, info.peak, info.end) == (2018, 2023, 2035)
        assert info.status == DrinkingStatus.READY
        assert info.status_label == "Ready Now"
        assert info.status_emoji == "🟢"

    @pytest.mark.parametrize("year,label,emoji", [
        (2010, "Still Aging", "⏳"),
        (2023, "At Peak", "🟡"),
        (2040, "Past Peak", "🔴"),
    ])
    def test_labels_and_emoji(self, year, label, emoji):
        info = window_info(CABERNET_2015, year)
        assert info.status_label == label
        assert info.status_emoji == emoji

    def test_drinking_window_info_estimates_first(self):
        info = drinking_window_info(WineAttributes(2015, "Nebbiolo", "Barolo"), 2023)
        assert (info.start, info.peak, info.end) == (2018, 2023, 2035)
        assert info.status == DrinkingStatus.APPROACHING_PEAK

    def test_display_table_covers_every_status(self):
        assert set(STATUS_DISPLAY) == set(DrinkingStatus)
        assert set(STATUS_ORDER) == set(DrinkingStatus)
        assert STATUS_ORDER[0] == DrinkingStatus.READY

    def test_format_drinking_window(self):
        assert format_drinking_window(CABERNET_2015) == "2018 - 2035"


class TestBucketByStatus:
    """Stable partition of a cellar by status."""

    @pytest.fixture
    def cellar(self):
        return [
            ("a", WineAttributes(2015, "Cabernet Sauvignon", "Napa Valley")),  # ready in 2030
            ("b", WineAttributes(2028, "Nebbiolo", "Barolo")),                 # aging
            ("c", WineAttributes(2010, "Syrah", "Northern Rhône")),            # ready
            ("d", WineAttributes(2020, "Tempranillo", "Rioja")),               # past peak
            ("e", WineAttributes(2020, "", "Champagne")),                      # ready
            ("f", WineAttributes(2020, "Pinot Noir", "Oregon")),               # at peak 2027 +- 1
        ]

    def test_groups(self, cellar):
        buckets = bucket_by_status(cellar, 2028)
        assert buckets[DrinkingStatus.READY] == ["a", "c", "e"]
        assert buckets[DrinkingStatus.AGING] == ["b"]
        assert buckets[DrinkingStatus.APPROACHING_PEAK] == ["f"]
        assert buckets[DrinkingStatus.PAST_PEAK] == ["d"]

    def test_order_preserved(self):
        wines = [
            ("A", WineAttributes(2010, "Cabernet", "")),   # ready in 2026
            ("B", WineAttributes(2025, "Cabernet", "")),   # aging in 2026
            ("C", WineAttributes(2012, "Syrah", "")),      # ready in 2026
        ]
        buckets = bucket_by_status(wines, 2026)
        assert buckets[DrinkingStatus.READY] == ["A", "C"]
        assert buckets[DrinkingStatus.AGING] == ["B"]

    def test_every_wine_in_exactly_one_group(self, cellar):
        for year in range(2005, 2060, 3):
            buckets = bucket_by_status(cellar, year)
            all_ids = [wine_id for ids in buckets.values() for wine_id in ids]
            assert sorted(all_ids) == sorted(wine_id for wine_id, _ in cellar)
            for wine_id, attrs in cellar:
                assert wine_id in buckets[classify(estimate_window(attrs), year)]

    def test_empty_cellar_has_all_keys(self):
        buckets = bucket_by_status([], 2026)
        assert set(buckets) == set(DrinkingStatus)
        assert all(ids == [] for ids in buckets.values())

    def test_accepts_generator_and_non_string_ids(self):
        wines = ((i, WineAttributes(2000 + i, "Riesling", "Mosel")) for i in range(3))
        buckets = bucket_by_status(wines, 2004)
        # Windows: (2000, 2002, 2007), (2001, 2003, 2008), (2002, 2004, 2009)
        assert buckets[DrinkingStatus.READY] == [0]
        assert buckets[DrinkingStatus.APPROACHING_PEAK] == [1, 2]
