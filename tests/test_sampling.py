"""Tests for temporal sampling and title draws."""

from datetime import datetime, timedelta, timezone
from random import Random

import pytest

from event_catalog.core.sampling import (
    END_MARGIN,
    MAX_DURATION,
    TITLES,
    random_event_time,
    random_past_instant,
    random_title,
)

_NOW = datetime(2026, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestRandomPastInstant:
    def test_within_window(self) -> None:
        rng = Random(1)
        for _ in range(500):
            start = random_past_instant(_NOW, 30, rng)
            assert _NOW - timedelta(days=30) <= start <= _NOW

    def test_fractional_days(self) -> None:
        rng = Random(2)
        for _ in range(100):
            start = random_past_instant(_NOW, 0.5, rng)
            assert _NOW - timedelta(hours=12) <= start <= _NOW


class TestRandomEventTime:
    def test_probability_one_is_always_momentary(self) -> None:
        rng = Random(3)
        start = _NOW - timedelta(days=2)
        for _ in range(200):
            et = random_event_time(_NOW, start, 1.0, rng)
            assert et.end is None
            assert et.is_momentary

    def test_probability_zero_gives_ranges(self) -> None:
        rng = Random(4)
        for _ in range(200):
            start = random_past_instant(_NOW, 30, rng)
            if start > _NOW - END_MARGIN:
                continue
            et = random_event_time(_NOW, start, 0.0, rng)
            assert et.end is not None
            assert et.start < et.end <= _NOW - END_MARGIN
            assert et.end - et.start <= MAX_DURATION

    def test_duration_capped_at_one_day(self) -> None:
        rng = Random(5)
        start = _NOW - timedelta(days=20)
        spans = [random_event_time(_NOW, start, 0.0, rng).duration_seconds for _ in range(500)]
        assert max(spans) <= MAX_DURATION.total_seconds()
        # plenty of slack, so long spans do show up
        assert max(spans) > 20 * 3600

    def test_span_limited_by_end_margin(self) -> None:
        rng = Random(6)
        start = _NOW - timedelta(minutes=10)
        for _ in range(200):
            et = random_event_time(_NOW, start, 0.0, rng)
            assert et.end is not None
            assert et.end <= _NOW - END_MARGIN

    @pytest.mark.parametrize("seconds_ago", [0, 30, 60])
    def test_start_too_recent_falls_back_to_momentary(self, seconds_ago: int) -> None:
        rng = Random(7)
        start = _NOW - timedelta(seconds=seconds_ago)
        for _ in range(50):
            et = random_event_time(_NOW, start, 0.0, rng)
            assert et.end is None

    def test_momentary_fallback_draws_no_span(self) -> None:
        a, b = Random(8), Random(8)
        random_event_time(_NOW, _NOW, 0.0, a)
        b.random()
        assert a.random() == b.random()

    def test_range_draws_two_values(self) -> None:
        a, b = Random(9), Random(9)
        random_event_time(_NOW, _NOW - timedelta(days=1), 0.0, a)
        b.random()
        b.random()
        assert a.random() == b.random()


class TestRandomTitle:
    def test_vocabulary(self) -> None:
        assert set(TITLES) == {"santa", "deer", "dwarf", "tree"}

    def test_draws_from_vocabulary(self) -> None:
        rng = Random(10)
        titles = {random_title(rng) for _ in range(200)}
        assert titles == set(TITLES)
