from datetime import datetime, timezone

import pytest

from reviewlens.core.analytics.periods import (
    EPOCH,
    InvalidPeriodError,
    months_back,
    resolve_period,
)


def test_default_period_is_six_months(now):
    window = resolve_period(None, now)
    assert window.period == "6months"
    assert window.start == datetime(2023, 12, 15, 12, 0, tzinfo=timezone.utc)
    assert window.end == now


@pytest.mark.parametrize(
    "period, start",
    [
        ("30days", datetime(2024, 5, 16, 12, 0, tzinfo=timezone.utc)),
        ("90days", datetime(2024, 3, 17, 12, 0, tzinfo=timezone.utc)),
        ("1year", datetime(2023, 6, 15, 12, 0, tzinfo=timezone.utc)),
    ],
)
def test_calendar_offsets(now, period, start):
    assert resolve_period(period, now).start == start


def test_all_time_starts_at_epoch(now):
    window = resolve_period("all", now)
    assert window.start == EPOCH
    assert window.label == "All time"


def test_unknown_period_raises(now):
    with pytest.raises(InvalidPeriodError):
        resolve_period("fortnight", now)


def test_window_is_half_open(now):
    window = resolve_period("30days", now)
    assert window.contains(window.start)
    assert not window.contains(window.end)
    # naive timestamps are read as UTC
    assert window.contains(datetime(2024, 6, 1))


def test_months_back_clamps_month_end():
    end_of_august = datetime(2024, 8, 31, tzinfo=timezone.utc)
    assert months_back(end_of_august, 6) == datetime(2024, 2, 29, tzinfo=timezone.utc)
