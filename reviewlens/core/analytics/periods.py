from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

import pandas as pd

DEFAULT_PERIOD = "6months"

# period -> (label, calendar offset back from "now"; None means all time)
PERIODS: Dict[str, Tuple[str, Optional[pd.DateOffset]]] = {
    "30days": ("Last 30 days", pd.DateOffset(days=30)),
    "90days": ("Last 90 days", pd.DateOffset(days=90)),
    "6months": ("Last 6 months", pd.DateOffset(months=6)),
    "1year": ("Last year", pd.DateOffset(years=1)),
    "all": ("All time", None),
}

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class InvalidPeriodError(ValueError):
    def __init__(self, period: str):
        super().__init__(
            f"Unknown period '{period}'. Use one of: {', '.join(PERIODS)}."
        )
        self.period = period


@dataclass(frozen=True)
class TimeWindow:
    period: str
    label: str
    start: datetime
    end: datetime

    def contains(self, ts: datetime) -> bool:
        return self.start <= as_utc(ts) < self.end


def as_utc(dt: datetime) -> datetime:
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def months_back(now: datetime, months: int) -> datetime:
    return (pd.Timestamp(as_utc(now)) - pd.DateOffset(months=months)).to_pydatetime()


def resolve_period(period: Optional[str], now: Optional[datetime] = None) -> TimeWindow:
    """Turn a period name into a concrete [start, end) window ending at now."""
    key = period or DEFAULT_PERIOD
    if key not in PERIODS:
        raise InvalidPeriodError(key)

    end = as_utc(now or datetime.now(timezone.utc))
    label, offset = PERIODS[key]
    start = EPOCH if offset is None else (pd.Timestamp(end) - offset).to_pydatetime()
    return TimeWindow(period=key, label=label, start=start, end=end)
