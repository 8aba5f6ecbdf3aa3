"""Diet target curve.

A campaign is a straight line from ``start_weight`` on ``start_date`` to
``end_weight`` on ``end_date``. Targets only exist inside that window; any
date outside it has no target at all.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, NamedTuple, Optional


@dataclass(frozen=True)
class TargetConfig:
    start_date: date
    end_date: date
    start_weight: float
    end_weight: float

    def __post_init__(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")

    @property
    def total_days(self) -> int:
        return (self.end_date - self.start_date).days


class TargetPoint(NamedTuple):
    date: str
    target: Optional[float]


def to_date(value) -> date:
    """Accept a ``date`` or an ISO 'YYYY-MM-DD' string."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def to_iso(value) -> str:
    """Format a ``date`` as 'YYYY-MM-DD'; strings pass through untouched."""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def round_one_decimal(value: float) -> float:
    """
    Round to one decimal place, ties away from zero.

    Works on the exact binary value of the float, so 89.0909... -> 89.1
    and 0.25 -> 0.3.
    """
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def campaign_dates(config: TargetConfig) -> list[str]:
    """Every day of the campaign window, both ends included."""
    return [
        (config.start_date + timedelta(days=offset)).isoformat()
        for offset in range(config.total_days + 1)
    ]


def target_for(day, config: TargetConfig) -> Optional[float]:
    current = to_date(day)
    if current < config.start_date or current > config.end_date:
        return None

    total_days = config.total_days
    if total_days == 0:
        # single-day campaign
        return round_one_decimal(config.end_weight)

    days_elapsed = (current - config.start_date).days
    value = (
        config.start_weight
        - (config.start_weight - config.end_weight) * days_elapsed / total_days
    )
    return round_one_decimal(value)


def generate_targets(dates: Iterable, config: TargetConfig) -> list[TargetPoint]:
    """Target weight for each date, in input order. Duplicates are kept."""
    return [TargetPoint(to_iso(d), target_for(d, config)) for d in dates]
