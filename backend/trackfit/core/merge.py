from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional

from trackfit.core.target_curve import (
    TargetConfig,
    campaign_dates,
    generate_targets,
    to_iso,
)


class WeightRecord(NamedTuple):
    date: str
    weight: float


@dataclass(frozen=True)
class MergedPoint:
    date: str
    weight: Optional[float] = None
    target: Optional[float] = None


def all_dates(records: Iterable, config: TargetConfig) -> list[str]:
    """Sorted union of campaign dates and recorded dates, without duplicates."""
    dates = set(campaign_dates(config))
    dates.update(to_iso(r.date) for r in records)
    # ISO strings sort chronologically
    return sorted(dates)


def merge_series(records: Iterable, config: TargetConfig) -> list[MergedPoint]:
    """
    Combine stored records with the target curve, one point per date.

    `records` is anything with `.date` and `.weight` (ORM rows or
    WeightRecord). When several records share a date, the first one in the
    given order wins.
    """
    records = list(records)
    dates = all_dates(records, config)

    by_date = {}
    for record in records:
        by_date.setdefault(to_iso(record.date), record)

    targets = dict(generate_targets(dates, config))

    points: list[MergedPoint] = []
    for d in dates:
        record = by_date.get(d)
        points.append(
            MergedPoint(
                date=d,
                weight=float(record.weight) if record is not None else None,
                target=targets[d],
            )
        )
    return points
