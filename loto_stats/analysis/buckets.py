"""Decade and card-column distributions of the 1-90 number space.

Both partitions split the numbers into 9 groups but mean different things:
decades are arithmetic tens, columns follow the layout of a loto card where
the last column also holds 90.
"""

from collections.abc import Sequence

from loto_stats.schemas.statistics import DecadeBucket, NumberBucket, NumberFrequency

DECADES = [(start, start + 9) for start in range(1, 90, 10)]
COLUMNS = [(1, 9)] + [(start, start + 9) for start in range(10, 80, 10)] + [(80, 90)]

# Share of each bucket under a perfectly even draw
UNIFORM_SHARE = 100 / 9


def _bucketize(
    frequency: Sequence[NumberFrequency], ranges: list[tuple[int, int]]
) -> list[NumberBucket]:
    total = sum(f.count for f in frequency)

    buckets = []
    for start, end in ranges:
        members = [f for f in frequency if start <= f.number <= end]
        count = sum(f.count for f in members)
        buckets.append(NumberBucket(
            label=f"{start}-{end}",
            start=start,
            end=end,
            count=count,
            percentage=count / total * 100 if total > 0 else 0.0,
            numbers=[f.number for f in members if f.count > 0],
        ))
    return buckets


def decade_buckets(frequency: Sequence[NumberFrequency]) -> list[DecadeBucket]:
    """Draw counts per ten (1-10 ... 81-90) with deviation from an even share.

    The deviation is not applicable while nothing has been drawn.
    """
    has_draws = any(f.count > 0 for f in frequency)
    return [
        DecadeBucket(
            **bucket.model_dump(),
            deviation=bucket.percentage - UNIFORM_SHARE if has_draws else None,
        )
        for bucket in _bucketize(frequency, DECADES)
    ]


def column_buckets(frequency: Sequence[NumberFrequency]) -> list[NumberBucket]:
    """Draw counts per card column (1-9, 10-19 ... 80-90)."""
    return _bucketize(frequency, COLUMNS)
