"""Top and flop rankings built on the frequency table.

Both rankings expect the frequency table in ascending number order: the sorts
are stable, so equal counts keep the smaller number first.
"""

from collections.abc import Sequence

from loto_stats.schemas.statistics import NumberFrequency

TOP_FLOP_COUNT = 15


def top_numbers(
    frequency: Sequence[NumberFrequency], k: int = TOP_FLOP_COUNT
) -> list[NumberFrequency]:
    """The k most drawn numbers, highest count first."""
    ranked = sorted(frequency, key=lambda f: -f.count)
    return ranked[:max(k, 0)]


def flop_numbers(
    frequency: Sequence[NumberFrequency], k: int = TOP_FLOP_COUNT
) -> list[NumberFrequency]:
    """The k least drawn numbers, lowest count first.

    Numbers never drawn are left out: nothing tells them apart.
    """
    drawn = [f for f in frequency if f.count > 0]
    ranked = sorted(drawn, key=lambda f: f.count)
    return ranked[:max(k, 0)]


def most_frequent(frequency: Sequence[NumberFrequency]) -> NumberFrequency | None:
    top = top_numbers(frequency, 1)
    if not top or top[0].count == 0:
        return None
    return top[0]


def least_frequent(frequency: Sequence[NumberFrequency]) -> NumberFrequency | None:
    flop = flop_numbers(frequency, 1)
    return flop[0] if flop else None
