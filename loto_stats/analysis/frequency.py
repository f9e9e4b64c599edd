"""Per-number draw frequency over a session."""

from collections import Counter
from collections.abc import Iterable

from loto_stats.schemas.session import Round
from loto_stats.schemas.statistics import NumberFrequency

MIN_NUMBER = 1
MAX_NUMBER = 90


def count_draws(rounds: Iterable[Round]) -> Counter:
    """Count occurrences of every valid number across all rounds."""
    counter = Counter()
    for r in rounds:
        counter.update(n for n in r.draws if MIN_NUMBER <= n <= MAX_NUMBER)
    return counter


def number_frequencies(rounds: Iterable[Round]) -> list[NumberFrequency]:
    """Get draw count and share of every number, 1 to 90 in ascending order."""
    counter = count_draws(rounds)
    total = sum(counter.values())

    result = []
    for num in range(MIN_NUMBER, MAX_NUMBER + 1):
        count = counter.get(num, 0)
        result.append(NumberFrequency(
            number=num,
            count=count,
            percentage=count / total * 100 if total > 0 else 0.0,
        ))

    return result


def total_draws(frequency: Iterable[NumberFrequency]) -> int:
    return sum(f.count for f in frequency)
