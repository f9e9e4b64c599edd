"""Even/odd balance over all draws."""

from collections.abc import Iterable

from loto_stats.schemas.session import Round
from loto_stats.schemas.statistics import ParityStats


def parity_stats(rounds: Iterable[Round]) -> ParityStats:
    even_count = 0
    odd_count = 0
    for r in rounds:
        for num in r.draws:
            if num % 2 == 0:
                even_count += 1
            else:
                odd_count += 1

    total = even_count + odd_count
    return ParityStats(
        even_count=even_count,
        odd_count=odd_count,
        even_percentage=even_count / total * 100 if total > 0 else 0.0,
        odd_percentage=odd_count / total * 100 if total > 0 else 0.0,
    )
