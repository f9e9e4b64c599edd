"""Round duration and draw cadence statistics."""

from collections.abc import Iterable

from loto_stats.schemas.session import Round
from loto_stats.schemas.statistics import TimingStats


def timing_stats(rounds: Iterable[Round]) -> TimingStats:
    """Duration statistics over finished rounds.

    A round without an end timestamp is still being played and is left out of
    every figure, both for durations and for the cadence draw count.
    """
    finished = [r for r in rounds if r.is_finished]
    durations = [r.duration_seconds for r in finished]

    finished_draws = sum(len(r.draws) for r in finished)
    average_cadence = sum(durations) / finished_draws if finished_draws > 0 else 0.0

    return TimingStats(
        completed_rounds=len(finished),
        average_round_duration=sum(durations) / len(durations) if durations else 0.0,
        fastest_round=min(durations) if durations else None,
        slowest_round=max(durations) if durations else None,
        average_cadence=average_cadence,
    )
