"""Statistics service: assembles every analysis into one snapshot."""

from loguru import logger

from loto_stats.analysis.buckets import column_buckets, decade_buckets
from loto_stats.analysis.frequency import number_frequencies
from loto_stats.analysis.gaps import (
    GAP_HIGHLIGHT_COUNT,
    number_gaps,
    overdue_numbers,
    steadiest_numbers,
)
from loto_stats.analysis.milestones import milestone_summary, round_milestones
from loto_stats.analysis.overview import round_evolution, session_overview
from loto_stats.analysis.parity import parity_stats
from loto_stats.analysis.ranking import (
    TOP_FLOP_COUNT,
    flop_numbers,
    least_frequent,
    most_frequent,
    top_numbers,
)
from loto_stats.analysis.timing import timing_stats
from loto_stats.schemas.session import Round, Session
from loto_stats.schemas.statistics import (
    MilestoneSummary,
    NumberFrequency,
    NumberGap,
    RoundMilestones,
    StatisticsSnapshot,
    TimingStats,
)


def _rounds(session: Session | None) -> list[Round]:
    return list(session.rounds) if session else []


def compute_statistics(
    session: Session | None,
    *,
    top_count: int = TOP_FLOP_COUNT,
    highlight_count: int = GAP_HIGHLIGHT_COUNT,
) -> StatisticsSnapshot:
    """Compute the full statistics snapshot of a session.

    Pure function of its input: the session is only read, and the same
    session always gives an equal snapshot. ``None`` gives the empty
    defaults of every section.
    """
    rounds = _rounds(session)

    frequency = number_frequencies(rounds)
    gaps = number_gaps(rounds)
    overview = session_overview(session, frequency)

    snapshot = StatisticsSnapshot(
        overview=overview,
        frequency=frequency,
        top=top_numbers(frequency, top_count),
        flop=flop_numbers(frequency, top_count),
        most_frequent=most_frequent(frequency),
        least_frequent=least_frequent(frequency),
        decades=decade_buckets(frequency),
        columns=column_buckets(frequency),
        gaps=gaps,
        overdue=overdue_numbers(gaps, highlight_count),
        steadiest=steadiest_numbers(gaps, highlight_count),
        timing=timing_stats(rounds),
        parity=parity_stats(rounds),
        milestones=milestone_summary(rounds),
        round_milestones=[
            round_milestones(r) for r in sorted(rounds, key=lambda r: r.round_number)
        ],
        evolution=round_evolution(rounds),
    )

    logger.debug(
        "Computed statistics for session {}: {} rounds, {} draws",
        overview.session_id, overview.round_count, overview.total_draws,
    )
    return snapshot


def get_frequency(session: Session | None) -> list[NumberFrequency]:
    return number_frequencies(_rounds(session))


def get_gaps(session: Session | None) -> list[NumberGap]:
    return number_gaps(_rounds(session))


def get_timing(session: Session | None) -> TimingStats:
    return timing_stats(_rounds(session))


def get_milestones(session: Session | None) -> MilestoneSummary:
    return milestone_summary(_rounds(session))


def get_round_milestones(session: Session | None, round_number: int) -> RoundMilestones | None:
    """Milestones of the round with the given number, or None if absent."""
    for r in _rounds(session):
        if r.round_number == round_number:
            return round_milestones(r)
    return None
