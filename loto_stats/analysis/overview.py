"""Session-level overview and per-round evolution."""

from collections.abc import Sequence

from loto_stats.analysis.frequency import total_draws
from loto_stats.schemas.session import Round, Session
from loto_stats.schemas.statistics import NumberFrequency, RoundEvolution, SessionOverview


def common_numbers(rounds: Sequence[Round]) -> list[int]:
    """Numbers drawn in every round of the session."""
    if not rounds:
        return []
    shared = set(rounds[0].draws)
    for r in rounds[1:]:
        shared &= set(r.draws)
    return sorted(shared)


def session_overview(
    session: Session | None, frequency: Sequence[NumberFrequency]
) -> SessionOverview:
    rounds = session.rounds if session else []
    total = total_draws(frequency)

    session_duration = None
    if session and session.end_time is not None:
        session_duration = (session.end_time - session.start_time).total_seconds()

    return SessionOverview(
        session_id=session.id if session else None,
        session_name=session.name if session else None,
        round_count=len(rounds),
        completed_round_count=sum(1 for r in rounds if not r.is_active),
        total_draws=total,
        average_draws_per_round=total / len(rounds) if rounds else None,
        common_numbers=common_numbers(rounds),
        session_duration=session_duration,
    )


def round_evolution(rounds: Sequence[Round]) -> list[RoundEvolution]:
    """Draw count of each completed round, in start-time order."""
    completed = sorted(
        (r for r in rounds if not r.is_active), key=lambda r: r.start_time
    )
    return [
        RoundEvolution(
            round_id=r.id,
            round_number=r.round_number,
            draw_count=len(r.draws),
            start_time=r.start_time,
        )
        for r in completed
    ]
