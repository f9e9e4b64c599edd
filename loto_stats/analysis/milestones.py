"""Quine, double quine and full card statistics.

Milestone positions are announced by the players and recorded by hand; nothing
here tries to infer them from the draws.
"""

from collections.abc import Iterable

from loto_stats.schemas.session import MilestoneKind, Round
from loto_stats.schemas.statistics import (
    MilestoneHit,
    MilestoneStats,
    MilestoneSummary,
    RoundMilestones,
)


def _recorded_positions(rounds: list[Round], kind: MilestoneKind) -> list[int]:
    positions = []
    for r in rounds:
        position = r.milestone(kind)
        if position is not None and position > 0:
            positions.append(position)
    return positions


def milestone_stats(rounds: Iterable[Round], kind: MilestoneKind) -> MilestoneStats:
    """Aggregate one milestone kind over completed rounds.

    An active round is skipped even when a milestone is already recorded on
    it, since its position may still be edited.
    """
    completed = [r for r in rounds if not r.is_active]
    positions = _recorded_positions(completed, kind)

    return MilestoneStats(
        kind=kind,
        total=len(positions),
        average=sum(positions) / len(positions) if positions else None,
        fastest=min(positions) if positions else None,
        slowest=max(positions) if positions else None,
    )


def milestone_summary(rounds: Iterable[Round]) -> MilestoneSummary:
    rounds = list(rounds)
    stats = {kind.value: milestone_stats(rounds, kind) for kind in MilestoneKind}
    return MilestoneSummary(
        **stats,
        total_wins=sum(s.total for s in stats.values()),
    )


def round_milestones(round_: Round) -> RoundMilestones:
    """Milestones recorded on a single round, in the order they happened.

    Positions past the last draw are ignored.
    """
    hits = []
    for kind in MilestoneKind:
        position = round_.milestone(kind)
        if position is None or not 1 <= position <= len(round_.draws):
            continue
        hits.append(MilestoneHit(
            kind=kind,
            position=position,
            number_drawn=round_.draws[position - 1],
        ))

    hits.sort(key=lambda h: h.position)
    return RoundMilestones(
        round_id=round_.id,
        round_number=round_.round_number,
        milestones=hits,
    )
