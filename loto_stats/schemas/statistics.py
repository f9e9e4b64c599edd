"""Pydantic schemas for statistics.

Every model here is frozen: a snapshot is a read-only value. ``None`` marks a
statistic that is not applicable (empty or degenerate session) and is never
used in place of a real zero.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from loto_stats.schemas.session import MilestoneKind


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class NumberFrequency(FrozenModel):
    number: int
    count: int
    percentage: float


class NumberBucket(FrozenModel):
    label: str  # "1-10", "80-90"
    start: int
    end: int
    count: int
    percentage: float
    numbers: tuple[int, ...]  # members drawn at least once


class DecadeBucket(NumberBucket):
    deviation: float | None  # percentage - 100/9


class NumberGap(FrozenModel):
    number: int
    current_gap: int
    average_gap: float
    max_gap: int
    appearances: int


class TimingStats(FrozenModel):
    completed_rounds: int
    average_round_duration: float  # seconds
    fastest_round: float | None
    slowest_round: float | None
    average_cadence: float  # seconds per draw


class ParityStats(FrozenModel):
    even_count: int
    odd_count: int
    even_percentage: float
    odd_percentage: float


class MilestoneStats(FrozenModel):
    kind: MilestoneKind
    total: int
    average: float | None
    fastest: int | None
    slowest: int | None


class MilestoneSummary(FrozenModel):
    quine: MilestoneStats
    second_quine: MilestoneStats
    double_quine: MilestoneStats
    full_card: MilestoneStats
    total_wins: int


class MilestoneHit(FrozenModel):
    kind: MilestoneKind
    position: int
    number_drawn: int


class RoundMilestones(FrozenModel):
    round_id: str
    round_number: int
    milestones: tuple[MilestoneHit, ...]


class RoundEvolution(FrozenModel):
    round_id: str
    round_number: int
    draw_count: int
    start_time: datetime


class SessionOverview(FrozenModel):
    session_id: str | None
    session_name: str | None
    round_count: int
    completed_round_count: int
    total_draws: int
    average_draws_per_round: float | None
    common_numbers: tuple[int, ...]
    session_duration: float | None  # seconds


class StatisticsSnapshot(FrozenModel):
    overview: SessionOverview
    frequency: tuple[NumberFrequency, ...]
    top: tuple[NumberFrequency, ...]
    flop: tuple[NumberFrequency, ...]
    most_frequent: NumberFrequency | None
    least_frequent: NumberFrequency | None
    decades: tuple[DecadeBucket, ...]
    columns: tuple[NumberBucket, ...]
    gaps: tuple[NumberGap, ...]
    overdue: tuple[NumberGap, ...]
    steadiest: tuple[NumberGap, ...]
    timing: TimingStats
    parity: ParityStats
    milestones: MilestoneSummary
    round_milestones: tuple[RoundMilestones, ...]
    evolution: tuple[RoundEvolution, ...]
