"""Statistics API endpoints.

Each endpoint receives a session snapshot in the request body and returns
the derived statistics. Nothing is stored between requests.
"""

from fastapi import APIRouter, Body, Depends, HTTPException

from loto_stats.api.deps import get_settings
from loto_stats.config import Settings
from loto_stats.schemas.session import Session
from loto_stats.schemas.statistics import (
    MilestoneSummary,
    NumberFrequency,
    NumberGap,
    RoundMilestones,
    StatisticsSnapshot,
    TimingStats,
)
from loto_stats.services import statistics_service as stats

router = APIRouter()


@router.post("", response_model=StatisticsSnapshot)
async def snapshot(
    session: Session | None = Body(None),
    settings: Settings = Depends(get_settings),
):
    """Full statistics snapshot of a session."""
    return stats.compute_statistics(
        session,
        top_count=settings.TOP_FLOP_COUNT,
        highlight_count=settings.GAP_HIGHLIGHT_COUNT,
    )


@router.post("/frequency", response_model=list[NumberFrequency])
async def frequency(session: Session | None = Body(None)):
    """Draw frequency of every number."""
    return stats.get_frequency(session)


@router.post("/gaps", response_model=list[NumberGap])
async def gaps(session: Session | None = Body(None)):
    """Gap analysis of every number."""
    return stats.get_gaps(session)


@router.post("/timing", response_model=TimingStats)
async def timing(session: Session | None = Body(None)):
    """Round duration and draw cadence."""
    return stats.get_timing(session)


@router.post("/milestones", response_model=MilestoneSummary)
async def milestones(session: Session | None = Body(None)):
    """Quine and full card statistics over completed rounds."""
    return stats.get_milestones(session)


@router.post("/rounds/{round_number}/milestones", response_model=RoundMilestones)
async def round_milestones(round_number: int, session: Session = Body(...)):
    """Milestones recorded on one round."""
    result = stats.get_round_milestones(session, round_number)
    if result is None:
        raise HTTPException(status_code=404, detail=f"Round {round_number} not found")
    return result
