"""Pytest fixtures shared across the statistics tests."""

from __future__ import annotations

import os
from datetime import date, datetime, timedelta, timezone

import pytest

os.environ.setdefault("LOG_TO_FILE", "false")

from loto_stats.schemas.session import Round, Session  # noqa: E402

T0 = datetime(2026, 1, 10, 20, 0, tzinfo=timezone.utc)


def make_round(
    draws: list[int],
    *,
    number: int = 1,
    start_offset: int = 0,
    duration: int | None = 60,
    is_active: bool | None = None,
    **milestones: int,
) -> Round:
    """Build a round starting ``start_offset`` seconds after T0.

    ``duration=None`` leaves the round unfinished; ``is_active`` defaults to
    whether the round is unfinished.
    """

    start = T0 + timedelta(seconds=start_offset)
    end = start + timedelta(seconds=duration) if duration is not None else None
    return Round(
        id=f"round-{number}",
        round_number=number,
        start_time=start,
        end_time=end,
        draws=draws,
        is_active=(end is None) if is_active is None else is_active,
        **milestones,
    )


def make_session(*rounds: Round, end_time: datetime | None = None) -> Session:
    return Session(
        id="session-1",
        name="Friday night",
        date=date(2026, 1, 10),
        start_time=T0,
        end_time=end_time,
        is_active=end_time is None,
        rounds=list(rounds),
    )


@pytest.fixture
def scenario_a() -> Session:
    """One completed round with a quine at the third draw."""

    return make_session(make_round([5, 23, 77, 12, 90], quine_at=3))


@pytest.fixture
def scenario_d() -> Session:
    """Two completed rounds sharing the number 2."""

    return make_session(
        make_round([1, 2], number=1, start_offset=0),
        make_round([2, 3], number=2, start_offset=600),
    )
