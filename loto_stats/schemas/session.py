"""Pydantic schemas for the session snapshot consumed by the statistics engine."""

from datetime import date, datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, field_validator


def _assume_utc(value: datetime | None) -> datetime | None:
    # clients may mix "...Z" and bare ISO times; bare ones are read as UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class MilestoneKind(str, Enum):
    """Achievements a player can announce during a round."""

    QUINE = "quine"
    SECOND_QUINE = "second_quine"
    DOUBLE_QUINE = "double_quine"
    FULL_CARD = "full_card"

    @property
    def field_name(self) -> str:
        return f"{self.value}_at"


# --- Round (manche) ---

class Round(BaseModel):
    """One play-through within a session.

    Milestone positions are 1-based draw indexes. ``None`` means the milestone
    was never recorded for this round.
    """

    model_config = {"from_attributes": True}

    id: str
    round_number: int = Field(ge=1)
    start_time: datetime
    end_time: datetime | None = None
    draws: list[int] = Field(default_factory=list)
    is_active: bool = False

    quine_at: int | None = None
    second_quine_at: int | None = None
    double_quine_at: int | None = None
    full_card_at: int | None = None

    @field_validator(
        "quine_at", "second_quine_at", "double_quine_at", "full_card_at",
        mode="after",
    )
    @classmethod
    def _unset_non_positive(cls, value: int | None) -> int | None:
        # position 0 is not an achievement, it is the absence of one
        if value is not None and value <= 0:
            return None
        return value

    utc_times = field_validator("start_time", "end_time", mode="after")(_assume_utc)

    @property
    def is_finished(self) -> bool:
        return self.end_time is not None

    @property
    def duration_seconds(self) -> float | None:
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    def milestone(self, kind: MilestoneKind) -> int | None:
        return getattr(self, kind.field_name)


# --- Session (partie) ---

class Session(BaseModel):
    """A tracked game occasion holding its rounds."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    date: date
    start_time: datetime
    end_time: datetime | None = None
    is_active: bool = False
    rounds: list[Round] = Field(default_factory=list)

    utc_times = field_validator("start_time", "end_time", mode="after")(_assume_utc)
