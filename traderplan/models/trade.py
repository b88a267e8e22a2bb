"""TradeRecord data model."""

import secrets
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def local_time(value: datetime) -> datetime:
    """Convert a timezone-aware datetime to naive local time.

    Naive values are assumed to be local already and are returned as is.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class TradeRecord(BaseModel):
    """A confirmed trading day result and its position in the plan.

    Only ``result_value`` (and ``note``) are entered by the user; the
    balance and plan-day fields are filled in by ``reconcile``.
    Timestamps are kept as naive local time.
    """

    id: str = Field(..., min_length=1, description="Unique record identifier")
    timestamp: datetime = Field(..., description="When the day was confirmed")
    result_value: float = Field(..., allow_inf_nan=False, description="Signed day result")
    note: Optional[str] = Field(default=None, description="User notes")
    start_balance: float = Field(default=0.0, description="Balance before the result")
    end_balance: float = Field(default=0.0, description="Balance after the result")
    start_plan_day: int = Field(default=0, ge=0, description="Plan day before the result")
    end_plan_day: int = Field(default=0, ge=0, description="Plan day after the result")
    day_shift: int = Field(default=0, description="end_plan_day - start_plan_day")

    model_config = {"frozen": True}

    @field_validator("timestamp")
    @classmethod
    def _to_local_time(cls, value: datetime) -> datetime:
        return local_time(value)

    @staticmethod
    def new_id() -> str:
        """Generate a short random base-36 identifier."""
        return "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))

    @classmethod
    def create(
        cls,
        result_value: float,
        note: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> "TradeRecord":
        """Create a new record with placeholder derived fields."""
        return cls(
            id=cls.new_id(),
            timestamp=timestamp or datetime.now(),
            result_value=result_value,
            note=note,
        )

    @property
    def is_win(self) -> bool:
        return self.result_value > 0
