"""PlanStatus data model."""

from typing import Optional
from pydantic import BaseModel, Field


class PlanStatus(BaseModel):
    """Where the current balance stands against the roadmap."""

    current_balance: float = Field(..., description="Balance after the last confirmed day")
    current_plan_day: int = Field(..., ge=0, description="Plan day being worked on")
    total_days: int = Field(..., ge=0, description="Number of roadmap entries")
    days_remaining: int = Field(..., ge=0, description="Roadmap days left")
    progress_percent: float = Field(..., ge=0, le=100, description="Plan day over total days")
    next_milestone: float = Field(..., description="End balance of the current plan day")
    remaining_to_target: float = Field(..., description="Target minus current balance")
    daily_goal: float = Field(..., description="Today's compounding goal")
    wins_needed_today: int = Field(..., ge=0, description="Winning trades for today's goal")
    last_day_shift: Optional[int] = Field(default=None, description="Day shift of the latest trade")
    target_reached: bool = Field(..., description="Current balance at or above target")
    is_truncated: bool = Field(..., description="Roadmap stopped at the day cap")
    exceeds_trade_limit: bool = Field(..., description="Today's wins exceed max trades per day")

    model_config = {"frozen": True}
