"""ProjectionEntry data model."""

from pydantic import BaseModel, Field


class ProjectionEntry(BaseModel):
    """One simulated day of the compounding roadmap."""

    day: int = Field(..., ge=1, description="Plan day, starting at 1")
    start_balance: float = Field(..., description="Balance at the start of the day")
    daily_target_value: float = Field(..., description="Profit needed to complete the day")
    end_balance: float = Field(..., description="Balance after the day's target is met")
    trades_needed: float = Field(..., description="Daily target expressed in winning trades")
    accumulated_profit: float = Field(..., description="End balance minus the initial balance")

    model_config = {"frozen": True}
