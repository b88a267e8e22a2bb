"""RiskAnalysis data model."""

from pydantic import BaseModel, Field


class RiskAnalysis(BaseModel):
    """Risk metrics for a balance and a per-trade loss amount."""

    risk_percentage: float = Field(..., description="Loss amount as a percentage of balance")
    is_high_risk: bool = Field(..., description="Risk percentage above the 5% threshold")
    max_consecutive_losses: int = Field(..., ge=0, description="Losses until the balance is gone")
    recommended_stop_loss: float = Field(..., description="3% of the current balance")

    model_config = {"frozen": True}
