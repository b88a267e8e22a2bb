"""PlanConfiguration data model."""

from typing import Optional
from pydantic import BaseModel, Field


class PlanConfiguration(BaseModel):
    """Parameters of a compounding growth plan.

    Range rules are reported by ``problems()`` instead of being rejected,
    so that degenerate plans still produce (empty) projections.
    """

    initial_balance: float = Field(..., allow_inf_nan=False, description="Balance at day 0")
    target_balance: float = Field(..., allow_inf_nan=False, description="Balance at which compounding stops")
    win_amount: float = Field(..., allow_inf_nan=False, description="Nominal value of one winning trade")
    loss_amount: float = Field(default=0.0, allow_inf_nan=False, description="Nominal loss of one losing trade")
    daily_percentage: float = Field(..., allow_inf_nan=False, description="Daily compounding rate in percent")
    max_trades_per_day: Optional[int] = Field(
        default=5, gt=0, description="Advisory daily trade limit"
    )

    model_config = {"frozen": True}

    def problems(self) -> list[str]:
        """List the reasons this plan cannot produce a roadmap (empty if valid)."""
        issues = []
        if self.initial_balance <= 0:
            issues.append("Initial balance must be positive")
        if self.target_balance <= self.initial_balance:
            issues.append("Target balance must exceed the initial balance")
        if self.win_amount <= 0:
            issues.append("Win amount must be positive")
        if self.loss_amount < 0:
            issues.append("Loss amount cannot be negative")
        if not 0 < self.daily_percentage <= 100:
            issues.append("Daily percentage must be in (0, 100]")
        return issues

    @property
    def is_valid(self) -> bool:
        return not self.problems()


DEFAULT_PLAN = PlanConfiguration(
    initial_balance=150.0,
    target_balance=10000.0,
    win_amount=3.0,
    loss_amount=20.0,
    daily_percentage=3.0,
    max_trades_per_day=5,
)
