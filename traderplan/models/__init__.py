"""Data models for TraderPlan."""

from traderplan.models.config import DEFAULT_PLAN, PlanConfiguration
from traderplan.models.projection import ProjectionEntry
from traderplan.models.trade import TradeRecord
from traderplan.models.risk import RiskAnalysis
from traderplan.models.chain import ChainResult
from traderplan.models.status import PlanStatus

__all__ = [
    "DEFAULT_PLAN",
    "PlanConfiguration",
    "ProjectionEntry",
    "TradeRecord",
    "RiskAnalysis",
    "ChainResult",
    "PlanStatus",
]
