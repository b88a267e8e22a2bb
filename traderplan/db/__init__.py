"""Persistence for TraderPlan."""

from traderplan.db.store import PlanStore

__all__ = ["PlanStore"]
