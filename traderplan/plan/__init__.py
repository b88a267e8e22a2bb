"""Plan calculations: roadmap projection, plan-day lookup and history replay."""

from traderplan.plan.locator import locate
from traderplan.plan.projection import DAY_CAP, is_truncated, project
from traderplan.plan.reconcile import reconcile
from traderplan.plan.risk import assess
from traderplan.plan.status import plan_status

__all__ = [
    "DAY_CAP",
    "assess",
    "is_truncated",
    "locate",
    "plan_status",
    "project",
    "reconcile",
]
