"""TraderPlan - compounding growth planner for daily trading results."""

__version__ = "0.1.0"
