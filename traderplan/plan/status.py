"""Plan progress summary for the current balance."""

import math
from typing import Sequence

from traderplan.models import PlanConfiguration, PlanStatus, ProjectionEntry, TradeRecord
from traderplan.plan.locator import locate
from traderplan.plan.projection import is_truncated


def plan_status(
    config: PlanConfiguration,
    roadmap: Sequence[ProjectionEntry],
    current_balance: float,
    trades: Sequence[TradeRecord] = (),
) -> PlanStatus:
    """Summarize where the current balance stands in the plan.
    
    Args:
        config: Plan configuration
        roadmap: Roadmap projected from the configuration
        current_balance: Balance after the last confirmed day
        trades: Reconciled trade history, oldest first
        
    Returns:
        PlanStatus summary.
    """
    current_plan_day = locate(current_balance, roadmap, config.initial_balance)
    total_days = len(roadmap)
    
    progress_percent = 0.0
    if total_days > 0:
        progress_percent = min(100.0, current_plan_day / total_days * 100)
    
    next_milestone = 0.0
    if roadmap:
        current_entry = next(
            (entry for entry in roadmap if entry.day == current_plan_day),
            roadmap[0],
        )
        next_milestone = current_entry.end_balance
    
    daily_goal = current_balance * (config.daily_percentage / 100)
    wins_needed_today = 0
    if config.win_amount > 0 and daily_goal > 0:
        wins_needed_today = math.ceil(daily_goal / config.win_amount)
    
    # max_trades_per_day is advisory; nothing else enforces it
    exceeds_trade_limit = (
        config.max_trades_per_day is not None
        and wins_needed_today > config.max_trades_per_day
    )
    
    return PlanStatus(
        current_balance=current_balance,
        current_plan_day=current_plan_day,
        total_days=total_days,
        days_remaining=max(0, total_days - current_plan_day),
        progress_percent=progress_percent,
        next_milestone=next_milestone,
        remaining_to_target=config.target_balance - current_balance,
        daily_goal=daily_goal,
        wins_needed_today=wins_needed_today,
        last_day_shift=trades[-1].day_shift if trades else None,
        target_reached=current_balance >= config.target_balance,
        is_truncated=is_truncated(tuple(roadmap), config),
        exceeds_trade_limit=exceeds_trade_limit,
    )
