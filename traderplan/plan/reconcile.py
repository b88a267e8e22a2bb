"""History replay.

Every change to the trade history is followed by a full replay of the
chain from the starting balance, so derived balances and plan days are
always consistent with the current roadmap.
"""

import math
from typing import Iterable

from traderplan.models import ChainResult, PlanConfiguration, TradeRecord
from traderplan.models.trade import local_time
from traderplan.plan.locator import locate
from traderplan.plan.projection import project


def reconcile(
    trades: Iterable[TradeRecord],
    starting_balance: float,
    config: PlanConfiguration,
) -> ChainResult:
    """Recompute the derived fields of every trade in the chain.
    
    The roadmap is anchored at ``starting_balance`` rather than at the
    configuration's own initial balance, so a chain can be replayed from
    any starting point. Trades are replayed oldest first; trades sharing a
    timestamp keep their input order. Timezone-aware timestamps are
    compared as local time.
    
    Args:
        trades: Trade records (derived fields are ignored)
        starting_balance: Balance before the first trade
        config: Plan configuration
        
    Returns:
        ChainResult with annotated trades and the final balance.
        
    Raises:
        ValueError: If the starting balance, a trade result or a running
            balance is not a finite number.
    """
    if not math.isfinite(starting_balance):
        raise ValueError(f"Starting balance is not a finite number: {starting_balance}")
    
    ordered = sorted(trades, key=lambda trade: local_time(trade.timestamp))
    
    for trade in ordered:
        if not math.isfinite(trade.result_value):
            raise ValueError(f"Trade {trade.id} has a non-finite result: {trade.result_value}")
    
    roadmap = project(config.model_copy(update={"initial_balance": starting_balance}))
    
    running_balance = starting_balance
    annotated = []
    
    for trade in ordered:
        start_balance = running_balance
        end_balance = start_balance + trade.result_value
        if not math.isfinite(end_balance):
            raise ValueError(f"Balance after trade {trade.id} overflows: {end_balance}")
        start_plan_day = locate(start_balance, roadmap, starting_balance)
        end_plan_day = locate(end_balance, roadmap, starting_balance)
        
        annotated.append(trade.model_copy(update={
            "start_balance": start_balance,
            "end_balance": end_balance,
            "start_plan_day": start_plan_day,
            "end_plan_day": end_plan_day,
            "day_shift": end_plan_day - start_plan_day,
        }))
        running_balance = end_balance
    
    return ChainResult(trades=annotated, final_balance=running_balance)
