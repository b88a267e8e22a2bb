"""Mapping balances back onto roadmap plan days."""

from bisect import bisect_right
from typing import Sequence

from traderplan.models import ProjectionEntry


def locate(
    balance: float,
    roadmap: Sequence[ProjectionEntry],
    initial_balance: float,
) -> int:
    """Find the plan day a balance is currently working on.
    
    Returns the day of the last roadmap entry whose start balance is at or
    below ``balance``. A balance sitting exactly on a day boundary belongs to
    the later day, since that day has not been completed yet.
    
    Args:
        balance: Balance to place on the roadmap
        roadmap: Entries ordered by day (start balances ascending)
        initial_balance: Balance at day 0 of the plan
        
    Returns:
        Plan day, or 0 when the balance is below the start of the plan
        or the roadmap is empty.
    """
    if balance < initial_balance or not roadmap:
        return 0
    
    index = bisect_right(roadmap, balance, key=lambda entry: entry.start_balance)
    if index == 0:
        return 1
    
    return roadmap[index - 1].day
