"""Compounding roadmap projection.

Builds the day-by-day table that takes a plan from its initial balance
to its target balance by growing each day's start balance by a fixed
percentage.
"""

from functools import lru_cache

from traderplan.models import PlanConfiguration, ProjectionEntry

# Five years of daily compounding
DAY_CAP = 365 * 5


def project_day(day: int, start_balance: float, config: PlanConfiguration) -> ProjectionEntry:
    """Compute a single roadmap entry.
    
    Args:
        day: Plan day number (1-based)
        start_balance: Balance at the start of the day
        config: Plan configuration
        
    Returns:
        ProjectionEntry for the day.
    """
    daily_target_value = start_balance * (config.daily_percentage / 100)
    end_balance = start_balance + daily_target_value
    trades_needed = daily_target_value / config.win_amount if config.win_amount > 0 else 0.0
    
    return ProjectionEntry(
        day=day,
        start_balance=start_balance,
        daily_target_value=daily_target_value,
        end_balance=end_balance,
        trades_needed=trades_needed,
        accumulated_profit=end_balance - config.initial_balance,
    )


@lru_cache(maxsize=64)
def project(config: PlanConfiguration) -> tuple[ProjectionEntry, ...]:
    """Project the compounding roadmap for a plan.
    
    Never raises. Degenerate plans (non-positive initial balance or win
    amount, target not above the initial balance) yield an empty roadmap.
    Plans that cannot reach the target within DAY_CAP days are truncated.
    
    Args:
        config: Plan configuration
        
    Returns:
        Tuple of entries ordered by day, starting at day 1.
    """
    if config.initial_balance <= 0 or config.win_amount <= 0:
        return ()
    
    entries = []
    balance = config.initial_balance
    day = 1
    
    while balance < config.target_balance and day <= DAY_CAP:
        entry = project_day(day, balance, config)
        entries.append(entry)
        balance = entry.end_balance
        day += 1
    
    return tuple(entries)


def is_truncated(roadmap: tuple[ProjectionEntry, ...], config: PlanConfiguration) -> bool:
    """Check whether a roadmap stopped at the day cap before the target."""
    if not roadmap:
        return False
    return len(roadmap) >= DAY_CAP and roadmap[-1].end_balance < config.target_balance
