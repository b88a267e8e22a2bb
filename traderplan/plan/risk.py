"""Per-trade risk assessment."""

import math

from traderplan.models import RiskAnalysis

HIGH_RISK_PERCENT = 5.0
STOP_LOSS_FRACTION = 0.03


def assess(balance: float, loss_amount: float) -> RiskAnalysis:
    """Assess how much of the balance a single losing trade puts at risk.
    
    Args:
        balance: Current balance
        loss_amount: Nominal loss of one losing trade
        
    Returns:
        RiskAnalysis for the balance.
    """
    risk_percentage = (loss_amount / balance) * 100 if balance > 0 else 0.0
    
    max_consecutive_losses = 0
    if loss_amount > 0:
        max_consecutive_losses = max(0, math.floor(balance / loss_amount))
    
    return RiskAnalysis(
        risk_percentage=risk_percentage,
        is_high_risk=risk_percentage > HIGH_RISK_PERCENT,
        max_consecutive_losses=max_consecutive_losses,
        recommended_stop_loss=balance * STOP_LOSS_FRACTION,
    )
