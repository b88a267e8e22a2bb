"""Tests for risk assessment and the plan status summary.

**Feature: compounding-plan**
"""

import math
from datetime import datetime

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from traderplan.models import PlanConfiguration, TradeRecord
from traderplan.plan.projection import project
from traderplan.plan.reconcile import reconcile
from traderplan.plan.risk import assess
from traderplan.plan.status import plan_status


CONFIG = PlanConfiguration(
    initial_balance=150.0,
    target_balance=10000.0,
    win_amount=3.0,
    loss_amount=20.0,
    daily_percentage=3.0,
    max_trades_per_day=5,
)


class TestRiskAssessment:
    """
    **Feature: compounding-plan, Property: Risk Metrics**
    """

    def test_high_risk_default_plan(self):
        risk = assess(150.0, 20.0)
        
        assert risk.risk_percentage == pytest.approx(13.333, rel=1e-3)
        assert risk.is_high_risk
        assert risk.max_consecutive_losses == 7
        assert risk.recommended_stop_loss == pytest.approx(4.5)

    def test_healthy_risk(self):
        risk = assess(1000.0, 20.0)
        
        assert risk.risk_percentage == pytest.approx(2.0)
        assert not risk.is_high_risk
        assert risk.max_consecutive_losses == 50

    def test_exactly_five_percent_is_not_high_risk(self):
        assert not assess(400.0, 20.0).is_high_risk

    @pytest.mark.parametrize("balance", [0.0, -50.0])
    def test_non_positive_balance(self, balance: float):
        risk = assess(balance, 20.0)
        
        assert risk.risk_percentage == 0.0
        assert not risk.is_high_risk
        assert risk.max_consecutive_losses == 0

    def test_zero_loss_amount(self):
        risk = assess(150.0, 0.0)
        
        assert risk.risk_percentage == 0.0
        assert risk.max_consecutive_losses == 0

    @given(
        balance=st.floats(min_value=0.01, max_value=1e7, allow_nan=False, allow_infinity=False),
        loss=st.floats(min_value=0.01, max_value=1e5, allow_nan=False, allow_infinity=False),
    )
    @settings(max_examples=100)
    def test_metrics_formulae(self, balance: float, loss: float):
        risk = assess(balance, loss)
        
        assert risk.risk_percentage == pytest.approx(loss / balance * 100)
        assert risk.is_high_risk == (risk.risk_percentage > 5)
        assert risk.max_consecutive_losses == math.floor(balance / loss)
        assert risk.recommended_stop_loss == pytest.approx(balance * 0.03)


class TestPlanStatus:
    """
    **Feature: compounding-plan, Property: Plan Status Summary**
    """

    def test_fresh_plan(self):
        roadmap = project(CONFIG)
        status = plan_status(CONFIG, roadmap, 150.0)
        
        assert status.current_plan_day == 1
        assert status.total_days == len(roadmap)
        assert status.days_remaining == len(roadmap) - 1
        assert status.progress_percent == pytest.approx(100 / len(roadmap))
        assert status.next_milestone == pytest.approx(154.5)
        assert status.remaining_to_target == pytest.approx(9850.0)
        assert status.daily_goal == pytest.approx(4.5)
        assert status.wins_needed_today == 2
        assert status.last_day_shift is None
        assert not status.target_reached
        assert not status.is_truncated
        assert not status.exceeds_trade_limit

    def test_status_after_trades(self):
        trades = [
            TradeRecord(id="a", timestamp=datetime(2024, 1, 1), result_value=10.0),
            TradeRecord(id="b", timestamp=datetime(2024, 1, 2), result_value=-8.0),
        ]
        chain = reconcile(trades, 150.0, CONFIG)
        roadmap = project(CONFIG)
        
        status = plan_status(CONFIG, roadmap, chain.final_balance, chain.trades)
        
        assert status.current_balance == pytest.approx(152.0)
        assert status.current_plan_day == 1
        assert status.last_day_shift == chain.trades[-1].day_shift
        assert status.last_day_shift == -2

    def test_below_initial_balance_uses_first_milestone(self):
        roadmap = project(CONFIG)
        status = plan_status(CONFIG, roadmap, 100.0)
        
        assert status.current_plan_day == 0
        assert status.progress_percent == 0.0
        assert status.next_milestone == pytest.approx(154.5)

    def test_target_reached(self):
        roadmap = project(CONFIG)
        status = plan_status(CONFIG, roadmap, 12000.0)
        
        assert status.target_reached
        assert status.current_plan_day == len(roadmap)
        assert status.days_remaining == 0
        assert status.progress_percent == 100.0
        assert status.remaining_to_target == pytest.approx(-2000.0)

    def test_trade_limit_is_advisory(self):
        config = CONFIG.model_copy(update={"max_trades_per_day": 1})
        status = plan_status(config, project(config), 150.0)
        
        assert status.wins_needed_today == 2
        assert status.exceeds_trade_limit

    def test_no_trade_limit(self):
        config = CONFIG.model_copy(update={"max_trades_per_day": None})
        
        assert not plan_status(config, project(config), 150.0).exceeds_trade_limit

    def test_empty_roadmap(self):
        config = CONFIG.model_copy(update={"initial_balance": 500.0, "target_balance": 400.0})
        status = plan_status(config, project(config), 500.0)
        
        assert status.current_plan_day == 0
        assert status.total_days == 0
        assert status.days_remaining == 0
        assert status.progress_percent == 0.0
        assert status.next_milestone == 0.0
        assert status.target_reached

    def test_truncated_roadmap_is_flagged(self):
        config = CONFIG.model_copy(update={"daily_percentage": 0.0})
        status = plan_status(config, project(config), 150.0)
        
        assert status.is_truncated
        assert status.wins_needed_today == 0


class TestConfigurationProblems:
    """Range problems are reported, not raised."""

    def test_valid_configuration(self):
        assert CONFIG.problems() == []
        assert CONFIG.is_valid

    def test_reports_each_problem(self):
        config = PlanConfiguration(
            initial_balance=-1.0,
            target_balance=-5.0,
            win_amount=0.0,
            loss_amount=-2.0,
            daily_percentage=150.0,
        )
        
        assert len(config.problems()) == 5
        assert not config.is_valid

    def test_rejects_non_finite_values(self):
        with pytest.raises(ValueError):
            PlanConfiguration(
                initial_balance=float("inf"),
                target_balance=10000.0,
                win_amount=3.0,
                daily_percentage=3.0,
            )

    def test_rejects_non_positive_trade_limit(self):
        with pytest.raises(ValueError):
            CONFIG.model_validate({**CONFIG.model_dump(), "max_trades_per_day": 0})
