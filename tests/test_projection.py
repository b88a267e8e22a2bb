"""Property-based tests for the roadmap projection.

**Feature: compounding-plan**
"""

import pytest
from hypothesis import given, settings, assume
from hypothesis import strategies as st

from traderplan.models import PlanConfiguration
from traderplan.plan.projection import DAY_CAP, is_truncated, project


SCENARIO_CONFIG = PlanConfiguration(
    initial_balance=150.0,
    target_balance=10000.0,
    win_amount=3.0,
    loss_amount=20.0,
    daily_percentage=3.0,
)


def config_strategy(min_percent: float = 0.5, max_percent: float = 100.0):
    """Generate valid plan configurations."""
    return st.builds(
        lambda initial, ratio, win, loss, percent: PlanConfiguration(
            initial_balance=initial,
            target_balance=initial * ratio,
            win_amount=win,
            loss_amount=loss,
            daily_percentage=percent,
        ),
        initial=st.floats(min_value=1.0, max_value=1_000_000.0, allow_nan=False, allow_infinity=False),
        ratio=st.floats(min_value=1.01, max_value=100.0, allow_nan=False, allow_infinity=False),
        win=st.floats(min_value=0.01, max_value=1000.0, allow_nan=False, allow_infinity=False),
        loss=st.floats(min_value=0.0, max_value=1000.0, allow_nan=False, allow_infinity=False),
        percent=st.floats(min_value=min_percent, max_value=max_percent, allow_nan=False, allow_infinity=False),
    )


class TestFirstRoadmapDay:
    """
    **Feature: compounding-plan, Scenario A**
    
    The first day of the default plan grows 150 by 3%.
    """

    def test_first_entry_values(self):
        first = project(SCENARIO_CONFIG)[0]
        
        assert first.day == 1
        assert first.start_balance == pytest.approx(150.0)
        assert first.end_balance == pytest.approx(154.5)
        assert first.daily_target_value == pytest.approx(4.5)
        assert first.trades_needed == pytest.approx(1.5)
        assert first.accumulated_profit == pytest.approx(4.5)

    def test_roadmap_reaches_target(self):
        roadmap = project(SCENARIO_CONFIG)
        
        assert roadmap[-1].end_balance >= SCENARIO_CONFIG.target_balance
        assert roadmap[-1].start_balance < SCENARIO_CONFIG.target_balance
        assert not is_truncated(roadmap, SCENARIO_CONFIG)


class TestMonotonicRoadmap:
    """
    **Feature: compounding-plan, Property: Monotonic Roadmap**
    
    *For any* valid configuration, every day grows the balance and each
    day starts where the previous one ended.
    """

    @given(config=config_strategy())
    @settings(max_examples=50, deadline=None)
    def test_days_grow_and_chain(self, config: PlanConfiguration):
        roadmap = project(config)
        
        assert roadmap, "A valid configuration should produce a roadmap"
        
        for i, entry in enumerate(roadmap):
            assert entry.day == i + 1
            assert entry.end_balance > entry.start_balance
            assert entry.daily_target_value == pytest.approx(entry.end_balance - entry.start_balance)
            assert entry.accumulated_profit == pytest.approx(entry.end_balance - config.initial_balance)
            if i > 0:
                assert entry.start_balance == roadmap[i - 1].end_balance

    @given(config=config_strategy())
    @settings(max_examples=50, deadline=None)
    def test_trades_needed_uses_win_amount(self, config: PlanConfiguration):
        for entry in project(config)[:10]:
            assert entry.trades_needed == pytest.approx(entry.daily_target_value / config.win_amount)

    @given(config=config_strategy())
    @settings(max_examples=50, deadline=None)
    def test_stops_once_target_reached(self, config: PlanConfiguration):
        roadmap = project(config)
        
        assert all(entry.start_balance < config.target_balance for entry in roadmap)
        if len(roadmap) < DAY_CAP:
            assert roadmap[-1].end_balance >= config.target_balance


class TestTermination:
    """
    **Feature: compounding-plan, Property: Termination**
    
    *For any* daily percentage, the roadmap never exceeds the day cap.
    """

    @given(config=config_strategy(min_percent=0.0001, max_percent=0.5))
    @settings(max_examples=20, deadline=None)
    def test_small_percentages_are_bounded(self, config: PlanConfiguration):
        assert len(project(config)) <= DAY_CAP

    def test_zero_percent_is_truncated_at_cap(self):
        config = SCENARIO_CONFIG.model_copy(update={"daily_percentage": 0.0})
        roadmap = project(config)
        
        assert len(roadmap) == DAY_CAP
        assert is_truncated(roadmap, config)

    def test_unreachable_target_is_partial(self):
        config = SCENARIO_CONFIG.model_copy(update={
            "daily_percentage": 0.1,
            "target_balance": 1_000_000_000.0,
        })
        roadmap = project(config)
        
        assert len(roadmap) == DAY_CAP
        assert roadmap[-1].end_balance < config.target_balance
        assert is_truncated(roadmap, config)


class TestDegenerateConfigurations:
    """
    **Feature: compounding-plan, Scenario E**
    
    Invalid configurations produce an empty roadmap instead of failing.
    """

    def test_target_below_initial(self):
        config = SCENARIO_CONFIG.model_copy(update={
            "initial_balance": 500.0,
            "target_balance": 400.0,
        })
        
        assert project(config) == ()
        assert not is_truncated(project(config), config)

    def test_target_equal_to_initial(self):
        config = SCENARIO_CONFIG.model_copy(update={"target_balance": 150.0})
        
        assert project(config) == ()

    @pytest.mark.parametrize("initial", [0.0, -100.0])
    def test_non_positive_initial_balance(self, initial: float):
        config = SCENARIO_CONFIG.model_copy(update={"initial_balance": initial})
        
        assert project(config) == ()

    @pytest.mark.parametrize("win", [0.0, -3.0])
    def test_non_positive_win_amount(self, win: float):
        config = SCENARIO_CONFIG.model_copy(update={"win_amount": win})
        
        assert project(config) == ()


class TestDeterminism:
    """
    **Feature: compounding-plan, Property: Pure Projection**
    
    Equal configurations always produce the same roadmap.
    """

    @given(config=config_strategy())
    @settings(max_examples=20, deadline=None)
    def test_equal_configurations_share_roadmap(self, config: PlanConfiguration):
        copy = PlanConfiguration(**config.model_dump())
        
        assert project(copy) == project(config)

    def test_roadmap_is_memoized(self):
        copy = PlanConfiguration(**SCENARIO_CONFIG.model_dump())
        
        assert project(copy) is project(SCENARIO_CONFIG)
