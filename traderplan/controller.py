"""Plan controller owning the configuration and trade history.

The controller is the single writer for a plan: every mutation replays
the whole history against the current roadmap before anything is shown
or persisted.
"""

import logging
import threading
from datetime import datetime
from typing import Optional

from traderplan.db.store import PlanStore
from traderplan.models import (
    DEFAULT_PLAN,
    PlanConfiguration,
    PlanStatus,
    ProjectionEntry,
    RiskAnalysis,
    TradeRecord,
)
from traderplan.plan import assess, is_truncated, plan_status, project, reconcile

logger = logging.getLogger(__name__)


class PlanController:
    """Owns a plan's configuration and trade history.

    Works purely in memory when no store is given; with a store, state is
    loaded on start and written back after every mutation.
    """

    def __init__(
        self,
        store: Optional[PlanStore] = None,
        config: Optional[PlanConfiguration] = None,
    ):
        """Initialize the controller.

        Args:
            store: Optional PlanStore for persistence.
            config: Configuration to use when the store has none saved.
        """
        self._store = store
        self._lock = threading.Lock()
        self._version = 0

        stored_config = store.get_config() if store else None
        self._config = stored_config or config or DEFAULT_PLAN
        trades = store.get_trades() if store else []

        with self._lock:
            self._replay(trades)
            if store and stored_config is None:
                store.save_config(self._config)

    # ==================== Read accessors ====================

    @property
    def config(self) -> PlanConfiguration:
        return self._config

    @property
    def trades(self) -> list[TradeRecord]:
        return list(self._trades)

    @property
    def current_balance(self) -> float:
        return self._current_balance

    @property
    def version(self) -> int:
        """Number of reconciliations applied so far."""
        return self._version

    @property
    def roadmap(self) -> tuple[ProjectionEntry, ...]:
        return project(self._config)

    def status(self) -> PlanStatus:
        """Summarize the current position in the plan."""
        return plan_status(self._config, self.roadmap, self._current_balance, self._trades)

    def risk(self) -> RiskAnalysis:
        """Assess risk for the current balance."""
        return assess(self._current_balance, self._config.loss_amount)

    def get_trade(self, trade_id: str) -> TradeRecord:
        """Get a trade by id.

        Raises:
            ValueError: If no trade has this id.
        """
        for trade in self._trades:
            if trade.id == trade_id:
                return trade
        raise ValueError(f"Trade not found: {trade_id}")

    # ==================== Mutations ====================

    def finish_day(
        self,
        result_value: float,
        note: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> TradeRecord:
        """Record a confirmed trading day.

        Args:
            result_value: Signed result of the day.
            note: Optional user note.
            timestamp: When the day was confirmed (defaults to now).

        Returns:
            The reconciled trade record.
        """
        trade = TradeRecord.create(result_value, note=note, timestamp=timestamp)

        with self._lock:
            self._replay(self._trades + [trade])
            self._persist_trades()
            recorded = self.get_trade(trade.id)

        logger.info("Recorded day %s with result %.2f", trade.id, result_value)
        return recorded

    def edit_trade(self, trade_id: str, result_value: float) -> TradeRecord:
        """Replace the result of a recorded day.

        Raises:
            ValueError: If no trade has this id.
        """
        with self._lock:
            original = self.get_trade(trade_id)
            # Validated copy, so a non-finite result is rejected here
            edited = TradeRecord.model_validate(
                {**original.model_dump(), "result_value": result_value}
            )
            self._replay([edited if t.id == trade_id else t for t in self._trades])
            self._persist_trades()
            updated = self.get_trade(trade_id)

        logger.info("Edited day %s: %.2f -> %.2f", trade_id, original.result_value, result_value)
        return updated

    def delete_trade(self, trade_id: str) -> None:
        """Remove a recorded day.

        Raises:
            ValueError: If no trade has this id.
        """
        with self._lock:
            self.get_trade(trade_id)
            self._replay([t for t in self._trades if t.id != trade_id])
            if self._store:
                self._store.delete_trade(trade_id)
            self._persist_trades()

        logger.info("Deleted day %s", trade_id)

    def update_config(self, config: PlanConfiguration) -> None:
        """Replace the configuration and replay history against it."""
        with self._lock:
            self._config = config
            self._replay(self._trades)
            if self._store:
                self._store.save_config(config)
            self._persist_trades()

        logger.info("Plan configuration updated: %s", config.model_dump())
        if is_truncated(self.roadmap, config):
            logger.warning("Target %.2f not reached within the day cap", config.target_balance)

    def reset_history(self) -> None:
        """Delete every recorded day."""
        with self._lock:
            self._replay([])
            if self._store:
                self._store.clear_trades()

        logger.info("Trade history cleared")

    # ==================== Internals ====================

    def _replay(self, trades: list[TradeRecord]) -> None:
        """Reconcile the full chain from the configured initial balance.

        Must be called with the lock held.
        """
        result = reconcile(trades, self._config.initial_balance, self._config)
        self._trades = result.trades
        self._current_balance = result.final_balance
        self._version += 1
        logger.debug(
            "Replayed %d trades (version %d), balance %.2f",
            len(self._trades),
            self._version,
            self._current_balance,
        )

    def _persist_trades(self) -> None:
        if self._store and self._trades:
            self._store.upsert_trades(self._trades)
