"""SQLite data store for TraderPlan."""

import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from traderplan.models import PlanConfiguration, TradeRecord

logger = logging.getLogger(__name__)


class PlanStore:
    """SQLite-based store for the plan configuration and trade history.

    Writes are upserts keyed by id, so the last write wins.
    """

    REQUIRED_TABLES = [
        "plan_config",
        "trade_history",
    ]

    def __init__(self, db_path: Path):
        """Initialize the plan store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = db_path
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()

            # Single-row plan configuration
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS plan_config (
                    id INTEGER PRIMARY KEY CHECK (id = 1),
                    initial_balance REAL NOT NULL,
                    target_balance REAL NOT NULL,
                    win_amount REAL NOT NULL,
                    loss_amount REAL NOT NULL,
                    daily_percentage REAL NOT NULL,
                    max_trades_per_day INTEGER,
                    updated_at TEXT NOT NULL
                )
            """)

            # Trade history chain
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS trade_history (
                    id TEXT PRIMARY KEY,
                    timestamp TEXT NOT NULL,
                    result_value REAL NOT NULL,
                    note TEXT,
                    start_balance REAL NOT NULL DEFAULT 0,
                    end_balance REAL NOT NULL DEFAULT 0,
                    start_plan_day INTEGER NOT NULL DEFAULT 0,
                    end_plan_day INTEGER NOT NULL DEFAULT 0,
                    day_shift INTEGER NOT NULL DEFAULT 0
                )
            """)

            conn.commit()
        finally:
            conn.close()

    def get_tables(self) -> list[str]:
        """Get list of all tables in the database."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
            )
            return [row["name"] for row in cursor.fetchall()]
        finally:
            conn.close()

    # ==================== Configuration ====================

    def save_config(self, config: PlanConfiguration) -> None:
        """Save the plan configuration, replacing any previous one.

        Args:
            config: Configuration to save.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT OR REPLACE INTO plan_config
                (id, initial_balance, target_balance, win_amount, loss_amount,
                 daily_percentage, max_trades_per_day, updated_at)
                VALUES (1, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    config.initial_balance,
                    config.target_balance,
                    config.win_amount,
                    config.loss_amount,
                    config.daily_percentage,
                    config.max_trades_per_day,
                    datetime.now().isoformat(),
                ),
            )
            conn.commit()
        finally:
            conn.close()

    def get_config(self) -> Optional[PlanConfiguration]:
        """Get the saved plan configuration.

        Returns:
            The configuration, or None if none has been saved.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT initial_balance, target_balance, win_amount, loss_amount,
                       daily_percentage, max_trades_per_day
                FROM plan_config
                WHERE id = 1
                """
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return PlanConfiguration(
                initial_balance=row["initial_balance"],
                target_balance=row["target_balance"],
                win_amount=row["win_amount"],
                loss_amount=row["loss_amount"],
                daily_percentage=row["daily_percentage"],
                max_trades_per_day=row["max_trades_per_day"],
            )
        finally:
            conn.close()

    # ==================== Trade History ====================

    @staticmethod
    def _trade_params(trade: TradeRecord) -> tuple:
        return (
            trade.id,
            trade.timestamp.isoformat(),
            trade.result_value,
            trade.note,
            trade.start_balance,
            trade.end_balance,
            trade.start_plan_day,
            trade.end_plan_day,
            trade.day_shift,
        )

    def upsert_trade(self, trade: TradeRecord) -> None:
        """Insert a trade or replace the stored trade with the same id.

        Args:
            trade: Trade to save.
        """
        self.upsert_trades([trade])

    def upsert_trades(self, trades: Iterable[TradeRecord]) -> None:
        """Insert or replace several trades in one transaction.

        Args:
            trades: Trades to save.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.executemany(
                """
                INSERT OR REPLACE INTO trade_history
                (id, timestamp, result_value, note, start_balance, end_balance,
                 start_plan_day, end_plan_day, day_shift)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [self._trade_params(trade) for trade in trades],
            )
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_trade(row: sqlite3.Row) -> TradeRecord:
        return TradeRecord(
            id=row["id"],
            timestamp=datetime.fromisoformat(row["timestamp"]),
            result_value=row["result_value"],
            note=row["note"],
            start_balance=row["start_balance"],
            end_balance=row["end_balance"],
            start_plan_day=row["start_plan_day"],
            end_plan_day=row["end_plan_day"],
            day_shift=row["day_shift"],
        )

    def get_trades(self) -> list[TradeRecord]:
        """Get every stored trade, oldest first.

        Returns:
            List of trades.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, timestamp, result_value, note, start_balance, end_balance,
                       start_plan_day, end_plan_day, day_shift
                FROM trade_history
                ORDER BY timestamp, rowid
                """
            )
            return [self._row_to_trade(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def get_trade(self, trade_id: str) -> Optional[TradeRecord]:
        """Get a trade by id.

        Args:
            trade_id: Trade identifier.

        Returns:
            The trade, or None if not found.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, timestamp, result_value, note, start_balance, end_balance,
                       start_plan_day, end_plan_day, day_shift
                FROM trade_history
                WHERE id = ?
                """,
                (trade_id,),
            )
            row = cursor.fetchone()
            return self._row_to_trade(row) if row else None
        finally:
            conn.close()

    def delete_trade(self, trade_id: str) -> None:
        """Delete a trade. Deleting an unknown id does nothing.

        Args:
            trade_id: Trade identifier.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM trade_history WHERE id = ?", (trade_id,))
            conn.commit()
            if cursor.rowcount == 0:
                logger.debug("Trade %s was already deleted", trade_id)
        finally:
            conn.close()

    def clear_trades(self) -> None:
        """Delete the whole trade history."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM trade_history")
            conn.commit()
        finally:
            conn.close()

    # ==================== Stats ====================

    def get_stats(self) -> dict:
        """Get database statistics.

        Returns:
            Dictionary with table record counts.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            stats = {}
            for table in self.REQUIRED_TABLES:
                cursor.execute(f"SELECT COUNT(*) as count FROM {table}")
                stats[table] = cursor.fetchone()["count"]
            return stats
        finally:
            conn.close()
