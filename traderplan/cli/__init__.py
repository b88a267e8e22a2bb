"""CLI commands for TraderPlan.

This package provides the command-line interface for TraderPlan,
including plan configuration, roadmap display and the trading journal.
"""

from traderplan.cli.main import cli, main

__all__ = ["cli", "main"]
