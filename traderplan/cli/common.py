"""Shared helpers for TraderPlan CLI commands."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console()


def get_controller():
    """Build the plan controller from the settings file and database."""
    from traderplan.controller import PlanController
    from traderplan.db.store import PlanStore
    from traderplan.settings import get_db_path, load_settings, plan_from_settings
    
    settings = load_settings()
    store = PlanStore(get_db_path(settings))
    return PlanController(store, config=plan_from_settings(settings))


def get_currency() -> str:
    """Get the display currency symbol from settings."""
    from traderplan.settings import get_currency as _settings_currency, load_settings
    
    return _settings_currency(load_settings())


def format_money(value: float, currency: Optional[str] = None) -> str:
    """Format a monetary value for display."""
    symbol = currency if currency is not None else get_currency()
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_shift(day_shift: int) -> str:
    """Format a plan-day shift with color."""
    if day_shift > 0:
        return f"[green]+{day_shift}[/green]"
    if day_shift < 0:
        return f"[red]{day_shift}[/red]"
    return "[dim]0[/dim]"


def shift_message(day_shift: int) -> str:
    """Describe a plan-day shift, e.g. "Advanced 2 days!"."""
    if day_shift > 0:
        return f"[green]Advanced {day_shift} day{'s' if day_shift != 1 else ''}![/green]"
    if day_shift < 0:
        return f"[red]Fell back {abs(day_shift)} day{'s' if day_shift != -1 else ''}[/red]"
    return "[dim]Neutral day[/dim]"


def print_error(message: str, title: str = "Error") -> None:
    """Print an error panel."""
    console.print(Panel(
        f"[red]{escape(message)}[/red]",
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))
