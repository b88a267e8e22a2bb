"""Plan commands for TraderPlan CLI.

Handles the settings file, plan configuration and the roadmap table.
"""

from typing import Optional

import click
from pydantic import ValidationError
from rich.panel import Panel
from rich.table import Table

from traderplan.cli.common import console, format_money, get_controller, get_currency, print_error
from traderplan.models import PlanConfiguration


@click.command()
@click.option("--force", is_flag=True, help="Overwrite an existing settings file.")
def init(force: bool) -> None:
    """Create a template settings file.

    \b
    Examples:
      traderplan init
      traderplan init --force
    """
    from traderplan.settings import create_template_settings, get_config_path

    config_path = get_config_path()
    if config_path.exists() and not force:
        console.print(f"[yellow]Settings already exist at {config_path}[/yellow]")
        console.print("[dim]Use --force to overwrite.[/dim]")
        return

    path = create_template_settings()
    console.print(Panel(
        f"[green]Settings written to[/green] {path}\n\n"
        "Edit the [cyan]\\[plan][/cyan] section to set your defaults.",
        title="[bold green]Initialized[/bold green]",
        border_style="green",
    ))


def _config_table(config, currency: str) -> Table:
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Initial Balance", format_money(config.initial_balance, currency))
    table.add_row("Target Balance", format_money(config.target_balance, currency))
    table.add_row("Win Amount", format_money(config.win_amount, currency))
    table.add_row("Loss Amount", format_money(config.loss_amount, currency))
    table.add_row("Daily Percentage", f"{config.daily_percentage:g}%")
    table.add_row(
        "Max Trades/Day",
        str(config.max_trades_per_day) if config.max_trades_per_day else "-",
    )
    return table


@click.group()
def plan() -> None:
    """View or change the plan configuration.

    \b
    Commands:
      show  - Display the current configuration
      set   - Change configuration values
    """
    pass


@plan.command()
def show() -> None:
    """Display the current plan configuration."""
    controller = get_controller()
    config = controller.config

    console.print(Panel(
        _config_table(config, get_currency()),
        title="[bold]Plan Configuration[/bold]",
        border_style="cyan",
    ))

    for problem in config.problems():
        console.print(f"[yellow]! {problem}[/yellow]")


@plan.command(name="set")
@click.option("--initial", type=float, help="Initial balance.")
@click.option("--target", type=float, help="Target balance.")
@click.option("--win", type=float, help="Value of one winning trade.")
@click.option("--loss", type=float, help="Value of one losing trade.")
@click.option("--percent", type=float, help="Daily growth percentage.")
@click.option("--max-trades", type=int, help="Advisory maximum trades per day.")
@click.option("--no-max-trades", is_flag=True, help="Remove the trades-per-day limit.")
def set_config(
    initial: Optional[float],
    target: Optional[float],
    win: Optional[float],
    loss: Optional[float],
    percent: Optional[float],
    max_trades: Optional[int],
    no_max_trades: bool,
) -> None:
    """Change plan configuration values.

    Only the given values change. The trade history is replayed
    against the new roadmap.

    \b
    Examples:
      traderplan plan set --initial 200 --target 5000
      traderplan plan set --percent 2.5
      traderplan plan set --no-max-trades
    """
    if no_max_trades and max_trades is not None:
        print_error("Use either --max-trades or --no-max-trades, not both.", title="Invalid Options")
        raise SystemExit(1)

    changes = {
        "initial_balance": initial,
        "target_balance": target,
        "win_amount": win,
        "loss_amount": loss,
        "daily_percentage": percent,
        "max_trades_per_day": max_trades,
    }
    changes = {key: value for key, value in changes.items() if value is not None}
    if no_max_trades:
        changes["max_trades_per_day"] = None

    if not changes:
        console.print("[yellow]Nothing to change.[/yellow] See [cyan]traderplan plan set --help[/cyan].")
        return

    controller = get_controller()

    try:
        config = PlanConfiguration.model_validate({**controller.config.model_dump(), **changes})
    except ValidationError as e:
        print_error(str(e), title="Invalid Configuration")
        raise SystemExit(1)

    controller.update_config(config)

    console.print(Panel(
        _config_table(config, get_currency()),
        title="[bold green]Plan Updated[/bold green]",
        border_style="green",
    ))

    for problem in config.problems():
        console.print(f"[yellow]! {problem}[/yellow]")

    console.print(
        f"Roadmap: [bold]{len(controller.roadmap)}[/bold] days, "
        f"current balance {format_money(controller.current_balance)}"
    )


@click.command()
@click.option("--limit", type=int, default=30, show_default=True, help="Rows to display.")
@click.option("--all", "show_all", is_flag=True, help="Display every roadmap day.")
def roadmap(limit: int, show_all: bool) -> None:
    """Display the compounding roadmap.

    The row for the plan day your current balance falls on is highlighted.

    \b
    Examples:
      traderplan roadmap
      traderplan roadmap --limit 10
      traderplan roadmap --all
    """
    controller = get_controller()
    entries = controller.roadmap
    status = controller.status()
    currency = get_currency()

    if not entries:
        console.print(Panel(
            "[dim]The roadmap is empty.[/dim]\n\n"
            + "\n".join(f"[yellow]! {p}[/yellow]" for p in controller.config.problems()),
            title="[bold]Roadmap[/bold]",
            border_style="dim",
        ))
        return

    # Start a few days before the current plan day so it stays in view
    start = 0 if show_all else max(0, status.current_plan_day - 3)
    visible = entries if show_all else entries[start:start + limit]

    table = Table(
        title=f"Roadmap ({len(entries)} days)",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("Day", justify="right", style="bold")
    table.add_column("Start", justify="right")
    table.add_column("Target", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Wins", justify="right")
    table.add_column("Profit", justify="right")

    for entry in visible:
        style = "reverse" if entry.day == status.current_plan_day else None
        table.add_row(
            str(entry.day),
            format_money(entry.start_balance, currency),
            f"[green]+{format_money(entry.daily_target_value, currency)}[/green]",
            format_money(entry.end_balance, currency),
            f"{entry.trades_needed:.1f}",
            format_money(entry.accumulated_profit, currency),
            style=style,
        )

    console.print(table)

    if status.is_truncated:
        console.print(
            "[yellow]The target is not reached within the projection limit; "
            "the roadmap is partial.[/yellow]"
        )
