"""Journal commands for TraderPlan CLI.

Handles recording, editing and deleting daily results and
displaying the annotated history.
"""

import click
from pydantic import ValidationError
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from traderplan.cli.common import (
    console,
    format_money,
    format_shift,
    get_controller,
    get_currency,
    print_error,
    shift_message,
)


@click.command()
@click.argument("result", type=float)
@click.option("--note", "-n", default=None, help="Note for the day.")
def finish(result: float, note: str | None) -> None:
    """Record the result of a trading day.

    RESULT is the day's profit (positive) or loss (negative).
    The plan day is recalculated from the new balance.

    \b
    Examples:
      traderplan finish 15.50
      traderplan finish -- -10
      traderplan finish 8 --note "two wins, stopped early"
    """
    controller = get_controller()

    try:
        trade = controller.finish_day(result, note=note)
    except (ValueError, ValidationError) as e:
        print_error(str(e), title="Invalid Result")
        raise SystemExit(1)

    currency = get_currency()
    console.print(Panel(
        f"Start Balance:  {format_money(trade.start_balance, currency)}\n"
        f"Result:         {format_money(trade.result_value, currency)}\n"
        f"End Balance:    [bold]{format_money(trade.end_balance, currency)}[/bold]\n"
        f"{'─' * 35}\n"
        f"Plan Day:       {trade.start_plan_day} → {trade.end_plan_day}\n"
        f"{shift_message(trade.day_shift)}",
        title=f"[bold]Day Recorded[/bold] [dim]({trade.id})[/dim]",
        border_style="green" if trade.day_shift >= 0 else "red",
    ))


@click.command()
@click.option("--limit", type=int, default=None, help="Show only the most recent N days.")
def history(limit: int | None) -> None:
    """Display the trading history with plan-day shifts.

    \b
    Examples:
      traderplan history
      traderplan history --limit 10
    """
    controller = get_controller()
    trades = controller.trades

    if not trades:
        console.print(Panel(
            "[dim]No days recorded yet[/dim]\n\n"
            "Use [cyan]traderplan finish RESULT[/cyan] to record a day.",
            title="[bold]History[/bold]",
            border_style="dim",
        ))
        return

    if limit:
        trades = trades[-limit:]

    currency = get_currency()
    table = Table(
        title="Trading History",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("ID", style="dim")
    table.add_column("Date", style="bold")
    table.add_column("Start", justify="right")
    table.add_column("Result", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Plan Day", justify="center")
    table.add_column("Shift", justify="right")
    table.add_column("Note", max_width=24)

    for trade in reversed(trades):
        result_color = "green" if trade.is_win else "red" if trade.result_value < 0 else "dim"
        table.add_row(
            trade.id,
            trade.timestamp.strftime("%Y-%m-%d %H:%M"),
            format_money(trade.start_balance, currency),
            f"[{result_color}]{format_money(trade.result_value, currency)}[/{result_color}]",
            format_money(trade.end_balance, currency),
            f"{trade.start_plan_day} → {trade.end_plan_day}",
            format_shift(trade.day_shift),
            escape(trade.note) if trade.note else "-",
        )

    console.print(table)

    total = sum(trade.result_value for trade in controller.trades)
    total_color = "green" if total >= 0 else "red"
    console.print(
        f"\n[bold]Total Result:[/bold] [{total_color}]{format_money(total, currency)}[/{total_color}]"
        f"   [bold]Balance:[/bold] {format_money(controller.current_balance, currency)}"
    )


@click.command()
@click.argument("trade_id")
@click.argument("result", type=float)
def edit(trade_id: str, result: float) -> None:
    """Change the result of a recorded day.

    Every later day is recalculated from the corrected result.

    \b
    Examples:
      traderplan edit k3j9x0a1b 12.00
    """
    controller = get_controller()

    try:
        trade = controller.edit_trade(trade_id, result)
    except (ValueError, ValidationError) as e:
        print_error(str(e))
        raise SystemExit(1)

    console.print(
        f"[green]Updated {trade.id}[/green]: result {format_money(trade.result_value)}, "
        f"balance now {format_money(controller.current_balance)}"
    )


@click.command()
@click.argument("trade_id")
@click.option("--confirm", is_flag=True, help="Skip confirmation prompt.")
def delete(trade_id: str, confirm: bool) -> None:
    """Delete a recorded day.

    \b
    Examples:
      traderplan delete k3j9x0a1b
      traderplan delete k3j9x0a1b --confirm
    """
    controller = get_controller()

    try:
        trade = controller.get_trade(trade_id)
    except ValueError as e:
        print_error(str(e))
        raise SystemExit(1)

    if not confirm:
        prompt = f"Delete {trade.timestamp:%Y-%m-%d} ({format_money(trade.result_value)})?"
        if not click.confirm(prompt):
            console.print("[dim]Delete cancelled.[/dim]")
            return

    controller.delete_trade(trade_id)
    console.print(
        f"[green]Deleted {trade_id}[/green]: balance now {format_money(controller.current_balance)}"
    )


@click.command()
@click.option("--confirm", is_flag=True, help="Skip confirmation prompt.")
def reset(confirm: bool) -> None:
    """Delete the whole trading history.

    The plan configuration is kept; the balance returns to the
    initial balance.

    \b
    Examples:
      traderplan reset
      traderplan reset --confirm
    """
    controller = get_controller()
    count = len(controller.trades)

    if not confirm:
        if not click.confirm(f"Delete all {count} recorded days?"):
            console.print("[dim]Reset cancelled.[/dim]")
            return

    controller.reset_history()
    console.print(Panel(
        f"[green]History cleared![/green]\n\n"
        f"Days removed: {count}\n"
        f"Balance: {format_money(controller.current_balance)}",
        title="[bold green]Reset Complete[/bold green]",
        border_style="green",
    ))
