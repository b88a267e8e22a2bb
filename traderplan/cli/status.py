"""Status command for TraderPlan CLI.

Shows the current plan day, progress, today's goal and risk.
"""

import click
from rich.panel import Panel

from traderplan.cli.common import console, format_money, get_controller, get_currency, shift_message


def _progress_bar(percent: float, width: int = 30) -> str:
    filled = int(round(percent / 100 * width))
    return f"[cyan]{'█' * filled}[/cyan][dim]{'░' * (width - filled)}[/dim]"


@click.command()
def status() -> None:
    """Display where your balance stands in the plan.

    \b
    Examples:
      traderplan status
    """
    controller = get_controller()
    summary = controller.status()
    risk = controller.risk()
    config = controller.config
    currency = get_currency()

    if summary.last_day_shift is None:
        last_close = "[dim]No days recorded[/dim]"
    else:
        last_close = shift_message(summary.last_day_shift)

    console.print(Panel(
        f"[bold]Plan Day {summary.current_plan_day}[/bold] of {summary.total_days}"
        f"   ({summary.days_remaining} remaining)\n"
        f"{_progress_bar(summary.progress_percent)} {summary.progress_percent:.1f}%\n\n"
        f"Current Balance:     [bold]{format_money(summary.current_balance, currency)}[/bold]\n"
        f"Last Close:          {last_close}",
        title="[bold]Plan Status[/bold]",
        border_style="red" if (summary.last_day_shift or 0) < 0 else "cyan",
    ))

    goal_lines = [
        f"Goal to leave day {summary.current_plan_day}: "
        f"[green]{format_money(summary.next_milestone, currency)}[/green]",
        f"Remaining to target:   [cyan]{format_money(summary.remaining_to_target, currency)}[/cyan]",
        f"Today's goal:          {format_money(summary.daily_goal, currency)}"
        f" (~{summary.wins_needed_today} wins)",
    ]
    if summary.exceeds_trade_limit:
        goal_lines.append(
            f"[yellow]Today's goal needs more wins than your limit of "
            f"{config.max_trades_per_day} trades per day.[/yellow]"
        )
    if summary.target_reached:
        goal_lines.append("[bold green]Target reached![/bold green]")
    if summary.is_truncated:
        goal_lines.append("[yellow]The roadmap stops before the target (projection limit).[/yellow]")

    console.print(Panel(
        "\n".join(goal_lines),
        title="[bold]Next Steps[/bold]",
        border_style="green",
    ))

    if risk.is_high_risk:
        console.print(Panel(
            f"A losing trade ({format_money(config.loss_amount, currency)}) is "
            f"[bold]{risk.risk_percentage:.1f}%[/bold] of your balance.\n"
            f"Consecutive losses to zero: {risk.max_consecutive_losses}\n"
            f"Suggested stop loss (3%): {format_money(risk.recommended_stop_loss, currency)}",
            title="[bold red]High Risk[/bold red]",
            border_style="red",
        ))
    else:
        console.print(Panel(
            f"Risk per trade is within limits ({risk.risk_percentage:.2f}%).",
            title="[bold green]Healthy Risk[/bold green]",
            border_style="green",
        ))

    for problem in config.problems():
        console.print(f"[yellow]! {problem}[/yellow]")
