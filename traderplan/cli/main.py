"""Main CLI entry point for TraderPlan.

This module provides the main click group and lazy loading
for command modules to improve startup time.
"""

import importlib
import logging

import click


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.
    
    Command modules are only imported when one of their
    commands is actually invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.
        
        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]
        
        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)
        
        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)
        
        # Commands are either attributes named like the command or carry its name
        cmd = getattr(module, cmd_name, None)
        if not isinstance(cmd, click.Command):
            cmd = next(
                (
                    attr for attr in vars(module).values()
                    if isinstance(attr, click.Command) and attr.name == cmd_name
                ),
                None,
            )
        
        if cmd is None:
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")
        
        self.add_command(cmd)
        return cmd


LAZY_SUBCOMMANDS = {
    "init": "traderplan.cli.plan",
    "plan": "traderplan.cli.plan",
    "roadmap": "traderplan.cli.plan",
    "status": "traderplan.cli.status",
    "finish": "traderplan.cli.journal",
    "history": "traderplan.cli.journal",
    "edit": "traderplan.cli.journal",
    "delete": "traderplan.cli.journal",
    "reset": "traderplan.cli.journal",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="traderplan")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """TraderPlan - compounding growth planner for day trading.
    
    Project a day-by-day roadmap from your starting balance to your
    target, record each day's result, and see which plan day your
    real balance corresponds to.
    
    \b
    Quick Start:
      traderplan init          # Create a settings file
      traderplan roadmap       # View the compounding roadmap
      traderplan finish 12.50  # Record today's result
      traderplan status        # Where am I in the plan?
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
