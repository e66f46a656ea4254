"""Reset demo data command."""

import click
from fundflow.domain.portfolio import PortfolioService


@click.command("reset")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def reset(ctx, yes: bool):
    """Restore all balances to the initial demo values."""
    db = ctx.obj["db"]
    service = PortfolioService(db)

    if not yes and not click.confirm(
        "Are you sure you want to reset all investment data to initial values?"
    ):
        click.echo("Reset cancelled.")
        return

    service.reset_to_initial()
    click.echo("Balances reset to initial values.")


def register_commands(cli):
    """Register reset command with main CLI."""
    cli.add_command(reset)
