"""Balance and fund viewing commands."""

import click
from fundflow.cli.display import echo_balance_matrix
from fundflow.domain.portfolio import PortfolioService


@click.command("balances")
@click.pass_context
def show_balances(ctx):
    """Show current balances by fund and contribution type."""
    db = ctx.obj["db"]
    service = PortfolioService(db)

    funds = service.list_funds()
    if not funds:
        click.echo("No funds found.")
        return

    click.echo("\nCurrent Balance:")
    echo_balance_matrix(funds, service.list_contribution_types(), service.get_balances())


@click.command("funds")
@click.pass_context
def list_funds(ctx):
    """List funds and contribution types with their IDs."""
    db = ctx.obj["db"]
    service = PortfolioService(db)

    click.echo("\nFunds:")
    click.echo("-" * 60)
    for fund in service.list_funds():
        click.echo(f"ID: {fund.id:3d} | {fund.name:26s} | {fund.category}")

    eligible = {t.id for t in service.eligible_source_types()}
    click.echo("\nContribution types:")
    click.echo("-" * 60)
    for contribution_type in service.list_contribution_types():
        note = "" if contribution_type.id in eligible else " (not transferable)"
        click.echo(f"ID: {contribution_type.id:3d} | {contribution_type.name}{note}")


def register_commands(cli):
    """Register balance viewing commands with main CLI."""
    cli.add_command(show_balances)
    cli.add_command(list_funds)
