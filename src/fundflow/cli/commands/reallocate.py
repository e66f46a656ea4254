"""Fund reallocation command."""

import click
from fundflow.cli.display import echo_balance_matrix
from fundflow.cli.error_handling import exit_if_rejected, handle_domain_error
from fundflow.domain.errors import DomainError
from fundflow.domain.portfolio import PortfolioService
from fundflow.utils.request_parser import parse_allocations


def _split_allocation(ctx, value: str) -> tuple[str, str]:
    """Split a FUND=PERCENT argument."""
    fund, sep, percentage = value.partition("=")
    if not sep or not fund.strip():
        click.echo(f"Error: Invalid allocation '{value}'. Use FUND=PERCENT, e.g. 1=25", err=True)
        ctx.exit(1)
    return fund.strip(), percentage.strip()


@click.command("reallocate")
@click.argument("allocations", nargs=-1, required=True, metavar="FUND=PERCENT...")
@click.option(
    "--partial",
    is_flag=True,
    help="Leave funds that are not listed untouched instead of setting them to 0%",
)
@click.option("--preview", is_flag=True, help="Show the projected balances without saving")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def reallocate(ctx, allocations: tuple[str, ...], partial: bool, preview: bool, yes: bool):
    """Redistribute the whole portfolio across funds by percentage.

    Percentages must add up to 100. Within each fund the new amount is split
    across contribution types in proportion to current holdings. Funds not
    listed are set to 0% unless --partial is given.

    Examples:
        fundflow reallocate 1=60 4=30 5=10 --preview
        fundflow reallocate 2=50 3=50 --partial --yes
    """
    db = ctx.obj["db"]
    service = PortfolioService(db)

    raw = dict(_split_allocation(ctx, value) for value in allocations)
    fund_ids = None if partial else [fund.id for fund in service.list_funds()]

    try:
        allocation_map = parse_allocations(raw, fund_ids=fund_ids)
        result = service.preview_reallocation(allocation_map)
    except DomainError as e:
        handle_domain_error(ctx, e)
    exit_if_rejected(ctx, result)

    click.echo("\nProjected Balance:")
    echo_balance_matrix(
        service.list_funds(),
        service.list_contribution_types(),
        result.projected_balances,
        baseline=service.get_balances(),
    )

    if preview:
        return

    if not yes and not click.confirm("\nApply this reallocation?"):
        click.echo("Reallocation cancelled.")
        return

    try:
        outcome = service.reallocate_funds(allocation_map)
    except DomainError as e:
        handle_domain_error(ctx, e)
    exit_if_rejected(ctx, outcome)
    click.echo("Reallocation applied.")


def register_commands(cli):
    """Register reallocate command with main CLI."""
    cli.add_command(reallocate)
