"""Fund transfer command."""

import click
from fundflow.cli.display import echo_balance_matrix
from fundflow.cli.error_handling import exit_if_rejected, handle_domain_error
from fundflow.domain.errors import DomainError
from fundflow.domain.portfolio import PortfolioService
from fundflow.utils.amount_parser import format_currency
from fundflow.utils.request_parser import parse_transfer_request


@click.command("transfer")
@click.option("--from-fund", "from_fund", help="Source fund ID")
@click.option("--from-type", "from_type", help="Source contribution type ID")
@click.option("--to-fund", "to_fund", help="Target fund ID")
@click.option("--amount", help="Dollar amount to move (e.g. 200 or $1,500)")
@click.option("--preview", is_flag=True, help="Show the projected balances without saving")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def transfer(ctx, from_fund: str | None, from_type: str | None, to_fund: str | None,
             amount: str | None, preview: bool, yes: bool):
    """Move money from one fund to another.

    The money stays in the same contribution type; only the fund changes.
    Run 'fundflow funds' to see the available IDs.

    Examples:
        fundflow transfer --from-fund 1 --from-type 1 --to-fund 4 --amount 2500 --preview
        fundflow transfer --from-fund 2 --from-type 3 --to-fund 5 --amount '$1,000' --yes
    """
    db = ctx.obj["db"]
    service = PortfolioService(db)

    try:
        request = parse_transfer_request(from_fund, from_type, to_fund, amount)
        result = service.preview_transfer(request)
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

    if not yes and not click.confirm(
        f"\nTransfer {format_currency(request.amount)} from fund {request.source_fund_id} "
        f"to fund {request.target_fund_id}?"
    ):
        click.echo("Transfer cancelled.")
        return

    try:
        outcome = service.transfer_funds(request)
    except DomainError as e:
        handle_domain_error(ctx, e)
    exit_if_rejected(ctx, outcome)
    click.echo(f"Transferred {format_currency(request.amount)}.")


def register_commands(cli):
    """Register transfer command with main CLI."""
    cli.add_command(transfer)
