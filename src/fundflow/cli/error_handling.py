"""CLI error handling helpers."""

import click

from fundflow.domain.entities import ValidationResult
from fundflow.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def exit_if_rejected(ctx: click.Context, result: ValidationResult) -> None:
    """Render a validation rejection and exit with failure."""
    if not result.valid:
        click.echo(f"Error: {result.error}", err=True)
        ctx.exit(1)
