"""Main CLI entry point."""

import click
from fundflow.database.factories import create_sqlite_database
from fundflow.domain.portfolio import PortfolioService
from fundflow.logging_utils import configure_logging

# Import and register all commands at module level
from fundflow.cli.commands import (
    balances,
    reallocate,
    reset,
    transfer,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FUNDFLOW_DB_PATH environment variable)",
    envvar="FUNDFLOW_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="FUNDFLOW_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Fundflow - 401(k) balance portal.

    View simulated retirement balances, move money between funds and
    rebalance allocations, with a preview before anything is saved.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        configure_logging(log_level)
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        PortfolioService(db).ensure_initialized()
        ctx.obj["db"] = db


# Register all commands
balances.register_commands(cli)
transfer.register_commands(cli)
reallocate.register_commands(cli)
reset.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
