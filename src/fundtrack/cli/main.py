"""Main CLI entry point."""

import logging

import click
from fundtrack.database.factories import create_sqlite_database

# Import and register all commands at module level
from fundtrack.cli.commands import (
    dashboard,
    project,
    donation,
    expense,
    init_sample,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FUNDTRACK_DB_PATH environment variable)",
    envvar="FUNDTRACK_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="FUNDTRACK_LOG_LEVEL",
    help="Logging verbosity (log lines go to stderr)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Fundtrack - Donation and expense tracking for charitable projects.

    Record donations and expenses against fundraising projects and follow
    their progress towards each project's target.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help). A database passed in through obj wins.
    if ctx.invoked_subcommand is not None and "db" not in ctx.obj:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
dashboard.register_commands(cli)
project.register_commands(cli)
donation.register_commands(cli)
expense.register_commands(cli)
init_sample.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
