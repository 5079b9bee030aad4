"""Main CLI entry point."""

import sys

import click
import structlog
from vendorcosts.database.factories import create_sqlite_database

# Import and register all commands at module level
from vendorcosts.cli.commands import (
    vendor,
    member,
    cost,
    admin,
)

# Keep log events off stdout, which carries command output
structlog.configure(logger_factory=structlog.PrintLoggerFactory(file=sys.stderr))


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides VENDORCOSTS_DB_PATH environment variable)",
    envvar="VENDORCOSTS_DB_PATH",
)
@click.option(
    "--timeout",
    type=float,
    help="Seconds to wait for the database before a save fails (default: 15)",
    envvar="VENDORCOSTS_TIMEOUT",
)
@click.pass_context
def cli(ctx, db_path: str | None, timeout: float | None):
    """Vendorcosts - what neighbors pay local service providers.

    Record vendors, let residents share what they pay per visit, month or
    hour, and moderate the submitted costs.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path, timeout=timeout)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db


# Register all commands
vendor.register_commands(cli)
member.register_commands(cli)
cost.register_commands(cli)
admin.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
