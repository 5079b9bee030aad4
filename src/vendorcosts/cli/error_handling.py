"""CLI error handling helpers."""

import click
import structlog

from vendorcosts.domain.cost import SubmissionResult
from vendorcosts.domain.errors import DomainError

logger = structlog.get_logger()


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Print a domain or parse error on stderr and exit with status 1."""
    logger.debug("command_failed", command=ctx.command_path, error_type=type(error).__name__)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_submission_failure(ctx: click.Context, result: SubmissionResult) -> None:
    """Print a failed submission, with a retry hint for write failures, and exit."""
    logger.debug("submission_rejected", command=ctx.command_path, failure=result.failure.value)
    click.echo(f"Error: {result.message}", err=True)
    if result.retryable:
        click.echo("Your entries were not saved; run the command again to retry.", err=True)
    ctx.exit(1)
