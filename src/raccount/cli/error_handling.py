"""Failure reporting for raccount commands.

Every failure is a single ``Error: ...`` line on stderr followed by exit
status 1.
"""

import logging
import sys
from typing import NoReturn

import click

from raccount.domain.errors import DomainError

logger = logging.getLogger(__name__)


def fail(ctx: click.Context | None, message: str) -> NoReturn:
    """Print an error line and stop. Without a context the process exits."""
    click.echo(f"Error: {message}", err=True)
    if ctx is None:
        sys.exit(1)
    ctx.exit(1)


def handle_domain_error(ctx: click.Context, error: DomainError) -> NoReturn:
    """Report a domain error raised by a repository call."""
    logger.debug("%s in command %s", type(error).__name__, ctx.info_name, exc_info=error)
    fail(ctx, str(error))
