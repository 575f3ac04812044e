"""Shared helpers for CLI commands."""

import functools
import logging
import sys

from collections.abc import Callable
from typing import Any

import click

from src.application.exceptions import ApplicationError
from src.infrastructure.exceptions import InfrastructureError


logger = logging.getLogger(__name__)


def with_error_handling(func: Callable[..., Any]) -> Callable[..., Any]:
    """Report errors of a command on stderr and exit with status 1.

    click's own exceptions (usage errors, aborts) pass through unchanged.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except click.exceptions.ClickException:
            raise
        except (click.exceptions.Abort, click.exceptions.Exit):
            raise
        except ApplicationError as e:
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(1)
        except InfrastructureError as e:
            logger.error(f"Infrastructure error: {e}")
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        except Exception as e:
            logger.exception("Unexpected error")
            click.echo(f"Unexpected error: {e}", err=True)
            sys.exit(1)

    return wrapper
