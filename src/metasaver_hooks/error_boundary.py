"""Error boundary handling for CLI commands.

Two decorators live here:

- cli_error_boundary: for housekeeping commands. Well-known exceptions become a
  one-line error message and exit code 1, everything else keeps its traceback.
- hook_error_boundary: for assistant hooks. Every exit path converges to a
  clean exit 0 with nothing written to stderr, so a hook can never block or
  crash the host workflow.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click
from pydantic import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - FileExistsError: Refusing to overwrite an existing file
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or configuration
        - PermissionError: Permission denied errors
        - ValidationError: settings.json content that does not fit the model

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ValidationError as e:
            click.echo(f"Error: invalid settings file: {e}", err=True)
            raise SystemExit(1) from None
        except (FileExistsError, FileNotFoundError, PermissionError, ValueError) as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]


def hook_error_boundary(func: T) -> T:
    """Decorator that makes a hook body always finish successfully.

    Any exception or SystemExit raised by the body is logged at debug level
    and discarded. The wrapped function then returns None, which click turns
    into exit code 0.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        try:
            func(*args, **kwargs)
        except SystemExit as e:
            logger.debug("Hook %s exited with %r, forcing success", func.__name__, e.code)
        except Exception:
            logger.debug("Hook %s failed, forcing success", func.__name__, exc_info=True)

    return wrapper  # type: ignore[return-value]
