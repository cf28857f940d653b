"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping so every Typer command
reports failures the same way.
"""
from __future__ import annotations

import logging
from typing import Callable, TypeVar

import typer

logger = logging.getLogger(__name__)

T = TypeVar('T')

EXIT_CODES = {
    "UnsafePathError": 2,
    "PlatformMismatchError": 2,
    "ValueError": 2,
    "SanitizerError": 4,
}


def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.

    - 0: Success
    - 2: Rejected or invalid input (UnsafePathError, PlatformMismatchError, ValueError)
    - 3: Unknown error
    - 4: Sanitizer bug (SanitizerError)

    Args:
        exc: Exception to map

    Returns:
        Exit code, with 3 as fallback for unknown exceptions
    """
    for cls in type(exc).__mro__:
        if cls.__name__ in EXIT_CODES:
            return EXIT_CODES[cls.__name__]
    return 3


def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.

    Executes the given function and maps any exception to an exit code via
    typer.Exit, printing the message to stderr.

    Raises:
        typer.Exit: With the mapped exit code if func raises
    """
    try:
        return func()
    except typer.Exit:
        raise
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=exit_code_for(e)) from e
