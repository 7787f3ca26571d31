"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and a command wrapper
so every Typer command reports failures the same way.
"""
from __future__ import annotations

import typer
from typing import Callable, TypeVar

T = TypeVar('T')

EXIT_CODES = {
    "InvalidPathArgument": 2,
    "ValueError": 2,
    "CallFailure": 3,
    "PathError": 4,
    "NotAFile": 4,
    "NotADirectory": 4,
}

FALLBACK_EXIT_CODE = 1


def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to exit code.

    Returns:
    - 2: Invalid argument (InvalidPathArgument, ValueError)
    - 3: OS call failed (CallFailure)
    - 4: Path precondition violated (PathError, NotAFile, NotADirectory)
    - 1: Anything else
    """
    return EXIT_CODES.get(type(exc).__name__, FALLBACK_EXIT_CODE)


def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.

    Executes the given function; on failure prints the error message to
    stderr and exits with the mapped code.

    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        return func()
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=exit_code_for(e)) from e
