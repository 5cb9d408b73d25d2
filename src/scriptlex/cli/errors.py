"""
CLI Error Handling
==================

Exit codes and exception handling for the scriptlex command.

Exit codes follow the BSD sysexits convention.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Exit codes for the scriptlex command."""
    SUCCESS = 0
    USAGE = 64           # Wrong number of arguments
    DATA_ERROR = 65      # Input scanned with errors
    NO_INPUT = 66        # Input file missing or unreadable
    INTERNAL_ERROR = 70  # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always
    """
    from scriptlex.errors import ScriptLexError

    if isinstance(error, ScriptLexError):
        # Already a formatted diagnostic report
        click.echo(str(error), err=True)
        sys.exit(ExitCode.DATA_ERROR)

    elif isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.NO_INPUT)

    elif isinstance(error, UnicodeDecodeError):
        click.echo(f"Error: cannot decode input: {error}", err=True)
        sys.exit(ExitCode.DATA_ERROR)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
