"""
scriptlex - Scanner Command-Line Interface
==========================================

This module implements the command-line harness for the scanner. It
prints every token of its input, one per line, and reports scanning
problems on stderr.

Usage Examples
--------------
Scan a file:
    $ scriptlex hello.fnc

Interactive prompt (each line is scanned on its own):
    $ scriptlex
    > var x = 1;
    VAR var null
    ...

Tighter scanning rules:
    $ scriptlex --strict-numbers --strict-comments hello.fnc

Exit Status
-----------
0 on success, 64 on a usage error, 65 if a scanned file had errors,
66 if the file could not be read, 70 on an internal error.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from scriptlex import __version__
from scriptlex.cli.errors import ExitCode, handle_cli_exception
from scriptlex.config import ScannerOptions
from scriptlex.scanner import ScanResult, scan


class ConsoleReporter:
    """Print each diagnostic to stderr as it is reported."""

    def report(self, line: int, message: str) -> None:
        click.echo(f"[line {line}] Error: {message}", err=True)


def _run(source: str, options: ScannerOptions) -> ScanResult:
    """Scan source and print its tokens."""
    result = scan(source, options, reporter=ConsoleReporter())
    for token in result.tokens:
        click.echo(str(token))
    return result


def _run_prompt(options: ScannerOptions) -> None:
    """Scan stdin line by line until end of input."""
    stdin = click.get_text_stream("stdin")
    while True:
        click.echo("> ", nl=False)
        line = stdin.readline()
        if not line:
            break
        # Problems on one line never carry over to the next
        _run(line.removesuffix("\n").removesuffix("\r"), options)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "scripts",
    nargs=-1,
    metavar="[SCRIPT]",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--strict-numbers",
    is_flag=True,
    help="Only attach '.' to a number when a digit follows it",
)
@click.option(
    "--strict-comments",
    is_flag=True,
    help="End block comments at the first '*/' and report unterminated ones",
)
@click.option(
    "--pipe-is-error",
    is_flag=True,
    help="Report a lone '|' instead of dropping it",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="scriptlex")
def main(
    scripts: tuple[Path, ...],
    strict_numbers: bool,
    strict_comments: bool,
    pipe_is_error: bool,
    verbose: bool,
) -> None:
    """
    Tokenize a script and print its tokens.

    SCRIPT is the source file to scan. Without it, an interactive prompt
    scans each line typed.

    \b
    Options can also be set through the environment:
        SCRIPTLEX_STRICT_NUMBERS, SCRIPTLEX_STRICT_COMMENTS,
        SCRIPTLEX_PIPE_IS_ERROR (1/true/yes/on or 0/false/no/off)
    """
    if len(scripts) > 1:
        click.echo("Usage: scriptlex [SCRIPT]", err=True)
        sys.exit(ExitCode.USAGE)

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    options = ScannerOptions.from_env()
    options.strict_numbers = options.strict_numbers or strict_numbers
    options.strict_comments = options.strict_comments or strict_comments
    options.lone_pipe_is_error = options.lone_pipe_is_error or pipe_is_error

    script: Optional[Path] = scripts[0] if scripts else None

    if script is None:
        _run_prompt(options)
        return

    try:
        if verbose:
            click.echo(f"Scanning {script}...", err=True)

        source = script.read_bytes().decode("utf-8")
        result = _run(source, options)

        if verbose:
            click.echo(
                f"{len(result.tokens)} tokens, {result.error_count} errors",
                err=True,
            )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if result.had_errors:
        sys.exit(ExitCode.DATA_ERROR)


if __name__ == "__main__":
    main()
