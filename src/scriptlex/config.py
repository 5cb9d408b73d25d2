"""
scriptlex - Scanner Configuration
=================================

Options controlling the few places where the scanner's historical
behavior is permissive. Every option defaults to False, which keeps
that historical behavior exactly. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line flags (see scriptlex.cli)

Options
-------
| Option             | Default behavior           | When enabled                    |
|--------------------|----------------------------|---------------------------------|
| strict_numbers     | "1." scans as NUMBER "1."  | "." only attaches before digits |
| strict_comments    | /* stops at first '*'      | /* runs to the first "*/"       |
| lone_pipe_is_error | lone pipe dropped silently | lone pipe is reported           |
"""

from dataclasses import dataclass
import os


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _env_flag(name: str) -> bool | None:
    """Read a boolean environment variable; None if unset or unrecognized."""
    value = os.environ.get(name)
    if value is None:
        return None
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


@dataclass
class ScannerOptions:
    """
    Configuration for a scan.

    Attributes:
        strict_numbers: Only consume a '.' after digits when a digit
            follows it (default: False, any '.' is consumed)
        strict_comments: Block comments end at the first "*/" and an
            unterminated one is reported (default: False)
        lone_pipe_is_error: Report a '|' not followed by another '|' as
            an unexpected character (default: False, dropped silently)
    """

    strict_numbers: bool = False
    strict_comments: bool = False
    lone_pipe_is_error: bool = False

    @classmethod
    def from_env(cls) -> "ScannerOptions":
        """
        Create ScannerOptions from environment variables.

        Environment variables (all optional):
            SCRIPTLEX_STRICT_NUMBERS: 1/true/yes/on or 0/false/no/off
            SCRIPTLEX_STRICT_COMMENTS: same
            SCRIPTLEX_PIPE_IS_ERROR: same

        Unrecognized values are ignored.
        """
        options = cls()

        if (flag := _env_flag("SCRIPTLEX_STRICT_NUMBERS")) is not None:
            options.strict_numbers = flag

        if (flag := _env_flag("SCRIPTLEX_STRICT_COMMENTS")) is not None:
            options.strict_comments = flag

        if (flag := _env_flag("SCRIPTLEX_PIPE_IS_ERROR")) is not None:
            options.lone_pipe_is_error = flag

        return options
