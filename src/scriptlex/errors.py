"""
scriptlex Error Handling
========================

This module defines the exception hierarchy and the diagnostic records
produced while scanning.

Scanning never stops on bad input. Each problem is recorded as a
Diagnostic and forwarded to an optional ErrorReporter, and the scan
carries on so that one pass reports as many problems as possible. It is
up to the host to decide what "at least one error" means for it.

Exception Hierarchy
-------------------
ScriptLexError (base)
└── ScanError - aggregate raised on request when a scan had diagnostics

Diagnostic Format
-----------------
    [line 3] Error: Unexpected character.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Protocol


# =============================================================================
# Diagnostics
# =============================================================================

class DiagnosticKind(Enum):
    """Categories of problems the scanner can report."""
    UNEXPECTED_CHARACTER = auto()   # Character matches no lexical rule
    UNTERMINATED_STRING = auto()    # Input ended inside a string literal
    UNTERMINATED_COMMENT = auto()   # Input ended inside /* (strict mode only)


@dataclass(frozen=True)
class Diagnostic:
    """
    A single problem found while scanning.

    Attributes:
        line: Line number where the problem was detected (1-indexed)
        message: Human-readable description
        kind: The DiagnosticKind category
    """
    line: int
    message: str
    kind: DiagnosticKind

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class ErrorReporter(Protocol):
    """
    Receiver for diagnostics as they are found.

    Anything with a matching report() method can be passed to the
    scanner; it is called once per diagnostic, in source order.
    """

    def report(self, line: int, message: str) -> None:
        ...


class DiagnosticCollector:
    """
    Collects reported problems for batch reporting.

    Implements the ErrorReporter protocol, so it can be handed straight
    to a scanner. Several scans may share one collector when the host
    wants a single verdict for all of them.

    Example:
        collector = DiagnosticCollector()
        scan("var x = @;", reporter=collector)
        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self):
        self.errors: List[str] = []

    def report(self, line: int, message: str) -> None:
        """Record a problem at the given line."""
        self.errors.append(f"[line {line}] Error: {message}")

    def has_errors(self) -> bool:
        """Return True if any problems have been reported."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of reported problems."""
        return len(self.errors)

    def report_text(self) -> str:
        """Format all reported problems for display."""
        return format_report(self.errors)

    def clear(self) -> None:
        """Forget everything reported so far."""
        self.errors.clear()


def format_report(errors: Iterable[object]) -> str:
    """
    Format problems one per line, followed by a summary line.

    Example output:
        [line 1] Error: Unexpected character.
        [line 4] Error: Unterminated string.

        2 errors
    """
    lines = [str(error) for error in errors]
    count = len(lines)
    word = "error" if count == 1 else "errors"
    lines.append(f"\n{count} {word}")
    return "\n".join(lines)


# =============================================================================
# Exceptions
# =============================================================================

class ScriptLexError(Exception):
    """
    Base exception for all scriptlex errors.

    Allows callers to catch every package error with a single clause:

        try:
            scan(source).raise_if_errors()
        except ScriptLexError as e:
            print(e)
    """
    pass


class ScanError(ScriptLexError):
    """
    Aggregate error for a scan that produced diagnostics.

    The message is a formatted report of every diagnostic, so printing
    the exception shows the whole list.

    Attributes:
        diagnostics: The diagnostics that caused the error, in order
    """

    def __init__(self, diagnostics: List[Diagnostic]):
        self.diagnostics = list(diagnostics)
        super().__init__(format_report(self.diagnostics))
