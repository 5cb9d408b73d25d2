"""
scriptlex - Scanner for a Small Scripting Language
==================================================

This package turns source text for a small scripting language into a
list of typed tokens, ready for a parser.

Main Components
---------------
- **tokens**: token types, the Token record and the keyword table
- **scanner**: the Scanner and the scan()/scan_file() helpers
- **errors**: diagnostics, reporters and the exception hierarchy
- **config**: ScannerOptions
- **cli**: the scriptlex command

Quick Start
-----------
Scan a string:
    >>> from scriptlex import scan
    >>> result = scan("println 1;")
    >>> [token.type.name for token in result.tokens]
    ['PRINTLN', 'NUMBER', 'SEMICOLON', 'EOF']

Get problems as they are found:
    >>> from scriptlex import DiagnosticCollector
    >>> collector = DiagnosticCollector()
    >>> result = scan("var @", reporter=collector)
    >>> collector.errors
    ['[line 1] Error: Unexpected character.']

Or use the command-line tool:
    $ scriptlex hello.fnc
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from scriptlex.config import ScannerOptions
from scriptlex.errors import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticKind,
    ErrorReporter,
    ScanError,
    ScriptLexError,
)
from scriptlex.scanner import Scanner, ScanResult, scan, scan_file
from scriptlex.tokens import KEYWORDS, Token, TokenType, lookup_keyword

__all__ = [
    # Version info
    "__version__",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    "lookup_keyword",
    # Scanner
    "Scanner",
    "ScanResult",
    "scan",
    "scan_file",
    # Configuration
    "ScannerOptions",
    # Diagnostics and errors
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticCollector",
    "ErrorReporter",
    "ScriptLexError",
    "ScanError",
]
