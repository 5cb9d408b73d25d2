"""
Scanner (Tokenizer)
===================

This module implements the lexical scanner for the scripting language.
It converts source text into a list of tokens for a parser to consume.

The scanner is a single left-to-right pass with one character of
lookahead. It never raises on bad input: problems are recorded as
diagnostics and scanning continues, so the returned token list always
ends with exactly one EOF token.

Lexical Rules
-------------
- Whitespace: space, tab and carriage return are skipped; newline is
  skipped and advances the line counter
- Comments: // to end of line, /* block */
- Strings: "double quoted", may span lines, no escape sequences
- Numbers: digits with an optional fraction, always decoded as float
- Identifiers: ASCII letter or underscore, then letters, digits,
  underscores; reserved words map to their own token types

Block Comments
--------------
By default a block comment ends at the first '*' and the two characters
starting there are consumed, whatever they are. A '/' inside the comment
body is consumed together with the character after it. So:

    /* a */ b       -> IDENTIFIER b
    /* a * b */     -> IDENTIFIER b, STAR, SLASH
    /* a **/        -> SLASH

Set ScannerOptions.strict_comments to end comments at the first "*/".

Example Usage
-------------
>>> from scriptlex.scanner import scan
>>> result = scan("var x = 12.5;")
>>> for token in result.tokens:
...     print(token)
VAR var null
IDENTIFIER x null
EQUAL = null
NUMBER 12.5 12.5
SEMICOLON ; null
EOF  null
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import logging

from scriptlex.config import ScannerOptions
from scriptlex.errors import (
    Diagnostic,
    DiagnosticKind,
    ErrorReporter,
    ScanError,
    format_report,
)
from scriptlex.tokens import Token, TokenType, lookup_keyword


logger = logging.getLogger(__name__)


# =============================================================================
# Character Classes
# =============================================================================

def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


# =============================================================================
# Scan Result
# =============================================================================

@dataclass
class ScanResult:
    """
    Everything a scan produced.

    Attributes:
        tokens: Scanned tokens, always ending with a single EOF token
        diagnostics: Problems found, in source order
    """
    tokens: List[Token]
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def had_errors(self) -> bool:
        """Return True if the scan reported any problem."""
        return len(self.diagnostics) > 0

    @property
    def error_count(self) -> int:
        """Return the number of diagnostics collected."""
        return len(self.diagnostics)

    def report(self) -> str:
        """Format all diagnostics for display."""
        return format_report(self.diagnostics)

    def raise_if_errors(self) -> None:
        """Raise a ScanError if any diagnostics were collected."""
        if self.had_errors:
            raise ScanError(self.diagnostics)


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes source text.

    A Scanner owns its cursor state and is meant to be used for a single
    scan; create a new one for every piece of input.

    Usage:
        scanner = Scanner(source_text)
        tokens = scanner.scan_tokens()
        for diagnostic in scanner.diagnostics:
            print(diagnostic)

    Attributes:
        source: The text being scanned
        options: ScannerOptions in effect
        reporter: Optional ErrorReporter told about each diagnostic
        tokens: Tokens scanned so far
        diagnostics: Problems found so far
    """

    # Punctuation that never needs lookahead
    SINGLE_CHAR_TOKENS = {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
    }

    def __init__(
        self,
        source: str,
        options: Optional[ScannerOptions] = None,
        reporter: Optional[ErrorReporter] = None,
    ):
        """
        Initialize the scanner with source text.

        Args:
            source: The text to tokenize
            options: Scanner options (default: historical behavior)
            reporter: Optional receiver for diagnostics as they are found
        """
        self.source = source
        self.options = options or ScannerOptions()
        self.reporter = reporter

        self.tokens: List[Token] = []
        self.diagnostics: List[Diagnostic] = []

        # Cursor state
        self._start = 0         # Offset of the token being scanned
        self._current = 0       # Offset of the next unread character
        self._line = 1
        self._start_line = 1    # Line the token being scanned started on

        self._done = False

    def scan_tokens(self) -> List[Token]:
        """
        Scan the whole source.

        Returns:
            The token list, ending with an EOF token. Calling this again
            returns the same list without rescanning.
        """
        if self._done:
            return self.tokens

        while not self._at_end():
            self._start = self._current
            self._start_line = self._line
            token = self._scan_token()
            if token is not None:
                self.tokens.append(token)

        self.tokens.append(Token(TokenType.EOF, "", None, self._line))
        self._done = True

        logger.debug(
            f"Scanned {len(self.source)} characters: "
            f"{len(self.tokens)} tokens, {len(self.diagnostics)} diagnostics"
        )
        return self.tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._current >= len(self.source)

    def _peek(self) -> str:
        """Look at the next unread character; empty string at end."""
        if self._at_end():
            return ""
        return self.source[self._current]

    def _peek_next(self) -> str:
        """Look one character past _peek(); empty string past end."""
        if self._current + 1 >= len(self.source):
            return ""
        return self.source[self._current + 1]

    def _advance(self) -> str:
        """
        Consume and return the next character.

        At end of input nothing is consumed and an empty string is
        returned.
        """
        if self._at_end():
            return ""
        char = self.source[self._current]
        self._current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it equals expected."""
        if self._at_end() or self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    # =========================================================================
    # Token and Diagnostic Creation
    # =========================================================================

    def _make_token(
        self,
        token_type: TokenType,
        literal: str | float | None = None,
    ) -> Token:
        """Create a token whose lexeme is the text from start to cursor."""
        lexeme = self.source[self._start:self._current]
        return Token(token_type, lexeme, literal, self._start_line)

    def _error(self, kind: DiagnosticKind, message: str) -> None:
        """Record a problem at the current line and notify the reporter."""
        diagnostic = Diagnostic(self._line, message, kind)
        self.diagnostics.append(diagnostic)
        logger.debug(f"Scan diagnostic: {diagnostic}")

        if self.reporter is not None:
            self.reporter.report(diagnostic.line, diagnostic.message)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Optional[Token]:
        """
        Scan one lexical element starting at the cursor.

        Returns:
            The token produced, or None when the element was skipped
            (whitespace, comment) or reported as a problem
        """
        char = self._advance()

        if char in self.SINGLE_CHAR_TOKENS:
            return self._make_token(self.SINGLE_CHAR_TOKENS[char])

        match char:
            case "!":
                return self._make_token(
                    TokenType.BANG_EQUAL if self._match("=") else TokenType.BANG
                )
            case "=":
                return self._make_token(
                    TokenType.EQUAL_EQUAL if self._match("=") else TokenType.EQUAL
                )
            case ">":
                return self._make_token(
                    TokenType.GREATER_EQUAL if self._match("=") else TokenType.GREATER
                )
            case "<":
                return self._make_token(
                    TokenType.LESS_EQUAL if self._match("=") else TokenType.LESS
                )
            case "/":
                if self._match("/"):
                    self._skip_line_comment()
                    return None
                if self._match("*"):
                    self._skip_block_comment()
                    return None
                return self._make_token(TokenType.SLASH)
            case "|":
                if self._match("|"):
                    return self._make_token(TokenType.OR)
                if self.options.lone_pipe_is_error:
                    self._error(DiagnosticKind.UNEXPECTED_CHARACTER, "Unexpected character.")
                return None
            case "&":
                if self._match("&"):
                    return self._make_token(TokenType.AND)
                self._error(DiagnosticKind.UNEXPECTED_CHARACTER, "Unexpected character.")
                return None
            case " " | "\r" | "\t":
                return None
            case "\n":
                self._line += 1
                return None
            case '"':
                return self._scan_string()
            case _ if _is_digit(char):
                return self._scan_number()
            case _ if _is_alpha(char):
                return self._scan_identifier()
            case _:
                self._error(DiagnosticKind.UNEXPECTED_CHARACTER, "Unexpected character.")
                return None

    def _skip_line_comment(self) -> None:
        """Skip to (not past) the end of the line."""
        while self._peek() != "\n" and not self._at_end():
            self._advance()

    def _skip_block_comment(self) -> None:
        """Skip the rest of a block comment; the opening /* is consumed."""
        if self.options.strict_comments:
            self._skip_block_comment_strict()
            return

        while self._peek() != "*" and not self._at_end():
            if self._peek() == "/":
                self._advance_in_comment()
            self._advance_in_comment()

        # Takes the '*' and whatever follows it
        self._advance_in_comment()
        self._advance_in_comment()

    def _skip_block_comment_strict(self) -> None:
        while not self._at_end():
            if self._peek() == "*" and self._peek_next() == "/":
                self._advance()
                self._advance()
                return
            self._advance_in_comment()

        self._error(DiagnosticKind.UNTERMINATED_COMMENT, "Unterminated block comment.")

    def _advance_in_comment(self) -> None:
        if self._advance() == "\n":
            self._line += 1

    def _scan_string(self) -> Optional[Token]:
        """
        Scan a string literal; the opening quote is consumed.

        The literal is the raw text between the quotes. Strings may span
        lines. If input ends first, the problem is reported and no token
        is produced.
        """
        while self._peek() != '"' and not self._at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._at_end():
            self._error(DiagnosticKind.UNTERMINATED_STRING, "Unterminated string.")
            return None

        self._advance()  # closing "

        value = self.source[self._start + 1:self._current - 1]
        return self._make_token(TokenType.STRING, value)

    def _scan_number(self) -> Token:
        """
        Scan a number literal; the first digit is consumed.

        A '.' after the integer part is taken even when no digit follows
        it ("1." is a complete literal) unless strict_numbers is set.
        """
        while _is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and (
            not self.options.strict_numbers or _is_digit(self._peek_next())
        ):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        text = self.source[self._start:self._current]
        return self._make_token(TokenType.NUMBER, float(text))

    def _scan_identifier(self) -> Token:
        """Scan an identifier or reserved word; the first character is consumed."""
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self._start:self._current]
        token_type = lookup_keyword(text)
        if token_type is None:
            token_type = TokenType.IDENTIFIER
        return self._make_token(token_type)


# =============================================================================
# Convenience Functions
# =============================================================================

def scan(
    source: str,
    options: Optional[ScannerOptions] = None,
    reporter: Optional[ErrorReporter] = None,
) -> ScanResult:
    """
    Scan source text.

    Args:
        source: Text to tokenize
        options: Scanner options (default: historical behavior)
        reporter: Optional receiver for diagnostics as they are found

    Returns:
        ScanResult with the tokens and any diagnostics
    """
    scanner = Scanner(source, options, reporter)
    tokens = scanner.scan_tokens()
    return ScanResult(tokens, scanner.diagnostics)


def scan_file(
    path: str | Path,
    options: Optional[ScannerOptions] = None,
    reporter: Optional[ErrorReporter] = None,
    encoding: str = "utf-8",
) -> ScanResult:
    """
    Read and scan a source file.

    Raises:
        OSError: If the file cannot be read
    """
    # Decoded from bytes so carriage returns reach the scanner unchanged
    source = Path(path).read_bytes().decode(encoding)
    logger.debug(f"Read {len(source)} characters from {path}")
    return scan(source, options, reporter)
