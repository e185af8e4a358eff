"""
Error handling for the Lox scanner.

Lexical errors are recoverable: the scanner records a Diagnostic and keeps
going. LexerError exists for callers that decide a diagnostic is fatal.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable lexical error and the line it was found on."""
    line: int
    message: str
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"

    def __iter__(self):
        # Unpacks as the (line, message) pair downstream reporters expect.
        yield self.line
        yield self.message

    @property
    def title(self) -> str:
        """Short category name for the error code."""
        return ERROR_CODES.get(self.code, "Lexical error")


class LexerError(Exception):
    """
    Exception raised when a caller treats a scan diagnostic as fatal.

    The scanner itself never raises this; see ``tokenize``.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}


def create_unexpected_character_error(char: str, line: int) -> Diagnostic:
    """Create a diagnostic for a character that starts no lexeme."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return Diagnostic(
        line=line,
        message="Unexpected character.",
        code="L001",
        help_text=help_text,
    )


def create_unterminated_string_error(line: int) -> Diagnostic:
    """Create a diagnostic for a string literal that runs off the end of input."""
    return Diagnostic(
        line=line,
        message="Unterminated string.",
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
    )
