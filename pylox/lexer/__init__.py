"""
Lox Lexer Package

Implements the lexical scanner for the Lox scripting language.
Produces an ordered token list terminated by an EOF sentinel, plus a
list of recoverable diagnostics.

Key Features:
- Single forward pass with at most two characters of lookahead
- Case-sensitive, whole-lexeme keyword recognition
- Multi-line string literals with line tracking
- Best-effort error recovery (unexpected characters, unterminated strings)
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Scanner, scan, tokenize
from .errors import Diagnostic, LexerError

__all__ = [
    "Scanner",
    "scan",
    "tokenize",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "LexerError",
]
