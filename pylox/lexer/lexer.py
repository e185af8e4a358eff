"""
Lox Scanner - turns source text into tokens

Single forward pass over the source. Every iteration of the main loop
consumes at least one character, so a scan always terminates. Lexical
errors are collected as diagnostics and never stop the scan; whether
they are fatal is up to the caller.
"""

from typing import List, Tuple

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS,
    WHITESPACE, DIGITS, IDENTIFIER_START, IDENTIFIER_CHARS
)
from .errors import (
    Diagnostic, LexerError, create_unexpected_character_error,
    create_unterminated_string_error
)
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """
    Lox lexical analyzer.

    Holds one source text and scans it once. The cursor pair
    (``_start``, ``_current``) brackets the lexeme being recognized and
    ``_line`` tracks the current 1-based line.
    """

    def __init__(self, source: str):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text of one compilation unit
        """
        self.source = source
        self.tokens: List[Token] = []
        self.diagnostics: List[Diagnostic] = []

        self._start = 0
        self._current = 0
        self._line = 1
        self._scanned = False

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens, always ending with a single EOF token

        Calling this again returns the same list without rescanning.
        """
        if self._scanned:
            return self.tokens

        while not self._is_at_end():
            # Beginning of the next lexeme
            self._start = self._current
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self._line))
        self._scanned = True

        logger.debug(
            "Scanned %d tokens with %d diagnostics over %d lines",
            len(self.tokens), len(self.diagnostics), self._line
        )
        return self.tokens

    def has_errors(self) -> bool:
        """Check if the scan recorded any diagnostics."""
        return len(self.diagnostics) > 0

    def _scan_token(self):
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in TWO_CHAR_TOKENS:
            with_equal, alone = TWO_CHAR_TOKENS[char]
            self._add_token(with_equal if self._match("=") else alone)
        elif char == "/":
            if self._match("/"):
                # A comment goes until the end of the line
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char in WHITESPACE:
            pass
        elif char == "\n":
            self._line += 1
        elif char == '"':
            self._string()
        elif char in DIGITS:
            self._number()
        elif char in IDENTIFIER_START:
            self._identifier()
        else:
            self._report(create_unexpected_character_error(char, self._line))

    def _identifier(self):
        """Scan an identifier or keyword (maximal munch)."""
        while self._peek() in IDENTIFIER_CHARS:
            self._advance()

        text = self.source[self._start:self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _number(self):
        """Scan a number literal; the value is always a float."""
        while self._peek() in DIGITS:
            self._advance()

        # A "." only belongs to the number when a digit follows it,
        # so `1.foo` stays NUMBER DOT IDENTIFIER.
        if self._peek() == "." and self._peek_next() in DIGITS:
            self._advance()

            while self._peek() in DIGITS:
                self._advance()

        value = float(self.source[self._start:self._current])
        self._add_token(TokenType.NUMBER, value)

    def _string(self):
        """Scan a string literal. No escape sequences are processed."""
        start_line = self._line

        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            self._report(create_unterminated_string_error(self._line))
            return

        # The closing quote
        self._advance()

        value = self.source[self._start + 1:self._current - 1]
        self._add_token(TokenType.STRING, value, line=start_line)

    def _is_at_end(self) -> bool:
        return self._current >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the next character."""
        self._current += 1
        return self.source[self._current - 1]

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end():
            return False
        if self.source[self._current] != expected:
            return False

        self._current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self.source):
            return "\0"
        return self.source[self._current + 1]

    def _add_token(self, token_type: TokenType, literal=None, line=None):
        text = self.source[self._start:self._current]
        self.tokens.append(
            Token(token_type, text, literal, self._line if line is None else line)
        )

    def _report(self, diagnostic: Diagnostic):
        logger.debug("%s (%s)", diagnostic, diagnostic.code)
        self.diagnostics.append(diagnostic)


def scan(source: str) -> Tuple[List[Token], List[Diagnostic]]:
    """
    Scan a source string with a fresh Scanner.

    Args:
        source: Source code string

    Returns:
        Tuple of (tokens, diagnostics). Tokens always end with EOF;
        diagnostics is empty for well-formed input.
    """
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    return tokens, scanner.diagnostics


def tokenize(source: str) -> List[Token]:
    """
    Scan a source string, treating any diagnostic as fatal.

    Args:
        source: Source code string

    Returns:
        List of tokens

    Raises:
        LexerError: For the first diagnostic recorded, after the whole
            source has been scanned
    """
    tokens, diagnostics = scan(source)

    if diagnostics:
        raise LexerError(diagnostics[0])

    return tokens
