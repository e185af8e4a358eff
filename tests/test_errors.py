"""
Tests for scanner diagnostics and error reporting.
"""

import logging
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from pylox.lexer.errors import (
    Diagnostic, LexerError, ERROR_CODES,
    create_unexpected_character_error, create_unterminated_string_error
)
from pylox.lexer.lexer import scan
from pylox.utils.logger import get_logger


class TestDiagnostic(unittest.TestCase):
    """Diagnostic records."""

    def test_report_format(self):
        diagnostic = Diagnostic(4, "Unterminated string.")
        self.assertEqual(str(diagnostic), "[line 4] Error: Unterminated string.")

    def test_unpacks_as_line_and_message(self):
        line, message = create_unterminated_string_error(7)
        self.assertEqual(line, 7)
        self.assertEqual(message, "Unterminated string.")

    def test_unexpected_character_help(self):
        diagnostic = create_unexpected_character_error("@", 2)
        self.assertEqual(diagnostic.code, "L001")
        self.assertIn("'@'", diagnostic.help_text)
        self.assertEqual(diagnostic.title, ERROR_CODES["L001"])

    def test_non_printable_character_help(self):
        diagnostic = create_unexpected_character_error("\x07", 1)
        self.assertIn("U+0007", diagnostic.help_text)

    def test_unknown_code_title(self):
        self.assertEqual(Diagnostic(1, "x").title, "Lexical error")

    def test_lexer_error_wraps_diagnostic(self):
        diagnostic = create_unterminated_string_error(3)
        error = LexerError(diagnostic)
        self.assertIs(error.diagnostic, diagnostic)
        self.assertEqual(error.line, 3)
        self.assertEqual(error.args, ("Unterminated string.",))


class TestLogging(unittest.TestCase):
    """Scanner logging."""

    def test_logger_namespace(self):
        self.assertEqual(get_logger("custom").name, "pylox.custom")
        self.assertEqual(get_logger("pylox.lexer").name, "pylox.lexer")
        self.assertEqual(get_logger("pylox").name, "pylox")

    def test_diagnostics_are_logged(self):
        with self.assertLogs("pylox.lexer.lexer", level=logging.DEBUG) as captured:
            scan("@")

        output = "\n".join(captured.output)
        self.assertIn("[line 1] Error: Unexpected character.", output)
        self.assertIn("Scanned 1 tokens with 1 diagnostics", output)


if __name__ == '__main__':
    unittest.main()
