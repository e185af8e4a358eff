"""
pylox Package

Front end for the Lox scripting language.

Architecture:
    pylox/
    ├── lexer/           # Tokenization and lexical analysis
    └── utils/           # Logging helpers

Parsing, resolution and evaluation consume the token stream and live
outside this package.

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, Diagnostic, LexerError, scan, tokenize

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "Diagnostic",
    "LexerError",

    # Functions
    "scan",
    "tokenize",

    # Version info
    "__version__",
    "__license__",
]
