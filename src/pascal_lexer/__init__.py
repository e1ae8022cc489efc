"""
Pascal Lexer - Lexical Analyzer for a Pascal-like Language
==========================================================

This package converts Pascal-like source text into a sequence of
classified tokens for use by a downstream parser.

Main Components
---------------
- **tokens**: token kinds, the Token value type and classification tables
- **scanner**: the Scanner, producing one token per call
- **report**: source file loading, token report output and diagnostics
- **cli**: the ``paslex`` command-line tool

Quick Start
-----------
Tokenize a string:
    >>> from pascal_lexer import Scanner
    >>> scanner = Scanner("begin x := 1 end")
    >>> [t.text for t in scanner.tokenize()]
    ['begin', 'x', ':', '=', '1', 'end', '']

Write a token report for a file:
    >>> from pascal_lexer import read_source, tokenize_source, write_report
    >>> tokens = tokenize_source(read_source("hello.pas"), "hello.pas")
    >>> write_report(tokens, "output.txt")

Or use the command-line tool:
    $ paslex hello.pas -o output.txt
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from pascal_lexer.errors import (
    PascalLexerError,
    SourceLocation,
    LexicalError,
    SourceIOError,
    SourceReadError,
    ReportWriteError,
)
from pascal_lexer.tokens import (
    TokenKind,
    Token,
    LexicalTables,
    DEFAULT_TABLES,
    KEYWORDS,
    OPERATORS,
    DELIMITERS,
)
from pascal_lexer.scanner import (
    Scanner,
    LexemeStart,
    classify_start,
    tokenize_source,
)
from pascal_lexer.report import (
    DEFAULT_REPORT_PATH,
    read_source,
    format_token_line,
    render_report,
    write_report,
    collect_diagnostics,
)

__all__ = [
    "__version__",
    # Errors
    "PascalLexerError",
    "SourceLocation",
    "LexicalError",
    "SourceIOError",
    "SourceReadError",
    "ReportWriteError",
    # Tokens and tables
    "TokenKind",
    "Token",
    "LexicalTables",
    "DEFAULT_TABLES",
    "KEYWORDS",
    "OPERATORS",
    "DELIMITERS",
    # Scanner
    "Scanner",
    "LexemeStart",
    "classify_start",
    "tokenize_source",
    # Report
    "DEFAULT_REPORT_PATH",
    "read_source",
    "format_token_line",
    "render_report",
    "write_report",
    "collect_diagnostics",
]
