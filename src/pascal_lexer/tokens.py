"""
Pascal Token Types and Lexical Tables
=====================================

This module defines the token taxonomy produced by the scanner and the
fixed classification tables it consults.

Token Categories
----------------
| Kind         | Example         | Notes                              |
|--------------|-----------------|------------------------------------|
| KEYWORD      | begin           | exact, case-sensitive match        |
| IDENTIFIER   | total_1         | letters, digits, underscore        |
| NUMBER       | 123             | decimal digits                     |
| FLOAT        | 12.5            | digits containing a '.'            |
| HEX_NUMBER   | $1A             | '$' followed by hex digits         |
| STRING       | "hi"            | double quoted, quotes kept         |
| CHAR         | 'a'             | single quoted, quotes kept         |
| PREPROCESSOR | #include        | '#' up to the next whitespace      |
| COMMENT      | { x } / (* x *) | delimiters kept                    |
| OPERATOR     | + - * / : = ... | always a single character          |
| DELIMITER    | ( ) ; , [ ] ... | always a single character          |
| ERROR        | -               | text is a diagnostic message       |
| END_OF_FILE  | -               | empty text, repeats once reached   |

UNKNOWN is part of the taxonomy for downstream consumers; the scanner
reports unrecognised characters as ERROR tokens instead.
"""

import string
from dataclasses import dataclass, field
from enum import Enum, auto


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token categories for the Pascal-like source language.

    The set is closed: every lexeme the scanner produces maps to exactly
    one of these kinds.
    """

    KEYWORD = auto()
    IDENTIFIER = auto()
    NUMBER = auto()
    HEX_NUMBER = auto()
    FLOAT = auto()
    STRING = auto()
    CHAR = auto()
    PREPROCESSOR = auto()
    COMMENT = auto()
    OPERATOR = auto()
    DELIMITER = auto()
    UNKNOWN = auto()
    ERROR = auto()
    END_OF_FILE = auto()

    @property
    def display_name(self) -> str:
        """Upper-case name used in the token report."""
        if self is TokenKind.END_OF_FILE:
            return "EOF"
        return self.name


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexeme from Pascal source.

    Only ``kind`` and ``text`` take part in equality, so tests and callers
    can compare against ``Token(TokenKind.NUMBER, "42")`` without caring
    where the token was found.

    Attributes:
        kind: The TokenKind classification
        text: The lexeme exactly as written (for ERROR, the diagnostic)
        line: Line number of the first character (1-indexed)
        column: Column number of the first character (1-indexed)
    """
    kind: TokenKind
    text: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.line:
            return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.text!r})"

    @property
    def is_error(self) -> bool:
        return self.kind is TokenKind.ERROR

    @property
    def is_eof(self) -> bool:
        return self.kind is TokenKind.END_OF_FILE


# =============================================================================
# Classification Tables
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    "program", "begin", "end", "var", "integer", "real",
    "if", "then", "else", "while", "do", "for", "to",
})

OPERATORS: frozenset[str] = frozenset("+-*/:=<>.%^")

DELIMITERS: frozenset[str] = frozenset("();,[]{}")

# Character classes (ASCII, matching the C locale classification)
WHITESPACE = frozenset(string.whitespace)
DIGITS = frozenset(string.digits)
HEX_DIGITS = frozenset(string.hexdigits)
IDENT_START = frozenset(string.ascii_letters + "_")
IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")


@dataclass(frozen=True)
class LexicalTables:
    """
    Read-only classification tables handed to a Scanner.

    Attributes:
        keywords: Reserved words, matched case-sensitively
        operators: Single characters emitted as OPERATOR tokens
        delimiters: Single characters emitted as DELIMITER tokens
    """
    keywords: frozenset[str] = KEYWORDS
    operators: frozenset[str] = OPERATORS
    delimiters: frozenset[str] = DELIMITERS

    def with_keywords(self, *words: str) -> "LexicalTables":
        """Return a copy of these tables with extra reserved words."""
        return LexicalTables(
            keywords=self.keywords | frozenset(words),
            operators=self.operators,
            delimiters=self.delimiters,
        )


DEFAULT_TABLES = LexicalTables()
