"""
Pascal Scanner (Tokenizer)
==========================

This module implements the scanner for a Pascal-like language. It turns
source text into a stream of classified tokens, one token per call to
``Scanner.next_token()``.

Dispatch
--------
After skipping whitespace, the character under the cursor (plus one
character of lookahead, needed only to tell ``(*`` from ``(``) selects a
lexeme-start category:

| Start character        | Category     | Sub-lexer                  |
|------------------------|--------------|----------------------------|
| ``{`` or ``(*``        | COMMENT      | ``_scan_comment``          |
| ``#``                  | PREPROCESSOR | ``_scan_preprocessor``     |
| ``'`` or ``"``         | QUOTED       | ``_scan_quoted``           |
| digit or ``$``         | NUMBER       | ``_scan_number``           |
| letter or ``_``        | IDENTIFIER   | ``_scan_identifier``       |
| operator character     | OPERATOR     | single character           |
| delimiter character    | DELIMITER    | single character           |
| anything else          | UNKNOWN      | ERROR token, skip one char |

Error Recovery
--------------
Malformed input never raises. Unknown characters and unterminated quoted
literals come back as ERROR tokens and scanning carries on with the next
call. Unterminated comments are returned as (truncated) COMMENT tokens
with no error at all.

Example Usage
-------------
>>> from pascal_lexer.scanner import Scanner
>>> scanner = Scanner("x := $1F;", "demo.pas")
>>> for token in scanner.tokenize():
...     print(token)
Token(IDENTIFIER, 'x', 1:1)
Token(OPERATOR, ':', 1:3)
Token(OPERATOR, '=', 1:4)
Token(HEX_NUMBER, '$1F', 1:6)
Token(DELIMITER, ';', 1:9)
Token(END_OF_FILE, '', 1:10)
"""

import logging
from bisect import bisect_right
from enum import Enum, auto
from typing import Callable, Iterator

from pascal_lexer.errors import SourceLocation
from pascal_lexer.tokens import (
    DEFAULT_TABLES,
    DIGITS,
    HEX_DIGITS,
    IDENT_CHARS,
    IDENT_START,
    WHITESPACE,
    LexicalTables,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)

# Diagnostic texts carried by ERROR tokens
UNKNOWN_CHARACTER = "Unknown character: {char}"
INVALID_HEX_NUMBER = "Invalid hexadecimal number"
UNTERMINATED_LITERAL = "Unterminated string or character literal"


# =============================================================================
# Lexeme Start Categories
# =============================================================================

class LexemeStart(Enum):
    """The categories a token can start with, in dispatch order."""

    COMMENT = auto()
    PREPROCESSOR = auto()
    QUOTED = auto()
    NUMBER = auto()
    IDENTIFIER = auto()
    OPERATOR = auto()
    DELIMITER = auto()
    UNKNOWN = auto()


def classify_start(
    char: str,
    next_char: str,
    tables: LexicalTables = DEFAULT_TABLES,
) -> LexemeStart:
    """
    Decide which sub-lexer handles a token starting with ``char``.

    Args:
        char: The first character of the lexeme
        next_char: The following character, or "" at end of source
        tables: Operator and delimiter tables to consult

    The order of the checks matters: ``{`` and ``(`` are delimiters too,
    but a brace or ``(*`` always opens a comment.
    """
    if char == "{" or (char == "(" and next_char == "*"):
        return LexemeStart.COMMENT
    if char == "#":
        return LexemeStart.PREPROCESSOR
    if char in ("'", '"'):
        return LexemeStart.QUOTED
    if char in DIGITS or char == "$":
        return LexemeStart.NUMBER
    if char in IDENT_START:
        return LexemeStart.IDENTIFIER
    if char in tables.operators:
        return LexemeStart.OPERATOR
    if char in tables.delimiters:
        return LexemeStart.DELIMITER
    return LexemeStart.UNKNOWN


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Pascal source code on demand.

    The scanner holds the source text and a cursor into it. Each call to
    ``next_token()`` skips whitespace, scans exactly one lexeme and moves
    the cursor past it. Once the source is exhausted every further call
    returns an END_OF_FILE token.

    Usage:
        scanner = Scanner(source_text, filename)
        tokens = list(scanner.tokenize())

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for token locations)
        tables: Keyword, operator and delimiter tables in use
    """

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        tables: LexicalTables = DEFAULT_TABLES,
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: The Pascal source code to tokenize
            filename: Name of the source file (for token locations)
            tables: Classification tables (defaults to the standard set)
        """
        self.source = source
        self.filename = filename
        self.tables = tables

        # Current position in source
        self._pos = 0

        # Offsets at which each line starts, for line/column lookup
        self._line_starts = [0]
        self._line_starts.extend(
            index + 1 for index, char in enumerate(source) if char == "\n"
        )

        self._handlers: dict[LexemeStart, Callable[[int], Token]] = {
            LexemeStart.COMMENT: self._scan_comment,
            LexemeStart.PREPROCESSOR: self._scan_preprocessor,
            LexemeStart.QUOTED: self._scan_quoted,
            LexemeStart.NUMBER: self._scan_number,
            LexemeStart.IDENTIFIER: self._scan_identifier,
            LexemeStart.OPERATOR: self._scan_operator,
            LexemeStart.DELIMITER: self._scan_delimiter,
            LexemeStart.UNKNOWN: self._scan_unknown,
        }

    @property
    def position(self) -> int:
        """Current cursor offset into the source."""
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._at_end()

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token; END_OF_FILE once the source is exhausted
        """
        self._skip_whitespace()

        if self._at_end():
            return self._make_token(TokenKind.END_OF_FILE, "", self._pos)

        start = self._pos
        category = classify_start(self._peek(), self._peek(1), self.tables)
        return self._handlers[category](start)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including the first END_OF_FILE.

        Yields:
            Token objects representing each lexical element
        """
        while True:
            token = self.next_token()
            yield token
            if token.is_eof:
                return

    def location_of(self, offset: int) -> SourceLocation:
        """Convert a source offset into a 1-indexed line/column location."""
        line_index = bisect_right(self._line_starts, offset) - 1
        column = offset - self._line_starts[line_index] + 1
        return SourceLocation(self.filename, line_index + 1, column)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self, count: int = 1) -> str:
        """Consume ``count`` characters and return them."""
        consumed = self.source[self._pos:self._pos + count]
        self._pos += len(consumed)
        return consumed

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._peek() in WHITESPACE:
            self._advance()

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _make_token(self, kind: TokenKind, text: str, start: int) -> Token:
        """Create a token located at source offset ``start``."""
        location = self.location_of(start)
        return Token(kind, text, location.line, location.column)

    def _lexeme(self, kind: TokenKind, start: int) -> Token:
        """Create a token whose text is everything consumed since ``start``."""
        return self._make_token(kind, self.source[start:self._pos], start)

    def _error(self, message: str, start: int) -> Token:
        token = self._make_token(TokenKind.ERROR, message, start)
        logger.debug(f"{self.location_of(start)}: {message}")
        return token

    # =========================================================================
    # Sub-lexers
    # =========================================================================

    def _scan_comment(self, start: int) -> Token:
        """
        Scan a ``{ ... }`` or ``(* ... *)`` comment, delimiters included.

        A comment left open at end of source is returned as far as it got;
        it is not reported as an error.
        """
        if self._peek() == "{":
            self._advance()
            while not self._at_end() and self._peek() != "}":
                self._advance()
            if not self._at_end():
                self._advance()  # consume }
        else:
            self._advance(2)  # consume (*
            while not self._at_end() and not (self._peek() == "*" and self._peek(1) == ")"):
                self._advance()
            if not self._at_end():
                self._advance(2)  # consume *)

        return self._lexeme(TokenKind.COMMENT, start)

    def _scan_preprocessor(self, start: int) -> Token:
        """Scan a ``#directive`` up to the next whitespace character."""
        while not self._at_end() and self._peek() not in WHITESPACE:
            self._advance()
        return self._lexeme(TokenKind.PREPROCESSOR, start)

    def _scan_quoted(self, start: int) -> Token:
        """
        Scan a quoted literal, quotes included.

        There are no escape sequences: the next matching quote always ends
        the literal. Single quotes make a CHAR, double quotes a STRING.
        """
        quote = self._advance()

        while not self._at_end() and self._peek() != quote:
            self._advance()

        if self._at_end():
            return self._error(UNTERMINATED_LITERAL, start)

        self._advance()  # consume closing quote
        kind = TokenKind.CHAR if quote == "'" else TokenKind.STRING
        return self._lexeme(kind, start)

    def _scan_number(self, start: int) -> Token:
        """
        Scan a numeric literal.

        Handles:
        - Hexadecimal: $1A
        - Decimal: 123
        - Float: 12.5 (any run of digits and dots containing a dot)
        """
        if self._peek() == "$":
            self._advance()
            while not self._at_end() and self._peek() in HEX_DIGITS:
                self._advance()

            digits = self.source[start + 1:self._pos]
            if not all(char in HEX_DIGITS for char in digits):
                return self._error(INVALID_HEX_NUMBER, start)
            return self._lexeme(TokenKind.HEX_NUMBER, start)

        while not self._at_end() and (self._peek() in DIGITS or self._peek() == "."):
            self._advance()

        text = self.source[start:self._pos]
        kind = TokenKind.FLOAT if "." in text else TokenKind.NUMBER
        return self._make_token(kind, text, start)

    def _scan_identifier(self, start: int) -> Token:
        """
        Scan an identifier or keyword.

        Keywords are distinguished by an exact, case-sensitive lookup in
        the keyword table.
        """
        while not self._at_end() and self._peek() in IDENT_CHARS:
            self._advance()

        name = self.source[start:self._pos]
        if name in self.tables.keywords:
            return self._make_token(TokenKind.KEYWORD, name, start)
        return self._make_token(TokenKind.IDENTIFIER, name, start)

    def _scan_operator(self, start: int) -> Token:
        # No multi-character operators: ":=" is two tokens
        return self._make_token(TokenKind.OPERATOR, self._advance(), start)

    def _scan_delimiter(self, start: int) -> Token:
        return self._make_token(TokenKind.DELIMITER, self._advance(), start)

    def _scan_unknown(self, start: int) -> Token:
        char = self._advance()
        return self._error(UNKNOWN_CHARACTER.format(char=char), start)


# =============================================================================
# Convenience Function
# =============================================================================

def tokenize_source(
    source: str,
    filename: str = "<input>",
    tables: LexicalTables = DEFAULT_TABLES,
) -> list[Token]:
    """
    Tokenize a complete source string.

    Args:
        source: Pascal source code
        filename: Name used in token locations
        tables: Classification tables

    Returns:
        All tokens, ending with a single END_OF_FILE token
    """
    return list(Scanner(source, filename, tables).tokenize())
