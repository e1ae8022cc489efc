"""
Pascal Lexer Error Hierarchy
============================

This module defines the exception hierarchy for the Pascal lexer.
All exceptions inherit from PascalLexerError, allowing callers to catch
all lexer-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
PascalLexerError (base)
├── LexicalError - diagnostic built from an ERROR token
└── SourceIOError - failures at the file boundary
    ├── SourceReadError - source file cannot be read
    └── ReportWriteError - token report cannot be written

Design Philosophy
-----------------
The scanner itself never raises for malformed input: bad lexemes become
ERROR tokens in the stream. LexicalError exists so that callers (the CLI
in particular) can turn those tokens into readable diagnostics after the
scan has finished. Only the I/O boundary raises and stops processing.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


# =============================================================================
# Base Exception Class
# =============================================================================

class PascalLexerError(Exception):
    """
    Base exception for all Pascal lexer errors.

        try:
            source = read_source("program.pas")
        except PascalLexerError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Diagnostics
# =============================================================================

class LexicalError(PascalLexerError):
    """
    A lexical problem found while scanning.

    The scanner reports problems inline as ERROR tokens; this class wraps
    one of them with its location and the surrounding source line.

    Attributes:
        message: The error description (the ERROR token's text)
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            hello.pas:3:9: error: Unknown character: @
                x := @y;
                     ^
            hint: remove the character or place it inside a comment
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# I/O Boundary Exceptions
# =============================================================================

class SourceIOError(PascalLexerError):
    """
    Base exception for file access failures.

    Attributes:
        path: The file that could not be accessed
        reason: The underlying operating system message
    """

    action = "access"

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"unable to {self.action} '{self.path}': {reason}")


class SourceReadError(SourceIOError):
    """The Pascal source file could not be opened or decoded."""
    action = "open the source file"


class ReportWriteError(SourceIOError):
    """The token report destination could not be opened for writing."""
    action = "open file for writing"
