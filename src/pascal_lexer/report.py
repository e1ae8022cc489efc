"""
Token Report and Source Access
==============================

The scanner works on an in-memory string and produces tokens; this module
is the glue on either side of it:

- ``read_source()`` loads a source file verbatim
- ``render_report()`` / ``write_report()`` produce the token report
- ``collect_diagnostics()`` turns ERROR tokens into LexicalError objects

Report Format
-------------
One line per token, stopping before END_OF_FILE:

    Token: program, Type: KEYWORD
    Token: $1A, Type: HEX_NUMBER
    Token: Unknown character: @, Type: ERROR

Lexeme text is written exactly as scanned, so a comment spanning several
lines spans the same lines in the report.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Union

from pascal_lexer.errors import (
    LexicalError,
    ReportWriteError,
    SourceLocation,
    SourceReadError,
)
from pascal_lexer.scanner import (
    INVALID_HEX_NUMBER,
    UNKNOWN_CHARACTER,
    UNTERMINATED_LITERAL,
)
from pascal_lexer.tokens import Token

logger = logging.getLogger(__name__)

DEFAULT_REPORT_PATH = Path("output.txt")

# Hints attached to diagnostics, keyed by ERROR token text prefix
_HINTS = {
    UNKNOWN_CHARACTER.split(":")[0]: "remove the character or move it into a comment",
    INVALID_HEX_NUMBER: "hexadecimal literals may only use the digits 0-9 and A-F",
    UNTERMINATED_LITERAL: "add the matching closing quote to terminate the literal",
}


# =============================================================================
# Source Provider
# =============================================================================

def read_source(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read an entire source file into memory.

    Line endings are preserved as they are on disk.

    Raises:
        SourceReadError: If the file cannot be opened or decoded
    """
    path = Path(path)
    try:
        with open(path, encoding=encoding, newline="") as f:
            source = f.read()
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"not valid {encoding} text ({e.reason})") from e

    logger.debug(f"Read {len(source)} characters from {path}")
    return source


# =============================================================================
# Token Sink
# =============================================================================

def format_token_line(token: Token) -> str:
    """Format one token as a report line (without newline)."""
    return f"Token: {token.text}, Type: {token.kind.display_name}"


def _iter_report_lines(tokens: Iterable[Token]) -> Iterator[str]:
    """Yield report lines for ``tokens`` up to the first END_OF_FILE."""
    for token in tokens:
        if token.is_eof:
            return
        yield format_token_line(token)


def render_report(tokens: Iterable[Token]) -> str:
    """Render the full token report as a single string."""
    return "".join(f"{line}\n" for line in _iter_report_lines(tokens))


def write_report(
    tokens: Iterable[Token],
    path: Union[str, Path] = DEFAULT_REPORT_PATH,
    encoding: str = "utf-8",
) -> int:
    """
    Write the token report to ``path``.

    Returns:
        Number of token lines written

    Raises:
        ReportWriteError: If the destination cannot be opened for writing
    """
    path = Path(path)
    count = 0
    try:
        with open(path, "w", encoding=encoding) as f:
            for line in _iter_report_lines(tokens):
                f.write(f"{line}\n")
                count += 1
    except OSError as e:
        raise ReportWriteError(path, e.strerror or str(e)) from e

    logger.debug(f"Wrote {count} tokens to {path}")
    return count


# =============================================================================
# Diagnostics
# =============================================================================

def _hint_for(message: str) -> str | None:
    for prefix, hint in _HINTS.items():
        if message.startswith(prefix):
            return hint
    return None


def collect_diagnostics(
    tokens: Iterable[Token],
    source: str,
    filename: str = "<input>",
) -> list[LexicalError]:
    """
    Build a LexicalError for every ERROR token in ``tokens``.

    Args:
        tokens: Tokens produced by a Scanner over ``source``
        source: The scanned source text (for the offending line)
        filename: Name used in diagnostic locations

    Returns:
        One LexicalError per ERROR token, in source order
    """
    lines = source.split("\n")
    diagnostics = []

    for token in tokens:
        if not token.is_error:
            continue
        source_line = None
        if 0 < token.line <= len(lines):
            source_line = lines[token.line - 1].rstrip("\r")
        diagnostics.append(LexicalError(
            token.text,
            SourceLocation(filename, token.line, token.column),
            hint=_hint_for(token.text),
            source_line=source_line,
        ))

    if diagnostics:
        logger.warning(f"{len(diagnostics)} lexical error(s) in {filename}")
    return diagnostics
