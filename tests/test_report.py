"""
Tests for the Token Report and Source Access
============================================

These tests verify report formatting, file reading and writing, the
fatal I/O errors, and the conversion of ERROR tokens into diagnostics.
"""

import pytest

from pascal_lexer.errors import (
    LexicalError,
    PascalLexerError,
    ReportWriteError,
    SourceLocation,
    SourceReadError,
)
from pascal_lexer.report import (
    collect_diagnostics,
    format_token_line,
    read_source,
    render_report,
    write_report,
)
from pascal_lexer.scanner import (
    INVALID_HEX_NUMBER,
    UNKNOWN_CHARACTER,
    UNTERMINATED_LITERAL,
    tokenize_source,
)
from pascal_lexer.tokens import Token, TokenKind


# =============================================================================
# Report Formatting
# =============================================================================

class TestFormatting:
    """Tests for report line formatting."""

    def test_keyword_line(self):
        line = format_token_line(Token(TokenKind.KEYWORD, "program"))
        assert line == "Token: program, Type: KEYWORD"

    def test_hex_line(self):
        line = format_token_line(Token(TokenKind.HEX_NUMBER, "$1A"))
        assert line == "Token: $1A, Type: HEX_NUMBER"

    def test_error_line_carries_message(self):
        line = format_token_line(Token(TokenKind.ERROR, "Unknown character: @"))
        assert line == "Token: Unknown character: @, Type: ERROR"

    def test_render_stops_before_eof(self):
        report = render_report(tokenize_source("begin x end"))
        assert report == (
            "Token: begin, Type: KEYWORD\n"
            "Token: x, Type: IDENTIFIER\n"
            "Token: end, Type: KEYWORD\n"
        )

    def test_render_empty_source(self):
        assert render_report(tokenize_source("")) == ""

    def test_render_ignores_tokens_after_eof(self):
        tokens = [
            Token(TokenKind.NUMBER, "1"),
            Token(TokenKind.END_OF_FILE, ""),
            Token(TokenKind.NUMBER, "2"),
        ]
        assert render_report(tokens) == "Token: 1, Type: NUMBER\n"

    def test_multi_line_comment_kept_verbatim(self):
        report = render_report(tokenize_source("{ a\nb }"))
        assert report == "Token: { a\nb }, Type: COMMENT\n"


# =============================================================================
# File Access
# =============================================================================

class TestFileAccess:
    """Tests for read_source() and write_report()."""

    def test_read_source(self, tmp_path):
        path = tmp_path / "demo.pas"
        path.write_text("program demo;\n", encoding="utf-8")
        assert read_source(path) == "program demo;\n"

    def test_read_source_keeps_line_endings(self, tmp_path):
        path = tmp_path / "crlf.pas"
        path.write_bytes(b"begin\r\nend.\r\n")
        assert read_source(path) == "begin\r\nend.\r\n"

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(SourceReadError, match="unable to open the source file"):
            read_source(tmp_path / "missing.pas")

    def test_read_invalid_encoding(self, tmp_path):
        path = tmp_path / "latin1.pas"
        path.write_bytes(b"x := '\xe9';")
        with pytest.raises(SourceReadError, match="not valid utf-8"):
            read_source(path)
        assert read_source(path, encoding="latin-1") == "x := '\xe9';"

    def test_write_report(self, tmp_path):
        path = tmp_path / "output.txt"
        count = write_report(tokenize_source("x := 1;"), path)
        assert count == 5
        assert path.read_text(encoding="utf-8").splitlines() == [
            "Token: x, Type: IDENTIFIER",
            "Token: :, Type: OPERATOR",
            "Token: =, Type: OPERATOR",
            "Token: 1, Type: NUMBER",
            "Token: ;, Type: DELIMITER",
        ]

    def test_write_report_unwritable(self, tmp_path):
        path = tmp_path / "no_such_dir" / "output.txt"
        with pytest.raises(ReportWriteError, match="unable to open file for writing"):
            write_report(tokenize_source("x"), path)

    def test_io_errors_share_base_class(self, tmp_path):
        with pytest.raises(PascalLexerError):
            read_source(tmp_path / "missing.pas")


# =============================================================================
# Diagnostics
# =============================================================================

class TestDiagnostics:
    """Tests for collect_diagnostics() and LexicalError formatting."""

    def test_no_errors(self):
        source = "begin end."
        assert collect_diagnostics(tokenize_source(source), source) == []

    def test_errors_in_source_order(self):
        source = "x := @;\n'abc"
        diagnostics = collect_diagnostics(tokenize_source(source), source, "prog.pas")
        assert [d.message for d in diagnostics] == [
            "Unknown character: @",
            "Unterminated string or character literal",
        ]
        assert diagnostics[0].location == SourceLocation("prog.pas", 1, 6)
        assert diagnostics[1].location == SourceLocation("prog.pas", 2, 1)

    def test_diagnostic_format(self):
        source = "x := @;"
        (diagnostic,) = collect_diagnostics(tokenize_source(source), source, "prog.pas")
        assert isinstance(diagnostic, LexicalError)
        assert str(diagnostic).splitlines() == [
            "prog.pas:1:6: error: Unknown character: @",
            "    x := @;",
            "         ^",
            "hint: remove the character or move it into a comment",
        ]

    def test_source_line_strips_carriage_return(self):
        source = "@\r\nx"
        (diagnostic,) = collect_diagnostics(tokenize_source(source), source)
        assert diagnostic.source_line == "@"

    def test_unterminated_literal_hint(self):
        source = "'abc"
        (diagnostic,) = collect_diagnostics(tokenize_source(source), source)
        assert "closing quote" in diagnostic.hint

    def test_error_without_location(self):
        assert str(LexicalError("bad input")) == "error: bad input"

    @pytest.mark.parametrize("message", [
        UNKNOWN_CHARACTER.format(char="~"),
        INVALID_HEX_NUMBER,
        UNTERMINATED_LITERAL,
    ])
    def test_every_scanner_message_has_hint(self, message):
        tokens = [Token(TokenKind.ERROR, message, 1, 1)]
        (diagnostic,) = collect_diagnostics(tokens, "x")
        assert diagnostic.hint
