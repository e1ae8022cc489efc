"""
Pascal Lexer Command-Line Interface
===================================

This package provides the command-line tool for the Pascal lexer:

- **paslex**: tokenize a source file and write the token report

The tool is implemented as a Click-based CLI application.
"""

__all__ = ["paslex"]
