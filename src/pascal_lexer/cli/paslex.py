"""
paslex - Pascal Lexer Command-Line Interface
============================================

This module implements the command-line interface for the Pascal lexer.
It reads a source file, tokenizes it and writes one report line per token.

Usage Examples
--------------
Basic tokenizing (writes output.txt):
    $ paslex program.pas

With output file:
    $ paslex program.pas -o tokens.txt

Print the report instead of writing a file:
    $ paslex program.pas --stdout

Treat extra words as keywords:
    $ paslex -k procedure -k function program.pas

Fail when the source has lexical errors:
    $ paslex --strict program.pas
"""

import codecs
import logging
import sys
from pathlib import Path

import click

from pascal_lexer import __version__
from pascal_lexer.cli.errors import ExitCode, handle_cli_exception
from pascal_lexer.report import (
    DEFAULT_REPORT_PATH,
    collect_diagnostics,
    read_source,
    render_report,
    write_report,
)
from pascal_lexer.scanner import tokenize_source
from pascal_lexer.tokens import DEFAULT_TABLES


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def resolve_encoding(name: str) -> str:
    """
    Return the canonical codec name for a --encoding value.

    Raises:
        click.BadParameter: If Python has no codec by that name
    """
    try:
        return codecs.lookup(name).name
    except LookupError:
        raise click.BadParameter(
            f"unknown encoding '{name}'",
            param_hint="'--encoding'",
        )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=str(DEFAULT_REPORT_PATH),
    show_default=True,
    help="Token report file",
)
@click.option(
    "--stdout", "to_stdout",
    is_flag=True,
    help="Print the token report instead of writing a file",
)
@click.option(
    "-k", "--keyword",
    "keywords",
    multiple=True,
    metavar="WORD",
    help="Treat WORD as a reserved keyword (can be repeated)",
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Source file encoding",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with an error status if the source has lexical errors",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="paslex")
def main(
    input_file: Path,
    output: Path,
    to_stdout: bool,
    keywords: tuple[str, ...],
    encoding: str,
    strict: bool,
    verbose: bool,
) -> None:
    """
    Tokenize a Pascal source file.

    INPUT_FILE is the Pascal source file to scan.

    Each token is reported on its own line as
    "Token: <text>, Type: <TYPE>". Lexical errors appear in the report
    as ERROR tokens and do not stop the scan.

    \b
    Examples:
        paslex hello.pas                # Writes output.txt
        paslex hello.pas -o tokens.txt  # Specify report file
        paslex hello.pas --stdout       # Print the report
        paslex --strict hello.pas       # Fail on lexical errors
    """
    setup_logging(verbose)

    tables = DEFAULT_TABLES.with_keywords(*keywords) if keywords else DEFAULT_TABLES

    try:
        if verbose:
            click.echo(f"Scanning {input_file}...", err=to_stdout)

        source = read_source(input_file, encoding=resolve_encoding(encoding))
        tokens = tokenize_source(source, str(input_file), tables)

        if to_stdout:
            click.echo(render_report(tokens), nl=False)
        else:
            count = write_report(tokens, output)
            if verbose:
                click.echo(f"Wrote {count} tokens to {output}")

        diagnostics = collect_diagnostics(tokens, source, str(input_file))

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if verbose or strict:
        for diagnostic in diagnostics:
            click.echo(str(diagnostic), err=True)

    if strict and diagnostics:
        click.echo(f"{len(diagnostics)} lexical error(s) found", err=True)
        sys.exit(ExitCode.LEXICAL_ERROR)

    if not to_stdout:
        click.echo(f"Lexical analysis completed. Results saved in {output}")


if __name__ == "__main__":
    main()
