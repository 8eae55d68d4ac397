"""
Command line shell for pylox.

    pylox            interactive prompt, one line at a time
    pylox SCRIPT     run a file; exit status 65 on any Lox error
    pylox A B ...    print usage; exit status 64
"""

import logging
import sys

import click

from .runner import RunResult, run

EXIT_USAGE = 64
EXIT_DATA_ERROR = 65


def _echo_result(result: RunResult):
    for diagnostic in result.diagnostics:
        click.echo(diagnostic)
    if result.output is not None:
        click.echo(result.output)


def run_file(path: str) -> int:
    """Run a script file once and return the process exit status."""
    try:
        with open(path, "rb") as f:
            source = f.read()
    except OSError as e:
        raise click.FileError(path, hint=e.strerror) from e

    result = run(source, path)
    _echo_result(result)
    return EXIT_DATA_ERROR if result.had_error else 0


def run_prompt():
    """Read-eval-print loop; every line is scanned and parsed on its own."""
    while True:
        click.echo("> ", nl=False)
        line = sys.stdin.readline()
        if not line:
            break
        # The newline ends the entry; it is not part of the source
        _echo_result(run(line.rstrip("\r\n")))


@click.command()
@click.argument("scripts", nargs=-1)
@click.option("-v", "--verbose", is_flag=True, help="Log scanner and parser activity, with error help, to stderr.")
@click.pass_context
def main(ctx: click.Context, scripts, verbose: bool):
    """Scan and parse Lox source, printing the expression tree."""
    if verbose:
        logging.basicConfig(format="%(name)s: %(message)s")
        logging.getLogger("pylox").setLevel(logging.DEBUG)

    if len(scripts) > 1:
        click.echo("Usage: pylox [script]")
        ctx.exit(EXIT_USAGE)
    elif len(scripts) == 1:
        ctx.exit(run_file(scripts[0]))
    else:
        run_prompt()
