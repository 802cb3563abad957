import os
# Set service name immediately for OTel/Langfuse
os.environ.setdefault("OTEL_SERVICE_NAME", "readtext")

import sys

import click
from rich.console import Console
from rich.markup import escape
from readtext.config import Config
from readtext.core.errors import DecodeError, InvalidArgument
from readtext.core.interfaces import Mode, Request
from readtext.server.context import Context
from readtext.utils.logging import LOG_LEVELS, setup_logging
from readtext.utils.observability import Observability

err_console = Console(stderr=True)

def count_options(func):
    """Options shared by head and tail"""
    func = click.argument('file')(func)
    func = click.option('-q', '--quiet', is_flag=True, help="Suppress the summary line.")(func)
    func = click.option('-c', '--bytes', 'bytes_', type=click.IntRange(min=0), help="Read N bytes.")(func)
    func = click.option('-n', '--lines', type=click.IntRange(min=0), help="Read N lines.")(func)
    return func

def _read(mode: Mode, file, lines, bytes_, quiet):
    ctx = click.get_current_context()
    try:
        request = Request.from_options(file, mode, lines=lines, bytes_=bytes_, quiet=quiet)
    except InvalidArgument as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    service = Context.get_service()
    try:
        with Observability.trace_request(ctx.info_name, request):
            service.run(request, sys.stdout)
    except (OSError, DecodeError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        ctx.exit(1)
    finally:
        Observability.flush()

@click.group()
@click.version_option(package_name="readtext")
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
              help="Overrides READTEXT_LOG_LEVEL for this run.")
def cli(log_level):
    log_level = (log_level or Config.LOG_LEVEL).upper()
    if log_level not in LOG_LEVELS:
        raise click.UsageError(
            f"Invalid READTEXT_LOG_LEVEL {log_level!r}, expected one of {', '.join(LOG_LEVELS)}"
        )
    setup_logging(log_level)

@cli.command()
@count_options
def head(lines, bytes_, quiet, file):
    """Reads the first N lines or bytes of FILE"""
    _read(Mode.FROM_TOP, file, lines, bytes_, quiet)

@cli.command()
@count_options
def tail(lines, bytes_, quiet, file):
    """Reads the last N lines or bytes of FILE"""
    _read(Mode.FROM_BOTTOM, file, lines, bytes_, quiet)

def main():
    cli()

if __name__ == '__main__':
    main()
