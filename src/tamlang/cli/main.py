# src/tamlang/cli/main.py
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..config import Config, ConfigError, PROJECT_FILE, configure_logging
from ..error_reporter import print_error
from ..lexer import open_lexer
from ..runner import check_files

console = Console()
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="tamlang")
def cli():
    """tamlang - syntax and declaration checker for the tam teaching language"""
    pass


@cli.command()
@click.argument('files', nargs=-1, type=click.Path(dir_okay=False))
@click.option('--config', 'config_path', default=PROJECT_FILE, show_default=True,
              type=click.Path(dir_okay=False), help="Project file with default settings.")
@click.option('--debug', is_flag=True, help="Log every consumed token.")
def check(files, config_path, debug):
    """Check tamlang source files (defaults to the project's file list)"""
    try:
        cfg = Config.load(config_path)
    except ConfigError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(2)
    if debug:
        cfg.enable_debug_logs = True
    configure_logging(cfg)

    paths = list(files) or cfg.default_files
    failed = 0
    for report in check_files(paths, encoding=cfg.encoding):
        console.rule(f"[bold]{escape(report.path)}[/bold]")
        if report.io_error is not None:
            failed += 1
            console.print(f"❌ [bold red]Cannot read[/bold red] {escape(report.path)}: {escape(report.io_error)}")
        elif report.ok:
            names = ", ".join(report.declared) or "none"
            console.print("✅ [bold green]Parsing completed successfully![/bold green]")
            console.print(f"   Variables declared: [cyan]{names}[/cyan]")
        else:
            failed += 1
            print_error(report.error, console=console, reporter=report.reporter)

    if failed:
        console.print(f"\n[bold red]{failed} of {len(paths)} file(s) failed[/bold red]")
        sys.exit(1)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--encoding', default="utf-8", show_default=True)
def tokens(file, encoding):
    """Show tokens of a tamlang file"""
    table = Table(title="Tokens")
    table.add_column("Kind", style="cyan")
    table.add_column("Lexeme", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    try:
        with open_lexer(file, encoding=encoding) as lexer:
            for token in lexer:
                table.add_row(token.kind, escape(token.lexeme), str(token.line), str(token.column))
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    console.print(table)


if __name__ == "__main__":
    cli()
