#!/usr/bin/env python3
"""
CTF Wordlist Generator - context-aware password candidate lists

Main CLI entry point for the application.
"""

import sys
import asyncio
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.traceback import install as install_rich_traceback

from ctf_wordlist import __version__
from ctf_wordlist.core.config import get_config
from ctf_wordlist.core.logger import configure_logging, get_logger
from ctf_wordlist.exceptions import WordlistWriteError
from ctf_wordlist.output.writer import WordlistWriter
from ctf_wordlist.pipeline import build_wordlist

console = Console()


@click.command()
@click.version_option(version=__version__)
@click.argument('base_word')
@click.option('--output-dir', '-o', type=click.Path(file_okay=False),
              help='Directory the wordlist is written to')
@click.option('--offline', is_flag=True, help='Skip fetching context pages')
@click.option('--timeout', type=click.FloatRange(min=0, min_open=True), help='Context page request timeout in seconds')
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.option('--log-level',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
              default=None, help='Set logging level')
@click.option('--log-file', type=click.Path(dir_okay=False), help='Path to log file')
def cli(base_word, output_dir, offline, timeout, debug, log_level, log_file):
    """Generate a CTF wordlist for BASE_WORD.

    Use only against systems you own or are authorised to test.
    """
    config = get_config().model_copy(deep=True)
    if debug:
        config.debug = True
    if config.is_debug_mode():
        config.log_level = 'DEBUG'
    elif log_level:
        config.log_level = log_level
    if timeout is not None:
        config.fetch.timeout = timeout

    # Rich tracebacks only for the CLI process, not for library users
    install_rich_traceback(show_locals=config.is_debug_mode())
    configure_logging(
        level=config.log_level,
        log_file=Path(log_file) if log_file else None,
        rich_console=True,
        show_time=config.is_debug_mode(),
        show_path=config.is_debug_mode()
    )
    logger = get_logger()

    writer = WordlistWriter(output_dir or config.output.output_directory)

    console.print(f"[bold blue]Generating wordlist for: {escape(base_word)}[/bold blue]")

    try:
        result = asyncio.run(build_wordlist(
            base_word,
            config=config,
            gather_context=not offline,
            writer=writer
        ))
    except WordlistWriteError as e:
        logger.debug("Wordlist write failed", exc_info=True)
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)

    if not offline:
        console.print(f"Extracted {result.context.raw_count} raw words")
        console.print(f"Filtered to {len(result.context.words)} context words")
    console.print(f"Generated {len(result.candidates)} total combinations")
    console.print(f"[green]Wordlist saved to {escape(str(result.output_path))}[/green]", soft_wrap=True)


if __name__ == '__main__':
    cli()
