"""
Main entry point for SyMacros.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import version
from .cmd import run_expand, run_list_macros


logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.command()
@click.argument('request_files', nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Optional JSON configuration file'
)
@click.option(
    '--format', '-f', 'output_format',
    type=click.Choice(['text', 'json']),
    default='text',
    help='Report format'
)
@click.option(
    '--output', '-o',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Output file for the report (default: stdout)'
)
@click.option(
    '--jobs', '-j',
    type=click.IntRange(min=1),
    help='Number of requests expanded in parallel'
)
@click.option(
    '--verbose', '-v',
    is_flag=True,
    help='Enable verbose logging'
)
def expand(
    request_files: tuple,
    config_path: Optional[Path],
    output_format: str,
    output: Optional[Path],
    jobs: Optional[int],
    verbose: bool
) -> None:
    """
    Expand macro usages described by JSON request files.

    Each file holds one expansion request or a list of them, as produced by
    the host's parser. Generated code and diagnostics are printed; the exit
    status is 1 when any error was reported.
    """
    _configure_logging(verbose)

    try:
        exit_code = run_expand(list(request_files), config_path, output_format, output, jobs)
    except Exception as e:
        logger.error(f"Expansion failed with error: {e}", exc_info=True)
        exit_code = 1
    sys.exit(exit_code)


@click.command()
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Optional JSON configuration file'
)
@click.option('--format', '-f', 'output_format', type=click.Choice(['text', 'json']), default='text')
def macros(config_path: Optional[Path], output_format: str) -> None:
    """List the registered macros."""
    _configure_logging(False)
    try:
        sys.exit(run_list_macros(output_format, config_path))
    except (OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=version())
def cli():
    """SyMacros - Swift macro expansion engine."""
    pass


cli.add_command(expand, name='expand')
cli.add_command(macros, name='macros')


if __name__ == "__main__":
    cli()
