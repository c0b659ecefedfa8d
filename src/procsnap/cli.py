"""
Command-line interface for procsnap.

Collects one snapshot and prints it as a table or as JSON.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from procsnap import __version__
from procsnap.config import Config
from procsnap.core import FatalProbeError, SnapshotCollector
from procsnap.render import render_table

# Tables are laid out at this width so long paths stay on one row, as when piped
REPORT_WIDTH = 4096

# The report owns stdout; logs and errors go to stderr
console = Console(highlight=False, width=REPORT_WIDTH)
err_console = Console(stderr=True)


def setup_logging(level: str, log_file: str | None = None) -> None:
    """Configure logging with rich handler."""
    handlers: list[logging.Handler] = [RichHandler(console=err_console, show_path=False)]
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )


@click.command()
@click.version_option(version=__version__, prog_name="procsnap")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output in JSON format",
)
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "-V",
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
def main(json_output: bool, config: Path | None, verbose: bool) -> None:
    """
    procsnap - Process and host resource snapshot for Linux.

    Reports open descriptors, memory, CPU, mounts and cgroup v1 limits
    of the current process and host.
    """
    cfg = Config.load(config)

    log_level = "DEBUG" if verbose else cfg.log_level
    setup_logging(log_level, cfg.log_file)

    try:
        snapshot = SnapshotCollector(cfg).collect()
    except FatalProbeError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/]")
        return

    if json_output:
        try:
            output = snapshot.to_json()
        except (TypeError, ValueError) as e:
            err_console.print(f"[red]JSON marshal error: {escape(str(e))}[/]")
            sys.exit(1)
        click.echo(output)
    else:
        render_table(snapshot, console)


if __name__ == "__main__":
    main()
