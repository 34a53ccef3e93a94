"""CDN Scan - Report output"""

import csv
import logging
from itertools import islice
from pathlib import Path
from typing import Optional, TextIO

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .models import LogRecord, ScanStats
from .parser import LineParser
from .patterns import (
    FALLBACK_OUTPUT_NAME, NAME_SAMPLE_LINES, OUTPUT_NAME_FORMAT, REPORT_HEADER,
)
from .tree import PathTree


def configure_logging(verbosity: int = 0, console: Optional[Console] = None):
    if verbosity > 0:
        level = logging.DEBUG
    elif verbosity < 0:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def determine_output_name(log_path, output_dir) -> Path:
    """Name the report after the date of the first parsable line in the log.

    Only the first few lines are sampled; if none of them carries a usable
    timestamp the fixed fallback name is used.
    """
    parser = LineParser()
    with open(log_path, 'r', encoding='utf-8', errors='ignore') as f:
        for i, line in enumerate(islice(f, NAME_SAMPLE_LINES), 1):
            record = parser.parse(line, i)
            if isinstance(record, LogRecord) and record.has_timestamp:
                return Path(output_dir) / record.timestamp.strftime(OUTPUT_NAME_FORMAT)
    return Path(output_dir) / FALLBACK_OUTPUT_NAME


def write_report(tree: PathTree, handle: TextIO, order: str = 'insertion', prune: bool = False) -> int:
    """Write the CSV report, returns the number of data rows"""
    writer = csv.writer(handle)
    writer.writerow(REPORT_HEADER)
    rows = 0
    for path, node in tree.walk(order=order, prune=prune):
        writer.writerow([node.total_bytes, path, node.name, node.total_hits])
        rows += 1
    return rows


def print_summary(logfile, output_path, stats: ScanStats, tree: PathTree, console: Console, top: int = 10):
    console.print(Panel.fit(
        f"Lines Read: [cyan]{stats.lines:,}[/]\n"
        f"Skipped: [{'yellow' if stats.skipped else 'green'}]{stats.skipped:,}[/]\n"
        f"Static Requests: [cyan]{stats.static_hits:,}[/]\n"
        f"Static Bytes: [cyan]{stats.static_bytes:,}[/]\n"
        f"Report: [green]{output_path}[/]",
        title=str(logfile),
        border_style="cyan"
    ))

    if not tree.root.children:
        return

    table = Table(box=box.ROUNDED, title="Top Paths (by size)")
    table.add_column("Path", style="cyan")
    table.add_column("Size", style="white", justify="right")
    table.add_column("Hits", style="white", justify="right")
    children = sorted(tree.root.children.values(), key=lambda c: c.total_bytes, reverse=True)
    for child in children[:top]:
        table.add_row(f"/{child.name}", f"{child.total_bytes:,}", f"{child.total_hits:,}")
    console.print(table)
