"""CDN Scan - Log scanning engine"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TransferSpeedColumn

from .models import LogRecord, ScanStats, UnparsableLine
from .parser import LineParser, is_static
from .patterns import PROGRESS_INTERVAL
from .tree import PathTree

logger = logging.getLogger(__name__)


class LogScanner:
    """Feeds successful static asset requests from a log into a PathTree"""

    def __init__(self, parser: Optional[LineParser] = None, console: Optional[Console] = None):
        self.parser = parser or LineParser()
        self.console = console

    def scan_lines(self, lines: Iterable[str], tree: PathTree) -> ScanStats:
        stats = ScanStats()
        for i, line in enumerate(lines, 1):
            self._process_line(line, i, tree, stats)
        return stats

    def scan_file(self, filepath, tree: PathTree) -> ScanStats:
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Log file not found: {filepath}")

        stats = ScanStats()
        with open(path, 'rb') as f:
            if self.console:
                with Progress(
                    SpinnerColumn(),
                    TextColumn("[progress.description]{task.description}"),
                    BarColumn(),
                    TransferSpeedColumn(),
                    console=self.console,
                    transient=True,
                ) as progress:
                    task = progress.add_task(f"Scanning {path.name}...", total=path.stat().st_size)
                    for i, raw in enumerate(f, 1):
                        hit = self._process_line(_decode(raw), i, tree, stats)
                        progress.update(task, advance=len(raw))
                        if hit and stats.static_hits % PROGRESS_INTERVAL == 0:
                            progress.update(
                                task,
                                description=f"Scanning {path.name} ({stats.static_hits:,} assets)...",
                            )
            else:
                for i, raw in enumerate(f, 1):
                    self._process_line(_decode(raw), i, tree, stats)

        if stats.skipped:
            logger.warning("%s: skipped %d unparsable line(s) of %d", path, stats.skipped, stats.lines)
        return stats

    def _process_line(self, line: str, line_num: int, tree: PathTree, stats: ScanStats) -> bool:
        stats.lines += 1
        result = self.parser.parse(line, line_num)
        if isinstance(result, UnparsableLine):
            stats.skipped += 1
            logger.debug("line %d skipped (%s): %.80s", result.line_number, result.reason, result.raw)
            return False

        stats.parsed += 1
        if not self.is_candidate(result):
            return False

        tree.insert(result.path.split("/"), result.response_bytes)
        stats.static_hits += 1
        stats.static_bytes += result.response_bytes
        return True

    @staticmethod
    def is_candidate(record: LogRecord) -> bool:
        return record.status_code == 200 and is_static(record)


def _decode(raw: bytes) -> str:
    return raw.decode('utf-8', errors='ignore')
