"""CDN Scan - Data models"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict

# Stands in for timestamps that could not be parsed
NO_TIMESTAMP = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class LogRecord:
    """Parsed access log line"""
    remote_host: str
    timestamp: datetime
    method: str
    protocol: str
    request_path: str
    status_code: int
    response_bytes: int
    referer: str
    user_agent: str
    line_number: int = 0
    raw: str = ""

    @property
    def has_timestamp(self) -> bool:
        return self.timestamp != NO_TIMESTAMP

    @property
    def path(self) -> str:
        """Request path without query string or fragment"""
        return self.request_path.split("?", 1)[0].split("#", 1)[0]


@dataclass
class UnparsableLine:
    """Line that did not match the log grammar"""
    line_number: int
    raw: str
    reason: str


@dataclass
class PathNode:
    """One URL path segment in the aggregation tree"""
    name: str
    children: Dict[str, "PathNode"] = field(default_factory=dict)
    total_bytes: int = 0
    last_bytes: int = 0
    total_hits: int = 0

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def record(self, byte_count: int):
        self.total_bytes += byte_count
        self.last_bytes = byte_count
        self.total_hits += 1


@dataclass
class ScanStats:
    """Counters collected while scanning one log file"""
    lines: int = 0
    parsed: int = 0
    skipped: int = 0
    static_hits: int = 0
    static_bytes: int = 0
