"""CDN Scan - Access log line parser and static asset classifier"""

from datetime import datetime
from typing import Union

from .models import LogRecord, UnparsableLine, NO_TIMESTAMP
from .patterns import APACHE_LOG_PATTERN, TIMESTAMP_FORMAT, STATIC_EXTENSIONS


def parse_timestamp(value: str) -> datetime:
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        return NO_TIMESTAMP


def parse_int(value: str) -> int:
    """Decimal integer field, 0 for '-' or anything else unparsable"""
    return int(value) if value.isdecimal() else 0


class LineParser:
    """Turns access log lines into LogRecords"""

    def __init__(self, pattern=APACHE_LOG_PATTERN):
        self.pattern = pattern

    def parse(self, line: str, line_num: int = 0) -> Union[LogRecord, UnparsableLine]:
        line = line.rstrip("\r\n")
        if not line.strip():
            return UnparsableLine(line_number=line_num, raw=line, reason="blank line")

        match = self.pattern.match(line)
        if not match:
            return UnparsableLine(line_number=line_num, raw=line, reason="no match for log grammar")

        groups = match.groupdict(default="")
        return LogRecord(
            remote_host=groups['host'],
            timestamp=parse_timestamp(groups['timestamp']),
            method=groups['method'],
            protocol=groups['protocol'],
            request_path=groups['url'] or groups['alt_url'],
            status_code=parse_int(groups['status']),
            response_bytes=parse_int(groups['bytes']),
            referer=groups['referer'],
            user_agent=groups['user_agent'],
            line_number=line_num,
            raw=line,
        )


def is_static(record: LogRecord) -> bool:
    """True when the requested resource has a CDN-eligible file extension"""
    segments = [s for s in record.path.split("/") if s]
    if not segments:
        return False

    resource = segments[-1]
    if "." not in resource:
        return False

    return resource.rsplit(".", 1)[1] in STATIC_EXTENSIONS
