"""Shared test fixtures for all test modules."""

from pathlib import Path

import pytest

LOGO_LINE = (
    '203.0.113.5 - - [10/Oct/2020:13:55:36 -0700] '
    '"GET /assets/img/logo.png HTTP/1.1" 200 5120 "-" "curl/7.64"'
)


@pytest.fixture
def logo_line() -> str:
    """The canonical static asset request line."""
    return LOGO_LINE


@pytest.fixture
def make_line():
    """Factory fixture building combined-format log lines."""

    def _line(
        path: str = "/assets/app.js",
        status: int | str = 200,
        size: int | str = 100,
        method: str = "GET",
        timestamp: str = "10/Oct/2020:13:55:36 -0700",
    ) -> str:
        return (
            f'198.51.100.7 - - [{timestamp}] "{method} {path} HTTP/1.1" '
            f'{status} {size} "https://example.com/" "Mozilla/5.0 (X11; Linux x86_64)"'
        )

    return _line


@pytest.fixture
def write_log(tmp_path: Path):
    """Factory fixture writing lines to a log file in a temp directory."""

    def _write(lines: list[str], name: str = "access.log") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
