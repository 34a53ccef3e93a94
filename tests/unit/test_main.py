"""End-to-end tests for the command line entry point."""

import csv
from pathlib import Path

import pytest

import main


def read_rows(path: Path) -> list[list[str]]:
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.reader(f))


class TestMain:
    """Tests for main.main()."""

    def test_writes_dated_report(self, tmp_path: Path, write_log, logo_line: str, make_line) -> None:
        log = write_log([logo_line, "corrupt", make_line(path="/css/a.css", status=404)])
        out_dir = tmp_path / "reports"
        main.main([str(log), "-d", str(out_dir), "-q"])

        rows = read_rows(out_dir / "20201010.log.csv")
        assert rows[0] == ["Size", "Path", "File", "Hits"]
        assert ["5120", "/assets/img/logo.png", "logo.png", "1"] in rows
        assert not any("a.css" in row[1] for row in rows)

    def test_each_file_gets_its_own_tree(self, tmp_path: Path, write_log, make_line) -> None:
        first = write_log([make_line(size=10, timestamp="01/Jan/2022:00:00:00 +0000")], "one.log")
        second = write_log([make_line(size=20, timestamp="02/Jan/2022:00:00:00 +0000")], "two.log")
        main.main([str(first), str(second), "-d", str(tmp_path), "-q"])

        assert read_rows(tmp_path / "20220101.log.csv")[1][0] == "10"
        assert read_rows(tmp_path / "20220102.log.csv")[1][0] == "20"

    def test_summary_output(self, tmp_path: Path, write_log, logo_line: str) -> None:
        log = write_log([logo_line])
        main.main([str(log), "-d", str(tmp_path), "--order", "size", "--prune"])
        assert (tmp_path / "20201010.log.csv").exists()

    def test_missing_arguments_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main.main([])
        assert exc.value.code == 2

    def test_missing_input_is_fatal(self, tmp_path: Path, write_log, make_line) -> None:
        """A missing file aborts the run, later files are not processed."""
        later = write_log([make_line()], "later.log")
        with pytest.raises(SystemExit) as exc:
            main.main([str(tmp_path / "nope.log"), str(later), "-d", str(tmp_path / "out"), "-q"])
        assert exc.value.code == 1
        assert not (tmp_path / "out").exists()

    def test_uncreatable_output_is_fatal(self, tmp_path: Path, write_log, logo_line: str) -> None:
        log = write_log([logo_line])
        blocker = tmp_path / "file-not-dir"
        blocker.write_text("x")
        with pytest.raises(SystemExit) as exc:
            main.main([str(log), "-d", str(blocker), "-q"])
        assert exc.value.code == 1
