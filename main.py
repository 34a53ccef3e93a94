#!/usr/bin/env python3
"""CDN Scan - Entry point"""

import argparse
import logging
import sys

from rich.console import Console

from cdnscan import (
    VERSION, LogScanner, PathTree, configure_logging, determine_output_name,
    print_summary, write_report,
)
from cdnscan.patterns import DEFAULT_OUTPUT_DIR, ORDERINGS

logger = logging.getLogger("cdnscan")
console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="CDN Scan - find static asset paths worth moving to a CDN",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfiles", nargs="+", metavar="logfile", help="Apache access log(s) to scan")
    parser.add_argument("-d", "--output-dir", default=DEFAULT_OUTPUT_DIR,
                        help=f"Directory for CSV reports (default: {DEFAULT_OUTPUT_DIR})")
    parser.add_argument("--order", choices=ORDERINGS, default="insertion",
                        help="Ordering of sibling paths in the report")
    parser.add_argument("--prune", action="store_true",
                        help="Hide single-hit files and single-child directories")
    parser.add_argument("-q", "--quiet", action="store_true", help="No progress or summary output")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-v shows skipped lines)")
    parser.add_argument("--version", action="version", version=f"CDNScan v{VERSION}")
    return parser


def process_file(logfile: str, args, scanner: LogScanner):
    logger.info("Starting processing of file %s", logfile)
    output_path = determine_output_name(logfile, args.output_dir)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Create the report before scanning so a locked output fails fast
    with open(output_path, 'w', newline='', encoding='utf-8') as out:
        tree = PathTree()
        stats = scanner.scan_file(logfile, tree)
        rows = write_report(tree, out, order=args.order, prune=args.prune)

    logger.info("Wrote %d rows to %s", rows, output_path)
    if not args.quiet:
        print_summary(logfile, output_path, stats, tree, console)
    return output_path


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(-1 if args.quiet else args.verbose, console)

    scanner = LogScanner(console=None if args.quiet else console)

    try:
        for logfile in args.logfiles:
            process_file(logfile, args, scanner)
    except OSError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
