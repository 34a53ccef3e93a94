"""CDN Scan package"""

from .patterns import VERSION, STATIC_EXTENSIONS
from .models import LogRecord, UnparsableLine, PathNode, ScanStats
from .parser import LineParser, is_static
from .tree import PathTree
from .analyzer import LogScanner
from .output import configure_logging, determine_output_name, write_report, print_summary

__all__ = [
    'VERSION', 'LogRecord', 'UnparsableLine', 'PathNode', 'ScanStats', 'LineParser',
    'is_static', 'PathTree', 'LogScanner', 'configure_logging', 'determine_output_name',
    'write_report', 'print_summary',
]
