"""CDN Scan - Constants and patterns"""

import re

VERSION = "1.0.0"

# Quoted field body, allowing escaped quotes
_QUOTED = r'(?:[^"\\]|\\.)'

# Apache combined log format. The request line may omit the protocol token,
# in which case the URL lands in the alt_url slot instead of url.
APACHE_LOG_PATTERN = re.compile(
    r'^(?P<host>\S+)\s+'
    r'\S+\s+'                                      # remote logname
    r'(?:\S+\s+)+?'                                # remote user
    r'\[(?P<timestamp>[^\]]+)\]\s+'
    r'"(?P<method>[^\s"]*)'
    r'(?:\s+(?:'
    r'(?P<url>' + _QUOTED + r'+?)\s+(?P<protocol>[^\s"]+)'
    r'|(?P<alt_url>(?:[^"\s\\]|\\.)+)'
    r'))?\s*"\s+'
    r'(?P<status>\S+)\s+'
    r'(?P<bytes>\S+)\s+'
    r'"(?P<referer>' + _QUOTED + r'*)"\s+'
    r'"(?P<user_agent>.*)"$'
)

TIMESTAMP_FORMAT = "%d/%b/%Y:%H:%M:%S %z"

# On our sites .html is a document, not a CDN asset
STATIC_EXTENSIONS = frozenset({"js", "jpg", "png", "gif", "css", "json"})

REPORT_HEADER = ["Size", "Path", "File", "Hits"]

DEFAULT_OUTPUT_DIR = "analysis"
OUTPUT_NAME_FORMAT = "%Y%m%d.log.csv"
FALLBACK_OUTPUT_NAME = "errorlog.csv"
NAME_SAMPLE_LINES = 5

ORDERINGS = ("insertion", "size", "hits")

# Refresh the progress description every N static hits
PROGRESS_INTERVAL = 4096
