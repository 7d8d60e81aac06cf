"""
Color-coded console output and logger setup for the fundamentals CLI.

Uses colorama for cross-platform terminal color support. Library modules
only use ``logging.getLogger(__name__)``; these helpers are for scripts.
"""

import datetime
import logging
import os
import sys
from typing import Dict, List, Tuple

from colorama import Fore, Style, init

from utils.session import redact_api_key

# Initialize colorama (auto-reset after each print)
init(autoreset=True)

LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logs")
LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"


class C:
    """Color shortcuts for CLI output."""
    HEADER = Fore.CYAN + Style.BRIGHT
    STEP = Fore.BLUE + Style.BRIGHT
    OK = Fore.GREEN + Style.BRIGHT
    WARN = Fore.YELLOW + Style.BRIGHT
    ERR = Fore.RED + Style.BRIGHT
    DIM = Style.DIM
    TICKER = Fore.MAGENTA + Style.BRIGHT
    VALUE = Fore.GREEN
    RESET = Style.RESET_ALL


def _ts() -> str:
    return datetime.datetime.now().strftime("%H:%M:%S")


# ---------------------------------------------------------------------------
# Console helpers
# ---------------------------------------------------------------------------

def header(msg: str) -> None:
    """Print a bold section header."""
    print(f"\n{C.HEADER}{'=' * 60}")
    print(f"  {msg}")
    print(f"{'=' * 60}{C.RESET}\n")


def step(msg: str) -> None:
    print(f"{C.STEP}[{_ts()}] >> {msg}{C.RESET}")


def info(msg: str) -> None:
    print(f"{C.DIM}[{_ts()}]{C.RESET} {msg}")


def ok(msg: str) -> None:
    print(f"{C.OK}[{_ts()}] OK {msg}{C.RESET}")


def warn(msg: str) -> None:
    print(f"{C.WARN}[{_ts()}] WARN {msg}{C.RESET}")


def format_counts(counts: Dict[str, int]) -> str:
    """Render record counts as "4 balanceSheets, 2 cashFlows"."""
    return ", ".join(f"{n} {name}" for name, n in counts.items())


def ticker_done(current: int, total: int, ticker: str, counts: Dict[str, int]) -> None:
    """Print a progress line like [3/21] IBM: 4 balanceSheets, 2 cashFlows"""
    print(
        f"{C.DIM}[{_ts()}]{C.RESET} "
        f"{C.STEP}[{current}/{total}]{C.RESET} "
        f"{C.TICKER}{ticker}{C.RESET}: {C.OK}{format_counts(counts) or 'profile'}{C.RESET}"
    )


def ticker_failed(current: int, total: int, ticker: str, error: Exception) -> None:
    print(
        f"{C.ERR}[{_ts()}] [{current}/{total}] {ticker}: "
        f"{type(error).__name__}: {redact_api_key(str(error))}{C.RESET}"
    )


def summary_table(title: str, rows: List[Tuple[str, str]]) -> None:
    """Print label-value pairs under a title."""
    print(f"\n{C.HEADER}{title}{C.RESET}")
    width = max((len(label) for label, _ in rows), default=0)
    for label, value in rows:
        print(f"  {label:<{width}}  {C.VALUE}{value}{C.RESET}")
    print()


# ---------------------------------------------------------------------------
# Logger setup
# ---------------------------------------------------------------------------

class RedactApiKeyFilter(logging.Filter):
    """Mask ``apikey=`` values in formatted log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_api_key(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_verbose_logging(name: str = "fundamentals", level: int = logging.DEBUG,
                          log_dir: str = LOG_DIR) -> logging.Logger:
    """
    Configure a logger writing INFO+ to stdout and DEBUG+ to <log_dir>/<name>.log.

    The ``sources`` and ``utils`` package loggers get the same handlers so
    provider messages land in the same file. Both handlers mask API keys.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers on re-import
    if logger.handlers:
        return logger

    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    redact = RedactApiKeyFilter()

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(logging.INFO)
    ch.setFormatter(fmt)
    ch.addFilter(redact)

    os.makedirs(log_dir, exist_ok=True)
    fh = logging.FileHandler(os.path.join(log_dir, f"{name}.log"))
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    fh.addFilter(redact)

    for target in (logger, logging.getLogger("sources"), logging.getLogger("utils")):
        target.setLevel(level)
        target.addHandler(ch)
        target.addHandler(fh)
    logger.propagate = False

    return logger
