"""
Opt-in per-command metrics for the REPL.

When enabled, each executed input line is timed and appended as a CSV row to
the monitoring log:

    ts,input,ms,user_micros,system_micros,max_rss_delta_kb

max_rss_delta_kb is the growth of the process peak resident set size while
the line ran. It stays empty where the resource module is unavailable.
"""

import csv
import io
import logging
import os
import sys
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from litecore.session import Session

try:
    import resource
except ImportError:  # Windows
    resource = None

logger = logging.getLogger(__name__)

DEFAULT_MONITOR_PATH = "~/.litecore_monitoring.log"

CSV_FIELDS = ["ts", "input", "ms", "user_micros", "system_micros", "max_rss_delta_kb"]


@dataclass
class MetricEntry:
    """
    Single monitoring record.

    Attributes:
        ts: ISO-8601 UTC timestamp taken after execution.
        input: Raw input line.
        ms: Wall-clock duration in milliseconds.
        user_micros: User CPU time consumed, in microseconds.
        system_micros: System CPU time consumed, in microseconds.
        max_rss_delta_kb: Peak RSS growth during execution, in KiB.
    """

    ts: str
    input: str
    ms: float
    user_micros: Optional[int] = None
    system_micros: Optional[int] = None
    max_rss_delta_kb: Optional[int] = None

    def to_row(self) -> list:
        """Convert to a CSV row (missing values become empty fields)."""
        return [
            self.ts,
            self.input,
            f"{self.ms:.3f}",
            "" if self.user_micros is None else self.user_micros,
            "" if self.system_micros is None else self.system_micros,
            "" if self.max_rss_delta_kb is None else self.max_rss_delta_kb,
        ]


def peak_rss_kb() -> Optional[int]:
    """Peak resident set size of this process in KiB, or None if unknown."""
    if resource is None:
        return None
    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # macOS reports bytes, Linux KiB
    if sys.platform == "darwin":
        peak //= 1024
    return int(peak)


def get_monitoring_file_path(session: Session) -> str:
    """Get the monitoring log path for a session (expanded)."""
    return os.path.expanduser(session.monitor_log_path or DEFAULT_MONITOR_PATH)


def enable_monitoring(session: Session) -> str:
    """
    Enable monitoring and make sure the log file exists.

    Args:
        session: Session to update.

    Returns:
        Monitoring log path.
    """
    session.monitoring_enabled = True
    path = get_monitoring_file_path(session)
    try:
        with open(path, "a", encoding="utf-8"):
            pass
    except OSError as e:
        logger.warning(f"Cannot create monitoring log {path}: {e}")
    return path


def disable_monitoring(session: Session) -> None:
    """Disable monitoring for the session."""
    session.monitoring_enabled = False


def measure(session: Session, line: str, run: Callable[[str], None]) -> Optional[MetricEntry]:
    """
    Run an input line, recording metrics when monitoring is enabled.

    Args:
        session: Session holding the monitoring switch.
        line: Input line passed to run.
        run: Callable that executes the line (usually Router.command).

    Returns:
        Recorded entry, or None if monitoring is off or the line is blank.
    """
    if not session.monitoring_enabled or not line.strip():
        run(line)
        return None

    rss_start = peak_rss_kb()
    cpu_start = os.times()
    start = time.perf_counter()
    try:
        run(line)
    finally:
        ms = (time.perf_counter() - start) * 1000.0
        cpu_end = os.times()
        rss_end = peak_rss_kb()

    entry = MetricEntry(
        ts=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        input=line.strip(),
        ms=ms,
        user_micros=int((cpu_end.user - cpu_start.user) * 1_000_000),
        system_micros=int((cpu_end.system - cpu_start.system) * 1_000_000),
        max_rss_delta_kb=None if rss_start is None or rss_end is None else rss_end - rss_start,
    )
    print(f"[monitor] {ms:.2f} ms")
    log_metrics(get_monitoring_file_path(session), entry)
    return entry


def log_metrics(path: str, entry: MetricEntry) -> None:
    """
    Append a metric entry to the CSV log.

    Writes the header row first when the file is new or empty. Write errors
    are logged and otherwise ignored.

    Args:
        path: Monitoring log path.
        entry: Entry to append.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    try:
        if not os.path.exists(path) or os.path.getsize(path) == 0:
            writer.writerow(CSV_FIELDS)
        writer.writerow(entry.to_row())
        with open(path, "a", encoding="utf-8", newline="") as f:
            f.write(buf.getvalue())
    except OSError as e:
        logger.warning(f"Failed to write metrics to {path}: {e}")
