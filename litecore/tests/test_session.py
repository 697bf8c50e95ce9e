"""
Unit tests for session state, history and monitoring.
"""

import csv

from litecore import history, monitoring
from litecore.session import Session


class TestSession:
    """Test session state and prompt rendering."""

    def test_initial(self):
        """New session has nothing attached."""
        session = Session()

        assert session.attached is False
        assert session.prompt() == "\nLiteCore> "

    def test_attach(self):
        """attach() derives the name from the basename."""
        session = Session()
        session.attach("/data/main.db")

        assert session.attached is True
        assert session.db_path == "/data/main.db"
        assert session.db_name == "main"
        assert session.prompt() == "\nLiteCore - main> "

    def test_attach_no_extension(self):
        """Files without an extension keep their full basename."""
        session = Session()
        session.attach("/data/archive.tar.gz")
        assert session.db_name == "archive.tar"

        session.attach("/data/plain")
        assert session.db_name == "plain"

    def test_prompt_base(self):
        """Prompt prefix is configurable."""
        assert Session().prompt("db") == "\ndb> "


class TestHistory:
    """Test history persistence."""

    def test_missing_file(self, tmp_path):
        """Missing history file loads as empty."""
        assert history.load_history(str(tmp_path / "none")) == []

    def test_append_and_load(self, tmp_path):
        """Appended lines load back oldest first."""
        path = str(tmp_path / "hist")

        history.append_history(path, "help")
        history.append_history(path, ".monitoring status  ")

        assert history.load_history(path) == ["help", ".monitoring status"]

    def test_skip_blank_and_leading_space(self, tmp_path):
        """Blank lines and lines starting with a space are not recorded."""
        path = str(tmp_path / "hist")

        assert history.append_history(path, "   ") is False
        assert history.append_history(path, " secret") is False
        assert history.append_history(path, "help") is True

        assert history.load_history(path) == ["help"]

    def test_max_entries(self, tmp_path):
        """Only the newest entries are kept."""
        path = tmp_path / "hist"
        path.write_text("a\n\nb\nc\nd\n")

        assert history.load_history(str(path), 2) == ["c", "d"]
        assert history.load_history(str(path), 0) == []

    def test_invalid_encoding(self, tmp_path):
        """A history file that is not UTF-8 loads as empty."""
        path = tmp_path / "hist"
        path.write_bytes(b"ok\n\xff\xfe bad\n")

        assert history.load_history(str(path)) == []

    def test_unreadable_file(self, tmp_path):
        """A history path that cannot be read loads as empty."""
        path = tmp_path / "hist"
        path.mkdir()

        assert history.load_history(str(path)) == []


class TestMonitoring:
    """Test per-command metrics."""

    def test_measure_disabled(self, tmp_path):
        """With monitoring off the line runs and nothing is logged."""
        session = Session(monitor_log_path=str(tmp_path / "m.log"))
        seen = []

        entry = monitoring.measure(session, "help", seen.append)

        assert entry is None
        assert seen == ["help"]
        assert not (tmp_path / "m.log").exists()

    def test_measure_enabled(self, tmp_path, capsys):
        """With monitoring on a CSV row is appended with a header."""
        log = tmp_path / "m.log"
        session = Session(monitor_log_path=str(log))
        monitoring.enable_monitoring(session)

        entry = monitoring.measure(session, "  help  ", lambda line: None)
        monitoring.measure(session, "ATTACH DATABASE x, y", lambda line: None)

        assert entry is not None
        assert entry.input == "help"
        assert entry.ms >= 0
        assert "[monitor]" in capsys.readouterr().out

        with open(log, newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0] == monitoring.CSV_FIELDS
        assert rows[1][1] == "help"
        assert rows[2][1] == "ATTACH DATABASE x, y"
        assert len(rows) == 3

    def test_measure_records_rss_delta(self, tmp_path):
        """Each row carries the peak RSS growth in KiB."""
        session = Session(monitor_log_path=str(tmp_path / "m.log"), monitoring_enabled=True)

        entry = monitoring.measure(session, "help", lambda line: bytearray(4 * 1024 * 1024))

        with open(tmp_path / "m.log", newline="") as f:
            rows = list(csv.DictReader(f))
        if monitoring.resource is None:
            assert entry.max_rss_delta_kb is None
            assert rows[0]["max_rss_delta_kb"] == ""
        else:
            assert entry.max_rss_delta_kb >= 0
            assert int(rows[0]["max_rss_delta_kb"]) == entry.max_rss_delta_kb

    def test_row_without_rss(self):
        """Unknown memory usage is written as an empty field."""
        entry = monitoring.MetricEntry(ts="t", input="help", ms=1.0, user_micros=5)

        assert entry.to_row() == ["t", "help", "1.000", 5, "", ""]

    def test_measure_blank_line(self, tmp_path):
        """Blank lines are never recorded."""
        session = Session(monitor_log_path=str(tmp_path / "m.log"), monitoring_enabled=True)

        assert monitoring.measure(session, "   ", lambda line: None) is None

    def test_log_metrics_unwritable(self, tmp_path):
        """Write errors are swallowed."""
        entry = monitoring.MetricEntry(ts="t", input="help", ms=1.0)
        monitoring.log_metrics(str(tmp_path / "missing" / "m.log"), entry)
