"""Tests for console helpers and logger setup."""

import logging

import pytest

from sources.fundamentals.providers.base import ProviderError
from utils import log


@pytest.fixture
def isolated_loggers():
    """Detach handlers added by setup_verbose_logging after each test."""
    targets = [logging.getLogger(name) for name in ("fundamentals-test", "sources", "utils")]
    before = {target.name: list(target.handlers) for target in targets}
    propagate = {target.name: target.propagate for target in targets}
    yield targets[0].name
    for target in targets:
        target.propagate = propagate[target.name]
        for handler in list(target.handlers):
            if handler not in before[target.name]:
                target.removeHandler(handler)
                handler.close()


class TestConsoleHelpers:
    def test_format_counts(self):
        assert log.format_counts({"balanceSheets": 4, "cashFlows": 2}) == "4 balanceSheets, 2 cashFlows"
        assert log.format_counts({}) == ""

    def test_ticker_done(self, capsys):
        log.ticker_done(3, 21, "IBM", {"incomeStatements": 5})
        out = capsys.readouterr().out
        assert "[3/21]" in out
        assert "IBM" in out
        assert "5 incomeStatements" in out

    def test_ticker_done_profile_only(self, capsys):
        log.ticker_done(1, 1, "IBM", {})
        assert "profile" in capsys.readouterr().out

    def test_ticker_failed_masks_key(self, capsys):
        log.ticker_failed(2, 2, "AAA", ProviderError("Request failed: /query?apikey=s3cret"))
        out = capsys.readouterr().out
        assert "AAA" in out
        assert "ProviderError" in out
        assert "s3cret" not in out

    def test_warn(self, capsys):
        log.warn("No ticker returned data")
        assert "WARN No ticker returned data" in capsys.readouterr().out

    def test_summary_table_aligns_labels(self, capsys):
        log.summary_table("Summary", [("Succeeded", "1"), ("Failed", "0")])
        lines = capsys.readouterr().out.splitlines()
        assert any("Succeeded" in line and "1" in line for line in lines)
        assert any(line.startswith("  Failed     ") for line in lines)


class TestSetupVerboseLogging:
    def test_writes_log_file(self, isolated_loggers, tmp_path):
        logger = log.setup_verbose_logging(isolated_loggers, log_dir=str(tmp_path))
        logger.debug("debug line")
        for handler in logger.handlers:
            handler.flush()
        assert "debug line" in (tmp_path / f"{isolated_loggers}.log").read_text()

    def test_idempotent(self, isolated_loggers, tmp_path):
        first = log.setup_verbose_logging(isolated_loggers, log_dir=str(tmp_path))
        count = len(first.handlers)
        second = log.setup_verbose_logging(isolated_loggers, log_dir=str(tmp_path))
        assert second is first
        assert len(second.handlers) == count

    def test_package_loggers_masked(self, isolated_loggers, tmp_path):
        log.setup_verbose_logging(isolated_loggers, log_dir=str(tmp_path))
        logging.getLogger("sources.fundamentals.test").debug("GET %s", "/query?apikey=s3cret")
        for handler in logging.getLogger("sources").handlers:
            handler.flush()
        text = (tmp_path / f"{isolated_loggers}.log").read_text()
        assert "apikey=***" in text
        assert "s3cret" not in text


class TestRedactApiKeyFilter:
    def test_rewrites_message(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "url %s", ("?apikey=abc",), None)
        assert log.RedactApiKeyFilter().filter(record) is True
        assert record.getMessage() == "url ?apikey=***"

    def test_leaves_other_records(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "count %d", (3,), None)
        log.RedactApiKeyFilter().filter(record)
        assert record.args == (3,)
