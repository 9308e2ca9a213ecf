# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

import logging

import pytest
from log import ROOT_NAME, _ConsoleFormatter, configure, get_logger


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch):
    monkeypatch.delenv("MULTICOMPLEX_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MULTICOMPLEX_LOG_FILE", raising=False)
    yield
    # Closes any file handler a test opened
    configure(level="INFO")


def make_record(level, msg="hello"):
    return logging.LogRecord("multicomplex.t", level, __file__, 1, msg, None, None)


class TestGetLogger:
    def test_module_names_are_prefixed(self):
        assert get_logger("core.algebra").name == "multicomplex.core.algebra"

    def test_prefixed_names_kept(self):
        assert get_logger("multicomplex.tasks").name == "multicomplex.tasks"
        assert get_logger(ROOT_NAME).name == ROOT_NAME

    def test_child_inherits_root_level(self):
        configure(level="ERROR")
        assert get_logger("core.units").getEffectiveLevel() == logging.ERROR


class TestConfigure:
    @pytest.mark.parametrize("level, expected", [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        (logging.ERROR, logging.ERROR),
        ("15", 15),
        (None, logging.INFO),
    ])
    def test_level_resolution(self, level, expected):
        assert configure(level=level).level == expected

    def test_environment_level(self, monkeypatch):
        monkeypatch.setenv("MULTICOMPLEX_LOG_LEVEL", "warning")
        assert configure().level == logging.WARNING

    def test_explicit_level_beats_environment(self, monkeypatch):
        monkeypatch.setenv("MULTICOMPLEX_LOG_LEVEL", "ERROR")
        assert configure(level="DEBUG").level == logging.DEBUG

    def test_unknown_level_falls_back_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger=ROOT_NAME):
            root = configure(level="LOUD")
        assert root.level == logging.INFO
        assert any("Unknown log level 'LOUD'" in r.getMessage() for r in caplog.records)

    def test_reconfigure_replaces_handlers(self):
        root = configure(level="INFO")
        before = len(root.handlers)
        configure(level="DEBUG")
        configure(level="INFO")
        assert len(root.handlers) == before

    def test_log_file_appends(self, tmp_path):
        path = tmp_path / "run.log"
        configure(level="INFO", log_file=str(path))
        get_logger("tests").info("squared %d", 4)
        get_logger("tests").debug("not written")
        text = path.read_text()
        assert "INFO multicomplex.tests: squared 4" in text
        assert "not written" not in text


class TestConsoleFormatter:
    def test_plain_without_color(self):
        fmt = _ConsoleFormatter("%(levelname)s %(message)s", color=False)
        assert fmt.format(make_record(logging.WARNING)) == "WARNING hello"

    def test_color_wraps_line_not_record(self):
        fmt = _ConsoleFormatter("%(levelname)s %(message)s", color=True)
        record = make_record(logging.ERROR)
        line = fmt.format(record)
        assert line.startswith("\033[31m") and line.endswith("\033[0m")
        assert record.levelname == "ERROR"

    def test_info_stays_plain(self):
        fmt = _ConsoleFormatter("%(levelname)s %(message)s", color=True)
        assert fmt.format(make_record(logging.INFO)) == "INFO hello"
