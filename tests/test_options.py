import logging
from pathlib import Path

import pytest

from crstoolchain.options import (
    DEFAULT_LOG_LEVEL,
    LOGGER_NAME,
    TRACE,
    LogLevel,
    OutputType,
    configure_logging,
    find_root_directory,
    resolve_working_directory,
)


@pytest.fixture
def root(tmp_path: Path) -> Path:
    base = tmp_path / "root"
    (base / "regex-assembly").mkdir(parents=True)
    return base


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    configure_logging(DEFAULT_LOG_LEVEL)


def test_output_type_parse():
    assert OutputType.parse("text") is OutputType.TEXT
    assert OutputType.parse("github") is OutputType.GITHUB


def test_output_type_invalid():
    with pytest.raises(ValueError, match="invalid option for output: 'json'"):
        OutputType.parse("json")


def test_log_level_default_is_info():
    assert DEFAULT_LOG_LEVEL is LogLevel.INFO
    logger = configure_logging()
    assert logger.level == logging.INFO


def test_log_level_changed():
    level = LogLevel.parse("debug")
    assert level is LogLevel.DEBUG
    logger = configure_logging(level)
    assert logger.level == logging.DEBUG
    assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG


def test_log_level_parse_ignores_case():
    assert LogLevel.parse("WARN") is LogLevel.WARN


def test_log_level_invalid_raises_and_keeps_level():
    configure_logging(DEFAULT_LOG_LEVEL)
    with pytest.raises(ValueError):
        configure_logging(LogLevel.parse("bizarre"))
    assert logging.getLogger(LOGGER_NAME).level == DEFAULT_LOG_LEVEL.python_level


def test_trace_level_is_below_debug():
    level = LogLevel.parse("trace")
    assert level is LogLevel.TRACE
    assert level.python_level == TRACE
    assert TRACE < logging.DEBUG
    logger = configure_logging(level)
    assert logger.level == TRACE
    assert logger.isEnabledFor(TRACE)
    assert logging.getLevelName(TRACE) == "TRACE"


def test_disabled_is_above_all_levels():
    logger = configure_logging("disabled")
    assert not logger.isEnabledFor(logging.CRITICAL)


def test_configure_logging_adds_single_handler():
    logger = configure_logging(LogLevel.INFO)
    count = len(logger.handlers)
    configure_logging(LogLevel.DEBUG)
    assert len(logger.handlers) == count


def test_find_root_directory_in_root(root):
    assert find_root_directory(root) == str(root)


def test_find_root_directory_in_util(root):
    assert find_root_directory(root / "util") == str(root)


def test_find_root_directory_in_data(root):
    assert find_root_directory(root / "regex-assembly") == str(root)


def test_find_root_directory_in_include(root):
    include = root / "regex-assembly" / "include"
    include.mkdir()
    assert find_root_directory(include) == str(root)


def test_find_root_directory_in_rules(root):
    rules = root / "rules"
    rules.mkdir()
    assert find_root_directory(rules) == str(root)


def test_find_root_directory_fails(tmp_path):
    lonely = tmp_path / "nothing" / "here"
    lonely.mkdir(parents=True)
    with pytest.raises(FileNotFoundError, match="failed to find root directory"):
        find_root_directory(lonely)


def test_absolute_working_directory(root):
    assert resolve_working_directory(str(root)) == str(root)


def test_relative_working_directory(tmp_path, monkeypatch):
    (tmp_path / "testDir" / "regex-assembly").mkdir(parents=True)
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    resolved = resolve_working_directory("../testDir")
    assert Path(resolved).is_absolute()
    assert Path(resolved).resolve() == (tmp_path / "testDir").resolve()