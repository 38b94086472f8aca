import logging

from toolscout.logger import get_logger, init_logging


def test_component_loggers_are_children():
    assert get_logger().name == "ToolScout"
    assert get_logger("fetcher").name == "ToolScout.fetcher"
    assert get_logger("fetcher").parent is get_logger()


def test_init_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "scout.log"
    try:
        lg = init_logging("DEBUG", log_file=log_file)
        assert len(lg.handlers) == 2
        lg = init_logging("INFO")
        assert len(lg.handlers) == 1
        assert lg.propagate is False
    finally:
        init_logging()


def test_component_records_reach_the_file(tmp_path):
    log_file = tmp_path / "scout.log"
    try:
        init_logging("INFO", log_file=log_file)
        get_logger("engine").info("hello from engine")
        for handler in get_logger().handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "ToolScout.engine" in text
        assert "hello from engine" in text
    finally:
        init_logging()


def test_aiohttp_loggers_kept_quiet_unless_debugging():
    try:
        init_logging("INFO")
        assert logging.getLogger("aiohttp.client").level == logging.WARNING
        init_logging("DEBUG")
        assert logging.getLogger("aiohttp.client").level == logging.DEBUG
    finally:
        init_logging()
