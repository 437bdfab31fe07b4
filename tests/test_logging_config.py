import logging

from convex_hull_2d.logging_config import setup_logging


def _close_package_handlers():
    logger = logging.getLogger("convex_hull_2d")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def test_log_file_receives_records(tmp_path):
    log_file = tmp_path / "run.log"
    try:
        setup_logging(logging.DEBUG, log_file=str(log_file))
        logging.getLogger("convex_hull_2d.quickhull").debug("hull of %d points", 7)
    finally:
        _close_package_handlers()

    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "convex_hull_2d.quickhull - DEBUG - hull of 7 points" in text


def test_setup_twice_keeps_one_console_handler(tmp_path):
    try:
        setup_logging(logging.INFO)
        setup_logging(logging.INFO, log_file=str(tmp_path / "second.log"))
        handlers = logging.getLogger("convex_hull_2d").handlers
        assert [type(h) for h in handlers] == [logging.StreamHandler, logging.FileHandler]
    finally:
        _close_package_handlers()
