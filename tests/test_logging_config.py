import logging

from lib_figure.logging_config import setup_logging


def test_setup_logging_is_repeatable(tmp_path):
    log_file = tmp_path / "rdance.log"
    setup_logging(logging.DEBUG, str(log_file))
    setup_logging(logging.DEBUG, str(log_file))

    logger = logging.getLogger("lib_figure")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logging.getLogger("lib_figure.figure").info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "lib_figure.figure - INFO - hello" in log_file.read_text(encoding="utf-8")

    for name in ("lib_figure", "lib_game", "app"):
        for handler in logging.getLogger(name).handlers:
            handler.close()
        logging.getLogger(name).handlers.clear()


def test_setup_logging_closes_replaced_file_handlers(tmp_path):
    setup_logging(logging.INFO, str(tmp_path / "first.log"))
    old = [h for h in logging.getLogger("lib_game").handlers if isinstance(h, logging.FileHandler)]
    assert len(old) == 1

    setup_logging(logging.INFO, str(tmp_path / "second.log"))

    assert old[0].stream is None
    assert old[0] not in logging.getLogger("lib_game").handlers

    for name in ("lib_figure", "lib_game", "app"):
        for handler in logging.getLogger(name).handlers:
            handler.close()
        logging.getLogger(name).handlers.clear()
