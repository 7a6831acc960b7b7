import logging

import uvicorn

from golftour import config, main
from golftour.logger import get_logger


def _close(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_console_only_without_log_dir(monkeypatch) -> None:
    monkeypatch.setattr(config, "LOG_DIR", "")
    logger = get_logger("golftour.tests.console")
    try:
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
        assert logger.propagate is False
    finally:
        _close(logger)


def test_file_handler_when_log_dir_set(monkeypatch, tmp_path) -> None:
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(config, "LOG_DIR", str(log_dir))
    monkeypatch.setattr(config, "LOG_LEVEL", "INFO")

    logger = get_logger("golftour.tests.file")
    try:
        logger.info("vuelta cerrada")
        for handler in logger.handlers:
            handler.flush()

        [log_file] = log_dir.glob("golftour-*.log")
        assert "| INFO | golftour.tests.file | vuelta cerrada" in log_file.read_text(encoding="utf-8")
    finally:
        _close(logger)


def test_logger_is_cached() -> None:
    assert get_logger("golftour.main") is main.log


def test_run_serves_app(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(config, "HOST", "0.0.0.0")
    monkeypatch.setattr(config, "PORT", 9000)

    main.run()

    assert calls == [("golftour.main:app", {"host": "0.0.0.0", "port": 9000})]
