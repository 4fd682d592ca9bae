import logging
import sys

from core import logger as app_logger


def test_get_logger_is_named():
    assert app_logger.get_logger('TipBox') is logging.getLogger('TipBox')


def test_setup_logging_installs_excepthook(monkeypatch):
    monkeypatch.setattr(sys, 'excepthook', sys.__excepthook__)
    app_logger.setup_logging(filename=None)
    assert sys.excepthook is app_logger._excepthook


def test_excepthook_logs(caplog, capsys):
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        app_logger._excepthook(*sys.exc_info())
    assert "Unhandled exception" in caplog.text
    assert "boom" in capsys.readouterr().err
