import logging

import pytest

from valuenoise import logger


def makeRecord(msg):
    return logging.LogRecord('vn.test', logging.INFO, __file__, 1, msg,
                             None, None, func='someFunc')


def test_formatter_brackets_function_name():
    fmt = logger.CustomFormatter('%(funcName)s: %(message)s')
    out = fmt.format(makeRecord('hello'))
    assert out.startswith('[someFunc]')
    assert out.endswith(': hello')


def test_formatter_repeats_prefix_on_new_lines():
    fmt = logger.CustomFormatter(logger.FMT_OUT)
    lines = fmt.format(makeRecord('first\nsecond')).split('\n')
    assert len(lines) == 2
    assert lines[0].startswith('vn.test')
    assert lines[1].startswith('vn.test')
    assert lines[1].endswith('> second')


def test_add_log_returns_existing_logger():
    first = logger.addLog('vn.testlog')
    assert logger.addLog('vn.testlog') is first
    assert first.level == logger.DEBUG


@pytest.fixture
def freshMain(monkeypatch):
    monkeypatch.setattr(logger, 'log', None)
    monkeypatch.setattr(logger, 'consoleHandler', None)
    monkeypatch.setattr(logger, 'fileHandler', None)
    monkeypatch.setattr(logger, 'pending', [])
    yield
    if (logger.MAIN_LOG in logging.Logger.manager.loggerDict):
        logger.deepRemoveLog(logger.MAIN_LOG)


def test_setup_main_attaches_handlers_to_pending_loggers(freshMain):
    early = logger.addLog('vn.test.early')
    assert logger.pending == ['vn.test.early']
    assert not early.handlers

    main = logger.setupMain()
    assert main.name == logger.MAIN_LOG
    assert logger.consoleHandler in main.handlers
    assert logger.consoleHandler in early.handlers
    assert logger.pending == []
    assert logger.setupMain() is main


def test_add_log_after_setup_gets_handlers_directly(freshMain):
    logger.setupMain()
    late = logger.addLog('vn.test.late')
    assert logger.consoleHandler in late.handlers
    logger.removeLog('vn.test.late')


def test_remove_log_keeps_shared_handlers(freshMain, tmp_path):
    logger.setupMain(fileName=str(tmp_path / 'noise.log'))
    sub = logger.addLog('vn.test.shared')
    handler = logger.fileHandler
    assert handler in sub.handlers

    logger.removeLog('vn.test.shared')
    assert 'vn.test.shared' not in logging.Logger.manager.loggerDict
    assert logger.fileHandler is handler
    assert handler.stream is not None


def test_remove_main_log_closes_handlers_and_resets_globals(freshMain, tmp_path):
    path = tmp_path / 'noise.log'
    logger.setupMain(fileName=str(path))
    handler = logger.fileHandler

    logger.removeLog(logger.MAIN_LOG)
    assert logger.log is None
    assert logger.consoleHandler is None
    assert logger.fileHandler is None
    assert handler.stream is None
    assert 'File logging started' in path.read_text()


def test_deep_remove_log_closes_shared_handlers(freshMain):
    logger.setupMain()
    sub = logger.addLog('vn.test.deep')
    handler = logger.consoleHandler

    logger.deepRemoveLog('vn.test.deep')
    assert logger.consoleHandler is None
    assert handler not in logging.getLogger(logger.MAIN_LOG).handlers
    assert handler not in sub.handlers
    assert logger.log is not None
