import logging
import pytest
from hexrating.logging import ModuleLogger
from hexrating.rating import geometry


@pytest.fixture
def restore_level():
    yield
    ModuleLogger.set_level(ModuleLogger.WARNING)


def test_handlers_are_attached_once(tmp_path):
    log_file = tmp_path / 'rating.log'
    logger = ModuleLogger.get_logger('hexrating.test_once', file_path=log_file, log_level=ModuleLogger.INFO)
    again = ModuleLogger.get_logger('hexrating.test_once', file_path=log_file, log_level=ModuleLogger.INFO)
    assert again is logger
    assert len(logger.handlers) == 2
    logger.info('rated')
    for handler in logger.handlers:
        handler.flush()
    assert '[hexrating.test_once | INFO] rated' in log_file.read_text(encoding='utf-8')
    for handler in logger.handlers:
        handler.close()


def test_engine_loggers_default_to_warning():
    assert geometry.logger.level == ModuleLogger.WARNING


def test_set_level_applies_to_package_loggers_only(restore_level):
    other = logging.getLogger('somepackage.module')
    other.setLevel(ModuleLogger.ERROR)
    ModuleLogger.set_level(ModuleLogger.DEBUG)
    assert geometry.logger.level == ModuleLogger.DEBUG
    assert all(h.level == ModuleLogger.DEBUG for h in geometry.logger.handlers)
    assert other.level == ModuleLogger.ERROR


def test_repeated_request_keeps_first_level():
    logger = ModuleLogger.get_logger('hexrating.test_level')
    assert logger.level == ModuleLogger.DEFAULT_LEVEL
    again = ModuleLogger.get_logger('hexrating.test_level', log_level=ModuleLogger.DEBUG)
    assert again.level == ModuleLogger.DEFAULT_LEVEL
    assert len(again.handlers) == 1
