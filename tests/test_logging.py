"""
Tests of the module logger factory
"""
import logging

from roomload.logging import ModuleLogger


class TestModuleLogger:

    def test_same_logger_is_returned_once_configured(self):
        logger = ModuleLogger.get_logger('roomload.tests.same')
        n_handlers = len(logger.handlers)
        assert ModuleLogger.get_logger('roomload.tests.same') is logger
        assert len(logger.handlers) == n_handlers == 1

    def test_file_handler(self, tmp_path):
        file_path = tmp_path / 'roomload.log'
        logger = ModuleLogger.get_logger('roomload.tests.file', file_path, ModuleLogger.INFO)
        logger.info('duct sized')
        for handler in logger.handlers:
            handler.flush()
        text = file_path.read_text(encoding='utf-8')
        assert '| roomload.tests.file | INFO] duct sized' in text
        for handler in logger.handlers:
            handler.close()

    def test_set_level_of_package(self):
        import roomload.engine.calculator  # noqa: F401
        ModuleLogger.set_level(ModuleLogger.DEBUG)
        try:
            assert logging.getLogger('roomload.engine.calculator').level == ModuleLogger.DEBUG
            assert logging.getLogger('roomload.fluids.psychrometrics').level == ModuleLogger.DEBUG
        finally:
            ModuleLogger.set_level(ModuleLogger.WARNING)
