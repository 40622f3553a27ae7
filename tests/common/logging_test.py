import logging

import app.common.logging as m

from tests import TestBase


class TestConfigure(TestBase):
    def setUp(self):
        super().setUp()
        self._logger = logging.getLogger('tests.common.logging_test')
        self.addCleanup(self._logger.handlers.clear)

    def test_level(self):
        m._configure(self._logger, 'ERROR')
        self.assertEqual(self._logger.level, logging.ERROR)

    def test_single_handler(self):
        m._configure(self._logger, 'INFO')
        m._configure(self._logger, 'INFO')
        self.assertEqual(len(self._logger.handlers), 1)

    def test_keeps_existing_handler(self):
        existing = logging.NullHandler()
        self._logger.addHandler(existing)
        m._configure(self._logger, 'INFO')
        self.assertEqual(self._logger.handlers, [existing])

    def test_format(self):
        m._configure(self._logger, 'INFO')
        fmt = self._logger.handlers[0].formatter
        self.assertEqual(fmt._fmt, m._FORMAT)

    def test_no_propagation(self):
        m._configure(self._logger, 'INFO')
        self.assertFalse(self._logger.propagate)


class TestGetLogger(TestBase):
    def test_hierarchy(self):
        logger = m.get_logger('app.handlers.cognito.pre_signup')
        parent = logger.parent
        while parent is not None and parent.name != 'app':
            parent = parent.parent
        self.assertIs(parent, logging.getLogger('app'))

    def test_app_handler(self):
        app_logger = logging.getLogger('app')
        self.assertEqual(len(app_logger.handlers), 1)
