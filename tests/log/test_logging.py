from io import StringIO
from unittest import TestCase, main
import logging

from rich.console import Console

import urlplate.logging as url_logging
from urlplate.logging import (
    DEBUG,
    DEFAULT_LEVEL,
    INFO,
    LEVEL_ENV_VAR,
    LogGetter,
    RichHandler,
    get_logger,
    level_for,
    set_level,
    setup,
    setup_from_env,
)
from urlplate.template import root

from test_helpers import *

class TestLevelFor(TestCase):
    def test_ints(self):
        self.assertEqual(level_for(10), DEBUG)
        self.assertEqual(level_for('20'), INFO)

    def test_names(self):
        self.assertEqual(level_for('debug'), DEBUG)
        self.assertEqual(level_for('Info'), INFO)

    def test_unknown(self):
        self.assertRaises(ValueError, level_for, 8)
        self.assertRaises(ValueError, level_for, 'LOUD')

    def test_bad_types(self):
        self.assertRaises(TypeError, level_for, None)
        self.assertRaises(TypeError, level_for, True)

class TestLogGetter(LoggingTestMixin, TestCase):
    def test_proxies_logger(self):
        log = get_logger('urlplate', 'test')
        self.assertIsInstance(log, LogGetter)
        self.assertEqual(log.name, 'urlplate.test')
        self.assertEqual(log.getEffectiveLevel(), logging.DEBUG)

    def test_child(self):
        self.assertEqual(
            get_logger('urlplate').getChild('render').name,
            'urlplate.render',
        )

    def test_keyword_data(self):
        get_logger('urlplate', 'test').info('Hey %s', 'there', a=1, b='two')

        [record] = self.handler.records
        self.assertEqual(record.getMessage(), 'Hey there')
        self.assertEqual(record.levelno, logging.INFO)
        self.assertEqual(record.data, {'a': 1, 'b': 'two'})
        self.assertEqual(record.funcName, 'test_keyword_data')

    def test_disabled_levels_are_skipped(self):
        self.logger.setLevel(logging.WARNING)
        get_logger('urlplate', 'test').debug('quiet', x=1)
        self.assertEqual(self.handler.records, [])

    def test_render_logs_url(self):
        root().s('a b').s_param('q', '1').render(None)

        [record] = self.handler.records
        self.assertEqual(record.name, 'urlplate.rendering')
        self.assertEqual(record.levelno, logging.DEBUG)
        self.assertEqual(record.data, {'url': '/a%20b?q=1'})

class TestRichHandler(TestCase):
    def setUp(self):
        self.out = StringIO()
        self.handler = RichHandler(
            consoles=dict(err=Console(file=self.out, width=100)),
        )

    def make_record(self, msg, data=None, level=logging.INFO):
        record = logging.LogRecord(
            'urlplate.test', level, __file__, 1, msg, (), None
        )
        if data is not None:
            record.data = data
        return record

    def test_emit_message_and_data(self):
        self.handler.emit(
            self.make_record('Rendered template', dict(url='/a/b'))
        )
        output = self.out.getvalue()
        self.assertIn('INFO', output)
        self.assertIn('urlplate.test', output)
        self.assertIn('Rendered template', output)
        self.assertIn('url', output)
        self.assertIn('/a/b', output)

    def test_level_map(self):
        out = StringIO()
        handler = RichHandler(
            consoles=dict(out=Console(file=out, width=100)),
            level_map={logging.INFO: 'out'},
        )
        handler.emit(self.make_record('to stdout'))
        self.assertIn('to stdout', out.getvalue())
        self.assertEqual(self.out.getvalue(), '')

    def test_singleton(self):
        self.assertIs(RichHandler.singleton(), RichHandler.singleton())

class TestSetup(TestCase):
    def setUp(self):
        self.logger = logging.getLogger(url_logging.PKG_LOGGER_NAME)
        self.prev_level = self.logger.level
        self.prev_handlers = list(self.logger.handlers)
        self.prev_is_setup = url_logging._is_setup

    def tearDown(self):
        self.logger.setLevel(self.prev_level)
        self.logger.handlers = self.prev_handlers
        url_logging._is_setup = self.prev_is_setup

    def test_setup_installs_single_handler(self):
        url_logging._is_setup = False
        self.logger.handlers = []
        setup('info')
        setup('info')
        self.assertEqual(self.logger.handlers, [RichHandler.singleton()])
        self.assertEqual(self.logger.level, INFO)

    def test_set_level_none_is_noop(self):
        self.logger.setLevel(INFO)
        set_level(None)
        self.assertEqual(self.logger.level, INFO)

    def test_setup_from_env(self):
        setup_from_env({LEVEL_ENV_VAR: 'debug'})
        self.assertEqual(self.logger.level, DEBUG)

    def test_setup_from_env_default(self):
        setup_from_env({})
        self.assertEqual(self.logger.level, DEFAULT_LEVEL)

    def test_setup_from_env_blank(self):
        setup_from_env({LEVEL_ENV_VAR: "  "})
        self.assertEqual(self.logger.level, DEFAULT_LEVEL)

    def test_setup_from_env_bad_value(self):
        self.assertRaises(ValueError, setup_from_env, {LEVEL_ENV_VAR: 'LOUD'})

if __name__ == '__main__':
    main()
