from types import SimpleNamespace
import logging

from urlplate.logging import PKG_LOGGER_NAME

def ctx(**values) -> SimpleNamespace:
    return SimpleNamespace(**values)

# Context for templates that never look at it
EMPTY = ctx()

class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.NOTSET)
        self.records = []

    def emit(self, record):
        self.records.append(record)

class LoggingTestMixin:
    '''Captures `urlplate.*` records at DEBUG for the length of each test.'''

    def setUp(self):
        super().setUp()
        self.logger = logging.getLogger(PKG_LOGGER_NAME)
        self.handler = RecordingHandler()
        self.prev_level = self.logger.level
        self.logger.addHandler(self.handler)
        self.logger.setLevel(logging.DEBUG)

    def tearDown(self):
        self.logger.removeHandler(self.handler)
        self.logger.setLevel(self.prev_level)
        super().tearDown()
