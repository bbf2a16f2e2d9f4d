# Suites import shared bits with `from test_helpers import *`, so this
# directory needs to be on the path no matter how pytest imports them.

import pathlib
import sys

TESTS_DIR = str(pathlib.Path(__file__).parent.absolute())

if TESTS_DIR not in sys.path:
    sys.path.insert(0, TESTS_DIR)
