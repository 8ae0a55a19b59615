import logging
import sys
import unittest
from unittest.mock import patch

from chatificial.utils import logger as logger_mod


class TestLogger(unittest.TestCase):
    def setUp(self):
        self.lg = logger_mod.logger
        self.saved_handlers = list(self.lg.handlers)
        self.saved_level = self.lg.level

    def tearDown(self):
        self.lg.handlers[:] = self.saved_handlers
        self.lg.setLevel(self.saved_level)

    def _stderr_handlers(self):
        return [h for h in self.lg.handlers
                if type(h) is logging.StreamHandler and h.stream is sys.stderr]

    def test_silent_by_default(self):
        with patch.dict("os.environ", {logger_mod.DEBUG_ENV_VAR: ""}):
            lg = logger_mod.setup_logger()
        self.assertIs(lg, self.lg)
        self.assertEqual(lg.level, logging.CRITICAL)
        self.assertFalse(lg.propagate)

    def test_console_mirror_added_once(self):
        with patch.dict("os.environ", {logger_mod.DEBUG_ENV_VAR: ""}):
            logger_mod.enable_console_logging(logging.INFO)
            logger_mod.enable_console_logging(logging.INFO)
        self.assertEqual(len(self._stderr_handlers()), 1)
        self.assertEqual(self.lg.level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
