import unittest
from unittest.mock import patch
import importlib
import logging
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import event_triage.config as config
import event_triage.logging_config  # noqa: F401


class TestConfig(unittest.TestCase):

    def tearDown(self):
        importlib.reload(config)

    @patch.dict(os.environ, {"LOG_LEVEL": "debug", "ANALYSIS_CACHE_TTL_SECONDS": "60"})
    def test_env_overrides(self):
        importlib.reload(config)
        self.assertEqual(config.LOG_LEVEL, "debug")
        self.assertEqual(config.ANALYSIS_CACHE_TTL_SECONDS, 60)

    def test_logging_configured_on_import(self):
        self.assertTrue(logging.getLogger().handlers)


if __name__ == '__main__':
    unittest.main()
