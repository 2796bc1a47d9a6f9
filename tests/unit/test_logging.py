from __future__ import annotations

import logging
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from tildecd.services.resolver import resolve_path
from tildecd.util.logging import configure_logging
from tests.helpers import reset_logger


class LoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        reset_logger()
        self.addCleanup(reset_logger)

    def test_configure_logging_creates_handlers(self) -> None:
        with TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "logs" / "tildecd.log"
            logger = configure_logging(level="INFO", log_path=log_path)
            logger.info("hello")
            reset_logger()

            self.assertTrue(log_path.exists())
            contents = log_path.read_text(encoding="utf-8")
            self.assertIn("INFO tildecd - hello", contents)

    def test_configure_logging_is_idempotent(self) -> None:
        with TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "tildecd.log"
            configure_logging(log_path=log_path)
            logger = configure_logging(log_path=log_path)

            self.assertEqual(len(logger.handlers), 2)
            self.assertEqual(logger.level, logging.WARNING)
            reset_logger()

    def test_module_loggers_propagate_to_project_logger(self) -> None:
        with TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "tildecd.log"
            configure_logging(level="DEBUG", log_path=log_path)
            resolve_path("/home/alice", "~/Documents")
            reset_logger()

            contents = log_path.read_text(encoding="utf-8")
            self.assertIn("tildecd.services.resolver", contents)
            self.assertIn("tilde_slash", contents)


if __name__ == "__main__":
    unittest.main()
