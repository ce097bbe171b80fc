import unittest
import logging

from c4killer.utils.logger_config import logger

logging.basicConfig(level=logging.INFO)

class TestLoggerConfig(unittest.TestCase):
    def test_package_logger_has_a_single_handler(self):
        self.assertEqual(logger.name, "c4killer")
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.INFO)

    def test_records_are_not_repeated_by_the_root_logger(self):
        self.assertFalse(logger.propagate)
        child = logging.getLogger("c4killer.agents.minimax.agent_code")
        self.assertIs(child.parent, logger)

if __name__ == '__main__':
    unittest.main()
