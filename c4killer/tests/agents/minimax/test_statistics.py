import unittest
import logging

from c4killer.agents.minimax.statistics import MoveRecord, MoveStatistics

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

class TestMoveStatistics(unittest.TestCase):
    def setUp(self):
        self.statistics = MoveStatistics()

    def test_starts_empty(self):
        self.assertEqual(len(self.statistics), 0)
        self.assertEqual(self.statistics.total_time, 0)

    def test_record_appends_in_order(self):
        self.assertEqual(self.statistics.record(3, 0.25), MoveRecord(3, 0.25))
        self.statistics.record(5, 0.5)
        self.assertEqual(self.statistics.columns, [3, 5])
        self.assertEqual(self.statistics.times, [0.25, 0.5])
        self.assertAlmostEqual(self.statistics.total_time, 0.75)

    def test_table_lists_moves_and_total(self):
        self.statistics.record(3, 0.25)
        self.statistics.record(5, 0.5)
        lines = self.statistics.to_table().splitlines()
        self.assertEqual(lines[0], "================= Table of Statistics =================")
        self.assertTrue(lines[3].startswith("1          | 3 "))
        self.assertIn("0.2500", lines[3])
        self.assertTrue(lines[4].startswith("2          | 5 "))
        self.assertTrue(lines[-1].startswith("Total"))
        self.assertIn("0.7500", lines[-1])

if __name__ == '__main__':
    unittest.main()
