import json
import os
import logging
import tempfile
import unittest

from c4killer.agents.minimax.agent_code import MinimaxAgent
from c4killer.tournament.run_tournament import run_tournament
from c4killer.constants import RED_TEAM, YEL_TEAM

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

class TestRunTournament(unittest.TestCase):
    def setUp(self):
        self.red = MinimaxAgent(depth=2, team=RED_TEAM, name="Red")
        self.yellow = MinimaxAgent(depth=1, team=YEL_TEAM, pruning=False, name="Yellow")

    def test_every_game_is_counted(self):
        results = run_tournament([self.red, self.yellow], num_games=2, size=5)
        self.assertEqual(set(results), {"Red", "Yellow", "draws"})
        self.assertEqual(sum(results.values()), 2)

    def test_results_are_saved(self):
        with tempfile.TemporaryDirectory() as tmp:
            results = run_tournament([self.red, self.yellow], num_games=1, size=4, results_dir=tmp)
            with open(os.path.join(tmp, 'tournament_results.json')) as f:
                self.assertEqual(json.load(f), results)

    def test_agents_record_their_moves(self):
        run_tournament([self.red, self.yellow], num_games=1, size=4)
        self.assertGreater(len(self.red.statistics), 0)
        self.assertGreater(len(self.yellow.statistics), 0)

    def test_needs_one_agent_per_team(self):
        other_red = MinimaxAgent(depth=1, team=RED_TEAM, name="Other")
        with self.assertRaises(ValueError):
            run_tournament([self.red, other_red], num_games=1, size=4)

    def test_needs_distinct_names(self):
        yellow = MinimaxAgent(depth=1, team=YEL_TEAM, name="Red")
        with self.assertRaises(ValueError):
            run_tournament([self.red, yellow], num_games=1, size=4)

if __name__ == '__main__':
    unittest.main()
