# FILE: tournament/run_tournament.py

import json
import os
import logging

from c4killer.agents.minimax.agent_code import MinimaxAgent
from c4killer.game.connect_four_game import ConnectFourGame
from c4killer.constants import RED_TEAM, YEL_TEAM, BOARD_SIZE

logger = logging.getLogger(__name__)

def run_tournament(agents, num_games=10, size=BOARD_SIZE, results_dir=None):
    """
    Play a series of games between two agents on opposite teams.

    The starting team alternates from one game to the next.

    :param agents: Two agents, one per team, with distinct names.
    :param num_games: Number of games to play.
    :param size: Board size used for every game.
    :param results_dir: If given, the results are written to tournament_results.json there.
    :return: Dict of wins per agent name plus 'draws'.
    """
    teams = sorted(agent.team for agent in agents)
    if teams != sorted([RED_TEAM, YEL_TEAM]):
        raise ValueError("A tournament needs exactly one agent per team.")
    if len({agent.name for agent in agents}) != len(agents):
        raise ValueError("Agents in a tournament must have distinct names.")

    results = {agent.name: 0 for agent in agents}
    results['draws'] = 0
    game = ConnectFourGame(size=size)

    for i in range(num_games):
        game.reset()
        start_team = RED_TEAM if (i % 2) == 0 else YEL_TEAM
        current_team = start_team
        result = game.get_game_state()
        while result == "ONGOING":
            agent = next(a for a in agents if a.team == current_team)
            selected_action = agent.select_move(game)
            game.make_move(selected_action, agent.team)
            result = game.get_game_state()
            current_team = -current_team

        if result in [RED_TEAM, YEL_TEAM]:
            winner_agent = next(a for a in agents if a.team == result)
            results[winner_agent.name] += 1
        else:
            results['draws'] += 1
        logger.info(f"Final board for game {i + 1}:\n{game.board_to_string()}")

    if results_dir is not None:
        os.makedirs(results_dir, exist_ok=True)
        results_path = os.path.join(results_dir, 'tournament_results.json')
        with open(results_path, 'w') as f:
            json.dump(results, f, indent=4)
        logger.info(f"Tournament completed. Results saved to {results_path}")
    return results

if __name__ == "__main__":
    agent1 = MinimaxAgent(depth=4, team=RED_TEAM, pruning=True, name="C4_Killer")
    agent2 = MinimaxAgent(depth=3, team=YEL_TEAM, pruning=False, name="C4_Killer_NoPruning")
    run_tournament([agent1, agent2], num_games=2, results_dir=os.path.join('tournament', 'results'))
