"""Simulate a round with AI agents and print its events."""

import logging

from unocard.agents import AIAgent
from unocard.engine import Difficulty, UnoEngine
from unocard.engine.player import SEAT_NAMES
from unocard.orchestration.game_runner import GameRunner


def main():
    logging.basicConfig(level=logging.INFO)
    agents = {
        0: AIAgent(Difficulty.HARD, name="YOU"),
        1: AIAgent(Difficulty.EASY, name="WEST"),
        2: AIAgent(Difficulty.HARD, name="NORTH"),
        3: AIAgent(Difficulty.EASY, name="EAST"),
    }
    engine = UnoEngine(players=4, seven_zero_rule=True, draw2_stack_rule=True, seed=42)

    runner = GameRunner(agents, engine=engine)
    result = runner.run()

    for event in result.history:
        print(f"> {event}")
    winner = SEAT_NAMES[result.winner] if result.winner is not None else None
    print(f"Round finished! Winner: {winner}")
    print(f"Turns: {result.num_turns}")


if __name__ == "__main__":
    main()
