"""Tournament - run many rounds and aggregate results."""

import logging
import random
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict

from unocard.engine import UnoEngine
from unocard.orchestration.game_runner import GameRunner

logger = logging.getLogger(__name__)


@dataclass
class TournamentResult:
    """Wins and accumulated score per seat."""

    wins: Dict[int, int] = field(default_factory=dict)
    scores: Dict[int, int] = field(default_factory=dict)
    unfinished: int = 0


def run_tournament(
    agents: dict[int, Any],
    num_games: int = 100,
    seed: int | None = None,
    seven_zero_rule: bool = False,
    draw2_stack_rule: bool = False,
) -> TournamentResult:
    """Play num_games rounds with the same seats and house rules.

    Each round gets a fresh engine seeded from the tournament seed.

    Returns:
        Wins and summed round scores per seat.
    """
    wins: Dict[int, int] = defaultdict(int)
    scores: Dict[int, int] = defaultdict(int)
    unfinished = 0

    rng = random.Random(seed)
    for g in range(num_games):
        engine = UnoEngine(
            players=len(agents),
            seven_zero_rule=seven_zero_rule,
            draw2_stack_rule=draw2_stack_rule,
            seed=rng.randint(0, 2**31 - 1),
        )
        result = GameRunner(agents, engine=engine).run()
        if result.winner is None:
            unfinished += 1
            continue
        wins[result.winner] += 1
        for seat, points in result.scores.items():
            scores[seat] += points
        logger.debug("Round %d won by seat %d", g, result.winner)

    return TournamentResult(wins=dict(wins), scores=dict(scores), unfinished=unfinished)
