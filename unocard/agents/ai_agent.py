"""AI agent - plays through the strategy functions."""

from typing import Optional

from unocard.agents.strategy import best_card_index, best_swap_target, need_to_challenge
from unocard.engine import Difficulty, PlayCard, PlayerView


class AIAgent:
    """Agent that picks moves with the EASY or HARD strategies."""

    def __init__(self, difficulty: Difficulty = Difficulty.EASY, name: Optional[str] = None):
        self._difficulty = Difficulty(difficulty)
        self._name = name or f"ai-{self._difficulty.value}"

    @property
    def name(self) -> str:
        return self._name

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    def choose_card(
        self,
        player_view: PlayerView,
        drawn_index: Optional[int] = None,
    ) -> Optional[PlayCard]:
        return best_card_index(player_view, self._difficulty, drawn_index)

    def choose_challenge(self, player_view: PlayerView) -> bool:
        return need_to_challenge(player_view, self._difficulty)

    def choose_swap_target(self, player_view: PlayerView) -> int:
        return best_swap_target(player_view, self._difficulty)
