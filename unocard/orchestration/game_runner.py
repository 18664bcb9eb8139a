"""Single round runner.

Sequences the multi-step consequences of each play (skips, reversals,
draw-two chains, Wild +4 challenges, seven/zero swaps) as a series of
atomic engine calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Optional

from unocard.engine import Card, Content, PlayerView, UnoEngine

if TYPE_CHECKING:
    from unocard.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed round."""

    winner: Optional[int]
    num_turns: int
    seats: tuple[int, ...]
    scores: Dict[int, int] = field(default_factory=dict)
    history: tuple[str, ...] = ()


class GameRunner:
    """Runs a single UNO round to completion."""

    def __init__(
        self,
        agents: dict[int, "AgentProtocol"],
        engine: Optional[UnoEngine] = None,
        seed: Optional[int] = None,
        max_turns: int = 1000,
    ):
        self._agents = agents
        self._engine = engine or UnoEngine(players=len(agents), seed=seed)
        self._max_turns = max_turns
        missing = set(self._engine.active_seats()) - set(agents)
        if missing:
            raise ValueError(f"No agent for seats: {sorted(missing)}")

    @property
    def engine(self) -> UnoEngine:
        return self._engine

    def run(self) -> GameResult:
        """Start a round, play it out and return the result."""
        engine = self._engine
        engine.start()
        self._resolve_opener()
        winner = None
        num_turns = 0

        while winner is None and num_turns < self._max_turns:
            winner = self._take_turn()
            num_turns += 1

        scores: Dict[int, int] = {}
        if winner is not None:
            scores[winner] = sum(
                engine.get_player(s).hand_score for s in engine.active_seats() if s != winner
            )
            logger.info("Seat %d won after %d turns, scoring %d", winner, num_turns, scores[winner])
        else:
            logger.info("Round stopped after %d turns without a winner", num_turns)

        return GameResult(
            winner=winner,
            num_turns=num_turns,
            seats=tuple(engine.active_seats()),
            scores=scores,
            history=tuple(engine.history),
        )

    def _view(self, seat: int) -> PlayerView:
        return PlayerView.from_engine(self._engine, seat)

    def _resolve_opener(self) -> None:
        # An action start card hits the first seat as if the dealer played it
        engine = self._engine
        top = engine.top
        if top is None:
            return
        if top.content is Content.SKIP:
            engine.switch_now()
        elif top.content is Content.REV:
            engine.switch_direction()
        elif top.content is Content.DRAW2:
            for _ in range(2):
                engine.draw(engine.now, force=True)
            engine.switch_now()

    def _take_turn(self) -> Optional[int]:
        """Let the seat in action move. Returns the winner, if any."""
        engine = self._engine
        now = engine.now
        agent = self._agents[now]

        if engine.legal_cards_count_for_now_player() == 0:
            if engine.pending_draw_count > 0:
                engine.draw_pending(now)
                engine.switch_now()
                return None
            return self._draw_and_maybe_play(now)

        choice = agent.choose_card(self._view(now))
        if choice is None:
            if engine.pending_draw_count > 0:
                engine.draw_pending(now)
                engine.switch_now()
                return None
            return self._draw_and_maybe_play(now)

        card = engine.play(now, choice.index, choice.chosen_color)
        if card is None:
            logger.warning("%s chose an illegal card, drawing instead", agent.name)
            if engine.pending_draw_count > 0:
                engine.draw_pending(now)
                engine.switch_now()
                return None
            return self._draw_and_maybe_play(now)
        return self._after_play(now, card)

    def _draw_and_maybe_play(self, now: int) -> Optional[int]:
        engine = self._engine
        index = engine.draw(now)
        if index >= 0 and engine.is_legal_to_play(engine.get_player(now).hand[index]):
            choice = self._agents[now].choose_card(self._view(now), drawn_index=index)
            if choice is not None and choice.index == index:
                card = engine.play(now, index, choice.chosen_color)
                if card is not None:
                    return self._after_play(now, card)
        engine.switch_now()
        return None

    def _after_play(self, now: int, card: Card) -> Optional[int]:
        engine = self._engine
        if engine.get_player(now).hand_size == 0:
            return now

        content = card.content
        if content is Content.SKIP:
            engine.switch_now()
            engine.switch_now()
        elif content is Content.REV:
            engine.switch_direction()
            engine.switch_now()
        elif content is Content.WILD_DRAW4:
            self._challenge(now)
        elif content is Content.NUM7 and engine.seven_zero_rule:
            target = self._agents[now].choose_swap_target(self._view(now))
            engine.swap(now, target)
            engine.switch_now()
        elif content is Content.NUM0 and engine.seven_zero_rule:
            engine.cycle()
            engine.switch_now()
        else:
            # DRAW2 left its pending count for the next seat to stack or draw
            engine.switch_now()
        return None

    def _challenge(self, accused: int) -> None:
        engine = self._engine
        challenger = engine.switch_now()
        challenged = self._agents[challenger].choose_challenge(self._view(challenger))
        if not challenged:
            self._draw_many(challenger, 4)
            engine.switch_now()
        elif engine.is_draw4_legal(accused):
            logger.debug("Seat %d challenged seat %d and failed", challenger, accused)
            self._draw_many(challenger, 6)
            engine.switch_now()
        else:
            # Challenger keeps its turn
            logger.debug("Seat %d challenged seat %d and succeeded", challenger, accused)
            self._draw_many(accused, 4)

    def _draw_many(self, seat: int, count: int) -> None:
        for _ in range(count):
            if self._engine.draw(seat, force=True) < 0:
                break
