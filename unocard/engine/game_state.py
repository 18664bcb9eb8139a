"""Read-only snapshot of the engine as seen from one seat."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from unocard.engine.card import Card, Color
from unocard.engine.rules import UnoEngine


@dataclass(frozen=True)
class PlayerView:
    """Filtered game state visible to a single seat.

    Contains only that seat's hand plus public info: hand sizes, color
    hints and the discard history.
    """

    seat: int
    my_hand: tuple[Card, ...]
    legal: tuple[bool, ...]  # legality of each card in my_hand
    recent: tuple[Card, ...]  # discard history, newest last
    now: int
    next_seat: int
    prev_seat: int
    oppo_seat: Optional[int]  # None with three players
    direction: int
    players: int
    pending_draws: int
    seven_zero_rule: bool
    draw2_stack_rule: bool
    hand_sizes: Dict[int, int]
    strong_colors: Dict[int, Color]
    weak_colors: Dict[int, Color]
    history: List[str]  # Recent game events

    @classmethod
    def from_engine(cls, engine: UnoEngine, seat: int) -> "PlayerView":
        """Create a view of engine for seat, hiding other seats' hands."""
        active = engine.active_seats()
        players = {s: engine.get_player(s) for s in active}
        hand = tuple(players[seat].hand)
        return cls(
            seat=seat,
            my_hand=hand,
            legal=tuple(engine.is_legal_to_play(card) for card in hand),
            recent=engine.recent,
            now=engine.now,
            next_seat=engine.next_seat,
            prev_seat=engine.prev_seat,
            oppo_seat=engine.oppo_seat if engine.players == 4 else None,
            direction=engine.direction,
            players=engine.players,
            pending_draws=engine.pending_draw_count,
            seven_zero_rule=engine.seven_zero_rule,
            draw2_stack_rule=engine.draw2_stack_rule,
            hand_sizes={s: p.hand_size for s, p in players.items()},
            strong_colors={s: p.strong_color for s, p in players.items()},
            weak_colors={s: p.weak_color for s, p in players.items()},
            history=list(engine.history[-10:]),  # Last 10 events
        )

    @property
    def top_discard(self) -> Optional[Card]:
        return self.recent[-1] if self.recent else None

    @property
    def last_color(self) -> Color:
        top = self.top_discard
        return top.real_color if top else Color.NONE

    def opponents(self) -> List[int]:
        return [s for s in self.hand_sizes if s != self.seat]
