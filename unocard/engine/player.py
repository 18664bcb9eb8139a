"""Per-seat player state."""

from dataclasses import dataclass, field
from typing import List, Optional

from unocard.engine.card import Card, Color

YOU = 0
WEST = 1
NORTH = 2
EAST = 3

SEAT_NAMES = ("YOU", "WEST", "NORTH", "EAST")


@dataclass
class Player:
    """A seat's hand and the color hints other seats may read.

    strong_color: the color this seat named the last time it played a wild
    card, until it plays a non-wild card of that color.
    weak_color: the top discard's color the last time this seat drew instead
    of playing, until it plays again.
    """

    seat: int
    hand: List[Card] = field(default_factory=list)
    strong_color: Color = Color.NONE
    weak_color: Color = Color.NONE
    recent: Optional[Card] = None  # None after a draw

    @property
    def name(self) -> str:
        return SEAT_NAMES[self.seat]

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    @property
    def hand_score(self) -> int:
        """Wilds are worth 50, actions 20, number cards their face value."""
        return sum(card.score for card in self.hand)

    def sort_hand(self) -> None:
        self.hand.sort(key=lambda card: card.sort_key)

    def reset(self) -> None:
        self.hand = []
        self.strong_color = Color.NONE
        self.weak_color = Color.NONE
        self.recent = None
