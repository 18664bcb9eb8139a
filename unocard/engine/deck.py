"""Deck creation, shuffling, and the draw/discard piles."""

import logging
import random
from typing import List, Optional

from unocard.engine.card import Card, Content, create_card_table

logger = logging.getLogger(__name__)

DECK_SIZE = 108
RECENT_WINDOW = 5


def create_deck(seed: int | None = None, rng: Optional[random.Random] = None) -> List[Card]:
    """Create a shuffled standard 108-card UNO deck.

    Pass either a seed or an existing Random instance to make the order
    reproducible.
    """
    cards = create_card_table()
    if rng is None:
        rng = random.Random(seed)
    rng.shuffle(cards)
    return cards


class Deck:
    """Draw pile plus discard history (newest last)."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self.draw_pile: List[Card] = []
        self.discard: List[Card] = []

    def reset(self) -> None:
        """Gather all 108 cards back into a freshly shuffled draw pile."""
        self.draw_pile = create_deck(rng=self._rng)
        self.discard = []

    @property
    def deck_count(self) -> int:
        """How many cards are left in the draw pile."""
        return len(self.draw_pile)

    @property
    def used_count(self) -> int:
        """How many discards have slid out of the visible recent window."""
        return max(0, len(self.discard) - RECENT_WINDOW)

    @property
    def top(self) -> Optional[Card]:
        return self.discard[-1] if self.discard else None

    def flip_start_card(self) -> Optional[Card]:
        """Move the first non-wild card of the draw pile onto the discard.

        Wild cards met on the way go back under the draw pile.
        """
        wilds = []
        first = None
        while self.draw_pile:
            card = self.draw_pile.pop()
            if card.content in (Content.WILD, Content.WILD_DRAW4):
                wilds.append(card)
            else:
                first = card
                break
        self.draw_pile[:0] = wilds
        if first is not None:
            self.discard.append(first)
        return first

    def deal(self) -> Optional[Card]:
        """Take the top card of the draw pile, reshuffling when it is empty."""
        if not self.draw_pile:
            self._reshuffle()
        if not self.draw_pile:
            return None
        return self.draw_pile.pop()

    def put(self, card: Card) -> None:
        self.discard.append(card)

    def _reshuffle(self) -> None:
        # Everything except the top discard goes back, wild colors cleared
        if len(self.discard) < 2:
            return
        top = self.discard[-1]
        refill = [card.at_rest() for card in self.discard[:-1]]
        self._rng.shuffle(refill)
        self.draw_pile = refill
        self.discard = [top]
        logger.info("Reshuffled %d discarded cards into the draw pile", len(refill))
