"""UNO rules: legality checks and atomic state transitions.

The engine never sequences multi-step effects (skip, reverse, draw two,
challenges, seven/zero swaps) on its own. Callers apply them through the
primitives switch_now(), switch_direction(), cycle(), swap() and draw().
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from unocard.engine.card import Card, Color, Content
from unocard.engine.deck import DECK_SIZE, Deck
from unocard.engine.player import NORTH, Player

logger = logging.getLogger(__name__)

DIR_LEFT = 1
DIR_RIGHT = 3
MAX_HOLD_CARDS = 15
INITIAL_HAND = 7


class Difficulty(str, Enum):
    """AI difficulty tiers."""

    EASY = "easy"
    HARD = "hard"


@dataclass
class PlayCard:
    """Action: play the card at index. For wilds, chosen_color is the following color."""

    index: int
    chosen_color: Color = Color.NONE


class UnoEngine:
    """Owns the deck, the four seats, turn order and house-rule flags."""

    def __init__(
        self,
        players: int = 4,
        difficulty: Difficulty = Difficulty.EASY,
        seven_zero_rule: bool = False,
        draw2_stack_rule: bool = False,
        seed: Optional[int] = None,
    ):
        self._rng = random.Random(seed)
        self._deck = Deck(self._rng)
        self._players = _check_players(players)
        self._next_players = self._players
        self._difficulty = Difficulty(difficulty)
        self.seven_zero_rule = seven_zero_rule
        self.draw2_stack_rule = draw2_stack_rule
        self._seats = [Player(seat) for seat in range(4)]
        self._now = 0
        self._direction = DIR_LEFT
        self._pending = 0
        self.history: List[str] = []

    # Queries

    @property
    def players(self) -> int:
        return self._players

    @players.setter
    def players(self, count: int) -> None:
        """Set 3 or 4 players. Takes effect now if no round is running, else at the next start()."""
        self._next_players = _check_players(count)
        if not self._deck.discard:
            self._players = self._next_players

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @difficulty.setter
    def difficulty(self, value: Difficulty) -> None:
        self._difficulty = Difficulty(value)

    @property
    def now(self) -> int:
        return self._now

    @property
    def direction(self) -> int:
        """DIR_LEFT for clockwise, DIR_RIGHT for counter-clockwise."""
        return self._direction

    @property
    def next_seat(self) -> int:
        return self._step(self._now, self._direction)

    @property
    def prev_seat(self) -> int:
        return self._step(self._now, 4 - self._direction)

    @property
    def oppo_seat(self) -> int:
        """The seat across the table. Equals next_seat's next in 4-player mode."""
        return self._step(self.next_seat, self._direction)

    @property
    def pending_draw_count(self) -> int:
        return self._pending

    @property
    def deck_count(self) -> int:
        return self._deck.deck_count

    @property
    def used_count(self) -> int:
        return self._deck.used_count

    @property
    def recent(self) -> tuple[Card, ...]:
        """Discard history, newest last."""
        return tuple(self._deck.discard)

    @property
    def top(self) -> Optional[Card]:
        return self._deck.top

    @property
    def last_color(self) -> Color:
        top = self._deck.top
        return top.real_color if top else Color.NONE

    def active_seats(self) -> List[int]:
        return [seat for seat in range(4) if self._players == 4 or seat != NORTH]

    def get_player(self, who: int) -> Optional[Player]:
        if who not in self.active_seats():
            return None
        return self._seats[who]

    def is_hand_full(self, who: int) -> bool:
        player = self.get_player(who)
        return player is None or player.hand_size >= MAX_HOLD_CARDS

    def is_legal_to_play(self, card: Card) -> bool:
        """Check whether card may be put on the current top discard."""
        top = self._deck.top
        if top is None:
            return False
        if self._pending > 0:
            # Only a stacked +2 avoids drawing
            return self.draw2_stack_rule and card.content is Content.DRAW2
        return (
            card.is_wild
            or card.content is top.content
            or card.color is top.real_color
        )

    def legal_cards_count_for_now_player(self) -> int:
        hand = self._seats[self._now].hand
        return sum(1 for card in hand if self.is_legal_to_play(card))

    def is_draw4_legal(self, who: int) -> bool:
        """Whether the Wild +4 on top was fairly played by seat who.

        It was illegal when who still holds a card matching the real color of
        the card beneath it.
        """
        discard = self._deck.discard
        player = self.get_player(who)
        if len(discard) < 2 or player is None:
            return True
        color_before = discard[-2].real_color
        return all(card.real_color is not color_before for card in player.hand)

    # Commands

    def start(self) -> None:
        """Shuffle, deal 7 cards to every active seat, then flip the start card."""
        self._players = self._next_players
        for player in self._seats:
            player.reset()
        self._deck.reset()
        active = self.active_seats()
        for _ in range(INITIAL_HAND):
            for seat in active:
                self._seats[seat].hand.append(self._deck.deal())
        for seat in active:
            self._seats[seat].sort_hand()
        start_card = self._deck.flip_start_card()
        self._direction = DIR_LEFT
        self._pending = 0
        self._now = self._rng.choice(active)
        self.history = []
        self._log(f"Round started, first card {start_card}, {self._seats[self._now].name} goes first")
        logger.info("Round started with %d players, first card %s", self._players, start_card)
        self._check_invariants()

    def play(self, who: int, index: int, color: Color = Color.NONE) -> Optional[Card]:
        """Play the card at index from who's hand.

        Returns the played card, or None when the seat/index is invalid or
        the card is not legal to play. Effects such as skip or reverse are
        left to the caller.
        """
        player = self.get_player(who)
        if player is None or not 0 <= index < player.hand_size:
            return None
        card = player.hand[index]
        if not self.is_legal_to_play(card):
            return None

        player.hand.pop(index)
        if card.is_wild:
            if color is Color.NONE:
                color = Color.RED
            card = card.with_wild_color(color)
            player.strong_color = color
        elif card.color is player.strong_color:
            player.strong_color = Color.NONE
        player.weak_color = Color.NONE
        player.recent = card
        self._deck.put(card)

        if card.content is Content.DRAW2:
            self._pending += 2

        self._log(f"{player.name} played {card}")
        logger.debug("Seat %d played %s, %d cards left", who, card, player.hand_size)
        self._check_invariants()
        return card

    def draw(self, who: int, force: bool = False) -> int:
        """Draw one card for who.

        Returns the index of the drawn card in the sorted hand, or -1 when
        the seat already holds MAX_HOLD_CARDS or no card is left anywhere.
        A forced draw pays off one card of the pending draw count and leaves
        the weak color hint alone, as the seat did not choose to draw.
        """
        player = self.get_player(who)
        if player is None or player.hand_size >= MAX_HOLD_CARDS:
            return -1
        card = self._deck.deal()
        if card is None:
            return -1

        player.hand.append(card)
        player.sort_hand()
        player.recent = None
        if not force:
            player.weak_color = self.last_color
        elif self._pending > 0:
            self._pending -= 1

        self._log(f"{player.name} drew a card")
        logger.debug("Seat %d drew %s (force=%s)", who, card, force)
        self._check_invariants()
        # A sorted hand can hold equal cards; the drawn one is the last of its run
        return max(i for i, held in enumerate(player.hand) if held is card)

    def draw_pending(self, who: int) -> List[int]:
        """Draw every card the pending draw count obliges who to take.

        Stops early when the hand cap is hit; the obligation is cleared either way.
        """
        drawn = []
        while self._pending > 0:
            index = self.draw(who, force=True)
            if index < 0:
                break
            drawn.append(index)
        if self._pending:
            logger.debug("Seat %d hit the hand cap, %d pending cards dropped", who, self._pending)
        self._pending = 0
        return drawn

    def switch_now(self) -> int:
        """Pass the turn to the next active seat and return it."""
        self._now = self.next_seat
        return self._now

    def switch_direction(self) -> int:
        self._direction = DIR_RIGHT if self._direction == DIR_LEFT else DIR_LEFT
        self._log("Direction reversed")
        return self._direction

    def cycle(self) -> None:
        """Pass every active hand to the next seat in the current direction."""
        active = self.active_seats()
        moved = {
            self._step(seat, self._direction): _take_hand(self._seats[seat])
            for seat in active
        }
        for seat, holding in moved.items():
            _give_hand(self._seats[seat], holding)
        self._log("Hands passed to the next seat")
        self._check_invariants()

    def swap(self, a: int, b: int) -> None:
        """Exchange the hands of seats a and b."""
        pa, pb = self.get_player(a), self.get_player(b)
        if pa is None or pb is None or a == b:
            return
        holding = _take_hand(pa)
        _give_hand(pa, _take_hand(pb))
        _give_hand(pb, holding)
        self._log(f"{pa.name} swapped hands with {pb.name}")

    # Internals

    def _step(self, seat: int, direction: int) -> int:
        seat = (seat + direction) % 4
        if self._players == 3 and seat == NORTH:
            seat = (seat + direction) % 4
        return seat

    def _log(self, event: str) -> None:
        self.history.append(event)

    def _check_invariants(self) -> None:
        held = sum(self._seats[seat].hand_size for seat in range(4))
        total = self._deck.deck_count + len(self._deck.discard) + held
        assert total == DECK_SIZE, f"Deck imbalance: {total} cards accounted for"
        assert self._pending >= 0, "Negative pending draw count"


def _check_players(count: int) -> int:
    if count not in (3, 4):
        raise ValueError(f"Invalid player count: {count}")
    return count


def _take_hand(player: Player) -> tuple[List[Card], Color, Color]:
    return player.hand, player.strong_color, player.weak_color


def _give_hand(player: Player, holding: tuple[List[Card], Color, Color]) -> None:
    player.hand, player.strong_color, player.weak_color = holding
