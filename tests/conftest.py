"""Shared fixtures."""

from typing import Dict, List, Optional

import pytest

from unocard.engine import Card, UnoEngine


def rig_engine(
    engine: UnoEngine,
    hands: Dict[int, List[Card]],
    discard: List[Card],
    now: Optional[int] = None,
) -> UnoEngine:
    """Rearrange a started engine's cards without creating or losing any.

    Seats missing from hands end up empty; every card not named goes to the
    draw pile.
    """
    deck = engine._deck
    pool = list(deck.draw_pile) + [card.at_rest() for card in deck.discard]
    for player in engine._seats:
        pool.extend(player.hand)
        player.reset()

    def take(card: Card) -> Card:
        pool.pop(pool.index(card))
        return card

    for seat, cards in hands.items():
        player = engine._seats[seat]
        player.hand = [take(card) for card in cards]
        player.sort_hand()
    deck.discard = [take(card) for card in discard]
    deck.draw_pile = pool
    engine._pending = 0
    if now is not None:
        engine._now = now
    engine._check_invariants()
    return engine


@pytest.fixture
def rig():
    return rig_engine


@pytest.fixture
def engine() -> UnoEngine:
    e = UnoEngine(players=4, seed=7)
    e.start()
    return e


def _total_cards(engine: UnoEngine) -> int:
    held = sum(engine.get_player(s).hand_size for s in engine.active_seats())
    return engine.deck_count + len(engine.recent) + held


@pytest.fixture
def total_cards():
    return _total_cards
