"""Game engine for UNO."""

from unocard.engine.card import Card, Color, Content, COLORS
from unocard.engine.deck import create_deck, Deck
from unocard.engine.game_state import PlayerView
from unocard.engine.player import Player, YOU, WEST, NORTH, EAST
from unocard.engine.rules import (
    PlayCard,
    Difficulty,
    UnoEngine,
    DIR_LEFT,
    DIR_RIGHT,
    MAX_HOLD_CARDS,
)

__all__ = [
    "Card",
    "Color",
    "Content",
    "COLORS",
    "create_deck",
    "Deck",
    "PlayerView",
    "Player",
    "YOU",
    "WEST",
    "NORTH",
    "EAST",
    "PlayCard",
    "Difficulty",
    "UnoEngine",
    "DIR_LEFT",
    "DIR_RIGHT",
    "MAX_HOLD_CARDS",
]
