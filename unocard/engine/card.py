"""Card, Color and Content types for UNO."""

from dataclasses import dataclass, field, replace
from enum import Enum


class Color(str, Enum):
    """Card colors. NONE is the at-rest color of wild cards."""

    NONE = "none"
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


# Playable colors, in tie-break priority order
COLORS = (Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW)


class Content(str, Enum):
    """Card contents."""

    NUM0 = "0"
    NUM1 = "1"
    NUM2 = "2"
    NUM3 = "3"
    NUM4 = "4"
    NUM5 = "5"
    NUM6 = "6"
    NUM7 = "7"
    NUM8 = "8"
    NUM9 = "9"
    DRAW2 = "draw_two"
    SKIP = "skip"
    REV = "reverse"
    WILD = "wild"
    WILD_DRAW4 = "wild_draw_four"


_COLOR_ORDER = {color: i for i, color in enumerate(Color)}
_CONTENT_ORDER = {content: i for i, content in enumerate(Content)}

_CONTENT_NAMES = {
    Content.DRAW2: "+2",
    Content.SKIP: "Skip",
    Content.REV: "Reverse",
    Content.WILD: "Wild",
    Content.WILD_DRAW4: "Wild +4",
}


@dataclass(frozen=True)
class Card:
    """A UNO card.

    For number/action cards: color is one of RED, BLUE, GREEN, YELLOW.
    For wild cards: color is NONE while in the deck or a hand. Once played,
    wild_color holds the following legal color chosen by its player.
    wild_color never takes part in equality, so a played wild still equals
    its at-rest twin.
    """

    color: Color
    content: Content
    wild_color: Color = field(default=Color.NONE, compare=False)

    def __post_init__(self) -> None:
        if self.is_wild and self.color is not Color.NONE:
            raise ValueError("Wild cards must have color=NONE")
        if not self.is_wild and self.color is Color.NONE:
            raise ValueError("Non-wild cards must have a color")
        if not self.is_wild and self.wild_color is not Color.NONE:
            raise ValueError("Only wild cards carry a wild color")

    @property
    def is_wild(self) -> bool:
        return self.content in (Content.WILD, Content.WILD_DRAW4)

    @property
    def is_action(self) -> bool:
        return self.content in (Content.DRAW2, Content.SKIP, Content.REV)

    @property
    def real_color(self) -> Color:
        """Color to be matched: the chosen color for wilds, else the color."""
        return self.wild_color if self.is_wild else self.color

    @property
    def sort_key(self) -> tuple[int, int]:
        return _COLOR_ORDER[self.color], _CONTENT_ORDER[self.content]

    @property
    def name(self) -> str:
        """Display name, e.g. "Blue 3" or "Wild +4"."""
        label = _CONTENT_NAMES.get(self.content, self.content.value)
        if self.is_wild:
            return label
        return f"{self.color.value.capitalize()} {label}"

    @property
    def score(self) -> int:
        """Point value when left in a hand at the end of a round."""
        if self.is_wild:
            return 50
        if self.is_action:
            return 20
        return int(self.content.value)

    def with_wild_color(self, color: Color) -> "Card":
        """Return the played copy of a wild card carrying its chosen color."""
        return replace(self, wild_color=color)

    def at_rest(self) -> "Card":
        """Return the card as it sits in a deck, without a chosen color."""
        if self.wild_color is Color.NONE:
            return self
        return replace(self, wild_color=Color.NONE)

    def __str__(self) -> str:
        if self.is_wild and self.wild_color is not Color.NONE:
            return f"{self.name} ({self.wild_color.value})"
        return self.name


def create_card_table() -> list[Card]:
    """Return the fixed 108-card multiset of a standard UNO deck, unshuffled.

    - 4 colors x (one 0, two each of 1-9, Skip, Reverse, Draw Two): 100 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    """
    cards: list[Card] = []
    for color in COLORS:
        # One zero per color
        cards.append(Card(color, Content.NUM0))
        for content in Content:
            if content is Content.NUM0 or content in (Content.WILD, Content.WILD_DRAW4):
                continue
            cards.append(Card(color, content))
            cards.append(Card(color, content))

    for _ in range(4):
        cards.append(Card(Color.NONE, Content.WILD))
        cards.append(Card(Color.NONE, Content.WILD_DRAW4))

    return cards
