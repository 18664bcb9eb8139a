"""AI strategies for choosing cards, wild colors, challenges and swap targets.

Every function here is pure: it reads a PlayerView and never touches the
engine. The caller applies the returned decision.
"""

from typing import Dict, List, Optional, Sequence

from unocard.engine.card import COLORS, Card, Color, Content
from unocard.engine.deck import DECK_SIZE
from unocard.engine.game_state import PlayerView
from unocard.engine.rules import MAX_HOLD_CARDS, Difficulty, PlayCard

# Probability of an unfair Wild +4 above which HARD challenges
CHALLENGE_THRESHOLD = 0.6
CARDS_PER_COLOR = 25


def color_counts(hand: Sequence[Card], skip: Optional[int] = None) -> Dict[Color, int]:
    """Count colored cards per color, ignoring the card at index skip."""
    counts = {color: 0 for color in COLORS}
    for i, card in enumerate(hand):
        if i != skip and not card.is_wild:
            counts[card.color] += 1
    return counts


def color_scores(hand: Sequence[Card], skip: Optional[int] = None) -> Dict[Color, int]:
    """Weigh each color by what its cards are worth keeping control of.

    Zero and reverse cards are worth 2 points, other number cards 4, skip and
    draw two cards 5.
    """
    scores = {color: 0 for color in COLORS}
    for i, card in enumerate(hand):
        if i == skip or card.is_wild:
            continue
        if card.content in (Content.NUM0, Content.REV):
            scores[card.color] += 2
        elif card.content in (Content.SKIP, Content.DRAW2):
            scores[card.color] += 5
        else:
            scores[card.color] += 4
    return scores


def _top_color(values: Dict[Color, int]) -> Color:
    # Ties go to the earlier color in COLORS; RED when nothing is held
    best = COLORS[0]
    for color in COLORS[1:]:
        if values[color] > values[best]:
            best = color
    return best


def best_color(hand: Sequence[Card], skip: Optional[int] = None) -> Color:
    return _top_color(color_scores(hand, skip))


def _candidates(view: PlayerView, drawn_index: Optional[int]) -> List[int]:
    if drawn_index is not None:
        indices = [drawn_index] if 0 <= drawn_index < len(view.my_hand) else []
    else:
        indices = range(len(view.my_hand))
    return [i for i in indices if view.legal[i]]


def best_card_index(
    view: PlayerView,
    difficulty: Difficulty,
    drawn_index: Optional[int] = None,
) -> Optional[PlayCard]:
    """Pick the card to play and, for wilds, the following color.

    Args:
        view: The acting seat's view.
        difficulty: EASY or HARD.
        drawn_index: Index of a card just drawn. Only that card may be
            played right after a draw.

    Returns:
        The chosen play, or None when no candidate is legal.
    """
    candidates = _candidates(view, drawn_index)
    if not candidates:
        return None

    hand = view.my_hand
    if Difficulty(difficulty) is Difficulty.HARD and len(hand) > 1:
        return _hard_choice(view, candidates)

    # EASY, or a single legal card left
    index = candidates[0]
    color = _easy_wild_color(hand, index) if hand[index].is_wild else Color.NONE
    return PlayCard(index=index, chosen_color=color)


def _easy_wild_color(hand: Sequence[Card], index: int) -> Color:
    return _top_color(color_counts(hand, skip=index))


def _holds_color(hand: Sequence[Card], color: Color) -> bool:
    return any(not card.is_wild and card.color is color for card in hand)


def _hard_choice(view: PlayerView, candidates: List[int]) -> PlayCard:
    hand = view.my_hand
    scores = color_scores(hand)
    threatened = view.next_seat != view.seat and view.hand_sizes.get(view.next_seat) == 1

    def pick(index: int) -> PlayCard:
        if hand[index].is_wild:
            return PlayCard(index=index, chosen_color=_hard_wild_color(view, index, threatened))
        return PlayCard(index=index)

    def first_of(content: Content) -> Optional[int]:
        # Among equal contents, the one in the color worth the most to keep control of
        matches = [i for i in candidates if hand[i].content is content]
        if not matches:
            return None
        return max(matches, key=lambda i: (scores.get(hand[i].color, 0), -i))

    if threatened:
        # Next seat is one card from winning: hit it as hard as possible
        for content in (Content.DRAW2, Content.SKIP):
            index = first_of(content)
            if index is not None:
                return pick(index)
        index = first_of(Content.WILD_DRAW4)
        if index is not None and not _holds_color(hand, view.last_color):
            return pick(index)
        index = first_of(Content.WILD)
        if index is not None:
            return pick(index)

    weak = {view.weak_colors[s] for s in view.opponents()} - {Color.NONE}
    next_weak = view.weak_colors.get(view.next_seat, Color.NONE)
    prev_close = view.hand_sizes.get(view.prev_seat, 0) == 1 and view.prev_seat != view.seat

    def rank(i: int) -> tuple:
        card = hand[i]
        return (
            not card.is_wild,
            card.content is not Content.WILD_DRAW4,
            not card.is_wild and card.color is next_weak,
            not card.is_wild and card.color in weak,
            scores.get(card.color, 0),
            # Save action cards while the previous seat is about to win
            not (prev_close and card.is_action),
            not card.is_action,
            -i,
        )

    return pick(max(candidates, key=rank))


def _hard_wild_color(view: PlayerView, index: int, threatened: bool) -> Color:
    scores = color_scores(view.my_hand, skip=index)
    strong = {view.strong_colors[s] for s in view.opponents()} - {Color.NONE}
    options = [color for color in COLORS if color not in strong] or list(COLORS)
    next_weak = view.weak_colors.get(view.next_seat, Color.NONE)

    def rank(color: Color) -> tuple:
        if threatened:
            return (color is next_weak, scores[color], -COLORS.index(color))
        return (scores[color], color is next_weak, -COLORS.index(color))

    return max(options, key=rank)


def illegal_draw4_probability(view: PlayerView) -> float:
    """Estimate the chance that the Wild +4 on top was played unfairly.

    The accused (previous seat) played it fairly only when it held no card of
    the color beneath it. From public counts, estimate the chance that its
    hand holds at least one such card.
    """
    if len(view.recent) < 2:
        return 0.0
    accused = view.prev_seat
    color = view.recent[-2].real_color
    held = view.hand_sizes.get(accused, 0)

    seen = sum(1 for card in view.recent if not card.is_wild and card.color is color)
    seen += sum(1 for card in view.my_hand if not card.is_wild and card.color is color)
    hidden_color = max(0, CARDS_PER_COLOR - seen)
    hidden = DECK_SIZE - len(view.recent) - len(view.my_hand)
    if hidden <= 0 or held == 0 or hidden_color == 0:
        return 0.0

    # Hypergeometric chance that none of its cards is of that color
    none_held = 1.0
    for k in range(held):
        others = hidden - hidden_color - k
        if others <= 0:
            none_held = 0.0
            break
        none_held *= others / (hidden - k)

    probability = 1.0 - none_held
    if view.weak_colors.get(accused) is color:
        # It drew on that color before, so it probably lacks it
        probability /= 2
    return probability


def need_to_challenge(view: PlayerView, difficulty: Difficulty) -> bool:
    """Decide whether to challenge the Wild +4 just played on this seat.

    EASY never challenges. HARD challenges to defend its own UNO, when it
    already holds so many cards that 6 more barely hurt, when the color was
    not changed by the Wild +4, or when an unfair play looks likely.
    """
    if Difficulty(difficulty) is Difficulty.EASY:
        return False

    size = len(view.my_hand)
    if size == 1 or size >= MAX_HOLD_CARDS - 4:
        return True
    if len(view.recent) < 2:
        return False
    if view.recent[-1].real_color is view.recent[-2].real_color:
        return True
    return illegal_draw4_probability(view) > CHALLENGE_THRESHOLD


def best_swap_target(view: PlayerView, difficulty: Difficulty) -> int:
    """Choose whom to swap hands with after playing a seven.

    EASY swaps with the next seat. HARD starts from the previous seat and
    moves to the opposite or next seat when that one holds fewer cards (and
    did not draw on the current color), or holds the current color as its
    strong color while the current target does not.
    """
    if Difficulty(difficulty) is Difficulty.EASY:
        return view.next_seat

    last = view.last_color
    sizes, weak, strong = view.hand_sizes, view.weak_colors, view.strong_colors
    who = view.prev_seat
    for seat in (view.oppo_seat, view.next_seat):
        if seat is None or seat in (who, view.seat):
            continue
        fewer = sizes[seat] < sizes[who] and weak[seat] is not last
        stronger = strong[seat] is last and strong[who] is not last
        if fewer or stronger:
            who = seat
    return who
