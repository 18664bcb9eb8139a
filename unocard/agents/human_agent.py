"""Human agent - reads moves from terminal."""

from typing import Optional

from unocard.engine import COLORS, Color, PlayCard, PlayerView
from unocard.engine.player import SEAT_NAMES


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def choose_card(
        self,
        player_view: PlayerView,
        drawn_index: Optional[int] = None,
    ) -> Optional[PlayCard]:
        hand = player_view.my_hand
        print("\n--- Your turn ---")
        for event in player_view.history[-3:]:
            print(f"> {event}")
        print("Top discard:", player_view.top_discard)
        if player_view.pending_draws:
            print(f"You must draw {player_view.pending_draws} cards unless you stack a +2")
        print("Other hands:", ", ".join(
            f"{SEAT_NAMES[s]}={n}" for s, n in player_view.hand_sizes.items() if s != player_view.seat
        ))

        if drawn_index is not None:
            options = [drawn_index] if player_view.legal[drawn_index] else []
            print(f"You drew {hand[drawn_index]}")
        else:
            options = [i for i, ok in enumerate(player_view.legal) if ok]

        print("\nYour hand:")
        for i, card in enumerate(hand):
            mark = "*" if i in options else " "
            print(f" {mark}{i}: {card}")
        print("Enter a starred number to play it, or d to draw/pass.")

        while True:
            try:
                raw = input("> ").strip().lower()
            except EOFError:
                return None
            if raw in ("d", "draw", "p", "pass", ""):
                return None
            if raw.isdigit() and int(raw) in options:
                index = int(raw)
                color = self._ask_color() if hand[index].is_wild else Color.NONE
                return PlayCard(index=index, chosen_color=color)
            print("Invalid. Try again.")

    def choose_challenge(self, player_view: PlayerView) -> bool:
        accused = SEAT_NAMES[player_view.prev_seat]
        return self._ask_yes_no(f"{accused} played Wild +4 on you. Challenge its legality?")

    def choose_swap_target(self, player_view: PlayerView) -> int:
        seats = [s for s in player_view.hand_sizes if s != player_view.seat]
        names = ", ".join(f"{s}={SEAT_NAMES[s]}" for s in seats)
        while True:
            try:
                raw = input(f"Swap hands with whom? ({names}) ").strip()
            except EOFError:
                return player_view.next_seat
            if raw.isdigit() and int(raw) in seats:
                return int(raw)
            print("Invalid. Try again.")

    def _ask_color(self) -> Color:
        names = "/".join(c.value for c in COLORS)
        while True:
            try:
                raw = input(f"Choose the following color ({names}): ").strip().lower()
            except EOFError:
                return Color.RED
            for color in COLORS:
                if raw in (color.value, color.value[0]):
                    return color
            print("Invalid. Try again.")

    def _ask_yes_no(self, question: str) -> bool:
        while True:
            try:
                raw = input(f"{question} [y/n] ").strip().lower()
            except EOFError:
                return False
            if raw in ("y", "yes"):
                return True
            if raw in ("n", "no"):
                return False
            print("Invalid. Try again.")
