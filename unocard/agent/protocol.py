"""Agent protocol - interface that AI and human seats implement."""

from typing import Optional, Protocol

from unocard.engine import PlayCard, PlayerView


class AgentProtocol(Protocol):
    """Interface for UNO-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def choose_card(
        self,
        player_view: PlayerView,
        drawn_index: Optional[int] = None,
    ) -> Optional[PlayCard]:
        """Choose a card to play.

        Args:
            player_view: Filtered view with only this seat's hand and public info.
            drawn_index: Index of the card just drawn, if the seat drew one
                and may play it immediately. Only that card may be chosen.

        Returns:
            The play to make, or None to draw (or to keep the drawn card).
        """
        ...

    def choose_challenge(self, player_view: PlayerView) -> bool:
        """Whether to challenge the Wild +4 just played against this seat."""
        ...

    def choose_swap_target(self, player_view: PlayerView) -> int:
        """Seat to swap hands with after playing a seven (seven-zero rule)."""
        ...
