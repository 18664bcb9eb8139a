"""Round orchestration."""

from unocard.orchestration.game_runner import GameRunner, GameResult
from unocard.orchestration.tournament import run_tournament, TournamentResult

__all__ = ["GameRunner", "GameResult", "run_tournament", "TournamentResult"]
