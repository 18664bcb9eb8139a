"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO with EASY and HARD computer seats")


def _settings(
    players: Optional[int],
    difficulty: Optional[str],
    seven_zero: Optional[bool],
    stack_draw2: Optional[bool],
    seed: Optional[int],
    verbose: bool,
) -> "Settings":
    from unocard.config import Settings
    from unocard.engine import Difficulty

    settings = Settings.from_env()
    if players is not None:
        if players not in (3, 4):
            raise typer.BadParameter("Players must be 3 or 4.")
        settings.players = players
    if difficulty is not None:
        try:
            settings.difficulty = Difficulty(difficulty.lower())
        except ValueError:
            raise typer.BadParameter(f"Unknown difficulty: {difficulty}. Use 'easy' or 'hard'.")
    if seven_zero is not None:
        settings.seven_zero = seven_zero
    if stack_draw2 is not None:
        settings.stack_draw2 = stack_draw2
    if seed is not None:
        settings.seed = seed
    if verbose:
        settings.log_level = "DEBUG"
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return settings


def _seats(players: int) -> list[int]:
    from unocard.engine import NORTH

    return [seat for seat in range(4) if players == 4 or seat != NORTH]


@app.command()
def play(
    players: Optional[int] = typer.Option(None, "--players", "-n", help="Number of seats: 3 or 4"),
    difficulty: Optional[str] = typer.Option(None, "--difficulty", "-d", help="AI difficulty: easy or hard"),
    seven_zero: Optional[bool] = typer.Option(None, "--seven-zero/--no-seven-zero", help="Seven-zero house rule"),
    stack_draw2: Optional[bool] = typer.Option(None, "--stack-draw2/--no-stack-draw2", help="Stack +2 house rule"),
    auto: bool = typer.Option(False, "--auto", help="Let an AI take your seat too"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Play a single round, sitting at seat 0 unless --auto."""
    from unocard.agents import AIAgent, HumanAgent
    from unocard.engine import UnoEngine
    from unocard.engine.player import SEAT_NAMES
    from unocard.orchestration.game_runner import GameRunner

    settings = _settings(players, difficulty, seven_zero, stack_draw2, seed, verbose)
    agents = {seat: AIAgent(settings.difficulty, name=SEAT_NAMES[seat]) for seat in _seats(settings.players)}
    if not auto:
        agents[0] = HumanAgent(name=SEAT_NAMES[0])

    engine = UnoEngine(
        players=settings.players,
        difficulty=settings.difficulty,
        seven_zero_rule=settings.seven_zero,
        draw2_stack_rule=settings.stack_draw2,
        seed=settings.seed,
    )
    result = GameRunner(agents, engine=engine).run()
    if auto:
        for event in result.history:
            typer.echo(f"> {event}")
    if result.winner is None:
        typer.echo("Winner: None (turn limit reached)")
    else:
        typer.echo(f"Winner: {SEAT_NAMES[result.winner]} (+{result.scores[result.winner]} points)")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def tournament(
    games: int = typer.Option(100, "--games", "-g", help="Number of rounds"),
    players: Optional[int] = typer.Option(None, "--players", "-n", help="Number of seats: 3 or 4"),
    difficulty: Optional[str] = typer.Option(None, "--difficulty", "-d", help="Difficulty of every seat"),
    hard_seats: str = typer.Option(
        "",
        "--hard-seats",
        help="Comma-separated seats playing HARD regardless of --difficulty (e.g. 0,2)",
    ),
    seven_zero: Optional[bool] = typer.Option(None, "--seven-zero/--no-seven-zero", help="Seven-zero house rule"),
    stack_draw2: Optional[bool] = typer.Option(None, "--stack-draw2/--no-stack-draw2", help="Stack +2 house rule"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run many AI-only rounds."""
    from unocard.agents import AIAgent
    from unocard.engine import Difficulty
    from unocard.engine.player import SEAT_NAMES
    from unocard.orchestration.tournament import run_tournament

    settings = _settings(players, difficulty, seven_zero, stack_draw2, seed, verbose)
    seats = _seats(settings.players)
    try:
        hard = {int(s) for s in hard_seats.split(",") if s.strip()}
    except ValueError:
        raise typer.BadParameter(f"Invalid seat list: {hard_seats}")
    if hard - set(seats):
        raise typer.BadParameter(f"Seats {sorted(hard - set(seats))} are not in play.")

    agents = {
        seat: AIAgent(Difficulty.HARD if seat in hard else settings.difficulty, name=SEAT_NAMES[seat])
        for seat in seats
    }
    result = run_tournament(
        agents,
        num_games=games,
        seed=settings.seed,
        seven_zero_rule=settings.seven_zero,
        draw2_stack_rule=settings.stack_draw2,
    )
    typer.echo("Tournament results:")
    for seat in sorted(seats, key=lambda s: -result.wins.get(s, 0)):
        typer.echo(
            f"  {SEAT_NAMES[seat]} ({agents[seat].difficulty.value}): "
            f"{result.wins.get(seat, 0)} wins, {result.scores.get(seat, 0)} points"
        )
    if result.unfinished:
        typer.echo(f"  unfinished: {result.unfinished}")


if __name__ == "__main__":
    app()
