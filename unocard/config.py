"""Settings read from the environment (and a .env file, loaded by the CLI)."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from unocard.engine import Difficulty

_TRUE = ("1", "true", "yes", "on")


def _flag(value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE


@dataclass
class Settings:
    """Round options a session starts from.

    players: 3 or 4 seats.
    difficulty: AI tier for the computer seats.
    seven_zero: seven swaps hands, zero passes hands around.
    stack_draw2: a +2 may be answered with another +2.
    seed: fixed shuffle seed, or None for a random one.
    """

    players: int = 4
    difficulty: Difficulty = Difficulty.EASY
    seven_zero: bool = False
    stack_draw2: bool = False
    seed: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        seed = env.get("UNOCARD_SEED")
        players = int(env.get("UNOCARD_PLAYERS", "4"))
        if players not in (3, 4):
            raise ValueError(f"UNOCARD_PLAYERS must be 3 or 4, got {players}")
        return cls(
            players=players,
            difficulty=Difficulty(env.get("UNOCARD_DIFFICULTY", "easy").lower()),
            seven_zero=_flag(env.get("UNOCARD_SEVEN_ZERO"), False),
            stack_draw2=_flag(env.get("UNOCARD_STACK_DRAW2"), False),
            seed=int(seed) if seed else None,
            log_level=env.get("UNOCARD_LOG_LEVEL", "WARNING").upper(),
        )
