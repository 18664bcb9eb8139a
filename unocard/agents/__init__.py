"""Built-in agents."""

from unocard.agents.ai_agent import AIAgent
from unocard.agents.human_agent import HumanAgent

__all__ = ["AIAgent", "HumanAgent"]
