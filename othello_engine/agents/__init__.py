"""Agent modules."""

from .base_agent import BaseAgent
from .greedy_agent import GreedyAgent
from .random_agent import RandomAgent

__all__ = ["BaseAgent", "GreedyAgent", "RandomAgent"]
