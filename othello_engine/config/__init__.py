"""Config package exports."""

from .schema import AgentConfig, MatchConfig, MatchSettings, load_config

__all__ = [
    "AgentConfig",
    "MatchConfig",
    "MatchSettings",
    "load_config",
]
