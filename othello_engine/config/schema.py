"""Configuration schema for agent matches."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass
class AgentConfig:
    id: str
    params: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Union[str, Dict[str, Any]]) -> "AgentConfig":
        # Shorthand: ``black: greedy``
        if isinstance(data, str):
            return cls(id=data)
        if "id" not in data:
            raise ValueError("agent config requires an 'id'")
        return cls(id=str(data["id"]), params=dict(data.get("params") or {}))


@dataclass
class MatchSettings:
    num_games: int = 1
    alternate_colors: bool = True
    render: bool = False


@dataclass
class MatchConfig:
    black: AgentConfig
    white: AgentConfig
    match: MatchSettings = field(default_factory=MatchSettings)
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchConfig":
        for side in ("black", "white"):
            if data.get(side) is None:
                raise ValueError(f"{side} agent is required")
        black = AgentConfig.from_dict(data["black"])
        white = AgentConfig.from_dict(data["white"])

        match_data = data.get("match") or {}
        num_games = int(match_data.get("num_games", 1))
        if num_games <= 0:
            raise ValueError("match.num_games must be positive")
        match = MatchSettings(
            num_games=num_games,
            alternate_colors=bool(match_data.get("alternate_colors", True)),
            render=bool(match_data.get("render", False)),
        )

        seed = data.get("seed")
        if seed is not None:
            seed = int(seed)

        return cls(black=black, white=white, match=match, seed=seed)


def load_config(path: Union[str, Path]) -> MatchConfig:
    """Load MatchConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return MatchConfig.from_dict(data)
