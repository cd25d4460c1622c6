"""Registry of computer players, looked up by name from the CLI and match configs."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

AgentFactory = Callable[..., Any]

_AGENT_REGISTRY: Dict[str, AgentFactory] = {}


def register_agent(
    agent_id: str, ctor: Optional[AgentFactory] = None
) -> Any:
    """
    Register an agent constructor under ``agent_id``.

    Can be called directly, ``register_agent("greedy", GreedyAgent)``, or used
    as a class decorator, ``@register_agent("greedy")``.
    """

    def _register(factory: AgentFactory) -> AgentFactory:
        if agent_id in _AGENT_REGISTRY:
            raise ValueError(f"Agent id '{agent_id}' is already registered.")
        _AGENT_REGISTRY[agent_id] = factory
        return factory

    if ctor is None:
        return _register
    return _register(ctor)


def make_agent(agent_id: str, **params: Any) -> Any:
    """Instantiate a registered agent with constructor ``params``."""
    return get_agent_entry(agent_id)(**params)


def list_agents() -> Tuple[str, ...]:
    """Registered agent identifiers, sorted."""
    return tuple(sorted(_AGENT_REGISTRY))


def get_agent_entry(agent_id: str) -> AgentFactory:
    """Retrieve the raw constructor for an agent."""
    if agent_id not in _AGENT_REGISTRY:
        known = ", ".join(list_agents()) or "none"
        raise KeyError(f"Agent id '{agent_id}' is not registered (known: {known}).")
    return _AGENT_REGISTRY[agent_id]
