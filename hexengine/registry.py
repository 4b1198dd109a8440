"""Registry of move-policy factories, keyed by strength name."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable

PolicyFactory = Callable[..., Any]

_POLICY_REGISTRY: Dict[str, PolicyFactory] = {}


def register_policy(policy_id: str, factory: PolicyFactory) -> None:
    """Register a factory that builds a ``MovePolicy`` from keyword params."""
    if policy_id in _POLICY_REGISTRY:
        raise ValueError(f"Policy id '{policy_id}' is already registered.")
    _POLICY_REGISTRY[policy_id] = factory


def make_policy(policy_id: str, **params: Any) -> Any:
    """Build a registered policy; ``params`` go straight to its factory."""
    if policy_id not in _POLICY_REGISTRY:
        raise KeyError(f"Policy id '{policy_id}' is not registered.")
    return _POLICY_REGISTRY[policy_id](**params)


def list_policies() -> Iterable[str]:
    return tuple(_POLICY_REGISTRY)


def get_policy_factory(policy_id: str) -> PolicyFactory:
    if policy_id not in _POLICY_REGISTRY:
        raise KeyError(f"Policy id '{policy_id}' is not registered.")
    return _POLICY_REGISTRY[policy_id]
