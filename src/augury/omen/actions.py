"""
Action registry for agent frameworks.

Providers mark methods with @create_action; the host reads them back
through `get_actions()` and decides availability per network with
`supports_network()`.
"""

from __future__ import annotations

import textwrap
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from ..networks import Network

_ACTION_ATTR = "__augury_action__"


@dataclass(frozen=True)
class Action:
    name: str
    description: str
    schema: dict[str, Any]
    invoke: Callable[..., str] = field(repr=False, compare=False)


def create_action(name: str, description: str, schema: dict[str, Any]) -> Callable:
    def decorator(func: Callable) -> Callable:
        setattr(func, _ACTION_ATTR, (name, textwrap.dedent(description).strip(), schema))
        return func

    return decorator


class ActionProvider(ABC):
    def __init__(self, name: str) -> None:
        self.name = name

    def get_actions(self) -> list[Action]:
        actions = []
        for attr in dir(type(self)):
            meta = getattr(getattr(type(self), attr), _ACTION_ATTR, None)
            if meta is None:
                continue
            name, description, schema = meta
            actions.append(Action(name, description, schema, getattr(self, attr)))
        return actions

    def get_action(self, name: str) -> Optional[Action]:
        for action in self.get_actions():
            if action.name == name:
                return action
        return None

    @abstractmethod
    def supports_network(self, network: Network) -> bool:
        ...
