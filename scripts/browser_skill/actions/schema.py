# scripts/browser_skill/actions/schema.py
"""
Declarative shape of an action: its parameters, its handler and its docs.
"""
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional, Protocol

PARAM_TYPES = ("string", "number", "boolean")

TAB_INDEX = "tabIndex"


@dataclass
class ActionParam:
    name: str
    description: str
    type: str = "string"
    required: bool = False
    default: Optional[Any] = None

    def __post_init__(self):
        if self.type not in PARAM_TYPES:
            raise ValueError(f"Unsupported parameter type for {self.name}: {self.type}")

    @property
    def has_default(self) -> bool:
        return self.default is not None


class Action(Protocol):
    """
    Anything that can run against a tab.
    execute(page, args) -> None, raising on failure.
    """

    async def execute(self, page, args) -> None:
        ...


class FunctionAction:
    """Adapts a plain `async def handler(page, args)` to the Action protocol"""

    def __init__(self, func: Callable[..., Awaitable[None]]):
        self.func = func
        self.__doc__ = func.__doc__

    async def execute(self, page, args) -> None:
        await self.func(page, args)


@dataclass
class ActionSchema:
    name: str
    description: str
    handler: Action
    params: List[ActionParam] = field(default_factory=list)
    hidden: bool = False

    def __post_init__(self):
        if not hasattr(self.handler, "execute"):
            self.handler = FunctionAction(self.handler)
        self.params = list(self.params or [])

    def param(self, name: str) -> Optional[ActionParam]:
        for p in self.params:
            if p.name == name:
                return p
        return None

    @property
    def tab_required(self) -> bool:
        p = self.param(TAB_INDEX)
        return p is not None and p.required
