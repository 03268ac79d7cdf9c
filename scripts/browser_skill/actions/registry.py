# scripts/browser_skill/actions/registry.py
import sys
from typing import Dict, List, Optional, Sequence
from .schema import ActionParam, ActionSchema, TAB_INDEX


def _tab_index_param() -> ActionParam:
    return ActionParam(
        name=TAB_INDEX,
        description="The index of the browser tab to use",
        type="number",
        required=True,
    )


class ActionRegistry:
    """Registry for the actions of one skill"""

    def __init__(self):
        self._actions: Dict[str, ActionSchema] = {}

    def register(self, schema: ActionSchema, tab_required: bool = True) -> ActionSchema:
        """Store a schema, adding the tabIndex parameter when the action needs a tab"""
        if tab_required and schema.param(TAB_INDEX) is None:
            schema.params.append(_tab_index_param())

        # Last registration wins
        if schema.name in self._actions and self._actions[schema.name] is not schema:
            print(f"Action '{schema.name}' registered twice, replacing the earlier one", file=sys.stderr)
        self._actions[schema.name] = schema
        return schema

    def action(self, name: str, description: str, params: Sequence[ActionParam] = (),
               hidden: bool = False, tab_required: bool = True):
        """Decorator to register an async handler(page, args)"""
        def decorator(func):
            self.register(
                ActionSchema(
                    name=name,
                    description=description,
                    handler=func,
                    params=list(params),
                    hidden=hidden,
                ),
                tab_required=tab_required,
            )
            return func
        return decorator

    def get(self, name: str) -> Optional[ActionSchema]:
        return self._actions.get(name)

    def list_actions(self) -> List[str]:
        """List all registered action names"""
        return list(self._actions.keys())

    def visible(self) -> List[ActionSchema]:
        """Schemas shown in help output, in registration order"""
        return [s for s in self._actions.values() if not s.hidden]

    def __contains__(self, name: str) -> bool:
        return name in self._actions

    def __len__(self) -> int:
        return len(self._actions)
