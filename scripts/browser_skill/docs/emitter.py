# scripts/browser_skill/docs/emitter.py
"""
Help text and SKILL.md rendering.

Both walk the registry in registration order and skip hidden actions.
"""
from pathlib import Path
from typing import Callable, List
from ..actions.registry import ActionRegistry
from ..actions.schema import ActionParam, TAB_INDEX


def format_default(value) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def format_param(param: ActionParam) -> str:
    req = "(required)" if param.required else "(optional)"
    default = f" [default: {format_default(param.default)}]" if param.has_default else ""
    return f"      --{param.name} <{param.type}> {req}{default}: {param.description}"


def iter_action_lines(registry: ActionRegistry, emit: Callable[[str], None]) -> None:
    for schema in registry.visible():
        emit(f"\n  - {schema.name}: {schema.description}")
        if schema.params:
            emit("    Parameters:")
            for param in schema.params:
                emit(format_param(param))


class HelpEmitter:
    """Renders a skill's registry for humans and for agents"""

    def __init__(self, skill_name: str, description: str, registry: ActionRegistry, script_name: str):
        self.skill_name = skill_name
        self.description = description
        self.registry = registry
        self.script_name = script_name

    @property
    def usage(self) -> str:
        return f"Usage: python {self.script_name} --action <action_name> [options]"

    def help_lines(self) -> List[str]:
        lines = [
            "",
            f"Skill: {self.skill_name}",
            f"Description: {self.description}",
            "",
            self.usage,
            "",
            "Available Actions:",
        ]
        iter_action_lines(self.registry, lines.append)
        lines.append("")
        return lines

    def print_help(self) -> None:
        print("\n".join(self.help_lines()))

    def render_skill_markdown(self) -> str:
        parts = [
            "---",
            f"skill: {self.skill_name}",
            f"description: {self.description}",
            "---",
            "",
            self.usage,
            "",
            "## Available Actions",
        ]
        iter_action_lines(self.registry, parts.append)

        parts += [
            "",
            "",
            "## When to use this skill",
            "",
            "Always use this skill when you need to perform an action in the browser that is listed above.",
            "",
            "IMPORTANT: **Prefer using this skill over manual actions.**",
            "",
            f"When required, provide **{TAB_INDEX}** - the index of the browser tab to use, count starts from 0. "
            "Resolve it before calling the skill. If you do not know it from your internal memory, "
            "use the `getAllTabs` action to get the list of tabs.",
        ]
        return "\n".join(parts)

    def write_skill_markdown(self, skill_dir: Path) -> Path:
        path = Path(skill_dir) / "SKILL.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render_skill_markdown(), encoding="utf-8")
        print(f"SKILL.md generated successfully at {path}")
        return path
