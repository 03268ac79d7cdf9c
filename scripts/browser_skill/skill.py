# scripts/browser_skill/skill.py
"""
BrowserSkill: a named set of actions run against one tab of a running browser.

    skill = BrowserSkill("Hacker News", "Reads Hacker News")

    @skill.action("getTopStories", "Top stories from the front page")
    async def top_stories(tab, args):
        ...

    if __name__ == "__main__":
        sys.exit(skill.main())

Each invocation runs exactly one action:
parse args -> look up -> validate -> connect -> pick tab -> invoke -> disconnect.
"""
import asyncio
import inspect
import sys
from pathlib import Path
from typing import Any, Callable, Optional, Sequence
from .actions.builtin import GenerateSkillMarkdown, GetAllTabs, ShowHelp
from .actions.registry import ActionRegistry
from .actions.schema import ActionParam, ActionSchema, TAB_INDEX
from .actions.validation import validate_args
from .cli import parse_cli
from .config import endpoint_from_env, strict_tabs_from_env
from .core.browser_session import BrowserSession
from .core.errors import (
    BrowserConnectionError,
    BrowserSkillError,
    HandlerError,
    UnknownActionError,
    UsageError,
)
from .core.tabs import coerce_tab_index, resolve_tab
from .docs.emitter import HelpEmitter


def _caller_file() -> Path:
    """File of the script that constructed the skill"""
    for frame in inspect.stack(0)[2:]:
        if frame.filename != __file__:
            return Path(frame.filename).resolve()
    return Path(sys.argv[0]).resolve()


class BrowserSkill:
    """Action registry plus the dispatcher that runs one action per process"""

    def __init__(self, skill_name: str, description: str,
                 endpoint: Optional[str] = None,
                 strict_tabs: Optional[bool] = None,
                 skill_dir: Optional[Path] = None,
                 script_name: Optional[str] = None,
                 session_factory: Callable[[str], Any] = BrowserSession):
        self.skill_name = skill_name
        self.description = description
        self.endpoint = endpoint or endpoint_from_env()
        self.strict_tabs = strict_tabs_from_env() if strict_tabs is None else strict_tabs
        self.session_factory = session_factory
        self.session = None

        script = _caller_file()
        self.skill_dir = Path(skill_dir) if skill_dir else script.parent
        self.script_name = script_name or str(script)

        self.registry = ActionRegistry()
        self.emitter = HelpEmitter(skill_name, description, self.registry, self.script_name)
        self._register_defaults()

    def _register_defaults(self):
        self.registry.register(ActionSchema(
            name="help",
            description="Show help and available actions",
            handler=ShowHelp(self.emitter),
        ), tab_required=False)

        self.registry.register(ActionSchema(
            name="getAllTabs",
            description="List all open tabs across all browser contexts",
            handler=GetAllTabs(self),
        ), tab_required=False)

        self.registry.register(ActionSchema(
            name="generateSkillMarkdown",
            description="Generate the markdown file for this skill",
            handler=GenerateSkillMarkdown(self.emitter, self.skill_dir),
            hidden=True,
        ), tab_required=False)

    def register_action(self, schema: ActionSchema, tab_required: bool = True) -> ActionSchema:
        return self.registry.register(schema, tab_required=tab_required)

    def action(self, name: str, description: str, params: Sequence[ActionParam] = (),
               hidden: bool = False, tab_required: bool = True):
        """Decorator form of register_action"""
        return self.registry.action(name, description, params=params,
                                    hidden=hidden, tab_required=tab_required)

    def show_help(self):
        self.emitter.print_help()

    async def _invoke(self, schema: ActionSchema, args) -> None:
        if not getattr(schema.handler, "needs_browser", True):
            await self._call(schema, None, args)
            return

        async with self.session_factory(self.endpoint) as session:
            self.session = session
            try:
                await self._invoke_on_tab(session, schema, args)
            finally:
                self.session = None

    async def _invoke_on_tab(self, session, schema: ActionSchema, args) -> None:
        try:
            contexts = await session.contexts()
        except BrowserSkillError:
            raise
        except Exception as e:
            raise BrowserConnectionError(f"Could not list browser contexts: {e}") from e
        if not contexts:
            raise BrowserConnectionError("No browser contexts found. Make sure the browser is open.")

        # Only the first context is used for tab selection
        pages = contexts[0].pages()
        index = coerce_tab_index(args.get(TAB_INDEX))
        page = resolve_tab(pages, index, strict=self.strict_tabs)

        await self._call(schema, page, args)

    async def _call(self, schema: ActionSchema, page, args) -> None:
        try:
            await schema.handler.execute(page, args)
        except BrowserSkillError:
            raise
        except Exception as e:
            raise HandlerError(schema.name, e) from e

    async def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Run one action from the command line and return the exit code"""
        try:
            action_name, raw_args = parse_cli(sys.argv[1:] if argv is None else argv)
        except UsageError as e:
            print(str(e), file=sys.stderr)
            self.show_help()
            return 1

        if not action_name:
            self.show_help()
            return 0

        schema = self.registry.get(action_name)
        if schema is None:
            print(str(UnknownActionError(action_name)), file=sys.stderr)
            self.show_help()
            return 1

        try:
            args = validate_args(schema, raw_args)
        except UsageError as e:
            print(str(e), file=sys.stderr)
            return 1

        try:
            await self._invoke(schema, args)
        except BrowserSkillError as e:
            print(str(e), file=sys.stderr)
            return 1

        return 0

    def main(self, argv: Optional[Sequence[str]] = None) -> int:
        return asyncio.run(self.run(argv))
