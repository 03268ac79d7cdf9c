# scripts/browser_skill/actions/builtin.py
"""Actions every skill ships with"""
from pathlib import Path
from typing import Dict, List
from ..core.script_executor import ScriptExecutor

MAX_URL_LENGTH = 100


def truncate_url(url: str, max_length: int = MAX_URL_LENGTH) -> str:
    return url[:max_length] + "..." if len(url) > max_length else url


def format_tabs(tabs: List[Dict[str, str]]) -> str:
    return "\n\n".join(
        f"Tab {i}:\nTitle: {tab['title']}\nUrl: {truncate_url(tab['url'])}"
        for i, tab in enumerate(tabs)
    )


async def list_tabs(session) -> List[Dict[str, str]]:
    """Title and URL of every page in every context"""
    tabs = []
    for context in await session.contexts():
        for page in context.pages():
            try:
                tabs.append({
                    "title": await ScriptExecutor.get_title(page),
                    "url": await ScriptExecutor.get_url(page),
                })
            except Exception:
                # Closed or inaccessible pages are left out
                continue
    return tabs


class ShowHelp:
    """Show help and available actions"""
    needs_browser = False

    def __init__(self, emitter):
        self.emitter = emitter

    async def execute(self, page, args) -> None:
        self.emitter.print_help()


class GenerateSkillMarkdown:
    """Generate the markdown file for this skill"""
    needs_browser = False

    def __init__(self, emitter, skill_dir: Path):
        self.emitter = emitter
        self.skill_dir = skill_dir

    async def execute(self, page, args) -> None:
        self.emitter.write_skill_markdown(self.skill_dir)


class GetAllTabs:
    """List all open tabs across all browser contexts"""

    def __init__(self, skill):
        self.skill = skill

    async def execute(self, page, args) -> None:
        tabs = await list_tabs(self.skill.session)
        print(format_tabs(tabs))
