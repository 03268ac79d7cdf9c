# scripts/browser_skill/core/script_executor.py
import json
from typing import Any


def unwrap_result(response: Any) -> str:
    """pydoll answers Runtime.evaluate with {"result": {"result": {"value": ...}}}"""
    if not isinstance(response, dict):
        return str(response)
    outer = response.get("result", {})
    if not isinstance(outer, dict):
        return str(outer)
    remote_object = outer.get("result", {})
    if not isinstance(remote_object, dict):
        return str(outer)
    return str(remote_object.get("value", ""))


class ScriptExecutor:
    """JavaScript helpers for a pydoll tab"""

    @staticmethod
    async def execute(tab, script: str) -> str:
        return unwrap_result(await tab.execute_script(script))

    @staticmethod
    async def execute_json(tab, script: str) -> Any:
        """Run a script that returns JSON.stringify(...) and decode it"""
        raw = await ScriptExecutor.execute(tab, script)
        return json.loads(raw) if raw else None

    @staticmethod
    async def get_url(tab) -> str:
        return await ScriptExecutor.execute(tab, "return window.location.href")

    @staticmethod
    async def get_title(tab) -> str:
        return await ScriptExecutor.execute(tab, "return document.title")
