# scripts/browser_skill/core/browser_session.py
import asyncio
import json
import sys
from typing import Any, Dict, List
from urllib.error import URLError
from urllib.request import urlopen
from pydoll.browser import Chrome
from pydoll.exceptions import NoValidTabFound
from .errors import BrowserConnectionError, NoPagesAvailableError
from ..config import DEFAULT_ENDPOINT, PROBE_TIMEOUT


class BrowserContext:
    """One browser context and the tabs open in it"""

    def __init__(self, context_id: str, tabs: List[Any]):
        self.context_id = context_id
        self._tabs = list(tabs)

    def pages(self) -> List[Any]:
        return list(self._tabs)


class BrowserSession:
    """Connection to an already-running Chrome through its remote-debugging endpoint.

    Closing the session only drops the DevTools connections; the browser
    and its tabs stay open.
    """

    def __init__(self, endpoint: str = DEFAULT_ENDPOINT, timeout: float = PROBE_TIMEOUT):
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout
        self.browser = None
        self._tabs: List[Any] = []
        self._closed = False

    def _websocket_url(self) -> str:
        """Ask the endpoint for the browser-level websocket address"""
        url = f"{self.endpoint}/json/version"
        try:
            with urlopen(url, timeout=self.timeout) as response:
                payload = json.loads(response.read().decode("utf-8"))
        except (URLError, OSError, ValueError) as e:
            raise BrowserConnectionError(
                f"Could not reach browser at {self.endpoint}: {e}. "
                "Start Chrome with --remote-debugging-port=9222."
            ) from e

        ws_url = payload.get("webSocketDebuggerUrl") if isinstance(payload, dict) else None
        if not ws_url:
            raise BrowserConnectionError(f"No webSocketDebuggerUrl reported by {url}")
        return ws_url

    async def connect(self) -> "BrowserSession":
        ws_url = await asyncio.to_thread(self._websocket_url)
        self.browser = Chrome()
        try:
            await self.browser.connect(ws_url)
        except NoValidTabFound as e:
            await self.close()
            raise NoPagesAvailableError() from e
        except Exception as e:
            await self.close()
            raise BrowserConnectionError(f"Could not connect to {ws_url}: {e}") from e
        print(f"Connected to browser at {self.endpoint}", file=sys.stderr)
        return self

    async def contexts(self) -> List[BrowserContext]:
        """Default context first, then the explicitly created ones, each with its page tabs"""
        targets = await self.browser.get_targets()
        tabs = await self.browser.get_opened_tabs()
        by_target: Dict[str, Any] = {getattr(tab, "_target_id", None): tab for tab in tabs}
        self._tabs.extend(tab for tab in tabs if tab not in self._tabs)

        grouped: Dict[str, List[Any]] = {}
        for target in targets:
            if target.get("type") != "page":
                continue
            tab = by_target.get(target.get("targetId"))
            if tab is None:
                continue
            grouped.setdefault(target.get("browserContextId", ""), []).append(tab)

        # getBrowserContexts never lists the default context
        created = list(await self.browser.get_browser_contexts())
        order = [cid for cid in grouped if cid not in created] + created
        return [BrowserContext(cid, grouped.get(cid, [])) for cid in order]

    async def close(self):
        """Drop every DevTools connection; safe to call more than once"""
        if self._closed:
            return
        self._closed = True

        for tab in self._tabs:
            handler = getattr(tab, "_connection_handler", None)
            if handler is None:
                continue
            try:
                await handler.close()
            except Exception as e:
                print(f"Error closing tab connection: {e}", file=sys.stderr)

        handler = getattr(self.browser, "_connection_handler", None)
        if handler is not None:
            try:
                await handler.close()
            except Exception as e:
                print(f"Error closing browser connection: {e}", file=sys.stderr)

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
