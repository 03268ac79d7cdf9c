from pathlib import Path

import pytest

from browser_skill.skill import BrowserSkill


class FakePage:
    def __init__(self, title, url, broken=False):
        self.title = title
        self.url = url
        self.broken = broken
        self.scripts = []

    async def execute_script(self, script):
        if self.broken:
            raise RuntimeError("Target closed")
        self.scripts.append(script)
        if "document.title" in script:
            value = self.title
        elif "window.location.href" in script:
            value = self.url
        else:
            value = ""
        return {"result": {"result": {"type": "string", "value": value}}}

    def __repr__(self):
        return f"FakePage({self.title!r})"


class FakeContext:
    def __init__(self, pages):
        self._pages = list(pages)

    def pages(self):
        return list(self._pages)


class FakeSession:
    """Stands in for BrowserSession; records its lifecycle"""

    def __init__(self, contexts=None, fail_connect=False):
        self._contexts = contexts if contexts is not None else []
        self.fail_connect = fail_connect
        self.endpoint = None
        self.connect_calls = 0
        self.close_calls = 0

    async def connect(self):
        from browser_skill.core.errors import BrowserConnectionError

        self.connect_calls += 1
        if self.fail_connect:
            raise BrowserConnectionError(f"Could not reach browser at {self.endpoint}")
        return self

    async def contexts(self):
        return list(self._contexts)

    async def close(self):
        self.close_calls += 1

    async def __aenter__(self):
        return await self.connect()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def make_pages(*titles):
    return [FakePage(t, f"https://example.com/{t.lower()}") for t in titles]


@pytest.fixture
def session():
    return FakeSession([
        FakeContext(make_pages("A", "B", "C")),
        FakeContext(make_pages("D")),
    ])


@pytest.fixture
def make_skill(tmp_path: Path):
    def _make(session=None, **kwargs):
        def factory(endpoint):
            if session is None:
                raise AssertionError("browser connection attempted")
            session.endpoint = endpoint
            return session

        kwargs.setdefault("skill_dir", tmp_path)
        kwargs.setdefault("script_name", "skill.py")
        return BrowserSkill("Test Skill", "Skill used in tests", session_factory=factory, **kwargs)

    return _make
