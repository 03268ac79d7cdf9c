# scripts/browser_skill/config.py
import os

DEFAULT_ENDPOINT = "http://localhost:9222"

# Seconds to wait for the /json/version probe
PROBE_TIMEOUT = 5.0


def endpoint_from_env() -> str:
    return os.environ.get("BROWSER_SKILL_ENDPOINT", DEFAULT_ENDPOINT).rstrip("/")


def strict_tabs_from_env() -> bool:
    return os.environ.get("BROWSER_SKILL_STRICT_TABS", "").lower() in ("1", "true", "yes", "on")
