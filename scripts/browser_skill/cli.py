# scripts/browser_skill/cli.py
import argparse
import sys
from typing import Dict, Optional, Sequence, Tuple
from .core.errors import UsageError

ACTION_FLAG = "action"


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def flatten_flags(tokens: Sequence[str]) -> Dict[str, str]:
    """Turn `--key value`, `--key=value` and bare `--flag` into a dict"""
    values: Dict[str, str] = {}
    i = 0
    while i < len(tokens):
        token = tokens[i]
        i += 1
        if not token.startswith("--") or token == "--":
            print(f"Ignoring positional argument: {token}", file=sys.stderr)
            continue

        key = token[2:]
        if "=" in key:
            key, value = key.split("=", 1)
        elif i < len(tokens) and not tokens[i].startswith("--"):
            value = tokens[i]
            i += 1
        else:
            value = "true"
        values[key] = value
    return values


def parse_cli(argv: Sequence[str]) -> Tuple[Optional[str], Dict[str, str]]:
    """Split argv into the action name and its flat argument mapping"""
    parser = _Parser(add_help=False, allow_abbrev=False)
    parser.add_argument(f"--{ACTION_FLAG}")
    known, extra = parser.parse_known_args(list(argv))
    return known.action, flatten_flags(extra)
