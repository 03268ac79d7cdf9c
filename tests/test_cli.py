from browser_skill.cli import flatten_flags, parse_cli


def test_action_and_flags():
    action, args = parse_cli(["--action", "search", "--query", "rust", "--tabIndex", "1"])
    assert action == "search"
    assert args == {"query": "rust", "tabIndex": "1"}


def test_equals_and_bare_flags():
    action, args = parse_cli(["--action=ping", "--verbose", "--count=3"])
    assert action == "ping"
    assert args == {"verbose": "true", "count": "3"}


def test_no_action():
    action, args = parse_cli([])
    assert action is None
    assert args == {}


def test_positional_ignored(capsys):
    assert flatten_flags(["stray", "--a", "1"]) == {"a": "1"}
    assert "stray" in capsys.readouterr().err
