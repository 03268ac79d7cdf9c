from browser_skill.actions.registry import ActionRegistry
from browser_skill.actions.schema import ActionParam, ActionSchema, FunctionAction


async def _noop(page, args):
    pass


def _tab_params(schema):
    return [p for p in schema.params if p.name == "tabIndex"]


def test_register_appends_tab_index_once():
    registry = ActionRegistry()
    schema = ActionSchema(name="ping", description="ping", handler=_noop)

    registry.register(schema)
    registry.register(schema)

    tab_params = _tab_params(schema)
    assert len(tab_params) == 1
    assert tab_params[0].type == "number"
    assert tab_params[0].required is True
    assert schema.tab_required


def test_register_keeps_declared_tab_index():
    registry = ActionRegistry()
    own = ActionParam("tabIndex", "my tab", "number", required=True)
    schema = ActionSchema(name="ping", description="ping", handler=_noop, params=[own])

    registry.register(schema)
    assert schema.params == [own]


def test_register_without_tab():
    registry = ActionRegistry()
    schema = ActionSchema(name="ping", description="ping", handler=_noop)

    registry.register(schema, tab_required=False)
    assert _tab_params(schema) == []
    assert not schema.tab_required


def test_reregister_replaces_entry(capsys):
    registry = ActionRegistry()
    first = ActionSchema(name="ping", description="first", handler=_noop,
                         params=[ActionParam("a", "a")])
    second = ActionSchema(name="ping", description="second", handler=_noop)

    registry.register(first)
    registry.register(second, tab_required=False)

    got = registry.get("ping")
    assert got is second
    assert got.description == "second"
    assert got.params == []
    assert len(registry) == 1
    assert "registered twice" in capsys.readouterr().err


def test_get_unknown_returns_none():
    assert ActionRegistry().get("nope") is None


def test_insertion_order_and_hidden():
    registry = ActionRegistry()
    for name in ("b", "a", "c"):
        registry.register(ActionSchema(name=name, description=name, handler=_noop,
                                       hidden=(name == "a")))

    assert registry.list_actions() == ["b", "a", "c"]
    assert [s.name for s in registry.visible()] == ["b", "c"]
    assert "a" in registry


def test_decorator_wraps_function():
    registry = ActionRegistry()

    @registry.action("search", "Search", params=[ActionParam("query", "q", required=True)])
    async def search(page, args):
        pass

    schema = registry.get("search")
    assert isinstance(schema.handler, FunctionAction)
    assert schema.handler.func is search
    assert [p.name for p in schema.params] == ["query", "tabIndex"]


def test_registries_are_independent():
    one, two = ActionRegistry(), ActionRegistry()
    one.register(ActionSchema(name="x", description="x", handler=_noop))
    assert "x" not in two
