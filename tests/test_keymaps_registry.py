import pytest

from vim_lite.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)
from vim_lite.keymaps.defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS
from vim_lite.modes import CHAR_TOKEN, ESCAPE_TOKEN, Mode


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    mode: str = "normal",
    key: str = "x",
    action_id: str = "core.test",
) -> Binding:
    return Binding(id=binding_id, mode=mode, key=key, action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="normal.x")

    registry.register_binding(binding)

    assert registry.lookup("normal", "x") == binding
    assert registry.lookup("insert", "x") is None


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.x"))

    with pytest.raises(KeymapConflictError) as info:
        registry.register_binding(make_binding(binding_id="normal.x.duplicate"))

    assert [b.id for b in info.value.conflicts] == ["normal.x"]


def test_same_key_in_different_modes_does_not_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.x"))
    registry.register_binding(make_binding(binding_id="insert.x", mode="insert"))

    assert registry.lookup("normal", "x").id == "normal.x"
    assert registry.lookup("insert", "x").id == "insert.x"


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="normal.x"))


def test_duplicate_ids_are_rejected() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.x"))

    with pytest.raises(ValueError):
        registry.register_action(make_action())
    with pytest.raises(ValueError):
        registry.register_binding(make_binding(binding_id="normal.x", key="y"))


def test_get_unknown_action_raises_key_error() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.get_action("missing")


def test_binding_accepts_mode_enum() -> None:
    binding = Binding(id="b", mode=Mode.INSERT, key="x", action_id="a")

    assert binding.mode == "insert"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"id": "", "mode": "normal", "key": "x", "action_id": "a"},
        {"id": "b", "mode": "", "key": "x", "action_id": "a"},
        {"id": "b", "mode": "normal", "key": "", "action_id": "a"},
        {"id": "b", "mode": "normal", "key": "x", "action_id": ""},
    ],
)
def test_binding_fields_cannot_be_empty(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        Binding(**kwargs)


def test_action_ref_requires_callable() -> None:
    with pytest.raises(TypeError):
        ActionRef(id="a", handler="not callable")  # type: ignore[arg-type]


def test_default_keymaps_load_without_conflicts() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    for action in DEFAULT_ACTIONS:
        assert registry.get_action(action.id) is action
    for binding in DEFAULT_BINDINGS:
        assert registry.lookup(binding.mode, binding.key) is binding
    for key in "qihjkl":
        assert registry.lookup("normal", key) is not None
    assert registry.lookup("insert", ESCAPE_TOKEN) is not None
    assert registry.lookup("insert", CHAR_TOKEN) is not None
    assert registry.lookup("insert", "q") is None
