"""Unit tests for the key map."""

import pytest

from bevshop.application.keymap import DEFAULT_BINDINGS, Action, KeyMap
from bevshop.domain.exceptions import ValidationError


class TestDefaultKeyMap:

    @pytest.mark.parametrize("key, action", [
        ("q", Action.QUIT),
        ("ctrl+c", Action.QUIT),
        ("s", Action.SHOW_SHOP),
        ("c", Action.SHOW_CART),
        ("k", Action.CURSOR_UP),
        ("down", Action.CURSOR_DOWN),
        ("=", Action.INCREMENT),
        ("right", Action.INCREMENT),
        ("left", Action.DECREMENT),
        ("enter", Action.CONFIRM),
        ("y", Action.ACCEPT),
        ("esc", Action.DECLINE),
        ("G", Action.GO_TO_BOTTOM),
        ("space", Action.PAGE_DOWN),
        ("u", Action.HALF_PAGE_UP),
        ("ctrl+d", Action.HALF_PAGE_DOWN),
    ])
    def test_action_for(self, key, action):
        assert KeyMap().action_for(key) is action

    def test_unbound_key(self):
        assert KeyMap().action_for("x") is None

    def test_keys_lists_every_binding(self):
        keys = KeyMap().keys()
        assert len(keys) == sum(len(k) for k in DEFAULT_BINDINGS.values())
        assert "pgdown" in keys


class TestCustomKeyMap:

    def test_custom_binding(self):
        keymap = KeyMap({Action.QUIT: ("x",)})
        assert keymap.action_for("x") is Action.QUIT
        assert keymap.action_for("q") is None

    def test_key_bound_twice_rejected(self):
        with pytest.raises(ValidationError, match="bound to both"):
            KeyMap({Action.QUIT: ("x",), Action.ACCEPT: ("x",)})

    def test_bindings_are_read_only(self):
        keymap = KeyMap()
        with pytest.raises(TypeError):
            keymap.bindings[Action.QUIT] = ("x",)
        assert keymap.action_for("q") is Action.QUIT

    def test_later_changes_to_source_dict_ignored(self):
        source = {Action.QUIT: ["x"]}
        keymap = KeyMap(source)
        source[Action.QUIT].append("z")
        source[Action.ACCEPT] = ("y",)
        assert keymap.keys() == ["x"]
        assert keymap.action_for("y") is None
