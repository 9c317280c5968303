"""Tests for the prompt_toolkit front end.

The application runs against prompt_toolkit's pipe input and dummy
output, so no real terminal is needed.
"""

import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from bevshop.application.keymap import KeyMap
from bevshop.application.shop_controller import ShopController
from bevshop.domain.model.state import Phase, Viewport
from bevshop.infrastructure.tui.app import ShopApp, ptk_key
from bevshop.infrastructure.tui.layout import ShopLayout
from tests.fakes import sample_catalog


def _app():
    catalog = sample_catalog()
    controller = ShopController(catalog)
    return ShopApp(controller, ShopLayout(catalog)), controller


class TestKeyNames:

    @pytest.mark.parametrize("name, expected", [
        ("ctrl+c", "c-c"),
        ("esc", "escape"),
        ("pgup", "pageup"),
        ("pgdown", "pagedown"),
        ("ctrl+d", "c-d"),
        ("space", " "),
        ("up", "up"),
        ("+", "+"),
        ("G", "G"),
    ])
    def test_ptk_key(self, name, expected):
        assert ptk_key(name) == expected


class TestDispatch:

    def test_dispatch_key_updates_controller(self):
        app, controller = _app()
        assert app.dispatch_key("+")
        assert controller.state.cart.quantity_of(0) == 1

    def test_dispatch_key_reports_termination(self):
        app, _ = _app()
        assert app.dispatch_key("q") is False

    def test_dispatch_size_only_on_change(self):
        app, controller = _app()
        app.dispatch_size(80, 24)
        state = controller.state
        assert state.viewport == Viewport(80, 24)
        app.dispatch_size(80, 24)
        assert controller.state is state

    def test_frame_fragments_follow_state(self):
        app, _ = _app()
        before = "".join(text for _, text in app.frame_fragments())
        app.dispatch_key("c")
        after = "".join(text for _, text in app.frame_fragments())
        assert "Your cart is empty!" not in before
        assert "Your cart is empty!" in after

    def test_every_key_is_bound(self):
        app, _ = _app()
        assert len(app.key_bindings().bindings) == len(KeyMap().keys())


class TestRun:

    def test_checkout_session(self):
        app, controller = _app()
        with create_pipe_input() as pipe:
            pipe.send_text("++jj+c\ry")
            with create_app_session(input=pipe, output=DummyOutput()):
                app.run()

        state = controller.state
        assert state.phase is Phase.TERMINATED
        assert state.cart.quantity_of(0) == 2
        assert state.cart.quantity_of(2) == 1
        assert state.viewport == Viewport(80, 40)

    def test_quit_session(self):
        app, controller = _app()
        with create_pipe_input() as pipe:
            pipe.send_text("q")
            with create_app_session(input=pipe, output=DummyOutput()):
                app.run()

        assert not controller.running
        assert controller.state.cart.is_empty

    @pytest.mark.parametrize("keys, cursor", [
        ("dq", 2),
        ("\x04q", 2),
        ("d\x15q", 0),
        (" q", 4),
    ])
    def test_half_page_and_space_keys(self, keys, cursor):
        app, controller = _app()
        with create_pipe_input() as pipe:
            pipe.send_text(keys)
            with create_app_session(input=pipe, output=DummyOutput()):
                app.run()

        assert controller.state.cursor == cursor
