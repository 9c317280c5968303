"""Unit tests for ApplicationState."""

import pytest

from bevshop.domain.exceptions import ValidationError
from bevshop.domain.model.cart import Cart
from bevshop.domain.model.state import ApplicationState, Phase, Tab, Viewport


class TestApplicationStateStart:

    def test_start(self):
        state = ApplicationState.start(4)
        assert state.active_tab is Tab.SHOP
        assert state.cursor == 0
        assert state.cart == Cart.empty(4)
        assert state.checkout_pending is False
        assert state.terminated is False
        assert state.viewport == Viewport(0, 0)

    def test_start_with_viewport(self):
        assert ApplicationState.start(1, Viewport(80, 24)).viewport == Viewport(80, 24)


class TestApplicationStateInvariants:

    def test_checkout_pending_on_shop_tab_rejected(self):
        with pytest.raises(ValidationError, match="cart tab"):
            ApplicationState(Tab.SHOP, 0, Cart.empty(1), checkout_pending=True)

    def test_negative_cursor_rejected(self):
        with pytest.raises(ValidationError, match="Cursor"):
            ApplicationState(Tab.SHOP, -1, Cart.empty(1))

    def test_negative_viewport_rejected(self):
        with pytest.raises(ValidationError, match="Viewport"):
            Viewport(-1, 10)


class TestApplicationStatePhase:

    def test_shop_browsing(self):
        assert ApplicationState.start(1).phase is Phase.SHOP_BROWSING

    def test_cart_reviewing(self):
        state = ApplicationState(Tab.CART, 0, Cart.empty(1))
        assert state.phase is Phase.CART_REVIEWING

    def test_cart_confirming(self):
        state = ApplicationState(Tab.CART, 0, Cart((1,)), checkout_pending=True)
        assert state.phase is Phase.CART_CONFIRMING_CHECKOUT

    def test_terminated_wins(self):
        state = ApplicationState(Tab.CART, 0, Cart((1,)), checkout_pending=True, terminated=True)
        assert state.phase is Phase.TERMINATED
