"""Application service: the shop state machine.

SHOP_BROWSING and CART_REVIEWING are switched between with the tab keys
from any phase. Enter on a non-empty cart moves to
CART_CONFIRMING_CHECKOUT, where "y" terminates the session and "n"/esc
goes back to reviewing. Quit terminates from anywhere; TERMINATED has
no way out.

``transition`` is total: every event has a defined effect, boundary
attempts are silent no-ops, and nothing in here raises.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from bevshop.application.keymap import Action, KeyMap
from bevshop.application.settings import ShopSettings
from bevshop.domain.model.beverage import Catalog
from bevshop.domain.model.events import Event, KeyPressed, Resized
from bevshop.domain.model.state import ApplicationState, Tab, Viewport

logger = logging.getLogger(__name__)


class ShopController:

    def __init__(
        self,
        catalog: Catalog,
        settings: ShopSettings | None = None,
        keymap: KeyMap | None = None,
    ) -> None:
        self._catalog = catalog
        self._settings = settings or ShopSettings()
        self._keymap = keymap or KeyMap()
        self._state = self.initial_state()

    # --- Owned state ----------------------------------------------------------

    @property
    def state(self) -> ApplicationState:
        return self._state

    @property
    def running(self) -> bool:
        return not self._state.terminated

    def initial_state(self, width: int = 0, height: int = 0) -> ApplicationState:
        return ApplicationState.start(len(self._catalog), Viewport(width, height))

    def handle(self, event: Event) -> ApplicationState:
        """Apply *event* to the current state and keep the result."""
        before = self._state
        self._state = self.transition(before, event)
        if self._state.phase is not before.phase:
            logger.debug("%s: %s -> %s", event, before.phase.value, self._state.phase.value)
        if self._state.terminated and not before.terminated:
            logger.info("Session ended with %d item(s) in cart",
                        sum(q for _, q in self._state.cart.entries()))
        return self._state

    # --- Transitions ----------------------------------------------------------

    def transition(self, state: ApplicationState, event: Event) -> ApplicationState:
        if state.terminated:
            return state

        if isinstance(event, Resized):
            return replace(state, viewport=Viewport(max(0, event.width), max(0, event.height)))

        if not isinstance(event, KeyPressed):
            return state

        action = self._keymap.action_for(event.key)
        if action is None:
            return state

        if action is Action.QUIT:
            return replace(state, terminated=True)
        if action is Action.SHOW_SHOP:
            return replace(state, active_tab=Tab.SHOP, checkout_pending=False)
        if action is Action.SHOW_CART:
            return replace(state, active_tab=Tab.CART, checkout_pending=False)

        if state.active_tab is Tab.SHOP:
            return self._browse(state, action)
        return self._review(state, action)

    def _browse(self, state: ApplicationState, action: Action) -> ApplicationState:
        page = self._settings.visible_rows
        half = max(1, page // 2)
        moves = {
            Action.CURSOR_UP: state.cursor - 1,
            Action.CURSOR_DOWN: state.cursor + 1,
            Action.PAGE_UP: state.cursor - page,
            Action.PAGE_DOWN: state.cursor + page,
            Action.HALF_PAGE_UP: state.cursor - half,
            Action.HALF_PAGE_DOWN: state.cursor + half,
            Action.GO_TO_TOP: 0,
            Action.GO_TO_BOTTOM: self._catalog.last_index,
        }
        if action in moves:
            return replace(state, cursor=self._clamp(moves[action]))

        if action is Action.INCREMENT:
            stock = self._catalog[state.cursor].stock
            return replace(state, cart=state.cart.add_one(state.cursor, stock))
        if action is Action.DECREMENT:
            return replace(state, cart=state.cart.remove_one(state.cursor))

        return state

    def _review(self, state: ApplicationState, action: Action) -> ApplicationState:
        if state.checkout_pending:
            if action is Action.ACCEPT:
                return replace(state, terminated=True)
            if action is Action.DECLINE:
                return replace(state, checkout_pending=False)
            return state

        if action is Action.CONFIRM and not state.cart.is_empty:
            return replace(state, checkout_pending=True)
        return state

    def _clamp(self, cursor: int) -> int:
        return max(0, min(cursor, self._catalog.last_index))
