"""Terminal front end built on prompt_toolkit.

prompt_toolkit is both the event source and the render sink here:
key bindings turn key presses into ``KeyPressed`` events, a
before-render hook turns size changes into ``Resized`` events, and a
``FormattedTextControl`` paints the frame the layout produced for the
controller's current state. The alternate screen is restored by
prompt_toolkit when the application exits.
"""

from __future__ import annotations

import logging

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.layout.containers import Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.layout import Layout

from bevshop.application.keymap import KeyMap
from bevshop.application.shop_controller import ShopController
from bevshop.domain.model.events import KeyPressed, Resized
from bevshop.infrastructure.tui.layout import ShopLayout
from bevshop.infrastructure.tui.theme import Theme

logger = logging.getLogger(__name__)

# Logical key names that differ from prompt_toolkit's key names.
PTK_KEY_NAMES = {
    "ctrl+c": "c-c",
    "enter": "enter",
    "esc": "escape",
    "pgup": "pageup",
    "pgdown": "pagedown",
    "ctrl+u": "c-u",
    "ctrl+d": "c-d",
    "space": " ",
}


def ptk_key(name: str) -> str:
    """prompt_toolkit key for a logical key name ("pgup" -> "pageup")."""
    return PTK_KEY_NAMES.get(name, name)


class ShopApp:
    """Drives one shop session until the controller terminates."""

    def __init__(
        self,
        controller: ShopController,
        layout: ShopLayout,
        keymap: KeyMap | None = None,
        theme: Theme | None = None,
    ) -> None:
        self._controller = controller
        self._layout = layout
        self._keymap = keymap or KeyMap()
        self._theme = theme or Theme()

    def frame_fragments(self) -> list[tuple[str, str]]:
        return self._layout.render(self._controller.state).fragments()

    def dispatch_key(self, name: str) -> bool:
        """Feed one key press to the controller; False once the session is over."""
        self._controller.handle(KeyPressed(name))
        return self._controller.running

    def dispatch_size(self, width: int, height: int) -> None:
        viewport = self._controller.state.viewport
        if (viewport.width, viewport.height) != (width, height):
            logger.debug("Terminal resized to %dx%d", width, height)
            self._controller.handle(Resized(width, height))

    def key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        for name in self._keymap.keys():
            kb.add(ptk_key(name))(self._key_handler(name))
        return kb

    def build(self) -> Application:
        window = Window(
            FormattedTextControl(self.frame_fragments, show_cursor=False),
            wrap_lines=False,
        )
        return Application(
            layout=Layout(window),
            key_bindings=self.key_bindings(),
            style=self._theme.to_style(),
            full_screen=True,
            mouse_support=False,
            before_render=self._on_before_render,
        )

    def run(self) -> None:
        """Block until the session ends. Terminal I/O errors propagate."""
        logger.info("Starting shop session")
        self.build().run()
        logger.info("Shop session closed")

    # --- Internal helpers -----------------------------------------------------

    def _key_handler(self, name: str):
        def handler(event: KeyPressEvent) -> None:
            if not self.dispatch_key(name):
                event.app.exit()

        return handler

    def _on_before_render(self, app: Application) -> None:
        size = app.output.get_size()
        self.dispatch_size(size.columns, size.rows)
