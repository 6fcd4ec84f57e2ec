"""
Handler for switching the active playlist display.
"""

from .base_handler import BaseHandler
from ...core.config import MENU_OPTIONS, SUCCESS_MESSAGES

DISPLAY_CHOICES = {
    "1": "simple",
    "2": "detailed",
}


class DisplayHandler(BaseHandler):
    """Swaps the display used by every other command (Dependency Inversion demo)."""

    def change_display_mode(self):
        self.display_manager.display_menu(
            "Change Display Mode (Dependency Inversion Principle)", MENU_OPTIONS["DISPLAY"]
        )
        choice = self.input_handlers.read_choice("Choose display mode:", MENU_OPTIONS["DISPLAY"])
        mode = DISPLAY_CHOICES[choice]
        self.display_manager.set_mode(mode)
        self.styling.success(SUCCESS_MESSAGES["DISPLAY_SWITCHED"].format(mode=mode.capitalize()))
