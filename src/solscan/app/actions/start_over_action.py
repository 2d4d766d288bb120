"""Action handler for starting over."""

from solscan.app.actions.init_action import InitAction
from solscan.app.components.input_section import InputSection


class StartOverAction:
    """Clears log and input, then shows the welcome banner again."""

    def __init__(self, init_action: InitAction, input_section: InputSection):
        self.init_action = init_action
        self.input_section = input_section

    def execute(self) -> None:
        self.init_action.log_display.clear()
        self.input_section.clear()
        self.init_action.execute()
