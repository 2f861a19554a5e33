import logging
import sys
from enum import Enum, auto

from config import get_log_level
from console_input import ConsoleInput
from ticket_registry import TicketRegistry, is_prime

logger = logging.getLogger(__name__)


class MenuItem(Enum):
    CHECK = auto()
    PURCHASE = auto()
    STOP_PROGRAM = auto()


# Menu order and labels shown to the user
MENU_ITEMS = [
    (MenuItem.CHECK, "check"),
    (MenuItem.PURCHASE, "purchase"),
    (MenuItem.STOP_PROGRAM, "stop program"),
]
MENU_LABELS = [label for _, label in MENU_ITEMS]
MENU_BY_LABEL = {label: item for item, label in MENU_ITEMS}


class Raffle:
    def __init__(self, registry=None, console=None):
        self.registry = registry if registry is not None else TicketRegistry()
        self.console = console if console is not None else ConsoleInput()
        # Set when the input stream fails and no further interaction is possible
        self.aborted = False

    def run(self):
        """Do menu cycles until the user stops the program or input fails"""
        while self.run_menu_cycle():
            pass
        return not self.aborted

    def run_menu_cycle(self):
        """Do one menu cycle, returns True if the user wants to cycle again"""
        selection = self.console.read_selection(
            "\nWelcome to the Raffle. Select an option by number from below.",
            MENU_LABELS
        )
        if selection is None:
            return self._abort()

        menu_item = MENU_BY_LABEL[selection]
        logger.debug(f"Menu selection: {menu_item.name}")

        if menu_item is MenuItem.STOP_PROGRAM:
            self.console.say("\nThank you for using the raffle.")
            return False

        name = self.console.read_line("\nWhat is your name?")
        if name is None:
            return self._abort()

        if menu_item is MenuItem.CHECK:
            self.check_ticket(name)
        else:
            self.purchase_ticket(name)

        return not self.aborted

    def purchase_ticket(self, name):
        """Give the user a random ticket number nobody else holds"""
        if self.registry.has_ticket(name):
            self.console.say("\nYou already have a ticket. Please check it before purchasing another.")
            return

        number = self.registry.assign_ticket(name)
        if number is None:
            self.console.say("\nSorry, all tickets have been sold!")
            return

        self.console.say(f"\nSuccessfully bought raffle ticket number {number}.")

    def check_ticket(self, name):
        """Check the user's ticket, prime numbers win"""
        if not self.registry.has_ticket(name):
            self.console.say("\nYou haven't bought a ticket yet.")
            return

        ticket_number = self.console.read_int("What is your ticket number?")
        if ticket_number is None:
            self._abort()
            return

        # A wrong guess leaves the ticket in place
        if self.registry.get_ticket(name) != ticket_number:
            self.console.say("\nYou don't own this ticket.")
            return

        if is_prime(ticket_number):
            self.console.say("\nYou won the raffle!")
        else:
            self.console.say("\nYou lost the raffle.")

        self.registry.remove(name)

    def _abort(self):
        logger.debug("Input is no longer available, stopping the raffle")
        self.aborted = True
        return False


def main():
    """Run the raffle on the console"""
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=get_log_level()
    )

    raffle = Raffle()
    return 0 if raffle.run() else 1


if __name__ == "__main__":
    sys.exit(main())
