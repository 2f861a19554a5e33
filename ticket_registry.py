import logging
import random

from config import MIN_TICKET, MAX_TICKET

logger = logging.getLogger(__name__)


def is_prime(number):
    """Exact primality test by trial division"""
    if number < 2:
        return False
    if number % 2 == 0:
        return number == 2

    divisor = 3
    while divisor * divisor <= number:
        if number % divisor == 0:
            return False
        divisor += 2
    return True


class TicketRegistry:
    def __init__(self, rng=None):
        """
        In-memory mapping of user name to ticket number.
        Lives for the process lifetime only, nothing is persisted.
        """
        self.rng = rng if rng is not None else random.Random()
        self.tickets = {}

    def __len__(self):
        return len(self.tickets)

    def has_ticket(self, name):
        """Check whether a user currently holds a ticket"""
        return name in self.tickets

    def get_ticket(self, name):
        """Get the ticket number held by a user, or None"""
        return self.tickets.get(name)

    def sold_numbers(self):
        """Get all ticket numbers currently assigned"""
        return set(self.tickets.values())

    def available_numbers(self):
        """Get the ticket numbers nobody holds, in ascending order"""
        sold = self.sold_numbers()
        return [number for number in range(MIN_TICKET, MAX_TICKET + 1) if number not in sold]

    def assign_ticket(self, name):
        """Assign a random unused ticket number to a user

        Returns the assigned number, or None when every number is taken.
        """
        if name in self.tickets:
            raise ValueError(f"{name!r} already holds ticket {self.tickets[name]}")

        available_numbers = self.available_numbers()
        if not available_numbers:
            logger.warning(f"No tickets left to assign to {name!r}")
            return None

        # Uniform over unused numbers, same outcome as redrawing on collision
        number = self.rng.choice(available_numbers)
        self.tickets[name] = number

        logger.info(f"Assigned ticket {number} to {name!r}")
        return number

    def remove(self, name):
        """Remove a user's ticket, returning the number it held"""
        number = self.tickets.pop(name)
        logger.info(f"Removed ticket {number} held by {name!r}")
        return number
