import logging
import os
from dotenv import load_dotenv

load_dotenv()

# Ticket numbers are drawn from this inclusive range
MIN_TICKET = 1
MAX_TICKET = 500

DEBUG = os.getenv('RAFFLE_DEBUG', 'false').lower() in ['1', 'true', 'yes']
LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING').upper()


def get_log_level():
    """Resolve the logging level, DEBUG mode wins over LOG_LEVEL"""
    if DEBUG:
        return logging.DEBUG
    level = getattr(logging, LOG_LEVEL, logging.WARNING)
    return level if isinstance(level, int) else logging.WARNING
