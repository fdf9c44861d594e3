"""
Runtime configuration for the clinic doctor records
Values come from the environment, optionally through a .env file
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

# Logging settings
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
DEBUG_MODE = os.environ.get('DEBUG', 'False').lower() == 'true'

# Demo settings
DEMO_BOOKINGS = int(os.environ.get('DEMO_BOOKINGS', 3))


def configure_logging():
    """Configure root logging for entry points"""
    level = logging.DEBUG if DEBUG_MODE else getattr(logging, LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT
    )
