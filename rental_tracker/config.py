import os

from .utils.constants import DEFAULT_DATA_FILE, DEFAULT_TIMEZONE


class Config:
    DATA_FILE = os.getenv("RENTAL_DATA_FILE", DEFAULT_DATA_FILE)
    TIMEZONE = os.getenv("RENTAL_TIMEZONE", DEFAULT_TIMEZONE)
    LOG_LEVEL = os.getenv("RENTAL_LOG_LEVEL", "INFO")
