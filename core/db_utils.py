# core/db_utils.py
import logging
import time

from django.db import DEFAULT_DB_ALIAS, connections
from django.db.utils import OperationalError

from core.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)


def ensure_store_available(retries=3, delay=2, using=DEFAULT_DB_ALIAS):
    """
    Open the database connection, retrying on failure.
    One attempt plus `retries` more, sleeping `delay` seconds in between.
    Raises StoreUnavailable when every attempt fails.
    """
    connection = connections[using]
    while True:
        try:
            connection.ensure_connection()
        except OperationalError as exc:
            if retries > 0:
                logger.warning("Connection failed. Retrying (%d left)...", retries)
                time.sleep(delay)
                retries -= 1
                continue
            logger.error("Database connection failed after retries: %s", exc)
            raise StoreUnavailable(f"Database '{using}' unavailable: {exc}") from exc
        logger.info("Database connected (%s, alias=%s)", connection.vendor, using)
        return connection
