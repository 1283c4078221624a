"""
Database utilities.
"""

import logging

from asgiref.sync import sync_to_async
from django.db import connections

logger = logging.getLogger(__name__)


def _ensure_connection(alias: str) -> None:
    connections[alias].ensure_connection()


async def ensure_database_connection(alias: str = "default") -> None:
    """
    Open the database connection if it is not already open.

    Idempotent: an open connection is reused.

    Args:
        alias: Database alias from settings.DATABASES
    """
    await sync_to_async(_ensure_connection)(alias)
    logger.debug("Database connection ready: %s", alias)
