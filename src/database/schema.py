"""
Idempotent table creation - runs on every API request
"""

import logging
import asyncpg

logger = logging.getLogger(__name__)

CREATE_CUSTOMERS_TABLE = """
    CREATE TABLE IF NOT EXISTS customers (
        id SERIAL PRIMARY KEY,
        name TEXT NOT NULL,
        email TEXT UNIQUE,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
"""

CREATE_ORDERS_TABLE = """
    CREATE TABLE IF NOT EXISTS orders (
        id SERIAL PRIMARY KEY,
        customer_name TEXT NOT NULL,
        total NUMERIC(10,2) NOT NULL DEFAULT 0,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
"""

SCHEMA_STATEMENTS = (CREATE_CUSTOMERS_TABLE, CREATE_ORDERS_TABLE)


async def ensure_tables(conn: asyncpg.Connection) -> None:
    """
    Make sure the customers and orders tables exist.

    Two first-time creates racing each other can still collide in the
    Postgres catalog even with IF NOT EXISTS; the loser sees the table as
    already created.
    """
    for statement in SCHEMA_STATEMENTS:
        try:
            await conn.execute(statement)
        except (asyncpg.DuplicateTableError, asyncpg.UniqueViolationError) as e:
            logger.debug(f"Concurrent table creation detected, table already exists: {e}")
