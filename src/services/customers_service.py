"""
Customer data access - one parameterized statement per operation
"""

import logging
from typing import Optional, Dict, Any, List

from database.connection import get_db_pool
from database.schema import ensure_tables

logger = logging.getLogger(__name__)

LIST_CUSTOMERS_SQL = """
    SELECT id, name, email, created_at
    FROM customers
    ORDER BY id DESC
"""

INSERT_CUSTOMER_SQL = """
    INSERT INTO customers (name, email)
    VALUES ($1, $2)
    RETURNING id, name, email, created_at
"""

GET_CUSTOMER_SQL = """
    SELECT id, name, email, created_at
    FROM customers
    WHERE id = $1
"""

UPDATE_CUSTOMER_SQL = """
    UPDATE customers
       SET name = COALESCE($2, name),
           email = COALESCE($3, email)
     WHERE id = $1
    RETURNING id, name, email, created_at
"""

DELETE_CUSTOMER_SQL = """
    DELETE FROM customers
    WHERE id = $1
    RETURNING id
"""


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    """Treat empty or whitespace-only strings as absent"""
    if value is None or not value.strip():
        return None
    return value


class CustomersService:
    """Service for the customers table"""

    @staticmethod
    async def list_customers() -> List[Dict[str, Any]]:
        """Return all customers, newest id first"""
        db_pool = get_db_pool()

        async with db_pool.acquire() as conn:
            await ensure_tables(conn)
            rows = await conn.fetch(LIST_CUSTOMERS_SQL)

            return [dict(row) for row in rows]

    @staticmethod
    async def create_customer(name: str, email: Optional[str] = None) -> Dict[str, Any]:
        """
        Insert a customer and return the stored row

        Args:
            name: Customer name (required, validated by the caller)
            email: Optional email; blank values are stored as NULL

        Returns:
            The created row including the generated id and created_at
        """
        db_pool = get_db_pool()

        async with db_pool.acquire() as conn:
            await ensure_tables(conn)
            row = await conn.fetchrow(INSERT_CUSTOMER_SQL, name, _blank_to_none(email))

            logger.info(f"Created customer id={row['id']}")
            return dict(row)

    @staticmethod
    async def get_customer(customer_id: int) -> Optional[Dict[str, Any]]:
        """Return the customer row or None if not found"""
        db_pool = get_db_pool()

        async with db_pool.acquire() as conn:
            await ensure_tables(conn)
            row = await conn.fetchrow(GET_CUSTOMER_SQL, customer_id)

            return dict(row) if row else None

    @staticmethod
    async def update_customer(
        customer_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Apply a partial update to a customer

        Fields passed as None (or blank) keep their stored value.

        Returns:
            The updated row or None if the customer does not exist
        """
        db_pool = get_db_pool()

        async with db_pool.acquire() as conn:
            await ensure_tables(conn)
            row = await conn.fetchrow(
                UPDATE_CUSTOMER_SQL,
                customer_id, _blank_to_none(name), _blank_to_none(email)
            )

            if row:
                logger.info(f"Updated customer id={customer_id}")
            return dict(row) if row else None

    @staticmethod
    async def delete_customer(customer_id: int) -> bool:
        """Delete a customer; returns False when no row was removed"""
        db_pool = get_db_pool()

        async with db_pool.acquire() as conn:
            await ensure_tables(conn)
            deleted_id = await conn.fetchval(DELETE_CUSTOMER_SQL, customer_id)

            if deleted_id is not None:
                logger.info(f"Deleted customer id={customer_id}")
            return deleted_id is not None


_customers_service: Optional[CustomersService] = None

def get_customers_service() -> CustomersService:
    """Get the customers service instance"""
    global _customers_service
    if _customers_service is None:
        _customers_service = CustomersService()
    return _customers_service
