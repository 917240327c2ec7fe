"""
Order data access - list and create only
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from database.connection import get_db_pool
from database.schema import ensure_tables

logger = logging.getLogger(__name__)

LIST_ORDERS_SQL = """
    SELECT id, customer_name, total, created_at
    FROM orders
    ORDER BY id DESC
"""

INSERT_ORDER_SQL = """
    INSERT INTO orders (customer_name, total)
    VALUES ($1, $2)
    RETURNING id, customer_name, total, created_at
"""

CENTS = Decimal("0.01")


def coerce_total(value: Any) -> Decimal:
    """
    Convert a client-supplied total into a two-digit Decimal

    Mirrors the browser's Number() conversion: missing values, blank strings
    and False become 0, True becomes 1, numeric strings are parsed. Anything
    that does not end up as a finite number is stored as 0.
    """
    if value is None:
        number = 0.0
    elif isinstance(value, bool):
        number = float(value)
    elif isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except OverflowError:
            number = math.inf
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            number = 0.0
        elif "_" in text:
            number = math.nan
        else:
            try:
                number = float(text)
            except ValueError:
                number = math.nan
    else:
        number = math.nan

    if not math.isfinite(number):
        return Decimal("0.00")
    return Decimal(str(number)).quantize(CENTS, rounding=ROUND_HALF_UP)


class OrdersService:
    """Service for the orders table"""

    @staticmethod
    async def list_orders() -> List[Dict[str, Any]]:
        """Return all orders, newest id first"""
        db_pool = get_db_pool()

        async with db_pool.acquire() as conn:
            await ensure_tables(conn)
            rows = await conn.fetch(LIST_ORDERS_SQL)

            return [dict(row) for row in rows]

    @staticmethod
    async def create_order(customer_name: str, total: Any = None) -> Dict[str, Any]:
        """
        Insert an order and return the stored row

        Args:
            customer_name: Free-form customer name (not a foreign key)
            total: Raw total from the request, see coerce_total

        Returns:
            The created row including the generated id and created_at
        """
        db_pool = get_db_pool()
        amount = coerce_total(total)

        async with db_pool.acquire() as conn:
            await ensure_tables(conn)
            row = await conn.fetchrow(INSERT_ORDER_SQL, customer_name, amount)

            logger.info(f"Created order id={row['id']} total={amount}")
            return dict(row)


_orders_service: Optional[OrdersService] = None

def get_orders_service() -> OrdersService:
    """Get the orders service instance"""
    global _orders_service
    if _orders_service is None:
        _orders_service = OrdersService()
    return _orders_service
