"""
In-memory stand-in for the asyncpg pool used by the API tests
Understands exactly the statements issued by the service layer.
"""

import itertools
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

import asyncpg

from database.schema import CREATE_CUSTOMERS_TABLE, CREATE_ORDERS_TABLE
from services import customers_service as cs
from services import orders_service as os_


class FakeDatabase:
    """Shared state behind every fake connection"""

    def __init__(self):
        self.tables = set()
        self.customers: Dict[int, Dict[str, Any]] = {}
        self.orders: Dict[int, Dict[str, Any]] = {}
        self.statements: List[str] = []
        self.fail_next: Optional[Exception] = None
        self.unavailable = False
        self.dsn = None
        self.pool_kwargs: Dict[str, Any] = {}
        self._customer_ids = itertools.count(1)
        self._order_ids = itertools.count(1)

    def require(self, table: str):
        if table not in self.tables:
            raise asyncpg.UndefinedTableError(f'relation "{table}" does not exist')


class FakeConnection:
    def __init__(self, db: FakeDatabase):
        self.db = db

    def _record(self, sql: str):
        self.db.statements.append(sql)
        if self.db.fail_next is not None:
            error, self.db.fail_next = self.db.fail_next, None
            raise error

    async def execute(self, sql: str, *args) -> str:
        self._record(sql)
        if sql is CREATE_CUSTOMERS_TABLE:
            self.db.tables.add("customers")
        elif sql is CREATE_ORDERS_TABLE:
            self.db.tables.add("orders")
        else:
            raise AssertionError(f"Unexpected statement: {sql}")
        return "CREATE TABLE"

    async def fetch(self, sql: str, *args) -> List[Dict[str, Any]]:
        self._record(sql)
        if sql is cs.LIST_CUSTOMERS_SQL:
            self.db.require("customers")
            return [dict(row) for _, row in sorted(self.db.customers.items(), reverse=True)]
        if sql is os_.LIST_ORDERS_SQL:
            self.db.require("orders")
            return [dict(row) for _, row in sorted(self.db.orders.items(), reverse=True)]
        raise AssertionError(f"Unexpected statement: {sql}")

    async def fetchrow(self, sql: str, *args) -> Optional[Dict[str, Any]]:
        self._record(sql)
        if sql is cs.INSERT_CUSTOMER_SQL:
            self.db.require("customers")
            name, email = args
            self._check_unique_email(email)
            customer_id = next(self.db._customer_ids)
            row = {"id": customer_id, "name": name, "email": email, "created_at": datetime.now(timezone.utc)}
            self.db.customers[customer_id] = row
            return dict(row)
        if sql is cs.GET_CUSTOMER_SQL:
            self.db.require("customers")
            row = self.db.customers.get(args[0])
            return dict(row) if row else None
        if sql is cs.UPDATE_CUSTOMER_SQL:
            self.db.require("customers")
            customer_id, name, email = args
            row = self.db.customers.get(customer_id)
            if row is None:
                return None
            if email is not None and email != row["email"]:
                self._check_unique_email(email)
            row["name"] = name if name is not None else row["name"]
            row["email"] = email if email is not None else row["email"]
            return dict(row)
        if sql is os_.INSERT_ORDER_SQL:
            self.db.require("orders")
            customer_name, total = args
            assert isinstance(total, Decimal)
            order_id = next(self.db._order_ids)
            row = {"id": order_id, "customer_name": customer_name, "total": total, "created_at": datetime.now(timezone.utc)}
            self.db.orders[order_id] = row
            return dict(row)
        raise AssertionError(f"Unexpected statement: {sql}")

    async def fetchval(self, sql: str, *args) -> Any:
        self._record(sql)
        if sql == "SELECT 1":
            return 1
        if sql is cs.DELETE_CUSTOMER_SQL:
            self.db.require("customers")
            row = self.db.customers.pop(args[0], None)
            return row["id"] if row else None
        raise AssertionError(f"Unexpected statement: {sql}")

    def _check_unique_email(self, email: Optional[str]):
        if email is None:
            return
        if any(row["email"] == email for row in self.db.customers.values()):
            raise asyncpg.UniqueViolationError(
                'duplicate key value violates unique constraint "customers_email_key"'
            )


class FakePool:
    def __init__(self, db: FakeDatabase):
        self.db = db
        self.closed = False

    @asynccontextmanager
    async def acquire(self):
        if self.db.unavailable:
            raise ConnectionRefusedError("could not connect to server")
        yield FakeConnection(self.db)

    async def close(self):
        self.closed = True
