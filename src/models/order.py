"""
Order-related Pydantic models
"""

from typing import Any, Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field

class OrderCreateRequest(BaseModel):
    customer_name: Optional[str] = None
    # Accepts whatever the client sends; coerced to a number by the service
    total: Optional[Any] = Field(None, description="Order total, coerced to 0 when not a finite number")


class OrderResponse(BaseModel):
    id: int
    customer_name: str
    total: Decimal
    created_at: datetime
