"""
Customer-related Pydantic models
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel

class CustomerCreateRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None

class CustomerUpdateRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


class CustomerResponse(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    created_at: datetime

class CustomerDeleteResponse(BaseModel):
    ok: bool = True
