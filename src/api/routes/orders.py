"""
Order API routes
Orders can be listed and created; there is no update or delete.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException

from models.order import OrderCreateRequest, OrderResponse
from services.orders_service import get_orders_service

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("", response_model=List[OrderResponse])
async def list_orders():
    """List all orders, newest first"""
    orders_service = get_orders_service()

    try:
        return await orders_service.list_orders()
    except Exception as e:
        logger.error(f"Failed to list orders: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

@router.post("", status_code=201, response_model=OrderResponse)
async def create_order(request: Optional[OrderCreateRequest] = None):
    """Create a new order"""
    if not request or not request.customer_name:
        raise HTTPException(status_code=400, detail="customer_name is required")

    orders_service = get_orders_service()

    try:
        return await orders_service.create_order(
            customer_name=request.customer_name,
            total=request.total
        )
    except Exception as e:
        logger.error(f"Failed to create order: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")
