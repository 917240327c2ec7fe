"""
Customer API routes
Full CRUD over the customers table; every handler goes through the service layer.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException

from models.customer import CustomerCreateRequest, CustomerUpdateRequest, CustomerResponse, CustomerDeleteResponse
from services.customers_service import get_customers_service

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("", response_model=List[CustomerResponse])
async def list_customers():
    """List all customers, newest first"""
    customers_service = get_customers_service()

    try:
        return await customers_service.list_customers()
    except Exception as e:
        logger.error(f"Failed to list customers: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

@router.post("", status_code=201, response_model=CustomerResponse)
async def create_customer(request: Optional[CustomerCreateRequest] = None):
    """Create a new customer"""
    if not request or not request.name:
        raise HTTPException(status_code=400, detail="name is required")

    customers_service = get_customers_service()

    try:
        return await customers_service.create_customer(
            name=request.name,
            email=request.email
        )
    except Exception as e:
        logger.error(f"Failed to create customer: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: int):
    """Get customer details"""
    customers_service = get_customers_service()

    try:
        customer = await customers_service.get_customer(customer_id)
    except Exception as e:
        logger.error(f"Failed to get customer {customer_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

    if not customer:
        raise HTTPException(status_code=404, detail="Not found")
    return customer

@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(customer_id: int, request: Optional[CustomerUpdateRequest] = None):
    """
    Update the supplied customer fields, keeping the rest

    Null or blank values count as omitted, so a stored email cannot be cleared.
    """
    request = request or CustomerUpdateRequest()
    customers_service = get_customers_service()

    try:
        customer = await customers_service.update_customer(
            customer_id,
            name=request.name,
            email=request.email
        )
    except Exception as e:
        logger.error(f"Failed to update customer {customer_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

    if not customer:
        raise HTTPException(status_code=404, detail="Not found")
    return customer

@router.delete("/{customer_id}", response_model=CustomerDeleteResponse)
async def delete_customer(customer_id: int):
    """Delete a customer"""
    customers_service = get_customers_service()

    try:
        deleted = await customers_service.delete_customer(customer_id)
    except Exception as e:
        logger.error(f"Failed to delete customer {customer_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

    if not deleted:
        raise HTTPException(status_code=404, detail="Not found")
    return {"ok": True}
