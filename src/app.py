"""
Two Tables Backend API Server
Customers and orders CRUD over PostgreSQL, plus the browser table editor.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from config.settings import ALLOWED_ORIGINS
from database.connection import init_database, close_database
from api.routes import health, customers, orders, ui
from utils.error_handling import setup_error_handling

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    await init_database()
    yield
    await close_database()

# FastAPI app initialization
app = FastAPI(
    title="Two Tables Backend",
    description="Editable customers and orders tables backed by REST endpoints",
    version="1.0.0",
    lifespan=lifespan
)


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Setup centralized error handling
setup_error_handling(app)

# Static assets for the UI
app.mount("/static", StaticFiles(directory=str(ui.STATIC_DIR)), name="static")

# Include API routes
app.include_router(health.router, tags=["Health"])
app.include_router(customers.router, prefix="/api/customers", tags=["Customers"])
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
app.include_router(ui.router, tags=["UI"])

# Server startup is handled by main.py at the project root
