"""
Vending Kiosk API - Main Application.

FastAPI application exposing the inventory and sales engine to kiosk front ends
(product grid, admin screen, transaction history).
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from api.errors import vending_error_handler
from api.logging_config import setup_logging
from domain.errors import VendingError

setup_logging()

# Create FastAPI application
app = FastAPI(
    title="Vending Kiosk API",
    description="REST API for kiosk inventory, purchases and sale history",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# The kiosk front end is served from a different local origin.
# TODO: Restrict origins once the kiosk UI has a fixed host
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(VendingError, vending_error_handler)


@app.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint.

    Returns the API status and version.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "service": "vending-kiosk-api"
    }


@app.get("/", tags=["Root"])
def root():
    """
    Root endpoint with API information.
    """
    return {
        "message": "Vending Kiosk API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


# Import and include routers
from api.routers import products, purchases, sales

app.include_router(products.router, prefix="/api/v1", tags=["Products"])
app.include_router(purchases.router, prefix="/api/v1", tags=["Purchases"])
app.include_router(sales.router, prefix="/api/v1", tags=["Sales"])
