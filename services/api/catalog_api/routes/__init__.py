"""API routes."""

from fastapi import APIRouter

from catalog_api.routes import products

api_router = APIRouter()

# Catalog listing and homepage rails
api_router.include_router(products.router, prefix="/api/products", tags=["products"])
