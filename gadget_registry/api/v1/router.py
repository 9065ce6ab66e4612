"""
API router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from gadget_registry.api.v1.endpoints import gadgets, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(gadgets.router, prefix="/gadgets", tags=["gadgets"])
