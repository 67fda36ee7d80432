"""
Top-level API router.

Aggregates domain-specific routers under the ``/api`` prefix applied in
``main.create_app``.  When new resources are added, include their
routers here.
"""

from fastapi import APIRouter

from .endpoints import flights

router = APIRouter()

router.include_router(flights.router, prefix="/flights", tags=["flights"])
