"""
Top-level router for version 1 of the API.

Aggregates the resource routers under their path prefixes.
"""

from fastapi import APIRouter

from .endpoints import people

router = APIRouter()

router.include_router(people.router, prefix="/people", tags=["people"])
