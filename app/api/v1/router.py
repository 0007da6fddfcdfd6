"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import claims, documents, health, policies, search

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(policies.router, prefix="/policies", tags=["policies"])
api_router.include_router(claims.router, prefix="/claims", tags=["claims"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
