"""
API v1 router aggregating all endpoints.
"""
from fastapi import APIRouter

from seoaudit.api.v1.audits import router as audits_router

api_router = APIRouter()

api_router.include_router(audits_router)
