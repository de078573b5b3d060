"""
FastAPI application entry point for the SEO audit service.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from seoaudit.api.v1.router import api_router
from seoaudit.config import settings
from seoaudit.schemas.common import HealthResponse

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url=f"{settings.API_V1_STR}/docs",
    redoc_url=f"{settings.API_V1_STR}/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.VERSION}


@app.get(f"{settings.API_V1_STR}/health", response_model=HealthResponse)
async def api_health_check():
    """API health check endpoint."""
    return {"status": "healthy", "version": settings.VERSION}
