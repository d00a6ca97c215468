"""Health and info routes."""
from fastapi import APIRouter, Depends

from config import default_config
from models import HealthResponse
from routes.deps import get_reference_store

router = APIRouter()


@router.get("/", include_in_schema=False)
async def root():
    """Root endpoint with API information"""
    return {
        "message": "Reference Index Maintenance API",
        "docs": "/docs",
        "health": "/health"
    }


@router.get("/health", response_model=HealthResponse)
def health(store=Depends(get_reference_store)):
    """
    Health check endpoint

    Reports whether the reference index can be read, plus its counts
    """
    try:
        counts = store.count_references()
        status = "healthy"
        error = None
    except Exception as e:
        counts = {}
        status = "unhealthy"
        error = str(e)

    return HealthResponse(
        status=status,
        database_path=default_config.database.path,
        content_root=str(default_config.paths.content_root),
        file_references=counts.get('file_references', 0),
        managed_file_references=counts.get('managed_file_references', 0),
        soft_file_references=counts.get('soft_file_references', 0),
        error=error
    )
