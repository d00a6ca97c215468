"""Maintenance API routes

Endpoints for reference index reconciliation.
"""
import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from operations.errors import StoreUnavailable
from operations.missing_files_reporter import MissingFilesReporter
from routes.deps import get_reconciler

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/maintenance", tags=["maintenance"])


# ============================================================================
# Request/Response Models
# ============================================================================

class MissingFilesRequest(BaseModel):
    """Request for missing-files operation"""
    dry_run: bool = True
    update_refindex: bool = False


class RepairOutcomeDetail(BaseModel):
    """Result for a single reference removal"""
    hash: str
    target_path: str
    record: str
    removed: bool
    error: Optional[str] = None


class MissingFilesResponse(BaseModel):
    """Response from missing-files operation"""
    dry_run: bool
    index_refreshed: bool
    missing_soft_references: List[str]
    missing_managed_references: Dict[str, List[str]]
    managed_references_found: int
    references_removed: int
    outcomes: List[RepairOutcomeDetail]
    message: str


# ============================================================================
# Missing Files Endpoint
# ============================================================================

@router.post("/missing-files", response_model=MissingFilesResponse)
def missing_files(request: MissingFilesRequest = None, reconciler=Depends(get_reconciler)):
    """Find file references pointing to missing files

    Soft references (inline content) to missing files are listed for a
    manual fix. Managed references are removed from the reference index
    unless dry_run is set.

    Args:
        dry_run: If true (default), only report what would be removed
        update_refindex: Ask the index maintenance service for an update first

    Example:
        POST /api/maintenance/missing-files
        {"dry_run": false}

    Returns:
        Findings, per-reference outcomes and a summary message
    """
    if request is None:
        request = MissingFilesRequest()

    try:
        result = reconciler.run_reconciliation(
            dry_run=request.dry_run,
            refresh_index_first=request.update_refindex
        )
    except StoreUnavailable as e:
        raise HTTPException(status_code=503, detail=f"Reference index unavailable: {e}")
    except Exception as e:
        logger.exception("Missing files reconciliation failed")
        raise HTTPException(status_code=500, detail=f"Missing files check failed: {e}")

    return MissingFilesResponse(**MissingFilesReporter(result).to_dict())
