"""
Information endpoints for API v1.

``/info/`` describes the running service; ``/info/health`` is a cheap
liveness probe that also confirms the contractor store can be read.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from contractor_registry.app.core.config import settings
from contractor_registry.app.services.contractor_service import ContractorStore, get_contractor_store

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
def get_info() -> Dict[str, Any]:
    return {
        "project": settings.project_name,
        "version": settings.api_version,
        "storage_backend": settings.storage_backend,
    }


@router.get("/health", response_model=Dict[str, Any])
def health(store: ContractorStore = Depends(get_contractor_store)) -> Dict[str, Any]:
    return {"status": "ok", "contractors": len(store.records())}
