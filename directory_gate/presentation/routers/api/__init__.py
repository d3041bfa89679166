"""Resource routers.

Paths keep the names existing mobile and web clients already call, so no
version prefix is applied.

Resources:
    /requestAsPersonal, /getPendingRequests, /updateRequestStatus
    /getLegacyData
    /uploadCallLog
    /version/latest
"""

from fastapi import APIRouter

from directory_gate.presentation.routers.api import (
    call_logs,
    directory,
    personal_requests,
    versions,
)

api_router = APIRouter()
api_router.include_router(personal_requests.router)
api_router.include_router(directory.router)
api_router.include_router(call_logs.router)
api_router.include_router(versions.router)

__all__ = ["api_router"]
