"""
Health Check Routes
Service health monitoring endpoints
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from sigo_gateway.services.backend_gateway import BackendGateway
from sigo_gateway.utils.dependencies import get_gateway

router = APIRouter()


def _base_status(request: Request) -> dict:
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": settings.service_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.service_version
    }


@router.get("/")
async def health_check(request: Request):
    """Basic health check"""
    return _base_status(request)


@router.get("/detailed")
async def detailed_health_check(request: Request, gateway: BackendGateway = Depends(get_gateway)):
    """Health check including the backend target and TLS policy"""
    health_status = _base_status(request)
    health_status.update({
        "backend_url": gateway.base_url,
        "environment": request.app.state.settings.environment,
        "tls_relaxed": gateway.tls_relaxed
    })
    return health_status
