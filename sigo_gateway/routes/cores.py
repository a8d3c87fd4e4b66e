"""
Cor routes
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from sigo_gateway.services.backend_gateway import BackendGateway
from sigo_gateway.utils.dependencies import get_gateway

router = APIRouter()


@router.get("")
async def list_cores(gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward("Cor")


@router.post("")
async def create_cor(payload: Any = Body(...), gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward("Cor", method="POST", body=payload)
