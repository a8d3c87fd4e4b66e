"""
Marca routes (REST-style backend controller)
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from sigo_gateway.services.backend_gateway import BackendGateway
from sigo_gateway.utils.dependencies import get_gateway

router = APIRouter()


@router.get("")
async def list_marcas(gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward("Marca")


@router.post("")
async def create_marca(payload: Any = Body(...), gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward("Marca", method="POST", body=payload)


@router.get("/{marca_id}")
async def get_marca(marca_id: int, gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward(f"Marca/{marca_id}")


@router.put("/{marca_id}")
async def update_marca(
    marca_id: int,
    payload: Any = Body(...),
    gateway: BackendGateway = Depends(get_gateway)
):
    return await gateway.forward(f"Marca/{marca_id}", method="PUT", body=payload)


@router.delete("/{marca_id}")
async def delete_marca(marca_id: int, gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward(f"Marca/{marca_id}", method="DELETE")
