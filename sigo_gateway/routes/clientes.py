"""
Cliente routes
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from sigo_gateway.services.backend_gateway import BackendGateway
from sigo_gateway.utils.dependencies import get_gateway

router = APIRouter()


@router.get("")
async def list_clientes(gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward("Cliente/GetCliente")


@router.post("")
async def create_cliente(payload: Any = Body(...), gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward("Cliente/PostCliente", method="POST", body=payload)


@router.get("/{cliente_id}")
async def get_cliente(cliente_id: int, gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward(f"Cliente/GetClienteById{cliente_id}")


@router.put("/{cliente_id}")
async def update_cliente(
    cliente_id: int,
    payload: Any = Body(...),
    gateway: BackendGateway = Depends(get_gateway)
):
    return await gateway.forward(f"Cliente/PutCliente{cliente_id}", method="PUT", body=payload)


@router.delete("/{cliente_id}")
async def delete_cliente(cliente_id: int, gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward(f"Cliente/DeleteCliente{cliente_id}", method="DELETE")
