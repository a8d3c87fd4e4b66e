"""
Veiculo routes
"""

from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, Body, Depends

from sigo_gateway.services.backend_gateway import BackendGateway
from sigo_gateway.utils.dependencies import get_gateway

router = APIRouter()


@router.get("")
async def list_veiculos(gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward("Veiculo")


@router.post("")
async def create_veiculo(payload: Any = Body(...), gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward("Veiculo", method="POST", body=payload)


@router.get("/placa/{placa}")
async def search_veiculo_by_placa(placa: str, gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward(f"Veiculo/placa/{quote(placa, safe='')}")


@router.get("/tipo/{tipo}")
async def search_veiculo_by_tipo(tipo: str, gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward(f"Veiculo/tipo/{quote(tipo, safe='')}")
