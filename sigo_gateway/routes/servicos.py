"""
Servico routes
"""

from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, Body, Depends

from sigo_gateway.services.backend_gateway import BackendGateway
from sigo_gateway.utils.dependencies import get_gateway

router = APIRouter()


@router.get("")
async def list_servicos(gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward("Servico/GetServico")


@router.post("")
async def create_servico(payload: Any = Body(...), gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward("Servico/PostService", method="POST", body=payload)


@router.get("/nome/{nome}")
async def search_servico_by_nome(nome: str, gateway: BackendGateway = Depends(get_gateway)):
    # "GetServicoByhNome" is the backend's action name
    return await gateway.forward(f"Servico/GetServicoByhNome/{quote(nome, safe='')}")


@router.get("/{servico_id}")
async def get_servico(servico_id: int, gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward(f"Servico/GetServicoById{servico_id}")


@router.put("/{servico_id}")
async def update_servico(
    servico_id: int,
    payload: Any = Body(...),
    gateway: BackendGateway = Depends(get_gateway)
):
    return await gateway.forward(f"Servico/PutServico{servico_id}", method="PUT", body=payload)


@router.delete("/{servico_id}")
async def delete_servico(servico_id: int, gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward(f"Servico/DeleteServico{servico_id}", method="DELETE")
