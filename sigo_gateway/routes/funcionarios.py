"""
Funcionario routes

Backend action names (PostCliente, FetFuncionarioById, ...) are the ones the
backend exposes and must be kept as-is.
"""

from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, Body, Depends

from sigo_gateway.services.backend_gateway import BackendGateway
from sigo_gateway.utils.dependencies import get_gateway

router = APIRouter()


@router.get("")
async def list_funcionarios(gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward("Funcionario/GetFuncionario")


@router.post("")
async def create_funcionario(payload: Any = Body(...), gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward("Funcionario/PostCliente", method="POST", body=payload)


@router.get("/nome/{nome}")
async def search_funcionario_by_nome(nome: str, gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward(f"Funcionario/GetFuncionarioByNome/{quote(nome, safe='')}")


@router.get("/{funcionario_id}")
async def get_funcionario(funcionario_id: int, gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward(f"Funcionario/FetFuncionarioById{funcionario_id}")


@router.put("/{funcionario_id}")
async def update_funcionario(
    funcionario_id: int,
    payload: Any = Body(...),
    gateway: BackendGateway = Depends(get_gateway)
):
    return await gateway.forward(f"Funcionario/PutCliente{funcionario_id}", method="PUT", body=payload)


@router.delete("/{funcionario_id}")
async def delete_funcionario(funcionario_id: int, gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.forward(f"Funcionario/DeleteFuncionario{funcionario_id}", method="DELETE")
