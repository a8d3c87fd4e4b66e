"""SIGO entity models"""

from sigo_gateway.models.entities import (
    ApiResponse, Cliente, Cor, Funcionario, Marca, Servico, Telefone, Veiculo
)

__all__ = [
    'ApiResponse',
    'Cliente',
    'Cor',
    'Funcionario',
    'Marca',
    'Servico',
    'Telefone',
    'Veiculo',
]
