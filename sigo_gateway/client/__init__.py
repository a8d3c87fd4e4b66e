"""Async data-access client for the SIGO gateway"""

from sigo_gateway.client.api_client import ApiError, SigoApiClient
from sigo_gateway.client.resources import (
    ClienteClient, CorClient, FuncionarioClient, MarcaClient, ServicoClient, VeiculoClient,
    is_api_response, unwrap_list, unwrap_single
)

__all__ = [
    'ApiError',
    'SigoApiClient',
    'ClienteClient',
    'CorClient',
    'FuncionarioClient',
    'MarcaClient',
    'ServicoClient',
    'VeiculoClient',
    'is_api_response',
    'unwrap_list',
    'unwrap_single',
]
