"""
Resource helpers
Typed CRUD/search helpers over the gateway routes, unwrapping the backend envelope
"""

from typing import Any, Generic, List, Optional, Type, TypeVar, Union
from urllib.parse import quote

from sigo_gateway.client.api_client import SigoApiClient
from sigo_gateway.models.entities import (
    ApiResponse, Cliente, Cor, Funcionario, Marca, Servico, SigoModel, Veiculo
)

ModelT = TypeVar("ModelT", bound=SigoModel)


def is_api_response(value: Any) -> bool:
    """True for a backend envelope ({Code, Message, Data})"""
    return isinstance(value, dict) and "Code" in value and "Data" in value


def normalize_data(data: Any) -> List[Any]:
    if not data:
        return []
    return data if isinstance(data, list) else [data]


def unwrap_list(payload: Any) -> List[Any]:
    """Envelope Data as a list: list as-is, object -> [object], null/absent -> []"""
    data = payload.get("Data") if isinstance(payload, dict) else None
    return normalize_data(data)


def unwrap_single(payload: Any) -> Any:
    """Envelope Data for an envelope, else the payload itself"""
    return payload["Data"] if is_api_response(payload) else payload


class ResourceClient(Generic[ModelT]):
    """List/create over one gateway resource"""

    def __init__(self, api: SigoApiClient, base_path: str, model: Type[ModelT]):
        self.api = api
        self.base_path = base_path
        self.model = model

    def _parse_many(self, items: List[Any]) -> List[ModelT]:
        return [self.model.model_validate(item) for item in items]

    @staticmethod
    def _payload(entity: Union[SigoModel, dict]) -> dict:
        return entity.to_payload() if isinstance(entity, SigoModel) else entity

    @staticmethod
    def _envelope(payload: Any) -> Any:
        return ApiResponse.model_validate(payload) if is_api_response(payload) else payload

    async def list(self) -> List[ModelT]:
        payload = await self.api.api_fetch(self.base_path)
        return self._parse_many(unwrap_list(payload))

    async def create(self, entity: Union[ModelT, dict]) -> Any:
        payload = await self.api.api_fetch(self.base_path, method="POST", json_body=self._payload(entity))
        return self._envelope(payload)

    async def _search(self, segment: str, term: str) -> List[ModelT]:
        payload = await self.api.api_fetch(f"{self.base_path}/{segment}/{quote(term, safe='')}")
        return self._parse_many(unwrap_list(payload))


class EditableResourceClient(ResourceClient[ModelT]):
    """Adds get/update/delete for resources routed by id"""

    async def get(self, entity_id: int) -> Optional[ModelT]:
        result = unwrap_single(await self.api.api_fetch(f"{self.base_path}/{entity_id}"))
        return self.model.model_validate(result) if result is not None else None

    async def update(self, entity_id: int, entity: Union[ModelT, dict]) -> Any:
        payload = await self.api.api_fetch(
            f"{self.base_path}/{entity_id}", method="PUT", json_body=self._payload(entity)
        )
        return self._envelope(payload)

    async def delete(self, entity_id: int) -> Any:
        payload = await self.api.api_fetch(f"{self.base_path}/{entity_id}", method="DELETE")
        return self._envelope(payload)


class ClienteClient(EditableResourceClient[Cliente]):
    def __init__(self, api: SigoApiClient):
        super().__init__(api, "/api/clientes", Cliente)


class FuncionarioClient(EditableResourceClient[Funcionario]):
    def __init__(self, api: SigoApiClient):
        super().__init__(api, "/api/funcionarios", Funcionario)

    async def search_by_nome(self, nome: str) -> List[Funcionario]:
        return await self._search("nome", nome)


class ServicoClient(EditableResourceClient[Servico]):
    def __init__(self, api: SigoApiClient):
        super().__init__(api, "/api/servicos", Servico)

    async def search_by_nome(self, nome: str) -> List[Servico]:
        return await self._search("nome", nome)


class MarcaClient(EditableResourceClient[Marca]):
    def __init__(self, api: SigoApiClient):
        super().__init__(api, "/api/marcas", Marca)


class CorClient(ResourceClient[Cor]):
    def __init__(self, api: SigoApiClient):
        super().__init__(api, "/api/cores", Cor)


class VeiculoClient(ResourceClient[Veiculo]):
    def __init__(self, api: SigoApiClient):
        super().__init__(api, "/api/veiculos", Veiculo)

    async def search_by_placa(self, placa: str) -> List[Veiculo]:
        return await self._search("placa", placa)

    async def search_by_tipo(self, tipo: str) -> List[Veiculo]:
        return await self._search("tipo", tipo)
