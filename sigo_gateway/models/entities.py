"""
Entity Models
Pydantic models for the backend envelope and SIGO domain entities

Keys follow the backend's PascalCase convention as delivered by the gateway.
Every field is optional and unknown fields are kept, since the backend omits
fields freely.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class SigoModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    def to_payload(self) -> dict:
        """Body sent to the gateway on create/update"""
        return self.model_dump(exclude_none=True)


class ApiResponse(SigoModel):
    """Backend envelope: {Code, Message, Data}"""
    Code: int
    Message: Optional[str] = None
    Data: Any = None


class Telefone(SigoModel):
    Id: Optional[int] = None
    Numero: Optional[str] = None
    DDD: Optional[int] = None
    ClienteId: Optional[int] = None


class Cliente(SigoModel):
    Id: Optional[int] = None
    Nome: Optional[str] = None
    Email: Optional[str] = None
    Senha: Optional[str] = None
    Cpf_Cnpj: Optional[str] = None
    Obs: Optional[str] = None
    Razao: Optional[str] = None
    DataNasc: Optional[str] = None
    Numero: Optional[int] = None
    Rua: Optional[str] = None
    Cidade: Optional[str] = None
    Cep: Optional[int] = None
    Bairro: Optional[str] = None
    Estado: Optional[str] = None
    Pais: Optional[str] = None
    Complemento: Optional[str] = None
    Sexo: Optional[int] = None
    TipoCliente: Optional[int] = None
    Situacao: Optional[int] = None
    Telefones: Optional[List[Telefone]] = None


class Funcionario(SigoModel):
    Id: Optional[int] = None
    Nome: Optional[str] = None
    Cpf: Optional[str] = None
    Cargo: Optional[str] = None
    Email: Optional[str] = None
    Situacao: Optional[int] = None


class Servico(SigoModel):
    Id: Optional[int] = None
    Nome: Optional[str] = None
    Descricao: Optional[str] = None
    Valor: Optional[float] = None
    Garantia: Optional[str] = None


class Marca(SigoModel):
    IdMarca: Optional[int] = None
    NomeMarca: Optional[str] = None
    DescMarca: Optional[str] = None
    TipoMarca: Optional[str] = None


class Cor(SigoModel):
    Id: Optional[int] = None
    NomeCor: Optional[str] = None


class Veiculo(SigoModel):
    Id: Optional[int] = None
    NomeVeiculo: Optional[str] = None
    TipoVeiculo: Optional[str] = None
    PlacaVeiculo: Optional[str] = None
    ChassiVeiculo: Optional[str] = None
    AnoFab: Optional[int] = None
    Quilometragem: Optional[int] = None
    Combustivel: Optional[str] = None
    Seguro: Optional[str] = None
    Status: Optional[int] = None
    Cores: Optional[List[Cor]] = None
