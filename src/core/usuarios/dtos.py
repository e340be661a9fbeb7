"""
Data Transfer Objects (DTOs) do Domínio de Usuários.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.core.pessoas.dtos import CriarPessoaInputDTO, PessoaOutputDTO
from src.core.pessoas.entities import PessoaEntity

from .entities import UsuarioEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class RegistrarUsuarioInputDTO:
    """
    DTO de entrada para registro (conta + pessoa).

    Attributes:
        username: Nome de login
        password: Senha em texto puro (vira hash no caso de uso)
        pessoa: Dados cadastrais da pessoa vinculada
    """

    username: str
    password: str
    pessoa: CriarPessoaInputDTO

    def to_dict(self) -> dict:
        # Senha nunca é serializada
        return {
            "username": self.username,
            "pessoa": self.pessoa.to_dict(),
        }


@dataclass(frozen=True)
class LoginInputDTO:
    username: str
    password: str


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class UsuarioOutputDTO:
    """
    DTO de saída do usuário (sem hash de senha).

    Attributes:
        id: Identificador único
        username: Nome de login
        papel: "User" ou "Admin"
        pessoa: Pessoa vinculada (se houver)
        criado_em: Data/hora de criação
        atualizado_em: Data/hora da última atualização
    """

    id: str
    username: str
    papel: str
    pessoa: Optional[PessoaOutputDTO]
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def from_entity(
        cls,
        entity: UsuarioEntity,
        pessoa: Optional[PessoaEntity] = None,
    ) -> "UsuarioOutputDTO":
        return cls(
            id=entity.id,
            username=entity.username,
            papel=entity.papel.value,
            pessoa=PessoaOutputDTO.from_entity(pessoa) if pessoa else None,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "papel": self.papel,
            "pessoa": self.pessoa.to_dict() if self.pessoa else None,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat(),
        }


@dataclass
class LoginOutputDTO:
    token: str
    expira_em: datetime
    usuario: UsuarioOutputDTO

    def to_dict(self) -> dict:
        return {
            "token": self.token,
            "expira_em": self.expira_em.isoformat(),
            "usuario": self.usuario.to_dict(),
        }
