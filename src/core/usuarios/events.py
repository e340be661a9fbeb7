"""
Domain Events do Domínio de Usuários.

Eventos:
- UsuarioRegistradoEvent: Nova conta criada (com pessoa vinculada)
- UsuarioRemovidoEvent: Conta excluída
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared.events import DomainEvent


@dataclass
class UsuarioRegistradoEvent(DomainEvent):
    """
    Evento: Usuário se registrou.

    Attributes:
        username: Nome de login
        papel: Papel atribuído
        pessoa_id: Pessoa criada junto com a conta
    """

    username: str = ""
    papel: str = ""
    pessoa_id: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "Usuario"


@dataclass
class UsuarioRemovidoEvent(DomainEvent):

    removido_por_id: Optional[str] = None
    pessoa_id: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "Usuario"
