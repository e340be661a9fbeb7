"""
Ports (Interfaces) do Domínio de Usuários.

- UsuarioRepository: persistência de contas
- PasswordHasher: geração/verificação de hash de senha
- TokenService: emissão/verificação de tokens de acesso
"""

import copy
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from .entities import UsuarioEntity


@dataclass(frozen=True)
class TokenGerado:
    """Token de acesso emitido e seu instante de expiração (UTC)."""

    token: str
    expira_em: datetime


@runtime_checkable
class UsuarioRepository(Protocol):
    """
    Interface para persistência de Usuários.

    Implementações:
    - DjangoUsuarioRepository (Django ORM)
    - InMemoryUsuarioRepository (para testes)
    """

    def save(self, usuario: UsuarioEntity) -> None:
        ...

    def get_by_id(self, usuario_id: str) -> Optional[UsuarioEntity]:
        ...

    def get_by_username(self, username: str) -> Optional[UsuarioEntity]:
        ...

    def username_exists(self, username: str) -> bool:
        ...

    def delete(self, usuario_id: str) -> None:
        ...

    def list_all(self) -> List[UsuarioEntity]:
        ...


@runtime_checkable
class PasswordHasher(Protocol):

    def hash(self, senha: str) -> str:
        ...

    def verificar(self, senha: str, password_hash: str) -> bool:
        ...


@runtime_checkable
class TokenService(Protocol):
    """
    Emissão e verificação de tokens de acesso.

    `verificar` retorna as claims do token ou lança
    TokenInvalidoError / TokenExpiradoError.
    """

    def gerar(self, usuario: UsuarioEntity) -> TokenGerado:
        ...

    def verificar(self, token: str) -> Dict[str, Any]:
        ...


class InMemoryUsuarioRepository:
    """Implementação em memória do UsuarioRepository (testes)."""

    def __init__(self):
        self._usuarios: Dict[str, UsuarioEntity] = {}

    def save(self, usuario: UsuarioEntity) -> None:
        self._usuarios[usuario.id] = copy.deepcopy(usuario)

    def get_by_id(self, usuario_id: str) -> Optional[UsuarioEntity]:
        usuario = self._usuarios.get(usuario_id)
        return copy.deepcopy(usuario) if usuario else None

    def get_by_username(self, username: str) -> Optional[UsuarioEntity]:
        for usuario in self._usuarios.values():
            if usuario.username == username:
                return copy.deepcopy(usuario)
        return None

    def username_exists(self, username: str) -> bool:
        return any(u.username == username for u in self._usuarios.values())

    def delete(self, usuario_id: str) -> None:
        self._usuarios.pop(usuario_id, None)

    def list_all(self) -> List[UsuarioEntity]:
        return [
            copy.deepcopy(u)
            for u in sorted(self._usuarios.values(), key=lambda u: u.username)
        ]

    def count(self) -> int:
        return len(self._usuarios)

    def clear(self) -> None:
        self._usuarios.clear()
