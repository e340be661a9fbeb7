"""
Domínio de Usuários - Contas de acesso e autorização.

- Entidades (UsuarioEntity, PapelUsuario)
- Ator e predicados de autorização
- Ports (UsuarioRepository, PasswordHasher, TokenService)
"""

from .autorizacao import Ator
from .entities import UsuarioEntity, PapelUsuario
from .events import UsuarioRegistradoEvent, UsuarioRemovidoEvent
from .ports import (
    UsuarioRepository,
    InMemoryUsuarioRepository,
    PasswordHasher,
    TokenService,
    TokenGerado,
)

__all__ = [
    "Ator",
    "UsuarioEntity",
    "PapelUsuario",
    "UsuarioRegistradoEvent",
    "UsuarioRemovidoEvent",
    "UsuarioRepository",
    "InMemoryUsuarioRepository",
    "PasswordHasher",
    "TokenService",
    "TokenGerado",
]
