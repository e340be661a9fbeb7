"""
Entidades do Domínio de Usuários.

Entidades:
- UsuarioEntity: Conta de acesso (login), opcionalmente vinculada a uma Pessoa
- PapelUsuario: Papel da conta (User ou Admin)

Regras de Negócio Encapsuladas:
- Username com 3 a 50 caracteres: letras, números, '.', '-' e '_'
- Hash de senha obrigatório (força da senha não é responsabilidade da entidade)
- Predicados de autorização delegados ao Ator correspondente
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
import re
import uuid

from src.core.shared.exceptions import CampoObrigatorioError, ValidationError

from .autorizacao import Ator
from .exceptions import UsernameInvalidoError


USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
USERNAME_REGEX = re.compile(r"[a-zA-Z0-9._-]+")


def _agora() -> datetime:
    return datetime.now(timezone.utc)


class PapelUsuario(Enum):
    """Papéis de usuário."""

    USER = "User"
    ADMIN = "Admin"

    @classmethod
    def from_string(cls, valor) -> "PapelUsuario":
        """
        Converte nome, valor ou código legado (0 = User, 1 = Admin).

        Raises:
            ValidationError: Se o papel não for reconhecido
        """
        if isinstance(valor, cls):
            return valor

        legado = {0: cls.USER, 1: cls.ADMIN, "0": cls.USER, "1": cls.ADMIN}
        if valor in legado:
            return legado[valor]

        texto = str(valor).strip()
        for papel in cls:
            if texto.upper() == papel.name or texto.lower() == papel.value.lower():
                return papel

        raise ValidationError(f"Papel inválido: {valor}", field="papel")


@dataclass
class UsuarioEntity:
    """
    Entidade de Domínio: Usuário.

    Attributes:
        id: Identificador único (UUID)
        username: Nome de login
        password_hash: Hash opaco da senha
        papel: Papel do usuário
        pessoa_id: ID da pessoa vinculada (opcional)
        criado_em: Data/hora de criação (UTC)
        atualizado_em: Data/hora da última atualização (UTC)

    Example:
        usuario = UsuarioEntity.criar("maria.silva", hasher.hash("segredo"))
        usuario.definir_pessoa(pessoa)
        usuario.pode_editar_pessoa(pessoa.id)  # True
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    username: str = ""
    password_hash: str = ""
    papel: PapelUsuario = PapelUsuario.USER
    pessoa_id: Optional[str] = None

    criado_em: datetime = field(default_factory=_agora)
    atualizado_em: datetime = field(default_factory=_agora)

    @classmethod
    def criar(
        cls,
        username: str,
        password_hash: str,
        papel: PapelUsuario = PapelUsuario.USER,
    ) -> "UsuarioEntity":
        """
        Factory method para criar usuário com validações.

        Raises:
            UsernameInvalidoError: Username fora das regras
            CampoObrigatorioError: Hash de senha vazio
        """
        cls._validar_username(username)
        cls._validar_password_hash(password_hash)

        agora = _agora()
        return cls(
            username=username,
            password_hash=password_hash,
            papel=papel,
            criado_em=agora,
            atualizado_em=agora,
        )

    @staticmethod
    def _validar_username(username: str) -> None:
        if username is None or not username.strip():
            raise UsernameInvalidoError(username or "", "Username é obrigatório")

        if len(username) < USERNAME_MIN_LENGTH:
            raise UsernameInvalidoError(
                username,
                f"Username deve ter pelo menos {USERNAME_MIN_LENGTH} caracteres",
            )

        if len(username) > USERNAME_MAX_LENGTH:
            raise UsernameInvalidoError(
                username,
                f"Username deve ter no máximo {USERNAME_MAX_LENGTH} caracteres",
            )

        if not USERNAME_REGEX.fullmatch(username):
            raise UsernameInvalidoError(
                username,
                "Username só pode conter letras, números, pontos, hífens e underscores",
            )

    @staticmethod
    def _validar_password_hash(password_hash: str) -> None:
        if password_hash is None or not password_hash.strip():
            raise CampoObrigatorioError("Password hash é obrigatório", field="password_hash")

    def definir_pessoa(self, pessoa) -> None:
        """
        Vincula a pessoa (entidade) a este usuário.

        Raises:
            CampoObrigatorioError: Se pessoa ausente
        """
        if pessoa is None:
            raise CampoObrigatorioError("Pessoa é obrigatória", field="pessoa")

        self.pessoa_id = pessoa.id
        self._atualizar_timestamp()

    def atualizar_senha(self, novo_password_hash: str) -> None:
        self._validar_password_hash(novo_password_hash)
        self.password_hash = novo_password_hash
        self._atualizar_timestamp()

    def atualizar_papel(self, novo_papel: PapelUsuario) -> None:
        self.papel = novo_papel
        self._atualizar_timestamp()

    # =========================================================================
    # Autorização
    # =========================================================================

    @property
    def eh_admin(self) -> bool:
        return self.papel == PapelUsuario.ADMIN

    def como_ator(self) -> Ator:
        """Fatos de autorização deste usuário para os casos de uso."""
        return Ator(usuario_id=self.id, eh_admin=self.eh_admin, pessoa_id=self.pessoa_id)

    def pode_editar_pessoa(self, pessoa_id: str) -> bool:
        return self.como_ator().pode_editar_pessoa(pessoa_id)

    def pode_remover_pessoa(self, pessoa_id: str) -> bool:
        return self.como_ator().pode_remover_pessoa(pessoa_id)

    def validar_pode_editar_pessoa(self, pessoa_id: str) -> None:
        self.como_ator().validar_pode_editar_pessoa(pessoa_id)

    def validar_pode_remover_usuario(self, usuario_alvo_id: str) -> None:
        self.como_ator().validar_pode_remover_usuario(usuario_alvo_id)

    def _atualizar_timestamp(self) -> None:
        self.atualizado_em = _agora()

    def __repr__(self) -> str:
        return (
            f"UsuarioEntity("
            f"id={self.id[:8]}..., "
            f"username='{self.username}', "
            f"papel={self.papel.value}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UsuarioEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
