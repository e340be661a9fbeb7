"""
Fixtures compartilhadas pelos testes do Core.

Nenhuma fixture aqui toca Django: o Core roda só com as
implementações em memória.
"""

from datetime import date, datetime, timezone

import pytest

from src.core.pessoas.dtos import CriarPessoaInputDTO
from src.core.pessoas.ports import InMemoryPessoaRepository
from src.core.shared.interfaces import UnitOfWork
from src.core.usuarios.autorizacao import Ator
from src.core.usuarios.ports import InMemoryUsuarioRepository, TokenGerado


CPF_VALIDO = "52998224725"
OUTRO_CPF_VALIDO = "11144477735"


class FakeUnitOfWork(UnitOfWork):
    """UoW fake que coleta eventos e registra commit/rollback."""

    def __init__(self):
        super().__init__()
        self.committed = False
        self.rolled_back = False
        self.published_events = []

    def _begin_transaction(self):
        self.clear_events()

    def commit(self):
        self.committed = True
        self.published_events.extend(self.collect_events())
        self.clear_events()

    def rollback(self):
        self.rolled_back = True
        self.clear_events()

    def event_types(self):
        return [e.event_type for e in self.published_events]


class FakePasswordHasher:
    """Hasher reversível, suficiente para testes."""

    def hash(self, senha):
        return f"hashed::{senha}"

    def verificar(self, senha, password_hash):
        return password_hash == f"hashed::{senha}"


class FakeTokenService:

    def __init__(self):
        self.gerados = []

    def gerar(self, usuario):
        self.gerados.append(usuario.id)
        return TokenGerado(
            token=f"token-{usuario.id}",
            expira_em=datetime(2030, 1, 1, tzinfo=timezone.utc),
        )

    def verificar(self, token):
        return {"sub": token.removeprefix("token-")}


@pytest.fixture
def uow():
    return FakeUnitOfWork()


@pytest.fixture
def pessoa_repo():
    return InMemoryPessoaRepository()


@pytest.fixture
def usuario_repo():
    return InMemoryUsuarioRepository()


@pytest.fixture
def password_hasher():
    return FakePasswordHasher()


@pytest.fixture
def token_service():
    return FakeTokenService()


@pytest.fixture
def admin():
    return Ator(usuario_id="admin-1", eh_admin=True)


@pytest.fixture
def criar_pessoa_dto():
    return CriarPessoaInputDTO(
        nome="Maria Silva",
        cpf="529.982.247-25",
        data_nascimento=date(1990, 1, 1),
        sexo="F",
        email="maria@example.com",
        telefone="1133334444",
        celular="11999998888",
    )
