"""
Domain Events do Domínio de Pessoas.

Eventos:
- PessoaCriadaEvent: Nova pessoa cadastrada
- PessoaAtualizadaEvent: Dados cadastrais alterados
- PessoaRemovidaEvent: Pessoa excluída

Uso:
    with uow:
        pessoa = PessoaEntity.criar(...)
        repo.save(pessoa)
        uow.publish_event(PessoaCriadaEvent(aggregate_id=pessoa.id, ...))
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared.events import DomainEvent


@dataclass
class PessoaCriadaEvent(DomainEvent):
    """
    Evento: Pessoa foi cadastrada.

    Handlers típicos:
    - Registrar trilha de auditoria
    """

    nome: str = ""
    criado_por_id: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "Pessoa"


@dataclass
class PessoaAtualizadaEvent(DomainEvent):
    """Evento: Dados cadastrais da pessoa foram alterados."""

    atualizado_por_id: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "Pessoa"


@dataclass
class PessoaRemovidaEvent(DomainEvent):
    """Evento: Pessoa foi excluída (contatos removidos em cascata)."""

    removido_por_id: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "Pessoa"
