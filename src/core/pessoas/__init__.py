"""
Domínio de Pessoas - Cadastro de pessoas físicas.

Contém entidades (PessoaEntity, ContatoEntity), eventos, DTOs,
ports de persistência e os casos de uso de cadastro.

Características do Domínio:
- CPF validado pelos dígitos verificadores e imutável
- Um contato principal por tipo
- Edição/remoção restrita ao administrador ou ao dono do registro
"""

from .entities import PessoaEntity, ContatoEntity, TipoContato
from .events import PessoaCriadaEvent, PessoaAtualizadaEvent, PessoaRemovidaEvent
from .dtos import (
    CriarPessoaInputDTO,
    AtualizarPessoaInputDTO,
    PessoaOutputDTO,
    ContatoOutputDTO,
)
from .ports import PessoaRepository, InMemoryPessoaRepository

__all__ = [
    # Entities
    "PessoaEntity",
    "ContatoEntity",
    "TipoContato",
    # Events
    "PessoaCriadaEvent",
    "PessoaAtualizadaEvent",
    "PessoaRemovidaEvent",
    # DTOs
    "CriarPessoaInputDTO",
    "AtualizarPessoaInputDTO",
    "PessoaOutputDTO",
    "ContatoOutputDTO",
    # Ports
    "PessoaRepository",
    "InMemoryPessoaRepository",
]
