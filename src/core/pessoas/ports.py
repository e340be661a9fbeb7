"""
Ports (Interfaces) do Domínio de Pessoas.

Define o contrato que os Adapters de persistência devem implementar.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core
"""

import copy
from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import PessoaEntity


@runtime_checkable
class PessoaRepository(Protocol):
    """
    Interface para persistência de Pessoas (com seus contatos).

    Implementações:
    - DjangoPessoaRepository (Django ORM)
    - InMemoryPessoaRepository (para testes)
    """

    def save(self, pessoa: PessoaEntity) -> None:
        """
        Persiste pessoa e sincroniza seus contatos.

        Contatos ausentes na entidade são removidos do armazenamento.
        """
        ...

    def get_by_id(self, pessoa_id: str) -> Optional[PessoaEntity]:
        ...

    def get_by_cpf(self, cpf: str) -> Optional[PessoaEntity]:
        ...

    def delete(self, pessoa_id: str) -> None:
        """Remove pessoa e, em cascata, seus contatos."""
        ...

    def list_all(self) -> List[PessoaEntity]:
        ...

    def exists(self, pessoa_id: str) -> bool:
        ...

    def cpf_exists(self, cpf: str, excluir_id: Optional[str] = None) -> bool:
        """
        Verifica se o CPF já está cadastrado.

        Args:
            cpf: CPF somente com dígitos
            excluir_id: ID de pessoa a desconsiderar (atualizações)
        """
        ...


class InMemoryPessoaRepository:
    """
    Implementação em memória do PessoaRepository.

    Armazena cópias das entidades para simular a fronteira de
    persistência: alterações só valem após `save`.

    Útil para testes unitários e desenvolvimento local.
    """

    def __init__(self):
        self._pessoas: Dict[str, PessoaEntity] = {}

    def save(self, pessoa: PessoaEntity) -> None:
        self._pessoas[pessoa.id] = copy.deepcopy(pessoa)

    def get_by_id(self, pessoa_id: str) -> Optional[PessoaEntity]:
        pessoa = self._pessoas.get(pessoa_id)
        return copy.deepcopy(pessoa) if pessoa else None

    def get_by_cpf(self, cpf: str) -> Optional[PessoaEntity]:
        for pessoa in self._pessoas.values():
            if pessoa.cpf == cpf:
                return copy.deepcopy(pessoa)
        return None

    def delete(self, pessoa_id: str) -> None:
        self._pessoas.pop(pessoa_id, None)

    def list_all(self) -> List[PessoaEntity]:
        return [
            copy.deepcopy(p)
            for p in sorted(self._pessoas.values(), key=lambda p: p.nome)
        ]

    def exists(self, pessoa_id: str) -> bool:
        return pessoa_id in self._pessoas

    def cpf_exists(self, cpf: str, excluir_id: Optional[str] = None) -> bool:
        return any(
            p.cpf == cpf and p.id != excluir_id
            for p in self._pessoas.values()
        )

    def count(self) -> int:
        return len(self._pessoas)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._pessoas.clear()
