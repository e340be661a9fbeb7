"""
Use Cases (Application Services) do Domínio de Pessoas.

Use Cases implementados:
- CriarPessoaService: Cadastra nova pessoa com contatos padrão
- ListarPessoasService: Lista todas as pessoas
- ObterPessoaService: Obtém pessoa específica
- AtualizarPessoaService: Atualiza dados e contatos
- RemoverPessoaService: Remove pessoa (contatos em cascata)

Operações de escrita recebem o `Ator` explicitamente: quem executa
a operação é um parâmetro, nunca estado global.
"""

import logging
from typing import List

from src.core.shared.cpf import limpar_cpf
from src.core.shared.interfaces import UnitOfWork
from src.core.usuarios.autorizacao import Ator
from src.core.usuarios.exceptions import PermissaoNegadaError

from .dtos import AtualizarPessoaInputDTO, CriarPessoaInputDTO, PessoaOutputDTO
from .entities import PessoaEntity
from .events import PessoaAtualizadaEvent, PessoaCriadaEvent, PessoaRemovidaEvent
from .exceptions import CPFJaCadastradoError, PessoaNaoEncontradaError
from .ports import PessoaRepository

logger = logging.getLogger(__name__)


class CriarPessoaService:
    """
    Use Case: Cadastrar uma nova pessoa.

    Fluxo:
    1. Verificar unicidade do CPF
    2. Criar entidade (validações na entidade)
    3. Montar contatos padrão (Email, Telefone, Celular)
    4. Persistir e disparar PessoaCriadaEvent

    Example:
        service = CriarPessoaService(pessoa_repo, uow)
        output = service.execute(input_dto, ator)
        print(output.id)
    """

    def __init__(self, pessoa_repo: PessoaRepository, uow: UnitOfWork):
        self.pessoa_repo = pessoa_repo
        self.uow = uow

    def execute(self, input_dto: CriarPessoaInputDTO, ator: Ator) -> PessoaOutputDTO:
        """
        Raises:
            CPFJaCadastradoError: CPF já pertence a outra pessoa
            CampoObrigatorioError, CPFInvalidoError, DataNascimentoInvalidaError
        """
        with self.uow:
            cpf = limpar_cpf(input_dto.cpf)
            if cpf and self.pessoa_repo.cpf_exists(cpf):
                raise CPFJaCadastradoError(cpf)

            pessoa = PessoaEntity.criar(
                nome=input_dto.nome,
                cpf=input_dto.cpf,
                data_nascimento=input_dto.data_nascimento,
                sexo=input_dto.sexo,
                email=input_dto.email,
                naturalidade=input_dto.naturalidade,
                nacionalidade=input_dto.nacionalidade,
                criado_por_id=ator.usuario_id,
            )
            pessoa.substituir_contatos(
                email=input_dto.email,
                telefone=input_dto.telefone,
                celular=input_dto.celular,
            )

            self.pessoa_repo.save(pessoa)

            self.uow.publish_event(
                PessoaCriadaEvent(
                    aggregate_id=pessoa.id,
                    nome=pessoa.nome,
                    criado_por_id=ator.usuario_id,
                )
            )

        logger.info("Pessoa %s cadastrada por %s", pessoa.id, ator.usuario_id)
        return PessoaOutputDTO.from_entity(pessoa)


class ListarPessoasService:
    """Use Case: Listar todas as pessoas (ordenadas por nome)."""

    def __init__(self, pessoa_repo: PessoaRepository):
        self.pessoa_repo = pessoa_repo

    def execute(self) -> List[PessoaOutputDTO]:
        return [PessoaOutputDTO.from_entity(p) for p in self.pessoa_repo.list_all()]


class ObterPessoaService:
    """Use Case: Obter pessoa específica por ID."""

    def __init__(self, pessoa_repo: PessoaRepository):
        self.pessoa_repo = pessoa_repo

    def execute(self, pessoa_id: str) -> PessoaOutputDTO:
        """
        Raises:
            PessoaNaoEncontradaError: Se pessoa não existe
        """
        pessoa = self.pessoa_repo.get_by_id(pessoa_id)
        if not pessoa:
            raise PessoaNaoEncontradaError(pessoa_id)

        return PessoaOutputDTO.from_entity(pessoa)


class AtualizarPessoaService:
    """
    Use Case: Atualizar dados cadastrais de uma pessoa.

    Fluxo:
    1. Buscar pessoa (404 antes de qualquer checagem de permissão)
    2. Verificar se o ator pode editar a pessoa
    3. Atualizar dados (CPF nunca muda)
    4. Substituir contatos pelos informados
    5. Persistir e disparar PessoaAtualizadaEvent
    """

    def __init__(self, pessoa_repo: PessoaRepository, uow: UnitOfWork):
        self.pessoa_repo = pessoa_repo
        self.uow = uow

    def execute(self, input_dto: AtualizarPessoaInputDTO, ator: Ator) -> PessoaOutputDTO:
        """
        Raises:
            PessoaNaoEncontradaError: Se pessoa não existe
            PermissaoNegadaError: Se ator não é admin nem dono do registro
        """
        with self.uow:
            pessoa = self.pessoa_repo.get_by_id(input_dto.pessoa_id)
            if not pessoa:
                raise PessoaNaoEncontradaError(input_dto.pessoa_id)

            if not ator.pode_editar_pessoa(pessoa.id):
                raise PermissaoNegadaError.editar_pessoa(pessoa.id, ator.usuario_id)

            pessoa.atualizar_info(
                nome=input_dto.nome,
                data_nascimento=input_dto.data_nascimento,
                sexo=input_dto.sexo,
                email=input_dto.email,
                naturalidade=input_dto.naturalidade,
                nacionalidade=input_dto.nacionalidade,
                atualizado_por_id=ator.usuario_id,
            )
            pessoa.substituir_contatos(
                email=input_dto.email,
                telefone=input_dto.telefone,
                celular=input_dto.celular,
            )

            self.pessoa_repo.save(pessoa)

            self.uow.publish_event(
                PessoaAtualizadaEvent(
                    aggregate_id=pessoa.id,
                    atualizado_por_id=ator.usuario_id,
                )
            )

        logger.info("Pessoa %s atualizada por %s", pessoa.id, ator.usuario_id)
        return PessoaOutputDTO.from_entity(pessoa)


class RemoverPessoaService:
    """Use Case: Remover pessoa e seus contatos."""

    def __init__(self, pessoa_repo: PessoaRepository, uow: UnitOfWork):
        self.pessoa_repo = pessoa_repo
        self.uow = uow

    def execute(self, pessoa_id: str, ator: Ator) -> None:
        """
        Raises:
            PessoaNaoEncontradaError: Se pessoa não existe
            PermissaoNegadaError: Se ator não é admin nem dono do registro
        """
        with self.uow:
            if not self.pessoa_repo.exists(pessoa_id):
                raise PessoaNaoEncontradaError(pessoa_id)

            if not ator.pode_remover_pessoa(pessoa_id):
                raise PermissaoNegadaError.editar_pessoa(pessoa_id, ator.usuario_id)

            self.pessoa_repo.delete(pessoa_id)

            self.uow.publish_event(
                PessoaRemovidaEvent(
                    aggregate_id=pessoa_id,
                    removido_por_id=ator.usuario_id,
                )
            )

        logger.info("Pessoa %s removida por %s", pessoa_id, ator.usuario_id)
