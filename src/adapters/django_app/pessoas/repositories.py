"""
Repositório Django para persistência de Pessoas.

Implementa o PessoaRepository definido em src/core/pessoas/ports.py.
Contatos são persistidos junto com a pessoa (agregado único).
"""

from typing import Optional
import logging

from django.db import IntegrityError, transaction

from src.core.pessoas.entities import PessoaEntity
from src.core.pessoas.exceptions import CPFJaCadastradoError

from ..shared.repository import BaseRepository
from .mappers import ContatoMapper, PessoaMapper
from .models import ContatoModel, PessoaModel

logger = logging.getLogger(__name__)


class DjangoPessoaRepository(BaseRepository[PessoaEntity, PessoaModel]):
    """
    Implementação Django do PessoaRepository.

    Example:
        repo = DjangoPessoaRepository()
        repo.save(pessoa)
        pessoa = repo.get_by_cpf("52998224725")
    """

    model_class = PessoaModel
    prefetch_related_fields = ['contatos']
    default_order_field = 'nome'

    def to_entity(self, model: PessoaModel) -> PessoaEntity:
        return PessoaMapper.to_entity(model)

    def to_model(self, entity: PessoaEntity) -> PessoaModel:
        return PessoaMapper.to_model(entity)

    def save(self, pessoa: PessoaEntity) -> None:
        """
        Persiste pessoa e sincroniza contatos.

        Contatos ausentes na entidade são removidos.

        Raises:
            CPFJaCadastradoError: outra pessoa gravou o mesmo CPF
                entre a checagem do use case e este save
        """
        try:
            self._salvar_com_contatos(pessoa)
        except IntegrityError as exc:
            if self.cpf_exists(pessoa.cpf, excluir_id=pessoa.id):
                logger.warning("CPF conflict on save: %s", pessoa.id)
                raise CPFJaCadastradoError(pessoa.cpf) from exc
            raise

        logger.info("Pessoa saved: %s (%d contatos)", pessoa.id, len(pessoa.contatos))

    def _salvar_com_contatos(self, pessoa: PessoaEntity) -> None:
        with transaction.atomic():
            super().save(pessoa)

            ids_atuais = [c.id for c in pessoa.contatos]
            ContatoModel.objects.filter(pessoa_id=pessoa.id).exclude(id__in=ids_atuais).delete()

            for contato in pessoa.contatos:
                model = ContatoMapper.to_model(contato, pessoa.id)
                ContatoModel.objects.update_or_create(
                    id=model.id,
                    defaults={
                        'pessoa_id': model.pessoa_id,
                        'tipo': model.tipo,
                        'valor': model.valor,
                        'principal': model.principal,
                    },
                )

    def get_by_cpf(self, cpf: str) -> Optional[PessoaEntity]:
        try:
            model = self._get_base_queryset().get(cpf=cpf)
            return self.to_entity(model)
        except PessoaModel.DoesNotExist:
            return None

    def cpf_exists(self, cpf: str, excluir_id: Optional[str] = None) -> bool:
        qs = PessoaModel.objects.filter(cpf=cpf)
        if excluir_id:
            qs = qs.exclude(id=excluir_id)
        return qs.exists()
