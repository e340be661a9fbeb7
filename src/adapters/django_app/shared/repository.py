"""
Repository Base - Implementação base de repositórios com Django ORM.

Fornece funcionalidades comuns para todos os repositórios:
- CRUD básico
- Otimização de queries (select_related, prefetch_related)

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Apenas persistência e queries
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Type, TypeVar
import logging

from django.db import models
from django.db.models import QuerySet

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


class BaseRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios Django.

    Type Parameters:
        T: Tipo da entidade de domínio
        M: Tipo do Model Django

    Example:
        class DjangoUsuarioRepository(BaseRepository[UsuarioEntity, UsuarioModel]):
            model_class = UsuarioModel

            def to_entity(self, model):
                return UsuarioMapper.to_entity(model)

            def to_model(self, entity):
                return UsuarioMapper.to_model(entity)
    """

    model_class: Type[M]

    # Campos para select_related (otimização N+1)
    select_related_fields: List[str] = []

    # Campos para prefetch_related (reverse FK)
    prefetch_related_fields: List[str] = []

    default_order_field: str = "-criado_em"

    @abstractmethod
    def to_entity(self, model: M) -> T:
        raise NotImplementedError

    @abstractmethod
    def to_model(self, entity: T) -> M:
        """Converte Entity de domínio para Model Django (não salvo)."""
        raise NotImplementedError

    def _get_base_queryset(self) -> QuerySet:
        qs = self.model_class.objects.all()

        if self.select_related_fields:
            qs = qs.select_related(*self.select_related_fields)

        if self.prefetch_related_fields:
            qs = qs.prefetch_related(*self.prefetch_related_fields)

        return qs

    def save(self, entity: T) -> None:
        """
        Persiste entidade (create ou update).

        Usa update_or_create para atomicidade.
        """
        model = self.to_model(entity)

        model_dict = {}
        for field in model._meta.fields:
            if not field.primary_key:
                model_dict[field.attname] = getattr(model, field.attname)

        self.model_class.objects.update_or_create(
            id=getattr(entity, "id"),
            defaults=model_dict,
        )

        logger.debug("%s saved: %s", self.model_class.__name__, entity.id)

    def get_by_id(self, entity_id: str) -> Optional[T]:
        try:
            model = self._get_base_queryset().get(id=entity_id)
            return self.to_entity(model)
        except self.model_class.DoesNotExist:
            return None

    def delete(self, entity_id: str) -> None:
        deleted_count, _ = self.model_class.objects.filter(id=entity_id).delete()
        logger.debug(
            "%s delete %s: %d row(s)",
            self.model_class.__name__,
            entity_id,
            deleted_count,
        )

    def exists(self, entity_id: str) -> bool:
        return self.model_class.objects.filter(id=entity_id).exists()

    def count(self) -> int:
        return self.model_class.objects.count()

    def list_all(self) -> List[T]:
        """
        Lista todas as entidades.

        Warning:
            Sem paginação; a API pagina a lista em memória.
        """
        models = self._get_base_queryset().order_by(self.default_order_field)
        return [self.to_entity(m) for m in models]
