"""
Repositório Django para persistência de Usuários.

Implementa o UsuarioRepository definido em src/core/usuarios/ports.py.
"""

from typing import Optional
import logging

from django.db import IntegrityError, transaction

from src.core.usuarios.entities import UsuarioEntity
from src.core.usuarios.exceptions import UsernameJaExisteError

from ..shared.repository import BaseRepository
from .mappers import UsuarioMapper
from .models import UsuarioModel

logger = logging.getLogger(__name__)


class DjangoUsuarioRepository(BaseRepository[UsuarioEntity, UsuarioModel]):
    """
    Implementação Django do UsuarioRepository.

    Example:
        repo = DjangoUsuarioRepository()
        usuario = repo.get_by_username("admin")
    """

    model_class = UsuarioModel
    default_order_field = 'username'

    def to_entity(self, model: UsuarioModel) -> UsuarioEntity:
        return UsuarioMapper.to_entity(model)

    def to_model(self, entity: UsuarioEntity) -> UsuarioModel:
        return UsuarioMapper.to_model(entity)

    def save(self, usuario: UsuarioEntity) -> None:
        """
        Persiste o usuário.

        Um username gravado por outro usuário entre a checagem do
        use case e este save vira UsernameJaExisteError.
        """
        try:
            with transaction.atomic():
                super().save(usuario)
        except IntegrityError as exc:
            outro = UsuarioModel.objects.filter(username=usuario.username).exclude(id=usuario.id)
            if outro.exists():
                logger.warning("Username conflict on save: %s", usuario.id)
                raise UsernameJaExisteError(usuario.username) from exc
            raise

    def get_by_username(self, username: str) -> Optional[UsuarioEntity]:
        try:
            return self.to_entity(UsuarioModel.objects.get(username=username))
        except UsuarioModel.DoesNotExist:
            logger.debug("Usuario not found: %s", username)
            return None

    def username_exists(self, username: str) -> bool:
        return UsuarioModel.objects.filter(username=username).exists()
