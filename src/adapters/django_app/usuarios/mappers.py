"""
Mapper para conversão entre UsuarioEntity e UsuarioModel.
"""

from src.core.usuarios.entities import PapelUsuario, UsuarioEntity

from .models import UsuarioModel


class UsuarioMapper:

    @staticmethod
    def to_model(entity: UsuarioEntity) -> UsuarioModel:
        return UsuarioModel(
            id=entity.id,
            username=entity.username,
            password_hash=entity.password_hash,
            papel=entity.papel.value,
            pessoa_id=entity.pessoa_id,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    @staticmethod
    def to_entity(model: UsuarioModel) -> UsuarioEntity:
        return UsuarioEntity(
            id=model.id,
            username=model.username,
            password_hash=model.password_hash,
            papel=PapelUsuario.from_string(model.papel),
            pessoa_id=model.pessoa_id,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )
