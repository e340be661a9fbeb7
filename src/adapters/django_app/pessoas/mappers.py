"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- PessoaEntity ↔ PessoaModel
- ContatoEntity ↔ ContatoModel

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from src.core.pessoas.entities import ContatoEntity, PessoaEntity

from .models import ContatoModel, PessoaModel


class ContatoMapper:

    @staticmethod
    def to_model(entity: ContatoEntity, pessoa_id: str) -> ContatoModel:
        return ContatoModel(
            id=entity.id,
            pessoa_id=pessoa_id,
            tipo=entity.tipo,
            valor=entity.valor,
            principal=entity.principal,
        )

    @staticmethod
    def to_entity(model: ContatoModel) -> ContatoEntity:
        return ContatoEntity(
            id=model.id,
            tipo=model.tipo,
            valor=model.valor,
            principal=model.principal,
            pessoa_id=model.pessoa_id,
        )


class PessoaMapper:
    """
    Mapper para conversão entre PessoaEntity e PessoaModel.

    - to_model(): Entity → Model (sem contatos, não salvo)
    - to_entity(): Model → Entity (com contatos)
    """

    @staticmethod
    def to_model(entity: PessoaEntity) -> PessoaModel:
        return PessoaModel(
            id=entity.id,
            nome=entity.nome,
            cpf=entity.cpf,
            data_nascimento=entity.data_nascimento,
            sexo=entity.sexo,
            email=entity.email,
            naturalidade=entity.naturalidade,
            nacionalidade=entity.nacionalidade,
            criado_por_id=entity.criado_por_id,
            atualizado_por_id=entity.atualizado_por_id,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    @staticmethod
    def to_entity(model: PessoaModel) -> PessoaEntity:
        """
        Converte PessoaModel para PessoaEntity.

        Reconstrói a entidade sem passar pelo factory method:
        dados persistidos já foram validados na criação.
        """
        return PessoaEntity(
            id=model.id,
            nome=model.nome,
            cpf=model.cpf,
            data_nascimento=model.data_nascimento,
            sexo=model.sexo,
            email=model.email,
            naturalidade=model.naturalidade,
            nacionalidade=model.nacionalidade,
            criado_por_id=model.criado_por_id,
            atualizado_por_id=model.atualizado_por_id,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
            contatos=[ContatoMapper.to_entity(c) for c in model.contatos.all()],
        )
