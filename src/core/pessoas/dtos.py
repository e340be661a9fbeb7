"""
Data Transfer Objects (DTOs) do Domínio de Pessoas.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento das entidades para a camada HTTP.

Tipos de DTOs:
- Input DTOs: Dados de entrada já validados (de Forms/APIs)
- Output DTOs: Dados formatados para resposta
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from .entities import ContatoEntity, PessoaEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarPessoaInputDTO:
    """
    DTO de entrada para cadastrar pessoa.

    Imutável (frozen=True) para garantir que dados
    validados não sejam alterados acidentalmente.

    Attributes:
        nome: Nome completo
        cpf: CPF (somente dígitos ou formatado)
        data_nascimento: Data de nascimento
        sexo: M, F, Masculino ou Feminino (opcional)
        email: Email (vira contato principal do tipo Email)
        naturalidade: Local de nascimento
        nacionalidade: Nacionalidade
        telefone: Telefone fixo (contato principal do tipo Telefone)
        celular: Celular (principal apenas se não houver telefone)
    """

    nome: str
    cpf: str
    data_nascimento: date
    sexo: Optional[str] = None
    email: Optional[str] = None
    naturalidade: Optional[str] = None
    nacionalidade: Optional[str] = None
    telefone: Optional[str] = None
    celular: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "nome": self.nome,
            "cpf": self.cpf,
            "data_nascimento": self.data_nascimento.isoformat() if self.data_nascimento else None,
            "sexo": self.sexo,
            "email": self.email,
            "naturalidade": self.naturalidade,
            "nacionalidade": self.nacionalidade,
            "telefone": self.telefone,
            "celular": self.celular,
        }


@dataclass(frozen=True)
class AtualizarPessoaInputDTO:
    """
    DTO de entrada para atualizar pessoa.

    Não contém CPF: o documento é imutável após o cadastro.
    """

    pessoa_id: str
    nome: str
    data_nascimento: date
    sexo: Optional[str] = None
    email: Optional[str] = None
    naturalidade: Optional[str] = None
    nacionalidade: Optional[str] = None
    telefone: Optional[str] = None
    celular: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "pessoa_id": self.pessoa_id,
            "nome": self.nome,
            "data_nascimento": self.data_nascimento.isoformat() if self.data_nascimento else None,
            "sexo": self.sexo,
            "email": self.email,
            "naturalidade": self.naturalidade,
            "nacionalidade": self.nacionalidade,
            "telefone": self.telefone,
            "celular": self.celular,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class ContatoOutputDTO:
    id: str
    tipo: str
    valor: str
    principal: bool

    @classmethod
    def from_entity(cls, entity: ContatoEntity) -> "ContatoOutputDTO":
        return cls(
            id=entity.id,
            tipo=entity.tipo,
            valor=entity.valor,
            principal=entity.principal,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "tipo": self.tipo,
            "valor": self.valor,
            "principal": self.principal,
        }


@dataclass
class PessoaOutputDTO:
    """
    DTO de saída completo com dados da pessoa e seus contatos.

    Attributes:
        id: Identificador único
        nome: Nome completo
        cpf: CPF (somente dígitos)
        sexo: Marcador de sexo
        email: Email
        data_nascimento: Data de nascimento
        naturalidade: Local de nascimento
        nacionalidade: Nacionalidade
        contatos: Lista de contatos
        criado_por_id: Usuário que criou
        atualizado_por_id: Usuário que alterou por último
        criado_em: Data/hora de criação
        atualizado_em: Data/hora da última atualização
    """

    id: str
    nome: str
    cpf: str
    sexo: Optional[str]
    email: Optional[str]
    data_nascimento: date
    naturalidade: Optional[str]
    nacionalidade: Optional[str]
    criado_por_id: Optional[str]
    atualizado_por_id: Optional[str]
    criado_em: datetime
    atualizado_em: datetime
    contatos: List[ContatoOutputDTO] = field(default_factory=list)

    @classmethod
    def from_entity(cls, entity: PessoaEntity) -> "PessoaOutputDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            cpf=entity.cpf,
            sexo=entity.sexo,
            email=entity.email,
            data_nascimento=entity.data_nascimento,
            naturalidade=entity.naturalidade,
            nacionalidade=entity.nacionalidade,
            criado_por_id=entity.criado_por_id,
            atualizado_por_id=entity.atualizado_por_id,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
            contatos=[ContatoOutputDTO.from_entity(c) for c in entity.contatos],
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "nome": self.nome,
            "cpf": self.cpf,
            "sexo": self.sexo,
            "email": self.email,
            "data_nascimento": self.data_nascimento.isoformat() if self.data_nascimento else None,
            "naturalidade": self.naturalidade,
            "nacionalidade": self.nacionalidade,
            "contatos": [c.to_dict() for c in self.contatos],
            "criado_por_id": self.criado_por_id,
            "atualizado_por_id": self.atualizado_por_id,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat(),
        }
