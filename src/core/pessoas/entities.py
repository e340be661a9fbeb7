"""
Entidades do Domínio de Pessoas.

Entidades:
- PessoaEntity: Agregado principal (registro de uma pessoa física)
- ContatoEntity: Contato pertencente a uma pessoa (email, telefone, celular)
- TipoContato: Tipos de contato conhecidos

Regras de Negócio Encapsuladas:
- Nome obrigatório (máximo 100 caracteres)
- CPF obrigatório, válido e imutável após a criação
- Data de nascimento não pode ser no futuro
- No máximo um contato principal por tipo em cada pessoa

Todas as validações acontecem antes de qualquer alteração de estado:
uma operação que falha nunca deixa a entidade parcialmente modificada.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import ClassVar, List, Optional
import uuid

from src.core.shared.cpf import limpar_cpf, validar_cpf
from src.core.shared.exceptions import CampoObrigatorioError, ValidationError

from .exceptions import (
    ContatoNaoEncontradoError,
    CPFInvalidoError,
    DataNascimentoInvalidaError,
)


def _agora() -> datetime:
    return datetime.now(timezone.utc)


def _em_branco(valor: Optional[str]) -> bool:
    return valor is None or not str(valor).strip()


class TipoContato(Enum):
    """Tipos de contato usados pelos fluxos de cadastro."""

    EMAIL = "Email"
    TELEFONE = "Telefone"
    CELULAR = "Celular"


@dataclass
class ContatoEntity:
    """
    Contato de uma pessoa.

    Attributes:
        id: Identificador único (UUID)
        tipo: Rótulo do tipo ("Email", "Telefone", "Celular", ...)
        valor: Endereço de email ou número
        principal: Se é o contato preferido daquele tipo
        pessoa_id: ID da pessoa dona do contato
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    tipo: str = ""
    valor: str = ""
    principal: bool = False
    pessoa_id: str = ""

    @classmethod
    def criar(
        cls,
        tipo: str,
        valor: str,
        principal: bool = False,
        pessoa_id: str = "",
    ) -> "ContatoEntity":
        """
        Factory method para criar contato com validações.

        Raises:
            CampoObrigatorioError: Se tipo ou valor vazios
        """
        cls._validar(tipo, valor)
        return cls(
            tipo=tipo.strip(),
            valor=valor.strip(),
            principal=principal,
            pessoa_id=pessoa_id,
        )

    @staticmethod
    def _validar(tipo: str, valor: str) -> None:
        if _em_branco(tipo):
            raise CampoObrigatorioError("Tipo é obrigatório", field="tipo")
        if _em_branco(valor):
            raise CampoObrigatorioError("Valor é obrigatório", field="valor")

    def atualizar(self, tipo: str, valor: str, principal: bool) -> None:
        self._validar(tipo, valor)
        self.tipo = tipo.strip()
        self.valor = valor.strip()
        self.principal = principal

    def definir_como_principal(self) -> None:
        self.principal = True

    def remover_principal(self) -> None:
        self.principal = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContatoEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass
class PessoaEntity:
    """
    Entidade de Domínio: Pessoa.

    Invariantes:
    - Nome não vazio, com no máximo 100 caracteres
    - CPF com 11 dígitos e dígitos verificadores válidos
    - Data de nascimento até hoje (inclusive)
    - Um único contato principal por tipo

    Attributes:
        id: Identificador único (UUID)
        nome: Nome completo
        cpf: CPF apenas com dígitos (imutável)
        data_nascimento: Data de nascimento
        sexo: Marcador de sexo (opcional)
        email: Email (opcional)
        naturalidade: Local de nascimento (opcional)
        nacionalidade: Nacionalidade (opcional)
        criado_por_id: Usuário que criou o registro
        atualizado_por_id: Usuário que fez a última alteração
        criado_em: Data/hora de criação (UTC)
        atualizado_em: Data/hora da última atualização (UTC)
        contatos: Contatos da pessoa

    Example:
        pessoa = PessoaEntity.criar(
            nome="Maria",
            cpf="529.982.247-25",
            data_nascimento=date(1990, 1, 1),
        )
        pessoa.atualizar_info(nome="Maria S.", data_nascimento=date(1990, 1, 1))
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    nome: str = ""
    cpf: str = ""
    data_nascimento: Optional[date] = None
    sexo: Optional[str] = None
    email: Optional[str] = None
    naturalidade: Optional[str] = None
    nacionalidade: Optional[str] = None

    criado_por_id: Optional[str] = None
    atualizado_por_id: Optional[str] = None

    criado_em: datetime = field(default_factory=_agora)
    atualizado_em: datetime = field(default_factory=_agora)

    contatos: List[ContatoEntity] = field(default_factory=list)

    NOME_MAX_LENGTH: ClassVar[int] = 100

    @classmethod
    def criar(
        cls,
        nome: str,
        cpf: str,
        data_nascimento: date,
        sexo: Optional[str] = None,
        email: Optional[str] = None,
        naturalidade: Optional[str] = None,
        nacionalidade: Optional[str] = None,
        criado_por_id: Optional[str] = None,
    ) -> "PessoaEntity":
        """
        Factory method para criar pessoa com validações.

        Ordem das validações:
        1. Nome obrigatório
        2. CPF obrigatório
        3. CPF válido
        4. Data de nascimento não futura

        Args:
            nome: Nome completo
            cpf: CPF com ou sem formatação
            data_nascimento: Data de nascimento
            sexo: Marcador de sexo (opcional)
            email: Email (opcional)
            naturalidade: Local de nascimento (opcional)
            nacionalidade: Nacionalidade (opcional)
            criado_por_id: ID do usuário que está criando (opcional)

        Returns:
            Nova instância de PessoaEntity

        Raises:
            CampoObrigatorioError: Nome ou CPF vazios
            ValidationError: Nome acima do tamanho máximo
            CPFInvalidoError: CPF reprovado pelo validador
            DataNascimentoInvalidaError: Data no futuro
        """
        cls._validar_nome(nome)

        if _em_branco(cpf):
            raise CampoObrigatorioError("CPF é obrigatório", field="cpf")

        if not validar_cpf(cpf):
            raise CPFInvalidoError(cpf)

        data_nascimento = cls._validar_data_nascimento(data_nascimento)

        agora = _agora()
        return cls(
            nome=nome.strip(),
            cpf=limpar_cpf(cpf),
            data_nascimento=data_nascimento,
            sexo=sexo,
            email=email,
            naturalidade=naturalidade,
            nacionalidade=nacionalidade,
            criado_por_id=criado_por_id,
            atualizado_por_id=criado_por_id,
            criado_em=agora,
            atualizado_em=agora,
        )

    @classmethod
    def _validar_nome(cls, nome: str) -> None:
        if _em_branco(nome):
            raise CampoObrigatorioError("Nome é obrigatório", field="nome")

        if len(nome.strip()) > cls.NOME_MAX_LENGTH:
            raise ValidationError(
                f"Nome deve ter no máximo {cls.NOME_MAX_LENGTH} caracteres",
                field="nome",
            )

    @staticmethod
    def _validar_data_nascimento(data_nascimento: date) -> date:
        if data_nascimento is None:
            raise CampoObrigatorioError(
                "Data de nascimento é obrigatória",
                field="data_nascimento",
            )

        if isinstance(data_nascimento, datetime):
            data_nascimento = data_nascimento.date()

        if data_nascimento > date.today():
            raise DataNascimentoInvalidaError(data_nascimento)

        return data_nascimento

    def atualizar_info(
        self,
        nome: str,
        data_nascimento: date,
        sexo: Optional[str] = None,
        email: Optional[str] = None,
        naturalidade: Optional[str] = None,
        nacionalidade: Optional[str] = None,
        atualizado_por_id: Optional[str] = None,
    ) -> None:
        """
        Atualiza os dados cadastrais mutáveis.

        O CPF não faz parte da atualização: é imutável após a criação.

        Raises:
            CampoObrigatorioError: Nome vazio
            DataNascimentoInvalidaError: Data no futuro
        """
        self._validar_nome(nome)
        data_nascimento = self._validar_data_nascimento(data_nascimento)

        self.nome = nome.strip()
        self.data_nascimento = data_nascimento
        self.sexo = sexo
        self.email = email
        self.naturalidade = naturalidade
        self.nacionalidade = nacionalidade
        self.atualizado_por_id = atualizado_por_id
        self._atualizar_timestamp()

    # =========================================================================
    # Contatos
    # =========================================================================

    def adicionar_contato(self, contato: ContatoEntity) -> None:
        """
        Adiciona contato à pessoa.

        Se o contato for principal, os demais contatos do mesmo tipo
        deixam de ser principais.

        Raises:
            CampoObrigatorioError: Se contato ausente
        """
        if contato is None:
            raise CampoObrigatorioError("Contato é obrigatório", field="contato")

        if contato.principal:
            self._rebaixar_principais(contato.tipo, exceto_id=contato.id)

        if not contato.pessoa_id:
            contato.pessoa_id = self.id

        self.contatos.append(contato)
        self._atualizar_timestamp()

    def remover_contato(self, contato_id: str) -> None:
        """Remove contato pelo ID; ignora IDs inexistentes."""
        contato = self._buscar_contato(contato_id)
        if contato is None:
            return

        self.contatos.remove(contato)
        self._atualizar_timestamp()

    def atualizar_contato(
        self,
        contato_id: str,
        tipo: str,
        valor: str,
        principal: bool,
    ) -> None:
        """
        Atualiza um contato existente.

        Raises:
            ContatoNaoEncontradoError: Se contato_id não pertence à pessoa
            CampoObrigatorioError: Se tipo ou valor vazios
        """
        contato = self._buscar_contato(contato_id)
        if contato is None:
            raise ContatoNaoEncontradoError(contato_id)

        ContatoEntity._validar(tipo, valor)

        if principal:
            self._rebaixar_principais(tipo.strip(), exceto_id=contato_id)

        contato.atualizar(tipo, valor, principal)
        self._atualizar_timestamp()

    def substituir_contatos(
        self,
        email: Optional[str] = None,
        telefone: Optional[str] = None,
        celular: Optional[str] = None,
    ) -> None:
        """
        Substitui todos os contatos pelos informados nos campos de cadastro.

        Regras de contato principal:
        - Email: sempre principal
        - Telefone: sempre principal
        - Celular: principal apenas quando não há telefone
        """
        novos = []
        if not _em_branco(email):
            novos.append(ContatoEntity.criar(TipoContato.EMAIL.value, email, True, self.id))
        if not _em_branco(telefone):
            novos.append(ContatoEntity.criar(TipoContato.TELEFONE.value, telefone, True, self.id))
        if not _em_branco(celular):
            novos.append(
                ContatoEntity.criar(
                    TipoContato.CELULAR.value,
                    celular,
                    _em_branco(telefone),
                    self.id,
                )
            )

        for contato in list(self.contatos):
            self.remover_contato(contato.id)

        for contato in novos:
            self.adicionar_contato(contato)

    def contatos_do_tipo(self, tipo: str) -> List[ContatoEntity]:
        return [c for c in self.contatos if c.tipo == tipo]

    def contato_principal(self, tipo: str) -> Optional[ContatoEntity]:
        for contato in self.contatos:
            if contato.tipo == tipo and contato.principal:
                return contato
        return None

    def _buscar_contato(self, contato_id: str) -> Optional[ContatoEntity]:
        for contato in self.contatos:
            if contato.id == contato_id:
                return contato
        return None

    def _rebaixar_principais(self, tipo: str, exceto_id: str) -> None:
        for contato in self.contatos:
            if contato.tipo == tipo and contato.id != exceto_id:
                contato.remover_principal()

    def _atualizar_timestamp(self) -> None:
        self.atualizado_em = _agora()

    def __repr__(self) -> str:
        return (
            f"PessoaEntity("
            f"id={self.id[:8]}..., "
            f"nome='{self.nome[:20]}', "
            f"contatos={len(self.contatos)}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PessoaEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
