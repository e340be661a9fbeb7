"""
Exceções do Domínio de Pessoas.

Especializações das exceções compartilhadas com códigos estáveis,
mensagens em pt-BR e detalhes estruturados para diagnóstico.
"""

from datetime import date

from src.core.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)


class CPFInvalidoError(ValidationError):
    """CPF reprovado na validação de formato/dígitos verificadores."""

    def __init__(self, cpf: str):
        self.cpf = cpf
        super().__init__(
            f"CPF '{cpf}' não é válido",
            field="cpf",
            code="PERSON_INVALID_CPF",
            details={"cpf": cpf},
        )


class DataNascimentoInvalidaError(ValidationError):
    """Data de nascimento posterior à data atual."""

    def __init__(self, data_nascimento: date):
        self.data_nascimento = data_nascimento
        super().__init__(
            f"Data de nascimento '{data_nascimento:%d/%m/%Y}' não pode ser no futuro",
            field="data_nascimento",
            code="PERSON_INVALID_BIRTH_DATE",
            details={"data_nascimento": data_nascimento.isoformat()},
        )


class PessoaNaoEncontradaError(EntityNotFoundError):

    def __init__(self, pessoa_id: str):
        super().__init__(
            f"Pessoa com ID '{pessoa_id}' não foi encontrada",
            entity_type="Pessoa",
            entity_id=pessoa_id,
            code="PERSON_NOT_FOUND",
        )


class ContatoNaoEncontradoError(EntityNotFoundError):

    def __init__(self, contato_id: str):
        super().__init__(
            f"Contato com ID '{contato_id}' não foi encontrado",
            entity_type="Contato",
            entity_id=contato_id,
            code="PERSON_CONTACT_NOT_FOUND",
        )


class CPFJaCadastradoError(ConflictError):
    """Já existe pessoa cadastrada com o mesmo CPF."""

    def __init__(self, cpf: str):
        super().__init__(
            f"CPF '{cpf}' já está cadastrado no sistema",
            code="PERSON_CPF_EXISTS",
            details={"cpf": cpf},
        )
