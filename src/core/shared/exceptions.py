"""
Exceções de Domínio do Cadastro de Pessoas.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Cada exceção carrega a tripla (code, message, details):
- code: discriminador estável do tipo de falha (ex: "PERSON_INVALID_CPF")
- message: mensagem legível para o usuário final
- details: dados estruturados para diagnóstico

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)
    │   └── CampoObrigatorioError (campo obrigatório vazio)
    ├── EntityNotFoundError (entidade não existe)
    ├── ConflictError (violação de unicidade)
    ├── BusinessRuleViolationError (regra de negócio violada)
    ├── AuthenticationError (identidade não comprovada)
    └── AuthorizationError (ator sem permissão)
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            pessoa.atualizar_info(...)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(
        self,
        message: str,
        code: str = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details or None,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não atendem aos requisitos
    mínimos para processamento.

    Example:
        if len(nome) > 100:
            raise ValidationError("Nome deve ter no máximo 100 caracteres", field="nome")
    """

    def __init__(
        self,
        message: str,
        field: str = None,
        code: str = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.field = field
        if code is None:
            code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code, details)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class CampoObrigatorioError(ValidationError):
    """
    Campo obrigatório ausente ou composto apenas de espaços.

    Example:
        if not nome or not nome.strip():
            raise CampoObrigatorioError("Nome é obrigatório", field="nome")
    """

    def __init__(self, message: str, field: str = None):
        super().__init__(
            message,
            field=field,
            code="MISSING_REQUIRED_FIELD",
            details={"field": field} if field else None,
        )


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado.
    """

    def __init__(
        self,
        message: str,
        entity_type: str = None,
        entity_id: str = None,
        code: str = "ENTITY_NOT_FOUND",
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        details = {}
        if entity_type:
            details["entity_type"] = entity_type
        if entity_id:
            details["entity_id"] = entity_id
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """
    Conflito com estado já persistido (ex: valor único duplicado).

    Example:
        if repo.cpf_exists(cpf):
            raise ConflictError(f"CPF '{cpf}' já está cadastrado no sistema")
    """

    def __init__(
        self,
        message: str,
        code: str = "CONFLICT",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Lançada quando uma operação viola uma regra de negócio
    estabelecida no domínio.
    """

    def __init__(
        self,
        message: str,
        rule: str = None,
        code: str = "BUSINESS_RULE_VIOLATION",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.rule = rule
        super().__init__(message, code, details)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result


class AuthenticationError(DomainException):
    """Identidade do solicitante ausente ou não comprovada."""

    def __init__(
        self,
        message: str,
        code: str = "AUTH_NOT_AUTHENTICATED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class AuthorizationError(DomainException):
    """
    Ator autenticado, mas sem permissão para a operação.

    Example:
        if not ator.pode_editar_pessoa(pessoa_id):
            raise AuthorizationError("Acesso negado")
    """

    def __init__(
        self,
        message: str,
        code: str = "AUTH_INSUFFICIENT_PERMISSIONS",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
