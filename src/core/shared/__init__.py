"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Validação de CPF
- Interfaces (Ports)
- Base classes para Domain Events
"""

from .exceptions import (
    DomainException,
    ValidationError,
    CampoObrigatorioError,
    EntityNotFoundError,
    ConflictError,
    BusinessRuleViolationError,
    AuthenticationError,
    AuthorizationError,
)
from .cpf import limpar_cpf, validar_cpf, formatar_cpf
from .events import DomainEvent
from .interfaces import UnitOfWork, EventPublisher

__all__ = [
    "DomainException",
    "ValidationError",
    "CampoObrigatorioError",
    "EntityNotFoundError",
    "ConflictError",
    "BusinessRuleViolationError",
    "AuthenticationError",
    "AuthorizationError",
    "limpar_cpf",
    "validar_cpf",
    "formatar_cpf",
    "DomainEvent",
    "UnitOfWork",
    "EventPublisher",
]
