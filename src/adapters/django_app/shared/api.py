"""
Helpers compartilhados pelas API Views JSON.

Formato:
- Entrada: JSON
- Saída: {"success": true, "data": ..., "meta": ...}
- Erro:  {"success": false, "error": {"code", "message", "details"}}

Autenticação:
- Bearer token no header Authorization
"""

import json
import logging
from typing import Any, Dict, Optional

from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.config.container import get_container
from src.core.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleViolationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from src.core.usuarios.autorizacao import Ator
from src.core.usuarios.exceptions import NaoAutenticadoError, TokenInvalidoError

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, error: Dict = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """
    Cria resposta JSON padronizada.

    Args:
        success: Se operação foi bem sucedida
        data: Dados da resposta
        error: Dicionário {code, message, details} (se aplicável)
        status: HTTP status code
        meta: Metadados adicionais (ex.: paginação)
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status, json_dumps_params={'ensure_ascii': False})


def error_response(code: str, message: str, status: int,
                   details: Optional[Dict] = None) -> JsonResponse:
    return json_response(
        success=False,
        error={'code': code, 'message': message, 'details': details},
        status=status,
    )


def form_error_response(form) -> JsonResponse:
    """Resposta 400 a partir dos erros de um Django Form."""
    details = {
        field: [str(message) for message in messages]
        for field, messages in form.errors.items()
    }
    return error_response(
        'VALIDATION_ERROR',
        'Dados de entrada inválidos',
        status=400,
        details=details,
    )


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValueError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("JSON inválido: esperado um objeto")

    return data


def parse_pagination(request: HttpRequest, default_per_page: int = 20):
    """
    Lê `page` e `per_page` da query string.

    Raises:
        ValueError: Se não forem inteiros positivos
    """
    try:
        page = int(request.GET.get('page', 1))
        per_page = int(request.GET.get('per_page', default_per_page))
    except (TypeError, ValueError):
        raise ValueError("Parâmetros de paginação inválidos")

    if page < 1 or per_page < 1:
        raise ValueError("Parâmetros de paginação inválidos")

    return page, min(per_page, 100)


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Resolução do ator a partir do Bearer token
    - Tratamento de erros padronizado
    """

    def get_container(self):
        return get_container()

    def get_service(self, service_name: str):
        """Obtém provider do container pelo nome."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def get_ator(self, request: HttpRequest) -> Ator:
        """
        Resolve o usuário autenticado como Ator.

        Raises:
            NaoAutenticadoError: Header Authorization ausente
            TokenInvalidoError: Token malformado ou usuário inexistente
            TokenExpiradoError: Token expirado
        """
        header = request.META.get('HTTP_AUTHORIZATION', '')
        if not header:
            raise NaoAutenticadoError()

        scheme, _, token = header.partition(' ')
        if scheme.lower() != 'bearer' or not token.strip():
            raise TokenInvalidoError()

        claims = self.get_service('token_service').verificar(token.strip())

        usuario = self.get_service('usuario_repository').get_by_id(claims.get('sub'))
        if usuario is None:
            raise TokenInvalidoError()

        return usuario.como_ator()

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Traduz exceções em respostas JSON.

        Mapeamento:
            ValidationError → 400
            AuthenticationError → 401
            AuthorizationError → 403
            EntityNotFoundError → 404
            ConflictError → 409
            BusinessRuleViolationError → 422
            DomainException / ValueError → 400
            Demais → 500
        """
        if isinstance(e, ValidationError):
            return json_response(success=False, error=e.to_dict(), status=400)

        if isinstance(e, AuthenticationError):
            return json_response(success=False, error=e.to_dict(), status=401)

        if isinstance(e, AuthorizationError):
            logger.warning("Acesso negado: %s", e)
            return json_response(success=False, error=e.to_dict(), status=403)

        if isinstance(e, EntityNotFoundError):
            return json_response(success=False, error=e.to_dict(), status=404)

        if isinstance(e, ConflictError):
            return json_response(success=False, error=e.to_dict(), status=409)

        if isinstance(e, BusinessRuleViolationError):
            return json_response(success=False, error=e.to_dict(), status=422)

        if isinstance(e, DomainException):
            return json_response(success=False, error=e.to_dict(), status=400)

        if isinstance(e, ValueError):
            return error_response('INVALID_ARGUMENT', str(e), status=400)

        logger.exception("Erro inesperado na API: %s", e)
        return error_response(
            'INTERNAL_ERROR',
            'Ocorreu um erro interno no servidor',
            status=500,
        )
