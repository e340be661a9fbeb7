"""
API Views JSON para Autenticação e Usuários.

Endpoints:
- POST   /api/v1/auth/register   - Registrar conta (+ pessoa) e autenticar
- POST   /api/v1/auth/login      - Autenticar
- GET    /api/v1/users           - Listar usuários (admin)
- GET    /api/v1/users/<id>      - Obter usuário
- DELETE /api/v1/users/<id>      - Remover conta (própria ou, se admin, de outros)
"""

import logging

from django.http import HttpRequest, HttpResponse, JsonResponse

from ..shared.api import BaseAPIView, form_error_response, json_response
from .forms import LoginForm, RegistroForm

logger = logging.getLogger(__name__)


class RegistroAPIView(BaseAPIView):
    """POST /api/v1/auth/register"""

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Registra usuário e retorna o mesmo payload do login.

        Body JSON: username, password e os campos de pessoa
        (nome, cpf, data_nascimento, sexo, email, telefone, celular,
        naturalidade, nacionalidade).
        """
        try:
            form = RegistroForm(self.parse_body(request))
            if not form.is_valid():
                return form_error_response(form)

            self.get_service('registrar_usuario_service').execute(form.to_dto())
            login = self.get_service('login_service').execute(form.to_login_dto())

            logger.info("API: Usuário %s registrado", login.usuario.username)

            return json_response(success=True, data=login.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class LoginAPIView(BaseAPIView):
    """POST /api/v1/auth/login"""

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            form = LoginForm(self.parse_body(request))
            if not form.is_valid():
                return form_error_response(form)

            login = self.get_service('login_service').execute(form.to_dto())

            return json_response(success=True, data=login.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class UsuarioAPIListView(BaseAPIView):
    """GET /api/v1/users (somente administradores)"""

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            ator = self.get_ator(request)
            usuarios = self.get_service('listar_usuarios_service').execute(ator)

            return json_response(
                success=True,
                data=[u.to_dict() for u in usuarios],
                meta={'total': len(usuarios)},
            )

        except Exception as e:
            return self.handle_exception(e)


class UsuarioAPIDetailView(BaseAPIView):
    """
    GET /api/v1/users/<id>
    DELETE /api/v1/users/<id>
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            self.get_ator(request)
            usuario = self.get_service('obter_usuario_service').execute(pk)
            return json_response(success=True, data=usuario.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> HttpResponse:
        try:
            ator = self.get_ator(request)
            self.get_service('remover_usuario_service').execute(pk, ator)

            logger.info("API: Usuário %s removido por %s", pk, ator.usuario_id)

            return HttpResponse(status=204)

        except Exception as e:
            return self.handle_exception(e)
