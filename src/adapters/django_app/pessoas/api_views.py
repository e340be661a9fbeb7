"""
API Views JSON para o domínio de Pessoas.

Endpoints:
- GET    /api/v1/persons         - Listar pessoas (paginado)
- POST   /api/v1/persons         - Cadastrar pessoa
- GET    /api/v1/persons/<id>    - Obter pessoa
- PUT    /api/v1/persons/<id>    - Atualizar pessoa (dono ou admin)
- DELETE /api/v1/persons/<id>    - Remover pessoa (dono ou admin)

Todos os endpoints exigem Bearer token.
"""

import logging

from django.http import HttpRequest, HttpResponse, JsonResponse

from ..shared.api import (
    BaseAPIView,
    form_error_response,
    json_response,
    parse_pagination,
)
from .forms import AtualizarPessoaForm, PessoaForm

logger = logging.getLogger(__name__)


class PessoaAPIListView(BaseAPIView):
    """
    API para listar e cadastrar pessoas.

    GET /api/v1/persons - Lista pessoas
    POST /api/v1/persons - Cadastra pessoa
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        """
        Lista pessoas ordenadas por nome.

        Query params:
        - page: Página (default: 1)
        - per_page: Itens por página (default: 20, máx.: 100)
        """
        try:
            self.get_ator(request)
            page, per_page = parse_pagination(request)

            pessoas = self.get_service('listar_pessoas_service').execute()

            total = len(pessoas)
            start = (page - 1) * per_page
            paginated = pessoas[start:start + per_page]

            return json_response(
                success=True,
                data=[p.to_dict() for p in paginated],
                meta={
                    'total': total,
                    'page': page,
                    'per_page': per_page,
                    'total_pages': (total + per_page - 1) // per_page,
                }
            )

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cadastra pessoa.

        Body JSON:
        {
            "nome": "string (obrigatório)",
            "cpf": "11 dígitos (obrigatório)",
            "data_nascimento": "AAAA-MM-DD (obrigatório)",
            "sexo": "M|F|Masculino|Feminino",
            "email", "telefone", "celular", "naturalidade", "nacionalidade"
        }
        """
        try:
            ator = self.get_ator(request)

            form = PessoaForm(self.parse_body(request))
            if not form.is_valid():
                return form_error_response(form)

            output = self.get_service('criar_pessoa_service').execute(form.to_criar_dto(), ator)

            logger.info("API: Pessoa criada: %s", output.id)

            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class PessoaAPIDetailView(BaseAPIView):
    """
    API para operações em pessoa específica.

    GET /api/v1/persons/<id>
    PUT /api/v1/persons/<id>
    DELETE /api/v1/persons/<id>
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            self.get_ator(request)
            pessoa = self.get_service('obter_pessoa_service').execute(pk)
            return json_response(success=True, data=pessoa.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            ator = self.get_ator(request)

            form = AtualizarPessoaForm(self.parse_body(request))
            if not form.is_valid():
                return form_error_response(form)

            output = self.get_service('atualizar_pessoa_service').execute(
                form.to_atualizar_dto(pk),
                ator,
            )

            logger.info("API: Pessoa %s atualizada", pk)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> HttpResponse:
        try:
            ator = self.get_ator(request)
            self.get_service('remover_pessoa_service').execute(pk, ator)

            logger.info("API: Pessoa %s removida", pk)

            return HttpResponse(status=204)

        except Exception as e:
            return self.handle_exception(e)
