"""
Testes de Integração End-to-End.

Testes que validam o fluxo completo da aplicação:
- Container DI → Use Case → Repository → Unit of Work → Publisher
- Request HTTP → URL → View → Use Case → Database (marcados integration)
"""

import json
from datetime import date

import pytest
from django.test import Client

from src.core.pessoas.dtos import AtualizarPessoaInputDTO, CriarPessoaInputDTO
from src.core.usuarios.dtos import LoginInputDTO, RegistrarUsuarioInputDTO
from src.core.usuarios.exceptions import (
    NaoPodeRemoverProprioUsuarioError,
    PermissaoNegadaError,
)
from tests.conftest import TEST_JWT


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def container():
    """Container de teste: repositórios e UoW em memória, JWT real."""
    from src.config.container import criar_testing_container

    container = criar_testing_container()
    container.config.from_dict({'event_publisher_mode': 'sync', 'jwt': dict(TEST_JWT)})
    return container


@pytest.fixture
def admin(container):
    admin = container.garantir_admin_service().execute('admin', 'admin123')
    return container.usuario_repository().get_by_id(admin.id).como_ator()


def registrar(container, username, cpf, nome='Maria Silva'):
    dto = RegistrarUsuarioInputDTO(
        username=username,
        password='segredo123',
        pessoa=CriarPessoaInputDTO(
            nome=nome,
            cpf=cpf,
            data_nascimento=date(1990, 1, 1),
            email=f'{username}@example.com',
        ),
    )
    return container.registrar_usuario_service().execute(dto)


def ator_de(container, usuario_id):
    return container.usuario_repository().get_by_id(usuario_id).como_ator()


# =============================================================================
# Fluxos completos (em memória)
# =============================================================================

class TestCicloDeVidaIntegration:
    """Testes do ciclo registro → login → edição → remoção"""

    def test_registro_e_login(self, container):
        registrado = registrar(container, 'maria', '52998224725')

        login = container.login_service().execute(LoginInputDTO('maria', 'segredo123'))

        claims = container.token_service().verificar(login.token)
        assert claims['sub'] == registrado.id
        assert claims['role'] == 'User'
        assert login.usuario.pessoa.id == registrado.pessoa.id

    def test_usuario_edita_propria_pessoa_mas_nao_a_de_outro(self, container):
        maria = registrar(container, 'maria', '52998224725')
        joao = registrar(container, 'joao', '11144477735', nome='João')
        ator_maria = ator_de(container, maria.id)

        atualizada = container.atualizar_pessoa_service().execute(
            AtualizarPessoaInputDTO(
                pessoa_id=maria.pessoa.id,
                nome='Maria S.',
                data_nascimento=date(1990, 1, 1),
            ),
            ator_maria,
        )
        assert atualizada.nome == 'Maria S.'
        assert atualizada.cpf == '52998224725'

        with pytest.raises(PermissaoNegadaError):
            container.atualizar_pessoa_service().execute(
                AtualizarPessoaInputDTO(
                    pessoa_id=joao.pessoa.id,
                    nome='Invadido',
                    data_nascimento=date(1990, 1, 1),
                ),
                ator_maria,
            )

    def test_admin_remove_usuario_e_pessoa(self, container, admin):
        maria = registrar(container, 'maria', '52998224725')

        container.remover_usuario_service().execute(maria.id, admin)

        assert container.usuario_repository().get_by_id(maria.id) is None
        assert container.pessoa_repository().get_by_id(maria.pessoa.id) is None

    def test_admin_nao_remove_a_si_mesmo(self, container, admin):
        with pytest.raises(NaoPodeRemoverProprioUsuarioError):
            container.remover_usuario_service().execute(admin.usuario_id, admin)

    def test_admin_cadastra_pessoa_sem_conta(self, container, admin):
        output = container.criar_pessoa_service().execute(
            CriarPessoaInputDTO(nome='Sem Conta', cpf='11144477735', data_nascimento=date(2000, 5, 5)),
            admin,
        )

        listadas = container.listar_pessoas_service().execute()
        assert [p.id for p in listadas] == [output.id]
        assert output.criado_por_id == admin.usuario_id

    def test_listar_usuarios_inclui_pessoa(self, container, admin):
        registrar(container, 'maria', '52998224725')

        usuarios = container.listar_usuarios_service().execute(admin)

        por_username = {u.username: u for u in usuarios}
        assert por_username['admin'].pessoa is None
        assert por_username['maria'].pessoa.cpf == '52998224725'


# =============================================================================
# HTTP → Django → Banco
# =============================================================================

@pytest.mark.integration
@pytest.mark.django_db
class TestAPIIntegration:
    """Fluxo HTTP completo com o container real e SQLite"""

    @pytest.fixture
    def client(self, reset_di_container):
        return Client()

    def post(self, client, path, data, token=None):
        extra = {'HTTP_AUTHORIZATION': f'Bearer {token}'} if token else {}
        return client.post(path, data=json.dumps(data), content_type='application/json', **extra)

    def registrar_via_api(self, client, username, cpf):
        response = self.post(client, '/api/v1/auth/register', {
            'username': username,
            'password': 'segredo123',
            'nome': username.title(),
            'cpf': cpf,
            'data_nascimento': '1990-01-01',
            'email': f'{username}@example.com',
        })
        assert response.status_code == 201, response.content
        return response.json()['data']

    def test_health(self, client):
        response = client.get('/health/')

        assert response.status_code == 200

    def test_fluxo_completo(self, client):
        maria = self.registrar_via_api(client, 'maria', '52998224725')
        token = maria['token']
        pessoa_id = maria['usuario']['pessoa']['id']
        auth = {'HTTP_AUTHORIZATION': f'Bearer {token}'}

        response = client.get('/api/v1/persons', **auth)
        assert response.status_code == 200
        assert response.json()['meta']['total'] == 1

        response = client.put(
            f'/api/v1/persons/{pessoa_id}',
            data=json.dumps({'nome': 'Maria S.', 'data_nascimento': '1990-01-01'}),
            content_type='application/json',
            **auth,
        )
        assert response.status_code == 200
        assert response.json()['data']['nome'] == 'Maria S.'

        response = client.get('/api/v1/users', **auth)
        assert response.status_code == 403

        response = client.delete(f"/api/v1/users/{maria['usuario']['id']}", **auth)
        assert response.status_code == 204

        response = client.get(f'/api/v1/persons/{pessoa_id}', **auth)
        assert response.status_code == 401

    def test_cpf_duplicado_no_registro(self, client):
        self.registrar_via_api(client, 'maria', '52998224725')

        response = self.post(client, '/api/v1/auth/register', {
            'username': 'outra',
            'password': 'segredo123',
            'nome': 'Outra',
            'cpf': '52998224725',
            'data_nascimento': '1990-01-01',
        })

        assert response.status_code == 409
        assert response.json()['error']['code'] == 'PERSON_CPF_EXISTS'

    def test_admin_gerencia_usuarios(self, client):
        from src.config.container import get_container

        get_container().garantir_admin_service().execute('admin', 'admin123')
        maria = self.registrar_via_api(client, 'maria', '52998224725')

        login = self.post(client, '/api/v1/auth/login', {'username': 'admin', 'password': 'admin123'})
        assert login.status_code == 200
        auth = {'HTTP_AUTHORIZATION': f"Bearer {login.json()['data']['token']}"}

        response = client.get('/api/v1/users', **auth)
        assert [u['username'] for u in response.json()['data']] == ['admin', 'maria']

        response = client.delete(f"/api/v1/users/{maria['usuario']['id']}", **auth)
        assert response.status_code == 204
