"""
Fixtures para os testes dos adapters Django.

Este arquivo fornece:
- Container de teste (repositórios em memória, JWT real)
- Factories de models para testes com banco
- Helpers de autenticação
"""

import uuid
from datetime import date
from unittest.mock import patch

import pytest

from tests.conftest import TEST_JWT


@pytest.fixture
def testing_container():
    """Container de teste configurado como o container da aplicação."""
    from src.config.container import criar_testing_container

    container = criar_testing_container()
    container.config.from_dict({
        'event_publisher_mode': 'sync',
        'jwt': dict(TEST_JWT),
    })
    return container


@pytest.fixture
def api_container(testing_container):
    """Faz as API Views usarem o container de teste."""
    with patch(
        'src.adapters.django_app.shared.api.get_container',
        return_value=testing_container,
    ):
        yield testing_container


@pytest.fixture
def criar_usuario(testing_container):
    """
    Factory para criar usuário diretamente no repositório em memória.

    Retorna (usuario, header Authorization).
    """
    from src.core.pessoas.entities import PessoaEntity
    from src.core.usuarios.entities import PapelUsuario, UsuarioEntity

    def _criar(username='maria.silva', admin=False, cpf=None):
        hasher = testing_container.password_hasher()
        usuario = UsuarioEntity.criar(
            username,
            hasher.hash('segredo123'),
            PapelUsuario.ADMIN if admin else PapelUsuario.USER,
        )
        if cpf:
            pessoa = PessoaEntity.criar(
                nome=username.title(),
                cpf=cpf,
                data_nascimento=date(1990, 1, 1),
                criado_por_id=usuario.id,
            )
            testing_container.pessoa_repository().save(pessoa)
            usuario.definir_pessoa(pessoa)
        testing_container.usuario_repository().save(usuario)

        token = testing_container.token_service().gerar(usuario).token
        return usuario, f'Bearer {token}'

    return _criar


@pytest.fixture
def pessoa_model_factory():
    """Factory para criar PessoaModel para testes."""
    from django.utils import timezone

    from src.adapters.django_app.pessoas.models import PessoaModel

    def create_pessoa(**kwargs):
        defaults = {
            'id': str(uuid.uuid4()),
            'nome': 'Pessoa de Teste',
            'cpf': '52998224725',
            'data_nascimento': date(1990, 1, 1),
            'criado_em': timezone.now(),
            'atualizado_em': timezone.now(),
        }
        defaults.update(kwargs)
        return PessoaModel.objects.create(**defaults)

    return create_pessoa


@pytest.fixture
def usuario_model_factory():
    """Factory para criar UsuarioModel para testes."""
    from django.contrib.auth.hashers import make_password
    from django.utils import timezone

    from src.adapters.django_app.usuarios.models import UsuarioModel

    def create_usuario(**kwargs):
        defaults = {
            'id': str(uuid.uuid4()),
            'username': 'usuario.teste',
            'password_hash': make_password('segredo123'),
            'papel': 'User',
            'criado_em': timezone.now(),
            'atualizado_em': timezone.now(),
        }
        defaults.update(kwargs)
        return UsuarioModel.objects.create(**defaults)

    return create_usuario
