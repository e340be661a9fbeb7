"""
Configurações globais do Pytest para o Cadastro de Pessoas.

Este arquivo é carregado automaticamente pelo pytest e
fornece Django settings de teste, fixtures e marcadores.
"""

import pytest
from pathlib import Path


TEST_JWT = {
    'secret': 'test-jwt-secret',
    'issuer': 'PeopleConnectAPI',
    'audience': 'PeopleConnectAPI',
    'expiration_minutes': 60,
}


def pytest_configure(config):
    """Configura Django e marcadores antes da coleta."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )

    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            ALLOWED_HOSTS=['testserver', 'localhost'],
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.contenttypes',
                'django.contrib.auth',
                'src.adapters.django_app.pessoas',
                'src.adapters.django_app.usuarios',
            ],
            MIDDLEWARE=[
                'django.middleware.common.CommonMiddleware',
            ],
            ROOT_URLCONF='src.config.urls',
            APPEND_SLASH=False,
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
            # Hash rápido nos testes
            PASSWORD_HASHERS=['django.contrib.auth.hashers.MD5PasswordHasher'],
            JWT_SECRET=TEST_JWT['secret'],
            JWT_ISSUER=TEST_JWT['issuer'],
            JWT_AUDIENCE=TEST_JWT['audience'],
            JWT_EXPIRATION_MINUTES=TEST_JWT['expiration_minutes'],
            ADMIN_USERNAME='admin',
            ADMIN_PASSWORD='admin123',
            EVENT_PUBLISHER_MODE='sync',
        )
        django.setup()


def pytest_collection_modifyitems(config, items):
    """Pula testes de integração sem --run-integration."""
    if config.getoption("--run-integration", default=False):
        return

    skip_integration = pytest.mark.skip(reason="use --run-integration to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )


@pytest.fixture(scope="session")
def project_root():
    return Path(__file__).parent.parent


@pytest.fixture
def reset_di_container():
    """Container DI limpo antes e depois do teste."""
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()
