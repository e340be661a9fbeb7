"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, hasher, token, publisher)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: valores lidos do Django settings em get_container()
"""

from importlib import import_module
from typing import Optional

from dependency_injector import containers, providers


def _importar(modulo: str, nome: str):
    """Import tardio para evitar imports circulares e carga do ORM antecipada."""
    return getattr(import_module(modulo), nome)


PESSOAS_USE_CASES = 'src.core.pessoas.use_cases'
USUARIOS_USE_CASES = 'src.core.usuarios.use_cases'


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: settings
    - Infrastructure: publisher de eventos, segurança
    - Repositories: Persistência
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        container = get_container()
        service = container.criar_pessoa_service()
        result = service.execute(input_dto, ator)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(
        lambda mode: _importar(
            'src.adapters.django_app.events.publishers', 'get_event_publisher'
        )(mode),
        mode=config.event_publisher_mode,
    )

    password_hasher = providers.Singleton(
        lambda: _importar(
            'src.adapters.django_app.usuarios.security', 'DjangoPasswordHasher'
        )()
    )

    token_service = providers.Singleton(
        lambda secret, issuer, audience, expiration_minutes: _importar(
            'src.adapters.django_app.usuarios.security', 'JwtTokenService'
        )(
            secret=secret,
            issuer=issuer,
            audience=audience,
            expiration_minutes=expiration_minutes,
        ),
        secret=config.jwt.secret,
        issuer=config.jwt.issuer,
        audience=config.jwt.audience,
        expiration_minutes=config.jwt.expiration_minutes,
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    pessoa_repository = providers.Singleton(
        lambda: _importar(
            'src.adapters.django_app.pessoas.repositories', 'DjangoPessoaRepository'
        )()
    )

    usuario_repository = providers.Singleton(
        lambda: _importar(
            'src.adapters.django_app.usuarios.repositories', 'DjangoUsuarioRepository'
        )()
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        lambda event_publisher: _importar(
            'src.adapters.django_app.shared.unit_of_work', 'DjangoUnitOfWork'
        )(event_publisher=event_publisher),
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Services / Use Cases - Pessoas
    # =========================================================================

    criar_pessoa_service = providers.Factory(
        lambda pessoa_repo, uow: _importar(PESSOAS_USE_CASES, 'CriarPessoaService')(
            pessoa_repo=pessoa_repo,
            uow=uow,
        ),
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
    )

    # Leitura (sem UoW)
    listar_pessoas_service = providers.Factory(
        lambda pessoa_repo: _importar(PESSOAS_USE_CASES, 'ListarPessoasService')(
            pessoa_repo=pessoa_repo,
        ),
        pessoa_repo=pessoa_repository,
    )

    obter_pessoa_service = providers.Factory(
        lambda pessoa_repo: _importar(PESSOAS_USE_CASES, 'ObterPessoaService')(
            pessoa_repo=pessoa_repo,
        ),
        pessoa_repo=pessoa_repository,
    )

    atualizar_pessoa_service = providers.Factory(
        lambda pessoa_repo, uow: _importar(PESSOAS_USE_CASES, 'AtualizarPessoaService')(
            pessoa_repo=pessoa_repo,
            uow=uow,
        ),
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
    )

    remover_pessoa_service = providers.Factory(
        lambda pessoa_repo, uow: _importar(PESSOAS_USE_CASES, 'RemoverPessoaService')(
            pessoa_repo=pessoa_repo,
            uow=uow,
        ),
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
    )

    # =========================================================================
    # Services / Use Cases - Usuários
    # =========================================================================

    registrar_usuario_service = providers.Factory(
        lambda usuario_repo, pessoa_repo, password_hasher, uow: _importar(
            USUARIOS_USE_CASES, 'RegistrarUsuarioService'
        )(
            usuario_repo=usuario_repo,
            pessoa_repo=pessoa_repo,
            password_hasher=password_hasher,
            uow=uow,
        ),
        usuario_repo=usuario_repository,
        pessoa_repo=pessoa_repository,
        password_hasher=password_hasher,
        uow=unit_of_work,
    )

    login_service = providers.Factory(
        lambda usuario_repo, pessoa_repo, password_hasher, token_service: _importar(
            USUARIOS_USE_CASES, 'LoginService'
        )(
            usuario_repo=usuario_repo,
            pessoa_repo=pessoa_repo,
            password_hasher=password_hasher,
            token_service=token_service,
        ),
        usuario_repo=usuario_repository,
        pessoa_repo=pessoa_repository,
        password_hasher=password_hasher,
        token_service=token_service,
    )

    listar_usuarios_service = providers.Factory(
        lambda usuario_repo, pessoa_repo: _importar(USUARIOS_USE_CASES, 'ListarUsuariosService')(
            usuario_repo=usuario_repo,
            pessoa_repo=pessoa_repo,
        ),
        usuario_repo=usuario_repository,
        pessoa_repo=pessoa_repository,
    )

    obter_usuario_service = providers.Factory(
        lambda usuario_repo, pessoa_repo: _importar(USUARIOS_USE_CASES, 'ObterUsuarioService')(
            usuario_repo=usuario_repo,
            pessoa_repo=pessoa_repo,
        ),
        usuario_repo=usuario_repository,
        pessoa_repo=pessoa_repository,
    )

    remover_usuario_service = providers.Factory(
        lambda usuario_repo, pessoa_repo, uow: _importar(USUARIOS_USE_CASES, 'RemoverUsuarioService')(
            usuario_repo=usuario_repo,
            pessoa_repo=pessoa_repo,
            uow=uow,
        ),
        usuario_repo=usuario_repository,
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
    )

    garantir_admin_service = providers.Factory(
        lambda usuario_repo, password_hasher, uow: _importar(USUARIOS_USE_CASES, 'GarantirAdminService')(
            usuario_repo=usuario_repo,
            password_hasher=password_hasher,
            uow=uow,
        ),
        usuario_repo=usuario_repository,
        password_hasher=password_hasher,
        uow=unit_of_work,
    )


def _config_from_settings() -> dict:
    from django.conf import settings

    return {
        'event_publisher_mode': settings.EVENT_PUBLISHER_MODE,
        'jwt': {
            'secret': settings.JWT_SECRET,
            'issuer': settings.JWT_ISSUER,
            'audience': settings.JWT_AUDIENCE,
            'expiration_minutes': settings.JWT_EXPIRATION_MINUTES,
        },
    }


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), carregando a
    configuração do Django settings.
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict(_config_from_settings())

    return _container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

def criar_testing_container() -> Container:
    """
    Container para testes com implementações InMemory.

    Instancia o Container principal e sobrescreve (override) apenas
    persistência, transação e publicação de eventos. Os services
    continuam declarados uma única vez e passam a receber as
    implementações em memória.

    Example:
        container = criar_testing_container()
        container.config.from_dict({'jwt': {'secret': 'teste', ...}})
        container.criar_pessoa_service().execute(dto, ator)
    """
    container = Container()

    container.event_publisher.override(
        providers.Singleton(
            lambda: _importar(
                'src.adapters.django_app.events.publishers', 'InMemoryEventPublisher'
            )()
        )
    )

    container.pessoa_repository.override(
        providers.Singleton(
            lambda: _importar('src.core.pessoas.ports', 'InMemoryPessoaRepository')()
        )
    )

    container.usuario_repository.override(
        providers.Singleton(
            lambda: _importar('src.core.usuarios.ports', 'InMemoryUsuarioRepository')()
        )
    )

    container.unit_of_work.override(
        providers.Factory(
            lambda event_publisher: _importar(
                'src.adapters.django_app.shared.unit_of_work', 'InMemoryUnitOfWork'
            )(event_publisher=event_publisher),
            event_publisher=container.event_publisher,
        )
    )

    return container
