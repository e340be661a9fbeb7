"""
Testes dos Use Cases de Usuários.

Hasher e serviço de token são fakes definidos no conftest do Core.
"""

from dataclasses import replace

import pytest

from src.core.pessoas.exceptions import CPFJaCadastradoError
from src.core.shared.exceptions import CampoObrigatorioError
from src.core.usuarios.autorizacao import Ator
from src.core.usuarios.dtos import LoginInputDTO, RegistrarUsuarioInputDTO
from src.core.usuarios.exceptions import (
    CredenciaisInvalidasError,
    NaoPodeRemoverProprioUsuarioError,
    PermissaoNegadaError,
    UsernameInvalidoError,
    UsernameJaExisteError,
    UsuarioNaoEncontradoError,
)
from src.core.usuarios.use_cases import (
    GarantirAdminService,
    ListarUsuariosService,
    LoginService,
    ObterUsuarioService,
    RegistrarUsuarioService,
    RemoverUsuarioService,
)


@pytest.fixture
def registrar(usuario_repo, pessoa_repo, password_hasher, uow):
    return RegistrarUsuarioService(usuario_repo, pessoa_repo, password_hasher, uow)


@pytest.fixture
def registro_dto(criar_pessoa_dto):
    return RegistrarUsuarioInputDTO(
        username="maria.silva",
        password="segredo123",
        pessoa=criar_pessoa_dto,
    )


@pytest.fixture
def usuario_registrado(registrar, registro_dto):
    return registrar.execute(registro_dto)


class TestRegistrarUsuarioService:

    def test_registrar_cria_usuario_e_pessoa(self, registrar, registro_dto, usuario_repo, pessoa_repo, uow):
        """Deve criar conta com papel User e pessoa vinculada"""
        output = registrar.execute(registro_dto)

        usuario = usuario_repo.get_by_id(output.id)
        assert usuario.papel.value == "User"
        assert usuario.password_hash == "hashed::segredo123"
        assert output.pessoa is not None
        assert output.pessoa.criado_por_id == output.id
        assert pessoa_repo.get_by_id(usuario.pessoa_id).cpf == "52998224725"
        assert uow.event_types() == ["PessoaCriadaEvent", "UsuarioRegistradoEvent"]

    def test_username_duplicado(self, registrar, registro_dto, usuario_registrado, pessoa_repo):
        dto = replace(registro_dto, pessoa=replace(registro_dto.pessoa, cpf="11144477735"))

        with pytest.raises(UsernameJaExisteError) as exc_info:
            registrar.execute(dto)

        assert exc_info.value.code == "USER_USERNAME_EXISTS"
        assert pessoa_repo.count() == 1

    def test_cpf_duplicado(self, registrar, registro_dto, usuario_registrado, usuario_repo):
        with pytest.raises(CPFJaCadastradoError):
            registrar.execute(replace(registro_dto, username="outra.maria"))

        assert usuario_repo.count() == 1

    def test_username_invalido_nao_persiste(self, registrar, registro_dto, usuario_repo, pessoa_repo):
        with pytest.raises(UsernameInvalidoError):
            registrar.execute(replace(registro_dto, username="a b"))

        assert usuario_repo.count() == 0
        assert pessoa_repo.count() == 0

    def test_dados_da_pessoa_invalidos(self, registrar, registro_dto, usuario_repo):
        dto = replace(registro_dto, pessoa=replace(registro_dto.pessoa, nome=" "))

        with pytest.raises(CampoObrigatorioError):
            registrar.execute(dto)

        assert usuario_repo.count() == 0

    def test_senha_fora_do_log(self, registro_dto):
        assert "password" not in registro_dto.to_dict()


class TestLoginService:

    @pytest.fixture
    def login(self, usuario_repo, pessoa_repo, password_hasher, token_service):
        return LoginService(usuario_repo, pessoa_repo, password_hasher, token_service)

    def test_login_com_sucesso(self, login, usuario_registrado, token_service):
        output = login.execute(LoginInputDTO("maria.silva", "segredo123"))

        assert output.token == f"token-{usuario_registrado.id}"
        assert output.usuario.username == "maria.silva"
        assert output.usuario.pessoa.nome == "Maria Silva"
        assert token_service.gerados == [usuario_registrado.id]

    def test_senha_errada_e_username_inexistente_falham_igual(self, login, usuario_registrado):
        """Não deve revelar se o username existe"""
        with pytest.raises(CredenciaisInvalidasError) as senha_errada:
            login.execute(LoginInputDTO("maria.silva", "errada"))
        with pytest.raises(CredenciaisInvalidasError) as inexistente:
            login.execute(LoginInputDTO("ninguem", "segredo123"))

        assert senha_errada.value.to_dict() == inexistente.value.to_dict()


class TestListarEObterUsuarios:

    def test_admin_lista_usuarios(self, usuario_repo, pessoa_repo, usuario_registrado, admin):
        usuarios = ListarUsuariosService(usuario_repo, pessoa_repo).execute(admin)

        assert [u.username for u in usuarios] == ["maria.silva"]
        assert usuarios[0].pessoa is not None

    def test_usuario_comum_nao_lista(self, usuario_repo, pessoa_repo, usuario_registrado):
        ator = Ator(usuario_registrado.id, pessoa_id=usuario_registrado.pessoa.id)

        with pytest.raises(PermissaoNegadaError):
            ListarUsuariosService(usuario_repo, pessoa_repo).execute(ator)

    def test_obter_usuario(self, usuario_repo, pessoa_repo, usuario_registrado):
        output = ObterUsuarioService(usuario_repo, pessoa_repo).execute(usuario_registrado.id)

        assert output.username == "maria.silva"

    def test_obter_inexistente(self, usuario_repo, pessoa_repo):
        with pytest.raises(UsuarioNaoEncontradoError) as exc_info:
            ObterUsuarioService(usuario_repo, pessoa_repo).execute("nao-existe")

        assert exc_info.value.code == "USER_NOT_FOUND"


class TestRemoverUsuarioService:

    @pytest.fixture
    def remover(self, usuario_repo, pessoa_repo, uow):
        return RemoverUsuarioService(usuario_repo, pessoa_repo, uow)

    def test_usuario_remove_propria_conta(self, remover, usuario_registrado, usuario_repo, pessoa_repo, uow):
        """Deve remover conta e pessoa vinculada"""
        ator = Ator(usuario_registrado.id, pessoa_id=usuario_registrado.pessoa.id)

        remover.execute(usuario_registrado.id, ator)

        assert usuario_repo.count() == 0
        assert pessoa_repo.count() == 0
        assert uow.event_types()[-1] == "UsuarioRemovidoEvent"

    def test_admin_remove_outro(self, remover, usuario_registrado, usuario_repo, admin):
        remover.execute(usuario_registrado.id, admin)

        assert usuario_repo.get_by_id(usuario_registrado.id) is None

    def test_usuario_nao_remove_outro(self, remover, usuario_registrado, usuario_repo):
        with pytest.raises(PermissaoNegadaError):
            remover.execute(usuario_registrado.id, Ator("outro"))

        assert usuario_repo.count() == 1

    def test_admin_nao_remove_a_si_mesmo(self, remover, usuario_repo, password_hasher, uow):
        admin = GarantirAdminService(usuario_repo, password_hasher, uow).execute("admin", "admin123")

        with pytest.raises(NaoPodeRemoverProprioUsuarioError):
            remover.execute(admin.id, Ator(admin.id, eh_admin=True))

        assert usuario_repo.count() == 1

    def test_remover_inexistente(self, remover, admin):
        with pytest.raises(UsuarioNaoEncontradoError):
            remover.execute("nao-existe", admin)


class TestGarantirAdminService:

    def test_cria_admin_uma_unica_vez(self, usuario_repo, password_hasher, uow):
        service = GarantirAdminService(usuario_repo, password_hasher, uow)

        primeiro = service.execute("admin", "admin123")
        segundo = service.execute("admin", "outra-senha")

        assert primeiro.id == segundo.id
        assert primeiro.papel == "Admin"
        assert usuario_repo.count() == 1
        assert usuario_repo.get_by_username("admin").password_hash == "hashed::admin123"
        assert uow.event_types() == ["UsuarioRegistradoEvent"]
