"""
Use Cases (Application Services) do Domínio de Usuários.

Use Cases implementados:
- RegistrarUsuarioService: Cria conta + pessoa vinculada
- LoginService: Autentica e emite token de acesso
- ListarUsuariosService: Lista contas (somente administradores)
- ObterUsuarioService: Obtém conta específica
- RemoverUsuarioService: Remove conta e pessoa vinculada
- GarantirAdminService: Garante a existência da conta administradora
"""

import logging
from typing import List

from src.core.pessoas.entities import PessoaEntity
from src.core.pessoas.events import PessoaCriadaEvent
from src.core.pessoas.exceptions import CPFJaCadastradoError
from src.core.pessoas.ports import PessoaRepository
from src.core.shared.cpf import limpar_cpf
from src.core.shared.interfaces import UnitOfWork

from .autorizacao import Ator
from .dtos import (
    LoginInputDTO,
    LoginOutputDTO,
    RegistrarUsuarioInputDTO,
    UsuarioOutputDTO,
)
from .entities import PapelUsuario, UsuarioEntity
from .events import UsuarioRegistradoEvent, UsuarioRemovidoEvent
from .exceptions import (
    CredenciaisInvalidasError,
    UsernameJaExisteError,
    UsuarioNaoEncontradoError,
)
from .ports import PasswordHasher, TokenService, UsuarioRepository

logger = logging.getLogger(__name__)


class RegistrarUsuarioService:
    """
    Use Case: Registrar nova conta de usuário.

    Fluxo:
    1. Verificar unicidade de username e CPF
    2. Gerar hash da senha
    3. Criar usuário (papel User) e pessoa (criada pelo próprio usuário)
    4. Vincular pessoa ao usuário
    5. Persistir ambos na mesma transação
    6. Disparar UsuarioRegistradoEvent e PessoaCriadaEvent

    Example:
        service = RegistrarUsuarioService(usuario_repo, pessoa_repo, hasher, uow)
        output = service.execute(RegistrarUsuarioInputDTO(...))
    """

    def __init__(
        self,
        usuario_repo: UsuarioRepository,
        pessoa_repo: PessoaRepository,
        password_hasher: PasswordHasher,
        uow: UnitOfWork,
    ):
        self.usuario_repo = usuario_repo
        self.pessoa_repo = pessoa_repo
        self.password_hasher = password_hasher
        self.uow = uow

    def execute(self, input_dto: RegistrarUsuarioInputDTO) -> UsuarioOutputDTO:
        """
        Raises:
            UsernameJaExisteError: Username em uso
            CPFJaCadastradoError: CPF já cadastrado
            UsernameInvalidoError, CPFInvalidoError, DataNascimentoInvalidaError
        """
        dados = input_dto.pessoa

        with self.uow:
            if self.usuario_repo.username_exists(input_dto.username):
                raise UsernameJaExisteError(input_dto.username)

            cpf = limpar_cpf(dados.cpf)
            if cpf and self.pessoa_repo.cpf_exists(cpf):
                raise CPFJaCadastradoError(cpf)

            usuario = UsuarioEntity.criar(
                username=input_dto.username,
                password_hash=self.password_hasher.hash(input_dto.password),
                papel=PapelUsuario.USER,
            )

            pessoa = PessoaEntity.criar(
                nome=dados.nome,
                cpf=dados.cpf,
                data_nascimento=dados.data_nascimento,
                sexo=dados.sexo,
                email=dados.email,
                naturalidade=dados.naturalidade,
                nacionalidade=dados.nacionalidade,
                criado_por_id=usuario.id,
            )
            pessoa.substituir_contatos(
                email=dados.email,
                telefone=dados.telefone,
                celular=dados.celular,
            )

            usuario.definir_pessoa(pessoa)

            self.pessoa_repo.save(pessoa)
            self.usuario_repo.save(usuario)

            self.uow.publish_event(
                PessoaCriadaEvent(
                    aggregate_id=pessoa.id,
                    nome=pessoa.nome,
                    criado_por_id=usuario.id,
                )
            )
            self.uow.publish_event(
                UsuarioRegistradoEvent(
                    aggregate_id=usuario.id,
                    username=usuario.username,
                    papel=usuario.papel.value,
                    pessoa_id=pessoa.id,
                )
            )

        logger.info("Usuário %s registrado", usuario.username)
        return UsuarioOutputDTO.from_entity(usuario, pessoa)


class LoginService:
    """
    Use Case: Autenticar usuário e emitir token.

    Username inexistente e senha incorreta produzem a mesma falha.
    """

    def __init__(
        self,
        usuario_repo: UsuarioRepository,
        pessoa_repo: PessoaRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.usuario_repo = usuario_repo
        self.pessoa_repo = pessoa_repo
        self.password_hasher = password_hasher
        self.token_service = token_service

    def execute(self, input_dto: LoginInputDTO) -> LoginOutputDTO:
        """
        Raises:
            CredenciaisInvalidasError: Username ou senha incorretos
        """
        usuario = self.usuario_repo.get_by_username(input_dto.username)
        if usuario is None:
            logger.warning("Tentativa de login com username inexistente: %s", input_dto.username)
            raise CredenciaisInvalidasError()

        if not self.password_hasher.verificar(input_dto.password, usuario.password_hash):
            logger.warning("Senha incorreta para o usuário %s", usuario.username)
            raise CredenciaisInvalidasError()

        token = self.token_service.gerar(usuario)
        pessoa = self.pessoa_repo.get_by_id(usuario.pessoa_id) if usuario.pessoa_id else None

        logger.info("Usuário %s autenticado", usuario.username)
        return LoginOutputDTO(
            token=token.token,
            expira_em=token.expira_em,
            usuario=UsuarioOutputDTO.from_entity(usuario, pessoa),
        )


class ListarUsuariosService:
    """Use Case: Listar usuários (somente administradores)."""

    def __init__(self, usuario_repo: UsuarioRepository, pessoa_repo: PessoaRepository):
        self.usuario_repo = usuario_repo
        self.pessoa_repo = pessoa_repo

    def execute(self, ator: Ator) -> List[UsuarioOutputDTO]:
        """
        Raises:
            PermissaoNegadaError: Se ator não é administrador
        """
        ator.validar_eh_admin()

        resultado = []
        for usuario in self.usuario_repo.list_all():
            pessoa = self.pessoa_repo.get_by_id(usuario.pessoa_id) if usuario.pessoa_id else None
            resultado.append(UsuarioOutputDTO.from_entity(usuario, pessoa))
        return resultado


class ObterUsuarioService:

    def __init__(self, usuario_repo: UsuarioRepository, pessoa_repo: PessoaRepository):
        self.usuario_repo = usuario_repo
        self.pessoa_repo = pessoa_repo

    def execute(self, usuario_id: str) -> UsuarioOutputDTO:
        """
        Raises:
            UsuarioNaoEncontradoError: Se usuário não existe
        """
        usuario = self.usuario_repo.get_by_id(usuario_id)
        if not usuario:
            raise UsuarioNaoEncontradoError(usuario_id)

        pessoa = self.pessoa_repo.get_by_id(usuario.pessoa_id) if usuario.pessoa_id else None
        return UsuarioOutputDTO.from_entity(usuario, pessoa)


class RemoverUsuarioService:
    """
    Use Case: Remover conta de usuário.

    Fluxo:
    1. Buscar usuário (404 se não existe)
    2. Validar permissão e autoproteção do administrador
    3. Remover pessoa vinculada e, em seguida, a conta
    4. Disparar UsuarioRemovidoEvent
    """

    def __init__(
        self,
        usuario_repo: UsuarioRepository,
        pessoa_repo: PessoaRepository,
        uow: UnitOfWork,
    ):
        self.usuario_repo = usuario_repo
        self.pessoa_repo = pessoa_repo
        self.uow = uow

    def execute(self, usuario_id: str, ator: Ator) -> None:
        """
        Raises:
            UsuarioNaoEncontradoError: Se usuário não existe
            PermissaoNegadaError: Não-admin removendo outra conta
            NaoPodeRemoverProprioUsuarioError: Admin removendo a própria conta
        """
        with self.uow:
            usuario = self.usuario_repo.get_by_id(usuario_id)
            if not usuario:
                raise UsuarioNaoEncontradoError(usuario_id)

            ator.validar_pode_remover_usuario(usuario.id)

            if usuario.pessoa_id:
                self.pessoa_repo.delete(usuario.pessoa_id)
            self.usuario_repo.delete(usuario.id)

            self.uow.publish_event(
                UsuarioRemovidoEvent(
                    aggregate_id=usuario.id,
                    removido_por_id=ator.usuario_id,
                    pessoa_id=usuario.pessoa_id,
                )
            )

        logger.info("Usuário %s removido por %s", usuario.username, ator.usuario_id)


class GarantirAdminService:
    """
    Use Case: Garantir que a conta administradora exista.

    Idempotente: se o username já existe, nada é alterado.
    """

    def __init__(
        self,
        usuario_repo: UsuarioRepository,
        password_hasher: PasswordHasher,
        uow: UnitOfWork,
    ):
        self.usuario_repo = usuario_repo
        self.password_hasher = password_hasher
        self.uow = uow

    def execute(self, username: str, password: str) -> UsuarioOutputDTO:
        with self.uow:
            existente = self.usuario_repo.get_by_username(username)
            if existente:
                return UsuarioOutputDTO.from_entity(existente)

            admin = UsuarioEntity.criar(
                username=username,
                password_hash=self.password_hasher.hash(password),
                papel=PapelUsuario.ADMIN,
            )
            self.usuario_repo.save(admin)

            self.uow.publish_event(
                UsuarioRegistradoEvent(
                    aggregate_id=admin.id,
                    username=admin.username,
                    papel=admin.papel.value,
                )
            )

        logger.info("Conta administradora '%s' criada", username)
        return UsuarioOutputDTO.from_entity(admin)
