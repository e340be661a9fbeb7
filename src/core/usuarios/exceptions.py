"""
Exceções do Domínio de Usuários e Autorização.

Códigos estáveis (atributo `code`) permitem que a camada HTTP
traduza cada falha sem depender do texto das mensagens.
"""

from src.core.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleViolationError,
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)


class UsernameInvalidoError(ValidationError):
    """
    Username fora das regras de tamanho ou de caracteres.

    Attributes:
        username: Valor rejeitado
        motivo: Regra violada, em linguagem natural
    """

    def __init__(self, username: str, motivo: str):
        self.username = username
        self.motivo = motivo
        super().__init__(
            f"Username '{username}' é inválido: {motivo}",
            field="username",
            code="USER_INVALID_USERNAME",
            details={"username": username, "motivo": motivo},
        )


class UsuarioNaoEncontradoError(EntityNotFoundError):

    def __init__(self, usuario_id: str):
        super().__init__(
            f"Usuário com ID '{usuario_id}' não foi encontrado",
            entity_type="Usuario",
            entity_id=usuario_id,
            code="USER_NOT_FOUND",
        )


class UsernameJaExisteError(ConflictError):

    def __init__(self, username: str):
        super().__init__(
            f"Username '{username}' já está em uso",
            code="USER_USERNAME_EXISTS",
            details={"username": username},
        )


class CredenciaisInvalidasError(AuthenticationError):
    """Username inexistente ou senha incorreta (indistinguíveis de propósito)."""

    def __init__(self):
        super().__init__("Credenciais inválidas", code="USER_INVALID_CREDENTIALS")


class NaoPodeRemoverProprioUsuarioError(BusinessRuleViolationError):

    def __init__(self, usuario_id: str):
        super().__init__(
            "Administradores não podem deletar sua própria conta",
            rule="admin_nao_remove_propria_conta",
            code="USER_CANNOT_DELETE_SELF",
            details={"usuario_id": usuario_id},
        )


class NaoAutenticadoError(AuthenticationError):

    def __init__(self):
        super().__init__("Usuário não autenticado", code="AUTH_NOT_AUTHENTICATED")


class TokenInvalidoError(AuthenticationError):

    def __init__(self):
        super().__init__("Token de acesso inválido", code="AUTH_INVALID_TOKEN")


class TokenExpiradoError(AuthenticationError):

    def __init__(self):
        super().__init__(
            "Seu token de acesso expirou, faça login novamente",
            code="AUTH_TOKEN_EXPIRED",
        )


class PermissaoNegadaError(AuthorizationError):
    """
    Ator sem permissão para a operação solicitada.

    Use os construtores nomeados para cada situação:
        PermissaoNegadaError.editar_pessoa(pessoa_id, ator_id)
        PermissaoNegadaError.remover_usuario(usuario_alvo_id, ator_id)
        PermissaoNegadaError.apenas_admin()
    """

    @classmethod
    def editar_pessoa(cls, pessoa_id: str, ator_id: str) -> "PermissaoNegadaError":
        return cls(
            "Você só pode editar seu próprio perfil ou ser um administrador",
            code="AUTH_CANNOT_EDIT_OTHERS_PERSON",
            details={"pessoa_id": pessoa_id, "ator_id": ator_id},
        )

    @classmethod
    def remover_usuario(cls, usuario_alvo_id: str, ator_id: str) -> "PermissaoNegadaError":
        return cls(
            "Você só pode deletar sua própria conta ou ser um administrador",
            code="AUTH_CANNOT_DELETE_OTHER_USERS",
            details={"usuario_alvo_id": usuario_alvo_id, "ator_id": ator_id},
        )

    @classmethod
    def apenas_admin(cls) -> "PermissaoNegadaError":
        return cls(
            "Você não tem permissão para realizar esta operação",
            code="AUTH_INSUFFICIENT_PERMISSIONS",
        )
