"""
Regras de Autorização.

O ator (quem executa a operação) é passado explicitamente para
cada caso de uso como um `Ator`, nunca lido de estado global.
Os predicados são puros: sem I/O, dependem apenas dos fatos do ator.

Regras:
- Visualizar pessoas/usuários: liberado para qualquer ator autenticado
- Editar/remover pessoa: administrador OU pessoa vinculada ao ator
- Remover usuário:
    1. Permissão: administrador OU a própria conta
    2. Autoproteção: administrador nunca remove a própria conta
"""

from dataclasses import dataclass
from typing import Optional

from .exceptions import NaoPodeRemoverProprioUsuarioError, PermissaoNegadaError


@dataclass(frozen=True)
class Ator:
    """
    Fatos sobre o usuário que executa uma operação.

    Attributes:
        usuario_id: ID do usuário autenticado
        eh_admin: Se o usuário tem papel de administrador
        pessoa_id: ID da pessoa vinculada ao usuário (se houver)
    """

    usuario_id: str
    eh_admin: bool = False
    pessoa_id: Optional[str] = None

    def pode_editar_pessoa(self, pessoa_id: str) -> bool:
        if self.eh_admin:
            return True
        return self.pessoa_id is not None and self.pessoa_id == pessoa_id

    def pode_remover_pessoa(self, pessoa_id: str) -> bool:
        return self.pode_editar_pessoa(pessoa_id)

    def validar_pode_editar_pessoa(self, pessoa_id: str) -> None:
        """
        Raises:
            PermissaoNegadaError: AUTH_CANNOT_EDIT_OTHERS_PERSON
        """
        if not self.pode_editar_pessoa(pessoa_id):
            raise PermissaoNegadaError.editar_pessoa(pessoa_id, self.usuario_id)

    def validar_pode_remover_usuario(self, usuario_alvo_id: str) -> None:
        """
        Valida remoção de conta em duas etapas, nesta ordem.

        Raises:
            PermissaoNegadaError: Não-admin tentando remover outra conta
            NaoPodeRemoverProprioUsuarioError: Admin removendo a própria conta
        """
        if not self.eh_admin and self.usuario_id != usuario_alvo_id:
            raise PermissaoNegadaError.remover_usuario(usuario_alvo_id, self.usuario_id)

        if self.eh_admin and self.usuario_id == usuario_alvo_id:
            raise NaoPodeRemoverProprioUsuarioError(usuario_alvo_id)

    def validar_eh_admin(self) -> None:
        if not self.eh_admin:
            raise PermissaoNegadaError.apenas_admin()
