"""
Adapters de segurança: hash de senha e tokens JWT.

- DjangoPasswordHasher: django.contrib.auth.hashers (PBKDF2 por padrão)
- JwtTokenService: tokens HS256 via python-jose
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from django.contrib.auth.hashers import check_password, make_password
from jose import ExpiredSignatureError, JWTError, jwt

from src.core.usuarios.entities import UsuarioEntity
from src.core.usuarios.exceptions import TokenExpiradoError, TokenInvalidoError
from src.core.usuarios.ports import TokenGerado

JWT_ALGORITHM = "HS256"


class DjangoPasswordHasher:
    """Implementa PasswordHasher com os hashers configurados no Django."""

    def hash(self, senha: str) -> str:
        return make_password(senha)

    def verificar(self, senha: str, password_hash: str) -> bool:
        return check_password(senha, password_hash)


class JwtTokenService:
    """
    Implementa TokenService com JWT assinado (HS256).

    Claims emitidas:
        sub: ID do usuário
        username: Nome de login
        role: Papel ("User" ou "Admin")
        iss / aud: Emissor e audiência configurados
        iat / exp: Emissão e expiração
    """

    def __init__(
        self,
        secret: str,
        issuer: str,
        audience: str,
        expiration_minutes: int = 60,
    ):
        if not secret:
            raise ValueError("JWT secret não configurado")
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._expiration = timedelta(minutes=expiration_minutes)

    def gerar(self, usuario: UsuarioEntity) -> TokenGerado:
        agora = datetime.now(timezone.utc)
        expira_em = agora + self._expiration

        payload: Dict[str, Any] = {
            "sub": usuario.id,
            "username": usuario.username,
            "role": usuario.papel.value,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": agora,
            "exp": expira_em,
        }
        token = jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)
        return TokenGerado(token=token, expira_em=expira_em)

    def verificar(self, token: str) -> Dict[str, Any]:
        """
        Valida assinatura, emissor, audiência e expiração.

        Raises:
            TokenExpiradoError: Token expirado
            TokenInvalidoError: Qualquer outra falha de validação
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
            )
        except ExpiredSignatureError as exc:
            raise TokenExpiradoError() from exc
        except JWTError as exc:
            raise TokenInvalidoError() from exc

        if not claims.get("sub"):
            raise TokenInvalidoError()

        return claims
