"""
Django Models para o domínio de Usuários.

UsuarioModel persiste o UsuarioEntity. A conta referencia no
máximo uma pessoa; remover a pessoa apenas desfaz o vínculo.
"""

from django.db import models
from django.utils import timezone

from ..pessoas.models import PessoaModel


class PapelChoices(models.TextChoices):
    """Choices para papel (espelha PapelUsuario do Core)."""
    USER = 'User', 'User'
    ADMIN = 'Admin', 'Admin'


class UsuarioModel(models.Model):
    """
    Model Django para persistência de Usuários.

    Fields:
        id: UUID como primary key (gerado pela Entity)
        username: Nome de login (único)
        password_hash: Hash da senha (formato Django hashers)
        papel: User ou Admin
        pessoa: Pessoa vinculada (opcional)
        criado_em / atualizado_em: Timestamps
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do usuário"
    )

    username = models.CharField(
        max_length=50,
        unique=True,
        help_text="Nome de login"
    )

    password_hash = models.CharField(
        max_length=255,
    )

    papel = models.CharField(
        max_length=10,
        choices=PapelChoices.choices,
        default=PapelChoices.USER,
        db_index=True,
    )

    pessoa = models.OneToOneField(
        PessoaModel,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='usuario',
    )

    criado_em = models.DateTimeField(
        default=timezone.now,
    )

    atualizado_em = models.DateTimeField(
        default=timezone.now,
    )

    class Meta:
        db_table = 'usuarios'
        verbose_name = 'Usuário'
        verbose_name_plural = 'Usuários'
        ordering = ['username']

    def __str__(self):
        return self.username
