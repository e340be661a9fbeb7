"""
Django Models para o domínio de Pessoas.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/pessoas/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities do Core
- Models são mapeados para/de Entities via Mappers

Relacionamentos:
- PessoaModel: Tabela principal de pessoas
- ContatoModel: Contatos de cada pessoa (removidos em cascata)
"""

from django.db import models
from django.utils import timezone


class PessoaModel(models.Model):
    """
    Model Django para persistência de Pessoas.

    Fields:
        id: UUID como primary key (gerado pela Entity)
        nome: Nome completo
        cpf: CPF somente dígitos (único)
        data_nascimento: Data de nascimento
        sexo: Marcador de sexo
        email: Email
        naturalidade: Local de nascimento
        nacionalidade: Nacionalidade
        criado_por_id / atualizado_por_id: IDs dos usuários responsáveis
        criado_em / atualizado_em: Timestamps (controlados pela Entity)
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único da pessoa"
    )

    nome = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Nome completo"
    )

    cpf = models.CharField(
        max_length=11,
        unique=True,
        help_text="CPF somente com dígitos"
    )

    data_nascimento = models.DateField(
        help_text="Data de nascimento"
    )

    sexo = models.CharField(
        max_length=20,
        null=True,
        blank=True,
    )

    email = models.CharField(
        max_length=100,
        null=True,
        blank=True,
    )

    naturalidade = models.CharField(
        max_length=50,
        null=True,
        blank=True,
    )

    nacionalidade = models.CharField(
        max_length=50,
        null=True,
        blank=True,
    )

    criado_por_id = models.CharField(
        max_length=36,
        null=True,
        blank=True,
        db_index=True,
        help_text="ID do usuário que criou o registro"
    )

    atualizado_por_id = models.CharField(
        max_length=36,
        null=True,
        blank=True,
        help_text="ID do usuário que fez a última alteração"
    )

    # Timestamps (definidos pela Entity, não pelo ORM)
    criado_em = models.DateTimeField(
        default=timezone.now,
        db_index=True,
    )

    atualizado_em = models.DateTimeField(
        default=timezone.now,
    )

    class Meta:
        db_table = 'pessoas'
        verbose_name = 'Pessoa'
        verbose_name_plural = 'Pessoas'
        ordering = ['nome']

    def __str__(self):
        return f"[{self.id[:8]}] {self.nome}"


class ContatoModel(models.Model):
    """Contato de uma pessoa (Email, Telefone, Celular...)."""

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
    )

    pessoa = models.ForeignKey(
        PessoaModel,
        on_delete=models.CASCADE,
        related_name='contatos',
    )

    tipo = models.CharField(max_length=50)

    valor = models.CharField(max_length=100)

    principal = models.BooleanField(default=False)

    class Meta:
        db_table = 'contatos'
        verbose_name = 'Contato'
        verbose_name_plural = 'Contatos'
        indexes = [
            models.Index(fields=['pessoa', 'tipo'], name='contatos_pessoa_tipo_idx'),
        ]

    def __str__(self):
        return f"{self.tipo}: {self.valor}"
