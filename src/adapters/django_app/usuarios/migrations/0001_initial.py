"""
Migration inicial para o domínio de Usuários.

Cria a tabela:
- usuarios: Contas de acesso (vínculo opcional com pessoas)
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
        ('pessoas', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='UsuarioModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do usuário'
                )),
                ('username', models.CharField(
                    max_length=50,
                    unique=True,
                    help_text='Nome de login'
                )),
                ('password_hash', models.CharField(max_length=255)),
                ('papel', models.CharField(
                    max_length=10,
                    choices=[('User', 'User'), ('Admin', 'Admin')],
                    default='User',
                    db_index=True,
                )),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('pessoa', models.OneToOneField(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='usuario',
                    to='pessoas.pessoamodel',
                )),
            ],
            options={
                'verbose_name': 'Usuário',
                'verbose_name_plural': 'Usuários',
                'db_table': 'usuarios',
                'ordering': ['username'],
            },
        ),
    ]
