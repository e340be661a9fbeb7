"""
Migration inicial para o domínio de Pessoas.

Cria as tabelas:
- pessoas: Cadastro de pessoas
- contatos: Contatos de cada pessoa (cascade)
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: pessoas
        # =================================================================
        migrations.CreateModel(
            name='PessoaModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único da pessoa'
                )),
                ('nome', models.CharField(
                    max_length=100,
                    db_index=True,
                    help_text='Nome completo'
                )),
                ('cpf', models.CharField(
                    max_length=11,
                    unique=True,
                    help_text='CPF somente com dígitos'
                )),
                ('data_nascimento', models.DateField(
                    help_text='Data de nascimento'
                )),
                ('sexo', models.CharField(max_length=20, null=True, blank=True)),
                ('email', models.CharField(max_length=100, null=True, blank=True)),
                ('naturalidade', models.CharField(max_length=50, null=True, blank=True)),
                ('nacionalidade', models.CharField(max_length=50, null=True, blank=True)),
                ('criado_por_id', models.CharField(
                    max_length=36,
                    null=True,
                    blank=True,
                    db_index=True,
                    help_text='ID do usuário que criou o registro'
                )),
                ('atualizado_por_id', models.CharField(
                    max_length=36,
                    null=True,
                    blank=True,
                    help_text='ID do usuário que fez a última alteração'
                )),
                ('criado_em', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True,
                )),
                ('atualizado_em', models.DateTimeField(
                    default=django.utils.timezone.now,
                )),
            ],
            options={
                'verbose_name': 'Pessoa',
                'verbose_name_plural': 'Pessoas',
                'db_table': 'pessoas',
                'ordering': ['nome'],
            },
        ),

        # =================================================================
        # Tabela: contatos
        # =================================================================
        migrations.CreateModel(
            name='ContatoModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                )),
                ('tipo', models.CharField(max_length=50)),
                ('valor', models.CharField(max_length=100)),
                ('principal', models.BooleanField(default=False)),
                ('pessoa', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='contatos',
                    to='pessoas.pessoamodel',
                )),
            ],
            options={
                'verbose_name': 'Contato',
                'verbose_name_plural': 'Contatos',
                'db_table': 'contatos',
            },
        ),
        migrations.AddIndex(
            model_name='contatomodel',
            index=models.Index(fields=['pessoa', 'tipo'], name='contatos_pessoa_tipo_idx'),
        ),
    ]
