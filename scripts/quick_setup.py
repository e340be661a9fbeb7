#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Executa migrations
3. Garante a conta administradora (ADMIN_USERNAME / ADMIN_PASSWORD)
4. Cria pessoas de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse
from datetime import date

# Raiz do projeto no path (pacote src)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    import django
    django.setup()


def run_migrations():
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def seed_admin():
    """Cria a conta administradora se ainda não existir."""
    from django.conf import settings
    from src.config.container import get_container

    service = get_container().garantir_admin_service()
    admin = service.execute(settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)

    print(f"👤 Administrador: {admin.username} ({admin.papel})")
    return admin


def create_sample_data(admin_id: str):
    """Cria pessoas de exemplo em nome do administrador."""
    from src.config.container import get_container
    from src.core.pessoas.dtos import CriarPessoaInputDTO
    from src.core.usuarios.autorizacao import Ator

    container = get_container()
    ator = Ator(usuario_id=admin_id, eh_admin=True)

    sample_pessoas = [
        CriarPessoaInputDTO(
            nome='Maria Silva',
            cpf='52998224725',
            data_nascimento=date(1990, 1, 1),
            sexo='F',
            email='maria@example.com',
            celular='11999990000',
            nacionalidade='Brasileira',
        ),
        CriarPessoaInputDTO(
            nome='João Souza',
            cpf='11144477735',
            data_nascimento=date(1985, 6, 15),
            sexo='M',
            email='joao@example.com',
            telefone='1133334444',
            celular='11988887777',
            naturalidade='São Paulo',
        ),
        CriarPessoaInputDTO(
            nome='Ana Pereira',
            cpf='12345678909',
            data_nascimento=date(2000, 12, 31),
        ),
    ]

    print("📝 Criando pessoas de exemplo...")

    repo = container.pessoa_repository()
    criadas = 0
    for dto in sample_pessoas:
        if repo.cpf_exists(dto.cpf):
            print(f"   - {dto.nome} (já cadastrada)")
            continue
        container.criar_pessoa_service().execute(dto, ator)
        criadas += 1
        print(f"   ✓ {dto.nome}")

    print(f"✅ {criadas} pessoas criadas!")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection
    from django.db.utils import OperationalError

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except OperationalError as e:
        print(f"❌ Erro de conexão: {e}")
        return False

    print("✅ Conexão OK!")
    return True


def show_info():
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print(f"  Event Publisher: {settings.EVENT_PUBLISHER_MODE}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. django-admin runserver --settings=src.config.settings --pythonpath=.")
    print("   2. POST http://localhost:8000/api/v1/auth/login")
    print("   3. GET  http://localhost:8000/api/v1/persons (Authorization: Bearer <token>)")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar pessoas de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Cadastro de Pessoas - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        print("   Sem DATABASE_URL/DATABASE_NAME o SQLite local é usado.")
        return

    run_migrations()

    admin = seed_admin()

    if args.with_sample_data:
        create_sample_data(admin.id)

    show_info()


if __name__ == '__main__':
    main()
