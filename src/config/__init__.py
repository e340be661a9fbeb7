"""
Configuração do projeto Cadastro de Pessoas.

Módulos:
- settings: Configurações Django
- urls: Rotas principais
- celery: Configuração Celery para eventos assíncronos
- container: Dependency Injection Container
"""

from .celery import app as celery_app

__all__ = ('celery_app',)
