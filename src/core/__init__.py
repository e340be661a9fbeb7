"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura, sem dependências de frameworks.
Características:
- Zero dependências externas (Django, Celery, etc.)
- 100% testável sem banco de dados
- Agnóstico a infraestrutura

Domínios:
- pessoas: cadastro de pessoas e seus contatos
- usuarios: contas de acesso, autenticação e regras de autorização
"""
