"""
URL Configuration do Cadastro de Pessoas.

Estrutura:
- /api/v1/auth/... - Registro e login
- /api/v1/persons/... - API de Pessoas
- /api/v1/users/... - API de Usuários
- /health/ - Health check
"""

from django.http import JsonResponse
from django.urls import include, path


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    path('api/v1/', include('src.adapters.django_app.usuarios.urls')),
    path('api/v1/', include('src.adapters.django_app.pessoas.urls')),

    # Health check
    path('health/', health, name='health'),
]
