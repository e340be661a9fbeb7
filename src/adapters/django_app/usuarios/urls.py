"""
URL patterns para Autenticação e Usuários.

Endpoints API JSON:
- POST /api/v1/auth/register
- POST /api/v1/auth/login
- GET /api/v1/users
- GET/DELETE /api/v1/users/<id>
"""

from django.urls import path

from . import api_views

app_name = 'usuarios'

urlpatterns = [
    path('auth/register', api_views.RegistroAPIView.as_view(), name='register'),
    path('auth/login', api_views.LoginAPIView.as_view(), name='login'),
    path('users', api_views.UsuarioAPIListView.as_view(), name='api_list'),
    path('users/<str:pk>', api_views.UsuarioAPIDetailView.as_view(), name='api_detail'),
]
