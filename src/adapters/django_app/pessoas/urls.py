"""
URL patterns para o domínio de Pessoas.

Endpoints API JSON:
- GET/POST /api/v1/persons
- GET/PUT/DELETE /api/v1/persons/<id>
"""

from django.urls import path

from . import api_views

app_name = 'pessoas'

urlpatterns = [
    path('persons', api_views.PessoaAPIListView.as_view(), name='api_list'),
    path('persons/<str:pk>', api_views.PessoaAPIDetailView.as_view(), name='api_detail'),
]
