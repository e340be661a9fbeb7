"""
Django Forms para validação de entrada da API de Autenticação.
"""

from django import forms
from django.core.validators import RegexValidator

from src.core.usuarios.dtos import LoginInputDTO, RegistrarUsuarioInputDTO

from ..pessoas.forms import PessoaForm

username_validator = RegexValidator(
    r'^[a-zA-Z0-9._-]+\Z',
    'Username só pode conter letras, números, pontos, hífens e underscores',
)


class RegistroForm(PessoaForm):
    """
    Form de registro: credenciais + dados cadastrais da pessoa.

    Herda os campos de PessoaForm.
    """

    username = forms.CharField(
        min_length=3,
        max_length=50,
        validators=[username_validator],
        error_messages={
            'required': 'Username é obrigatório',
            'min_length': 'Username deve ter pelo menos 3 caracteres',
            'max_length': 'Username deve ter no máximo 50 caracteres',
        },
    )

    password = forms.CharField(
        min_length=6,
        max_length=100,
        strip=False,
        error_messages={
            'required': 'Senha é obrigatória',
            'min_length': 'Senha deve ter pelo menos 6 caracteres',
            'max_length': 'Senha deve ter no máximo 100 caracteres',
        },
    )

    def to_dto(self) -> RegistrarUsuarioInputDTO:
        return RegistrarUsuarioInputDTO(
            username=self.cleaned_data['username'],
            password=self.cleaned_data['password'],
            pessoa=self.to_criar_dto(),
        )

    def to_login_dto(self) -> LoginInputDTO:
        return LoginInputDTO(
            username=self.cleaned_data['username'],
            password=self.cleaned_data['password'],
        )


class LoginForm(forms.Form):

    username = forms.CharField(
        max_length=50,
        error_messages={'required': 'Username é obrigatório'},
    )

    password = forms.CharField(
        max_length=100,
        strip=False,
        error_messages={'required': 'Senha é obrigatória'},
    )

    def to_dto(self) -> LoginInputDTO:
        return LoginInputDTO(
            username=self.cleaned_data['username'],
            password=self.cleaned_data['password'],
        )
