"""
Django Forms para validação de entrada da API de Pessoas.

Forms são DRIVING ADAPTERS que validam a estrutura dos dados
antes de passá-los para os Use Cases. Regras de negócio
(dígitos verificadores do CPF, unicidade) ficam no Core.
"""

from datetime import date

from django import forms
from django.core.validators import RegexValidator

from src.core.pessoas.dtos import AtualizarPessoaInputDTO, CriarPessoaInputDTO

SEXO_CHOICES = [
    ('M', 'M'),
    ('F', 'F'),
    ('Masculino', 'Masculino'),
    ('Feminino', 'Feminino'),
]


def _opcional(valor):
    """Normaliza strings vazias para None."""
    if valor is None:
        return None
    valor = valor.strip()
    return valor or None


class PessoaForm(forms.Form):
    """
    Campos cadastrais de pessoa.

    Usado na criação (com CPF) e como base do formulário de registro.
    """

    nome = forms.CharField(
        max_length=100,
        error_messages={
            'required': 'Nome é obrigatório',
            'max_length': 'Nome deve ter no máximo 100 caracteres',
        },
    )

    cpf = forms.CharField(
        min_length=11,
        max_length=11,
        validators=[RegexValidator(r'^[0-9]{11}\Z', 'CPF deve conter apenas números')],
        error_messages={
            'required': 'CPF é obrigatório',
            'min_length': 'CPF deve ter 11 dígitos',
            'max_length': 'CPF deve ter 11 dígitos',
        },
    )

    data_nascimento = forms.DateField(
        error_messages={
            'required': 'Data de nascimento é obrigatória',
            'invalid': 'Data de nascimento inválida (use AAAA-MM-DD)',
        },
    )

    sexo = forms.ChoiceField(
        choices=SEXO_CHOICES,
        required=False,
        error_messages={
            'invalid_choice': 'Sexo deve ser M, F, Masculino ou Feminino',
        },
    )

    email = forms.EmailField(
        max_length=100,
        required=False,
        error_messages={
            'invalid': 'Email inválido',
            'max_length': 'Email deve ter no máximo 100 caracteres',
        },
    )

    telefone = forms.CharField(max_length=100, required=False)
    celular = forms.CharField(max_length=100, required=False)
    naturalidade = forms.CharField(max_length=50, required=False)
    nacionalidade = forms.CharField(max_length=50, required=False)

    def clean_nome(self):
        nome = self.cleaned_data['nome'].strip()
        if not nome:
            raise forms.ValidationError('Nome é obrigatório')
        return nome

    def clean_data_nascimento(self):
        data_nascimento = self.cleaned_data['data_nascimento']
        if data_nascimento > date.today():
            raise forms.ValidationError('Data de nascimento não pode ser no futuro')
        return data_nascimento

    def _dados_pessoa(self) -> dict:
        data = self.cleaned_data
        return {
            'nome': data['nome'],
            'data_nascimento': data['data_nascimento'],
            'sexo': _opcional(data.get('sexo')),
            'email': _opcional(data.get('email')),
            'naturalidade': _opcional(data.get('naturalidade')),
            'nacionalidade': _opcional(data.get('nacionalidade')),
            'telefone': _opcional(data.get('telefone')),
            'celular': _opcional(data.get('celular')),
        }

    def to_criar_dto(self) -> CriarPessoaInputDTO:
        return CriarPessoaInputDTO(cpf=self.cleaned_data['cpf'], **self._dados_pessoa())


class AtualizarPessoaForm(PessoaForm):
    """Atualização cadastral: o CPF é imutável e não faz parte do form."""

    cpf = None

    def to_atualizar_dto(self, pessoa_id: str) -> AtualizarPessoaInputDTO:
        return AtualizarPessoaInputDTO(pessoa_id=pessoa_id, **self._dados_pessoa())
