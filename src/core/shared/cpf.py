"""
Validação de CPF (Cadastro de Pessoas Físicas).

O CPF tem 11 dígitos: 9 dígitos base seguidos de 2 dígitos
verificadores calculados a partir dos anteriores (módulo 11).

Funções puras, sem efeitos colaterais:
- limpar_cpf: remove pontuação ("111.444.777-35" -> "11144477735")
- validar_cpf: verifica tamanho, dígitos repetidos e dígitos verificadores
- formatar_cpf: aplica a máscara 000.000.000-00
"""

import re

CPF_TAMANHO = 11

_NAO_DIGITO = re.compile(r"[^0-9]")


def limpar_cpf(valor: str) -> str:
    """Remove todo caractere que não seja dígito."""
    if not valor:
        return ""
    return _NAO_DIGITO.sub("", valor)


def _digito_verificador(digitos: str, peso_inicial: int) -> int:
    soma = sum(int(d) * (peso_inicial - i) for i, d in enumerate(digitos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def validar_cpf(valor: str) -> bool:
    """
    Verifica se o valor é um CPF estruturalmente válido.

    Passos:
    1. Remove caracteres não numéricos
    2. Exige exatamente 11 dígitos
    3. Rejeita sequências de dígitos iguais ("00000000000", "11111111111", ...)
    4. Confere o primeiro dígito verificador (pesos 10..2 sobre 9 dígitos)
    5. Confere o segundo dígito verificador (pesos 11..2 sobre 10 dígitos)

    Args:
        valor: CPF com ou sem formatação

    Returns:
        True se válido, False caso contrário (nunca lança exceção)

    Example:
        validar_cpf("111.444.777-35")  # True
        validar_cpf("12345678900")     # False
    """
    cpf = limpar_cpf(valor)

    if len(cpf) != CPF_TAMANHO:
        return False

    if cpf == cpf[0] * CPF_TAMANHO:
        return False

    if int(cpf[9]) != _digito_verificador(cpf[:9], 10):
        return False

    return int(cpf[10]) == _digito_verificador(cpf[:10], 11)


def formatar_cpf(valor: str) -> str:
    """
    Formata CPF como 000.000.000-00.

    Valores que não tenham 11 dígitos são retornados sem alteração.
    """
    cpf = limpar_cpf(valor)
    if len(cpf) != CPF_TAMANHO:
        return valor
    return f"{cpf[:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:]}"
