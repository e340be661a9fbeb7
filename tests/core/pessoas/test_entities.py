"""
Testes das entidades do domínio de Pessoas.

Regras verificadas sem banco de dados.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from src.core.pessoas.entities import ContatoEntity, PessoaEntity, TipoContato
from src.core.pessoas.exceptions import (
    ContatoNaoEncontradoError,
    CPFInvalidoError,
    DataNascimentoInvalidaError,
)
from src.core.shared.exceptions import CampoObrigatorioError, ValidationError


def nova_pessoa(**kwargs):
    dados = {
        "nome": "Maria",
        "cpf": "52998224725",
        "data_nascimento": date(1990, 1, 1),
    }
    dados.update(kwargs)
    return PessoaEntity.criar(**dados)


class TestPessoaEntityCriar:

    def test_criar_pessoa_valida(self):
        """Deve criar pessoa com dados válidos"""
        pessoa = nova_pessoa(criado_por_id="user-1")

        assert pessoa.id is not None
        assert pessoa.nome == "Maria"
        assert pessoa.cpf == "52998224725"
        assert pessoa.criado_por_id == "user-1"
        assert pessoa.atualizado_por_id == "user-1"
        assert pessoa.criado_em == pessoa.atualizado_em
        assert pessoa.contatos == []

    def test_cpf_formatado_e_armazenado_limpo(self):
        pessoa = nova_pessoa(cpf="529.982.247-25")

        assert pessoa.cpf == "52998224725"

    def test_nome_com_espacos_e_normalizado(self):
        pessoa = nova_pessoa(nome="  Maria Silva  ")

        assert pessoa.nome == "Maria Silva"

    @pytest.mark.parametrize("nome", ["", "   "])
    def test_nome_em_branco_falha(self, nome):
        """Deve lançar erro se nome vazio"""
        with pytest.raises(CampoObrigatorioError) as exc_info:
            nova_pessoa(nome=nome)

        assert exc_info.value.field == "nome"
        assert exc_info.value.code == "MISSING_REQUIRED_FIELD"

    def test_nome_no_limite_de_tamanho(self):
        pessoa = nova_pessoa(nome="A" * 100)

        assert len(pessoa.nome) == 100

    def test_nome_acima_do_limite_falha(self):
        with pytest.raises(ValidationError) as exc_info:
            nova_pessoa(nome="A" * 101)

        assert exc_info.value.field == "nome"

    @pytest.mark.parametrize("cpf", ["", "   ", None])
    def test_cpf_em_branco_falha(self, cpf):
        with pytest.raises(CampoObrigatorioError) as exc_info:
            nova_pessoa(cpf=cpf)

        assert exc_info.value.field == "cpf"

    def test_cpf_invalido_falha(self):
        with pytest.raises(CPFInvalidoError) as exc_info:
            nova_pessoa(cpf="12345678900")

        assert exc_info.value.code == "PERSON_INVALID_CPF"
        assert "12345678900" in exc_info.value.message

    def test_nome_validado_antes_do_cpf(self):
        """Deve reportar o nome primeiro quando nome e CPF são inválidos"""
        with pytest.raises(CampoObrigatorioError) as exc_info:
            nova_pessoa(nome="", cpf="123")

        assert exc_info.value.field == "nome"

    def test_data_nascimento_amanha_falha(self):
        amanha = date.today() + timedelta(days=1)

        with pytest.raises(DataNascimentoInvalidaError) as exc_info:
            nova_pessoa(data_nascimento=amanha)

        assert exc_info.value.code == "PERSON_INVALID_BIRTH_DATE"

    def test_data_nascimento_hoje_e_aceita(self):
        pessoa = nova_pessoa(data_nascimento=date.today())

        assert pessoa.data_nascimento == date.today()


class TestPessoaEntityAtualizar:

    def test_atualizar_info_mantem_cpf_e_avanca_timestamp(self):
        """Deve alterar nome sem tocar no CPF"""
        pessoa = nova_pessoa()
        pessoa.atualizado_em = datetime(2020, 1, 1, tzinfo=timezone.utc)

        pessoa.atualizar_info(
            nome="Maria S.",
            data_nascimento=date(1990, 1, 1),
            atualizado_por_id="user-2",
        )

        assert pessoa.nome == "Maria S."
        assert pessoa.cpf == "52998224725"
        assert pessoa.atualizado_por_id == "user-2"
        assert pessoa.atualizado_em > datetime(2020, 1, 1, tzinfo=timezone.utc)

    def test_atualizar_com_data_futura_nao_altera_nada(self):
        pessoa = nova_pessoa()
        antes = pessoa.atualizado_em

        with pytest.raises(DataNascimentoInvalidaError):
            pessoa.atualizar_info(
                nome="Outro Nome",
                data_nascimento=date.today() + timedelta(days=10),
            )

        assert pessoa.nome == "Maria"
        assert pessoa.atualizado_em == antes

    def test_atualizar_com_nome_vazio_falha(self):
        pessoa = nova_pessoa()

        with pytest.raises(CampoObrigatorioError):
            pessoa.atualizar_info(nome=" ", data_nascimento=date(1990, 1, 1))

        assert pessoa.nome == "Maria"


class TestContatos:

    def test_adicionar_contato_define_dono(self):
        pessoa = nova_pessoa()
        contato = ContatoEntity.criar("Email", "maria@example.com", principal=True)

        pessoa.adicionar_contato(contato)

        assert contato.pessoa_id == pessoa.id
        assert pessoa.contato_principal("Email") == contato

    def test_segundo_principal_rebaixa_o_primeiro(self):
        """Deve manter apenas um contato principal por tipo"""
        pessoa = nova_pessoa()
        a = ContatoEntity.criar("Email", "a@example.com", principal=True)
        b = ContatoEntity.criar("Email", "b@example.com", principal=True)

        pessoa.adicionar_contato(a)
        pessoa.adicionar_contato(b)

        assert a.principal is False
        assert b.principal is True
        assert len([c for c in pessoa.contatos_do_tipo("Email") if c.principal]) == 1

    def test_principal_de_outro_tipo_nao_e_afetado(self):
        pessoa = nova_pessoa()
        email = ContatoEntity.criar("Email", "a@example.com", principal=True)
        telefone = ContatoEntity.criar("Telefone", "1133334444", principal=True)

        pessoa.adicionar_contato(email)
        pessoa.adicionar_contato(telefone)

        assert email.principal is True
        assert telefone.principal is True

    def test_adicionar_contato_none_falha(self):
        pessoa = nova_pessoa()

        with pytest.raises(CampoObrigatorioError):
            pessoa.adicionar_contato(None)

    @pytest.mark.parametrize("tipo,valor", [("", "x"), ("Email", "  ")])
    def test_contato_sem_tipo_ou_valor_falha(self, tipo, valor):
        with pytest.raises(CampoObrigatorioError):
            ContatoEntity.criar(tipo, valor)

    def test_remover_contato_inexistente_e_ignorado(self):
        pessoa = nova_pessoa()
        pessoa.adicionar_contato(ContatoEntity.criar("Email", "a@example.com"))

        pessoa.remover_contato("nao-existe")

        assert len(pessoa.contatos) == 1

    def test_remover_contato(self):
        pessoa = nova_pessoa()
        contato = ContatoEntity.criar("Email", "a@example.com")
        pessoa.adicionar_contato(contato)

        pessoa.remover_contato(contato.id)

        assert pessoa.contatos == []

    def test_atualizar_contato_para_principal_rebaixa_outros(self):
        pessoa = nova_pessoa()
        a = ContatoEntity.criar("Celular", "11911111111", principal=True)
        b = ContatoEntity.criar("Celular", "11922222222")
        pessoa.adicionar_contato(a)
        pessoa.adicionar_contato(b)

        pessoa.atualizar_contato(b.id, "Celular", "11933333333", principal=True)

        assert a.principal is False
        assert b.principal is True
        assert b.valor == "11933333333"

    def test_atualizar_contato_inexistente_falha(self):
        pessoa = nova_pessoa()

        with pytest.raises(ContatoNaoEncontradoError):
            pessoa.atualizar_contato("nao-existe", "Email", "x@example.com", False)

    def test_substituir_contatos_regras_de_principal(self):
        """Celular só é principal quando não há telefone"""
        pessoa = nova_pessoa()

        pessoa.substituir_contatos(
            email="maria@example.com",
            telefone="1133334444",
            celular="11999998888",
        )

        tipos = {c.tipo: c for c in pessoa.contatos}
        assert set(tipos) == {"Email", "Telefone", "Celular"}
        assert tipos["Email"].principal is True
        assert tipos["Telefone"].principal is True
        assert tipos["Celular"].principal is False

    def test_substituir_contatos_celular_sem_telefone_e_principal(self):
        pessoa = nova_pessoa()

        pessoa.substituir_contatos(celular="11999998888")

        assert len(pessoa.contatos) == 1
        assert pessoa.contato_principal(TipoContato.CELULAR.value) is not None

    def test_substituir_contatos_descarta_anteriores(self):
        pessoa = nova_pessoa()
        pessoa.substituir_contatos(email="a@example.com", telefone="1133334444")

        pessoa.substituir_contatos(email="b@example.com")

        assert [c.valor for c in pessoa.contatos] == ["b@example.com"]
