import pytest

from estagios.auth import emitir_token
from estagios.config import Configuracao
from estagios.web import create_app

CABECALHO_ALUNOS = [
    "idRegistro", "nome-completo", "matricula", "cpf", "curso", "turma-fase",
    "nome-orientador", "statusPreenchimento", "Nota Supervisor", "Nota Relatório",
    "Nota da Defesa", "Média", "Observações", "empresa", "supervisor",
]


def grade_alunos():
    return [
        list(CABECALHO_ALUNOS),
        ["R1", "Ana Souza", "2023001", "123.456.789-00", "ADS", "ADS-5", "Alice Prado", "CONCLUÍDO"],
        ["R2", "Bruno Lima", "2022007", "987.654.321-00", "ADS", "ADS-3", "Bob Reis", "ALUNO"],
        ["R3", "Carla Dias", "2023015", "111.222.333-44", "Redes", "RED-5", "Alice Prado", " concluído "],
        ["R4", "Diego Alves", "2021003", "", "Redes", "RED-3", "Bob Reis", "EMPRESA"],
        ["R5", "Elisa Souza", "2024002"],
    ]


def grade_usuarios():
    return [
        ["email", "senha", "nome"],
        ["alice@escola.br", "segredo", "Alice Prado"],
        ["bob@escola.br", "123456", "Bob Reis"],
    ]


class PlanilhaMemoria:
    """Planilha falsa em memória: guarda as abas e cada lote recebido."""

    def __init__(self, abas=None, erro=None):
        self.abas = abas or {}
        self.lotes = []
        self.leituras = []
        self.entradas = []
        self.erro = erro

    def ler_grade(self, aba):
        self.leituras.append(aba)
        if self.erro:
            raise self.erro
        return [list(linha) for linha in self.abas.get(aba, [])]

    def escrever_lote(self, escritas, entrada="USER_ENTERED"):
        self.lotes.append(list(escritas))
        self.entradas.append(entrada)


@pytest.fixture()
def config():
    return Configuracao(
        spreadsheet_id="planilha-teste",
        jwt_secret="segredo-de-teste-com-mais-de-32-bytes!",
        origens_permitidas=("https://luisbastosgit.github.io",),
    )


@pytest.fixture()
def planilha():
    return PlanilhaMemoria({"Página1": grade_alunos(), "Usuarios": grade_usuarios()})


@pytest.fixture()
def app(config, planilha):
    app = create_app(config, planilha)
    app.testing = True
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def cabecalho_token(config):
    def montar(nome="Alice Prado", email="alice@escola.br"):
        token = emitir_token(config, {"nome": nome, "email": email})
        return {"Authorization": f"Bearer {token}"}
    return montar
