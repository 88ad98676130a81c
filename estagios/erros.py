# Cada erro sabe o status HTTP e a mensagem que vai para o cliente.


class ErroAPI(Exception):
    status = 500
    mensagem = 'Ocorreu um erro no servidor.'

    def __init__(self, mensagem=None):
        if mensagem is not None:
            self.mensagem = mensagem
        super().__init__(self.mensagem)


class ErroValidacao(ErroAPI):
    status = 400
    mensagem = 'Requisição inválida.'


class NaoAutenticado(ErroAPI):
    status = 401
    mensagem = 'Acesso negado. Token não fornecido.'


class TokenInvalido(ErroAPI):
    status = 403
    mensagem = 'Token inválido ou expirado.'


class Proibido(ErroAPI):
    status = 403
    mensagem = 'Você não tem permissão para alterar este registo.'


class NaoEncontrado(ErroAPI):
    status = 404
    mensagem = 'Registo não encontrado.'


class ErroConfiguracao(ErroAPI):
    status = 500
    mensagem = 'Erro de configuração no servidor.'


class ErroServicoExterno(ErroAPI):
    status = 500
    mensagem = 'Ocorreu um erro no servidor ao aceder à planilha.'


class ArgumentoInvalido(ErroAPI, ValueError):
    status = 400
    mensagem = 'Argumento inválido.'


class ColunaAusente(ErroConfiguracao):
    def __init__(self, coluna):
        self.coluna = coluna
        super().__init__(f"Coluna obrigatória '{coluna}' não encontrada na planilha.")
