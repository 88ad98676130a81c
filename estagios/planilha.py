import json
import logging
from typing import Protocol

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .atualizacao import ENTRADA_INTERPRETADA, corpo_batch_update
from .codec import referencia_aba
from .erros import ErroConfiguracao, ErroServicoExterno

logger = logging.getLogger(__name__)

SCOPES = ['https://www.googleapis.com/auth/spreadsheets']


class Planilha(Protocol):
    def ler_grade(self, aba): ...

    def escrever_lote(self, escritas, entrada=ENTRADA_INTERPRETADA): ...


# --- CONFIGURAÇÃO DE CREDENCIAIS ---
# GOOGLE_CREDENTIALS contém o CONTEÚDO do arquivo JSON da Service Account.
def get_service(credenciais_json):
    if not credenciais_json:
        raise ErroConfiguracao('Credenciais do Google não configuradas (Variável GOOGLE_CREDENTIALS).')
    try:
        info = json.loads(credenciais_json)
    except ValueError:
        raise ErroConfiguracao('GOOGLE_CREDENTIALS não contém um JSON válido.')
    creds = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
    return build('sheets', 'v4', credentials=creds, cache_discovery=False)


class PlanilhaGoogle:

    def __init__(self, spreadsheet_id, credenciais_json=None, fabrica=get_service):
        self.spreadsheet_id = spreadsheet_id
        self._credenciais_json = credenciais_json
        self._fabrica = fabrica

    @classmethod
    def da_configuracao(cls, config):
        return cls(config.spreadsheet_id, config.credenciais_google)

    def novo_service(self):
        # Um cliente por chamada: o httplib2 por baixo não pode ser partilhado entre threads.
        return self._fabrica(self._credenciais_json)

    def ler_grade(self, aba):
        sheets_service = self.novo_service()
        try:
            result = sheets_service.spreadsheets().values().get(
                spreadsheetId=self.spreadsheet_id, range=referencia_aba(aba)).execute()
        except (HttpError, GoogleAuthError, OSError) as e:
            logger.error('Falha ao ler a aba %r da planilha %s: %s', aba, self.spreadsheet_id, e)
            raise ErroServicoExterno() from e
        return result.get('values', [])

    def escrever_lote(self, escritas, entrada=ENTRADA_INTERPRETADA):
        if not escritas:
            return
        sheets_service = self.novo_service()
        try:
            sheets_service.spreadsheets().values().batchUpdate(
                spreadsheetId=self.spreadsheet_id,
                body=corpo_batch_update(escritas, entrada)).execute()
        except (HttpError, GoogleAuthError, OSError) as e:
            logger.error('Falha ao gravar %d célula(s) na planilha %s: %s',
                         len(escritas), self.spreadsheet_id, e)
            raise ErroServicoExterno() from e
