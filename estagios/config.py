import os
import re
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .erros import ErroConfiguracao

ABA_ALUNOS_PADRAO = 'Página1'
ABA_USUARIOS_PADRAO = 'Usuarios'


@dataclass(frozen=True)
class Configuracao:
    spreadsheet_id: str
    jwt_secret: str
    origens_permitidas: tuple = field(default_factory=tuple)
    aba_alunos: str = ABA_ALUNOS_PADRAO
    aba_usuarios: str = ABA_USUARIOS_PADRAO
    credenciais_google: str = ''
    token_expira_horas: int = 8
    log_level: str = 'INFO'

    @classmethod
    def do_ambiente(cls, ambiente=None):
        # Na Vercel as variáveis vêm do painel; localmente, do arquivo .env.
        if ambiente is None:
            load_dotenv()
            ambiente = os.environ

        def obrigatoria(nome):
            valor = (ambiente.get(nome) or '').strip()
            if not valor:
                raise ErroConfiguracao(f'Variável de ambiente {nome} não configurada.')
            return valor

        origens = tuple(
            o.strip() for o in (ambiente.get('ALLOWED_ORIGINS') or '').split(',') if o.strip()
        )
        try:
            horas = int(ambiente.get('TOKEN_EXPIRA_HORAS') or 8)
        except ValueError:
            raise ErroConfiguracao('TOKEN_EXPIRA_HORAS deve ser um número inteiro.')

        return cls(
            spreadsheet_id=obrigatoria('SPREADSHEET_ID'),
            jwt_secret=obrigatoria('JWT_SECRET'),
            origens_permitidas=origens,
            aba_alunos=ambiente.get('ABA_ALUNOS') or ABA_ALUNOS_PADRAO,
            aba_usuarios=ambiente.get('ABA_USUARIOS') or ABA_USUARIOS_PADRAO,
            credenciais_google=ambiente.get('GOOGLE_CREDENTIALS') or '',
            token_expira_horas=horas,
            log_level=(ambiente.get('LOG_LEVEL') or 'INFO').upper(),
        )

    def padroes_origem(self):
        # Origens autorizadas por prefixo (ex.: qualquer página de um github.io).
        return [re.compile('^' + re.escape(o)) for o in self.origens_permitidas]
