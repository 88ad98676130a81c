import logging

from . import codec, filtros
from .atualizacao import (
    COL_MEDIA,
    COL_NOTA_DEFESA,
    COL_NOTA_RELATORIO,
    COL_NOTA_SUPERVISOR,
    COL_OBSERVACOES,
    ENTRADA_LITERAL,
    montar_lote_dinamico,
    montar_lote_notas,
)
from .auth import emitir_token
from .erros import ErroValidacao, NaoAutenticado
from .localizador import localizar_linha, resolver_colunas, verificar_orientador
from .notas import calcular_media

logger = logging.getLogger(__name__)

COLUNAS_NOTAS = (
    filtros.COL_ID,
    filtros.COL_ORIENTADOR,
    COL_NOTA_SUPERVISOR,
    COL_NOTA_RELATORIO,
    COL_NOTA_DEFESA,
    COL_MEDIA,
    COL_OBSERVACOES,
)

# Aba de utilizadores (orientadores)
COL_USUARIO_EMAIL = 'email'
COL_USUARIO_SENHA = 'senha'
COL_USUARIO_NOME = 'nome'


def _texto(dados, chave):
    valor = (dados or {}).get(chave)
    return '' if valor is None else str(valor)


def _identificador(dados):
    identificador = _texto(dados, 'idRegistro').strip()
    if not identificador:
        raise ErroValidacao('O campo idRegistro é obrigatório.')
    return identificador


class ServicoEstagios:
    """Fluxos de cada endpoint: lê a grade inteira, decide, e grava no máximo um lote."""

    def __init__(self, config, planilha):
        self.config = config
        self.planilha = planilha

    def _grade_alunos(self):
        return self.planilha.ler_grade(self.config.aba_alunos)

    def autenticar(self, dados):
        email = _texto(dados, 'email').strip()
        senha = _texto(dados, 'senha')
        if not email or not senha:
            raise ErroValidacao('Email e senha são obrigatórios.')

        cabecalho, linhas = codec.separar_cabecalho(self.planilha.ler_grade(self.config.aba_usuarios))
        resolver_colunas(cabecalho, (COL_USUARIO_EMAIL, COL_USUARIO_SENHA, COL_USUARIO_NOME))
        for linha in linhas:
            usuario = codec.linha_para_registro(cabecalho, linha)
            email_planilha = usuario.get(COL_USUARIO_EMAIL, '').strip()
            if email_planilha.casefold() == email.casefold() and usuario.get(COL_USUARIO_SENHA) == senha:
                perfil = {'nome': usuario.get(COL_USUARIO_NOME, '').strip(), 'email': email_planilha}
                logger.info("Login de '%s'.", perfil['nome'])
                return {'token': emitir_token(self.config, perfil), 'user': perfil}

        logger.info('Tentativa de login falhou para %s.', email)
        raise NaoAutenticado('Email ou senha inválidos.')

    def opcoes_filtro(self):
        return filtros.opcoes_filtro(codec.decodificar_registros(self._grade_alunos()))

    def buscar_alunos(self, criterios, usuario):
        logger.info("Utilizador '%s' está a procurar dados de alunos...", usuario.get('nome'))
        registros = codec.decodificar_registros(self._grade_alunos())
        filtrados = filtros.aplicar_filtros(registros, criterios)
        stats = filtros.calcular_estatisticas(filtrados)
        logger.info('Encontrados %d registos.', stats['total'])
        return filtrados, stats

    def atualizar_notas(self, dados, usuario):
        identificador = _identificador(dados)

        # 1. Busca dados e confere as colunas antes de procurar a linha
        cabecalho, linhas = codec.separar_cabecalho(self._grade_alunos())
        colunas = resolver_colunas(cabecalho, COLUNAS_NOTAS)

        # 2. Localiza o registo e confere o orientador
        indice = localizar_linha(linhas, colunas[filtros.COL_ID], identificador)
        verificar_orientador(linhas[indice], colunas[filtros.COL_ORIENTADOR], usuario.get('nome'))

        # 3. Média e lote único (USER_ENTERED, para '8,5' virar número na planilha)
        notas = (
            _texto(dados, 'notaSupervisor'),
            _texto(dados, 'notaRelatorio'),
            _texto(dados, 'notaDefesa'),
        )
        media = calcular_media(notas)
        numero = codec.numero_linha(indice)
        escritas = montar_lote_notas(
            self.config.aba_alunos, colunas, numero, notas, media, _texto(dados, 'observacoes'))
        self.planilha.escrever_lote(escritas)
        logger.info("Notas do registo %s (linha %d) atualizadas por '%s'; média %r.",
                    identificador, numero, usuario.get('nome'), media)
        return {'idRegistro': identificador, 'media': media}

    def completar_cadastro(self, dados):
        identificador = _identificador(dados)
        cabecalho, linhas = codec.separar_cabecalho(self._grade_alunos())
        colunas = resolver_colunas(cabecalho, (filtros.COL_ID,))

        indice = localizar_linha(linhas, colunas[filtros.COL_ID], identificador)
        numero = codec.numero_linha(indice)
        escritas = montar_lote_dinamico(self.config.aba_alunos, cabecalho, numero, dados)
        # Endpoint público: o texto da empresa vai literal, nunca como fórmula.
        self.planilha.escrever_lote(escritas, entrada=ENTRADA_LITERAL)
        logger.info('Registo %s (linha %d) completado pela empresa: %d célula(s).',
                    identificador, numero, len(escritas))
        return {'idRegistro': identificador}
