import logging

from flask import Flask, current_app, g, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .auth import token_obrigatorio
from .config import Configuracao
from .erros import ErroAPI, ErroValidacao
from .planilha import PlanilhaGoogle
from .servicos import ServicoEstagios

logger = logging.getLogger(__name__)


def resposta(status=200, **campos):
    # Envelope comum: {success, data?, stats?, message?}
    corpo = {'success': 200 <= status < 400}
    corpo.update({k: v for k, v in campos.items() if v is not None})
    return jsonify(corpo), status


def _corpo_json():
    dados = request.get_json(silent=True)
    if dados is None:
        return {}
    if not isinstance(dados, dict):
        raise ErroValidacao('O corpo da requisição deve ser um objeto JSON.')
    return dados


def _servico():
    return current_app.extensions['estagios']


def configurar_logging(config):
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def create_app(config=None, planilha=None):
    """Monta a aplicação. Sem argumentos, lê o ambiente e usa a planilha Google."""
    config = config or Configuracao.do_ambiente()
    planilha = planilha or PlanilhaGoogle.da_configuracao(config)

    app = Flask(__name__)
    app.config['CONFIGURACAO'] = config
    app.json.ensure_ascii = False
    app.extensions['estagios'] = ServicoEstagios(config, planilha)

    # Lista de sites (origens) que podem aceder a esta API, por prefixo.
    CORS(app, origins=config.padroes_origem())

    # --- ERROS ---
    @app.errorhandler(ErroAPI)
    def erro_api(e):
        if e.status >= 500:
            logger.error('%s em %s %s: %s', type(e).__name__, request.method, request.path, e.mensagem)
        return resposta(e.status, message=e.mensagem)

    @app.errorhandler(HTTPException)
    def erro_http(e):
        return resposta(e.code, message=e.description)

    @app.errorhandler(Exception)
    def erro_inesperado(e):
        logger.exception('Erro inesperado em %s %s', request.method, request.path)
        return resposta(500, message='Ocorreu um erro no servidor.')

    # --- ENDPOINTS DA API ---
    @app.get('/')
    def inicio():
        return jsonify({'message': 'API do Sistema de Estágios está online!'})

    @app.post('/login')
    def login():
        resultado = _servico().autenticar(_corpo_json())
        return resposta(token=resultado['token'], user=resultado['user'])

    @app.get('/filter-options')
    def filter_options():
        return resposta(data=_servico().opcoes_filtro())

    @app.post('/student-data')
    @token_obrigatorio
    def student_data():
        dados, stats = _servico().buscar_alunos(_corpo_json(), g.usuario)
        return resposta(data=dados, stats=stats)

    @app.post('/update-grades')
    @token_obrigatorio
    def update_grades():
        resultado = _servico().atualizar_notas(_corpo_json(), g.usuario)
        return resposta(data=resultado, message='Notas atualizadas com sucesso!')

    @app.post('/complete-registration')
    def complete_registration():
        resultado = _servico().completar_cadastro(_corpo_json())
        return resposta(data=resultado, message='Dados da empresa registados com sucesso!')

    return app
