import logging
from datetime import datetime, timedelta, timezone
from functools import wraps

import jwt
from flask import current_app, g, request

from .erros import NaoAutenticado, TokenInvalido

logger = logging.getLogger(__name__)

ALGORITMO = 'HS256'


def emitir_token(config, usuario, agora=None):
    agora = agora or datetime.now(timezone.utc)
    payload = {
        'nome': usuario['nome'],
        'email': usuario['email'],
        'iat': agora,
        'exp': agora + timedelta(hours=config.token_expira_horas),
    }
    return jwt.encode(payload, config.jwt_secret, algorithm=ALGORITMO)


def verificar_token(config, token):
    try:
        return jwt.decode(token, config.jwt_secret, algorithms=[ALGORITMO])
    except jwt.InvalidTokenError as e:
        logger.info('Token rejeitado: %s', e)
        raise TokenInvalido() from e


def token_do_cabecalho(cabecalho):
    # 'Bearer <token>'; qualquer outra coisa conta como token ausente.
    partes = (cabecalho or '').split()
    if len(partes) != 2 or not partes[1]:
        return None
    return partes[1]


def token_obrigatorio(f):
    """Só deixa passar pedidos com token válido; o payload fica em g.usuario."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = token_do_cabecalho(request.headers.get('Authorization'))
        if token is None:
            raise NaoAutenticado()
        g.usuario = verificar_token(current_app.config['CONFIGURACAO'], token)
        return f(*args, **kwargs)
    return decorated_function
