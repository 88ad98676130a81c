import argparse
import logging
import os

from estagios.config import Configuracao
from estagios.web import configurar_logging, create_app

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description='Servidor local da API do Sistema de Estágios.')
    parser.add_argument('--host', default='127.0.0.1')
    parser.add_argument('--port', type=int, default=int(os.environ.get('PORT', 3000)))
    parser.add_argument('--debug', action='store_true')
    args = parser.parse_args()

    config = Configuracao.do_ambiente()
    configurar_logging(config)
    app = create_app(config)
    logger.info('Servidor a rodar na porta %d', args.port)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == '__main__':
    main()
