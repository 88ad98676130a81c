from estagios.config import Configuracao
from estagios.web import configurar_logging, create_app

# --- CONFIGURAÇÃO ---
# Na Vercel, crie as variáveis de ambiente SPREADSHEET_ID, JWT_SECRET, ALLOWED_ORIGINS
# e GOOGLE_CREDENTIALS (o CONTEÚDO do JSON da Service Account).
config = Configuracao.do_ambiente()
configurar_logging(config)

app = create_app(config)

# Necessário para Vercel
if __name__ == '__main__':
    app.run(debug=True)
