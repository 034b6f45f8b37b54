"""
Ponto de entrada principal da aplicação (Application Entrypoint).

Carrega as variáveis de ambiente (desenvolvimento vs. teste) antes que
o pacote 'app' seja importado.
"""

import os
from dotenv import load_dotenv

# FLASK_ENV=testing usa '.env.test' (ex: outro banco no MongoDB).
if os.getenv('FLASK_ENV') == 'testing':
    print("🧪 MODO DE TESTE ATIVADO: Carregando configurações de '.env.test'")
    load_dotenv(dotenv_path='.env.test')
else:
    print("💻 MODO DE DESENVOLVIMENTO: Carregando configurações de '.env'")
    load_dotenv()

# Importação tardia: 'app' lê SECRET_KEY e MONGO_URI no momento da importação.
from app import app

if __name__ == '__main__':
    # Em produção, um servidor WSGI (como Gunicorn) carrega 'run:app'.
    app.run(debug=True)
