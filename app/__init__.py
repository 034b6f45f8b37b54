"""
Construtor do pacote da aplicação Flask.

Este arquivo é executado automaticamente quando o pacote 'app' é importado.
Ele é responsável por:
1. Criar a instância principal da aplicação Flask.
2. Carregar configurações essenciais (como a SECRET_KEY).
3. Importar outros módulos do pacote (como as rotas).
"""

import os
from flask import Flask

# [1] Criação da Instância da Aplicação
# '__name__' indica ao Flask onde procurar a pasta 'templates'.
app = Flask(__name__)

# [2] Carregamento de Configurações
# A SECRET_KEY assina o cookie de sessão, onde ficam as mensagens flash
# entre o redirect e a próxima página.
app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY')
# MONGO_URI e MONGO_DB_NAME são lidos diretamente por utils/db.py.

# Repositório de contatos pré-montado (usado pelos testes). Se for None,
# as rotas criam um sobre a coleção do MongoDB.
app.config['CONTATO_REPOSITORIO'] = None

# [3] Importação Tardia (Circular Import Handling)
# O 'routes.py' precisa do objeto 'app' para os decorators @app.route,
# portanto 'app' deve existir antes que 'routes' seja importado.
from app import routes
