"""
Módulo de Decorators das rotas de Contato.

Este arquivo centraliza as verificações repetidas em várias rotas,
seguindo o princípio DRY (Don't Repeat Yourself):
- a rota precisa ter recebido um id;
- falhas do banco de dados viram a página genérica de "não encontrado".
"""

import logging
from functools import wraps

from flask import render_template

from utils.db import FalhaArmazenamento


def pagina_nao_encontrada():
    """Resposta padrão para id ausente, id inválido ou registro inexistente."""
    return render_template('404.html'), 404


def id_obrigatorio(f):
    """
    Decorator de Identificador.

    Rotas de edição/exclusão também são registradas sem o id na URL
    (ex: '/contato/delete/'). Nesse caso, responde com a página 404.
    """

    @wraps(f)  # Preserva os metadados da função original (ex: __name__)
    def decorated_function(*args, **kwargs):
        if not kwargs.get('id'):
            return pagina_nao_encontrada()

        return f(*args, **kwargs)

    return decorated_function


def trata_falha_armazenamento(f):
    """
    Decorator de Falha de Banco.

    Captura FalhaArmazenamento (e ConnectionError, quando o cliente do
    MongoDB nem pôde ser criado), registra no log e mostra a página 404.
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (FalhaArmazenamento, ConnectionError) as e:
            logging.error(f"❌ Erro de banco em '{f.__name__}': {e}")
            return pagina_nao_encontrada()

    return decorated_function
