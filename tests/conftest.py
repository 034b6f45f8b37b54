"""
Fixtures compartilhadas pelos testes.

O MongoDB é substituído por uma coleção em memória (mongomock) e o
relógio do repositório avança um minuto a cada contato criado.
"""
import itertools
from datetime import datetime, timedelta

import mongomock
import pytest

from app import app as flask_app
from app.contato import ContatoRepositorio


@pytest.fixture
def colecao():
    return mongomock.MongoClient().agenda.contatos


@pytest.fixture
def relogio():
    """Instantes crescentes e previsíveis para o campo 'criadoEm'."""
    inicio = datetime(2024, 1, 1, 8, 0)
    instantes = (inicio + timedelta(minutes=i) for i in itertools.count())
    return lambda: next(instantes)


@pytest.fixture
def repositorio(colecao, relogio):
    return ContatoRepositorio(colecao, relogio=relogio)


@pytest.fixture
def client(repositorio):
    """Cliente de teste do Flask usando o repositório em memória."""
    flask_app.config.update(TESTING=True, SECRET_KEY='chave-de-teste', CONTATO_REPOSITORIO=repositorio)
    with flask_app.test_client() as client:
        yield client
    flask_app.config['CONTATO_REPOSITORIO'] = None


@pytest.fixture
def formulario():
    return {'nome': 'Ana', 'email': 'ana@x.com', 'minhadata': '2024-05-01T10:00'}
