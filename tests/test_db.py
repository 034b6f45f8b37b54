"""
Testes do módulo de banco (singleton do MongoClient).
"""
import pytest
from pymongo.errors import ConfigurationError

from utils import db as db_module
from utils.db import Database


def test_get_collection_usa_banco_configurado(monkeypatch):
    monkeypatch.setenv('MONGO_DB_NAME', 'agenda_teste')

    colecao = Database().get_collection('contatos')

    assert colecao.name == 'contatos'
    assert colecao.database.name == 'agenda_teste'


def test_singleton_compartilha_o_cliente():
    assert Database()._client is Database()._client


def test_get_collection_sem_cliente_levanta_connection_error(monkeypatch):
    def falha(*args, **kwargs):
        raise ConfigurationError('URI inválida')

    monkeypatch.setattr(Database, '_client', None)
    monkeypatch.setattr(db_module, 'MongoClient', falha)

    with pytest.raises(ConnectionError):
        Database().get_collection('contatos')
