"""
Módulo de Abstração de Banco de Dados (DAL).

Este módulo centraliza a conexão com o MongoDB. Ele mantém um único
MongoClient (padrão singleton), que por sua vez já gerencia internamente
o seu próprio pool de conexões.
"""

import os
import logging

from pymongo import MongoClient
from pymongo.errors import PyMongoError

# Configura o logging para este módulo.
# O formato inclui o 'threadName' para depurar requisições concorrentes.
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(threadName)s - %(message)s')

MONGO_URI_PADRAO = 'mongodb://localhost:27017'
MONGO_DB_PADRAO = 'agenda'


class FalhaArmazenamento(Exception):
    """
    Erro inesperado vindo do banco de dados (indisponível, timeout, etc).
    É o único tipo de falha que as rotas capturam e convertem em página de erro.
    """


class Database:
    """
    Classe singleton que gerencia o cliente do MongoDB.
    """
    _client = None  # Variável de classe para armazenar o cliente (Singleton)

    def __init__(self):
        """
        O cliente só é criado na primeira vez que a classe é
        instanciada, graças à verificação `_client is None`.
        """
        if Database._client is None:
            self._initialize_client()

    def _initialize_client(self):
        """
        Cria o MongoClient a partir da variável de ambiente 'MONGO_URI'.
        A conexão real só acontece na primeira operação.
        """
        try:
            logging.info("🔧 Inicializando cliente do MongoDB...")
            connection_url = os.environ.get('MONGO_URI', MONGO_URI_PADRAO)
            Database._client = MongoClient(connection_url, serverSelectionTimeoutMS=5000)
            logging.info("✅ Cliente do MongoDB inicializado com sucesso.")
        except (PyMongoError, ValueError) as e:
            # URI mal formada ou opções inválidas.
            logging.critical(f"❌ Erro CRÍTICO ao inicializar o cliente do MongoDB: {e}")
            Database._client = None

    def get_collection(self, nome):
        """
        Devolve a coleção 'nome' do banco configurado em 'MONGO_DB_NAME'.
        Se o cliente não estiver inicializado, tenta recriá-lo uma vez.
        """
        if self._client is None:
            logging.error("Tentativa de obter coleção de um cliente não inicializado.")
            self._initialize_client()
            if self._client is None:
                raise ConnectionError("Cliente do MongoDB não está disponível e não pôde ser recriado.")

        database = os.environ.get('MONGO_DB_NAME', MONGO_DB_PADRAO)
        return self._client[database][nome]


# Cria a instância singleton que será importada por outros módulos (ex: routes.py).
db = Database()
