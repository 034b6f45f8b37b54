"""
Arquivo: app/contato.py
Descrição: Entidade 'Contato' (horário agendado) — limpeza, validação e
persistência no MongoDB.

A validação é feita por funções puras (limpa/valida) e a persistência por
um repositório que recebe a coleção do MongoDB por injeção, o que permite
usar um banco em memória (mongomock) nos testes.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from bson import ObjectId
from email_validator import EmailNotValidError, validate_email
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from utils.db import FalhaArmazenamento

CAMPOS = ('nome', 'sobrenome', 'email', 'telefone', 'minhadata')

# Formatos de data usados nos formulários e na listagem.
FORMATO_FORMULARIO = '%Y-%m-%dT%H:%M'
FORMATO_LISTAGEM = '%d/%m/%Y %H:%M'
FORMATOS_ACEITOS = (
    FORMATO_FORMULARIO,
    '%Y-%m-%dT%H:%M:%S',
    '%Y-%m-%d %H:%M',
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%d',
)

ERRO_EMAIL = 'E-mail inválido'
ERRO_NOME = 'Nome é um campo obrigatório.'
ERRO_CONTATO = 'Pelo menos um contato precisa ser enviado: e-mail ou telefone.'
ERRO_DATA = 'Data e hora é um campo obrigatório.'


@dataclass
class Resultado:
    """
    Resultado de registrar/editar: ou o contato gravado, ou a lista de erros.
    Os dois vazios significam "nada foi feito" (id inválido na edição).
    """
    contato: Optional[dict] = None
    erros: list = field(default_factory=list)

    @property
    def ok(self):
        return self.contato is not None and not self.erros


def parse_data(valor) -> Optional[datetime]:
    """Converte o valor enviado em datetime. Devolve None se não for possível."""
    if isinstance(valor, datetime):
        return valor
    if not isinstance(valor, str):
        return None

    valor = valor.strip()
    for formato in FORMATOS_ACEITOS:
        try:
            return datetime.strptime(valor, formato)
        except ValueError:
            continue
    return None


def email_valido(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def id_valido(id) -> bool:
    """Só strings no formato nativo do MongoDB (ObjectId) são aceitas."""
    return isinstance(id, str) and ObjectId.is_valid(id)


def limpa(dados) -> dict:
    """
    Normaliza o formulário recebido: mantém apenas os campos do contato,
    converte 'minhadata' e troca qualquer outro valor que não seja string
    por uma string vazia.
    """
    logging.debug(f"Data antes da conversão: {dados.get('minhadata')!r}")

    limpo = {}
    for campo in CAMPOS:
        valor = dados.get(campo)
        if campo == 'minhadata':
            limpo[campo] = parse_data(valor) if valor else None
        elif isinstance(valor, str):
            limpo[campo] = valor
        else:
            limpo[campo] = ''

    logging.debug(f"Data após a conversão: {limpo['minhadata']!r}")
    return limpo


def valida(dados: dict) -> list:
    """
    Aplica todas as regras (sem parar na primeira) e devolve as mensagens
    de erro na ordem em que devem ser exibidas. Lista vazia = válido.
    """
    erros = []

    if dados['email'] and not email_valido(dados['email']):
        erros.append(ERRO_EMAIL)
    if not dados['nome']:
        erros.append(ERRO_NOME)
    if not dados['email'] and not dados['telefone']:
        erros.append(ERRO_CONTATO)
    if not dados['minhadata']:
        erros.append(ERRO_DATA)

    return erros


class ContatoRepositorio:
    """
    Operações de banco da entidade Contato.

    :param colecao: coleção do MongoDB (pymongo ou mongomock).
    :param relogio: função que devolve o instante atual, usada em 'criadoEm'.
    """

    def __init__(self, colecao, relogio=datetime.now):
        self.colecao = colecao
        self.relogio = relogio

    def registrar(self, dados) -> Resultado:
        contato = limpa(dados)
        erros = valida(contato)
        if erros:
            return Resultado(erros=erros)

        contato['criadoEm'] = self.relogio()
        try:
            inserido = self.colecao.insert_one(contato)
        except PyMongoError as e:
            raise FalhaArmazenamento(f"Erro ao registrar contato: {e}") from e

        # insert_one já preenche contato['_id'], mas garantimos o valor devolvido pelo banco.
        contato['_id'] = inserido.inserted_id
        logging.debug(f"Contato {contato['_id']} registrado.")
        return Resultado(contato=contato)

    def editar(self, id, dados) -> Resultado:
        if not id_valido(id):
            return Resultado()

        contato = limpa(dados)
        erros = valida(contato)
        if erros:
            return Resultado(erros=erros)

        # $set nos cinco campos editáveis: substitui todos eles, mas preserva 'criadoEm'.
        try:
            atualizado = self.colecao.find_one_and_update(
                {'_id': ObjectId(id)},
                {'$set': contato},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise FalhaArmazenamento(f"Erro ao editar contato {id}: {e}") from e

        return Resultado(contato=atualizado)

    def busca_por_id(self, id) -> Optional[dict]:
        if not id_valido(id):
            return None
        return self.colecao.find_one({'_id': ObjectId(id)})

    def busca_contatos(self) -> list:
        """
        Todos os contatos, do mais recente para o mais antigo.
        'minhadata' já vem formatada para exibição (só em memória).
        """
        contatos = list(self.colecao.find().sort('criadoEm', DESCENDING))

        for contato in contatos:
            if isinstance(contato.get('minhadata'), datetime):
                contato['minhadata'] = contato['minhadata'].strftime(FORMATO_LISTAGEM)

        return contatos

    def apagar(self, id) -> Optional[dict]:
        if not id_valido(id):
            return None
        return self.colecao.find_one_and_delete({'_id': ObjectId(id)})
