"""
Arquivo: app/routes.py
Descrição: Módulo de roteamento (views) da agenda de contatos.
"""

from flask import flash, redirect, url_for, render_template, request
from app import app  # Importa a instância 'app' criada no __init__.py
from app.contato import ContatoRepositorio, FORMATO_FORMULARIO
from app.decorators import id_obrigatorio, pagina_nao_encontrada, trata_falha_armazenamento
from utils.db import db  # Instância singleton do nosso módulo DAL

COLECAO_CONTATOS = 'contatos'


def _repositorio():
    """
    Devolve o repositório de contatos.

    Os testes injetam um repositório pronto em app.config['CONTATO_REPOSITORIO'];
    em execução normal ele é montado sobre a coleção do MongoDB.
    """
    repositorio = app.config.get('CONTATO_REPOSITORIO')
    if repositorio is None:
        repositorio = ContatoRepositorio(db.get_collection(COLECAO_CONTATOS))
    return repositorio


def _voltar(padrao=None):
    """Equivalente a redirect('back'): volta para a página anterior."""
    return redirect(request.referrer or padrao or url_for('contato_index'))


# =============================================================================
# Bloco 1: Listagem
# =============================================================================

@app.route('/')
def index():
    """
    Página inicial: lista todos os horários, do mais recente para o mais antigo.
    """
    contatos = _repositorio().busca_contatos()
    return render_template('index.html', contatos=contatos)


# =============================================================================
# Bloco 2: Rotas de CRUD (Create, Read, Update, Delete) de Contatos
# =============================================================================

@app.route('/contato/index')
def contato_index():
    """Exibe o formulário vazio de cadastro."""
    return render_template('contato.html', contato={})


@app.route('/contato/register', methods=['POST'])
@trata_falha_armazenamento
def contato_register():
    """
    Valida e grava um novo horário.
    Com erros de validação, volta ao formulário exibindo as mensagens.
    """
    resultado = _repositorio().registrar(request.form.to_dict())

    if resultado.erros:
        for erro in resultado.erros:
            flash(erro, 'errors')
        return _voltar()

    flash('Horario registrado com sucesso.', 'success')
    return redirect(url_for('contato_edit_index', id=str(resultado.contato['_id'])))


@app.route('/contato/index/<id>')
@id_obrigatorio
def contato_edit_index(id):
    """
    Exibe o formulário de edição pré-preenchido (também é a página de detalhe).
    """
    contato = _repositorio().busca_por_id(id)
    if not contato:
        return pagina_nao_encontrada()

    # O <input type="datetime-local"> espera 'YYYY-MM-DDTHH:mm'.
    if contato.get('minhadata'):
        contato['minhadata'] = contato['minhadata'].strftime(FORMATO_FORMULARIO)

    return render_template('contato.html', contato=contato)


@app.route('/contato/edit/', defaults={'id': None}, methods=['POST'])
@app.route('/contato/edit/<id>', methods=['POST'])
@trata_falha_armazenamento
@id_obrigatorio
def contato_edit(id):
    """
    Valida e substitui os campos editáveis de um horário existente.
    """
    resultado = _repositorio().editar(id, request.form.to_dict())

    if resultado.erros:
        for erro in resultado.erros:
            flash(erro, 'errors')
        return _voltar(url_for('contato_edit_index', id=id))

    # Id mal formado ou registro inexistente: nada foi alterado.
    if not resultado.contato:
        return pagina_nao_encontrada()

    flash('Horario editado com sucesso.', 'success')
    return redirect(url_for('contato_edit_index', id=str(resultado.contato['_id'])))


@app.route('/contato/delete/', defaults={'id': None}, methods=['GET', 'POST'])
@app.route('/contato/delete/<id>', methods=['GET', 'POST'])
@id_obrigatorio
def contato_delete(id):
    """
    Apaga um horário e volta para a página anterior.
    """
    contato = _repositorio().apagar(id)
    if not contato:
        return pagina_nao_encontrada()

    flash('Horario apagado com sucesso.', 'success')
    return _voltar(url_for('index'))
