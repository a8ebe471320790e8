# painel/web/web_setup.py
import base64
import datetime
from typing import Iterable, Optional

from flask import Flask, current_app, flash, jsonify, redirect, render_template_string, request, send_file, url_for

from painel.core import charts
from painel.core.notifications import Toast, error_toast
from painel.screens import configuracoes, relatorios, usuarios
from painel.screens import ConfiguracoesState, UsuariosState
from painel.utils.text_utils import format_brl
from painel.web import pages


def _client():
    return current_app.config["SUPABASE_CLIENT"]


def _notify(toasts: Iterable[Toast]) -> None:
    """Entrega as notificações dos handlers como mensagens flash (categoria = variante)."""
    for toast in toasts:
        flash(toast.model_dump(), toast.variant)


def _page(title: str, body_template: str, **context) -> str:
    body = render_template_string(body_template, **context)
    return render_template_string(pages.LAYOUT, title=title, body=body)


def _load_relatorios(now: Optional[datetime.datetime] = None):
    now = now or datetime.datetime.now()
    state = relatorios.initial_state(now)
    return relatorios.handle_load(_client(), state, now=now,
                                  ignored_statuses=current_app.config["STATUS_IGNORADOS"])


def _chart_data_uri(kpis) -> str:
    """Gráfico de receitas embutido na página, gerado a partir da mesma carga dos indicadores."""
    buf = charts.generate_revenue_chart(kpis.monthly_revenue)
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")


def _modelo_form(state: ConfiguracoesState) -> str:
    return _page("Modelo", pages.MODELO_FORM, state=state, variables=configuracoes.VARIABLES,
                 preview=configuracoes.render_preview(state.content))


def _load_template(template_id: str):
    """Carrega a tela de configurações e procura o modelo pelo ID."""
    state, toasts = configuracoes.handle_load(_client(), ConfiguracoesState())
    template = state.find_template(template_id)
    if template is None and not toasts:
        toasts = [error_toast("Modelo não encontrado.")]
    return state, template, toasts


def setup_web_app(config: dict) -> Flask:
    """
    Configura a aplicação Flask com as três telas do painel.
    O cliente Supabase fica em app.config para que as rotas possam acessá-lo.
    """
    app = Flask(__name__)
    app.secret_key = config["FLASK_SECRET_KEY"]
    app.config["SUPABASE_CLIENT"] = config["SUPABASE_CLIENT"]
    app.config["STATUS_IGNORADOS"] = list(config.get("STATUS_IGNORADOS") or [])
    app.config["USER_CREATE_DELAY"] = config.get("USER_CREATE_DELAY", usuarios.SIMULATED_CREATE_DELAY)
    app.jinja_env.globals["brl"] = format_brl

    @app.route("/")
    def home():
        return redirect(url_for("relatorios_page"))

    # --- Relatórios ---
    @app.route("/relatorios")
    def relatorios_page():
        state, toasts = _load_relatorios()
        _notify(toasts)
        return _page("Relatórios", pages.RELATORIOS, kpis=state.kpis, chart_uri=_chart_data_uri(state.kpis))

    @app.route("/relatorios/receitas.png")
    def relatorios_chart():
        state, _ = _load_relatorios()
        buf = charts.generate_revenue_chart(state.kpis.monthly_revenue)
        return send_file(buf, mimetype="image/png", download_name="receitas.png")

    @app.route("/relatorios/dados.json")
    def relatorios_dados():
        state, toasts = _load_relatorios()
        payload = state.kpis.model_dump()
        payload["errors"] = [t.description for t in toasts]
        return jsonify(payload)

    # --- Configurações ---
    @app.route("/configuracoes")
    def configuracoes_page():
        state, toasts = configuracoes.handle_load(_client(), ConfiguracoesState())
        _notify(toasts)
        return _page("Configurações", pages.CONFIGURACOES, templates=state.templates)

    @app.route("/configuracoes/modelos/novo", methods=["GET", "POST"])
    def novo_modelo():
        state = configuracoes.reduce(ConfiguracoesState(), configuracoes.OPEN_CREATE_MODAL)
        if request.method == "GET":
            return _modelo_form(state)

        state = configuracoes.reduce(state, configuracoes.SET_TITLE, request.form.get("title", ""))
        state = configuracoes.reduce(state, configuracoes.SET_CONTENT, request.form.get("content", ""))
        if request.form.get("variavel"):
            return _modelo_form(configuracoes.reduce(state, configuracoes.INSERT_VARIABLE, request.form["variavel"]))

        state, toasts = configuracoes.handle_save_template(_client(), state)
        _notify(toasts)
        if state.is_template_modal_open:
            return _modelo_form(state)
        return redirect(url_for("configuracoes_page"))

    @app.route("/configuracoes/modelos/<template_id>", methods=["GET", "POST"])
    def editar_modelo(template_id):
        state, template, toasts = _load_template(template_id)
        if template is None:
            _notify(toasts)
            return redirect(url_for("configuracoes_page"))

        state = configuracoes.reduce(state, configuracoes.OPEN_EDIT_MODAL, template)
        if request.method == "GET":
            return _modelo_form(state)

        title = request.form.get("title", "")
        content = request.form.get("content", "")
        if request.form.get("variavel"):
            state = configuracoes.reduce(state, configuracoes.SET_TITLE, title)
            state = configuracoes.reduce(state, configuracoes.SET_CONTENT, content)
            return _modelo_form(configuracoes.reduce(state, configuracoes.INSERT_VARIABLE, request.form["variavel"]))

        state, toasts = configuracoes.handle_edit(_client(), state, template_id, title, content)
        _notify(toasts)
        if state.is_template_modal_open:
            return _modelo_form(state)
        return redirect(url_for("configuracoes_page"))

    @app.route("/configuracoes/modelos/<template_id>/duplicar", methods=["POST"])
    def duplicar_modelo(template_id):
        state, template, toasts = _load_template(template_id)
        if template is not None:
            state, toasts = configuracoes.handle_duplicate(_client(), state, template)
        _notify(toasts)
        return redirect(url_for("configuracoes_page"))

    @app.route("/configuracoes/modelos/<template_id>/remover", methods=["POST"])
    def remover_modelo(template_id):
        _, toasts = configuracoes.handle_delete(_client(), ConfiguracoesState(), template_id)
        _notify(toasts)
        return redirect(url_for("configuracoes_page"))

    @app.route("/configuracoes/senha", methods=["GET", "POST"])
    def alterar_senha():
        if request.method == "GET":
            return _page("Alterar Senha", pages.SENHA_FORM)

        state = configuracoes.reduce(ConfiguracoesState(), configuracoes.OPEN_PASSWORD_MODAL)
        state = configuracoes.reduce(state, configuracoes.SET_NEW_PASSWORD, request.form.get("new_password", ""))
        state = configuracoes.reduce(state, configuracoes.SET_CONFIRM_PASSWORD, request.form.get("confirm_password", ""))
        state, toasts = configuracoes.handle_change_password(_client(), state)
        _notify(toasts)
        if state.is_password_modal_open:
            return _page("Alterar Senha", pages.SENHA_FORM)
        return redirect(url_for("configuracoes_page"))

    # --- Usuários ---
    @app.route("/usuarios", methods=["GET", "POST"])
    def usuarios_page():
        state = UsuariosState()
        if request.method == "POST":
            state = usuarios.reduce(state, usuarios.OPEN_MODAL)
            state = usuarios.reduce(state, usuarios.SET_FORM, request.form.to_dict())
            state, toasts = usuarios.handle_create_user(_client(), state, delay=current_app.config["USER_CREATE_DELAY"])
        else:
            state, toasts = usuarios.handle_fetch_users(_client(), state)
        _notify(toasts)
        return _page("Usuários", pages.USUARIOS, users=state.users)

    print("DEBUG: Aplicação web do painel configurada.")
    return app
