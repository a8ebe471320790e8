# painel/screens/configuracoes.py
"""
Tela de Configurações: modelos de mensagem (WhatsApp) e troca de senha.

O estado da tela é um `ConfiguracoesState` imutável. As mudanças locais passam
sempre por `reduce`; os handlers falam com o Supabase e devolvem o novo estado
junto com a lista de notificações a exibir. O estado local só muda depois que
a operação remota deu certo.
"""
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from supabase import Client

from painel.core import db
from painel.core.models import Template
from painel.core.notifications import Toast, error_toast, success_toast, unexpected_error_toast

# Variáveis que podem ser inseridas no conteúdo do modelo
VARIABLES = [
    "[nome_cliente]",
    "[id_processo]",
    "[status_processo]",
    "[valor_honorarios]",
    "[data_vencimento]",
    "[data_audiencia]",
    "[hora_audiencia]",
]

# Valores de exemplo usados apenas na pré-visualização
SAMPLE_VALUES = {
    "[nome_cliente]": "Maria Silva",
    "[id_processo]": "0001234-56.2024.8.26.0100",
    "[status_processo]": "Em andamento",
    "[valor_honorarios]": "R$ 1.500,00",
    "[data_vencimento]": "10/11/2026",
    "[data_audiencia]": "25/11/2026",
    "[hora_audiencia]": "14:30",
}

COPY_SUFFIX = " (Cópia)"

# --- Ações ---
TEMPLATES_LOADED = "templates_loaded"
OPEN_CREATE_MODAL = "open_create_modal"
OPEN_EDIT_MODAL = "open_edit_modal"
CLOSE_TEMPLATE_MODAL = "close_template_modal"
SET_TITLE = "set_title"
SET_CONTENT = "set_content"
INSERT_VARIABLE = "insert_variable"
TEMPLATE_CREATED = "template_created"
TEMPLATE_UPDATED = "template_updated"
TEMPLATE_REMOVED = "template_removed"
OPEN_PASSWORD_MODAL = "open_password_modal"
CLOSE_PASSWORD_MODAL = "close_password_modal"
SET_NEW_PASSWORD = "set_new_password"
SET_CONFIRM_PASSWORD = "set_confirm_password"
PASSWORD_CHANGED = "password_changed"


@dataclass(frozen=True)
class ConfiguracoesState:
    templates: Tuple[Template, ...] = ()
    current_user_id: Optional[str] = None
    selected_template: Optional[Template] = None
    title: str = ""
    content: str = ""
    is_template_modal_open: bool = False
    is_password_modal_open: bool = False
    new_password: str = ""
    confirm_password: str = ""

    def find_template(self, template_id: str) -> Optional[Template]:
        for template in self.templates:
            if template.id == template_id:
                return template
        return None


def reduce(state: ConfiguracoesState, action: str, payload: Any = None) -> ConfiguracoesState:
    """Aplica uma ação ao estado e devolve o novo estado. Não faz chamadas remotas."""
    if action == TEMPLATES_LOADED:
        user_id, templates = payload
        return replace(state, current_user_id=user_id, templates=tuple(templates))

    if action == OPEN_CREATE_MODAL:
        return replace(state, selected_template=None, title="", content="", is_template_modal_open=True)

    if action == OPEN_EDIT_MODAL:
        template: Template = payload
        return replace(state, selected_template=template, title=template.title,
                       content=template.content, is_template_modal_open=True)

    if action == CLOSE_TEMPLATE_MODAL:
        return replace(state, is_template_modal_open=False)

    if action == SET_TITLE:
        return replace(state, title=payload)

    if action == SET_CONTENT:
        return replace(state, content=payload)

    if action == INSERT_VARIABLE:
        # Sempre no final do texto, não na posição do cursor
        return replace(state, content=state.content + " " + payload)

    if action == TEMPLATE_CREATED:
        return replace(state, templates=(payload,) + state.templates)

    if action == TEMPLATE_UPDATED:
        template_id, title, content = payload
        templates = tuple(
            t.model_copy(update={"title": title, "content": content}) if t.id == template_id else t
            for t in state.templates
        )
        return replace(state, templates=templates)

    if action == TEMPLATE_REMOVED:
        return replace(state, templates=tuple(t for t in state.templates if t.id != payload))

    if action == OPEN_PASSWORD_MODAL:
        return replace(state, is_password_modal_open=True)

    if action == CLOSE_PASSWORD_MODAL:
        return replace(state, is_password_modal_open=False)

    if action == SET_NEW_PASSWORD:
        return replace(state, new_password=payload)

    if action == SET_CONFIRM_PASSWORD:
        return replace(state, confirm_password=payload)

    if action == PASSWORD_CHANGED:
        return replace(state, new_password="", confirm_password="", is_password_modal_open=False)

    raise ValueError(f"Ação desconhecida: {action}")


def render_preview(content: str, values: Optional[Dict[str, str]] = None) -> str:
    """Troca as variáveis conhecidas por valores de exemplo. O modelo salvo não é alterado."""
    values = SAMPLE_VALUES if values is None else values
    for variable, value in values.items():
        content = content.replace(variable, value)
    return content


def _acting_user_id(supabase_client: Client, state: ConfiguracoesState) -> Optional[str]:
    result = db.get_current_user_id(supabase_client)
    return result.data if result.ok and result.data else state.current_user_id


# --- Handlers ---
def handle_load(supabase_client: Client, state: ConfiguracoesState) -> Tuple[ConfiguracoesState, List[Toast]]:
    """Carrega o usuário atual e os modelos."""
    try:
        user = db.get_current_user_id(supabase_client)
        result = db.get_templates(supabase_client)
        if not result.ok:
            return replace(state, current_user_id=user.data), [error_toast("Não foi possível carregar modelos.")]
        return reduce(state, TEMPLATES_LOADED, (user.data, result.data)), []
    except Exception as e:
        print(f"Erro inesperado ao carregar modelos: {e}")
        return state, [unexpected_error_toast("Não foi possível carregar modelos.")]


def handle_save_template(supabase_client: Client, state: ConfiguracoesState) -> Tuple[ConfiguracoesState, List[Toast]]:
    """Salva o formulário do modal: edita o modelo selecionado ou cria um novo."""
    if not state.title.strip() or not state.content.strip():
        return state, [error_toast("Título e conteúdo obrigatórios.")]

    try:
        # EDITAR
        if state.selected_template:
            template_id = state.selected_template.id
            result = db.update_template(supabase_client, template_id, state.title, state.content)
            if not result.ok:
                return state, [error_toast("Falha ao editar modelo.")]
            state = reduce(state, TEMPLATE_UPDATED, (template_id, state.title, state.content))
            state = reduce(state, CLOSE_TEMPLATE_MODAL)
            return state, [success_toast("Atualizado!", "Modelo editado com sucesso.")]

        # CRIAR NOVO
        user_id = _acting_user_id(supabase_client, state)
        result = db.add_template(supabase_client, state.title, state.content, user_id)
        if not result.ok:
            return state, [error_toast("Falha ao criar modelo.")]
        state = reduce(state, TEMPLATE_CREATED, result.data)
        state = reduce(state, CLOSE_TEMPLATE_MODAL)
        return state, [success_toast("Criado!", "Novo modelo salvo com sucesso.")]
    except Exception as e:
        print(f"Erro inesperado ao salvar modelo: {e}")
        return state, [unexpected_error_toast()]


def handle_create(supabase_client: Client, state: ConfiguracoesState,
                  title: str, content: str) -> Tuple[ConfiguracoesState, List[Toast]]:
    """Cria um modelo novo com o título e conteúdo informados."""
    state = reduce(state, OPEN_CREATE_MODAL)
    state = reduce(state, SET_TITLE, title)
    state = reduce(state, SET_CONTENT, content)
    return handle_save_template(supabase_client, state)


def handle_edit(supabase_client: Client, state: ConfiguracoesState, template_id: str,
                title: str, content: str) -> Tuple[ConfiguracoesState, List[Toast]]:
    """Edita título e conteúdo de um modelo já carregado."""
    template = state.find_template(template_id)
    if template is None:
        return state, [error_toast("Modelo não encontrado.")]
    state = reduce(state, OPEN_EDIT_MODAL, template)
    state = reduce(state, SET_TITLE, title)
    state = reduce(state, SET_CONTENT, content)
    return handle_save_template(supabase_client, state)


def handle_duplicate(supabase_client: Client, state: ConfiguracoesState,
                     template: Template) -> Tuple[ConfiguracoesState, List[Toast]]:
    """Cria uma cópia independente do modelo, em nome do usuário atual."""
    try:
        user_id = _acting_user_id(supabase_client, state)
        result = db.add_template(supabase_client, template.title + COPY_SUFFIX, template.content, user_id)
        if not result.ok:
            return state, [error_toast("Falha ao duplicar.")]
        return reduce(state, TEMPLATE_CREATED, result.data), [success_toast("Duplicado!", "Modelo copiado com sucesso.")]
    except Exception as e:
        print(f"Erro inesperado ao duplicar modelo {template.id}: {e}")
        return state, [unexpected_error_toast()]


def handle_delete(supabase_client: Client, state: ConfiguracoesState,
                  template_id: str) -> Tuple[ConfiguracoesState, List[Toast]]:
    """Remove o modelo. A lista local só muda se o Supabase confirmar a remoção."""
    try:
        result = db.delete_template(supabase_client, template_id)
        if not result.ok:
            return state, [error_toast("Falha ao remover modelo.")]
        return reduce(state, TEMPLATE_REMOVED, template_id), [success_toast("Removido!", "Modelo apagado com sucesso.")]
    except Exception as e:
        print(f"Erro inesperado ao remover modelo {template_id}: {e}")
        return state, [unexpected_error_toast()]


def handle_change_password(supabase_client: Client, state: ConfiguracoesState) -> Tuple[ConfiguracoesState, List[Toast]]:
    """Valida os campos de senha e envia a nova senha ao Supabase Auth."""
    if not state.new_password or not state.confirm_password:
        return state, [error_toast("Preencha todos os campos.")]

    if state.new_password != state.confirm_password:
        return state, [error_toast("As senhas não coincidem.")]

    try:
        result = db.update_password(supabase_client, state.new_password)
        if not result.ok:
            return state, [error_toast(result.error)]
        return reduce(state, PASSWORD_CHANGED), [success_toast("Sucesso!", "Senha alterada com sucesso.")]
    except Exception as e:
        print(f"Erro inesperado ao alterar senha: {e}")
        return state, [unexpected_error_toast()]
