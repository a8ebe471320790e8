# painel/screens/usuarios.py
"""
Tela de Usuários do Sistema.

A listagem lê a tabela 'profiles' (protegida por RLS no Supabase).

O cadastro NÃO é feito aqui: criar usuários exige `auth.admin.create_user`
com a service_role_key, que nunca deve ficar exposta neste painel. O correto
é uma Edge Function ou API de backend. Por enquanto o cadastro só avisa,
espera um pouco e simula o sucesso, sem gravar nada.
"""
import time
from dataclasses import dataclass, replace
from typing import Any, Callable, List, Tuple

from supabase import Client

from painel.core import db
from painel.core.models import UserProfile
from painel.core.notifications import Toast, error_toast, success_toast, unexpected_error_toast, warning_toast

SIMULATED_CREATE_DELAY = 1.5  # segundos

# --- Ações ---
FETCH_STARTED = "fetch_started"
USERS_LOADED = "users_loaded"
FETCH_FAILED = "fetch_failed"
OPEN_MODAL = "open_modal"
CLOSE_MODAL = "close_modal"
SET_FORM = "set_form"
CREATE_STARTED = "create_started"
CREATE_FINISHED = "create_finished"
FORM_RESET = "form_reset"


@dataclass(frozen=True)
class UsuariosState:
    users: Tuple[UserProfile, ...] = ()
    loading: bool = True
    is_modal_open: bool = False
    new_email: str = ""
    new_password: str = ""
    new_full_name: str = ""
    creating_user: bool = False


def reduce(state: UsuariosState, action: str, payload: Any = None) -> UsuariosState:
    if action == FETCH_STARTED:
        return replace(state, loading=True)
    if action == USERS_LOADED:
        return replace(state, users=tuple(payload), loading=False)
    if action == FETCH_FAILED:
        return replace(state, users=(), loading=False)
    if action == OPEN_MODAL:
        return replace(state, is_modal_open=True)
    if action == CLOSE_MODAL:
        return replace(state, is_modal_open=False)
    if action == SET_FORM:
        return replace(state, **{k: v for k, v in payload.items() if k in ("new_email", "new_password", "new_full_name")})
    if action == CREATE_STARTED:
        return replace(state, creating_user=True)
    if action == CREATE_FINISHED:
        return replace(state, creating_user=False)
    if action == FORM_RESET:
        return replace(state, is_modal_open=False, new_email="", new_password="", new_full_name="")
    raise ValueError(f"Ação desconhecida: {action}")


def handle_fetch_users(supabase_client: Client, state: UsuariosState) -> Tuple[UsuariosState, List[Toast]]:
    """Busca os perfis. Em qualquer falha a lista fica vazia; `loading` sempre termina False."""
    state = reduce(state, FETCH_STARTED)
    try:
        result = db.get_profiles(supabase_client)
        if not result.ok:
            return reduce(state, FETCH_FAILED), [error_toast(result.error, title="Erro ao buscar usuários")]
        return reduce(state, USERS_LOADED, result.data), []
    except Exception as e:
        print(f"Erro inesperado ao buscar usuários: {e}")
        return reduce(state, FETCH_FAILED), [unexpected_error_toast("Não foi possível carregar os usuários.")]


def handle_create_user(supabase_client: Client, state: UsuariosState,
                       delay: float = SIMULATED_CREATE_DELAY,
                       sleep: Callable[[float], None] = time.sleep) -> Tuple[UsuariosState, List[Toast]]:
    """Cadastro simulado: avisa que falta o backend, espera `delay` e recarrega a lista."""
    state = reduce(state, CREATE_STARTED)
    toasts = [warning_toast(
        "Funcionalidade de Cadastro (Backend Necessário)",
        "Para criar um usuário de forma segura, implemente uma Edge Function do Supabase ou uma API "
        "de backend que chame 'auth.admin.create_user()' com a service_role_key.",
    )]
    try:
        sleep(delay)
        toasts.append(success_toast(
            "Usuário Criado (Simulado)",
            f"Um pedido de criação para {state.new_email} foi enviado. Verifique seu backend.",
        ))
        state = reduce(state, FORM_RESET)
        state, fetch_toasts = handle_fetch_users(supabase_client, state)
        toasts.extend(fetch_toasts)
    except Exception as e:
        print(f"Erro ao criar usuário: {e}")
        toasts.append(error_toast(str(e) or "Ocorreu um erro inesperado.", title="Erro ao criar usuário"))
    return reduce(state, CREATE_FINISHED), toasts
