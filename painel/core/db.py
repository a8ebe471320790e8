# painel/core/db.py
import sys
from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
from supabase import create_client, Client

from painel import config
from painel.core.models import LedgerEntry, RemoteResult, Template, UserProfile

TEMPLATES_TABLE = "message_templates"
LEDGER_TABLE = "financeiro_lancamentos"
PROFILES_TABLE = "profiles"

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_supabase_client() -> Client:
    """Retorna uma instância do cliente Supabase, já autenticada se houver usuário configurado."""
    if not config.SUPABASE_URL or not config.SUPABASE_KEY:
        raise config.ConfigError("SUPABASE_URL e SUPABASE_KEY precisam estar definidos.")

    client = create_client(config.SUPABASE_URL, config.SUPABASE_KEY)
    if config.PAINEL_USER_EMAIL and config.PAINEL_USER_PASSWORD:
        client.auth.sign_in_with_password({
            "email": config.PAINEL_USER_EMAIL,
            "password": config.PAINEL_USER_PASSWORD,
        })
        print(f"DEBUG: Cliente Supabase autenticado como {config.PAINEL_USER_EMAIL}.")
    return client


def error_message(e: Exception) -> str:
    """Extrai a mensagem de erro do Supabase (APIError/AuthApiError têm .message)."""
    message = getattr(e, "message", None)
    return str(message) if message else str(e)


def _parse_rows(model: Type[ModelT], rows: Optional[list], table: str) -> List[ModelT]:
    """Converte as linhas cruas para o modelo, descartando as que não batem com o formato."""
    parsed = []
    for row in rows or []:
        try:
            parsed.append(model.model_validate(row))
        except ValidationError as e:
            print(f"Erro ao interpretar linha de '{table}': {e}", file=sys.stderr)
    return parsed


# --- Funções de Autenticação ---
def get_current_user_id(supabase_client: Client) -> RemoteResult:
    """Obtém o ID do usuário logado (None se não houver sessão)."""
    try:
        response = supabase_client.auth.get_user()
        user = getattr(response, "user", None) if response else None
        return RemoteResult(data=str(user.id) if user else None)
    except Exception as e:
        print(f"Erro ao obter usuário atual do Supabase: {e}")
        return RemoteResult(error=error_message(e))


def update_password(supabase_client: Client, new_password: str) -> RemoteResult:
    """Altera a senha do usuário logado."""
    try:
        supabase_client.auth.update_user({"password": new_password})
        return RemoteResult()
    except Exception as e:
        print(f"Erro ao alterar senha no Supabase: {e}")
        return RemoteResult(error=error_message(e))


# --- Funções para Modelos de Mensagem ---
def get_templates(supabase_client: Client) -> RemoteResult:
    """Obtém todos os modelos, do mais antigo para o mais novo."""
    try:
        response = supabase_client.table(TEMPLATES_TABLE).select('*').order('created_at', desc=False).execute()
        return RemoteResult(data=_parse_rows(Template, response.data, TEMPLATES_TABLE))
    except Exception as e:
        print(f"Erro ao obter modelos do Supabase: {e}")
        return RemoteResult(error=error_message(e))


def add_template(supabase_client: Client, title: str, content: str, user_id: Optional[str]) -> RemoteResult:
    """Adiciona um novo modelo (nunca padrão) e retorna o registro criado."""
    try:
        response = supabase_client.table(TEMPLATES_TABLE).insert({
            "title": title,
            "content": content,
            "user_id": user_id,
            "is_default": False,
        }).execute()
        created = _parse_rows(Template, response.data, TEMPLATES_TABLE)
        if not created:
            return RemoteResult(error="O Supabase não retornou o modelo criado.")
        return RemoteResult(data=created[0])
    except Exception as e:
        print(f"Erro ao adicionar modelo ao Supabase: {e}")
        return RemoteResult(error=error_message(e))


def update_template(supabase_client: Client, template_id: str, title: str, content: str) -> RemoteResult:
    """Atualiza apenas título e conteúdo de um modelo."""
    try:
        supabase_client.table(TEMPLATES_TABLE).update({'title': title, 'content': content}).eq('id', template_id).execute()
        return RemoteResult()
    except Exception as e:
        print(f"Erro ao atualizar modelo {template_id}: {e}")
        return RemoteResult(error=error_message(e))


def delete_template(supabase_client: Client, template_id: str) -> RemoteResult:
    """Remove um modelo pelo ID."""
    try:
        supabase_client.table(TEMPLATES_TABLE).delete().eq('id', template_id).execute()
        return RemoteResult()
    except Exception as e:
        print(f"Erro ao remover modelo {template_id}: {e}")
        return RemoteResult(error=error_message(e))


# --- Funções para Lançamentos Financeiros ---
def get_ledger_entries(supabase_client: Client) -> RemoteResult:
    """Obtém todos os lançamentos financeiros, do mais novo para o mais antigo."""
    try:
        response = supabase_client.table(LEDGER_TABLE).select('*').order('created_at', desc=True).execute()
        return RemoteResult(data=_parse_rows(LedgerEntry, response.data, LEDGER_TABLE))
    except Exception as e:
        print(f"Erro ao obter lançamentos do Supabase: {e}")
        return RemoteResult(error=error_message(e))


# --- Funções para Perfis ---
def get_profiles(supabase_client: Client) -> RemoteResult:
    """Obtém os perfis de usuário visíveis para o usuário logado."""
    try:
        response = supabase_client.table(PROFILES_TABLE).select('id, email, full_name, created_at').execute()
        return RemoteResult(data=_parse_rows(UserProfile, response.data, PROFILES_TABLE))
    except Exception as e:
        print(f"Erro ao obter perfis do Supabase: {e}")
        return RemoteResult(error=error_message(e))
