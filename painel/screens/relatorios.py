# painel/screens/relatorios.py
"""Tela de Relatórios Financeiros: carrega os lançamentos uma vez e calcula os indicadores."""
import datetime
from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Optional, Tuple

from supabase import Client

from painel.core import db, reports
from painel.core.models import KpiSummary, LedgerEntry
from painel.core.notifications import Toast, error_toast, unexpected_error_toast

# --- Ações ---
ENTRIES_LOADED = "entries_loaded"


@dataclass(frozen=True)
class RelatoriosState:
    lancamentos: Tuple[LedgerEntry, ...] = ()
    kpis: Optional[KpiSummary] = None


def reduce(state: RelatoriosState, action: str, payload: Any = None, *,
           now: Optional[datetime.datetime] = None,
           ignored_statuses: Optional[Iterable[str]] = None) -> RelatoriosState:
    if action == ENTRIES_LOADED:
        lancamentos = tuple(payload)
        kpis = reports.compute_kpis(list(lancamentos), now=now, ignored_statuses=ignored_statuses)
        return replace(state, lancamentos=lancamentos, kpis=kpis)
    raise ValueError(f"Ação desconhecida: {action}")


def initial_state(now: Optional[datetime.datetime] = None) -> RelatoriosState:
    """Estado antes da carga: indicadores zerados e 12 meses vazios."""
    return reduce(RelatoriosState(), ENTRIES_LOADED, [], now=now)


def handle_load(supabase_client: Client, state: RelatoriosState,
                now: Optional[datetime.datetime] = None,
                ignored_statuses: Optional[Iterable[str]] = None) -> Tuple[RelatoriosState, List[Toast]]:
    """Busca todos os lançamentos e recalcula os indicadores. Em caso de erro, mantém o estado anterior."""
    try:
        result = db.get_ledger_entries(supabase_client)
        if not result.ok:
            return state, [error_toast("Não foi possível carregar os lançamentos.")]
        return reduce(state, ENTRIES_LOADED, result.data, now=now, ignored_statuses=ignored_statuses), []
    except Exception as e:
        print(f"Erro inesperado ao carregar relatórios: {e}")
        return state, [unexpected_error_toast("Não foi possível carregar os relatórios.")]
