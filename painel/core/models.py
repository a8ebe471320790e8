# painel/core/models.py
from typing import Any, List, Optional
from datetime import date, datetime
from pydantic import BaseModel, field_validator

from painel.utils.text_utils import parse_valor

# Modelos das linhas vindas do Supabase. Toda resposta é convertida aqui,
# nunca usamos o dicionário cru fora de core/db.py.


def _parse_date(value: Any) -> Optional[date]:
    """Aceita 'AAAA-MM-DD' ou timestamp ISO e devolve só a data do calendário."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


class Template(BaseModel):
    """Modelo de mensagem (tabela message_templates)."""
    id: str
    title: str
    content: str = ""
    is_default: bool = False
    user_id: Optional[str] = None
    created_at: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        return str(v)

    @field_validator("title", "content", mode="before")
    @classmethod
    def _text_or_empty(cls, v):
        return "" if v is None else v

    @field_validator("is_default", mode="before")
    @classmethod
    def _default_false(cls, v):
        return bool(v)


class LedgerEntry(BaseModel):
    """Lançamento financeiro (tabela financeiro_lancamentos)."""
    id: str
    valor: Optional[float] = None  # None quando o valor não é numérico
    status: str = ""
    data_pagamento: Optional[date] = None
    data_vencimento: Optional[date] = None
    created_at: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        return str(v)

    @field_validator("valor", mode="before")
    @classmethod
    def _coerce_valor(cls, v):
        return parse_valor(v)

    @field_validator("status", mode="before")
    @classmethod
    def _status_str(cls, v):
        return "" if v is None else str(v)

    @field_validator("data_pagamento", "data_vencimento", mode="before")
    @classmethod
    def _coerce_date(cls, v):
        return _parse_date(v)


class UserProfile(BaseModel):
    """Perfil de usuário (tabela profiles)."""
    id: str
    email: str = ""
    full_name: Optional[str] = None
    created_at: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        return str(v)

    @field_validator("email", mode="before")
    @classmethod
    def _email_or_empty(cls, v):
        return "" if v is None else v


class MonthlyRevenue(BaseModel):
    """Um mês da série de receitas."""
    label: str  # "Jan/26", "Fev/26", ...
    total: float


class KpiSummary(BaseModel):
    """Indicadores do relatório financeiro. Recalculados a cada carga, nunca salvos."""
    total_receivable: float
    received_last_30_days: float
    overdue_count: int
    monthly_revenue: List[MonthlyRevenue]


class RemoteResult(BaseModel):
    """Par (data, error) devolvido por toda operação remota."""
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
