# painel/core/reports.py
"""
Indicadores do relatório financeiro.

Todas as funções são puras: recebem o retrato dos lançamentos carregados e a
data de referência, e não guardam nada entre chamadas.
"""
import datetime
from typing import Iterable, List, Optional

import pandas as pd

from painel.core.models import KpiSummary, LedgerEntry, MonthlyRevenue
from painel.utils.text_utils import month_label

STATUS_PAGO = "Pago"
STATUS_PENDENTE = "Pendente"
JANELA_RECEBIDOS_DIAS = 30

_COLUNAS = ["id", "valor", "status", "data_pagamento", "data_vencimento"]


def _to_frame(entries: Iterable[LedgerEntry]) -> pd.DataFrame:
    df = pd.DataFrame([e.model_dump(include=set(_COLUNAS)) for e in entries], columns=_COLUNAS)
    df['valor'] = pd.to_numeric(df['valor'], errors='coerce')
    df['data_pagamento'] = pd.to_datetime(df['data_pagamento'], errors='coerce')
    df['data_vencimento'] = pd.to_datetime(df['data_vencimento'], errors='coerce')
    return df


def total_receivable(entries: Iterable[LedgerEntry],
                     ignored_statuses: Optional[Iterable[str]] = None) -> float:
    """Soma dos valores de todos os lançamentos que ainda não estão pagos."""
    df = _to_frame(entries)
    ignored = list(ignored_statuses or [])
    a_receber = df[(df['status'] != STATUS_PAGO) & ~df['status'].isin(ignored)]
    return float(a_receber['valor'].sum())


def received_last_days(entries: Iterable[LedgerEntry],
                       today: Optional[datetime.date] = None,
                       days: int = JANELA_RECEBIDOS_DIAS) -> float:
    """Soma dos valores pagos com data de pagamento nos últimos `days` dias (limite incluído)."""
    today = today or datetime.date.today()
    limite = pd.Timestamp(today - datetime.timedelta(days=days))
    df = _to_frame(entries)
    recebidos = df[(df['status'] == STATUS_PAGO) & (df['data_pagamento'] >= limite)]
    return float(recebidos['valor'].sum())


def overdue_count(entries: Iterable[LedgerEntry], now: Optional[datetime.datetime] = None) -> int:
    """Quantidade de lançamentos pendentes cuja data de vencimento (00:00) já passou."""
    now = now or datetime.datetime.now()
    df = _to_frame(entries)
    atrasados = df[(df['status'] == STATUS_PENDENTE) & (df['data_vencimento'] < pd.Timestamp(now))]
    return int(len(atrasados))


def monthly_revenue(entries: Iterable[LedgerEntry],
                    today: Optional[datetime.date] = None) -> List[MonthlyRevenue]:
    """
    Receita paga agrupada por mês do ano corrente.

    Sempre devolve 12 meses (Jan a Dez), na ordem, com zero nos meses sem
    pagamentos. Lançamentos "Pago" sem data de pagamento ficam de fora.
    """
    today = today or datetime.date.today()
    ano = today.year
    df = _to_frame(entries)

    pagos = df[(df['status'] == STATUS_PAGO) & df['data_pagamento'].notna() & df['valor'].notna()]
    pagos = pagos[pagos['data_pagamento'].dt.year == ano]
    por_mes = pagos.groupby(pagos['data_pagamento'].dt.to_period('M'))['valor'].sum()

    meses_do_ano = pd.period_range(start=f"{ano}-01", periods=12, freq='M')
    por_mes = por_mes.reindex(meses_do_ano, fill_value=0.0)

    return [
        MonthlyRevenue(label=month_label(mes.year, mes.month), total=float(total))
        for mes, total in por_mes.items()
    ]


def compute_kpis(entries: List[LedgerEntry],
                 now: Optional[datetime.datetime] = None,
                 ignored_statuses: Optional[Iterable[str]] = None) -> KpiSummary:
    """Calcula todos os indicadores da tela de relatórios sobre o mesmo retrato."""
    now = now or datetime.datetime.now()
    return KpiSummary(
        total_receivable=total_receivable(entries, ignored_statuses),
        received_last_30_days=received_last_days(entries, now.date()),
        overdue_count=overdue_count(entries, now),
        monthly_revenue=monthly_revenue(entries, now.date()),
    )
