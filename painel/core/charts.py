# painel/core/charts.py
import io
from typing import List

import matplotlib
matplotlib.use('Agg')  # Servidor web, sem interface gráfica
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from painel.core.models import MonthlyRevenue
from painel.utils.text_utils import format_brl

# Configurações globais para os gráficos (cores, fontes, etc.)
plt.style.use('seaborn-v0_8-darkgrid')
plt.rcParams['font.family'] = 'sans-serif'
plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14

# Cores da barra de receita (verde claro em cima, borda verde escura)
COLORS = {
    'Receita': '#4ade80',
    'Borda': '#166534',
    'Eixo': '#888888',
}

SEM_DADOS_MSG = "Nenhuma receita registrada ainda."


def brl_tick_formatter() -> mticker.FuncFormatter:
    """Formatador do eixo Y em reais."""
    return mticker.FuncFormatter(lambda value, _pos: format_brl(value))


def generate_revenue_chart(series: List[MonthlyRevenue]) -> io.BytesIO:
    """Gera o gráfico de barras 'Receita Mensal' a partir da série de 12 meses."""
    labels = [mes.label for mes in series]
    totals = [mes.total for mes in series]

    fig, ax = plt.subplots(figsize=(12, 6))
    bars = ax.bar(labels, totals, color=COLORS['Receita'], edgecolor=COLORS['Borda'], linewidth=1.2, label='Receita')

    ax.set_title('Receita Mensal', fontsize=16, fontweight='bold')
    ax.set_xlabel('Receitas pagas agrupadas por mês.', fontsize=10, color=COLORS['Eixo'])
    ax.tick_params(axis='both', colors=COLORS['Eixo'], labelsize=10)
    ax.grid(axis='x', visible=False)
    ax.grid(axis='y', linestyle='--', alpha=0.4)
    ax.yaxis.set_major_formatter(brl_tick_formatter())

    if any(total > 0 for total in totals):
        ax.bar_label(bars, labels=[format_brl(t) if t > 0 else "" for t in totals], fontsize=8, padding=3)
    else:
        ax.set_ylim(0, 1)
        ax.text(0.5, 0.5, SEM_DADOS_MSG, transform=ax.transAxes, ha='center', va='center',
                fontsize=12, color=COLORS['Eixo'])

    fig.tight_layout()

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=150)
    buf.seek(0)
    plt.close(fig)
    return buf
